"""Platform factory — wires settings, logging and collaborators into a VibePlatform."""

import logging
from typing import Optional

from vibe_kernel.collaborators.providers import Clock, ContextIdentityProvider, IdentityProvider
from vibe_kernel.config import Settings, get_settings
from vibe_kernel.observability import call_fields, setup_logging
from vibe_kernel.platform.orchestrator import VibePlatform

logger = logging.getLogger(__name__)


def create_platform(
    settings: Optional[Settings] = None,
    identity_provider: Optional[IdentityProvider] = None,
    clock: Optional[Clock] = None,
    configure_logging: bool = False,
) -> VibePlatform:
    """Create a platform with default-initialized stores."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)

    if identity_provider is None:
        identity_provider = ContextIdentityProvider(default=settings.anonymous_identity)

    platform = VibePlatform(
        identity_provider=identity_provider,
        clock=clock,
        reward_config=settings.reward_config(),
        leaderboard_size=settings.leaderboard_size,
        anonymous_identity=settings.anonymous_identity,
    )
    logger.info(
        "Vibe platform initialized",
        extra=call_fields(operation="create_platform", amount=settings.initial_balance),
    )
    return platform
