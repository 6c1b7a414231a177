"""Shared platform fixtures: a context-bound caller and a frozen clock."""

import pytest

from vibe_kernel.collaborators.providers import ContextIdentityProvider, ManualClock
from vibe_kernel.models.config import RewardConfig
from vibe_kernel.platform.orchestrator import VibePlatform

MOCK_TIME = 1640995200


@pytest.fixture
def mock_time():
    return MOCK_TIME


@pytest.fixture
def make_platform(mock_time):
    """Factory for platforms with RewardConfig overrides, e.g. make_platform(initial_balance=4)."""

    def _make(**config) -> VibePlatform:
        return VibePlatform(
            identity_provider=ContextIdentityProvider(),
            clock=ManualClock(mock_time),
            reward_config=RewardConfig(**config),
        )

    return _make


@pytest.fixture
def platform(make_platform):
    return make_platform()
