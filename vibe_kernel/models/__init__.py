"""Vibe Kernel data models."""

from vibe_kernel.models.config import RewardConfig
from vibe_kernel.models.content import InteractionStats, Vibe
from vibe_kernel.models.identity import ANONYMOUS_IDENTITY, Identity
from vibe_kernel.models.leaderboard import Leaderboard, LeaderboardEntry
from vibe_kernel.models.snapshot import PlatformSnapshot

__all__ = [
    "ANONYMOUS_IDENTITY",
    "Identity",
    "InteractionStats",
    "Leaderboard",
    "LeaderboardEntry",
    "PlatformSnapshot",
    "RewardConfig",
    "Vibe",
]
