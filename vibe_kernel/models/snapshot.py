"""Platform Snapshot — serializable dump of the whole in-memory state."""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel

from vibe_kernel.models.content import InteractionStats, Vibe
from vibe_kernel.models.leaderboard import Leaderboard


class PlatformSnapshot(BaseModel):
    """Point-in-time copy of every store. Read-only; never fed back into the core."""

    vibes: Dict[str, List[Vibe]] = {}               # creator -> vibes in mint order
    balances: Dict[str, int] = {}
    reputation: Dict[str, float] = {}
    interactions: Dict[str, InteractionStats] = {}
    likes_by_identity: Dict[str, List[str]] = {}
    shares_by_identity: Dict[str, List[str]] = {}
    leaderboard: Leaderboard
    taken_at: datetime
