"""
Interaction Tracker — per-vibe engagement counts and per-identity dedup sets.

Behavioral Contract:
- A given (identity, vibe) like or share increments the count at most once
- The dedup set is checked and extended before the count is touched
- Repeating an engagement returns the current count and changes nothing
- Stats for unknown vibes read as zeros
"""

import logging
from typing import Dict, Iterator, Set, Tuple

from vibe_kernel.models.content import InteractionStats
from vibe_kernel.observability import call_fields

logger = logging.getLogger(__name__)


class InteractionTracker:
    """In-memory engagement tracker."""

    def __init__(self):
        self._stats: Dict[str, InteractionStats] = {}
        self._likes: Dict[str, Set[str]] = {}
        self._shares: Dict[str, Set[str]] = {}

    def init_stats(self, vibe_id: str) -> None:
        self._stats[vibe_id] = InteractionStats(likes=0, shares=0)

    def has_liked(self, identity: str, vibe_id: str) -> bool:
        return vibe_id in self._likes.get(identity, ())

    def has_shared(self, identity: str, vibe_id: str) -> bool:
        return vibe_id in self._shares.get(identity, ())

    def stats_of(self, vibe_id: str) -> InteractionStats:
        stats = self._stats.get(vibe_id)
        if stats is None:
            return InteractionStats()
        return stats.model_copy()

    def record_like(self, identity: str, vibe_id: str) -> int:
        """Count a like once per identity; returns the vibe's like count."""
        liked = self._likes.setdefault(identity, set())
        if vibe_id in liked:
            return self.stats_of(vibe_id).likes
        liked.add(vibe_id)
        stats = self._stats.setdefault(vibe_id, InteractionStats())
        stats.likes += 1
        logger.debug("Recorded like", extra=call_fields(caller=identity, vibe_id=vibe_id))
        return stats.likes

    def record_share(self, identity: str, vibe_id: str) -> int:
        """Count a share once per identity; returns the vibe's share count."""
        shared = self._shares.setdefault(identity, set())
        if vibe_id in shared:
            return self.stats_of(vibe_id).shares
        shared.add(vibe_id)
        stats = self._stats.setdefault(vibe_id, InteractionStats())
        stats.shares += 1
        logger.debug("Recorded share", extra=call_fields(caller=identity, vibe_id=vibe_id))
        return stats.shares

    def clear_identity(self, identity: str) -> None:
        """Forget what an identity liked and shared. Counts are kept."""
        self._likes.pop(identity, None)
        self._shares.pop(identity, None)

    def all_stats(self) -> Iterator[Tuple[str, InteractionStats]]:
        """Stats in first-seen order."""
        return iter(list(self._stats.items()))

    def liked_by(self, identity: str) -> Set[str]:
        return set(self._likes.get(identity, ()))

    def shared_by(self, identity: str) -> Set[str]:
        return set(self._shares.get(identity, ()))

    def identities(self) -> Set[str]:
        return set(self._likes) | set(self._shares)
