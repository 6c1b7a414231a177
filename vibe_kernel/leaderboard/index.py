"""
Leaderboard Index — top-N views rebuilt from the Ledger and Interaction Tracker.

Behavioral Contract:
- rebuild() recomputes all three lists from scratch; nothing is patched in place
- Each list holds at most `size` entries, sorted non-increasing by score
- Equal scores keep store insertion order (stable sort)
- The anonymous identity never appears among the top creators
"""

from typing import Iterable, List, Tuple

from vibe_kernel.interactions.tracker import InteractionTracker
from vibe_kernel.ledger.store import LedgerStore
from vibe_kernel.models.identity import ANONYMOUS_IDENTITY
from vibe_kernel.models.leaderboard import Leaderboard, LeaderboardEntry

DEFAULT_SIZE = 10


def top_n(pairs: Iterable[Tuple[str, int]], size: int) -> List[LeaderboardEntry]:
    """Highest-scoring `size` pairs, descending, ties in input order."""
    ranked = sorted(pairs, key=lambda p: p[1], reverse=True)
    return [LeaderboardEntry(key=k, score=s) for k, s in ranked[:size]]


class LeaderboardIndex:
    """Holds the latest rebuilt Leaderboard."""

    def __init__(self, size: int = DEFAULT_SIZE, anonymous_identity: str = ANONYMOUS_IDENTITY):
        self.size = size
        self.anonymous_identity = anonymous_identity
        self._board = Leaderboard()

    def rebuild(self, ledger: LedgerStore, tracker: InteractionTracker) -> Leaderboard:
        """Full rebuild over every stored balance and every tracked vibe."""
        stats = list(tracker.all_stats())
        self._board = Leaderboard(
            top_creators=top_n(
                ((who, bal) for who, bal in ledger.balances() if who != self.anonymous_identity),
                self.size,
            ),
            most_liked=top_n(((vid, s.likes) for vid, s in stats), self.size),
            most_shared=top_n(((vid, s.shares) for vid, s in stats), self.size),
        )
        return self.current()

    def current(self) -> Leaderboard:
        return self._board.model_copy(deep=True)
