"""
Content Store — minted vibes, indexed by creator.

Behavioral Contract:
- Each creator's vibes are kept in mint order
- Vibe ids are unique platform-wide; next_item_id() never returns an id in use
- Lookups by id go through a global index, so any creator's vibe is found
"""

import logging
from typing import Dict, List

from vibe_kernel.errors import ItemNotFoundError
from vibe_kernel.models.content import Vibe
from vibe_kernel.observability import call_fields

logger = logging.getLogger(__name__)


class ContentStore:
    """In-memory content store."""

    def __init__(self):
        self._by_creator: Dict[str, List[Vibe]] = {}
        self._index: Dict[str, Vibe] = {}
        # (creator, timestamp) -> mints issued in that second; survives
        # remove_creator so a reset account never reissues an old id
        self._mints_per_second: Dict[tuple, int] = {}

    def next_item_id(self, creator: str, timestamp: int) -> str:
        """
        Id for a vibe minted by creator at timestamp.

        The first mint in a second gets "{creator}-{timestamp}"; further mints
        in the same second get a "-{n}" suffix. Does not reserve the id.
        """
        seq = self._mints_per_second.get((creator, timestamp), 0)
        while True:
            candidate = f"{creator}-{timestamp}" if seq == 0 else f"{creator}-{timestamp}-{seq}"
            if candidate not in self._index:
                return candidate
            seq += 1

    def append(self, creator: str, vibe: Vibe) -> None:
        if vibe.id in self._index:
            raise ValueError(f"Vibe id {vibe.id} is already in use")
        self._by_creator.setdefault(creator, []).append(vibe)
        self._index[vibe.id] = vibe
        key = (creator, vibe.timestamp)
        self._mints_per_second[key] = self._mints_per_second.get(key, 0) + 1
        logger.debug("Stored vibe", extra=call_fields(caller=creator, vibe_id=vibe.id))

    def contains(self, vibe_id: str) -> bool:
        return vibe_id in self._index

    def find_item(self, vibe_id: str) -> Vibe:
        vibe = self._index.get(vibe_id)
        if vibe is None:
            raise ItemNotFoundError(vibe_id)
        return vibe

    def owner_of(self, vibe_id: str) -> str:
        return self.find_item(vibe_id).creator

    def list_by_creator(self, creator: str) -> List[Vibe]:
        """A creator's vibes in mint order (a fresh list each call)."""
        return list(self._by_creator.get(creator, []))

    def update_stats(self, vibe_id: str, likes: int, shares: int) -> None:
        """Mirror engagement counters onto the stored vibe."""
        vibe = self.find_item(vibe_id)
        vibe.likes = likes
        vibe.shares = shares

    def remove_creator(self, creator: str) -> int:
        """Drop every vibe a creator minted; returns how many were removed."""
        vibes = self._by_creator.pop(creator, [])
        for vibe in vibes:
            self._index.pop(vibe.id, None)
        return len(vibes)

    def creators(self) -> Dict[str, List[Vibe]]:
        return {c: list(v) for c, v in self._by_creator.items()}
