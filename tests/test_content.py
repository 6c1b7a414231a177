"""Tests for the Content Store."""

import pytest

from vibe_kernel.content.store import ContentStore
from vibe_kernel.errors import ItemNotFoundError
from vibe_kernel.models.content import Vibe


def _make_vibe(creator: str, timestamp: int, vibe_id: str, content: str = "vibe") -> Vibe:
    return Vibe(id=vibe_id, content=content, timestamp=timestamp, creator=creator)


class TestContentStore:
    def setup_method(self):
        self.store = ContentStore()

    def _mint(self, creator: str, timestamp: int) -> Vibe:
        vibe_id = self.store.next_item_id(creator, timestamp)
        vibe = _make_vibe(creator, timestamp, vibe_id)
        self.store.append(creator, vibe)
        return vibe

    def test_first_id_is_creator_and_timestamp(self):
        assert self.store.next_item_id("alice", 1640995200) == "alice-1640995200"

    def test_same_second_mints_get_distinct_ids(self):
        ids = [self._mint("alice", 1640995200).id for _ in range(3)]
        assert ids == [
            "alice-1640995200",
            "alice-1640995200-1",
            "alice-1640995200-2",
        ]
        assert len(set(ids)) == 3

    def test_next_second_restarts_sequence(self):
        self._mint("alice", 1)
        assert self.store.next_item_id("alice", 2) == "alice-2"

    def test_ids_unique_across_creators(self):
        # "a-1" at second 5 would otherwise equal "a" at second 1, seq 5
        for _ in range(6):
            self._mint("a", 1)
        vibe = self._mint("a-1", 5)
        assert vibe.id != "a-1-5"
        assert self.store.find_item("a-1-5").creator == "a"

    def test_duplicate_append_rejected(self):
        self.store.append("alice", _make_vibe("alice", 1, "dup"))
        with pytest.raises(ValueError):
            self.store.append("bob", _make_vibe("bob", 1, "dup"))

    def test_find_item_across_creators(self):
        v1 = self._mint("alice", 1)
        v2 = self._mint("bob", 1)
        assert self.store.find_item(v2.id).creator == "bob"
        assert self.store.owner_of(v1.id) == "alice"

    def test_find_unknown_item(self):
        with pytest.raises(ItemNotFoundError) as exc_info:
            self.store.find_item("nope")
        assert exc_info.value.vibe_id == "nope"
        assert exc_info.value.code == "ITEM_NOT_FOUND"

    def test_list_by_creator_in_mint_order(self):
        first = self._mint("alice", 1)
        second = self._mint("alice", 2)
        self._mint("bob", 1)
        assert [v.id for v in self.store.list_by_creator("alice")] == [first.id, second.id]
        assert self.store.list_by_creator("nobody") == []

    def test_list_by_creator_is_restartable(self):
        self._mint("alice", 1)
        listing = self.store.list_by_creator("alice")
        listing.clear()
        assert len(self.store.list_by_creator("alice")) == 1

    def test_update_stats_mirrors_counts(self):
        vibe = self._mint("alice", 1)
        self.store.update_stats(vibe.id, likes=4, shares=2)
        stored = self.store.find_item(vibe.id)
        assert (stored.likes, stored.shares) == (4, 2)

    def test_remove_creator(self):
        vibe = self._mint("alice", 1)
        self._mint("alice", 2)
        assert self.store.remove_creator("alice") == 2
        assert not self.store.contains(vibe.id)
        assert self.store.list_by_creator("alice") == []

    def test_removed_ids_not_reissued_in_same_second(self):
        old = self._mint("alice", 1)
        self.store.remove_creator("alice")
        new = self._mint("alice", 1)
        assert new.id != old.id
