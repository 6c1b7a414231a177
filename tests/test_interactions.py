"""Tests for the Interaction Tracker."""

from vibe_kernel.interactions.tracker import InteractionTracker


class TestInteractionTracker:
    def setup_method(self):
        self.tracker = InteractionTracker()
        self.tracker.init_stats("v1")

    def test_unknown_vibe_reads_zeros(self):
        stats = self.tracker.stats_of("unknown")
        assert (stats.likes, stats.shares) == (0, 0)

    def test_like_counts_once_per_identity(self):
        assert self.tracker.record_like("bob", "v1") == 1
        assert self.tracker.record_like("bob", "v1") == 1
        assert self.tracker.record_like("carol", "v1") == 2
        assert self.tracker.stats_of("v1").likes == 2
        assert self.tracker.has_liked("bob", "v1")
        assert not self.tracker.has_liked("dave", "v1")

    def test_share_counts_once_per_identity(self):
        assert self.tracker.record_share("bob", "v1") == 1
        assert self.tracker.record_share("bob", "v1") == 1
        assert self.tracker.stats_of("v1").shares == 1
        assert self.tracker.has_shared("bob", "v1")

    def test_like_and_share_are_independent(self):
        self.tracker.record_like("bob", "v1")
        assert not self.tracker.has_shared("bob", "v1")
        assert self.tracker.record_share("bob", "v1") == 1
        stats = self.tracker.stats_of("v1")
        assert (stats.likes, stats.shares) == (1, 1)

    def test_stats_of_returns_copy(self):
        self.tracker.stats_of("v1").likes = 99
        assert self.tracker.stats_of("v1").likes == 0

    def test_clear_identity_keeps_counts(self):
        self.tracker.record_like("bob", "v1")
        self.tracker.record_share("bob", "v1")
        self.tracker.clear_identity("bob")
        assert not self.tracker.has_liked("bob", "v1")
        assert not self.tracker.has_shared("bob", "v1")
        stats = self.tracker.stats_of("v1")
        assert (stats.likes, stats.shares) == (1, 1)

    def test_all_stats_in_first_seen_order(self):
        self.tracker.init_stats("v2")
        self.tracker.record_like("bob", "v3")
        assert [vid for vid, _ in self.tracker.all_stats()] == ["v1", "v2", "v3"]

    def test_liked_and_shared_sets(self):
        self.tracker.record_like("bob", "v1")
        self.tracker.record_share("carol", "v1")
        assert self.tracker.liked_by("bob") == {"v1"}
        assert self.tracker.shared_by("bob") == set()
        assert self.tracker.identities() == {"bob", "carol"}
