"""Tests for core data models."""

from datetime import datetime

import pytest

from vibe_kernel.models import (
    ANONYMOUS_IDENTITY,
    InteractionStats,
    Leaderboard,
    LeaderboardEntry,
    PlatformSnapshot,
    RewardConfig,
    Vibe,
)


class TestVibe:
    def test_create_vibe_with_zero_counts(self):
        vibe = Vibe(
            id="alice-1640995200",
            content="First vibe",
            timestamp=1640995200,
            creator="alice",
        )
        assert vibe.likes == 0
        assert vibe.shares == 0
        assert vibe.creator == "alice"

    def test_negative_counts_rejected(self):
        with pytest.raises(Exception):
            Vibe(id="x", content="c", timestamp=1, creator="alice", likes=-1)

    def test_serialization_roundtrip(self):
        vibe = Vibe(id="a-1", content="hello", timestamp=1, creator="a", likes=3)
        restored = Vibe.model_validate_json(vibe.model_dump_json())
        assert restored == vibe


class TestInteractionStats:
    def test_defaults_to_zero(self):
        stats = InteractionStats()
        assert (stats.likes, stats.shares) == (0, 0)


class TestLeaderboard:
    def test_empty_board(self):
        board = Leaderboard()
        assert board.top_creators == []
        assert board.most_liked == []
        assert board.most_shared == []

    def test_entries_serialize(self):
        board = Leaderboard(most_liked=[LeaderboardEntry(key="a-1", score=4)])
        data = board.model_dump(mode="json")
        assert data["most_liked"] == [{"key": "a-1", "score": 4}]


class TestRewardConfig:
    def test_defaults_match_platform_economy(self):
        config = RewardConfig()
        assert config.initial_balance == 100
        assert config.mint_cost == 5
        assert config.like_reward_user == 1
        assert config.like_reward_creator == 2
        assert config.share_reward_user == 2
        assert config.share_reward_creator == 3
        assert config.staking_reward == 5

    def test_negative_constants_rejected(self):
        with pytest.raises(Exception):
            RewardConfig(mint_cost=-1)
        with pytest.raises(Exception):
            RewardConfig(like_creator_reputation_delta=-0.05)


class TestPlatformSnapshot:
    def test_minimal_snapshot(self):
        snap = PlatformSnapshot(leaderboard=Leaderboard(), taken_at=datetime.utcnow())
        assert snap.balances == {}
        assert snap.vibes == {}


def test_anonymous_identity_constant():
    assert ANONYMOUS_IDENTITY == "2vxsx-fae"
