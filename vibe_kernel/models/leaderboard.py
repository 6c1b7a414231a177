"""Leaderboard Model — derived top-N views over balances and engagement."""

from typing import List

from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    key: str        # Identity for top_creators, vibe id otherwise
    score: int


class Leaderboard(BaseModel):
    """Three ranked lists, each sorted descending by score."""

    top_creators: List[LeaderboardEntry] = []
    most_liked: List[LeaderboardEntry] = []
    most_shared: List[LeaderboardEntry] = []
