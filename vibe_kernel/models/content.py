"""Content Model — minted vibes and their engagement counters."""

from pydantic import BaseModel, Field


class Vibe(BaseModel):
    """A content item minted by one identity."""

    id: str                                 # "{creator}-{timestamp}[-{seq}]"
    content: str
    timestamp: int                          # Whole seconds at mint time
    likes: int = Field(ge=0, default=0)
    shares: int = Field(ge=0, default=0)
    creator: str


class InteractionStats(BaseModel):
    """Aggregate engagement for one vibe. Mirrors Vibe.likes / Vibe.shares."""

    likes: int = Field(ge=0, default=0)
    shares: int = Field(ge=0, default=0)
