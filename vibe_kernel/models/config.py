"""Reward configuration — the token and reputation constants of the economy."""

from pydantic import BaseModel, Field


class RewardConfig(BaseModel):
    """Constants consumed by the Reward Policy and the Ledger Store."""

    initial_balance: int = Field(ge=0, default=100)
    mint_cost: int = Field(ge=0, default=5)
    like_reward_user: int = Field(ge=0, default=1)
    like_reward_creator: int = Field(ge=0, default=2)
    share_reward_user: int = Field(ge=0, default=2)
    share_reward_creator: int = Field(ge=0, default=3)
    staking_reward: int = Field(ge=0, default=5)

    # Reputation deltas (all non-negative: reputation never decreases)
    mint_reputation_delta: float = Field(ge=0, default=0.1)
    like_actor_reputation_delta: float = Field(ge=0, default=0.01)
    like_creator_reputation_delta: float = Field(ge=0, default=0.05)
    share_actor_reputation_delta: float = Field(ge=0, default=0.02)
    share_creator_reputation_delta: float = Field(ge=0, default=0.1)
