"""
Reward Policy — pure token/reputation deltas for mint, like, share and claim.

Behavioral Contract:
- No state access: every function maps (event, reputation) to deltas
- Creator rewards scale with the creator's current reputation, multiplied at
  single precision and truncated toward zero
- All deltas are non-negative except the mint cost, which is a debit
"""

from typing import Optional

from pydantic import BaseModel

from vibe_kernel.models.config import RewardConfig
from vibe_kernel.rewards.precision import f32_mul


class RewardOutcome(BaseModel):
    """Token and reputation deltas produced by one engagement event."""

    actor_reward: int = 0
    creator_reward: int = 0
    actor_reputation_delta: float = 0.0
    creator_reputation_delta: float = 0.0


def scaled_creator_reward(base: int, creator_reputation: float) -> int:
    """floor(base * reputation) at binary32, as paid out to creators."""
    return int(f32_mul(float(base), creator_reputation))


class RewardPolicy:
    """Computes rewards from a RewardConfig. Holds no mutable state."""

    def __init__(self, config: Optional[RewardConfig] = None):
        self.config = config or RewardConfig()

    def mint_cost(self) -> int:
        return self.config.mint_cost

    def mint_reputation_delta(self) -> float:
        return self.config.mint_reputation_delta

    def like(self, creator_reputation: float) -> RewardOutcome:
        return RewardOutcome(
            actor_reward=self.config.like_reward_user,
            creator_reward=scaled_creator_reward(
                self.config.like_reward_creator, creator_reputation
            ),
            actor_reputation_delta=self.config.like_actor_reputation_delta,
            creator_reputation_delta=self.config.like_creator_reputation_delta,
        )

    def share(self, creator_reputation: float) -> RewardOutcome:
        return RewardOutcome(
            actor_reward=self.config.share_reward_user,
            creator_reward=scaled_creator_reward(
                self.config.share_reward_creator, creator_reputation
            ),
            actor_reputation_delta=self.config.share_actor_reputation_delta,
            creator_reputation_delta=self.config.share_creator_reputation_delta,
        )

    def staking_claim(self) -> int:
        # Flat payout; not linked to any stake record.
        return self.config.staking_reward
