"""
Kernel Configuration — environment-driven settings via pydantic-settings.

Every reward constant can be overridden with a VIBE_-prefixed environment
variable (e.g. VIBE_MINT_COST=10) or a .env file. get_settings() is cached:
one Settings instance per process.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vibe_kernel.models.config import RewardConfig
from vibe_kernel.models.identity import ANONYMOUS_IDENTITY


class Settings(BaseSettings):
    """Kernel settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VIBE_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Economy
    initial_balance: int = Field(ge=0, default=100)
    mint_cost: int = Field(ge=0, default=5)
    like_reward_user: int = Field(ge=0, default=1)
    like_reward_creator: int = Field(ge=0, default=2)
    share_reward_user: int = Field(ge=0, default=2)
    share_reward_creator: int = Field(ge=0, default=3)
    staking_reward: int = Field(ge=0, default=5)

    # Reputation
    mint_reputation_delta: float = Field(ge=0, default=0.1)
    like_actor_reputation_delta: float = Field(ge=0, default=0.01)
    like_creator_reputation_delta: float = Field(ge=0, default=0.05)
    share_actor_reputation_delta: float = Field(ge=0, default=0.02)
    share_creator_reputation_delta: float = Field(ge=0, default=0.1)

    # Leaderboard
    leaderboard_size: int = Field(ge=1, default=10)
    anonymous_identity: str = ANONYMOUS_IDENTITY

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    def reward_config(self) -> RewardConfig:
        """Project the economy and reputation fields onto the RewardConfig model."""
        return RewardConfig(
            **self.model_dump(include=set(RewardConfig.model_fields))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
