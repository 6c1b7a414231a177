"""
Mutation Orchestrator — the exposed operations of the vibe platform.

Sequences reads and writes across the Ledger, Content and Interaction stores,
applies the Reward Policy, then rebuilds the Leaderboard Index.

Behavioral Contract:
- Every operation runs under one exclusive lock over the whole state; calls
  are applied in lock-acquisition order and never interleave
- Every fallible check runs before the first write: a rejected call
  (InsufficientFundsError, ItemNotFoundError, InvalidAmountError,
  InvalidIdentityError, or a Vibe that fails validation) leaves the state
  exactly as it found it
- Repeating a like/share returns the current count with no side effects
- The leaderboard is rebuilt after every successful mutation
- Values handed back to callers are copies; callers cannot reach the state
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from vibe_kernel.collaborators.providers import (
    Clock,
    ContextIdentityProvider,
    IdentityProvider,
    SystemClock,
)
from vibe_kernel.content.store import ContentStore
from vibe_kernel.errors import (
    ErrorContext,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidIdentityError,
    ItemNotFoundError,
    VibeError,
)
from vibe_kernel.interactions.tracker import InteractionTracker
from vibe_kernel.leaderboard.index import DEFAULT_SIZE, LeaderboardIndex
from vibe_kernel.ledger.store import LedgerStore
from vibe_kernel.models.config import RewardConfig
from vibe_kernel.models.content import Vibe
from vibe_kernel.models.identity import ANONYMOUS_IDENTITY
from vibe_kernel.models.leaderboard import Leaderboard
from vibe_kernel.models.snapshot import PlatformSnapshot
from vibe_kernel.observability import call_fields
from vibe_kernel.rewards.policy import RewardOutcome, RewardPolicy

logger = logging.getLogger(__name__)


@dataclass
class PlatformState:
    """The single shared state value. Only VibePlatform touches it."""

    ledger: LedgerStore
    content: ContentStore = field(default_factory=ContentStore)
    interactions: InteractionTracker = field(default_factory=InteractionTracker)
    leaderboard: LeaderboardIndex = field(default_factory=LeaderboardIndex)


class VibePlatform:
    """
    The content-rewards core.

    Caller identity and time come from the injected collaborators; no
    operation takes an identity argument.
    """

    def __init__(
        self,
        identity_provider: Optional[IdentityProvider] = None,
        clock: Optional[Clock] = None,
        reward_config: Optional[RewardConfig] = None,
        leaderboard_size: int = DEFAULT_SIZE,
        anonymous_identity: str = ANONYMOUS_IDENTITY,
    ):
        self.identity_provider = identity_provider or ContextIdentityProvider(
            default=anonymous_identity
        )
        self.clock = clock or SystemClock()
        self.config = reward_config or RewardConfig()
        self.policy = RewardPolicy(self.config)
        self._state = PlatformState(
            ledger=LedgerStore(self.config),
            leaderboard=LeaderboardIndex(
                size=leaderboard_size, anonymous_identity=anonymous_identity
            ),
        )
        self._lock = threading.Lock()

    # === CONTENT ===

    def mint_vibe(self, content: str) -> str:
        """Pay the mint cost and publish a new vibe. Returns its id."""
        with self._lock:
            state = self._state
            user = self._caller()
            timestamp = self.clock.now()
            cost = self.policy.mint_cost()

            if not state.ledger.can_afford(user, cost):
                raise self._reject(
                    InsufficientFundsError(
                        balance=state.ledger.get_balance(user),
                        required=cost,
                        context=ErrorContext(caller=user, operation="mint_vibe"),
                    )
                )

            vibe_id = state.content.next_item_id(user, timestamp)
            vibe = Vibe(
                id=vibe_id,
                content=content,
                timestamp=timestamp,
                likes=0,
                shares=0,
                creator=user,
            )

            state.ledger.ensure_account(user)
            state.ledger.debit(user, cost)
            state.content.append(user, vibe)
            state.interactions.init_stats(vibe_id)
            state.ledger.bump_reputation(user, self.policy.mint_reputation_delta())
            self._refresh_leaderboard()

            logger.info(
                "Minted vibe",
                extra=call_fields(caller=user, vibe_id=vibe_id, operation="mint_vibe", amount=cost),
            )
            return vibe_id

    def get_my_vibes(self) -> List[Vibe]:
        with self._lock:
            user = self._caller()
            return [v.model_copy() for v in self._state.content.list_by_creator(user)]

    # === ACCOUNT ===

    def get_my_balance(self) -> int:
        with self._lock:
            return self._state.ledger.get_balance(self._caller())

    def get_my_reputation(self) -> float:
        with self._lock:
            return self._state.ledger.get_reputation(self._caller())

    def reset_account(self) -> None:
        """
        Drop the caller's vibes and engagement history; restore default
        balance and reputation.

        Interaction stats of the dropped vibes stay in the tracker, so they
        may keep their leaderboard positions.
        """
        with self._lock:
            state = self._state
            user = self._caller()
            removed = state.content.remove_creator(user)
            state.interactions.clear_identity(user)
            state.ledger.reset(user)
            self._refresh_leaderboard()
            logger.info(
                f"Reset account ({removed} vibes removed)",
                extra=call_fields(caller=user, operation="reset_account"),
            )

    # === ENGAGEMENT ===

    def like_vibe(self, vibe_id: str) -> int:
        """Like a vibe once. Returns the vibe's like count."""
        with self._lock:
            state = self._state
            user = self._caller()

            if state.interactions.has_liked(user, vibe_id):
                return state.interactions.stats_of(vibe_id).likes

            owner = self._owner_or_reject(vibe_id, user, "like_vibe")
            rewards = self.policy.like(state.ledger.get_reputation(owner))

            state.ledger.ensure_account(user)
            likes = state.interactions.record_like(user, vibe_id)
            self._apply_rewards(user, owner, rewards)
            self._mirror_stats(vibe_id)
            self._refresh_leaderboard()

            logger.info(
                "Liked vibe",
                extra=call_fields(
                    caller=user, vibe_id=vibe_id, operation="like_vibe",
                    amount=rewards.creator_reward,
                ),
            )
            return likes

    def share_vibe(self, vibe_id: str) -> int:
        """Share a vibe once. Returns the vibe's share count."""
        with self._lock:
            state = self._state
            user = self._caller()

            if state.interactions.has_shared(user, vibe_id):
                return state.interactions.stats_of(vibe_id).shares

            owner = self._owner_or_reject(vibe_id, user, "share_vibe")
            rewards = self.policy.share(state.ledger.get_reputation(owner))

            state.ledger.ensure_account(user)
            shares = state.interactions.record_share(user, vibe_id)
            self._apply_rewards(user, owner, rewards)
            self._mirror_stats(vibe_id)
            self._refresh_leaderboard()

            logger.info(
                "Shared vibe",
                extra=call_fields(
                    caller=user, vibe_id=vibe_id, operation="share_vibe",
                    amount=rewards.creator_reward,
                ),
            )
            return shares

    def get_vibe_stats(self, vibe_id: str) -> Tuple[int, int]:
        """(likes, shares) for a vibe; (0, 0) if never seen."""
        with self._lock:
            stats = self._state.interactions.stats_of(vibe_id)
            return stats.likes, stats.shares

    def get_leaderboard(self) -> Leaderboard:
        with self._lock:
            return self._state.leaderboard.current()

    # === STAKING ===

    def stake_tokens(self, amount: int) -> None:
        """Burn `amount` from the caller's visible balance. No escrow, no unstake."""
        with self._lock:
            state = self._state
            user = self._caller()
            ctx = ErrorContext(caller=user, operation="stake_tokens")

            if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
                raise self._reject(InvalidAmountError(amount, context=ctx))
            if not state.ledger.can_afford(user, amount):
                raise self._reject(
                    InsufficientFundsError(
                        balance=state.ledger.get_balance(user), required=amount, context=ctx,
                    )
                )

            state.ledger.ensure_account(user)
            state.ledger.debit(user, amount)
            self._refresh_leaderboard()
            logger.info(
                "Staked tokens",
                extra=call_fields(caller=user, operation="stake_tokens", amount=amount),
            )

    def claim_staking_rewards(self) -> int:
        """Credit the flat staking reward. Returns the amount credited."""
        with self._lock:
            state = self._state
            user = self._caller()
            reward = self.policy.staking_claim()

            state.ledger.ensure_account(user)
            state.ledger.credit(user, reward)
            self._refresh_leaderboard()
            logger.info(
                "Claimed staking rewards",
                extra=call_fields(caller=user, operation="claim_staking_rewards", amount=reward),
            )
            return reward

    # === INSPECTION ===

    def snapshot(self) -> PlatformSnapshot:
        """Serializable copy of every store."""
        with self._lock:
            state = self._state
            return PlatformSnapshot(
                vibes={
                    creator: [v.model_copy() for v in vibes]
                    for creator, vibes in state.content.creators().items()
                },
                balances=dict(state.ledger.balances()),
                reputation=dict(state.ledger.reputations()),
                interactions={vid: s.model_copy() for vid, s in state.interactions.all_stats()},
                likes_by_identity={
                    who: sorted(state.interactions.liked_by(who))
                    for who in state.interactions.identities()
                    if state.interactions.liked_by(who)
                },
                shares_by_identity={
                    who: sorted(state.interactions.shared_by(who))
                    for who in state.interactions.identities()
                    if state.interactions.shared_by(who)
                },
                leaderboard=state.leaderboard.current(),
                taken_at=datetime.now(timezone.utc),
            )

    # --- internals (lock held) ---

    def _caller(self) -> str:
        user = self.identity_provider.current_caller()
        if not isinstance(user, str) or not user:
            raise self._reject(InvalidIdentityError(user))
        return user

    def _owner_or_reject(self, vibe_id: str, user: str, operation: str) -> str:
        try:
            return self._state.content.owner_of(vibe_id)
        except ItemNotFoundError as exc:
            exc.context.caller = user
            exc.context.operation = operation
            self._reject(exc)
            raise

    def _apply_rewards(self, actor: str, owner: str, rewards: RewardOutcome) -> None:
        ledger = self._state.ledger
        ledger.credit(owner, rewards.creator_reward)
        ledger.credit(actor, rewards.actor_reward)
        ledger.bump_reputation(actor, rewards.actor_reputation_delta)
        ledger.bump_reputation(owner, rewards.creator_reputation_delta)

    def _mirror_stats(self, vibe_id: str) -> None:
        stats = self._state.interactions.stats_of(vibe_id)
        self._state.content.update_stats(vibe_id, stats.likes, stats.shares)

    def _refresh_leaderboard(self) -> None:
        self._state.leaderboard.rebuild(self._state.ledger, self._state.interactions)

    def _reject(self, error: VibeError) -> VibeError:
        logger.warning(
            f"Rejected call: {error.message}",
            extra=call_fields(
                caller=error.context.caller,
                operation=error.context.operation,
                vibe_id=error.context.vibe_id,
                error_code=error.code,
            ),
        )
        return error
