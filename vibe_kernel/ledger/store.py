"""
Ledger Store — per-identity token balance and reputation.

Updated by: Mutation Orchestrator only
Queried by: Orchestrator + Leaderboard Index

Behavioral Contract:
- Balances are non-negative integers; a debit larger than the balance raises
  InsufficientFundsError and leaves the balance untouched
- Untouched identities read as initial_balance / 1.0 without being stored
- Reputation is kept at binary32 precision
"""

import logging
from typing import Dict, Iterator, Optional, Tuple

from vibe_kernel.errors import InsufficientFundsError, InvalidAmountError
from vibe_kernel.models.config import RewardConfig
from vibe_kernel.observability import call_fields
from vibe_kernel.rewards.precision import f32_add

logger = logging.getLogger(__name__)

DEFAULT_REPUTATION = 1.0


class LedgerStore:
    """In-memory balances and reputation, keyed by identity."""

    def __init__(self, config: Optional[RewardConfig] = None):
        self.config = config or RewardConfig()
        self._balances: Dict[str, int] = {}
        self._reputation: Dict[str, float] = {}

    @property
    def initial_balance(self) -> int:
        return self.config.initial_balance

    def has_account(self, identity: str) -> bool:
        return identity in self._balances

    def ensure_account(self, identity: str) -> None:
        """Materialize the default balance and reputation for a first-time identity."""
        self._reputation.setdefault(identity, DEFAULT_REPUTATION)
        if identity not in self._balances:
            self._balances[identity] = self.initial_balance
            logger.debug("Opened account", extra=call_fields(caller=identity))

    def get_balance(self, identity: str) -> int:
        return self._balances.get(identity, self.initial_balance)

    def get_reputation(self, identity: str) -> float:
        return self._reputation.get(identity, DEFAULT_REPUTATION)

    def can_afford(self, identity: str, amount: int) -> bool:
        return self.get_balance(identity) >= amount

    def credit(self, identity: str, amount: int) -> int:
        """Add tokens; returns the new balance."""
        _check_amount(amount)
        self._balances[identity] = self.get_balance(identity) + amount
        return self._balances[identity]

    def debit(self, identity: str, amount: int) -> int:
        """Remove tokens; returns the new balance."""
        _check_amount(amount)
        balance = self.get_balance(identity)
        if balance < amount:
            raise InsufficientFundsError(balance=balance, required=amount)
        self._balances[identity] = balance - amount
        return self._balances[identity]

    def bump_reputation(self, identity: str, delta: float) -> float:
        """Raise reputation by delta; returns the new score."""
        if delta < 0:
            raise ValueError("Reputation deltas must be non-negative")
        self._reputation[identity] = f32_add(self.get_reputation(identity), delta)
        return self._reputation[identity]

    def reset(self, identity: str) -> None:
        """Back to initial balance and default reputation."""
        self._balances[identity] = self.initial_balance
        self._reputation[identity] = DEFAULT_REPUTATION

    def balances(self) -> Iterator[Tuple[str, int]]:
        """Stored balances in first-touch order."""
        return iter(list(self._balances.items()))

    def reputations(self) -> Iterator[Tuple[str, float]]:
        return iter(list(self._reputation.items()))


def _check_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise InvalidAmountError(amount)
