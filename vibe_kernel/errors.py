"""
Error Hierarchy — typed, categorized exceptions for every rejected call.

Behavioral Contract:
- Every error carries a code, a category and a severity
- Raising any VibeError means the call was rejected with no state change
- to_response() produces a uniform envelope for whatever boundary hosts the core
- Repeating a like/share is a success, never an error
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where the rejection happened, for logs and error envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    caller: Optional[str] = None
    operation: Optional[str] = None
    vibe_id: Optional[str] = None
    debug_info: Optional[Dict[str, Any]] = None


class VibeError(Exception):
    """Base exception for all rejected platform calls."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "caller": self.context.caller,
                    "operation": self.context.operation,
                    "vibe_id": self.context.vibe_id,
                },
            }
        }


class InsufficientFundsError(VibeError):
    """A debit (mint cost, stake) exceeds the caller's balance."""

    def __init__(self, balance: int, required: int, context: Optional[ErrorContext] = None):
        super().__init__(
            f"Insufficient balance: {balance} available, {required} required",
            "INSUFFICIENT_FUNDS", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context,
        )
        self.balance = balance
        self.required = required


class ItemNotFoundError(VibeError):
    """A like/share referenced a vibe id no creator owns."""

    def __init__(self, vibe_id: str, context: Optional[ErrorContext] = None):
        ctx = context or ErrorContext()
        ctx.vibe_id = vibe_id
        super().__init__(
            f"Vibe '{vibe_id}' not found",
            "ITEM_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )
        self.vibe_id = vibe_id


class InvalidAmountError(VibeError):
    """A token amount outside the unsigned range."""

    def __init__(self, amount: int, context: Optional[ErrorContext] = None):
        super().__init__(
            f"Token amount must be a non-negative integer, got {amount!r}",
            "INVALID_AMOUNT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.amount = amount


class InvalidIdentityError(VibeError):
    """The host supplied a caller identity that is not a non-empty string."""

    def __init__(self, identity: object, context: Optional[ErrorContext] = None):
        super().__init__(
            f"Caller identity must be a non-empty string, got {identity!r}",
            "INVALID_IDENTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.identity = identity
