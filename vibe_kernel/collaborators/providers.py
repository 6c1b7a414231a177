"""
Identity & Clock Providers — the host-supplied collaborators of the kernel.

The kernel never asks "who is calling" or "what time is it" on its own; it
consumes an IdentityProvider and a Clock handed to it at construction, so
tests can substitute deterministic versions.
"""

import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Protocol

from vibe_kernel.models.identity import ANONYMOUS_IDENTITY, Identity


class IdentityProvider(Protocol):
    def current_caller(self) -> Identity:
        ...


class Clock(Protocol):
    def now(self) -> int:
        """Current time in whole seconds."""
        ...


class StaticIdentityProvider:
    """Always reports the same caller."""

    def __init__(self, identity: str):
        self.identity = Identity(identity)

    def current_caller(self) -> Identity:
        return self.identity


class ContextIdentityProvider:
    """
    Caller bound per execution context (thread / asyncio task).

    Hosts wrap each inbound call in acting_as(); outside of it the caller is
    the anonymous identity.
    """

    def __init__(self, default: str = ANONYMOUS_IDENTITY):
        self._caller: ContextVar[Identity] = ContextVar(
            "vibe_caller", default=Identity(default)
        )

    def current_caller(self) -> Identity:
        return self._caller.get()

    @contextmanager
    def acting_as(self, identity: str) -> Iterator[Identity]:
        token = self._caller.set(Identity(identity))
        try:
            yield Identity(identity)
        finally:
            self._caller.reset(token)


class SystemClock:
    """Wall clock truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: Optional[int] = None):
        self._now = int(time.time()) if start is None else start

    def now(self) -> int:
        return self._now

    def set(self, timestamp: int) -> None:
        self._now = timestamp

    def advance(self, seconds: int = 1) -> int:
        self._now += seconds
        return self._now
