"""
Session Counter

Per-client counter kept in the request session (a signed cookie managed by
Starlette's ``SessionMiddleware``). Handlers receive the session mapping from
FastHTML and wrap it in a ``CounterSession``.

The count is a signed 32-bit value. Arithmetic saturates at the bounds and
anything stored outside them is clamped on read. Concurrent mutations from
the same client are not serialized: the last response to set the cookie wins.
"""

import logging
from typing import Any, MutableMapping

logger = logging.getLogger(__name__)

COUNT_KEY = "count"
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def saturate(value: int) -> int:
    """Clamp `value` to the signed 32-bit range."""
    return max(INT32_MIN, min(INT32_MAX, value))


class CounterSession:
    """The counter stored under ``COUNT_KEY`` in one client's session."""

    def __init__(self, session: MutableMapping[str, Any], key: str = COUNT_KEY):
        self.session = session
        self.key = key

    @property
    def count(self) -> int:
        raw = self.session.get(self.key)
        if raw is None:
            return 0
        # bool is an int subclass but never a valid count
        if isinstance(raw, bool) or not isinstance(raw, int):
            logger.debug("Ignoring non-integer session value %r for %r", raw, self.key)
            return 0
        return saturate(raw)

    @count.setter
    def count(self, value: int):
        self.session[self.key] = saturate(value)

    def add(self, delta: int) -> int:
        """Apply `delta` to the count, store it, and return the new value."""
        current = self.count
        updated = saturate(current + delta)
        if updated != current + delta:
            logger.warning("Counter saturated at %d (attempted %+d from %d)", updated, delta, current)
        self.count = updated
        logger.debug("Counter %d -> %d", current, updated)
        return updated

    def increment(self) -> int:
        return self.add(1)

    def decrement(self) -> int:
        return self.add(-1)

    def __repr__(self):
        return f"CounterSession({self.key}={self.count})"
