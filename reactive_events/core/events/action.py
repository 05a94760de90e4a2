"""
Actions

Internal records pairing a subscribed callable with its throttling state.
Events create and own these; no part of the public API accepts or returns one.
"""

from __future__ import annotations
import math
import numbers
from types import BuiltinMethodType, MethodType
from typing import Any, Callable

from reactive_events.core.types.event_types import ActionCallable
from reactive_events.core.types.exceptions import InvalidArgument

Clock = Callable[[], float]


def is_valid_action_callable(candidate: Any) -> bool:
    """Check whether something can be subscribed to an event.

    Functions, lambdas, bound methods, builtins, classes and instances whose
    type defines ``__call__`` are all accepted.
    """
    return callable(candidate)


def is_valid_interval(interval: Any) -> bool:
    """Check that an interval is a non-negative real number of seconds.

    Booleans and NaN are rejected even though Python treats them as numbers.
    """
    if isinstance(interval, bool) or not isinstance(interval, numbers.Real):
        return False
    return not math.isnan(interval) and interval >= 0


def same_callable(first: Any, second: Any) -> bool:
    """Compare two subscribed callables by identity.

    Every attribute access on an instance builds a new bound method object, so
    bound methods are compared by the instance and function they bind.
    """
    if first is second:
        return True
    if isinstance(first, MethodType) and isinstance(second, MethodType):
        return first.__self__ is second.__self__ and first.__func__ is second.__func__
    if isinstance(first, BuiltinMethodType) and isinstance(second, BuiltinMethodType):
        return first.__self__ is second.__self__ and first.__name__ == second.__name__
    return False


class Action:
    """A callable subscribed to one event, plus its interval gate."""

    __slots__ = ("callable", "interval", "last_invocation_time")

    def __init__(
        self,
        target: ActionCallable,
        interval: float = 0,
        *,
        created_at: float,
    ):
        if not is_valid_action_callable(target):
            raise InvalidArgument(
                f"Action target must be callable, got {type(target).__name__}"
            )
        if not is_valid_interval(interval):
            raise InvalidArgument(
                f"Action interval must be a non-negative number, got {interval!r}"
            )

        self.callable = target
        self.interval = interval
        # The gate counts from creation, so a throttled action waits one full
        # interval before its first invocation.
        self.last_invocation_time = created_at

    def matches(self, target: Any) -> bool:
        return same_callable(self.callable, target)

    def is_due(self, now: float) -> bool:
        """Whether enough time has passed for this action to run again."""
        if not self.interval:
            return True
        return now - self.last_invocation_time >= self.interval

    def mark_invoked(self, now: float) -> None:
        if now > self.last_invocation_time:
            self.last_invocation_time = now

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return same_callable(self.callable, other.callable)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        name = getattr(self.callable, "__qualname__", None) or repr(self.callable)
        return f"Action({name}, interval={self.interval})"
