"""
Core

Event registry, dispatch and the types they share.
"""

from .events import (
    Event,
    new_event,
    is_valid_action_callable,
    is_valid_interval,
)
from .types import ActionCallable, EventStats, InvalidArgument

__all__ = [
    "Event",
    "new_event",
    "is_valid_action_callable",
    "is_valid_interval",
    "ActionCallable",
    "EventStats",
    "InvalidArgument",
]
