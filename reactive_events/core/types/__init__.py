"""Types module for core functionality."""

from reactive_events.core.types.event_types import ActionCallable, EventStats
from reactive_events.core.types.exceptions import InvalidArgument

__all__ = [
    "ActionCallable",
    "EventStats",
    "InvalidArgument",
]
