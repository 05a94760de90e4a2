"""
Reactive Events

Unified import layer for the reactive_events package.
"""

from reactive_events.core.events import (
    Event,
    new_event,
    is_valid_action_callable,
    is_valid_interval,
)
from reactive_events.core.types import ActionCallable, EventStats, InvalidArgument
from reactive_events.config.settings import (
    Settings,
    get_settings,
    initialize_settings,
    reset_settings,
)

__all__ = [
    "Event",
    "new_event",
    "is_valid_action_callable",
    "is_valid_interval",
    "ActionCallable",
    "EventStats",
    "InvalidArgument",
    "Settings",
    "get_settings",
    "initialize_settings",
    "reset_settings",
]
