"""
Event System

Named events and the internal action records they dispatch to.
"""

from .event import Event, new_event
from .action import is_valid_action_callable, is_valid_interval

__all__ = [
    "Event",
    "new_event",
    "is_valid_action_callable",
    "is_valid_interval",
]
