"""
Events

An Event is a named, ordered list of actions. Triggering it calls every due
action synchronously, in the order the actions were added, with the trigger's
arguments. Actions added with an interval are skipped until that many seconds
have passed since they last ran.

Example:
    tick = Event("tick")
    tick.add_action(redraw)
    tick.add_action(autosave, interval=30)
    tick.trigger(frame)
"""

from __future__ import annotations
import threading
from typing import Any, List, Optional, Tuple

from reactive_events.config.settings import get_settings
from reactive_events.core.events.action import (
    Action,
    Clock,
    is_valid_action_callable,
    is_valid_interval,
)
from reactive_events.core.types.event_types import ActionCallable, EventStats
from reactive_events.core.types.exceptions import InvalidArgument
from reactive_events.utils.logging import Logger


class Event:
    """
    A named event holding the actions to run when it is triggered.

    Each callable can be subscribed at most once. Two events compare equal when
    they share a name and subscribe the same callables, in any order.
    """

    # One logger for every event; the event name goes into each message
    _logger = Logger("Event", "event")

    def __init__(self, name: str, clock: Optional[Clock] = None):
        if not isinstance(name, str):
            raise InvalidArgument(
                f"Event name must be a string, got {type(name).__name__}"
            )

        settings = get_settings()

        self._name = name
        self._actions: List[Action] = []
        self._clock: Clock = clock or settings.get_clock()
        self._default_interval = settings.default_interval
        # Guards the action list only; actions are invoked outside the lock
        self._lock = threading.RLock()
        self._stats = self._empty_stats()
        self._logger.set_level(settings.effective_log_level)

    @property
    def name(self) -> str:
        return self._name

    @property
    def action_count(self) -> int:
        return len(self._actions)

    # === Registration Methods ===

    def add_action(
        self, action: ActionCallable, interval: Optional[float] = None
    ) -> None:
        """Subscribe a callable to this event.

        Adding a callable that is already subscribed does nothing, whatever
        interval is given the second time.

        Args:
            action: Function or callable object to run on trigger.
            interval: Minimum seconds between two invocations. Zero runs the
                action on every trigger. Defaults to the configured
                ``default_interval``.

        Raises:
            InvalidArgument: If ``action`` is not callable or ``interval`` is
                not a non-negative number.
        """
        if interval is None:
            interval = self._default_interval
        if not is_valid_action_callable(action):
            raise InvalidArgument(
                f"Action must be callable, got {type(action).__name__}"
            )
        if not is_valid_interval(interval):
            raise InvalidArgument(
                f"Interval must be a non-negative number, got {interval!r}"
            )

        with self._lock:
            if self._find_index(action) is not None:
                return
            added = Action(action, interval, created_at=self._clock())
            self._actions.append(added)

        self._logger.debug(f"{self._name}: added action {added!r}")

    def add_action_with_interval(self, action: ActionCallable, interval: float) -> None:
        """Subscribe a callable that runs at most once every ``interval`` seconds.

        The interval is a minimum gap, not a schedule: once it has elapsed the
        action still waits for the next trigger, and the clock restarts only
        when the action actually runs.
        """
        self.add_action(action, interval)

    def remove_action(self, action: ActionCallable) -> None:
        """Unsubscribe a callable. Safe to call for one that was never added."""
        with self._lock:
            index = self._find_index(action)
            if index is None:
                return
            removed = self._actions.pop(index)

        self._logger.debug(f"{self._name}: removed action {removed!r}")

    def remove_all_actions(self) -> None:
        with self._lock:
            self._actions.clear()

        self._logger.debug(f"{self._name}: removed all actions")

    def has_action(self, action: Any) -> bool:
        """Check whether a callable is subscribed to this event."""
        with self._lock:
            return self._find_index(action) is not None

    def has_actions(self) -> bool:
        return bool(self._actions)

    def callables(self) -> Tuple[ActionCallable, ...]:
        """The subscribed callables, in the order they will be invoked."""
        return tuple(action.callable for action in self._snapshot())

    def __contains__(self, action: Any) -> bool:
        return self.has_action(action)

    def _find_index(self, target: Any) -> Optional[int]:
        for index, action in enumerate(self._actions):
            if action.matches(target):
                return index
        return None

    def _snapshot(self) -> List[Action]:
        with self._lock:
            return list(self._actions)

    # === Dispatch ===

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        """Invoke every due action with the given arguments.

        Actions run in the order they were added. Return values are discarded.
        The pass iterates over a snapshot of the actions, so actions added or
        removed by an action take effect from the next trigger.

        An exception raised by an action propagates to the caller and the
        remaining actions of this pass are not run.
        """
        actions = self._snapshot()
        self._stats["triggers"] += 1
        self._stats["last_trigger_time"] = self._clock()

        for action in actions:
            if action.interval and not action.is_due(self._clock()):
                self._stats["actions_skipped"] += 1
                self._logger.debug(
                    f"{self._name}: skipped {action!r}, interval not elapsed"
                )
                continue

            try:
                action.callable(*args, **kwargs)
            except Exception as e:
                self._stats["errors"] += 1
                # The exception reaches the caller; only record it for debugging
                self._logger.debug(
                    f"{self._name}: {action!r} raised {type(e).__name__}: {e}",
                    exc_info=e,
                )
                raise

            if action.interval:
                action.mark_invoked(self._clock())
            self._stats["actions_invoked"] += 1

    # === Statistics and Debugging ===

    @staticmethod
    def _empty_stats() -> dict:
        return {
            "triggers": 0,
            "actions_invoked": 0,
            "actions_skipped": 0,
            "errors": 0,
            "last_trigger_time": None,
        }

    def get_stats(self) -> EventStats:
        """Get dispatch statistics for this event."""
        return EventStats(**self._stats, action_count=self.action_count)

    def clear_stats(self) -> None:
        self._stats = self._empty_stats()

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        # Quadratic in the number of actions; action lists are expected to be small
        if not isinstance(other, Event):
            return NotImplemented
        if self is other:
            return True
        if self._name != other._name:
            return False

        mine, theirs = self._snapshot(), other._snapshot()
        if len(mine) != len(theirs):
            return False
        return all(action in theirs for action in mine)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Event(name={self._name!r}, actions={self.action_count})"


def new_event(name: str, clock: Optional[Clock] = None) -> Event:
    """Create an event with no actions."""
    return Event(name, clock=clock)
