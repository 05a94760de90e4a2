from typing import Any, Optional, Protocol, TypedDict, runtime_checkable


@runtime_checkable
class ActionCallable(Protocol):
    """Protocol for anything an event can invoke as an action.

    Plain functions, bound methods and objects whose type defines ``__call__``
    all satisfy it. Whatever the call returns is discarded.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any: ...


class EventStats(TypedDict):
    """Counters reported by ``Event.get_stats``"""

    triggers: int
    actions_invoked: int
    actions_skipped: int
    errors: int
    last_trigger_time: Optional[float]
    action_count: int
