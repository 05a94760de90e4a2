class InvalidArgument(ValueError):
    """Raised when an event operation receives an argument it cannot accept.

    Covers non-string event names, non-callable action targets and intervals
    that are not non-negative real numbers. These are programmer errors, raised
    at the offending call before any state is changed.
    """
