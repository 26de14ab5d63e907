"""
Exception types for the live reducer.

Dispatch never raises these. They signal caller contract violations at
construction, mutation or binding time.
"""


class LiveReducerError(Exception):
    """Base class for all live reducer errors."""
    pass


class InvalidHandlerError(LiveReducerError):
    """Raised when a handler or handler table is not usable."""
    pass


class InvalidActionTypeError(LiveReducerError):
    """Raised when a value cannot be coerced to an action type string."""
    pass


class InvalidOptionsError(LiveReducerError):
    """Raised when reducer options fail validation."""
    pass


class InvalidDispatchTargetError(LiveReducerError):
    """Raised when an action creator is assigned to something that cannot dispatch."""
    pass
