"""
Live Reducer

Action identifiers and a handler registry usable as a pure
(state, action) -> state function, rewireable while the application runs.
"""

from .core import (
    Action,
    ActionCreator,
    Reducer,
    ReducerOptions,
    batch,
    create_action,
    create_reducer,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionCreator",
    "Reducer",
    "ReducerOptions",
    "batch",
    "create_action",
    "create_reducer",
]
