"""
Core live reducer primitives.

This module provides:
- Action: Immutable action records
- ActionCreator: Callable, uniquely typed action identifiers
- Reducer: Rewireable handler registry usable as a reducer
- ReducerOptions: Dispatch configuration (payload, fallback)
- batch: Built-in action creator pre-registered on every reducer
"""

from .actions import Action, ActionCreator, batch, create_action, to_type
from .reducer import Reducer, create_reducer
from .options import ReducerOptions
from .errors import (
    LiveReducerError,
    InvalidHandlerError,
    InvalidActionTypeError,
    InvalidOptionsError,
    InvalidDispatchTargetError,
)

__all__ = [
    "Action",
    "ActionCreator",
    "batch",
    "create_action",
    "to_type",
    "Reducer",
    "create_reducer",
    "ReducerOptions",
    "LiveReducerError",
    "InvalidHandlerError",
    "InvalidActionTypeError",
    "InvalidOptionsError",
    "InvalidDispatchTargetError",
]
