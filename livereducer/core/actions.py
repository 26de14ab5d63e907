"""
Action records and action creators.

An action creator is a callable identifier. Calling it builds an Action
record; once assigned to one or more stores it also dispatches the record.
Creators coerce to their type string, so they can key handler tables
alongside plain string types.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from . import ids
from .errors import InvalidActionTypeError, InvalidDispatchTargetError, InvalidHandlerError

logger = logging.getLogger(__name__)

# (*args) -> payload, (*args) -> meta
PayloadReducer = Callable[..., Any]
MetaReducer = Callable[..., Any]
Dispatch = Callable[[Any], Any]


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Action type string
        payload: Value derived from the creator arguments
        meta: Derived metadata (None when the creator has no meta reducer)
    """
    type: str
    payload: Any = None
    meta: Any = None


class ActionCreator:
    """
    Callable, uniquely typed action identifier.

    Usage:
        add = create_action()
        add(40)                    # Action(type="[1]", payload=40)
        add.assign_to(store)
        add(2)                     # built and dispatched to store
    """

    __slots__ = ("_type", "_payload_reducer", "_meta_reducer", "_dispatchers")

    def __init__(
        self,
        type_: str,
        payload_reducer: Optional[PayloadReducer] = None,
        meta_reducer: Optional[MetaReducer] = None,
    ) -> None:
        self._type = type_
        self._payload_reducer = payload_reducer
        self._meta_reducer = meta_reducer
        self._dispatchers: Tuple[Dispatch, ...] = ()

    def __call__(self, *args: Any) -> Action:
        action = self.raw(*args)
        for dispatch in self._dispatchers:
            dispatch(action)
        return action

    def raw(self, *args: Any) -> Action:
        """Build the action record without dispatching it, even when assigned."""
        if self._payload_reducer is None:
            payload = args[0] if args else None
        else:
            payload = self._payload_reducer(*args)

        meta = None
        if self._meta_reducer is not None:
            meta = self._meta_reducer(*args)

        return Action(type=self._type, payload=payload, meta=meta)

    def get_type(self) -> str:
        """Raw type string, for switch-style reducers comparing action types."""
        return self._type

    def to_key(self) -> str:
        """Key under which handler tables store this creator."""
        return self._type

    def assign_to(self, targets: Any) -> "ActionCreator":
        """
        Bind this creator to one or more dispatch targets.

        Args:
            targets: A store (anything with a dispatch method), a dispatch
                callable, or a list/tuple of those

        Returns:
            self, for chaining

        Raises:
            InvalidDispatchTargetError: If a target cannot dispatch. The
                previous binding is kept.
        """
        if isinstance(targets, (list, tuple)):
            candidates = list(targets)
        else:
            candidates = [targets]

        self._dispatchers = tuple(_resolve_dispatch(t) for t in candidates)
        logger.debug("Assigned %s to %d target(s)", self._type, len(self._dispatchers))
        return self

    def assigned(self) -> bool:
        """True if calling this creator also dispatches."""
        return bool(self._dispatchers)

    def __str__(self) -> str:
        return self._type

    def __repr__(self) -> str:
        return f"ActionCreator({self._type!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ActionCreator):
            return self._type == other._type
        if isinstance(other, str):
            return self._type == other
        return NotImplemented

    def __hash__(self) -> int:
        # Must match str hashing so creators and strings share dict slots
        return hash(self._type)


def _resolve_dispatch(target: Any) -> Dispatch:
    dispatch = getattr(target, "dispatch", None)
    if callable(dispatch):
        return dispatch
    if callable(target) and not isinstance(target, ActionCreator):
        return target
    raise InvalidDispatchTargetError(f"Cannot dispatch to {target!r}")


def create_action(
    type: Any = None,
    payload_reducer: Optional[PayloadReducer] = None,
    meta_reducer: Optional[MetaReducer] = None,
) -> ActionCreator:
    """
    Create an action creator.

    Args:
        type: Explicit type string. Omitted: a process-unique type is
            generated. A callable here is taken as the payload reducer.
        payload_reducer: (*args) -> payload. Default: first argument.
        meta_reducer: (*args) -> meta. Default: no meta.

    Returns:
        New ActionCreator

    Raises:
        InvalidActionTypeError: If type is not a non-empty string
        InvalidHandlerError: If a reducer argument is not callable
    """
    if callable(type) and not isinstance(type, ActionCreator) and payload_reducer is None:
        type, payload_reducer = None, type

    if type is None:
        type_ = ids.next_type()
    else:
        type_ = to_type(type)
        if type_ is None:
            raise InvalidActionTypeError(f"Invalid action type: {type!r}")

    for name, fn in (("payload_reducer", payload_reducer), ("meta_reducer", meta_reducer)):
        if fn is not None and not callable(fn):
            raise InvalidHandlerError(f"{name} must be callable, got {fn!r}")

    return ActionCreator(type_, payload_reducer, meta_reducer)


def to_type(value: Any) -> Optional[str]:
    """
    Coerce a value to an action type string.

    Returns:
        The type string, or None if value has no usable type (empty
        strings, numbers, booleans, None, mappings, ...)
    """
    if isinstance(value, ActionCreator):
        return value.to_key()
    if isinstance(value, str) and value:
        return value
    return None


def read_field(action: Any, name: str) -> Any:
    """Read a field from an Action, a mapping or any object exposing it."""
    if isinstance(action, Mapping):
        return action.get(name)
    return getattr(action, name, None)


def action_type(action: Any) -> Optional[str]:
    """Usable type string of an action, or None."""
    if action is None:
        return None
    return to_type(read_field(action, "type"))


batch = create_action("BATCH", lambda *actions: actions)
