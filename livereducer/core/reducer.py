"""
Reducer: a live, rewireable handler registry.

A Reducer is itself the pure (state, action) -> state function a store
expects. Its table maps action type strings to handlers and can be changed
at any time, including from inside a running handler. Changes made during a
dispatch apply from the next dispatch on.
"""

import inspect
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..logging_config import get_logger
from .actions import action_type, batch, read_field, to_type
from .errors import InvalidActionTypeError, InvalidHandlerError
from .options import ReducerOptions

# Handler signature: (state, payload[, meta]) -> state, or (state, action[, meta]) -> state.
# Trailing parameters may be omitted; handlers only get what they accept.
Handler = Callable[..., Any]
# (handler, max positional args or None for unbounded)
Entry = Tuple[Handler, Optional[int]]

BATCH_TYPE = batch.to_key()

_TYPE_SEQUENCES = (list, tuple, set, frozenset)


def _noop(state: Any, *args: Any) -> Any:
    return state


def _max_positional(fn: Callable[..., Any]) -> Optional[int]:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins): pass everything
        return None

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def _entry(fn: Handler) -> Entry:
    return fn, _max_positional(fn)


def _invoke(entry: Entry, *args: Any) -> Any:
    fn, limit = entry
    if limit is not None:
        args = args[:limit]
    return fn(*args)


def _coerce_types(types: Any) -> List[str]:
    if isinstance(types, _TYPE_SEQUENCES):
        candidates = list(types)
    else:
        candidates = [types]

    keys = []
    for candidate in candidates:
        key = to_type(candidate)
        if key is None:
            raise InvalidActionTypeError(f"Invalid action type: {candidate!r}")
        keys.append(key)
    return keys


class Reducer:
    """
    Registry of action handlers, callable as a reducer.

    Usage:
        increment = create_action()
        add = create_action()

        reducer = Reducer({increment: lambda s: s + 1}, 0)
        reducer.on(add, lambda s, n: s + n)

        reducer()                   # 0
        reducer(1, add(41))         # 42

    Setup callback form, for handlers that rewire the table when they fire:

        def setup(on, off):
            def unlock(state):
                off(unlock_action)
                on(lock_action, lock)
                return "open"
            on(unlock_action, unlock)

        door = Reducer(setup, "closed")
    """

    def __init__(
        self,
        handlers: Any = None,
        default_state: Any = None,
        name: Optional[str] = None,
    ) -> None:
        self._handlers: Dict[str, Entry] = {BATCH_TYPE: _entry(_noop)}
        self._default_state = default_state
        self._options = ReducerOptions()
        self._fallback: Optional[Entry] = None
        self._log = get_logger(__name__, reducer_id=name or f"reducer-{id(self):x}")

        if handlers is None:
            return
        if isinstance(handlers, Mapping):
            table = {}
            for key, handler in handlers.items():
                type_ = to_type(key)
                if type_ is None:
                    raise InvalidActionTypeError(f"Invalid action type: {key!r}")
                if not callable(handler):
                    raise InvalidHandlerError(f"Handler for {type_} is not callable: {handler!r}")
                table[type_] = _entry(handler)
            self._handlers.update(table)
            self._log.debug("Created with %d handler(s)", len(table))
        elif callable(handlers):
            handlers(self.on, self.off)
            self._log.debug("Created from setup callback with %d handler(s)", len(self._handlers))
        else:
            raise InvalidHandlerError(
                f"Handlers must be a mapping or a setup callable, got {type(handlers).__name__}"
            )

    @property
    def default_state(self) -> Any:
        return self._default_state

    def __call__(self, state: Any = None, action: Any = None) -> Any:
        """
        Apply action to state.

        Args:
            state: Current state, None for the default state
            action: Action record, mapping or object with a type attribute

        Returns:
            New state. Actions without a usable type, or with an unknown
            type and no fallback, return state unchanged.
        """
        if state is None:
            state = self._default_state

        type_ = action_type(action)
        if type_ is None:
            return state

        # Bound before the call: on/off from inside the handler must not
        # change what this dispatch runs.
        entry = self._handlers.get(type_)
        payload_on = self._options.payload
        fallback = self._fallback

        payload = read_field(action, "payload")
        meta = read_field(action, "meta")

        if entry is not None:
            arg = payload if payload_on else action
            if meta is None:
                return _invoke(entry, state, arg)
            return _invoke(entry, state, arg, meta)

        if fallback is not None:
            self._log.debug("No handler for %s, using fallback", type_)
            return _invoke(fallback, state, payload)

        return state

    def on(self, types: Any, handler: Handler) -> "Reducer":
        """
        Register handler for one type or each type of a list.

        Replaces any handler already registered for those types.

        Raises:
            InvalidActionTypeError: If a type cannot be coerced
            InvalidHandlerError: If handler is not callable
        """
        keys = _coerce_types(types)
        if not callable(handler):
            raise InvalidHandlerError(f"Handler is not callable: {handler!r}")

        entry = _entry(handler)
        for key in keys:
            self._handlers[key] = entry
        self._log.debug("Registered handler for %s", ", ".join(keys))
        return self

    def off(self, types: Any) -> "Reducer":
        """
        Remove the handlers of one type or each type of a list.

        Absent types are ignored. Removing the batch handler restores the
        default no-op rather than deleting the entry.
        """
        keys = _coerce_types(types)

        for key in keys:
            if key == BATCH_TYPE:
                self._handlers[key] = _entry(_noop)
            else:
                self._handlers.pop(key, None)
        self._log.debug("Removed handler for %s", ", ".join(keys))
        return self

    def has(self, type_: Any) -> bool:
        """True if a handler is currently registered for type_."""
        key = to_type(type_)
        return key is not None and key in self._handlers

    def options(self, partial: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Reducer":
        """
        Update dispatch options (payload, fallback).

        Accepts a mapping, keyword arguments, or both.

        Raises:
            InvalidOptionsError: If the result does not validate; the
                previous options are kept
        """
        updates = dict(partial or {})
        updates.update(kwargs)
        self._options = self._options.merged(updates)
        fallback = self._options.fallback
        self._fallback = _entry(fallback) if fallback is not None else None
        self._log.debug("Options updated: %s", list(updates))
        return self

    def get_options(self) -> ReducerOptions:
        """Current dispatch options."""
        return self._options

    def handlers(self) -> Mapping[str, Handler]:
        """Read-only snapshot of the handler table."""
        return MappingProxyType({key: entry[0] for key, entry in self._handlers.items()})

    def __repr__(self) -> str:
        return f"Reducer(handlers={len(self._handlers)}, default_state={self._default_state!r})"


def create_reducer(
    handlers: Any = None,
    default_state: Any = None,
    name: Optional[str] = None,
) -> Reducer:
    """
    Create a reducer.

    Args:
        handlers: None, a mapping of type (or action creator) to handler,
            or a setup callable receiving (on, off)
        default_state: State returned when called without a state
        name: Correlation id for log records

    Returns:
        New Reducer
    """
    return Reducer(handlers, default_state, name=name)
