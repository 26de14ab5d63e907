"""
Replay runner: fold a reducer over a sequence of actions.

Replay does what a store does on every dispatch, without keeping state
between calls.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions applied
    """
    state: Any
    applied: int


def replay(
    reducer: Callable[..., Any],
    actions: Iterable[Any],
    state: Any = None,
    limit: Optional[int] = None,
) -> ReplayResult:
    """
    Replay actions to reconstruct state.

    Args:
        reducer: Any (state, action) -> state callable
        actions: Actions in dispatch order
        state: Starting state (None = reducer's default state)
        limit: Stop after this many actions (None = all)

    Returns:
        ReplayResult with final state and count
    """
    st = reducer() if state is None else reducer(state)
    count = 0

    for action in actions:
        if limit is not None and count >= limit:
            break
        st = reducer(st, action)
        count += 1

    return ReplayResult(state=st, applied=count)
