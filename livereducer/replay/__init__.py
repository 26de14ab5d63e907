"""
Replay: reconstruct state by folding a reducer over actions.

Same actions and same handler table -> same state.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
