"""
Type string generation for auto-typed action creators.
"""

import itertools

_counter = itertools.count(1)


def next_type() -> str:
    """
    Generate a type string unique among all generated types in this process.

    Returns:
        "[n]" with n strictly increasing across calls

    Example:
        next_type() -> "[1]"
        next_type() -> "[2]"
    """
    return f"[{next(_counter)}]"
