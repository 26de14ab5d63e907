"""
Reducer dispatch options.
"""

from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError

from .errors import InvalidOptionsError


class ReducerOptions(BaseModel):
    """
    Dispatch configuration of a Reducer.

    Fields:
        payload: True -> handlers receive (state, payload[, meta]).
                 False -> handlers receive (state, action).
        fallback: (state, payload) -> state, used when no handler matches
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    payload: StrictBool = True
    fallback: Optional[Callable[..., Any]] = None

    def merged(self, partial: Mapping[str, Any]) -> "ReducerOptions":
        """
        Shallow-merge partial options into a new, validated instance.

        Raises:
            InvalidOptionsError: If the merged options do not validate
        """
        data = {"payload": self.payload, "fallback": self.fallback}
        data.update(partial)
        try:
            return ReducerOptions.model_validate(data)
        except ValidationError as e:
            raise InvalidOptionsError(f"Invalid reducer options: {e}") from e
