"""
Length - validates the length of strings and collections.
"""

from typing import Any

from ..base import AbstractRule, InvalidArgumentError

SIZED_TYPES = (str, list, tuple, dict, set, frozenset)


class Length(AbstractRule):
    """
    Validates that a string or collection has a length within bounds.

    Parameters:
    - min: Minimum length (inclusive)
    - max: Maximum length (inclusive)
    """

    def __init__(self, min: int | None = None, max: int | None = None, *, allow_empty: bool = False):
        super().__init__(allow_empty=allow_empty)

        if min is None and max is None:
            raise InvalidArgumentError("Length requires at least one of: min, max")

        for bound_name, bound in (("min", min), ("max", max)):
            if bound is None:
                continue
            if not isinstance(bound, int) or isinstance(bound, bool) or bound < 0:
                raise InvalidArgumentError(
                    f"Length bound '{bound_name}' must be a non-negative integer, got {bound!r}"
                )

        if min is not None and max is not None and min > max:
            raise InvalidArgumentError(f"Length min {min} exceeds max {max}")

        self.min_length = min
        self.max_length = max

    def is_valid(self, input: Any = None) -> bool:
        if not isinstance(input, SIZED_TYPES):
            return False

        length = len(input)

        if self.min_length is not None and length < self.min_length:
            return False

        if self.max_length is not None and length > self.max_length:
            return False

        return True

    def _describe(self) -> dict[str, Any]:
        return {"min": self.min_length, "max": self.max_length}
