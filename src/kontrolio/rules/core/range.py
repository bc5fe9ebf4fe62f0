"""
Range - validates numeric values are within a specified range.
"""

import math
from typing import Any

from ..base import AbstractRule, InvalidArgumentError


def _is_number(value: Any) -> bool:
    # bool is an int subclass but is not a quantity; NaN compares false with every bound
    if not isinstance(value, int | float) or isinstance(value, bool):
        return False
    return not (isinstance(value, float) and math.isnan(value))


class Range(AbstractRule):
    """
    Validates that a numeric value is within a specified range.

    Parameters:
    - min: Minimum value (inclusive)
    - max: Maximum value (inclusive)
    - min_exclusive: Minimum value (exclusive)
    - max_exclusive: Maximum value (exclusive)
    """

    def __init__(
        self,
        min: float | None = None,
        max: float | None = None,
        min_exclusive: float | None = None,
        max_exclusive: float | None = None,
        *,
        allow_empty: bool = False,
    ):
        super().__init__(allow_empty=allow_empty)

        self.min_value = min
        self.max_value = max
        self.min_exclusive = min_exclusive
        self.max_exclusive = max_exclusive

        bounds = {
            "min": self.min_value,
            "max": self.max_value,
            "min_exclusive": self.min_exclusive,
            "max_exclusive": self.max_exclusive,
        }

        # At least one boundary is required
        if all(v is None for v in bounds.values()):
            raise InvalidArgumentError(
                "Range requires at least one of: min, max, min_exclusive, max_exclusive"
            )

        for bound_name, bound in bounds.items():
            if bound is not None and not _is_number(bound):
                raise InvalidArgumentError(
                    f"Range bound '{bound_name}' must be a number (not NaN), got {bound!r}"
                )

        if self.min_value is not None and self.max_value is not None and self.min_value > self.max_value:
            raise InvalidArgumentError(f"Range min {self.min_value} exceeds max {self.max_value}")

    def is_valid(self, input: Any = None) -> bool:
        if not _is_number(input):
            return False

        if self.min_value is not None and input < self.min_value:
            return False

        if self.min_exclusive is not None and input <= self.min_exclusive:
            return False

        if self.max_value is not None and input > self.max_value:
            return False

        if self.max_exclusive is not None and input >= self.max_exclusive:
            return False

        return True

    def _describe(self) -> dict[str, Any]:
        described = {
            "min": self.min_value,
            "max": self.max_value,
            "min_exclusive": self.min_exclusive,
            "max_exclusive": self.max_exclusive,
        }
        return {key: value for key, value in described.items() if value is not None}
