"""
NotEmpty - ensures a value is present and not blank.
"""

from typing import Any

from ..base import AbstractRule
from .is_empty import is_empty_value


class NotEmpty(AbstractRule):
    """
    Validates that a value is present and not empty.

    Fails if:
    - Value is None
    - Value is an empty string, or whitespace-only (configurable)
    - Value is an empty list, tuple, dict or set
    """

    def __init__(self, allow_whitespace: bool = False, *, allow_empty: bool = False):
        super().__init__(allow_empty=allow_empty)
        self.allow_whitespace = bool(allow_whitespace)

    def is_valid(self, input: Any = None) -> bool:
        return not is_empty_value(input, allow_whitespace=self.allow_whitespace)

    def _describe(self) -> dict[str, Any]:
        return {"allow_whitespace": self.allow_whitespace}
