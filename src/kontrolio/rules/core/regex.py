"""
Regex - validates string values against a regular expression pattern.
"""

import re
from re import Pattern
from typing import Any

from ..base import AbstractRule, InvalidArgumentError


class Regex(AbstractRule):
    """
    Validates that a string contains a match for a regular expression.

    The pattern is searched for anywhere in the value; anchor it with ^ and $
    to require a full match. Non-string input (including None) never matches.

    Parameters:
    - pattern: Regular expression pattern (string or compiled Pattern)
    - flags: Optional regex flags (e.g., re.IGNORECASE), only allowed with a string pattern
    """

    def __init__(self, pattern: Any, flags: int = 0, *, allow_empty: bool = False):
        super().__init__(allow_empty=allow_empty)

        # re.RegexFlag is an int subclass; bool is not a flag set
        if not isinstance(flags, int) or isinstance(flags, bool):
            raise InvalidArgumentError(f"Regex flags must be an int, got {type(flags).__name__}")

        if isinstance(pattern, Pattern):
            if not isinstance(pattern.pattern, str):
                raise InvalidArgumentError("Compiled pattern must be a str pattern, got a bytes pattern")
            if flags:
                raise InvalidArgumentError("Flags cannot be combined with a compiled pattern")
            self.pattern: Pattern = pattern
            return

        if not isinstance(pattern, str):
            raise InvalidArgumentError(
                f"Pattern must be string or compiled Pattern, got {type(pattern).__name__}"
            )

        try:
            self.pattern = re.compile(pattern, flags)
        except (re.error, ValueError) as e:
            raise InvalidArgumentError(f"Invalid regex pattern '{pattern}': {e}") from e

    def is_valid(self, input: Any = None) -> bool:
        if not isinstance(input, str):
            return False

        return self.pattern.search(input) is not None

    def _describe(self) -> dict[str, Any]:
        return {"pattern": self.pattern.pattern}
