"""
IsNull - passes only for the absent value.
"""

from typing import Any

from ..base import AbstractRule


class IsNull(AbstractRule):
    """
    Validates that a value is None.

    Falsy-but-present values ("", 0, False, empty collections) are not null.
    """

    def is_valid(self, input: Any = None) -> bool:
        return input is None
