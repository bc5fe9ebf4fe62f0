"""
NotNull - passes for any value except None.
"""

from typing import Any

from ..base import AbstractRule


class NotNull(AbstractRule):
    """Validates that a value is present (not None)."""

    def is_valid(self, input: Any = None) -> bool:
        return input is not None
