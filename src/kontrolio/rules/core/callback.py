"""
Callback - validates using a user-supplied predicate.
"""

from collections.abc import Callable
from typing import Any

from ..base import AbstractRule, InvalidArgumentError


class Callback(AbstractRule):
    """
    Validates using a custom predicate function.

    The function receives the value and returns something truthy when the
    value is valid. An exception raised by the function counts as invalid:

        def is_even(value):
            return value % 2 == 0
    """

    def __init__(self, func: Callable[[Any], Any], *, allow_empty: bool = False):
        super().__init__(allow_empty=allow_empty)

        if not callable(func):
            raise InvalidArgumentError(f"Callback requires a callable, got {type(func).__name__}")

        self.func = func

    def is_valid(self, input: Any = None) -> bool:
        try:
            return bool(self.func(input))
        except Exception:
            return False

    def _describe(self) -> dict[str, Any]:
        return {"func": getattr(self.func, "__name__", repr(self.func))}
