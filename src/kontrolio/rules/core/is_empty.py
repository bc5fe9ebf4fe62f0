"""
IsEmpty - passes for None, blank strings and empty collections.
"""

from typing import Any

from ..base import AbstractRule

EMPTY_COLLECTION_TYPES = (list, tuple, dict, set, frozenset)


def is_empty_value(value: Any, allow_whitespace: bool = False) -> bool:
    """
    Decide whether a value counts as empty.

    Args:
        value: The value to inspect
        allow_whitespace: Treat whitespace-only strings as non-empty

    Returns:
        True for None, "" (and whitespace-only strings unless allowed)
        and empty list/tuple/dict/set. Numbers and booleans are never empty.
    """
    if value is None:
        return True

    if isinstance(value, str):
        return value == "" if allow_whitespace else value.strip() == ""

    if isinstance(value, EMPTY_COLLECTION_TYPES):
        return len(value) == 0

    return False


class IsEmpty(AbstractRule):
    """
    Validates that a value is empty.

    Empty means None, an empty or whitespace-only string, or an empty
    list, tuple, dict or set. 0 and False are values, not emptiness.
    """

    def is_valid(self, input: Any = None) -> bool:
        return is_empty_value(input)
