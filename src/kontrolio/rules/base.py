"""
Base rule interface for all validation rules.

All rules must inherit from AbstractRule and implement the is_valid() method.
"""

import re
from abc import ABC, abstractmethod
from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a rule is constructed with an argument of the wrong type or value."""


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class AbstractRule(ABC):
    """
    Abstract base class for all rules.

    A rule is a predicate over a single input value. is_valid() must return
    a bool for every input and never raise: input of an unexpected type is
    simply not valid. Configuration is checked once, in the constructor.
    """

    def __init__(self, *, allow_empty: bool = False):
        """
        Initialize rule.

        Args:
            allow_empty: Treat None and "" as passing without running the rule
        """
        self._allow_empty = bool(allow_empty)

    @abstractmethod
    def is_valid(self, input: Any = None) -> bool:
        """
        Check a value against this rule.

        Args:
            input: The value to check

        Returns:
            True if the value satisfies the rule, False otherwise
        """
        pass

    @property
    def name(self) -> str:
        """Return the rule identifier (snake_case class name)."""
        return _CAMEL_BOUNDARY.sub("_", self.__class__.__name__).lower()

    @property
    def empty_value_allowed(self) -> bool:
        return self._allow_empty

    def _describe(self) -> dict[str, Any]:
        """Configuration shown by __repr__; overridden by configurable rules."""
        return {}

    def __repr__(self) -> str:
        params = ", ".join(f"{key}={value!r}" for key, value in self._describe().items())
        return f"{self.__class__.__name__}({params})"
