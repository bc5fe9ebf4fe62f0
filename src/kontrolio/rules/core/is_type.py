"""
IsType - validates and optionally coerces value types.
"""

from typing import Any

from ..base import AbstractRule, InvalidArgumentError


class IsType(AbstractRule):
    """
    Validates that a value matches the expected type.

    Supports optional type coercion (e.g., "99.99" is accepted for float).

    Supported types:
    - int, float, str, bool
    - Custom type names: "integer", "decimal", "string", "boolean"
    """

    TYPE_MAPPING = {
        "integer": int,
        "int": int,
        "decimal": float,
        "float": float,
        "double": float,
        "string": str,
        "str": str,
        "boolean": bool,
        "bool": bool,
    }

    BOOLEAN_STRINGS = {
        "true": True,
        "1": True,
        "yes": True,
        "false": False,
        "0": False,
        "no": False,
    }

    def __init__(self, expected_type: str | type, coerce: bool = False, *, allow_empty: bool = False):
        super().__init__(allow_empty=allow_empty)

        # Map type name to Python type
        if isinstance(expected_type, str):
            mapped = self.TYPE_MAPPING.get(expected_type.lower())
            if mapped is None:
                raise InvalidArgumentError(f"Unsupported type: {expected_type}")
            self.expected_type: type = mapped
        elif isinstance(expected_type, type):
            self.expected_type = expected_type
        else:
            raise InvalidArgumentError(
                f"expected_type must be a type name or a type, got {type(expected_type).__name__}"
            )

        self.coerce = bool(coerce)

    @property
    def name(self) -> str:
        return "type_check"

    def is_valid(self, input: Any = None) -> bool:
        if input is None:
            return False

        if self._matches(input):
            return True

        if not self.coerce:
            return False

        # Constructors of user-supplied types may raise anything
        try:
            self.coerce_value(input)
        except Exception:
            return False
        return True

    def _matches(self, value: Any) -> bool:
        # bool is an int subclass; True is not a number for our purposes
        if isinstance(value, bool) and self.expected_type in (int, float):
            return False
        return isinstance(value, self.expected_type)

    def coerce_value(self, value: Any) -> Any:
        """
        Coerce value to the expected type.

        Args:
            value: The value to coerce

        Returns:
            The coerced value

        Raises:
            ValueError: If coercion fails
        """
        if self._matches(value):
            return value

        # Special handling for bool (avoid "False" -> True)
        if self.expected_type is bool:
            if isinstance(value, str) and value.strip().lower() in self.BOOLEAN_STRINGS:
                return self.BOOLEAN_STRINGS[value.strip().lower()]
            if isinstance(value, int | float) and value in (0, 1):
                return bool(value)
            raise ValueError(f"Cannot parse {value!r} as boolean")

        if self.expected_type is int and isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"Cannot coerce {value!r} to int without losing precision")
            return int(value)

        if self.expected_type in (int, float) and not isinstance(value, str | int | float):
            raise TypeError(f"Cannot coerce {type(value).__name__} to {self.expected_type.__name__}")

        return self.expected_type(value)

    def _describe(self) -> dict[str, Any]:
        return {"expected_type": self.expected_type.__name__, "coerce": self.coerce}
