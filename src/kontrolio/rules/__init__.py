"""
Validation rules: the AbstractRule contract and its core implementations.
"""

from .base import AbstractRule, InvalidArgumentError
from .core import Callback, IsEmpty, IsNull, IsType, Length, NotEmpty, NotNull, Range, Regex

__all__ = [
    "AbstractRule",
    "InvalidArgumentError",
    "IsNull",
    "NotNull",
    "IsEmpty",
    "NotEmpty",
    "Regex",
    "Range",
    "Length",
    "IsType",
    "Callback",
]
