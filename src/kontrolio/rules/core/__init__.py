"""
Core rule implementations.

Provides rules for null and emptiness checks, regex patterns, numeric
ranges, lengths, types and custom predicates.
"""

from .callback import Callback
from .is_empty import IsEmpty
from .is_null import IsNull
from .is_type import IsType
from .length import Length
from .not_empty import NotEmpty
from .not_null import NotNull
from .range import Range
from .regex import Regex

__all__ = [
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
