"""
Data models for rule configuration and validation outcomes.

All models use Pydantic for runtime validation and type safety.
"""

from .validation_result import ValidationResult
from .validation_rule import RuleType, ValidationRule

__all__ = [
    "RuleType",
    "ValidationRule",
    "ValidationResult",
]
