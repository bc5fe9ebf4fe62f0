"""
kontrolio - predicate-based validation rules and a validator that applies them
to data records.
"""

from .rules import AbstractRule, InvalidArgumentError
from .validation import RuleConfigBuilder, RuleConfigLoader, RuleConfigurationError, Validator

__version__ = "0.1.0"

__all__ = [
    "AbstractRule",
    "InvalidArgumentError",
    "Validator",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleConfigurationError",
]
