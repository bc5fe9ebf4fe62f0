"""
Validator and rule set configuration management.
"""

from .exceptions import RuleConfigurationError
from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .validator import Validator

__all__ = [
    "Validator",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleConfigurationError",
]
