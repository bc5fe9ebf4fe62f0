"""
Exceptions raised while building rule sets.
"""


class RuleConfigurationError(ValueError):
    """Raised when a rule definition cannot be turned into a rule."""

    def __init__(self, rule_name: str, message: str):
        self.rule_name = rule_name
        self.message = message
        super().__init__(f"[{rule_name}] {message}")
