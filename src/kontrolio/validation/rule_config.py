"""
Rule configuration management.

Loads rule sets from YAML files and provides a builder for
assembling rule configurations in code.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kontrolio.models import ValidationRule

from .exceptions import RuleConfigurationError


class RuleConfigLoader:
    """
    Loads rule sets from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      transaction_id:
        - type: not_empty
        - type: regex
          params:
            pattern: "^TXN[0-9]{10}$"
          message: "{field} must look like TXN0000000000"

      amount:
        - type: type_check
          params:
            expected_type: float
        - type: range
          params:
            min: 0.01
            max: 1000000.00
          severity: warning
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse rules from the YAML file.

        Returns:
            List of rule dictionaries suitable for Validator

        Raises:
            RuleConfigurationError: If YAML is invalid or a rule definition is malformed
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RuleConfigurationError(str(self.config_path), f"Invalid YAML: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise RuleConfigurationError(
                str(self.config_path), "Configuration file must contain 'rules' section"
            )

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise RuleConfigurationError(
                str(self.config_path), "'rules' must map field names to rule lists"
            )

        rules = []
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise RuleConfigurationError(
                    str(field_name), f"Rules for field '{field_name}' must be a list"
                )

            for idx, rule_def in enumerate(field_rule_list):
                rules.append(self._parse_rule(str(field_name), rule_def, idx))

        return rules

    def _parse_rule(self, field_name: str, rule_def: Any, idx: int) -> dict[str, Any]:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML
            idx: Index of this rule for the field (for naming)

        Returns:
            Parsed rule dictionary

        Raises:
            RuleConfigurationError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise RuleConfigurationError(
                f"{field_name}[{idx}]", f"Rule for field '{field_name}' is missing 'type'"
            )

        rule_type = rule_def["type"]
        rule_name = rule_def.get("name", f"{field_name}_{rule_type}_{idx}")

        try:
            rule = ValidationRule(
                rule_name=rule_name,
                rule_type=rule_type,
                field_name=field_name,
                parameters=rule_def.get("params", rule_def.get("parameters")) or {},
                severity=rule_def.get("severity", "error"),
                enabled=rule_def.get("enabled", True),
                message=rule_def.get("message"),
            )
        except ValidationError as e:
            raise RuleConfigurationError(rule_name, f"Invalid rule definition: {e}") from e

        return rule.model_dump()


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.
    """

    def __init__(self):
        self.rules: list[dict[str, Any]] = []

    def _add(
        self,
        rule_name: str,
        rule_type: str,
        field_name: str,
        parameters: dict[str, Any],
        severity: str = "error",
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "severity": severity,
            "enabled": True,
            "message": message,
        })
        return self

    def add_is_null(self, field_name: str, severity: str = "error") -> "RuleConfigBuilder":
        """Add a rule requiring the field to be absent or None."""
        return self._add(f"{field_name}_is_null", "is_null", field_name, {}, severity)

    def add_not_null(self, field_name: str, severity: str = "error") -> "RuleConfigBuilder":
        """Add a rule requiring the field to be present."""
        return self._add(f"{field_name}_not_null", "not_null", field_name, {}, severity)

    def add_not_empty(
        self,
        field_name: str,
        allow_whitespace: bool = False,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a rule requiring a non-empty value."""
        return self._add(
            f"{field_name}_not_empty",
            "not_empty",
            field_name,
            {"allow_whitespace": allow_whitespace},
            severity,
        )

    def add_regex(
        self,
        field_name: str,
        pattern: str,
        message: str | None = None,
        allow_empty: bool = False,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a regex rule."""
        return self._add(
            f"{field_name}_regex",
            "regex",
            field_name,
            {"pattern": pattern, "allow_empty": allow_empty},
            severity,
            message,
        )

    def add_range(
        self,
        field_name: str,
        min_value: float | None = None,
        max_value: float | None = None,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a numeric range rule."""
        params = {}
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value

        return self._add(f"{field_name}_range", "range", field_name, params, severity)

    def add_length(
        self,
        field_name: str,
        min_length: int | None = None,
        max_length: int | None = None,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a length rule."""
        params = {}
        if min_length is not None:
            params["min"] = min_length
        if max_length is not None:
            params["max"] = max_length

        return self._add(f"{field_name}_length", "length", field_name, params, severity)

    def add_type_check(
        self,
        field_name: str,
        expected_type: str,
        coerce: bool = False,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a type check rule."""
        return self._add(
            f"{field_name}_type_check",
            "type_check",
            field_name,
            {"expected_type": expected_type, "coerce": coerce},
            severity,
        )

    def add_callback(
        self,
        field_name: str,
        func: Callable[[Any], Any],
        message: str | None = None,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a rule backed by a custom predicate."""
        rule_name = f"{field_name}_{getattr(func, '__name__', 'callback')}"
        return self._add(rule_name, "callback", field_name, {"func": func}, severity, message)

    def build(self) -> list[dict[str, Any]]:
        """Return a copy of the rule configuration; later additions do not affect it."""
        return [dict(rule) for rule in self.rules]
