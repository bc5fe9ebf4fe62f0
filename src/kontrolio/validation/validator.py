"""
Validator for applying rules to data records.

The validator builds rule instances from configuration, applies them to
the fields of a record, and produces validation results.
"""

from typing import Any

from pydantic import ValidationError

from kontrolio.models import ValidationResult, ValidationRule
from kontrolio.observability.logger import get_logger, log_operation
from kontrolio.rules import (
    AbstractRule,
    Callback,
    IsEmpty,
    IsNull,
    IsType,
    Length,
    NotEmpty,
    NotNull,
    Range,
    Regex,
)
from kontrolio.rules.core.is_empty import is_empty_value

from .exceptions import RuleConfigurationError

logger = get_logger(__name__)

DEFAULT_MESSAGE = "{field} failed the {rule} rule"


def _render_message(template: str | None, field_name: str, rule_name: str) -> str:
    # Plain substitution; templates may contain regex braces
    return (template or DEFAULT_MESSAGE).replace("{field}", field_name).replace("{rule}", rule_name)


class Validator:
    """
    Applies configured rules to data records.

    Rules are built once from configuration and applied to records in order,
    collecting every failure with a message per field.
    """

    RULE_REGISTRY: dict[str, type[AbstractRule]] = {
        "is_null": IsNull,
        "not_null": NotNull,
        "is_empty": IsEmpty,
        "not_empty": NotEmpty,
        "regex": Regex,
        "range": Range,
        "length": Length,
        "type_check": IsType,
        "callback": Callback,
    }

    def __init__(self, rules: list[dict[str, Any]], stop_on_first_failure: bool = False):
        """
        Initialize the validator with rule configurations.

        Args:
            rules: List of rule configurations, each containing:
                   - rule_name: str
                   - rule_type: str (a RULE_REGISTRY key)
                   - field_name: str
                   - parameters: Dict[str, Any] (optional, rule constructor arguments)
                   - severity: str (error or warning)
                   - enabled: bool (default True)
                   - message: str (optional, "{field}" and "{rule}" are substituted)
            stop_on_first_failure: Skip the remaining rules of a field once
                   one of its error-severity rules has failed
        """
        self.rules = rules
        self.stop_on_first_failure = stop_on_first_failure
        self.compiled: list[tuple[str, str, str, str | None, AbstractRule]] = []
        self._build_rules()

    def _build_rules(self) -> None:
        """Build rule instances from rule configurations."""
        for idx, rule in enumerate(self.rules):
            config = self._parse_rule(rule, idx)
            if not config.enabled:
                continue

            rule_name = config.rule_name
            rule_type = config.rule_type
            field_name = config.field_name
            parameters = config.parameters
            severity = config.severity
            message = config.message

            rule_class = self.RULE_REGISTRY[rule_type]

            try:
                instance = rule_class(**parameters)
            except (TypeError, ValueError) as e:
                raise RuleConfigurationError(rule_name, f"Failed to create {rule_type} rule: {e}") from e

            logger.debug(f"Built rule {rule_name}: {instance!r} on field '{field_name}'")
            self.compiled.append((rule_name, field_name, severity, message, instance))

    def _parse_rule(self, rule: Any, idx: int) -> ValidationRule:
        """
        Check a rule configuration against the ValidationRule model.

        Args:
            rule: The rule configuration dict
            idx: Position of the rule in the list (names unnamed rules in errors)

        Returns:
            The validated ValidationRule

        Raises:
            RuleConfigurationError: If the configuration is malformed or its type is unknown
        """
        if not isinstance(rule, dict):
            raise RuleConfigurationError(
                f"rules[{idx}]", f"Rule configuration must be a dict, got {type(rule).__name__}"
            )

        rule_name = str(rule.get("rule_name") or f"rules[{idx}]")

        rule_type = rule.get("rule_type")
        if not isinstance(rule_type, str) or rule_type not in self.RULE_REGISTRY:
            raise RuleConfigurationError(rule_name, f"Unknown rule type: {rule_type}")

        try:
            return ValidationRule.model_validate({**rule, "parameters": rule.get("parameters") or {}})
        except ValidationError as e:
            raise RuleConfigurationError(rule_name, f"Invalid rule definition: {e}") from e

    def validate(self, data: dict[str, Any], record_id: str | None = None) -> ValidationResult:
        """
        Validate a record against all rules.

        Args:
            data: Field name -> value mapping; missing fields are checked as None
            record_id: Optional identifier copied into the result

        Returns:
            ValidationResult containing pass/fail status and error messages
        """
        passed_rules = []
        failed_rules = []
        warnings = []
        errors: dict[str, list[str]] = {}
        failed_fields: set[str] = set()

        for rule_name, field_name, severity, message, rule in self.compiled:
            if self.stop_on_first_failure and field_name in failed_fields:
                continue

            value = data.get(field_name)

            if rule.empty_value_allowed and is_empty_value(value, allow_whitespace=True):
                passed_rules.append(rule_name)
                continue

            if rule.is_valid(value):
                passed_rules.append(rule_name)
                continue

            logger.debug(f"Rule {rule_name} failed for field '{field_name}'")
            errors.setdefault(field_name, []).append(_render_message(message, field_name, rule.name))

            if severity == "error":
                failed_rules.append(rule_name)
                failed_fields.add(field_name)
            else:
                # Warning: report but don't fail the record
                warnings.append(rule_name)

        return ValidationResult(
            record_id=record_id,
            passed=len(failed_rules) == 0,
            passed_rules=passed_rules,
            failed_rules=failed_rules,
            warnings=warnings,
            errors=errors,
        )

    def validate_batch(self, records: list[dict[str, Any]]) -> list[ValidationResult]:
        """
        Validate a batch of records.

        Records carrying an "id" field get it as their result's record_id.

        Args:
            records: List of field name -> value mappings

        Returns:
            List of ValidationResult objects, one per record
        """
        results = []
        with log_operation("Validating batch", logger=logger, batch_size=len(records)) as op:
            for record in records:
                record_id = record.get("id")
                results.append(self.validate(record, None if record_id is None else str(record_id)))

            op.fields["failed"] = sum(1 for result in results if not result.passed)

        return results

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts and types
        """
        return {
            "total_rules": len(self.compiled),
            "rules_by_type": self._count_by_type(),
            "rules_by_severity": self._count_by_severity(),
        }

    def _count_by_type(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for _, _, _, _, rule in self.compiled:
            counts[rule.name] = counts.get(rule.name, 0) + 1
        return counts

    def _count_by_severity(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for _, _, severity, _, _ in self.compiled:
            counts[severity] = counts.get(severity, 0) + 1
        return counts
