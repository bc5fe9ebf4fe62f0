"""
ValidationRule model representing a configured rule applied to one field.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

RuleType = Literal[
    "is_null",
    "not_null",
    "is_empty",
    "not_empty",
    "regex",
    "range",
    "length",
    "type_check",
    "callback",
]


class ValidationRule(BaseModel):
    """
    A configured rule applied to one field of incoming data.

    Attributes:
        rule_name: Human-readable name ("require_transaction_id")
        rule_type: Registered rule name, e.g. "not_empty", "regex", "range"
        field_name: Which field this rule applies to
        parameters: Rule constructor arguments (e.g., {"min": 0, "max": 100})
        enabled: Whether rule is active
        severity: "error" (fails the record) or "warning" (reported only)
        message: Optional error message template ({field} and {rule} placeholders)
    """

    rule_name: str = Field(..., min_length=1)
    rule_type: RuleType
    field_name: str = Field(..., min_length=1)
    parameters: dict[str, Any] = Field(default_factory=dict)
    enabled: bool = True
    severity: Literal["error", "warning"] = "error"
    message: str | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "rule_name": "transaction_id_regex",
                "rule_type": "regex",
                "field_name": "transaction_id",
                "parameters": {"pattern": "^TXN[0-9]{10}$"},
                "enabled": True,
                "severity": "error",
                "message": "{field} must look like TXN0000000000"
            }
        }
