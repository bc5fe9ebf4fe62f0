"""
ValidationResult model representing the outcome of validating a record.
"""

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of validating a record against a rule set.

    Attributes:
        record_id: Optional identifier of the validated record
        passed: Overall validation status
        passed_rules: Rules that succeeded
        failed_rules: Error-severity rules that failed
        warnings: Warning-severity rules that failed (do not fail the record)
        errors: Error messages per field, for failed rules of either severity
    """

    record_id: str | None = None
    passed: bool
    passed_rules: list[str] = Field(default_factory=list)
    failed_rules: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v

    def errors_for(self, field_name: str) -> list[str]:
        """Return the error messages recorded for a field (empty if none)."""
        return list(self.errors.get(field_name, []))

    class Config:
        json_schema_extra = {
            "example": {
                "record_id": "TXN0001234567",
                "passed": False,
                "passed_rules": [
                    "transaction_id_not_empty",
                    "amount_range"
                ],
                "failed_rules": [
                    "transaction_id_regex"
                ],
                "warnings": [],
                "errors": {
                    "transaction_id": ["transaction_id failed the regex rule"]
                }
            }
        }
