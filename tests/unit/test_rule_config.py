"""
Unit tests for rule configuration loading and building.
"""

import pytest

from kontrolio.validation import RuleConfigBuilder, RuleConfigLoader, RuleConfigurationError, Validator


class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    def test_load_rules_from_yaml(self, rules_yaml):
        """Test loading rules from YAML file"""
        path = rules_yaml("""
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
      name: amount_limit
      params:
        min: 0.01
        max: 1000000.00
      severity: warning
""")

        rules = RuleConfigLoader(path).load_rules()

        assert len(rules) == 4
        assert [r["rule_name"] for r in rules] == [
            "transaction_id_not_empty_0",
            "transaction_id_regex_1",
            "amount_type_check_0",
            "amount_limit",
        ]
        assert rules[1]["parameters"] == {"pattern": "^TXN[0-9]{10}$"}
        assert rules[1]["message"] == "{field} must look like TXN0000000000"
        assert rules[3]["severity"] == "warning"
        assert rules[0]["enabled"] is True

    def test_loaded_rules_drive_validator(self, rules_yaml):
        path = rules_yaml("""
rules:
  code:
    - type: regex
      parameters:
        pattern: "[a-z]{2}"
""")

        validator = Validator(RuleConfigLoader(path).load_rules())

        assert validator.validate({"code": "ab"}).passed is True
        assert validator.validate({"code": "жз"}).passed is False

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader(tmp_path / "missing.yaml")

    def test_missing_rules_section_raises(self, rules_yaml):
        path = rules_yaml("fields: {}\n")

        with pytest.raises(RuleConfigurationError) as exc_info:
            RuleConfigLoader(path).load_rules()

        assert "'rules' section" in str(exc_info.value)

    def test_malformed_yaml_raises(self, rules_yaml):
        path = rules_yaml("rules: [unclosed\n")

        with pytest.raises(RuleConfigurationError) as exc_info:
            RuleConfigLoader(path).load_rules()

        assert "Invalid YAML" in str(exc_info.value)

    def test_field_rules_must_be_list(self, rules_yaml):
        path = rules_yaml("rules:\n  name:\n    type: not_empty\n")

        with pytest.raises(RuleConfigurationError):
            RuleConfigLoader(path).load_rules()

    def test_rule_without_type_raises(self, rules_yaml):
        path = rules_yaml("rules:\n  name:\n    - params: {}\n")

        with pytest.raises(RuleConfigurationError) as exc_info:
            RuleConfigLoader(path).load_rules()

        assert "missing 'type'" in str(exc_info.value)

    def test_unknown_rule_type_raises(self, rules_yaml):
        path = rules_yaml("rules:\n  name:\n    - type: telepathy\n")

        with pytest.raises(RuleConfigurationError) as exc_info:
            RuleConfigLoader(path).load_rules()

        assert exc_info.value.rule_name == "name_telepathy_0"

    def test_invalid_severity_raises(self, rules_yaml):
        path = rules_yaml("rules:\n  name:\n    - type: not_empty\n      severity: fatal\n")

        with pytest.raises(RuleConfigurationError):
            RuleConfigLoader(path).load_rules()


class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_builder_chains(self):
        rules = RuleConfigBuilder() \
            .add_not_null("id") \
            .add_length("name", min_length=1, max_length=50) \
            .add_type_check("age", "int") \
            .build()

        assert [r["rule_type"] for r in rules] == ["not_null", "length", "type_check"]
        assert rules[1]["parameters"] == {"min": 1, "max": 50}
        assert rules[2]["parameters"] == {"expected_type": "int", "coerce": False}

    def test_range_omits_unset_bounds(self):
        rules = RuleConfigBuilder().add_range("age", min_value=0).build()

        assert rules[0]["parameters"] == {"min": 0}

    def test_builder_output_accepted_by_validator(self):
        rules = RuleConfigBuilder() \
            .add_is_null("deleted_at") \
            .add_not_empty("name", allow_whitespace=True) \
            .build()

        result = Validator(rules).validate({"name": "  "})

        assert result.passed is True

    def test_every_builder_method_accepts_severity(self):
        rules = RuleConfigBuilder() \
            .add_regex("code", "^[A-Z]+$", severity="warning") \
            .add_length("code", max_length=3, severity="warning") \
            .add_type_check("age", "int", severity="warning") \
            .add_callback("age", bool, severity="warning") \
            .build()

        assert {r["severity"] for r in rules} == {"warning"}

        result = Validator(rules).validate({"code": "abcd", "age": "0"})
        assert result.passed is True
        assert result.warnings == ["code_regex", "code_length", "age_type_check"]

    def test_build_returns_independent_copy(self):
        builder = RuleConfigBuilder().add_not_null("id")

        built = builder.build()
        builder.add_not_null("name")
        built[0]["severity"] = "warning"

        assert len(built) == 1
        assert len(builder.build()) == 2
        assert builder.build()[0]["severity"] == "error"
