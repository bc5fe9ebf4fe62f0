"""
Pytest configuration and fixtures for kontrolio tests

This module provides shared fixtures for the unit tests.
"""
import logging

import pytest

from kontrolio.validation import RuleConfigBuilder


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )


# =======================
# RULE FIXTURES
# =======================

@pytest.fixture
def transaction_rules() -> list[dict]:
    """
    Rule set for transaction records

    Returns:
        Rule configurations covering presence, format, type and range checks
    """
    return (
        RuleConfigBuilder()
        .add_not_empty("transaction_id")
        .add_regex("transaction_id", r"^TXN[0-9]{10}$")
        .add_type_check("amount", "float", coerce=True)
        .add_range("amount", min_value=0.01, max_value=10000.0)
        .add_length("note", max_length=20)
        .build()
    )


@pytest.fixture
def valid_transaction() -> dict:
    """A transaction record that satisfies transaction_rules"""
    return {
        "id": "1",
        "transaction_id": "TXN0000000001",
        "amount": 99.99,
        "note": "groceries",
    }


@pytest.fixture
def rules_yaml(tmp_path):
    """
    Write a YAML rule file and return a factory for its path

    Returns:
        Callable taking YAML text and returning the written Path
    """
    def _write(content: str):
        path = tmp_path / "rules.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def captured_logs():
    """
    Attach a list-backed handler to the kontrolio logger

    Yields:
        List of LogRecord objects emitted while the test runs
    """
    records: list[logging.LogRecord] = []

    class _ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    handler = _ListHandler(level=logging.DEBUG)
    logger = logging.getLogger("kontrolio")
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield records

    logger.removeHandler(handler)
    logger.setLevel(previous_level)
