"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from typing import Any, Dict, List

import pytest

from scaled_decimal.core import config as config_module


@pytest.fixture
def decimal_test_cases() -> List[Dict[str, Any]]:
    """Parsing test cases: input, expected unscaled value, scale and canonical string."""
    return [
        {'input': '1.23', 'unscaled': 123, 'scale': 2, 'canonical': '1.23'},
        {'input': '1.230', 'unscaled': 123, 'scale': 2, 'canonical': '1.23'},
        {'input': '42', 'unscaled': 42, 'scale': 0, 'canonical': '42'},
        {'input': '-0.05', 'unscaled': -5, 'scale': 2, 'canonical': '-0.05'},
        {'input': '-0.00', 'unscaled': 0, 'scale': 0, 'canonical': '0'},
        {'input': '7.000', 'unscaled': 7, 'scale': 0, 'canonical': '7'},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and a fresh global config."""
    monkeypatch.setenv('SCALED_DECIMAL_ENV', 'test')
    monkeypatch.setenv('LOG_LEVEL', 'INFO')
    monkeypatch.setenv('OUTPUT_FORMAT', 'string')
    monkeypatch.setenv('BASE_UNIT_DECIMALS', '18')
    monkeypatch.delenv('DEBUG', raising=False)

    # Each test builds its own configuration from the patched environment
    monkeypatch.setattr(config_module, '_config', None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "decimal: Tests for decimal arithmetic and precision"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )
