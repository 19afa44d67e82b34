"""
Shared pytest configuration and fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path to enable importing project modules
# This allows tests to import from 'core', 'models', 'sql' without installation
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests - isolated function-level tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interactions")
    config.addinivalue_line("markers", "smoke: Smoke tests - basic functionality checks")
    config.addinivalue_line("markers", "edge_case: Edge case tests - boundary conditions")


@pytest.fixture
def sql_settings(monkeypatch):
    """
    Swap the global SQL settings for the duration of a test.

    Usage in tests:
        sql_settings(driver='pgsql')
        sql_settings(paramstyle='format')
    """
    from core.config import SqlConfig, config

    def apply(driver=None, paramstyle=None):
        monkeypatch.setattr(
            config,
            'sql',
            SqlConfig(
                driver=driver if driver is not None else config.sql.driver,
                paramstyle=paramstyle if paramstyle is not None else config.sql.paramstyle,
            ),
        )
        return config.sql

    apply(driver='mysql', paramstyle='qmark')
    return apply
