"""
Test Configuration and Fixtures

Provides shared fixtures and marker registration for the test suite.
"""

import os

import pytest

# Keep log output quiet unless a test opts in.
os.environ.setdefault("PLATFORM_LOG_LEVEL", "WARNING")

from platform_common.configuration import get_config_provider  # noqa: E402
from platform_common.logging_setup import configure_logging  # noqa: E402
from platform_common.settings import get_settings  # noqa: E402


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (>1s)")


def pytest_collection_modifyitems(config, items):
    """Every test without an explicit tier is a unit test."""
    for item in items:
        if item.get_closest_marker("unit"):
            continue
        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True, scope="session")
def _configure_logging():
    get_settings.cache_clear()
    configure_logging()


@pytest.fixture(autouse=True)
def _reset_global_config():
    """Ensure no test leaks the process-wide configuration into another."""
    get_config_provider().reset()
    yield
    get_config_provider().reset()
    get_settings.cache_clear()


@pytest.fixture
def config_dir(tmp_path):
    """Directory holding a `service.yaml` base source."""
    (tmp_path / "service.yaml").write_text(
        "db:\n"
        "  host: localhost\n"
        "  port: 5432\n"
        "feature:\n"
        "  enabled: false\n"
        "SHARED_KEY: from-file\n",
        encoding="utf-8",
    )
    return tmp_path
