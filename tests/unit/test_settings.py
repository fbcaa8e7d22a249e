from __future__ import annotations

import pytest
import structlog

from platform_common.logging_setup import configure_logging
from platform_common.settings import Settings, get_settings


@pytest.mark.unit
def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("PLATFORM_ENVIRONMENT", raising=False)
    monkeypatch.delenv("PLATFORM_CONFIG_SEARCH_PATH", raising=False)
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.environment == "dev"
    assert settings.environment_id == 1
    assert settings.config_search_path == [".", "config"]


@pytest.mark.unit
def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("PLATFORM_ENVIRONMENT", "prod")
    monkeypatch.setenv("PLATFORM_CONFIG_SEARCH_PATH", '["/etc/platform"]')
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.environment_id == 3
    assert settings.config_search_path == ["/etc/platform"]


@pytest.mark.unit
def test_configure_logging_respects_level(capsys):
    configure_logging(Settings(log_level="ERROR", log_format="json"))
    logger = structlog.get_logger()

    logger.info("hidden")
    logger.error("shown", key="value")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert '"event": "shown"' in out
    assert '"key": "value"' in out

    configure_logging(Settings(log_level="WARNING"))
