from pathlib import Path

import pytest
from pydantic import ValidationError

from finance_engine.config import Settings, get_settings


def test_defaults(monkeypatch):
    for key in ("FINANCE_SEED_PATH", "FINANCE_OVERVIEW_MONTHS", "FINANCE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings(_env_file=None)
    assert settings.seed_path == Path("data/seed.json")
    assert settings.overview_months == 6
    assert settings.recent_limit == 4
    assert settings.page_size == 10
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FINANCE_OVERVIEW_MONTHS", "12")
    monkeypatch.setenv("FINANCE_LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.overview_months == 12
    assert settings.log_level == "DEBUG"


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, overview_months=0)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
