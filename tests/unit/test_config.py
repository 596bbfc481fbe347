"""Tests for Settings defaults, environment overrides and validation."""

import pytest
from pydantic import ValidationError

from charfinder.core.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("UNICODE_DATA_URL", "UNICODE_DATA_PATH", "QUERY_PARAM_NAME"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.unicode_data_url == "http://www.unicode.org/Public/UNIDATA/UnicodeData.txt"
    assert settings.unicode_data_path == "UnicodeData.txt"
    assert settings.query_param_name == "query"
    assert settings.dataset_cache_enabled is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNICODE_DATA_PATH", "/tmp/ucd.txt")
    monkeypatch.setenv("DATASET_PRELOAD", "true")
    monkeypatch.setenv("NAME_INDEX_ENABLED", "false")
    settings = Settings(_env_file=None)
    assert settings.unicode_data_path == "/tmp/ucd.txt"
    assert settings.dataset_preload is True
    assert settings.name_index_enabled is False


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"unicode_data_url": ""}, "UNICODE_DATA_URL"),
        ({"unicode_data_path": ""}, "UNICODE_DATA_PATH"),
        ({"download_timeout_seconds": 0}, "DOWNLOAD_TIMEOUT_SECONDS"),
        ({"query_param_name": ""}, "QUERY_PARAM_NAME"),
    ],
)
def test_invalid_values_rejected(overrides: dict, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        Settings(_env_file=None, **overrides)


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
