from pathlib import Path

import pytest

from apodview.config import APOD_URL, Settings
from apodview.i18n import t

_VARS = [
    "NASA_API_KEY",
    "APOD_API_URL",
    "APOD_TIMEOUT",
    "APOD_DOWNLOAD_DIR",
    "APOD_TOAST_DURATION",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env):
    s = Settings.from_env()
    assert s.api_key == "DEMO_KEY"
    assert s.api_url == APOD_URL
    assert s.timeout == 10
    assert s.download_dir == Path("downloads")
    assert s.toast_duration == "short"
    assert s.log_level == "INFO"


def test_settings_overrides(clean_env):
    clean_env.setenv("NASA_API_KEY", "abc")
    clean_env.setenv("APOD_TIMEOUT", "2.5")
    clean_env.setenv("APOD_DOWNLOAD_DIR", "/tmp/apod")
    clean_env.setenv("LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert (s.api_key, s.timeout, s.download_dir, s.log_level) == (
        "abc",
        2.5,
        Path("/tmp/apod"),
        "DEBUG",
    )


def test_empty_api_key_falls_back_to_demo(clean_env):
    clean_env.setenv("NASA_API_KEY", "")
    assert Settings.from_env().api_key == "DEMO_KEY"


def test_bad_timeout_raises(clean_env):
    clean_env.setenv("APOD_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="APOD_TIMEOUT"):
        Settings.from_env()


def test_t_falls_back_to_english_then_key():
    assert t("info", "fr") == t("info", "en")
    assert t("no_such_key", "es") == "no_such_key"
    assert t("label_date", "es") == "Fecha"
