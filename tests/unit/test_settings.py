# tests/unit/test_settings.py
from pathlib import Path

import pytest
from pydantic import ValidationError

import config.settings as settings_mod
from config.settings import TimingSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PERFTIMER_OUTPUT_ROOT", raising=False)
    monkeypatch.delenv("PERFTIMER_LOG_LEVEL", raising=False)
    monkeypatch.setattr(settings_mod, "_settings_singleton", None)


def test_defaults():
    s = TimingSettings()
    assert s.output_root == Path("timings")
    assert s.log_level == "WARNING"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PERFTIMER_OUTPUT_ROOT", str(tmp_path))
    monkeypatch.setenv("PERFTIMER_LOG_LEVEL", "debug")
    s = TimingSettings()
    assert s.output_root == tmp_path
    assert s.log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        TimingSettings(log_level="chatty")


def test_get_settings_is_cached(monkeypatch, tmp_path):
    first = get_settings()
    monkeypatch.setenv("PERFTIMER_OUTPUT_ROOT", str(tmp_path))
    assert get_settings() is first
    refreshed = get_settings(force_refresh=True)
    assert refreshed is not first
    assert refreshed.output_root == tmp_path


def test_unknown_env_log_level_rejected(monkeypatch):
    monkeypatch.setenv("PERFTIMER_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        TimingSettings()
