"""Tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from wordquiz.config import DEFAULT_WORD_LIST, Settings, get_settings


def test_test_run_ignores_host_environment():
    settings = get_settings()

    assert settings.debug is False
    assert settings.storage_path is None
    assert settings.enforce_format_on_check is False
    assert settings.word_list_path == DEFAULT_WORD_LIST


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STORAGE_PATH", str(tmp_path / "store.json"))
    monkeypatch.setenv("ENFORCE_FORMAT_ON_CHECK", "true")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    settings = Settings()

    assert settings.storage_path == tmp_path / "store.json"
    assert settings.enforce_format_on_check is True
    assert settings.origins == ["http://a.test", "http://b.test"]


def test_bad_boolean_rejected(monkeypatch):
    monkeypatch.setenv("DEBUG", "release")
    with pytest.raises(ValidationError):
        Settings()
