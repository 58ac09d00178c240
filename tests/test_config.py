"""Tests for environment-driven settings."""

import pytest

from pg_crudgen.config import ConfigError, PlaceholderNumbering, load_settings

_ENV_VARS = (
    "CRUDGEN_LIST_NUMBERING",
    "CRUDGEN_LIST_LIMIT_DEFAULT",
    "CRUDGEN_LIST_LIMIT_MAX",
    "CRUDGEN_VALIDATE_SQL",
    "CRUDGEN_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.list_numbering is PlaceholderNumbering.LEGACY
    assert settings.list_limit_default == 50
    assert settings.list_limit_max == 100
    assert settings.validate_sql is True
    assert settings.log_level == "WARNING"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("CRUDGEN_LIST_NUMBERING", " Sequential ")
    monkeypatch.setenv("CRUDGEN_LIST_LIMIT_DEFAULT", "25")
    monkeypatch.setenv("CRUDGEN_LIST_LIMIT_MAX", "250")
    monkeypatch.setenv("CRUDGEN_VALIDATE_SQL", "false")
    monkeypatch.setenv("CRUDGEN_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.list_numbering is PlaceholderNumbering.SEQUENTIAL
    assert settings.list_limit_default == 25
    assert settings.list_limit_max == 250
    assert settings.validate_sql is False
    assert settings.log_level == "DEBUG"


def test_unknown_numbering_is_rejected(monkeypatch):
    monkeypatch.setenv("CRUDGEN_LIST_NUMBERING", "zero-based")

    with pytest.raises(ConfigError, match="list_numbering"):
        load_settings()


def test_default_limit_above_max_is_rejected(monkeypatch):
    monkeypatch.setenv("CRUDGEN_LIST_LIMIT_DEFAULT", "500")

    with pytest.raises(ConfigError, match="cannot exceed"):
        load_settings()


def test_bad_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("CRUDGEN_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigError, match="log_level"):
        load_settings()
