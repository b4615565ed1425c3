import pytest

from santa_draw.core.config import load_settings

ENV_VARS = ["LOG_LEVEL", "LOG_PATH", "SANTA_MAX_ATTEMPTS", "SANTA_SEED"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.log_path is None
    assert settings.max_attempts == 1000
    assert settings.seed is None


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_PATH", "logs/santa.log")
    monkeypatch.setenv("SANTA_MAX_ATTEMPTS", "250")
    monkeypatch.setenv("SANTA_SEED", "42")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_path == "logs/santa.log"
    assert settings.max_attempts == 250
    assert settings.seed == 42


@pytest.mark.parametrize("value", ["0", "-3"])
def test_max_attempts_must_be_positive(monkeypatch, value):
    monkeypatch.setenv("SANTA_MAX_ATTEMPTS", value)
    with pytest.raises(ValueError):
        load_settings()


@pytest.mark.parametrize("name", ["SANTA_MAX_ATTEMPTS", "SANTA_SEED"])
def test_integers_are_validated(monkeypatch, name):
    monkeypatch.setenv(name, "lots")
    with pytest.raises(ValueError, match=name):
        load_settings()


def test_explicit_values_skip_environment(monkeypatch):
    monkeypatch.setenv("SANTA_MAX_ATTEMPTS", "lots")
    monkeypatch.setenv("SANTA_SEED", "nope")
    settings = load_settings(log_level="info", max_attempts=7, seed=3)
    assert settings.log_level == "INFO"
    assert settings.max_attempts == 7
    assert settings.seed == 3


def test_explicit_max_attempts_is_validated():
    with pytest.raises(ValueError):
        load_settings(max_attempts=0)
