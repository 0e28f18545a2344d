import pytest

import config
from core.errors import ConfigurationError


def test_token_from_env(monkeypatch):
    monkeypatch.setenv("TG_TOKEN", "1:a")
    assert config.get_bot_token() == "1:a"


def test_legacy_name(monkeypatch):
    monkeypatch.delenv("TG_TOKEN", raising=False)
    monkeypatch.setenv("TELEGRAM_TOKEN", "2:b")
    assert config.get_bot_token() == "2:b"


def test_missing(monkeypatch):
    monkeypatch.delenv("TG_TOKEN", raising=False)
    monkeypatch.delenv("TELEGRAM_TOKEN", raising=False)
    with pytest.raises(ConfigurationError):
        config.get_bot_token()
