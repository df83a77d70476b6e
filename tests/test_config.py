"""
Tests for configuration management.
"""

import pytest
from pydantic import ValidationError

from exgateway.config import Settings, get_settings
from exgateway.wallet.keys import DeriverConfig


def test_default_settings() -> None:
    settings = Settings(_env_file=None)
    assert settings.skycoin_node_addr == "127.0.0.1:6420"
    assert settings.hide_secret_key is False
    assert settings.request_timeout == 30.0
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXGATEWAY_SKYCOIN_NODE_ADDR", "node.internal:16420")
    monkeypatch.setenv("EXGATEWAY_HIDE_SECRET_KEY", "true")
    monkeypatch.setenv("EXGATEWAY_REQUEST_TIMEOUT", "5")

    settings = get_settings()
    assert settings.skycoin_node_addr == "node.internal:16420"
    assert settings.hide_secret_key is True
    assert settings.request_timeout == 5.0


def test_deriver_config() -> None:
    settings = Settings(hide_secret_key=True)
    assert settings.deriver_config() == DeriverConfig(hide_secret_key=True)


@pytest.mark.parametrize(
    "addr", ["127.0.0.1", "127.0.0.1:", ":6420", "host:port", "host:0", "host:70000"]
)
def test_invalid_node_addr(addr: str) -> None:
    with pytest.raises(ValidationError, match="host:port"):
        Settings(skycoin_node_addr=addr)


def test_invalid_timeout() -> None:
    with pytest.raises(ValidationError):
        Settings(request_timeout=0)
