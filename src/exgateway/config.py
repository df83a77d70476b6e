"""
Configuration management for the gateway.

Read once at startup from EXGATEWAY_* environment variables (or .env).
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from exgateway.wallet.keys import DeriverConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EXGATEWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    skycoin_node_addr: str = "127.0.0.1:6420"

    # Omit secret keys from generated address entries
    hide_secret_key: bool = False

    request_timeout: float = Field(
        default=30.0, gt=0, description="Node request timeout in seconds"
    )

    log_level: str = "INFO"

    @field_validator("skycoin_node_addr")
    @classmethod
    def validate_node_addr(cls, v: str) -> str:
        host, sep, port = v.rpartition(":")
        if not sep or not host or not port.isdigit() or not 0 < int(port) < 65536:
            raise ValueError(f"Node address must be host:port, got {v!r}")
        return v

    def deriver_config(self) -> DeriverConfig:
        return DeriverConfig(hide_secret_key=self.hide_secret_key)


def get_settings() -> Settings:
    return Settings()
