"""
Coin-type registry that routes requests to backends.
"""

from __future__ import annotations

from enum import Enum

import httpx
from loguru import logger

from exgateway.backends.base import CoinBackend
from exgateway.backends.skycoin import SkycoinBackend
from exgateway.config import Settings
from exgateway.errors import UnknownCoinError
from exgateway.wallet.keys import AddressDeriver


class CoinType(str, Enum):
    BITCOIN = "bitcoin"
    SKYCOIN = "skycoin"


class Exchange:
    """Maps coin types to backend instances. Populated once at startup."""

    def __init__(self) -> None:
        self._backends: dict[CoinType, CoinBackend] = {}

    def register(self, backend: CoinBackend) -> None:
        coin_type = CoinType(backend.coin_type)
        if coin_type in self._backends:
            raise ValueError(f"Backend for {coin_type.value} already registered")
        self._backends[coin_type] = backend
        logger.info(f"Registered {coin_type.value} backend: {type(backend).__name__}")

    def get_coin(self, coin_type: str | CoinType) -> CoinBackend:
        """
        Resolve the backend for a coin type identifier.

        Raises:
            UnknownCoinError: If the identifier is unknown or has no backend
        """
        try:
            key = CoinType(coin_type)
        except ValueError as e:
            raise UnknownCoinError(f"Unknown coin type: {coin_type}") from e

        backend = self._backends.get(key)
        if backend is None:
            raise UnknownCoinError(f"No backend registered for coin type: {key.value}")
        return backend

    def coin_types(self) -> list[CoinType]:
        return list(self._backends)

    def close(self) -> None:
        for backend in self._backends.values():
            backend.close()


def build_exchange(settings: Settings, transport: httpx.BaseTransport | None = None) -> Exchange:
    """Create an Exchange with every backend configured in settings."""
    exchange = Exchange()
    exchange.register(
        SkycoinBackend(
            node_addr=settings.skycoin_node_addr,
            deriver=AddressDeriver(settings.deriver_config()),
            timeout=settings.request_timeout,
            transport=transport,
        )
    )
    return exchange
