"""
Pytest configuration and fixtures for gateway tests.
"""

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from exgateway.backends.skycoin import SkycoinBackend
from exgateway.exchange import Exchange
from exgateway.wallet.keys import AddressDeriver, DeriverConfig

Handler = Callable[[httpx.Request], httpx.Response]

OUTPUT_HASH = "6b27b2b9d2a9f0e4c61e1a0c5bc9a3f8f0f3b8f5a4d27bd5e3ab5e3a93c7e1d2"
SRC_TX = "9e0b7d22b4e51f1e0f1dd9a45c0cc1bd3a8f9b6a5a3e1c0ff2f6d74b8f3c2a11"


class NodeStub:
    """Fake backend node. Records every request and answers via handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler = lambda request: httpx.Response(200, json=[])

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def node_stub() -> NodeStub:
    return NodeStub()


@pytest.fixture
def backend(node_stub: NodeStub) -> Iterator[SkycoinBackend]:
    backend = SkycoinBackend(node_addr="node.test:6420", transport=node_stub.transport())
    yield backend
    backend.close()


@pytest.fixture
def exchange(backend: SkycoinBackend) -> Exchange:
    exchange = Exchange()
    exchange.register(backend)
    return exchange


@pytest.fixture
def deriver() -> AddressDeriver:
    return AddressDeriver(DeriverConfig(hide_secret_key=False))


@pytest.fixture
def test_seed() -> bytes:
    return b"exchange test seed"


@pytest.fixture
def output_hash() -> str:
    return OUTPUT_HASH


@pytest.fixture
def sample_output_record() -> dict[str, Any]:
    """Output record in the shape returned by the node's /outputs endpoint."""
    return {
        "hash": OUTPUT_HASH,
        "time": 1500000000,
        "block_seq": 42,
        "src_tx": SRC_TX,
        "address": "2GgFvqoyk9RjwVzj8tqfcXVXB4orBwoc9qv",
        "coins": "2.500000",
        "hours": 7,
        "calculated_hours": 9,
    }


@pytest.fixture
def sample_uxout() -> dict[str, Any]:
    """Payload of the node's /uxout endpoint."""
    return {
        "uxid": OUTPUT_HASH,
        "time": 1500000000,
        "src_block_seq": 42,
        "src_tx": SRC_TX,
        "owner_address": "2GgFvqoyk9RjwVzj8tqfcXVXB4orBwoc9qv",
        "coins": 2500000,
        "hours": 7,
        "spent_block_seq": 0,
        "spent_tx": "0" * 64,
    }
