"""
Skycoin node backend.

Talks to a Skycoin node's HTTP query API:
    GET /outputs?addrs=<a,b,...>     unspent outputs owned by addresses
    GET /outputs?hashes=<h1,h2,...>  unspent outputs by hash
    GET /uxout?uxid=<hash>           a single output, spent or not

Node records report coins as decimal strings; they are converted to
droplets here and never handed out as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from exgateway.amount import DROPLETS_PER_COIN, from_backend_units
from exgateway.amount import validate_amount as validate_coin_amount
from exgateway.backends.base import UTXO, CoinBackend, Output
from exgateway.backends.http import DEFAULT_REQUEST_TIMEOUT, NodeClient
from exgateway.crypto import sha256_from_hex
from exgateway.errors import MalformedResponseError
from exgateway.wallet.address import decode_address
from exgateway.wallet.keys import AddressDeriver, AddressEntry

DEFAULT_NODE_ADDR = "127.0.0.1:6420"


class _SkyOutputRecord(BaseModel):
    """Output record as returned by the node's /outputs endpoint."""

    hash: str
    src_tx: str
    address: str
    coins: str
    hours: int = Field(ge=0)

    model_config = {"extra": "ignore"}


_records_adapter = TypeAdapter(list[_SkyOutputRecord])


@dataclass(frozen=True)
class SkyUTXO(UTXO):
    hash: str
    src_tx: str
    address: str
    coins: int
    hours: int

    def get_hash(self) -> str:
        return self.hash

    def get_src_tx(self) -> str:
        return self.src_tx

    def get_address(self) -> str:
        return self.address

    def get_coins(self) -> int:
        return self.coins

    def get_hours(self) -> int:
        return self.hours


@dataclass(frozen=True)
class TxOut:
    """Transaction output ready for construction; coins in droplets."""

    address: str
    coins: int
    hours: int


def adapt_output(record: _SkyOutputRecord) -> SkyUTXO:
    """
    Map a node output record to a SkyUTXO. Pure, no I/O.

    Raises:
        MalformedResponseError: If the coin amount cannot be converted
    """
    return SkyUTXO(
        hash=record.hash,
        src_tx=record.src_tx,
        address=record.address,
        coins=from_backend_units(record.coins),
        hours=record.hours,
    )


def _parse_records(payload: Any) -> list[_SkyOutputRecord]:
    # Newer nodes wrap the list: {"head_outputs": [...], "outgoing_outputs": [...], ...}
    if isinstance(payload, dict) and "head_outputs" in payload:
        payload = payload["head_outputs"]

    try:
        return _records_adapter.validate_python(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected outputs payload: {e}") from e


class SkycoinClient(NodeClient):
    """Node client for Skycoin output queries."""

    def fetch_utxos_by_addresses(self, addresses: list[str]) -> list[UTXO]:
        if not addresses:
            return []
        return self._fetch_outputs({"addrs": ",".join(addresses)})

    def fetch_utxos_by_hashes(self, hashes: list[str]) -> list[UTXO]:
        if not hashes:
            return []
        return self._fetch_outputs({"hashes": ",".join(hashes)})

    def fetch_output(self, output_hash: str) -> Output:
        """
        Fetch a single output by hash.

        The hash is validated before any request is sent.

        Raises:
            InvalidArgumentError: If output_hash is not a hex SHA256 digest
            BackendError: If the node rejects the lookup (body is the message)
        """
        sha256_from_hex(output_hash)

        payload = self.get_json("/uxout", {"uxid": output_hash})
        try:
            return Output.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected uxout payload: {e}") from e

    def _fetch_outputs(self, params: dict[str, str]) -> list[UTXO]:
        records = _parse_records(self.get_json("/outputs", params))
        utxos: list[UTXO] = [adapt_output(record) for record in records]
        logger.debug(f"Fetched {len(utxos)} outputs from {self.node_addr}")
        return utxos


class SkycoinBackend(CoinBackend):
    """
    Skycoin backend: node queries plus deterministic address generation.
    """

    coin_type = "skycoin"

    def __init__(
        self,
        node_addr: str = DEFAULT_NODE_ADDR,
        deriver: AddressDeriver | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.node_addr = node_addr
        self.deriver = deriver or AddressDeriver()
        self.client = SkycoinClient(node_addr, timeout=timeout, transport=transport)

    def get_utxos(self, addresses: list[str]) -> list[UTXO]:
        return self.client.fetch_utxos_by_addresses(addresses)

    def get_utxos_by_hashes(self, hashes: list[str]) -> list[UTXO]:
        return self.client.fetch_utxos_by_hashes(hashes)

    def get_output(self, output_hash: str) -> Output:
        return self.client.fetch_output(output_hash)

    def generate_addresses(self, seed: bytes, count: int) -> tuple[str, list[AddressEntry]]:
        return self.deriver.derive(seed, count)

    def validate_amount(self, amount: int) -> None:
        validate_coin_amount(amount, DROPLETS_PER_COIN)

    def make_tx_output(self, address: str, amount: int, hours: int) -> TxOut:
        """
        Build a transaction output.

        Raises:
            InvalidAmountError: If amount is not a whole number of coins
            InvalidArgumentError: If address does not decode
        """
        self.validate_amount(amount)
        decode_address(address)
        return TxOut(address=address, coins=amount, hours=hours)

    def close(self) -> None:
        self.client.close()
