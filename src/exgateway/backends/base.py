"""
Base coin backend interface and the uniform UTXO capability set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from exgateway.wallet.keys import AddressEntry


class UTXO(ABC):
    """
    Spendable output as seen by callers, regardless of backend.

    get_coins() is always in the gateway's internal unit. get_hours() is the
    backend's secondary value field (coin hours for Skycoin).
    """

    @abstractmethod
    def get_hash(self) -> str: ...

    @abstractmethod
    def get_src_tx(self) -> str: ...

    @abstractmethod
    def get_address(self) -> str: ...

    @abstractmethod
    def get_coins(self) -> int: ...

    @abstractmethod
    def get_hours(self) -> int: ...

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.get_hash(),
            "src_tx": self.get_src_tx(),
            "address": self.get_address(),
            "coins": self.get_coins(),
            "hours": self.get_hours(),
        }


class Output(BaseModel):
    """Single output looked up by its hash (uxid)."""

    uxid: str
    time: int = 0
    src_block_seq: int = 0
    src_tx: str = ""
    owner_address: str
    coins: int = Field(ge=0)
    hours: int = Field(default=0, ge=0)
    spent_block_seq: int = 0
    spent_tx: str = ""

    model_config = {"frozen": True, "extra": "ignore"}


class CoinBackend(ABC):
    """
    Coin-type-specific composition of node client, UTXO adapter and address
    deriver. Implementations hold no mutable state besides their HTTP client,
    so a single instance can serve concurrent callers.
    """

    coin_type: str

    @abstractmethod
    def get_utxos(self, addresses: list[str]) -> list[UTXO]:
        """Get UTXOs owned by the given addresses"""

    @abstractmethod
    def get_utxos_by_hashes(self, hashes: list[str]) -> list[UTXO]:
        """Get UTXOs by their output hashes"""

    @abstractmethod
    def get_output(self, output_hash: str) -> Output:
        """Get a single output by hash"""

    @abstractmethod
    def generate_addresses(self, seed: bytes, count: int) -> tuple[str, list[AddressEntry]]:
        """Derive count addresses from seed, returns (seed_digest_hex, entries)"""

    @abstractmethod
    def validate_amount(self, amount: int) -> None:
        """Raise InvalidAmountError if amount is not spendable on this coin"""

    def close(self) -> None:
        """Close backend connection"""
        pass

    def __enter__(self) -> CoinBackend:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
