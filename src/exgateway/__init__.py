"""
exgateway - UTXO query and address derivation gateway for exchange services

Routes requests by coin type to backend nodes reached over HTTP and returns
outputs in one uniform representation.
"""

__version__ = "0.1.0"

from exgateway.amount import (
    DROPLETS_PER_COIN,
    from_backend_units,
    to_backend_units,
    validate_amount,
)
from exgateway.backends import UTXO, CoinBackend, Output, SkycoinBackend, SkyUTXO
from exgateway.errors import (
    BackendError,
    BackendUnreachableError,
    GatewayError,
    InvalidAmountError,
    InvalidArgumentError,
    KeyDerivationError,
    MalformedResponseError,
    UnknownCoinError,
)
from exgateway.exchange import CoinType, Exchange, build_exchange
from exgateway.wallet import AddressDeriver, AddressEntry, DeriverConfig

__all__ = [
    "AddressDeriver",
    "AddressEntry",
    "BackendError",
    "BackendUnreachableError",
    "CoinBackend",
    "CoinType",
    "DROPLETS_PER_COIN",
    "DeriverConfig",
    "Exchange",
    "GatewayError",
    "InvalidAmountError",
    "InvalidArgumentError",
    "KeyDerivationError",
    "MalformedResponseError",
    "Output",
    "SkyUTXO",
    "SkycoinBackend",
    "UTXO",
    "UnknownCoinError",
    "build_exchange",
    "from_backend_units",
    "to_backend_units",
    "validate_amount",
]
