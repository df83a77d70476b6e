"""
Coin backend implementations.

Available backends:
- SkycoinBackend: Skycoin node HTTP query API (/outputs, /uxout)

Every backend returns UTXO instances whose coin values are already in the
gateway's internal unit.
"""

from exgateway.backends.base import UTXO, CoinBackend, Output
from exgateway.backends.http import NodeClient
from exgateway.backends.skycoin import SkycoinBackend, SkycoinClient, SkyUTXO, TxOut

__all__ = [
    "CoinBackend",
    "NodeClient",
    "Output",
    "SkyUTXO",
    "SkycoinBackend",
    "SkycoinClient",
    "TxOut",
    "UTXO",
]
