"""
Address derivation and encoding.
"""

from exgateway.wallet.address import decode_address, pubkey_to_address
from exgateway.wallet.keys import AddressDeriver, AddressEntry, DeriverConfig

__all__ = [
    "AddressDeriver",
    "AddressEntry",
    "DeriverConfig",
    "decode_address",
    "pubkey_to_address",
]
