"""
Skycoin address encoding.

Layout of the decoded address (25 bytes):
    key (20) || version (1) || checksum (4)

where key = RIPEMD160(SHA256(SHA256(pubkey))) and
checksum = SHA256(key || version)[:4].
"""

from __future__ import annotations

from exgateway.crypto import base58_decode, base58_encode, ripemd160, sha256
from exgateway.errors import InvalidArgumentError

ADDRESS_VERSION = 0
ADDRESS_KEY_SIZE = 20
ADDRESS_CHECKSUM_SIZE = 4
ADDRESS_SIZE = ADDRESS_KEY_SIZE + 1 + ADDRESS_CHECKSUM_SIZE


def pubkey_to_address_hash(pubkey: bytes) -> bytes:
    """RIPEMD160(SHA256(SHA256(pubkey)))"""
    return ripemd160(sha256(sha256(pubkey)))


def address_checksum(key: bytes, version: int) -> bytes:
    return sha256(key + bytes([version]))[:ADDRESS_CHECKSUM_SIZE]


def pubkey_to_address(pubkey: bytes, version: int = ADDRESS_VERSION) -> str:
    """Convert a compressed public key to a base58 Skycoin address."""
    if len(pubkey) != 33:
        raise InvalidArgumentError(f"Invalid compressed pubkey length: {len(pubkey)}")

    key = pubkey_to_address_hash(pubkey)
    return base58_encode(key + bytes([version]) + address_checksum(key, version))


def decode_address(address: str) -> tuple[int, bytes]:
    """
    Decode and verify a base58 Skycoin address.

    Returns:
        (version, key) where key is the 20-byte address hash

    Raises:
        InvalidArgumentError: On bad base58, wrong length or checksum mismatch
    """
    raw = base58_decode(address)
    if len(raw) != ADDRESS_SIZE:
        raise InvalidArgumentError(f"Invalid address length: {address!r}")

    key = raw[:ADDRESS_KEY_SIZE]
    version = raw[ADDRESS_KEY_SIZE]
    checksum = raw[ADDRESS_KEY_SIZE + 1 :]

    if version != ADDRESS_VERSION:
        raise InvalidArgumentError(f"Invalid address version {version}: {address!r}")
    if checksum != address_checksum(key, version):
        raise InvalidArgumentError(f"Invalid address checksum: {address!r}")

    return version, key
