"""
Hashing and encoding primitives shared by key derivation and address handling.
"""

from __future__ import annotations

import hashlib

from coincurve import PublicKey

from exgateway.errors import InvalidArgumentError

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
SHA256_SIZE = 32


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    h = hashlib.new("ripemd160")
    h.update(data)
    return h.digest()


def base58_encode(data: bytes) -> str:
    num = int.from_bytes(data, "big")

    result = ""
    while num > 0:
        num, remainder = divmod(num, 58)
        result = BASE58_ALPHABET[remainder] + result

    for byte in data:
        if byte == 0:
            result = BASE58_ALPHABET[0] + result
        else:
            break

    return result


def base58_decode(value: str) -> bytes:
    """Decode a base58 string. Leading '1' characters become zero bytes."""
    num = 0
    for char in value:
        index = BASE58_ALPHABET.find(char)
        if index < 0:
            raise InvalidArgumentError(f"Invalid base58 character: {char!r}")
        num = num * 58 + index

    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    pad = len(value) - len(value.lstrip(BASE58_ALPHABET[0]))
    return b"\x00" * pad + body


def sha256_from_hex(value: str) -> bytes:
    """
    Parse a hex encoded SHA256 digest.

    Raises:
        InvalidArgumentError: If value is not hex or does not decode to 32 bytes
    """
    try:
        digest = bytes.fromhex(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"invalid output hash, {e}") from e

    if len(digest) != SHA256_SIZE:
        raise InvalidArgumentError(
            f"invalid output hash, expected {SHA256_SIZE} bytes, got {len(digest)}"
        )
    return digest


def ecdh(pubkey: bytes, seckey: bytes) -> bytes:
    """Compressed encoding of pubkey * seckey on secp256k1."""
    return PublicKey(pubkey).multiply(seckey).format(compressed=True)
