"""
Deterministic key pair generation for Skycoin-style wallets.

Keys form a chain: each step stretches the current seed through a
secp256k1-based hash, derives one secret key from it, and hands the
stretched seed to the next step. Entry i therefore depends only on
(seed, i).
"""

from __future__ import annotations

from dataclasses import dataclass

from coincurve import PrivateKey
from loguru import logger
from pydantic import BaseModel

from exgateway.crypto import ecdh, sha256
from exgateway.errors import InvalidArgumentError, KeyDerivationError
from exgateway.wallet.address import pubkey_to_address

# Upper bound on rehashes while a digest falls outside the curve order
MAX_KEY_ATTEMPTS = 1024


class DeriverConfig(BaseModel):
    # When set, generated entries carry no secret key
    hide_secret_key: bool = False

    model_config = {"frozen": True}


@dataclass(frozen=True)
class AddressEntry:
    address: str
    public: str
    secret: str = ""


def deterministic_private_key(seed: bytes) -> PrivateKey:
    """Rehash seed until it is a valid secp256k1 secret key."""
    for _ in range(MAX_KEY_ATTEMPTS):
        seed = sha256(seed)
        try:
            return PrivateKey(seed)
        except ValueError:
            continue
    raise KeyDerivationError("Could not derive a valid secret key from seed")


def secp256k1_hash(seed: bytes) -> bytes:
    """Key-stretching hash: sha256(h || ECDH(pub(sha256(h)), sec(h))), h = sha256(seed)."""
    digest = sha256(seed)
    seckey = deterministic_private_key(digest)
    pubkey = deterministic_private_key(sha256(digest)).public_key
    shared = ecdh(pubkey.format(compressed=True), seckey.secret)
    return sha256(digest + shared)


def generate_deterministic_key_pairs(seed: bytes, count: int) -> tuple[bytes, list[PrivateKey]]:
    """
    Generate count deterministic secret keys from seed.

    Returns:
        (next_seed, keys) where next_seed is the seed the chain ended on
    """
    keys: list[PrivateKey] = []
    for _ in range(count):
        next_seed = secp256k1_hash(seed)
        keys.append(deterministic_private_key(sha256(seed + next_seed)))
        seed = next_seed
    return seed, keys


class AddressDeriver:
    """
    Derives batches of address entries from a seed.

    Derivation holds no state; the only input besides (seed, count) is the
    immutable DeriverConfig given at construction.
    """

    def __init__(self, config: DeriverConfig | None = None):
        self.config = config or DeriverConfig()

    @property
    def hide_secret_key(self) -> bool:
        return self.config.hide_secret_key

    def derive(self, seed: bytes, count: int) -> tuple[str, list[AddressEntry]]:
        """
        Generate count address entries from seed.

        Args:
            seed: Non-empty seed bytes
            count: Number of entries, at least 1

        Returns:
            (seed_digest_hex, entries) in derivation order

        Raises:
            InvalidArgumentError: On empty seed or count < 1
            KeyDerivationError: If the crypto library fails
        """
        if not isinstance(seed, bytes | bytearray) or not seed:
            raise InvalidArgumentError("Seed must be non-empty bytes")
        if count < 1:
            raise InvalidArgumentError(f"Address count must be at least 1, got {count}")

        try:
            next_seed, keys = generate_deterministic_key_pairs(bytes(seed), count)
            entries = [self._make_entry(key) for key in keys]
        except ValueError as e:
            raise KeyDerivationError(f"Key derivation failed: {e}") from e

        logger.debug(f"Derived {len(entries)} addresses (hide_secret_key={self.hide_secret_key})")
        return next_seed.hex(), entries

    def _make_entry(self, key: PrivateKey) -> AddressEntry:
        pubkey = key.public_key.format(compressed=True)
        return AddressEntry(
            address=pubkey_to_address(pubkey),
            public=pubkey.hex(),
            secret="" if self.hide_secret_key else key.secret.hex(),
        )
