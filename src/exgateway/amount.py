"""
Coin amount policy and unit conversion.

Internally every amount is an integer number of droplets (the smallest
indivisible Skycoin unit). Backend nodes report coins as decimal strings.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from exgateway.errors import InvalidAmountError, MalformedResponseError

DROPLETS_PER_COIN = 1_000_000
DROPLET_PRECISION = 6
MAX_UINT64 = 2**64 - 1


def validate_amount(amount: int, unit: int = DROPLETS_PER_COIN) -> None:
    """
    Check that amount is a whole number of coins.

    Raises:
        InvalidAmountError: If amount is out of uint64 range or not a multiple of unit
    """
    if amount < 0 or amount > MAX_UINT64:
        raise InvalidAmountError(f"Amount out of range: {amount}")
    if amount % unit != 0:
        raise InvalidAmountError(f"Transaction amount must be multiple of {unit}")


def from_backend_units(value: str) -> int:
    """
    Convert a backend decimal coin string ("12", "1.500000") to droplets.

    The conversion is exact. Strings with finer precision than one droplet,
    signs, exponents or values beyond uint64 are rejected.

    Raises:
        MalformedResponseError: If value is not a valid backend amount
    """
    if not isinstance(value, str) or not value or not all(c in "0123456789." for c in value):
        raise MalformedResponseError(f"Invalid coin amount: {value!r}")

    whole, _, fraction = value.partition(".")
    if not whole or "." in fraction:
        raise MalformedResponseError(f"Invalid coin amount: {value!r}")
    if len(fraction) > DROPLET_PRECISION:
        raise MalformedResponseError(
            f"Coin amount {value!r} has more than {DROPLET_PRECISION} decimal places"
        )

    try:
        droplets = int(Decimal(value).scaleb(DROPLET_PRECISION))
    except InvalidOperation as e:
        raise MalformedResponseError(f"Invalid coin amount: {value!r}") from e

    if droplets > MAX_UINT64:
        raise MalformedResponseError(f"Coin amount {value!r} overflows uint64")
    return droplets


def to_backend_units(droplets: int) -> str:
    """
    Convert droplets to the canonical backend coin string.

    Trailing fractional zeros are dropped: 12000000 -> "12", 1500000 -> "1.5".
    """
    if droplets < 0 or droplets > MAX_UINT64:
        raise InvalidAmountError(f"Amount out of range: {droplets}")

    whole, fraction = divmod(droplets, DROPLETS_PER_COIN)
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{DROPLET_PRECISION}d}".rstrip("0")
