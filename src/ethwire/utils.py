from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from eth_hash.auto import keccak

# Amount: plain wei, or an (amount, unit) pair such as (50, "gwei")
Amount = Union[int, tuple[Union[int, float, str, Decimal], str]]

UNITS: dict[str, int] = {
    "wei": 1,
    "kwei": 10**3,
    "mwei": 10**6,
    "gwei": 10**9,
    "szabo": 10**12,
    "finney": 10**15,
    "ether": 10**18,
}


def keccak256(data: bytes) -> bytes:
    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    return keccak(data)


def encode_hex(data: bytes) -> str:
    return "0x" + bytes(data).hex()


def encode_quantity(value: int) -> str:
    """Encode an integer as a JSON-RPC quantity (no leading zeros, ``0x0`` for zero)."""
    if value < 0:
        raise ValueError(f"Quantity must be non-negative: {value}")
    return hex(value)


def decode_hex(value: str) -> bytes:
    """
    Decode a 0x-prefixed hex string.

    Odd-length input (as returned for quantities such as ``0x4``) is
    left-padded with a zero nibble.

    Raises:
        ValueError: If value is not a hex string
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected hex string, got {type(value).__name__}")
    digits = value[2:] if value[:2] in ("0x", "0X") else value
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def to_address(value: Union[str, bytes]) -> bytes:
    """Normalize a 0x-prefixed hex address or raw bytes to 20 bytes."""
    raw = decode_hex(value) if isinstance(value, str) else bytes(value)
    if len(raw) != 20:
        raise ValueError(f"Address must be 20 bytes, got {len(raw)}")
    return raw


def to_checksum_address(address: Union[str, bytes]) -> str:
    """Convert an address to EIP-55 checksummed format.

    eth-account requires checksummed addresses in transaction fields.
    """
    addr = to_address(address).hex()
    addr_hash = keccak256(addr.encode("utf-8")).hex()
    result = "0x"
    for i, c in enumerate(addr):
        if c in "abcdef":
            result += c.upper() if int(addr_hash[i], 16) >= 8 else c
        else:
            result += c
    return result


def to_wei(amount: Amount) -> int:
    """
    Convert an amount to wei.

    Args:
        amount: Integer wei, or an (amount, unit) tuple like (50, "gwei")

    Returns:
        Amount in wei, rounded up when the amount has a fractional wei part

    Raises:
        ValueError: If the unit is unknown
    """
    if isinstance(amount, int):
        return amount
    value, unit = amount
    try:
        multiplier = UNITS[unit.lower()]
    except KeyError:
        raise ValueError(f"Unknown unit: {unit!r}") from None
    return math.ceil(Decimal(str(value)) * multiplier)


def apply_buffer(amount: int, factor: Union[int, float, Decimal]) -> int:
    """Multiply an estimate by a safety factor, rounding up to a whole integer."""
    return math.ceil(Decimal(amount) * Decimal(str(factor)))
