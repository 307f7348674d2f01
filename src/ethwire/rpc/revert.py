"""
Revert data decoding.

Matches the 4-byte selector of revert data against a list of known
custom error signatures and decodes the parameters. Standard Solidity
panic codes are translated to readable phrases.

See https://blog.soliditylang.org/2021/04/21/custom-errors/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from eth_abi.exceptions import ABITypeError, DecodingError, NoEntriesFound, ParseError

from ..abi import decode_params, selector
from ..errors import RevertDecodeError

PANIC_SIGNATURE = "Panic(uint256)"

# From https://blog.soliditylang.org/2020/10/28/solidity-0.8.x-preview/
PANIC_CODES: dict[int, str] = {
    0x01: "assertion failure",
    0x11: "arithmetic error: overflow or underflow",
    0x12: "failed to convert value to enum",
    0x21: "popped from empty array",
    0x32: "out-of-bounds array access",
    0x41: "out of memory",
    0x51: "called a zero-initialized variable of internal function type",
}


@dataclass(frozen=True)
class DecodedRevert:
    """
    A revert matched to a known error.

    Attributes:
        signature: Matching error signature, or a fixed phrase for known panics
        params: Decoded parameters; None when only the signature is shown
    """

    signature: str
    params: Optional[list[Any]]

    def __str__(self) -> str:
        if self.params is None:
            return self.signature
        return f"{self.signature}{self.params!r}"


def decode_revert(data: bytes, errors: Iterable[str] = ()) -> Optional[DecodedRevert]:
    """
    Decode revert data against known error signatures.

    Panic(uint256) is always tried first. The first signature whose
    selector matches wins.

    Args:
        data: Raw revert bytes (selector + ABI-encoded params)
        errors: Known custom error signatures, e.g. ["Unauthorized()"]

    Returns:
        DecodedRevert, or None if no signature matches

    Raises:
        RevertDecodeError: If data is shorter than a selector or the
            params do not decode as the matched signature's types
    """
    if len(data) < 4:
        raise RevertDecodeError(f"revert data too short: {len(data)} bytes")

    error_selector, error_data = data[:4], data[4:]
    candidates = [PANIC_SIGNATURE, *errors]

    match = next((sig for sig in candidates if selector(sig) == error_selector), None)
    if match is None:
        return None

    try:
        params = decode_params(match, error_data)
    except (DecodingError, ParseError, ABITypeError, NoEntriesFound, ValueError) as exc:
        raise RevertDecodeError(f"cannot decode {match}: {exc}") from exc

    if match == PANIC_SIGNATURE and params[0] in PANIC_CODES:
        return DecodedRevert(PANIC_CODES[params[0]], None)

    return DecodedRevert(match, params)
