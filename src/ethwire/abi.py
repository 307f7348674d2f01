"""
ABI helpers - signature parsing, selectors and call-data encoding.

Works on human-readable signatures like "transfer(address,uint256)"
rather than JSON ABI artifacts; eth-abi does the actual encoding.
"""

from __future__ import annotations

from typing import Any, Sequence

from eth_abi import decode, encode
from eth_abi.grammar import normalize

from .utils import keccak256


def parse_signature(signature: str) -> tuple[str, list[str]]:
    """
    Split a signature into its name and parameter types.

    Only top-level commas separate parameters, so tuple types such as
    "f((uint256,address),bytes)" come back as ["(uint256,address)", "bytes"].

    Raises:
        ValueError: If the signature has no parameter list or unbalanced parens
    """
    signature = signature.strip()
    start = signature.find("(")
    if start <= 0 or not signature.endswith(")"):
        raise ValueError(f"Invalid signature: {signature!r}")

    name = signature[:start]
    inner = signature[start + 1 : -1]
    types: list[str] = []
    depth = 0
    current = ""
    for char in inner:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise ValueError(f"Unbalanced parentheses in signature: {signature!r}")
        if char == "," and depth == 0:
            types.append(current.strip())
            current = ""
        else:
            current += char
    if depth != 0:
        raise ValueError(f"Unbalanced parentheses in signature: {signature!r}")
    if current.strip():
        types.append(current.strip())
    elif types:
        raise ValueError(f"Empty parameter type in signature: {signature!r}")

    return name, types


def canonical_signature(signature: str) -> str:
    """Normalize type aliases, e.g. "baz(uint,address)" -> "baz(uint256,address)"."""
    name, types = parse_signature(signature)
    return f"{name}({','.join(normalize(t) for t in types)})"


def selector(signature: str) -> bytes:
    """First 4 bytes of keccak256 of the signature string, hashed as given."""
    return keccak256(signature.encode("utf-8"))[:4]


def encode_call(signature: str, args: Sequence[Any]) -> bytes:
    """
    ABI-encode a function call.

    Args:
        signature: Function signature, e.g. "transfer(address,uint256)"
        args: Function arguments

    Returns:
        4-byte selector of the canonical signature followed by encoded args
    """
    canonical = canonical_signature(signature)
    _, types = parse_signature(canonical)
    encoded_args = encode(types, list(args)) if types else b""
    return selector(canonical) + encoded_args


def decode_params(signature: str, data: bytes) -> list[Any]:
    """Decode ABI parameter data according to the types in ``signature``."""
    _, types = parse_signature(signature)
    if not types:
        return []
    return list(decode([normalize(t) for t in types], data))
