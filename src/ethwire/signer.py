"""
Transaction signers.

A Signer exposes the sending address and chain id, and turns a dict
of transaction fields into raw signed bytes. LocalSigner keeps an
ECDSA/secp256k1 key in process via eth-account; keys are read from
PRIVATE_KEY, optionally seeded from ~/.ethwire/.env.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Protocol, Union

from eth_account import Account
from eth_account.signers.local import LocalAccount

from .config import get_chain_id, load_env, parse_chain_id, resolve_env_path
from .utils import decode_hex


class Signer(Protocol):
    def address(self) -> bytes:
        ...

    def chain_id(self) -> int:
        ...

    def sign_transaction(self, fields: dict[str, Any]) -> bytes:
        ...


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Load private key from .env file or environment.

    Args:
        env_path: Path to .env file (default: ETHWIRE_ENV or ~/.ethwire/.env)

    Returns:
        0x-prefixed hex private key

    Raises:
        ValueError: If PRIVATE_KEY is not set
    """
    env_path = resolve_env_path(env_path)
    load_env(env_path)

    private_key = os.environ.get("PRIVATE_KEY")
    if not private_key:
        raise ValueError(f"PRIVATE_KEY not found. Set it in the environment or in {env_path}")

    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key


class LocalSigner:
    """Signs with an in-process private key."""

    def __init__(self, private_key: str, chain_id: Union[int, str]) -> None:
        self._account: LocalAccount = Account.from_key(private_key)
        self._chain_id = parse_chain_id(chain_id)

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "LocalSigner":
        """Build a signer from PRIVATE_KEY and CHAIN_ID."""
        private_key = load_private_key(env_path)
        return cls(private_key, get_chain_id())

    def address(self) -> bytes:
        return decode_hex(self._account.address)

    def chain_id(self) -> int:
        return self._chain_id

    def sign_transaction(self, fields: dict[str, Any]) -> bytes:
        signed = self._account.sign_transaction(fields)
        return bytes(signed.raw_transaction)
