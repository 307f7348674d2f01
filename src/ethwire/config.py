"""
Configuration for ethwire.

Endpoint, chain and key material come from the environment, optionally
seeded from ~/.ethwire/.env. Per-call behaviour is carried by the
RpcOptions / ExecuteOptions dataclasses; override single fields with
dataclasses.replace().
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from dotenv import load_dotenv

from .utils import Amount

if TYPE_CHECKING:
    from .rpc.transport import Transport
    from .signer import Signer


# Default config directory
ETHWIRE_DIR = Path.home() / ".ethwire"
ETHWIRE_ENV = ETHWIRE_DIR / ".env"

DEFAULT_ETHEREUM_NODE = "http://localhost:8545"
DEFAULT_CHAIN_ID = 1
DEFAULT_TIMEOUT_MS = 30_000

CHAIN_IDS: dict[str, int] = {
    "mainnet": 1,
    "goerli": 5,
    "sepolia": 11155111,
    "holesky": 17000,
    "base": 8453,
    "base_sepolia": 84532,
}


def resolve_env_path(env_path: Optional[Path] = None) -> Path:
    """Explicit path, else ETHWIRE_ENV, else ~/.ethwire/.env."""
    return env_path or Path(os.environ.get("ETHWIRE_ENV", ETHWIRE_ENV))


def load_env(env_path: Optional[Path] = None) -> None:
    """Load variables from the ethwire .env file into os.environ, if it exists."""
    env_path = resolve_env_path(env_path)
    if env_path.exists():
        load_dotenv(env_path, override=False)


def get_ethereum_node() -> str:
    """Get the node URL from environment or default."""
    load_env()
    return os.environ.get("ETHEREUM_NODE", DEFAULT_ETHEREUM_NODE)


def parse_chain_id(value: Union[int, str]) -> int:
    """
    Resolve a chain id given as an integer, a numeric string or a chain name.

    Raises:
        ValueError: If the name is not a known chain
    """
    if isinstance(value, int):
        return value
    value = value.strip()
    if value.isdigit():
        return int(value)
    try:
        return CHAIN_IDS[value.lower()]
    except KeyError:
        raise ValueError(f"Unknown chain: {value!r}") from None


def get_chain_id() -> int:
    """Get the chain ID from environment or default."""
    load_env()
    return parse_chain_id(os.environ.get("CHAIN_ID", str(DEFAULT_CHAIN_ID)))


class DecodeMode(str, Enum):
    """Post-processing applied to a successful RPC result."""

    NONE = "none"
    HEX = "hex"
    HEX_UNSIGNED = "hex_unsigned"


@dataclass(frozen=True)
class RpcOptions:
    """
    Per-call RPC options.

    Attributes:
        headers: Extra HTTP headers, merged over the JSON defaults
        decode: Result post-processing; None lets each helper pick its default
        errors: Known custom error signatures for revert decoding
        timeout: Network timeout in milliseconds
        ethereum_node: Endpoint URL (default: ETHEREUM_NODE env var)
        from_: Sender address for eth_call / eth_estimateGas
        block_number: Block tag or number for state queries
        transport: HTTP transport (default: HttpxTransport)
    """

    headers: dict[str, str] = field(default_factory=dict)
    decode: Optional[DecodeMode] = None
    errors: tuple[str, ...] = ()
    timeout: int = DEFAULT_TIMEOUT_MS
    ethereum_node: Optional[str] = None
    from_: Optional[Union[str, bytes]] = None
    block_number: Union[str, int] = "latest"
    transport: Optional[Transport] = None


@dataclass(frozen=True)
class ExecuteOptions(RpcOptions):
    """
    Options for execute_trx. RPC fields are forwarded to every call made.

    Attributes:
        gas_price: Total gas price; overrides every fee setting below
        base_fee: Base fee; if None, uses eth_gasPrice times base_fee_buffer
        base_fee_buffer: Multiplier for the estimated base fee
        priority_fee: Added on top of the base fee
        gas_limit: Gas limit; if None, uses eth_estimateGas times gas_buffer
        gas_buffer: Multiplier for the estimated gas limit
        value: Value sent with the transaction
        nonce: Nonce; if None, uses eth_getTransactionCount
        verify: Run eth_call before estimating and signing
        signer: Signer (default: LocalSigner.from_env())
    """

    gas_price: Optional[Amount] = None
    base_fee: Optional[Amount] = None
    base_fee_buffer: float = 1.20
    priority_fee: Amount = (0, "gwei")
    gas_limit: Optional[int] = None
    gas_buffer: float = 1.50
    value: Amount = 0
    nonce: Optional[int] = None
    verify: bool = True
    signer: Optional[Signer] = None
