"""
JSON-RPC client for Ethereum-compatible nodes.

One generic entry point (send_rpc) plus a thin helper per node method.
No retries: every failure surfaces as an RpcError subclass.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional, Union

from ..config import DecodeMode, RpcOptions, get_ethereum_node
from ..utils import encode_hex, encode_quantity
from .envelope import build_request, decode_response, decode_result, send
from .transport import HttpxTransport

if TYPE_CHECKING:
    from ..tx.builder import SignedTransaction, Transaction


def send_rpc(method: str, params: list[Any], options: Optional[RpcOptions] = None) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_call")
        params: RPC parameters
        options: Per-call options

    Returns:
        Result member of the response, post-processed per ``options.decode``

    Raises:
        TransportError: On network failure
        MalformedResponseError: If the response is not a matching envelope
        JsonRpcError: If the node returned an error
        DecodeModeError: If the result fails hex / unsigned decoding
    """
    options = options or RpcOptions()
    url = options.ethereum_node or get_ethereum_node()
    transport = options.transport or HttpxTransport()

    envelope = build_request(method, params)
    body = send(envelope, url, options.headers, options.timeout, transport)
    result = decode_response(body, envelope.id, options.errors)
    return decode_result(result, options.decode)


def _with_decode(options: Optional[RpcOptions], mode: DecodeMode) -> RpcOptions:
    return replace(options or RpcOptions(), decode=mode)


def _block(options: RpcOptions) -> str:
    block = options.block_number
    return encode_quantity(block) if isinstance(block, int) else block


def _call_object(trx: Transaction, options: RpcOptions, include_gas: bool) -> dict[str, Any]:
    call: dict[str, Any] = {}
    if options.from_ is not None:
        call["from"] = options.from_ if isinstance(options.from_, str) else encode_hex(options.from_)
    call["to"] = encode_hex(trx.to)
    if include_gas and trx.gas_limit is not None:
        call["gas"] = encode_quantity(trx.gas_limit)
    call["gasPrice"] = encode_quantity(trx.gas_price)
    call["value"] = encode_quantity(trx.value)
    call["data"] = encode_hex(trx.data)
    return call


def net_version(options: Optional[RpcOptions] = None) -> Any:
    """Network id reported by the node, e.g. "1"."""
    return send_rpc("net_version", [], options)


def get_nonce(account: Union[str, bytes], options: Optional[RpcOptions] = None) -> int:
    """
    Get transaction nonce for an account at ``options.block_number``.

    Args:
        account: 0x-prefixed address or 20 raw bytes
        options: Per-call options

    Returns:
        Current nonce
    """
    options = _with_decode(options, DecodeMode.HEX_UNSIGNED)
    address = account if isinstance(account, str) else encode_hex(account)
    return send_rpc("eth_getTransactionCount", [address, _block(options)], options)


def gas_price(options: Optional[RpcOptions] = None) -> int:
    """Current gas price in wei."""
    return send_rpc("eth_gasPrice", [], _with_decode(options, DecodeMode.HEX_UNSIGNED))


def call_trx(trx: Transaction, options: Optional[RpcOptions] = None) -> Any:
    """
    Simulate a transaction with eth_call and return its output.

    The result is returned as bytes unless ``options.decode`` says
    otherwise. A revert raises JsonRpcError whose message includes the
    decoded custom error when its signature is in ``options.errors``.
    """
    options = options or RpcOptions()
    if options.decode is None:
        options = replace(options, decode=DecodeMode.HEX)
    return send_rpc(
        "eth_call",
        [_call_object(trx, options, include_gas=True), _block(options)],
        options,
    )


def estimate_gas(trx: Transaction, options: Optional[RpcOptions] = None) -> int:
    """Estimate gas used by a transaction."""
    options = _with_decode(options, DecodeMode.HEX_UNSIGNED)
    return send_rpc(
        "eth_estimateGas",
        [_call_object(trx, options, include_gas=False), _block(options)],
        options,
    )


def send_trx(signed: SignedTransaction, options: Optional[RpcOptions] = None) -> bytes:
    """
    Send a signed raw transaction.

    Returns:
        Transaction id (hash) as bytes
    """
    return send_rpc(
        "eth_sendRawTransaction",
        [encode_hex(signed.encode())],
        _with_decode(options, DecodeMode.HEX),
    )
