__all__ = [
    # Config
    "DecodeMode",
    "ExecuteOptions",
    "RpcOptions",
    # Errors
    "DecodeModeError",
    "JsonRpcError",
    "MalformedResponseError",
    "MissingGasLimitError",
    "RevertDecodeError",
    "RpcError",
    "TransportError",
    # Envelope codec
    "RequestEnvelope",
    "build_request",
    "decode_response",
    "decode_result",
    # Revert decoding
    "DecodedRevert",
    "decode_revert",
    # Transport
    "HttpxTransport",
    "Transport",
    # RPC helpers
    "call_trx",
    "estimate_gas",
    "gas_price",
    "get_nonce",
    "net_version",
    "send_rpc",
    "send_trx",
    # ABI
    "encode_call",
    "selector",
    # Signing
    "LocalSigner",
    "Signer",
    # Transactions
    "LegacyTransactionBuilder",
    "SignedTransaction",
    "Transaction",
    "TransactionBuilder",
    "execute_trx",
    "resolve_gas_price",
    # Units
    "to_wei",
]

from .config import DecodeMode, ExecuteOptions, RpcOptions
from .errors import (
    DecodeModeError,
    JsonRpcError,
    MalformedResponseError,
    MissingGasLimitError,
    RevertDecodeError,
    RpcError,
    TransportError,
)
from .abi import encode_call, selector
from .rpc.envelope import RequestEnvelope, build_request, decode_response, decode_result
from .rpc.revert import DecodedRevert, decode_revert
from .rpc.transport import HttpxTransport, Transport
from .rpc.client import call_trx, estimate_gas, gas_price, get_nonce, net_version, send_rpc, send_trx
from .signer import LocalSigner, Signer
from .tx.builder import LegacyTransactionBuilder, SignedTransaction, Transaction, TransactionBuilder
from .tx.execute import execute_trx
from .tx.fees import resolve_gas_price
from .utils import to_wei
