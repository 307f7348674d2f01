"""Exceptions raised by the RPC client and transaction orchestrator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .rpc.revert import DecodedRevert


class RpcError(RuntimeError):
    """Base class for all ethwire failures."""


class TransportError(RpcError):
    """Network-level failure: connection, timeout, TLS or non-2xx status."""


class MalformedResponseError(RpcError):
    """Response is not a JSON-RPC 2.0 envelope for the request that was sent."""


class JsonRpcError(RpcError):
    """
    Well-formed JSON-RPC error returned by the node.

    Attributes:
        code: JSON-RPC error code
        message: Error message from the node
        data: Raw ``data`` member (usually hex revert data), if any
        revert: Decoded revert, when data matched a known error signature
    """

    def __init__(
        self,
        text: str,
        code: int,
        message: str,
        data: Any = None,
        revert: Optional[DecodedRevert] = None,
    ) -> None:
        super().__init__(text)
        self.code = code
        self.message = message
        self.data = data
        self.revert = revert


class RevertDecodeError(RpcError):
    """Revert data is present but could not be decoded."""


class DecodeModeError(RpcError):
    """Result could not be post-processed as hex bytes or an unsigned integer."""


class MissingGasLimitError(RpcError, ValueError):
    """Transaction submitted without verification and without a gas limit."""
