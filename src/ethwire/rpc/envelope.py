"""
JSON-RPC 2.0 envelope codec.

Builds request envelopes with process-unique ids and interprets the
raw response bytes as one of four shapes:

    Success        {"jsonrpc": "2.0", "result": ..., "id": n}
    ErrorWithData  {"jsonrpc": "2.0", "error": {"code", "message", "data"}, "id": n}
    ErrorPlain     {"jsonrpc": "2.0", "error": {"code", "message"}, "id": n}
    Malformed      anything else, including an id mismatch

Error envelopes become JsonRpcError with a readable message; revert
data is decoded best-effort and falls back to the raw hex.
"""

from __future__ import annotations

import itertools
import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from ..config import DecodeMode
from ..errors import DecodeModeError, JsonRpcError, MalformedResponseError, RevertDecodeError
from ..utils import decode_hex
from .revert import DecodedRevert, decode_revert
from .transport import Transport

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Process-wide request id counter; ids are never reused.
_ids = itertools.count(1)
_ids_lock = threading.Lock()


def next_request_id() -> int:
    with _ids_lock:
        return next(_ids)


@dataclass(frozen=True)
class RequestEnvelope:
    method: str
    params: list[Any]
    id: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "method": self.method,
            "params": self.params,
            "id": self.id,
        }

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_dict()).encode("utf-8")


@dataclass(frozen=True)
class Success:
    result: Any


@dataclass(frozen=True)
class ErrorWithData:
    code: int
    message: str
    data: Any


@dataclass(frozen=True)
class ErrorPlain:
    code: int
    message: str


@dataclass(frozen=True)
class Malformed:
    reason: str


ResponseEnvelope = Union[Success, ErrorWithData, ErrorPlain, Malformed]


def build_request(method: str, params: list[Any]) -> RequestEnvelope:
    """Create a request envelope with a fresh id."""
    return RequestEnvelope(method=method, params=list(params), id=next_request_id())


def send(
    envelope: RequestEnvelope,
    url: str,
    headers: dict[str, str],
    timeout: int,
    transport: Transport,
) -> bytes:
    """POST the envelope; extra headers override the JSON defaults."""
    logger.debug("rpc -> %s id=%d url=%s", envelope.method, envelope.id, url)
    return transport.post(url, envelope.to_bytes(), {**DEFAULT_HEADERS, **headers}, timeout)


def parse_response(raw: Union[bytes, str], expected_id: int) -> ResponseEnvelope:
    """Classify a raw response. Never raises."""
    try:
        payload = json.loads(raw)
    except (ValueError, TypeError) as exc:
        return Malformed(f"invalid JSON: {exc}")

    if not isinstance(payload, dict) or payload.get("jsonrpc") != "2.0":
        return Malformed("not a JSON-RPC 2.0 envelope")
    response_id = payload.get("id")
    if type(response_id) is not int or response_id != expected_id:
        return Malformed(f"id mismatch: expected {expected_id}, got {response_id!r}")

    if "result" in payload:
        return Success(payload["result"])

    error = payload.get("error")
    if not isinstance(error, dict):
        return Malformed("missing result and error")
    code, message = error.get("code"), error.get("message")
    if not isinstance(code, int) or isinstance(code, bool) or not isinstance(message, str):
        return Malformed("error object lacks code or message")
    if "data" in error:
        return ErrorWithData(code, message, error["data"])
    return ErrorPlain(code, message)


def _decode_revert_data(data: Any, errors: Iterable[str]) -> Optional[DecodedRevert]:
    """Best-effort revert decoding; failures are logged, never raised."""
    try:
        return decode_revert(decode_hex(data), errors)
    except (RevertDecodeError, ValueError) as exc:
        logger.warning("Could not decode revert data %r: %s", data, exc)
        return None


def decode_response(raw: Union[bytes, str], expected_id: int, errors: Iterable[str] = ()) -> Any:
    """
    Decode a response envelope for the request with ``expected_id``.

    Args:
        raw: Response body
        expected_id: Id of the request this response must answer
        errors: Known custom error signatures for revert decoding

    Returns:
        The ``result`` member, unmodified

    Raises:
        MalformedResponseError: If the body is not a matching envelope
        JsonRpcError: If the node returned an error
    """
    response = parse_response(raw, expected_id)

    if isinstance(response, Success):
        return response.result

    if isinstance(response, ErrorWithData):
        if response.data is None:
            revert, detail = None, ""
        else:
            revert = _decode_revert_data(response.data, errors)
            detail = response.data if revert is None else str(revert)
        raise JsonRpcError(
            f"error {response.code}: {response.message} ({detail})",
            code=response.code,
            message=response.message,
            data=response.data,
            revert=revert,
        )

    if isinstance(response, ErrorPlain):
        raise JsonRpcError(
            f"error {response.code}: {response.message}",
            code=response.code,
            message=response.message,
        )

    logger.debug("Malformed response for id=%d: %s", expected_id, response.reason)
    raise MalformedResponseError("invalid JSON-RPC response")


def decode_result(value: Any, mode: Optional[DecodeMode]) -> Any:
    """
    Post-process a result.

    Raises:
        DecodeModeError: If the value is not valid hex for HEX / HEX_UNSIGNED
    """
    if mode is None or mode is DecodeMode.NONE:
        return value

    try:
        data = decode_hex(value)
    except ValueError as exc:
        raise DecodeModeError(f"cannot decode result {value!r} as hex: {exc}") from exc

    if mode is DecodeMode.HEX:
        return data
    return int.from_bytes(data, "big")
