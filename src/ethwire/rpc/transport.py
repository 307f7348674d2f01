"""
Transport protocol for JSON-RPC calls.

The envelope codec depends on this protocol, not on httpx directly, so
tests and alternative HTTP stacks plug in without touching codec logic.
Transports raise TransportError for every network-level failure and
never retry.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import httpx

from ..errors import TransportError


@runtime_checkable
class Transport(Protocol):
    """Blocking HTTP POST returning the raw response body."""

    def post(self, url: str, body: bytes, headers: dict[str, str], timeout: int) -> bytes:
        """Send ``body`` to ``url``.

        Args:
            url: JSON-RPC endpoint URL
            body: Serialized request envelope
            headers: Complete request headers
            timeout: Timeout in milliseconds

        Raises:
            TransportError: On connection, timeout or HTTP status failures
        """
        ...


class HttpxTransport:
    """Default transport using a short-lived httpx.Client per request.

    Args:
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport

    def post(self, url: str, body: bytes, headers: dict[str, str], timeout: int) -> bytes:
        try:
            with httpx.Client(timeout=timeout / 1000, transport=self._transport) as client:
                response = client.post(url, content=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"error: {exc!r}") from exc

        if not 200 <= response.status_code < 300:
            raise TransportError(f"error: HTTP {response.status_code} from {url}")
        return response.content
