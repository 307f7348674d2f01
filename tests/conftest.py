"""Shared fixtures: a scripted JSON-RPC transport and a deterministic signer."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Union

import pytest

from ethwire.config import ExecuteOptions, RpcOptions
from ethwire.errors import TransportError
from ethwire.signer import LocalSigner

# Well-known development key (Hardhat / Anvil account #0). Never fund it.
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
TEST_CHAIN_ID = 5
TEST_NODE = "http://node.test:8545"

Reply = Union[dict[str, Any], Callable[[list[Any]], dict[str, Any]], Exception]


def result(value: Any) -> dict[str, Any]:
    return {"result": value}


def error(code: int, message: str, data: Any = None) -> dict[str, Any]:
    err: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        err["data"] = data
    return {"error": err}


@dataclass
class RecordedRequest:
    url: str
    payload: dict[str, Any]
    headers: dict[str, str]
    timeout: int

    @property
    def method(self) -> str:
        return self.payload["method"]

    @property
    def params(self) -> list[Any]:
        return self.payload["params"]


class FakeTransport:
    """Answers each JSON-RPC method with a canned reply and records requests.

    Replies are {"result": ...} / {"error": ...} dicts, callables taking the
    request params, or exceptions to raise.
    """

    def __init__(self, replies: dict[str, Reply] | None = None) -> None:
        self.replies: dict[str, Reply] = dict(replies or {})
        self.requests: list[RecordedRequest] = []

    def post(self, url: str, body: bytes, headers: dict[str, str], timeout: int) -> bytes:
        payload = json.loads(body)
        self.requests.append(RecordedRequest(url, payload, headers, timeout))

        reply = self.replies.get(payload["method"])
        if reply is None:
            raise TransportError(f"error: no fake reply for {payload['method']}")
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            reply = reply(payload["params"])
        return json.dumps({"jsonrpc": "2.0", "id": payload["id"], **reply}).encode("utf-8")

    @property
    def methods(self) -> list[str]:
        return [r.method for r in self.requests]

    def last(self, method: str) -> RecordedRequest:
        return [r for r in self.requests if r.method == method][-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def rpc_options(transport: FakeTransport) -> RpcOptions:
    return RpcOptions(ethereum_node=TEST_NODE, transport=transport)


@pytest.fixture
def signer() -> LocalSigner:
    return LocalSigner(TEST_PRIVATE_KEY, TEST_CHAIN_ID)


@pytest.fixture
def execute_options(transport: FakeTransport, signer: LocalSigner) -> ExecuteOptions:
    return ExecuteOptions(ethereum_node=TEST_NODE, transport=transport, signer=signer)
