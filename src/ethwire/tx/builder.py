"""
Transaction Builder - draft and sign legacy (EIP-155) transactions.

Building is split in two phases so the caller can simulate and
estimate against the unsigned draft before the gas limit is fixed:

    draft = builder.draft(...)
    signed = builder.finalize(draft, gas_limit, signer)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Protocol, Union

from ..signer import Signer
from ..utils import to_address, to_checksum_address


@dataclass(frozen=True)
class Transaction:
    """
    Unsigned legacy transaction.

    Attributes:
        nonce: Sender nonce
        gas_price: Gas price in wei
        gas_limit: Gas limit; None until resolved
        to: 20-byte destination address
        value: Value in wei
        data: Call data
        chain_id: EIP-155 chain id
    """

    nonce: int
    gas_price: int
    gas_limit: Optional[int]
    to: bytes
    value: int
    data: bytes
    chain_id: int

    def to_fields(self) -> dict[str, Any]:
        """Transaction dict in the shape eth-account signs."""
        if self.gas_limit is None:
            raise ValueError("Cannot sign a transaction without a gas limit")
        return {
            "nonce": self.nonce,
            "gasPrice": self.gas_price,
            "gas": self.gas_limit,
            "to": to_checksum_address(self.to),
            "value": self.value,
            "data": self.data,
            "chainId": self.chain_id,
        }


@dataclass(frozen=True)
class SignedTransaction:
    trx: Transaction
    raw: bytes

    def encode(self) -> bytes:
        return self.raw


class TransactionBuilder(Protocol):
    def draft(
        self,
        to: Union[str, bytes],
        nonce: int,
        data: bytes,
        gas_price: int,
        gas_limit: Optional[int],
        value: int,
        chain_id: int,
    ) -> Transaction:
        ...

    def finalize(self, draft: Transaction, gas_limit: int, signer: Signer) -> SignedTransaction:
        ...


class LegacyTransactionBuilder:
    """Builds pre-EIP-1559 transactions with a single gas price."""

    def draft(
        self,
        to: Union[str, bytes],
        nonce: int,
        data: bytes,
        gas_price: int,
        gas_limit: Optional[int],
        value: int,
        chain_id: int,
    ) -> Transaction:
        return Transaction(
            nonce=nonce,
            gas_price=gas_price,
            gas_limit=gas_limit,
            to=to_address(to),
            value=value,
            data=bytes(data),
            chain_id=chain_id,
        )

    def finalize(self, draft: Transaction, gas_limit: int, signer: Signer) -> SignedTransaction:
        trx = replace(draft, gas_limit=gas_limit)
        return SignedTransaction(trx=trx, raw=signer.sign_transaction(trx.to_fields()))
