"""
Transaction execution - nonce, fees, verification, gas, signing, submission.

execute_trx runs the whole sequence as one call. It is a straight line
of blocking RPC round trips; the first failure propagates unchanged and
nothing is submitted. For manual nonce tracking or custom fee logic,
use the individual helpers in ethwire.rpc.client instead.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Sequence, Union

from ..abi import encode_call
from ..config import ExecuteOptions
from ..errors import MissingGasLimitError
from ..rpc.client import call_trx, estimate_gas, gas_price, get_nonce, send_trx
from ..signer import LocalSigner
from ..utils import encode_hex, to_wei
from .builder import LegacyTransactionBuilder, TransactionBuilder
from .fees import needs_base_fee_estimate, resolve_gas_limit, resolve_gas_price

logger = logging.getLogger(__name__)

CallData = Union[bytes, tuple[str, Sequence[Any]]]


def _encode_call_data(call_data: CallData) -> bytes:
    if isinstance(call_data, (bytes, bytearray)):
        return bytes(call_data)
    signature, args = call_data
    return encode_call(signature, args)


def execute_trx(
    contract: Union[str, bytes],
    call_data: CallData,
    options: Optional[ExecuteOptions] = None,
    builder: Optional[TransactionBuilder] = None,
) -> bytes:
    """
    Get a nonce, price and verify a transaction, sign it and send it.

    Args:
        contract: Destination address (0x-prefixed hex or 20 bytes)
        call_data: Raw call data, or a (signature, args) tuple such as
            ("transfer(address,uint256)", [to, amount])
        options: Fee, gas, nonce, signer and RPC settings
        builder: Transaction builder (default: LegacyTransactionBuilder)

    Returns:
        Transaction id (hash) as bytes

    Raises:
        MissingGasLimitError: If verify is False and no gas_limit is given
        RpcError: From whichever step failed first

    Note:
        Without ``verify``, eth_estimateGas will likely fail for a call that
        reverts, so ``gas_limit`` must be supplied when ``verify`` is False.
        Gas prices are legacy (pre-EIP-1559): base fee and priority fee are
        summed into a single gas price.
    """
    options = options or ExecuteOptions()
    builder = builder or LegacyTransactionBuilder()

    if not options.verify and options.gas_limit is None:
        raise MissingGasLimitError("gas_limit is required when verify is False")

    signer = options.signer or LocalSigner.from_env()
    signer_address = signer.address()
    chain_id = signer.chain_id()
    if options.from_ is None:
        options = replace(options, from_=signer_address)

    base_fee_estimate = gas_price(options) if needs_base_fee_estimate(options) else None
    price = resolve_gas_price(
        gas_price=options.gas_price,
        base_fee=options.base_fee,
        base_fee_estimate=base_fee_estimate,
        base_fee_buffer=options.base_fee_buffer,
        priority_fee=options.priority_fee,
    )
    logger.debug("Resolved gas price %d wei", price)

    nonce = options.nonce if options.nonce is not None else get_nonce(signer_address, options)
    logger.debug("Resolved nonce %d for %s", nonce, encode_hex(signer_address))

    draft = builder.draft(
        to=contract,
        nonce=nonce,
        data=_encode_call_data(call_data),
        gas_price=price,
        gas_limit=options.gas_limit,
        value=to_wei(options.value),
        chain_id=chain_id,
    )

    if options.verify:
        call_trx(draft, options)

    if options.gas_limit is not None:
        gas_limit = options.gas_limit
    else:
        gas_limit = resolve_gas_limit(estimate_gas(draft, options), options.gas_buffer)
    logger.debug("Resolved gas limit %d", gas_limit)

    signed = builder.finalize(draft, gas_limit, signer)
    trx_id = send_trx(signed, options)
    logger.info("Submitted transaction %s (nonce %d)", encode_hex(trx_id), nonce)
    return trx_id
