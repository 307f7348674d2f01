"""Gas price policy: explicit price, or base fee plus priority fee."""

from __future__ import annotations

from typing import Optional

from ..config import ExecuteOptions
from ..utils import Amount, apply_buffer, to_wei

DEFAULT_BASE_FEE_BUFFER = 1.20
DEFAULT_PRIORITY_FEE: Amount = (0, "gwei")
DEFAULT_GAS_BUFFER = 1.50


def needs_base_fee_estimate(options: ExecuteOptions) -> bool:
    """True when neither a gas price nor a base fee was given."""
    return options.gas_price is None and options.base_fee is None


def resolve_gas_price(
    *,
    gas_price: Optional[Amount] = None,
    base_fee: Optional[Amount] = None,
    base_fee_estimate: Optional[int] = None,
    base_fee_buffer: float = DEFAULT_BASE_FEE_BUFFER,
    priority_fee: Amount = DEFAULT_PRIORITY_FEE,
) -> int:
    """
    Resolve the gas price in wei.

    An explicit ``gas_price`` wins outright. Otherwise the result is
    base fee + priority fee, where the base fee is ``base_fee`` if given,
    else ``base_fee_estimate`` (eth_gasPrice) times ``base_fee_buffer``,
    rounded up.

    Raises:
        ValueError: If no gas price, base fee or estimate is available
    """
    if gas_price is not None:
        return to_wei(gas_price)

    if base_fee is not None:
        resolved_base_fee = to_wei(base_fee)
    elif base_fee_estimate is not None:
        resolved_base_fee = apply_buffer(base_fee_estimate, base_fee_buffer)
    else:
        raise ValueError("Either gas_price, base_fee or base_fee_estimate is required")

    return resolved_base_fee + to_wei(priority_fee)


def resolve_gas_limit(estimate: int, gas_buffer: float = DEFAULT_GAS_BUFFER) -> int:
    """Buffered gas limit from an eth_estimateGas result, rounded up."""
    return apply_buffer(estimate, gas_buffer)
