"""
quote_engines.accessory -- Accessory kit price of an item.

Pure function, no I/O.  The accessory hardware is color-matched to the
profile, so the same surcharge multiplier applies to it.
"""

from __future__ import annotations

from decimal import Decimal

from quote_kernel.domain.decimals import ONE, ZERO, DecimalLike, round_half_up, to_decimal
from quote_kernel.domain.values import DEFAULT_ROUNDING, RoundingPolicy
from quote_kernel.logging_config import get_logger

logger = get_logger("engines.accessory")


def calculate_accessory_price(
    accessory_price: DecimalLike | None,
    include_accessory: bool,
    multiplier: Decimal = ONE,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> Decimal:
    """
    Accessory price with the color surcharge applied, rounded half-up.

    Zero when the accessory is not included or the model has none.
    """
    if not include_accessory or accessory_price is None:
        raw = ZERO
    else:
        raw = to_decimal(accessory_price)
    amount = round_half_up(raw * multiplier, rounding.money_scale)

    logger.debug("accessory_price_calculated", extra={
        "include_accessory": include_accessory,
        "has_accessory": accessory_price is not None,
        "multiplier": str(multiplier),
        "acc_price": str(amount),
    })
    return amount
