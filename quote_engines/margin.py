"""
Margin Engine - Sales price from cost and a profit margin.

Pure functions with no I/O.

The margin is expressed on the sales price, not as a markup on cost:

    sales_price = cost / (1 - margin_percentage / 100)

so a 20% margin on a cost of 100 gives 125 (20% of 125 is 25).

This is a standalone helper for catalog screens that show a model's
sales price; ``calculate_price_item`` does not apply it and its
subtotal is unaffected.

Usage:
    from quote_engines.margin import calculate_sales_price

    calculate_sales_price(Decimal("100"), Decimal("5"))  # Decimal('105.26')
"""

from __future__ import annotations

from decimal import Decimal

from quote_engines.tracer import traced_engine
from quote_kernel.domain.decimals import HUNDRED, ONE, ZERO, DecimalLike, round_half_up, to_decimal
from quote_kernel.domain.values import DEFAULT_ROUNDING, RoundingPolicy
from quote_kernel.exceptions import InvalidMarginError
from quote_kernel.logging_config import get_logger

logger = get_logger("engines.margin")


@traced_engine("margin", "1.0", fingerprint_fields=("cost", "margin_percentage"))
def calculate_sales_price(
    cost: DecimalLike,
    margin_percentage: DecimalLike | None,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> Decimal:
    """
    Sales price that yields ``margin_percentage`` of profit on itself.

    Raises:
        InvalidMarginError: If the margin is negative or 100 or more
            (a 100% margin has no finite sales price).
    """
    margin = to_decimal(margin_percentage)
    if margin < ZERO or margin >= HUNDRED:
        logger.error("sales_price_invalid_margin", extra={
            "margin_percentage": str(margin),
        })
        raise InvalidMarginError(str(margin))

    sales_price = round_half_up(
        to_decimal(cost) / (ONE - margin / HUNDRED), rounding.money_scale
    )
    logger.debug("sales_price_calculated", extra={
        "cost": str(cost),
        "margin_percentage": str(margin),
        "sales_price": str(sales_price),
    })
    return sales_price


def margin_amount(
    cost: DecimalLike,
    margin_percentage: DecimalLike | None,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> Decimal:
    """Profit contained in the sales price (sales price - cost)."""
    sales_price = calculate_sales_price(cost, margin_percentage, rounding)
    return round_half_up(sales_price - to_decimal(cost), rounding.money_scale)
