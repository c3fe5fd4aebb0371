"""
Quote-Item Price Engine.

Pure function with deterministic behavior. No I/O.

Turns a fully-resolved window/door configuration into an itemized,
fixed-point price: dimensional price (profile + glass), accessory price,
service lines, signed adjustment lines, and the subtotal.

Cost buckets:
- Surcharge-eligible: profile cost and accessory price, multiplied by
  ``1 + color_surcharge_percentage / 100``
- Surcharge-exempt: glass, services, adjustments

The buckets are computed independently and only meet in the subtotal:

    subtotal = round(dim_price + acc_price + services_total + adjustments_total)

The engine never raises for well-typed input: negative dimensions were
clamped when the input was built, excessive glass discounts floor the
area at zero, and absent optional parts (glass, accessory, minimums)
simply contribute nothing.

Usage:
    from quote_engines.price_item import calculate_price_item
    from quote_kernel.domain.values import (
        DimensionInput, GlassConfigInput, PriceItemInput, ProfileModelInput,
    )

    result = calculate_price_item(PriceItemInput(
        dimensions=DimensionInput(width_mm=1000, height_mm=1000),
        model=ProfileModelInput(base_price="10000", cost_per_mm_width="5",
                                cost_per_mm_height="5"),
        glass=GlassConfigInput(price_per_sqm="100000"),
    ))
    print(result.dim_price)  # Decimal('120000.00')
"""

from __future__ import annotations

import time

from quote_engines.accessory import calculate_accessory_price
from quote_engines.dimension import calculate_dimensional_price, surcharge_multiplier
from quote_engines.services import calculate_adjustments, calculate_services
from quote_engines.tracer import traced_engine
from quote_kernel.domain.decimals import ZERO, round_half_up
from quote_kernel.domain.values import (
    DEFAULT_ROUNDING,
    CalculationResult,
    PriceItemInput,
    RoundingPolicy,
)
from quote_kernel.logging_config import get_logger

logger = get_logger("engines.price_item")


@traced_engine("price_item", "1.0", fingerprint_fields=("item", "rounding"))
def calculate_price_item(
    item: PriceItemInput,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> CalculationResult:
    """
    Calculate the itemized price of one quote item.

    Args:
        item: Fully-resolved item configuration
        rounding: Decimal places used at each rounding boundary

    Returns:
        CalculationResult with every amount rounded half-up
    """
    t0 = time.monotonic()
    percentage = item.color_surcharge_percentage
    logger.info("price_item_calculation_started", extra={
        "width_mm": str(item.dimensions.width_mm),
        "height_mm": str(item.dimensions.height_mm),
        "has_glass": item.glass is not None,
        "include_accessory": item.include_accessory,
        "color_surcharge_percentage": str(percentage),
        "service_count": len(item.services),
        "adjustment_count": len(item.adjustments),
    })

    multiplier = surcharge_multiplier(percentage)

    dimensional = calculate_dimensional_price(
        item.dimensions, item.model, item.glass, percentage, rounding
    )
    acc_price = calculate_accessory_price(
        item.model.accessory_price, item.include_accessory, multiplier, rounding
    )
    service_lines = calculate_services(item.services, item.dimensions, rounding)
    adjustment_lines = calculate_adjustments(item.adjustments, item.dimensions, rounding)

    services_total = sum((line.amount for line in service_lines), ZERO)
    adjustments_total = sum((line.amount for line in adjustment_lines), ZERO)
    subtotal = round_half_up(
        dimensional.dim_price + acc_price + services_total + adjustments_total,
        rounding.money_scale,
    )

    surcharge_percentage = None
    surcharge_amount = None
    if percentage > ZERO:
        surcharge_percentage = percentage
        surcharge_amount = round_half_up(
            dimensional.profile.surcharge_amount, rounding.money_scale
        )

    duration_ms = round((time.monotonic() - t0) * 1000, 2)
    logger.info("price_item_calculated", extra={
        "dim_price": str(dimensional.dim_price),
        "acc_price": str(acc_price),
        "services_total": str(services_total),
        "adjustments_total": str(adjustments_total),
        "subtotal": str(subtotal),
        "duration_ms": duration_ms,
    })

    return CalculationResult(
        dim_price=dimensional.dim_price,
        acc_price=acc_price,
        services=service_lines,
        adjustments=adjustment_lines,
        subtotal=subtotal,
        color_surcharge_percentage=surcharge_percentage,
        color_surcharge_amount=surcharge_amount,
    )
