"""
quote_engines.services -- Service and adjustment amounts of an item.

Responsibility:
    Compute the billable quantity of each attached service (by unit,
    with an optional explicit override and an optional minimum billing
    floor) and its amount, and the signed amount of each ad-hoc
    adjustment.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import quote_kernel/domain and sibling engine modules.

Invariants enforced:
    - Quantities for ``sqm`` and ``ml`` derive from item geometry:
      area = width_m x height_m, perimeter = (width_m + height_m) x 2,
      both rounded half-up to the quantity scale.
    - Fixed services bill a quantity of 1 unless overridden; an override
      is billed at the fixed-quantity scale (4 places) and reported on the
      line at the quantity scale.
    - The minimum billing unit floors area/perimeter services only and is
      billed exactly as given.  A minimum supplied for a fixed service is
      silently ignored.
    - Services and adjustments are never affected by the color surcharge.
    - Each line amount is rounded half-up; totals are summed from the
      rounded line amounts.

Usage:
    from quote_engines.services import calculate_service_line

    line = calculate_service_line(
        ServiceInput(service_id="temper", type="area", unit="sqm",
                     rate="50000", minimum_billing_unit="1.0"),
        DimensionInput(width_mm=500, height_mm=500),
    )
    print(line.quantity, line.amount)  # 1.0 50000.00
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from quote_kernel.domain.decimals import ONE, ZERO, round_half_up
from quote_kernel.domain.values import (
    DEFAULT_ROUNDING,
    AdjustmentInput,
    AdjustmentLine,
    AdjustmentSign,
    DimensionInput,
    RoundingPolicy,
    ServiceInput,
    ServiceLine,
    ServiceType,
    ServiceUnit,
)
from quote_kernel.logging_config import get_logger

logger = get_logger("engines.services")


def unit_quantity(
    unit: ServiceUnit,
    width_m: Decimal,
    height_m: Decimal,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> Decimal:
    """Geometry quantity for a unit: m² for sqm, linear meters for ml, 1 otherwise."""
    if unit is ServiceUnit.SQM:
        return round_half_up(width_m * height_m, rounding.quantity_scale)
    if unit is ServiceUnit.ML:
        return round_half_up((width_m + height_m) * 2, rounding.quantity_scale)
    return ONE


def apply_minimum_billing_unit(
    quantity: Decimal,
    minimum_billing_unit: Decimal | None,
) -> Decimal:
    """Bill at the minimum when the quantity falls below it.

    A missing or zero minimum leaves the quantity untouched.
    """
    if minimum_billing_unit is None or minimum_billing_unit == ZERO:
        return quantity
    return max(quantity, minimum_billing_unit)


def calculate_service_quantity(
    service: ServiceInput,
    width_m: Decimal,
    height_m: Decimal,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> Decimal:
    """Quantity the service rate is billed on."""
    if service.type is ServiceType.FIXED:
        if service.quantity_override is not None:
            return round_half_up(service.quantity_override, rounding.fixed_quantity_scale)
        return ONE

    if service.quantity_override is not None:
        quantity = round_half_up(service.quantity_override, rounding.quantity_scale)
    else:
        quantity = unit_quantity(service.unit, width_m, height_m, rounding)
    return apply_minimum_billing_unit(quantity, service.minimum_billing_unit)


def calculate_service_line(
    service: ServiceInput,
    dimensions: DimensionInput,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> ServiceLine:
    """Quantity and amount (rate x quantity, rounded) of one service.

    The amount is priced from the billed quantity.  A fixed service
    reports that quantity at the quantity scale on the line.
    """
    quantity = calculate_service_quantity(
        service, dimensions.width_m, dimensions.height_m, rounding
    )
    amount = round_half_up(service.rate * quantity, rounding.money_scale)
    if service.type is ServiceType.FIXED:
        quantity = round_half_up(quantity, rounding.quantity_scale)

    logger.debug("service_line_calculated", extra={
        "service_id": service.service_id,
        "service_type": service.type.value,
        "unit": service.unit.value,
        "quantity": str(quantity),
        "amount": str(amount),
    })

    return ServiceLine(
        service_id=service.service_id,
        unit=service.unit,
        quantity=quantity,
        amount=amount,
    )


def calculate_adjustment_line(
    adjustment: AdjustmentInput,
    dimensions: DimensionInput,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> AdjustmentLine:
    """Signed amount of one adjustment: geometry quantity x value."""
    quantity = unit_quantity(
        adjustment.unit, dimensions.width_m, dimensions.height_m, rounding
    )
    raw_amount = quantity * adjustment.value
    if adjustment.sign is AdjustmentSign.NEGATIVE:
        raw_amount = -raw_amount
    amount = round_half_up(raw_amount, rounding.money_scale)

    logger.debug("adjustment_line_calculated", extra={
        "concept": adjustment.concept,
        "unit": adjustment.unit.value,
        "sign": adjustment.sign.value,
        "quantity": str(quantity),
        "amount": str(amount),
    })

    return AdjustmentLine(concept=adjustment.concept, amount=amount)


def calculate_services(
    services: Sequence[ServiceInput],
    dimensions: DimensionInput,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> tuple[ServiceLine, ...]:
    """Price every service, preserving input order."""
    return tuple(calculate_service_line(s, dimensions, rounding) for s in services)


def calculate_adjustments(
    adjustments: Sequence[AdjustmentInput],
    dimensions: DimensionInput,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> tuple[AdjustmentLine, ...]:
    """Price every adjustment, preserving input order."""
    return tuple(calculate_adjustment_line(a, dimensions, rounding) for a in adjustments)
