"""
quote_engines.dimension -- Profile and glass cost of a window/door item.

Responsibility:
    Derive the profile cost (base price plus per-millimeter costs), apply
    the color-surcharge multiplier to it, price the billable glass area
    after the frame's per-side discounts, and combine both into the
    item's dimensional price.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import quote_kernel/domain and sibling engine modules.

Invariants enforced:
    - The color surcharge multiplies the profile cost only; glass cost is
      computed independently and never surcharged.
    - Billable glass width/height is ``max(dimension - discount, 0)`` so
      the billable area is never negative.
    - Absent glass, or glass priced at zero or less, produces no glass
      line at all (``None``), not a zero-amount line.
    - Glass amount and dimensional price are rounded half-up; the profile
      cost is left unrounded until it is summed.

Usage:
    from quote_engines.dimension import calculate_dimensional_price

    dimensional = calculate_dimensional_price(
        dimensions=DimensionInput(width_mm=1000, height_mm=1000),
        model=ProfileModelInput(base_price="10000", cost_per_mm_width=5,
                                cost_per_mm_height=5),
        glass=GlassConfigInput(price_per_sqm="100000",
                               discount_width_mm=50, discount_height_mm=50),
    )
    print(dimensional.dim_price)  # Decimal('110250.00')
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from quote_kernel.domain.decimals import (
    HUNDRED,
    ONE,
    ZERO,
    DecimalLike,
    clamp_non_negative,
    mm_to_meters,
    round_half_up,
    to_decimal,
)
from quote_kernel.domain.values import (
    DEFAULT_ROUNDING,
    DimensionInput,
    GlassConfigInput,
    ProfileModelInput,
    RoundingPolicy,
)
from quote_kernel.logging_config import get_logger

logger = get_logger("engines.dimension")


@dataclass(frozen=True)
class ProfileCost:
    """Profile cost before and after the color surcharge (unrounded)."""

    before_color: Decimal
    with_color: Decimal

    @property
    def surcharge_amount(self) -> Decimal:
        return self.with_color - self.before_color


@dataclass(frozen=True)
class GlassCost:
    """Billable glass geometry and its rounded amount."""

    billable_width_mm: Decimal
    billable_height_mm: Decimal
    area_sqm: Decimal
    amount: Decimal


@dataclass(frozen=True)
class DimensionalPrice:
    """
    Profile and glass costs of an item.

    The two buckets stay separate so the surcharge-eligible part
    (profile) can never leak into the surcharge-exempt part (glass).
    """

    profile: ProfileCost
    glass: GlassCost | None
    dim_price: Decimal

    @property
    def glass_amount(self) -> Decimal:
        return self.glass.amount if self.glass is not None else ZERO


def surcharge_multiplier(percentage: DecimalLike | None) -> Decimal:
    """``1 + percentage / 100``; a missing percentage means no surcharge."""
    return ONE + to_decimal(percentage) / HUNDRED


def calculate_profile_cost(
    dimensions: DimensionInput,
    model: ProfileModelInput,
    multiplier: Decimal = ONE,
) -> ProfileCost:
    """
    Base price plus per-millimeter width and height costs.

    Formula: base + cost_per_mm_width x width + cost_per_mm_height x height,
    then multiplied by the color-surcharge multiplier.
    """
    width_cost = model.cost_per_mm_width * dimensions.width_mm
    height_cost = model.cost_per_mm_height * dimensions.height_mm
    before_color = model.base_price + width_cost + height_cost
    return ProfileCost(
        before_color=before_color,
        with_color=before_color * multiplier,
    )


def calculate_glass_cost(
    dimensions: DimensionInput,
    glass: GlassConfigInput | None,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> GlassCost | None:
    """
    Price the billable glass area.

    Returns None when there is no glass to bill: no glass configuration,
    or a price per square meter of zero or less.  A discount at or above
    the dimension yields a zero area, never a negative one.
    """
    if glass is None or glass.price_per_sqm <= ZERO:
        return None

    billable_width_mm = clamp_non_negative(dimensions.width_mm - glass.discount_width_mm)
    billable_height_mm = clamp_non_negative(dimensions.height_mm - glass.discount_height_mm)
    area_sqm = mm_to_meters(billable_width_mm) * mm_to_meters(billable_height_mm)
    amount = round_half_up(glass.price_per_sqm * area_sqm, rounding.money_scale)

    logger.debug("glass_cost_calculated", extra={
        "billable_width_mm": str(billable_width_mm),
        "billable_height_mm": str(billable_height_mm),
        "area_sqm": str(area_sqm),
        "glass_amount": str(amount),
    })

    return GlassCost(
        billable_width_mm=billable_width_mm,
        billable_height_mm=billable_height_mm,
        area_sqm=area_sqm,
        amount=amount,
    )


def calculate_dimensional_price(
    dimensions: DimensionInput,
    model: ProfileModelInput,
    glass: GlassConfigInput | None = None,
    color_surcharge_percentage: DecimalLike | None = ZERO,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> DimensionalPrice:
    """
    Profile cost (with color surcharge) plus glass cost, rounded.

    Formula: dim_price = round(profile_with_color + glass_amount)
    """
    profile = calculate_profile_cost(
        dimensions, model, surcharge_multiplier(color_surcharge_percentage)
    )
    glass_cost = calculate_glass_cost(dimensions, glass, rounding)
    glass_amount = glass_cost.amount if glass_cost is not None else ZERO
    dim_price = round_half_up(profile.with_color + glass_amount, rounding.money_scale)

    logger.debug("dimensional_price_calculated", extra={
        "profile_before_color": str(profile.before_color),
        "profile_with_color": str(profile.with_color),
        "has_glass": glass_cost is not None,
        "dim_price": str(dim_price),
    })

    return DimensionalPrice(profile=profile, glass=glass_cost, dim_price=dim_price)
