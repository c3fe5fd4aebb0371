"""
Values -- Immutable pricing value objects.

Responsibility:
    Provides the request-scoped input and output types of the quote-item
    price calculation: dimensions, profile model pricing, glass
    configuration, services, adjustments, and the itemized result.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Consumed by quote_engines (calculation) and quote_services (boundary
    translation).  No outward dependencies except the decimal primitives.

Invariants enforced:
    - Every numeric field is a Decimal after construction; callers may
      pass Decimal, int, float, or numeric strings.
    - Dimensions are clamped to zero at construction, never rejected.
    - Glass discounts are clamped to zero at construction.
    - Adjustments are billed by area or perimeter only.

Failure modes:
    - ValueError when an enum field carries an unknown value.
    - InvalidAdjustmentUnitError for an adjustment billed per unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from quote_kernel.domain.decimals import (
    FIXED_QUANTITY_SCALE,
    MONEY_SCALE,
    QUANTITY_SCALE,
    ZERO,
    clamp_non_negative,
    mm_to_meters,
    to_decimal,
)
from quote_kernel.exceptions import InvalidAdjustmentUnitError


class ServiceType(str, Enum):
    """How a service is billed."""

    FIXED = "fixed"  # Flat per-item charge (e.g. installation)
    AREA = "area"  # Charged per square meter (e.g. tempering)
    PERIMETER = "perimeter"  # Charged per linear meter (e.g. sealing)


class ServiceUnit(str, Enum):
    """Unit a service or adjustment quantity is expressed in."""

    UNIT = "unit"
    SQM = "sqm"  # Square meters
    ML = "ml"  # Linear meters


class AdjustmentSign(str, Enum):
    """Direction of an ad-hoc adjustment."""

    POSITIVE = "positive"  # Surcharge
    NEGATIVE = "negative"  # Discount


@dataclass(frozen=True, slots=True)
class RoundingPolicy:
    """
    Decimal places used at each rounding boundary.

    Contract:
        Money amounts and geometry quantities round to two places; an
        explicit quantity override on a fixed service keeps four.
    """

    money_scale: int = MONEY_SCALE
    quantity_scale: int = QUANTITY_SCALE
    fixed_quantity_scale: int = FIXED_QUANTITY_SCALE

    def __post_init__(self) -> None:
        for attr in ("money_scale", "quantity_scale", "fixed_quantity_scale"):
            val = getattr(self, attr)
            if not isinstance(val, int) or isinstance(val, bool) or val < 0:
                raise ValueError(f"{attr} must be a non-negative integer, got {val!r}")


DEFAULT_ROUNDING = RoundingPolicy()


@dataclass(frozen=True)
class DimensionInput:
    """
    Item width and height in millimeters.

    Negative values are clamped to zero rather than rejected, so no
    downstream cost can go negative because of a bad dimension.
    """

    width_mm: Decimal
    height_mm: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "width_mm", clamp_non_negative(self.width_mm))
        object.__setattr__(self, "height_mm", clamp_non_negative(self.height_mm))

    @property
    def width_m(self) -> Decimal:
        return mm_to_meters(self.width_mm)

    @property
    def height_m(self) -> Decimal:
        return mm_to_meters(self.height_mm)


@dataclass(frozen=True)
class ProfileModelInput:
    """
    Catalog pricing of a profile model at calculation time.

    Attributes:
        base_price: Flat price of the model
        cost_per_mm_width: Price added per millimeter of width
        cost_per_mm_height: Price added per millimeter of height
        accessory_price: Optional accessory kit price (None = no accessory)
    """

    base_price: Decimal
    cost_per_mm_width: Decimal
    cost_per_mm_height: Decimal
    accessory_price: Decimal | None = None

    def __post_init__(self) -> None:
        for attr in ("base_price", "cost_per_mm_width", "cost_per_mm_height"):
            object.__setattr__(self, attr, to_decimal(getattr(self, attr)))
        if self.accessory_price is not None:
            object.__setattr__(self, "accessory_price", to_decimal(self.accessory_price))


@dataclass(frozen=True)
class GlassConfigInput:
    """
    Glass pricing and the per-side allowance the frame takes from it.

    The discounts are subtracted from each item dimension before the
    billable glass area is computed.
    """

    price_per_sqm: Decimal
    discount_width_mm: Decimal = ZERO
    discount_height_mm: Decimal = ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "price_per_sqm", to_decimal(self.price_per_sqm))
        object.__setattr__(
            self, "discount_width_mm", clamp_non_negative(self.discount_width_mm)
        )
        object.__setattr__(
            self, "discount_height_mm", clamp_non_negative(self.discount_height_mm)
        )


@dataclass(frozen=True)
class ServiceInput:
    """
    One billable operation attached to an item (cutting, tempering, ...).

    ``minimum_billing_unit`` floors area/perimeter quantities and is
    ignored for fixed services.  ``quantity_override`` replaces the
    computed quantity.
    """

    service_id: str
    type: ServiceType
    unit: ServiceUnit
    rate: Decimal
    minimum_billing_unit: Decimal | None = None
    quantity_override: Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ServiceType(self.type))
        object.__setattr__(self, "unit", ServiceUnit(self.unit))
        object.__setattr__(self, "rate", to_decimal(self.rate))
        for attr in ("minimum_billing_unit", "quantity_override"):
            val = getattr(self, attr)
            if val is not None:
                object.__setattr__(self, attr, to_decimal(val))


@dataclass(frozen=True)
class AdjustmentInput:
    """A signed quantity x rate modifier tied to a named business concept."""

    concept: str
    unit: ServiceUnit
    sign: AdjustmentSign
    value: Decimal

    def __post_init__(self) -> None:
        unit = ServiceUnit(self.unit)
        if unit is ServiceUnit.UNIT:
            raise InvalidAdjustmentUnitError(self.concept, unit.value)
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "sign", AdjustmentSign(self.sign))
        object.__setattr__(self, "value", to_decimal(self.value))


@dataclass(frozen=True)
class PriceItemInput:
    """
    Complete, fully-resolved configuration of one quote item.

    Attributes:
        dimensions: Item width/height
        model: Profile model pricing
        glass: Optional glass pricing (None = no glass line)
        color_surcharge_percentage: 0-100 markup on profile and accessory
        include_accessory: Whether the model's accessory kit is billed
        services: Attached services, priced in order
        adjustments: Ad-hoc signed adjustments, priced in order
    """

    dimensions: DimensionInput
    model: ProfileModelInput
    glass: GlassConfigInput | None = None
    color_surcharge_percentage: Decimal = ZERO
    include_accessory: bool = False
    services: tuple[ServiceInput, ...] = ()
    adjustments: tuple[AdjustmentInput, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "color_surcharge_percentage",
            to_decimal(self.color_surcharge_percentage),
        )
        object.__setattr__(self, "include_accessory", bool(self.include_accessory))
        object.__setattr__(self, "services", tuple(self.services))
        object.__setattr__(self, "adjustments", tuple(self.adjustments))


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ServiceLine:
    """Priced service: billed quantity and its rounded amount."""

    service_id: str
    unit: ServiceUnit
    quantity: Decimal
    amount: Decimal


@dataclass(frozen=True)
class AdjustmentLine:
    """Priced adjustment; amount is already signed."""

    concept: str
    amount: Decimal


@dataclass(frozen=True)
class CalculationResult:
    """
    Itemized price of one quote item.

    Every amount is rounded half-up to two places and can be persisted or
    displayed without further rounding.  The color-surcharge fields are
    None unless a surcharge percentage above zero was applied.
    """

    dim_price: Decimal
    acc_price: Decimal
    services: tuple[ServiceLine, ...]
    adjustments: tuple[AdjustmentLine, ...]
    subtotal: Decimal
    color_surcharge_percentage: Decimal | None = None
    color_surcharge_amount: Decimal | None = None

    @property
    def services_total(self) -> Decimal:
        """Sum of service amounts."""
        return sum((line.amount for line in self.services), ZERO)

    @property
    def adjustments_total(self) -> Decimal:
        """Sum of signed adjustment amounts."""
        return sum((line.amount for line in self.adjustments), ZERO)

    @property
    def has_color_surcharge(self) -> bool:
        return self.color_surcharge_percentage is not None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with Decimal values, for persistence as a breakdown."""
        data: dict[str, Any] = {
            "dim_price": self.dim_price,
            "acc_price": self.acc_price,
            "services": [
                {
                    "service_id": line.service_id,
                    "unit": line.unit.value,
                    "quantity": line.quantity,
                    "amount": line.amount,
                }
                for line in self.services
            ],
            "adjustments": [
                {"concept": line.concept, "amount": line.amount}
                for line in self.adjustments
            ],
            "subtotal": self.subtotal,
        }
        if self.has_color_surcharge:
            data["color_surcharge_percentage"] = self.color_surcharge_percentage
            data["color_surcharge_amount"] = self.color_surcharge_amount
        return data
