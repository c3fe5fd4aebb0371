"""
quote_services.price_adapter -- Request payload <-> pricing engine translation.

Responsibility:
    Converts the camelCase payload sent by the quote-item write path
    (``widthMm``, ``model{...}``, ``services[...]`` ...) into a frozen
    ``PriceItemInput``, and a ``CalculationResult`` back into a
    JSON-ready camelCase dict with decimal strings.

Architecture position:
    Services -- boundary between the request layer and the pure engines.
    Imports quote_kernel only; no engine calls happen here.

Invariants enforced:
    - Decimal safety: numeric payload values are handed to the value
      objects, which convert them to Decimal (floats through ``str()``).
    - Decimals are serialised as strings so no precision is lost.
    - The color-surcharge keys appear in the output only when a
      surcharge was applied.

Failure modes:
    - MissingFieldError when a required key is absent or null.
    - InvalidEnumValueError for unknown service types/units or signs.
    - InvalidAdjustmentUnitError for an adjustment billed per unit.

Usage:
    from quote_services.price_adapter import build_price_item_input, serialize_result

    item = build_price_item_input(payload)
    body = serialize_result(calculate_price_item(item))
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from quote_kernel.domain.values import (
    AdjustmentInput,
    AdjustmentSign,
    CalculationResult,
    DimensionInput,
    GlassConfigInput,
    PriceItemInput,
    ProfileModelInput,
    ServiceInput,
    ServiceType,
    ServiceUnit,
)
from quote_kernel.exceptions import InvalidEnumValueError, MissingFieldError
from quote_kernel.logging_config import get_logger

logger = get_logger("services.price_adapter")

_E = TypeVar("_E", bound=Enum)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require(data: Mapping[str, Any], key: str, path: str) -> Any:
    """Return ``data[key]``; a missing or null value is a MissingFieldError."""
    value = data.get(key)
    if value is None:
        raise MissingFieldError(f"{path}{key}")
    return value


def _enum(enum_cls: type[_E], value: Any, field: str) -> _E:
    """Coerce a payload string into ``enum_cls``."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = tuple(member.value for member in enum_cls)
        raise InvalidEnumValueError(field, value, allowed) from None


# ---------------------------------------------------------------------------
# Payload -> input
# ---------------------------------------------------------------------------


def _build_model(data: Mapping[str, Any]) -> ProfileModelInput:
    return ProfileModelInput(
        base_price=_require(data, "basePrice", "model."),
        cost_per_mm_width=_require(data, "costPerMmWidth", "model."),
        cost_per_mm_height=_require(data, "costPerMmHeight", "model."),
        accessory_price=data.get("accessoryPrice"),
    )


def _build_glass(data: Mapping[str, Any] | None) -> GlassConfigInput | None:
    if data is None:
        return None
    return GlassConfigInput(
        price_per_sqm=_require(data, "pricePerSqm", "glass."),
        discount_width_mm=data.get("discountWidthMm"),
        discount_height_mm=data.get("discountHeightMm"),
    )


def _build_service(data: Mapping[str, Any], index: int) -> ServiceInput:
    path = f"services[{index}]."
    return ServiceInput(
        service_id=str(_require(data, "serviceId", path)),
        type=_enum(ServiceType, _require(data, "type", path), f"{path}type"),
        unit=_enum(ServiceUnit, _require(data, "unit", path), f"{path}unit"),
        rate=_require(data, "rate", path),
        minimum_billing_unit=data.get("minimumBillingUnit"),
        quantity_override=data.get("quantityOverride"),
    )


def _build_adjustment(data: Mapping[str, Any], index: int) -> AdjustmentInput:
    path = f"adjustments[{index}]."
    return AdjustmentInput(
        concept=str(_require(data, "concept", path)),
        unit=_enum(ServiceUnit, _require(data, "unit", path), f"{path}unit"),
        sign=_enum(AdjustmentSign, _require(data, "sign", path), f"{path}sign"),
        value=_require(data, "value", path),
    )


def build_price_item_input(payload: Mapping[str, Any]) -> PriceItemInput:
    """
    Build a ``PriceItemInput`` from a camelCase request payload.

    Optional keys (``glass``, ``colorSurchargePercentage``,
    ``includeAccessory``, ``services``, ``adjustments``) default to
    "absent"; only structural problems raise.  ``includeAccessory`` bills the
    accessory only for a literal JSON ``true``.
    """
    item = PriceItemInput(
        dimensions=DimensionInput(
            width_mm=_require(payload, "widthMm", ""),
            height_mm=_require(payload, "heightMm", ""),
        ),
        model=_build_model(_require(payload, "model", "")),
        glass=_build_glass(payload.get("glass")),
        color_surcharge_percentage=payload.get("colorSurchargePercentage"),
        include_accessory=payload.get("includeAccessory") is True,
        services=tuple(
            _build_service(s, i) for i, s in enumerate(payload.get("services") or ())
        ),
        adjustments=tuple(
            _build_adjustment(a, i) for i, a in enumerate(payload.get("adjustments") or ())
        ),
    )
    logger.debug("price_item_input_built", extra={
        "service_count": len(item.services),
        "adjustment_count": len(item.adjustments),
        "has_glass": item.glass is not None,
    })
    return item


# ---------------------------------------------------------------------------
# Result -> payload
# ---------------------------------------------------------------------------


def serialize_result(result: CalculationResult) -> dict[str, Any]:
    """camelCase dict with decimal strings, ready for JSON or persistence."""
    body: dict[str, Any] = {
        "dimPrice": str(result.dim_price),
        "accPrice": str(result.acc_price),
        "services": [
            {
                "serviceId": line.service_id,
                "unit": line.unit.value,
                "quantity": str(line.quantity),
                "amount": str(line.amount),
            }
            for line in result.services
        ],
        "adjustments": [
            {"concept": line.concept, "amount": str(line.amount)}
            for line in result.adjustments
        ],
        "subtotal": str(result.subtotal),
    }
    if result.has_color_surcharge:
        body["colorSurchargePercentage"] = str(result.color_surcharge_percentage)
        body["colorSurchargeAmount"] = str(result.color_surcharge_amount)
    return body
