"""
Pure domain layer.

This module contains pricing value objects and decimal primitives
with NO dependencies on:
- Database
- Time/clock
- I/O

All domain objects are immutable and deterministic.
"""

from quote_kernel.domain.decimals import (
    DecimalLike,
    clamp_non_negative,
    mm_to_meters,
    round_half_up,
    to_decimal,
)
from quote_kernel.domain.values import (
    DEFAULT_ROUNDING,
    AdjustmentInput,
    AdjustmentLine,
    AdjustmentSign,
    CalculationResult,
    DimensionInput,
    GlassConfigInput,
    PriceItemInput,
    ProfileModelInput,
    RoundingPolicy,
    ServiceInput,
    ServiceLine,
    ServiceType,
    ServiceUnit,
)

__all__ = [
    # Decimal primitives
    "DecimalLike",
    "clamp_non_negative",
    "mm_to_meters",
    "round_half_up",
    "to_decimal",
    # Enums
    "AdjustmentSign",
    "ServiceType",
    "ServiceUnit",
    # Inputs
    "AdjustmentInput",
    "DimensionInput",
    "GlassConfigInput",
    "PriceItemInput",
    "ProfileModelInput",
    "ServiceInput",
    # Rounding
    "DEFAULT_ROUNDING",
    "RoundingPolicy",
    # Results
    "AdjustmentLine",
    "CalculationResult",
    "ServiceLine",
]
