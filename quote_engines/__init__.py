"""
Module: quote_engines
Responsibility:
    Package entrypoint that re-exports all public symbols from the pure
    calculation engine sub-modules.  This is the canonical import surface
    for higher layers (quote_services).

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import quote_kernel (and sibling engine modules).
    MUST NOT import quote_services or quote_config.

Invariants enforced:
    - Purity: engines never read clocks for results, files, or the
      environment; the same input always produces the same output.
    - Decimal-only arithmetic: money, dimensions and quantities are
      ``Decimal``; floats are converted through ``str()`` at the input
      boundary and never used for arithmetic.
    - Half-up rounding at documented boundaries only.

Audit relevance:
    Top-level engine invocations are traced via ``@traced_engine`` (see
    ``quote_engines.tracer``), emitting QUOTE_ENGINE_TRACE log records
    with engine name, version, input fingerprint, and duration.

Usage:
    from quote_engines import calculate_price_item
    from quote_engines.dimension import calculate_dimensional_price
    from quote_engines.services import calculate_service_line
    from quote_engines.margin import calculate_sales_price
"""

from quote_engines.accessory import calculate_accessory_price
from quote_engines.dimension import (
    DimensionalPrice,
    GlassCost,
    ProfileCost,
    calculate_dimensional_price,
    calculate_glass_cost,
    calculate_profile_cost,
    surcharge_multiplier,
)
from quote_engines.margin import calculate_sales_price, margin_amount
from quote_engines.price_item import calculate_price_item
from quote_engines.services import (
    apply_minimum_billing_unit,
    calculate_adjustment_line,
    calculate_adjustments,
    calculate_service_line,
    calculate_service_quantity,
    calculate_services,
    unit_quantity,
)
from quote_engines.tracer import compute_input_fingerprint, traced_engine

__all__ = [
    # Aggregator
    "calculate_price_item",
    # Dimension & glass
    "DimensionalPrice",
    "GlassCost",
    "ProfileCost",
    "calculate_dimensional_price",
    "calculate_glass_cost",
    "calculate_profile_cost",
    "surcharge_multiplier",
    # Accessory
    "calculate_accessory_price",
    # Services & adjustments
    "apply_minimum_billing_unit",
    "calculate_adjustment_line",
    "calculate_adjustments",
    "calculate_service_line",
    "calculate_service_quantity",
    "calculate_services",
    "unit_quantity",
    # Margin
    "calculate_sales_price",
    "margin_amount",
    # Tracing
    "compute_input_fingerprint",
    "traced_engine",
]
