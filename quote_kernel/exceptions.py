"""
Typed Exception Hierarchy for the Quote Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers of the pricing boundary (request handlers, import jobs) must be
able to react to bad input without parsing message strings:

  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

The price calculation engine itself raises none of these for well-typed
input: negative dimensions are clamped, excessive glass discounts floor to
zero area, and absent optional fields default to "no line". These errors
belong to the boundary (payload adapter, configuration loader, standalone
helpers with a hard domain such as the margin calculator).

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    QuoteKernelError (base)
    |
    +-- PricingInputError
    |   +-- MissingFieldError
    |   +-- InvalidEnumValueError
    |   +-- InvalidAdjustmentUnitError
    |   +-- InvalidMarginError
    |
    +-- PricingConfigError
        +-- PricingConfigNotFoundError
        +-- InvalidPricingConfigError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Input           | MISSING_FIELD               | Required payload key absent or null
                | INVALID_ENUM_VALUE          | Service type/unit or sign not recognised
                | INVALID_ADJUSTMENT_UNIT     | Adjustment billed per unit (only sqm/ml)
                | INVALID_MARGIN              | Margin outside [0, 100)
----------------|-----------------------------|-----------------------------------------
Config          | PRICING_CONFIG_NOT_FOUND    | No YAML set with the requested name
                | INVALID_PRICING_CONFIG      | YAML set fails structural validation

===============================================================================
HANDLING PATTERNS
===============================================================================

    try:
        result = service.price_payload(payload)
    except MissingFieldError as e:
        return {"error": e.code, "field": e.field}
    except PricingInputError as e:
        return {"error": e.code}
"""

from __future__ import annotations

from typing import Any


class QuoteKernelError(Exception):
    """
    Base exception for all quote kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "QUOTE_KERNEL_ERROR"


# Input-related exceptions


class PricingInputError(QuoteKernelError):
    """Base exception for pricing input errors."""

    code: str = "PRICING_INPUT_ERROR"


class MissingFieldError(PricingInputError):
    """A required field was absent from a pricing payload."""

    code: str = "MISSING_FIELD"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidEnumValueError(PricingInputError):
    """A field carried a value outside its closed set of choices."""

    code: str = "INVALID_ENUM_VALUE"

    def __init__(self, field: str, value: Any, allowed: tuple[str, ...]):
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid value {value!r} for {field}; expected one of {', '.join(allowed)}"
        )


class InvalidAdjustmentUnitError(PricingInputError):
    """Adjustments are billed by area or perimeter only."""

    code: str = "INVALID_ADJUSTMENT_UNIT"

    def __init__(self, concept: str, unit: str):
        self.concept = concept
        self.unit = unit
        super().__init__(
            f"Adjustment '{concept}' cannot use unit '{unit}'; use 'sqm' or 'ml'"
        )


class InvalidMarginError(PricingInputError):
    """Profit margin percentage outside [0, 100)."""

    code: str = "INVALID_MARGIN"

    def __init__(self, margin_percentage: str):
        self.margin_percentage = margin_percentage
        super().__init__(
            f"Margin percentage must be in [0, 100), got {margin_percentage}"
        )


# Configuration-related exceptions


class PricingConfigError(QuoteKernelError):
    """Base exception for pricing configuration errors."""

    code: str = "PRICING_CONFIG_ERROR"


class PricingConfigNotFoundError(PricingConfigError):
    """No configuration set exists with the requested name."""

    code: str = "PRICING_CONFIG_NOT_FOUND"

    def __init__(self, name: str, config_dir: str):
        self.name = name
        self.config_dir = config_dir
        super().__init__(f"Pricing configuration '{name}' not found in {config_dir}")


class InvalidPricingConfigError(PricingConfigError):
    """A configuration set failed structural validation."""

    code: str = "INVALID_PRICING_CONFIG"

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid pricing configuration {source}: {reason}")
