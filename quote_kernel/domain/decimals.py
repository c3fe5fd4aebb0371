"""
Decimals -- Exact arithmetic primitives for pricing.

Responsibility:
    Convert caller-supplied numbers into ``Decimal``, round them half-up at
    a given scale, and convert millimeters to meters without binary-float
    error.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by value objects and every pricing engine.

Invariants enforced:
    - Money and dimensions are never represented as float.  Floats handed
      in by callers are converted through ``str()`` so ``0.1`` becomes
      ``Decimal("0.1")`` rather than its binary expansion.
    - Rounding is ROUND_HALF_UP (ties away from zero), never banker's
      rounding.  ``round_half_up`` is idempotent.

Failure modes:
    - ``decimal.InvalidOperation`` for non-numeric strings.  Schema
      validation at the request boundary is expected to have rejected
      those already.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

DecimalLike = Union[Decimal, int, float, str]

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
MILLIMETERS_PER_METER = Decimal("1000")

MONEY_SCALE = 2
QUANTITY_SCALE = 2
FIXED_QUANTITY_SCALE = 4


def to_decimal(value: DecimalLike | None) -> Decimal:
    """
    Convert a number, numeric string, or Decimal into a Decimal.

    ``None`` is read as zero.  Already-exact decimals are returned as-is.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(str(value).strip())


def round_half_up(value: DecimalLike | None, scale: int = MONEY_SCALE) -> Decimal:
    """
    Round to ``scale`` decimal places with ties away from zero.

    ``0.005 -> 0.01`` and ``-0.005 -> -0.01``.  A negative zero result is
    normalised to positive zero so serialised amounts never read "-0.00".
    """
    d = to_decimal(value)
    exponent = ONE.scaleb(-scale)
    with localcontext() as ctx:
        # quantize raises InvalidOperation when the coefficient would
        # exceed the context precision
        ctx.prec = max(ctx.prec, d.adjusted() + scale + 2)
        rounded = d.quantize(exponent, rounding=ROUND_HALF_UP)
    if rounded.is_zero() and rounded.is_signed():
        rounded = rounded.copy_abs()
    return rounded


def mm_to_meters(value_mm: DecimalLike | None) -> Decimal:
    """Millimeters to meters by exact decimal division."""
    return to_decimal(value_mm) / MILLIMETERS_PER_METER


def clamp_non_negative(value: DecimalLike | None) -> Decimal:
    """Return the value, or zero when it is negative."""
    d = to_decimal(value)
    return d if d > ZERO else ZERO
