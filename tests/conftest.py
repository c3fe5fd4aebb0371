"""
Pytest fixtures for the quote pricing test suite.

Provides:
- Logging isolation between tests
- Catalog-like model, glass and service builders
"""

from decimal import Decimal

import pytest

from quote_kernel.domain.values import (
    AdjustmentInput,
    DimensionInput,
    GlassConfigInput,
    PriceItemInput,
    ProfileModelInput,
    ServiceInput,
)
from quote_kernel.logging_config import LogContext, reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state and context between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def standard_model() -> ProfileModelInput:
    """Base 10,000 with 5 per millimeter of width and of height."""
    return ProfileModelInput(
        base_price=Decimal("10000"),
        cost_per_mm_width=Decimal("5"),
        cost_per_mm_height=Decimal("5"),
        accessory_price=Decimal("0"),
    )


@pytest.fixture
def standard_glass() -> GlassConfigInput:
    """Glass at 100,000 per m² with no frame discount."""
    return GlassConfigInput(price_per_sqm=Decimal("100000"))


@pytest.fixture
def make_item(standard_model):
    """Factory for PriceItemInput with the standard model by default."""

    def _make(
        width_mm=1000,
        height_mm=1000,
        model: ProfileModelInput | None = None,
        glass: GlassConfigInput | None = None,
        color_surcharge_percentage=0,
        include_accessory: bool = False,
        services: tuple[ServiceInput, ...] = (),
        adjustments: tuple[AdjustmentInput, ...] = (),
    ) -> PriceItemInput:
        return PriceItemInput(
            dimensions=DimensionInput(width_mm=width_mm, height_mm=height_mm),
            model=model or standard_model,
            glass=glass,
            color_surcharge_percentage=color_surcharge_percentage,
            include_accessory=include_accessory,
            services=services,
            adjustments=adjustments,
        )

    return _make
