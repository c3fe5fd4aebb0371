"""Tests for QuoteItemPricingService."""

import logging
from decimal import Decimal

from quote_config import PricingConfiguration
from quote_kernel.domain.values import ProfileModelInput, RoundingPolicy
from quote_services import QuoteItemPricingService


def _payload() -> dict:
    return {
        "widthMm": 1000,
        "heightMm": 1000,
        "model": {"basePrice": "10000", "costPerMmWidth": "5", "costPerMmHeight": "5"},
        "glass": {"pricePerSqm": "100000", "discountWidthMm": 50, "discountHeightMm": 50},
    }


class TestConstruction:

    def test_uses_active_config_by_default(self):
        service = QuoteItemPricingService()
        assert service.config.config_id == "window-pricing-default"
        assert service.rounding == RoundingPolicy()

    def test_explicit_config(self):
        config = PricingConfiguration(
            config_id="whole-units", version=1, rounding=RoundingPolicy(money_scale=0)
        )
        service = QuoteItemPricingService(config)
        assert service.config is config
        assert service.rounding.money_scale == 0


class TestPriceItem:

    def test_prices_with_configured_rounding(self, make_item):
        config = PricingConfiguration(
            config_id="whole-units", version=1, rounding=RoundingPolicy(money_scale=0)
        )
        model = ProfileModelInput(base_price="99.5", cost_per_mm_width=0, cost_per_mm_height=0)
        result = QuoteItemPricingService(config).price_item(make_item(model=model))
        assert result.subtotal == Decimal("100")

    def test_logs_with_identifiers(self, make_item, caplog):
        caplog.set_level(logging.INFO, logger="quote_kernel")
        service = QuoteItemPricingService()
        service.price_item(make_item(), quote_id="Q-1", item_id="I-7")
        record = next(r for r in caplog.records if r.getMessage() == "quote_item_priced")
        assert record.name == "quote_kernel.services.pricing"
        assert record.config_id == "window-pricing-default"
        assert record.subtotal == "20000.00"

    def test_context_bound_during_call_only(self, make_item):
        from quote_kernel.logging_config import LogContext

        QuoteItemPricingService().price_item(make_item(), quote_id="Q-1", item_id="I-7")
        assert LogContext.current() == {}


class TestPricePayload:

    def test_round_trip(self):
        body = QuoteItemPricingService().price_payload(_payload(), quote_id="Q-9")
        assert body["dimPrice"] == "110250.00"
        assert body["subtotal"] == "110250.00"
        assert body["services"] == []
        assert "colorSurchargeAmount" not in body
