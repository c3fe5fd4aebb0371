"""
Quote services -- boundary and orchestration over the pricing engines.

Provides:
- price_adapter: camelCase request payload <-> engine value objects
- pricing_service: QuoteItemPricingService bound to the active config
"""

from quote_services.price_adapter import build_price_item_input, serialize_result
from quote_services.pricing_service import QuoteItemPricingService

__all__ = [
    "QuoteItemPricingService",
    "build_price_item_input",
    "serialize_result",
]
