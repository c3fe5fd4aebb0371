"""
QuoteItemPricingService -- Prices quote items under the active configuration.

Responsibility:
    Resolves the rounding policy from ``quote_config`` once, binds the
    request-scoped log context (quote and item identifiers), and calls
    the pure price engine.  This is the entry point the cart/quote-item
    write path uses before persisting a subtotal and its breakdown.

Architecture position:
    Services -- orchestration over engines + config.  Holds no mutable
    state after construction and is safe to share across requests.

Failure modes:
    - PricingConfigError from ``get_active_config`` at construction.
    - PricingInputError from the payload adapter in ``price_payload``.
    - The engine itself does not raise for well-typed input.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from quote_config import PricingConfiguration, get_active_config
from quote_engines.price_item import calculate_price_item
from quote_kernel.domain.values import CalculationResult, PriceItemInput, RoundingPolicy
from quote_kernel.logging_config import LogContext, get_logger
from quote_services.price_adapter import build_price_item_input, serialize_result

logger = get_logger("services.pricing")


class QuoteItemPricingService:
    """Price individual quote items.

    Each call prices exactly one item; repricing many items (for example
    after a catalog price change) is a loop owned by the caller.
    """

    def __init__(self, config: PricingConfiguration | None = None):
        self._config = config or get_active_config()

    @property
    def config(self) -> PricingConfiguration:
        return self._config

    @property
    def rounding(self) -> RoundingPolicy:
        return self._config.rounding

    def price_item(
        self,
        item: PriceItemInput,
        *,
        quote_id: str | None = None,
        item_id: str | None = None,
    ) -> CalculationResult:
        """Price one item, tagging log records with its identifiers."""
        with LogContext.bind(quote_id=quote_id, item_id=item_id):
            result = calculate_price_item(item, rounding=self.rounding)
            logger.info("quote_item_priced", extra={
                "config_id": self._config.config_id,
                "config_version": self._config.version,
                "subtotal": str(result.subtotal),
            })
            return result

    def price_payload(
        self,
        payload: Mapping[str, Any],
        *,
        quote_id: str | None = None,
        item_id: str | None = None,
    ) -> dict[str, Any]:
        """Adapt a request payload, price it, and serialise the result."""
        item = build_price_item_input(payload)
        return serialize_result(
            self.price_item(item, quote_id=quote_id, item_id=item_id)
        )
