"""
Tests for the engine tracer.

Verifies:
- QUOTE_ENGINE_TRACE is emitted with engine identity and duration
- Fingerprints are deterministic and independent of call style
- Fingerprints change when traced inputs change
"""

import logging
from decimal import Decimal

from quote_engines.margin import calculate_sales_price
from quote_engines.price_item import calculate_price_item
from quote_engines.tracer import compute_input_fingerprint, traced_engine
from quote_kernel.domain.values import DEFAULT_ROUNDING


def _traces(caplog) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.getMessage() == "QUOTE_ENGINE_TRACE"]


class TestComputeInputFingerprint:

    def test_deterministic(self):
        args = {"a": Decimal("1.5"), "b": "x"}
        assert compute_input_fingerprint(("a", "b"), args) == compute_input_fingerprint(("a", "b"), args)

    def test_sixteen_hex_chars(self):
        fp = compute_input_fingerprint(("a",), {"a": 1})
        assert len(fp) == 16
        int(fp, 16)

    def test_only_listed_fields(self):
        fp1 = compute_input_fingerprint(("a",), {"a": 1, "b": 2})
        fp2 = compute_input_fingerprint(("a",), {"a": 1, "b": 3})
        assert fp1 == fp2

    def test_missing_field_is_null(self):
        assert compute_input_fingerprint(("a",), {}) == compute_input_fingerprint(("a",), {"a": None})

    def test_dataclass_values(self, make_item):
        fp1 = compute_input_fingerprint(("item",), {"item": make_item(width_mm=1000)})
        fp2 = compute_input_fingerprint(("item",), {"item": make_item(width_mm=1001)})
        assert fp1 != fp2


class TestTracedEngine:

    def test_emits_trace(self, make_item, caplog):
        caplog.set_level(logging.INFO, logger="quote_kernel")
        calculate_price_item(make_item())
        traces = _traces(caplog)
        assert len(traces) == 1
        trace = traces[0]
        assert trace.name == "quote_kernel.engines.tracer"
        assert trace.trace_type == "QUOTE_ENGINE_TRACE"
        assert trace.engine_name == "price_item"
        assert trace.engine_version == "1.0"
        assert len(trace.input_fingerprint) == 16
        assert trace.duration_ms >= 0
        assert trace.function == "calculate_price_item"

    def test_positional_and_keyword_calls_match(self, make_item, caplog):
        caplog.set_level(logging.INFO, logger="quote_kernel")
        item = make_item()
        calculate_price_item(item)
        calculate_price_item(item=item, rounding=DEFAULT_ROUNDING)
        first, second = _traces(caplog)
        assert first.input_fingerprint == second.input_fingerprint

    def test_different_inputs_differ(self, caplog):
        caplog.set_level(logging.INFO, logger="quote_kernel")
        calculate_sales_price(Decimal("100"), Decimal("20"))
        calculate_sales_price(Decimal("100"), Decimal("25"))
        first, second = _traces(caplog)
        assert first.engine_name == "margin"
        assert first.input_fingerprint != second.input_fingerprint

    def test_return_value_untouched(self):
        @traced_engine("double", "0.1", fingerprint_fields=("x",))
        def double(x):
            return x * 2

        assert double(21) == 42
        assert double.__name__ == "double"

    def test_no_fingerprint_fields(self, caplog):
        caplog.set_level(logging.INFO, logger="quote_kernel")

        @traced_engine("noop", "0.1")
        def noop():
            return None

        noop()
        assert _traces(caplog)[0].input_fingerprint == ""
