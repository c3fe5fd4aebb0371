"""
Tests for service and adjustment pricing.

Verifies:
- Geometry quantities per unit (sqm area, ml perimeter, unit 1)
- Minimum billing unit floor for area/perimeter services only
- Quantity overrides and their reporting scale
- Signed adjustment amounts
"""

from decimal import Decimal

import pytest

from quote_engines.services import (
    apply_minimum_billing_unit,
    calculate_adjustment_line,
    calculate_adjustments,
    calculate_service_line,
    calculate_service_quantity,
    calculate_services,
    unit_quantity,
)
from quote_kernel.domain.values import (
    AdjustmentInput,
    DimensionInput,
    ServiceInput,
    ServiceUnit,
)


def _dims(width_mm, height_mm) -> DimensionInput:
    return DimensionInput(width_mm=width_mm, height_mm=height_mm)


class TestUnitQuantity:

    def test_area_rounded(self):
        assert unit_quantity(ServiceUnit.SQM, Decimal("1.234"), Decimal("0.567")) == Decimal("0.70")

    def test_perimeter_rounded(self):
        assert unit_quantity(ServiceUnit.ML, Decimal("1.234"), Decimal("0.567")) == Decimal("3.60")

    def test_unit_is_one(self):
        assert unit_quantity(ServiceUnit.UNIT, Decimal("9"), Decimal("9")) == Decimal("1")


class TestMinimumBillingUnit:

    def test_floor_applied(self):
        assert apply_minimum_billing_unit(Decimal("0.25"), Decimal("1.0")) == Decimal("1.00")

    def test_floor_not_rounded(self):
        assert apply_minimum_billing_unit(Decimal("0.25"), Decimal("1.005")) == Decimal("1.005")

    def test_above_floor_unchanged(self):
        assert apply_minimum_billing_unit(Decimal("4.00"), Decimal("1.0")) == Decimal("4.00")

    @pytest.mark.parametrize("minimum", [None, Decimal("0")])
    def test_absent_or_zero_minimum_is_no_floor(self, minimum):
        assert apply_minimum_billing_unit(Decimal("0.25"), minimum) == Decimal("0.25")


class TestServiceQuantity:

    def test_area_below_minimum(self):
        service = ServiceInput(service_id="s", type="area", unit="sqm", rate="50000",
                               minimum_billing_unit="1.0")
        line = calculate_service_line(service, _dims(500, 500))
        assert line.quantity == Decimal("1.00")
        assert line.amount == Decimal("50000.00")

    def test_minimum_billed_exactly(self):
        service = ServiceInput(service_id="s", type="area", unit="sqm", rate="1000",
                               minimum_billing_unit="1.005")
        line = calculate_service_line(service, _dims(500, 500))
        assert line.quantity == Decimal("1.005")
        assert line.amount == Decimal("1005.00")

    def test_area_above_minimum(self):
        service = ServiceInput(service_id="s", type="area", unit="sqm", rate="50000",
                               minimum_billing_unit="1.0")
        line = calculate_service_line(service, _dims(2000, 2000))
        assert line.quantity == Decimal("4.00")
        assert line.amount == Decimal("200000.00")

    def test_fixed_ignores_minimum(self):
        service = ServiceInput(service_id="install", type="fixed", unit="unit", rate="35000",
                               minimum_billing_unit="5.0")
        line = calculate_service_line(service, _dims(2000, 2000))
        assert line.quantity == Decimal("1")
        assert str(line.quantity) == "1.00"
        assert line.amount == Decimal("35000.00")

    def test_fixed_override_billed_at_four_places(self):
        service = ServiceInput(service_id="s", type="fixed", unit="unit", rate="10",
                               quantity_override="2.33335")
        line = calculate_service_line(service, _dims(1000, 1000))
        assert line.quantity == Decimal("2.33")
        assert str(line.quantity) == "2.33"
        # 10 x 2.3334 = 23.334; 10 x 2.33 would give 23.30
        assert line.amount == Decimal("23.33")

    def test_fixed_override_quantity_keeps_four_places(self):
        service = ServiceInput(service_id="s", type="fixed", unit="unit", rate="10",
                               quantity_override="2.33335")
        quantity = calculate_service_quantity(service, Decimal("1"), Decimal("1"))
        assert quantity == Decimal("2.3334")

    def test_fixed_override_drives_amount(self):
        service = ServiceInput(service_id="s", type="fixed", unit="unit", rate="1000",
                               quantity_override="1.2345")
        line = calculate_service_line(service, _dims(1000, 1000))
        assert line.quantity == Decimal("1.23")
        assert line.amount == Decimal("1234.50")

    def test_area_override_rounded_to_quantity_scale(self):
        service = ServiceInput(service_id="s", type="area", unit="sqm", rate="100",
                               quantity_override="2.345")
        line = calculate_service_line(service, _dims(1000, 1000))
        assert line.quantity == Decimal("2.35")
        assert line.amount == Decimal("235.00")

    def test_override_still_floored_by_minimum(self):
        service = ServiceInput(service_id="s", type="area", unit="sqm", rate="100",
                               quantity_override="2.345", minimum_billing_unit="3")
        line = calculate_service_line(service, _dims(1000, 1000))
        assert line.quantity == Decimal("3.00")
        assert line.amount == Decimal("300.00")

    def test_perimeter_from_geometry(self):
        service = ServiceInput(service_id="seal", type="perimeter", unit="ml", rate="1200")
        quantity = calculate_service_quantity(service, Decimal("1.2"), Decimal("1.5"))
        assert quantity == Decimal("5.40")

    def test_zero_dimensions_without_minimum(self):
        service = ServiceInput(service_id="s", type="area", unit="sqm", rate="50000")
        line = calculate_service_line(service, _dims(0, 0))
        assert line.quantity == Decimal("0.00")
        assert line.amount == Decimal("0.00")


class TestServicesList:

    def test_order_preserved(self):
        services = [
            ServiceInput(service_id="b", type="fixed", unit="unit", rate="1"),
            ServiceInput(service_id="a", type="area", unit="sqm", rate="1"),
        ]
        lines = calculate_services(services, _dims(1000, 1000))
        assert [line.service_id for line in lines] == ["b", "a"]

    def test_empty(self):
        assert calculate_services((), _dims(1000, 1000)) == ()


class TestAdjustments:

    def test_negative_area_adjustment(self):
        adj = AdjustmentInput(concept="Promo", unit="sqm", sign="negative", value="333.335")
        line = calculate_adjustment_line(adj, _dims(1000, 1000))
        assert line.concept == "Promo"
        assert line.amount == Decimal("-333.34")

    def test_positive_perimeter_adjustment(self):
        adj = AdjustmentInput(concept="Transport", unit="ml", sign="positive", value="250")
        line = calculate_adjustment_line(adj, _dims(1200, 1500))
        assert line.amount == Decimal("1350.00")

    def test_adjustments_in_order(self):
        adjustments = [
            AdjustmentInput(concept="Discount", unit="sqm", sign="negative", value="1000"),
            AdjustmentInput(concept="Transport", unit="ml", sign="positive", value="250"),
        ]
        lines = calculate_adjustments(adjustments, _dims(1200, 1500))
        assert [(line.concept, line.amount) for line in lines] == [
            ("Discount", Decimal("-1800.00")),
            ("Transport", Decimal("1350.00")),
        ]
