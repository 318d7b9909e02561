"""Tests for sale price calculation and quotation totals."""

from decimal import Decimal

from pcbuilder.config import Settings
from pcbuilder.pricing.calculator import (
    calculate_price,
    format_currency,
    iva_from_price,
    iva_rate,
    pricing_breakdown,
    prorate_item_prices,
    round_up_to_step,
    subtotal_from_price,
)
from pcbuilder.schemas.quotation import QuotationItem


# ─── Fixtures ───


def _item(
    item_id: str, price: float, quantity: int = 1, category_id: str = "MICRO"
) -> QuotationItem:
    return QuotationItem(
        id=item_id,
        name=f"Item {item_id}",
        category_id=category_id,
        quantity=quantity,
        price=price,
    )


def _total(items: list[QuotationItem]) -> float:
    return sum(i.price * i.quantity for i in items)


# ═══════════════════════════════════════════════════════════
# Rounding and rates
# ═══════════════════════════════════════════════════════════


class TestRoundUp:
    def test_rounds_up_to_next_step(self):
        assert round_up_to_step(121.3) == 125
        assert round_up_to_step(126) == 130

    def test_exact_multiple_is_kept(self):
        assert round_up_to_step(130) == 130
        assert round_up_to_step(Decimal("125.00")) == 125

    def test_non_positive_is_zero(self):
        assert round_up_to_step(0) == 0
        assert round_up_to_step(-12) == 0
        assert round_up_to_step(None) == 0

    def test_custom_step(self):
        assert round_up_to_step(121, step=10) == 130


class TestIvaRate:
    def test_hardware(self):
        assert iva_rate("MICRO") == Decimal("0.08")

    def test_software_is_case_insensitive(self):
        assert iva_rate("SOFTW") == Decimal("0.16")
        assert iva_rate("softw") == Decimal("0.16")

    def test_missing_category(self):
        assert iva_rate(None) == Decimal("0.08")


# ═══════════════════════════════════════════════════════════
# Sale price
# ═══════════════════════════════════════════════════════════


class TestCalculatePrice:
    def test_hardware_price(self):
        # 100 × 1.20 × 1.08 = 129.6
        assert calculate_price(100, "MICRO") == 130

    def test_software_price(self):
        # 100 × 1.20 × 1.16 = 139.2
        assert calculate_price(100, "SOFTW") == 140

    def test_missing_cost(self):
        assert calculate_price(None, "MICRO") == 0
        assert calculate_price(0, "MICRO") == 0

    def test_settings_override(self):
        settings = Settings(profit_margin=1.0, iva_rate=0.0, price_step=10)
        assert calculate_price(101, "MICRO", settings) == 110

    def test_subtotal_from_price(self):
        assert subtotal_from_price(108, "MICRO") == Decimal(100)
        assert subtotal_from_price(0, "MICRO") == Decimal(0)

    def test_iva_from_price(self):
        assert iva_from_price(108, "MICRO") == Decimal(8)
        assert iva_from_price(116, "SOFTW") == Decimal(16)


# ═══════════════════════════════════════════════════════════
# Totals
# ═══════════════════════════════════════════════════════════


class TestBreakdown:
    def test_mixed_rates(self):
        items = [
            _item("cpu", 108, quantity=2),
            _item("os", 116, category_id="SOFTW"),
        ]
        result = pricing_breakdown(items)
        assert result.subtotal == 300.0
        assert result.iva == 32.0
        assert result.total == 332.0

    def test_empty(self):
        result = pricing_breakdown([])
        assert (result.subtotal, result.iva, result.total) == (0, 0, 0)


class TestProrate:
    def test_exact_ratio(self):
        items = [_item("a", 100), _item("b", 50, quantity=2)]
        result = prorate_item_prices(items, 300)
        assert [i.price for i in result] == [150, 75]

    def test_rounding_gap_goes_to_largest_line(self):
        items = [_item("a", 100), _item("b", 100)]
        result = prorate_item_prices(items, 205)
        assert [i.price for i in result] == [100, 105]
        assert _total(result) == 205

    def test_zero_prices_spread_evenly(self):
        items = [_item("a", 0), _item("b", 0, quantity=3)]
        result = prorate_item_prices(items, 100)
        assert [i.price for i in result] == [25, 25]

    def test_inputs_are_not_modified(self):
        items = [_item("a", 100)]
        prorate_item_prices(items, 500)
        assert items[0].price == 100

    def test_prices_land_on_step(self):
        items = [_item("a", 133), _item("b", 71, quantity=2)]
        result = prorate_item_prices(items, 400)
        assert all(i.price % 5 == 0 for i in result)


class TestFormatCurrency:
    def test_thousands_separator(self):
        assert format_currency(1250) == "$1,250.00"

    def test_cents(self):
        assert format_currency(Decimal("99.5")) == "$99.50"
        assert format_currency(0) == "$0.00"
