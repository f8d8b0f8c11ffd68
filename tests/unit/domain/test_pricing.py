"""Unit tests for the pricing engine"""

import pytest
from decimal import Decimal
from src.domain.line_item import LineItem
from src.domain.pricing import (
    Discount,
    DiscountType,
    PricingInput,
    recompute,
    subtotal_of,
)


def lines_worth(amount: str):
    return (LineItem(item_ref=1, quantity=2, unit_price=Decimal(amount) / 2),)


class TestLineTotals:

    def test_line_total_is_price_times_quantity(self):
        line = LineItem(item_ref=1, quantity=3, unit_price=Decimal("12.50"))
        assert line.line_total == Decimal("37.50")

    def test_blank_line_contributes_zero(self):
        blank = LineItem(quantity=4, unit_price=Decimal("10"))
        assert blank.line_total == Decimal("0")

    def test_subtotal_skips_blank_lines(self):
        lines = [
            LineItem(item_ref=1, quantity=2, unit_price=Decimal("500")),
            LineItem(item_ref=2, quantity=1, unit_price=Decimal("45")),
            LineItem(),
        ]
        assert subtotal_of(lines) == Decimal("1045")


class TestRecompute:

    def test_percent_discount(self):
        snapshot = recompute(
            PricingInput(
                lines=lines_worth("1000"),
                discount=Discount(type=DiscountType.PERCENT, value=Decimal("20")),
            )
        )

        assert snapshot.subtotal == Decimal("1000")
        assert snapshot.discount_amount == Decimal("200")
        assert snapshot.taxable_amount == Decimal("800")
        assert snapshot.tax_amount == Decimal("144")
        assert snapshot.total == Decimal("944")
        assert snapshot.rounding_adjustment == Decimal("0")

    def test_flat_discount(self):
        snapshot = recompute(
            PricingInput(
                lines=lines_worth("1000"),
                discount=Discount(type=DiscountType.FLAT, value=Decimal("50")),
            )
        )

        assert snapshot.discount_amount == Decimal("50")
        assert snapshot.taxable_amount == Decimal("950")
        assert snapshot.tax_amount == Decimal("171")
        assert snapshot.total == Decimal("1121")

    def test_override_equal_to_computed_has_no_adjustment(self):
        snapshot = recompute(
            PricingInput(
                lines=lines_worth("1000"),
                discount=Discount(type=DiscountType.PERCENT, value=Decimal("20")),
                net_override=Decimal("944"),
            )
        )

        assert snapshot.total == Decimal("944")
        assert snapshot.rounding_adjustment == Decimal("0")
        assert not snapshot.has_rounding_adjustment

    def test_override_above_computed(self):
        snapshot = recompute(
            PricingInput(
                lines=lines_worth("1000"),
                discount=Discount(type=DiscountType.PERCENT, value=Decimal("20")),
                net_override=Decimal("949"),
            )
        )

        assert snapshot.computed_total == Decimal("944")
        assert snapshot.total == Decimal("949")
        assert snapshot.rounding_adjustment == Decimal("5")
        assert snapshot.has_rounding_adjustment

    def test_empty_ledger_prices_to_zero(self):
        snapshot = recompute(PricingInput())
        assert snapshot.total == Decimal("0")

    def test_percent_above_hundred_flows_through(self):
        snapshot = recompute(
            PricingInput(
                lines=lines_worth("100"),
                discount=Discount(type=DiscountType.PERCENT, value=Decimal("150")),
            )
        )
        assert snapshot.taxable_amount == Decimal("-50")

    def test_tax_rate_is_an_input(self):
        snapshot = recompute(PricingInput(lines=lines_worth("100"), tax_rate=Decimal("0.05")))
        assert snapshot.tax_amount == Decimal("5")
        assert snapshot.total == Decimal("105")

    def test_input_is_immutable(self):
        pricing_input = PricingInput(lines=lines_worth("100"))
        with pytest.raises(Exception):
            pricing_input.tax_rate = Decimal("0.05")


class TestForStorage:

    def test_identities_hold_after_quantizing(self):
        snapshot = recompute(
            PricingInput(
                lines=(LineItem(item_ref=1, quantity=3, unit_price=Decimal("33.333333")),),
                discount=Discount(type=DiscountType.PERCENT, value=Decimal("7.5")),
                net_override=Decimal("100"),
            )
        ).for_storage()

        assert snapshot.taxable_amount == snapshot.subtotal - snapshot.discount_amount
        assert snapshot.computed_total == snapshot.taxable_amount + snapshot.tax_amount
        assert snapshot.rounding_adjustment == snapshot.total - snapshot.computed_total
        assert snapshot.tax_amount == snapshot.tax_amount.quantize(Decimal("0.000001"))
        assert snapshot.total == Decimal("100")
