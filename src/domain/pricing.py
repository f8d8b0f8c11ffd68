"""Pricing Engine

Turns ledger lines, a discount and an optional committed net override into a
PricingSnapshot:

    subtotal        = sum(line totals)
    discount_amount = subtotal * value / 100   (percent)  | value  (flat)
    taxable_amount  = subtotal - discount_amount
    tax_amount      = taxable_amount * tax_rate
    computed_total  = taxable_amount + tax_amount
    total           = net_override if set else computed_total
    rounding        = total - computed_total

The snapshot is always derived fresh from its inputs; nothing is cached.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, Field
from src.domain.line_item import LineItem
from src.domain.money import ZERO, percent_of, quantize_storage

DEFAULT_TAX_RATE = Decimal("0.18")
ROUNDING_EPSILON = Decimal("0.001")


class DiscountType(str, Enum):
    """Discount interpretation"""
    PERCENT = "percent"  # value is a percentage of the subtotal
    FLAT = "flat"        # value is a currency amount


class Discount(BaseModel):
    """
    Discount specification

    Percent values are not clamped: negative or > 100 values flow through
    and can produce a negative discount or taxable amount.
    """

    model_config = ConfigDict(frozen=True)

    type: DiscountType = DiscountType.PERCENT
    value: Decimal = ZERO

    def amount_for(self, subtotal: Decimal) -> Decimal:
        if self.type == DiscountType.PERCENT:
            return percent_of(subtotal, self.value)
        return self.value


class PricingInput(BaseModel):
    """Immutable inputs to recompute()"""

    model_config = ConfigDict(frozen=True)

    lines: Tuple[LineItem, ...] = ()
    discount: Discount = Field(default_factory=Discount)
    net_override: Optional[Decimal] = None
    tax_rate: Decimal = DEFAULT_TAX_RATE


class PricingSnapshot(BaseModel):
    """Fully derived pricing for one set of inputs"""

    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    discount_type: DiscountType
    discount_value: Decimal
    discount_amount: Decimal
    taxable_amount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    computed_total: Decimal
    net_override: Optional[Decimal] = None
    total: Decimal

    @property
    def rounding_adjustment(self) -> Decimal:
        return self.total - self.computed_total

    @property
    def has_rounding_adjustment(self) -> bool:
        """Whether the adjustment is large enough to show as its own line"""
        return abs(self.rounding_adjustment) > ROUNDING_EPSILON

    def for_storage(self) -> "PricingSnapshot":
        """
        Quantize to storage precision

        Each derived figure is re-derived from the already quantized ones so
        taxable = subtotal - discount, total - computed = rounding etc. still
        hold exactly on the stored values.
        """
        subtotal = quantize_storage(self.subtotal)
        discount_amount = quantize_storage(self.discount_amount)
        taxable_amount = subtotal - discount_amount
        tax_amount = quantize_storage(taxable_amount * self.tax_rate)
        computed_total = taxable_amount + tax_amount
        net_override = (
            quantize_storage(self.net_override) if self.net_override is not None else None
        )
        return PricingSnapshot(
            subtotal=subtotal,
            discount_type=self.discount_type,
            discount_value=self.discount_value,
            discount_amount=discount_amount,
            taxable_amount=taxable_amount,
            tax_rate=self.tax_rate,
            tax_amount=tax_amount,
            computed_total=computed_total,
            net_override=net_override,
            total=net_override if net_override is not None else computed_total,
        )


def subtotal_of(lines: Sequence[LineItem]) -> Decimal:
    return sum((line.line_total for line in lines), ZERO)


def recompute(pricing_input: PricingInput) -> PricingSnapshot:
    discount = pricing_input.discount
    subtotal = subtotal_of(pricing_input.lines)
    discount_amount = discount.amount_for(subtotal)
    taxable_amount = subtotal - discount_amount
    tax_amount = taxable_amount * pricing_input.tax_rate
    computed_total = taxable_amount + tax_amount
    override = pricing_input.net_override

    return PricingSnapshot(
        subtotal=subtotal,
        discount_type=discount.type,
        discount_value=discount.value,
        discount_amount=discount_amount,
        taxable_amount=taxable_amount,
        tax_rate=pricing_input.tax_rate,
        tax_amount=tax_amount,
        computed_total=computed_total,
        net_override=override,
        total=override if override is not None else computed_total,
    )
