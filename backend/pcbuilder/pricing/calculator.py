"""Price Calculator — sale prices from catalog cost.

Price = cost × margin × (1 + IVA), rounded up to the next multiple of 5.
IVA is 16% for software and 8% for everything else.

All arithmetic is Decimal: values that are already a multiple of the step
stay where they are (130 → 130) instead of drifting up through float error.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

from pcbuilder.config import Settings, get_settings
from pcbuilder.schemas.quotation import PricingBreakdown, QuotationItem

_CENT = Decimal("0.01")


def _dec(value: float | int | Decimal | None) -> Decimal:
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _money(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def round_up_to_step(value: float | Decimal | None, step: int = 5) -> int:
    """Round up to the next multiple of ``step``: 121.3 → 125, 130 → 130."""
    amount = _dec(value)
    if amount <= 0:
        return 0
    steps = (amount / step).to_integral_value(rounding=ROUND_CEILING)
    return int(steps) * step


def iva_rate(category_id: str | None, settings: Settings | None = None) -> Decimal:
    settings = settings or get_settings()
    if category_id and category_id.upper() == settings.software_category_id.upper():
        return _dec(settings.software_iva_rate)
    return _dec(settings.iva_rate)


def calculate_price(
    cost: float | None,
    category_id: str | None,
    settings: Settings | None = None,
) -> int:
    """Suggested sale price for a part; 0 when the cost is missing."""
    settings = settings or get_settings()
    if not cost or cost <= 0:
        return 0
    raw = (
        _dec(cost)
        * _dec(settings.profit_margin)
        * (1 + iva_rate(category_id, settings))
    )
    return round_up_to_step(raw, settings.price_step)


def subtotal_from_price(
    price: float, category_id: str | None, settings: Settings | None = None
) -> Decimal:
    """Strip IVA back out of a final price."""
    if not price or price <= 0:
        return Decimal(0)
    return _dec(price) / (1 + iva_rate(category_id, settings))


def iva_from_price(
    price: float, category_id: str | None, settings: Settings | None = None
) -> Decimal:
    if not price or price <= 0:
        return Decimal(0)
    return _dec(price) - subtotal_from_price(price, category_id, settings)


def pricing_breakdown(
    items: Sequence[QuotationItem], settings: Settings | None = None
) -> PricingBreakdown:
    subtotal = Decimal(0)
    total = Decimal(0)
    for item in items:
        unit_subtotal = subtotal_from_price(item.price, item.category_id, settings)
        subtotal += unit_subtotal * item.quantity
        total += _dec(item.price) * item.quantity

    return PricingBreakdown(
        subtotal=_money(subtotal),
        iva=_money(total - subtotal),
        total=_money(total),
    )


def prorate_item_prices(
    items: Sequence[QuotationItem],
    new_total: float,
    settings: Settings | None = None,
) -> list[QuotationItem]:
    """Scale unit prices so the quotation adds up to ``new_total``.

    Each price is rounded up to the price step; the rounding difference is
    absorbed by the line with the largest total. When every price is zero
    the new total is spread evenly per unit.
    """
    settings = settings or get_settings()
    step = settings.price_step
    target = _dec(new_total)
    current_total = sum((_dec(i.price) * i.quantity for i in items), Decimal(0))

    if current_total == 0:
        total_quantity = sum(i.quantity for i in items)
        if total_quantity == 0:
            return list(items)
        per_unit = round_up_to_step(target / total_quantity, step)
        return [i.model_copy(update={"price": per_unit}) for i in items]

    ratio = target / current_total
    adjusted = [
        i.model_copy(update={"price": round_up_to_step(_dec(i.price) * ratio, step)})
        for i in items
    ]

    adjusted_total = sum((_dec(i.price) * i.quantity for i in adjusted), Decimal(0))
    difference = target - adjusted_total

    if abs(difference) > _CENT and adjusted:
        max_idx = 0
        max_value = Decimal(0)
        for idx, item in enumerate(adjusted):
            line_total = _dec(item.price) * item.quantity
            if line_total > max_value:
                max_value = line_total
                max_idx = idx

        item = adjusted[max_idx]
        correction = difference / item.quantity
        adjusted[max_idx] = item.model_copy(
            update={"price": round_up_to_step(_dec(item.price) + correction, step)}
        )

    return adjusted


def format_currency(amount: float | Decimal) -> str:
    """Format as Mexican pesos: 1250 → "$1,250.00"."""
    return f"${_dec(amount).quantize(_CENT, rounding=ROUND_HALF_UP):,.2f}"
