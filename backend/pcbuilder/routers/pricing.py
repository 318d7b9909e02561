"""Pricing router — sale prices and quotation totals."""

from __future__ import annotations

from fastapi import APIRouter

from pcbuilder.pricing.calculator import (
    calculate_price,
    format_currency,
    pricing_breakdown,
    prorate_item_prices,
)
from pcbuilder.schemas.quotation import (
    PriceRequest,
    PriceResponse,
    PricingBreakdown,
    ProrateRequest,
    QuotationItem,
)

router = APIRouter()


@router.post("/price", response_model=PriceResponse)
async def price_from_cost(request: PriceRequest):
    """Suggested sale price (margin + IVA, rounded up to 5)."""
    price = calculate_price(request.cost, request.category_id)
    return PriceResponse(price=price, formatted=format_currency(price))


@router.post("/breakdown", response_model=PricingBreakdown)
async def breakdown(items: list[QuotationItem]):
    """Subtotal / IVA / total for a list of quotation lines."""
    return pricing_breakdown(items)


@router.post("/prorate", response_model=list[QuotationItem])
async def prorate(request: ProrateRequest):
    """Rescale line prices to reach a manually edited total."""
    return prorate_item_prices(request.items, request.new_total)
