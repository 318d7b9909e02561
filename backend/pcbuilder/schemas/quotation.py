from __future__ import annotations

from pydantic import BaseModel, Field


class QuotationItem(BaseModel):
    id: str
    name: str
    sku: str | None = None
    category_id: str | None = None
    quantity: int = Field(1, ge=1)
    cost: float | None = None
    price: float = Field(0, ge=0)  # final unit price, IVA included


class Quotation(BaseModel):
    client_name: str | None = None
    items: list[QuotationItem] = Field(default_factory=list)
    notes: str | None = None
    validity_days: int | None = Field(None, ge=1)


class PricingBreakdown(BaseModel):
    subtotal: float = 0
    iva: float = 0
    total: float = 0


class PriceRequest(BaseModel):
    cost: float | None = None
    category_id: str | None = None


class PriceResponse(BaseModel):
    price: int
    formatted: str


class ProrateRequest(BaseModel):
    items: list[QuotationItem]
    new_total: float = Field(..., ge=0)
