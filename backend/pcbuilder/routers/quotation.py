"""Quotation router — export a quotation as text, HTML or CSV."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from pcbuilder.quotation.export import (
    quotation_to_csv,
    quotation_to_html,
    quotation_to_text,
)
from pcbuilder.schemas.quotation import Quotation

router = APIRouter()


@router.post("/text", response_class=PlainTextResponse)
async def export_text(quotation: Quotation):
    """Chat-ready message."""
    return quotation_to_text(quotation)


@router.post("/html", response_class=HTMLResponse)
async def export_html(quotation: Quotation):
    """Printable page."""
    return quotation_to_html(quotation)


@router.post("/csv")
async def export_csv(quotation: Quotation):
    return Response(
        content=quotation_to_csv(quotation),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="quotation.csv"'},
    )
