"""Quotation Export — chat text, printable HTML and CSV.

Pure Python. Deterministic given the issue date.
"""

from __future__ import annotations

import csv
import html
from datetime import date
from decimal import Decimal
from io import StringIO

from pcbuilder.config import Settings, get_settings
from pcbuilder.pricing.calculator import format_currency
from pcbuilder.schemas.quotation import Quotation, QuotationItem

_MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


# ─── Totals ───


def item_subtotal(item: QuotationItem) -> Decimal:
    return Decimal(str(item.price)) * item.quantity


def quotation_total(quotation: Quotation) -> Decimal:
    return sum((item_subtotal(i) for i in quotation.items), Decimal(0))


def _validity_days(quotation: Quotation, settings: Settings) -> int:
    return quotation.validity_days or settings.quotation_validity_days


# ─── Chat Message ───


def quotation_to_text(
    quotation: Quotation,
    issued_on: date | None = None,
    settings: Settings | None = None,
) -> str:
    """Plain-text quotation suitable for a WhatsApp message."""
    settings = settings or get_settings()
    issued_on = issued_on or date.today()

    lines = [
        f"📋 *QUOTATION {settings.store_name.upper()}*",
        f"Date: {issued_on:%d/%m/%Y}",
    ]
    if quotation.client_name:
        lines.append(f"Client: {quotation.client_name}")
    lines.append("")

    for item in quotation.items:
        line = f"▸ {item.name}"
        if item.quantity > 1:
            line += f" (x{item.quantity})"
        line += f" - {format_currency(item_subtotal(item))}"
        lines.append(line)

    lines.append("")
    lines.append("━━━━━━━━━━━━━━━━━━")
    lines.append(f"*TOTAL: {format_currency(quotation_total(quotation))}*")

    if quotation.notes:
        lines.append("")
        lines.append(f"📝 Notes: {quotation.notes}")

    lines.append("")
    lines.append(f"Valid for {_validity_days(quotation, settings)} days")
    lines.append(f"📞 WhatsApp: {settings.store_phone}")
    lines.append(f"🌐 {settings.store_url}")
    return "\n".join(lines)


# ─── Printable HTML ───

_STYLE = """
    body { font-family: Arial, sans-serif; margin: 40px; color: #333; }
    .header { display: flex; justify-content: space-between; align-items: center;
              margin-bottom: 30px; border-bottom: 2px solid #2563eb; padding-bottom: 20px; }
    .logo { font-size: 24px; font-weight: bold; color: #2563eb; }
    .date { color: #666; }
    .client-info { margin-bottom: 20px; background: #f8fafc; padding: 15px; border-radius: 8px; }
    table { width: 100%; border-collapse: collapse; margin-bottom: 20px; }
    th { background: #2563eb; color: white; padding: 12px 8px; text-align: left; }
    td { padding: 8px; border-bottom: 1px solid #eee; }
    .num { text-align: right; }
    .qty { text-align: center; }
    .total-row td { font-weight: bold; font-size: 18px; padding-top: 15px; }
    .notes { background: #fef3c7; padding: 15px; border-radius: 8px; margin-bottom: 20px; }
    .footer { margin-top: 40px; text-align: center; color: #666; font-size: 12px; }
    .validity { color: #dc2626; font-weight: bold; }
"""


def _long_date(value: date) -> str:
    return f"{value.day:02d} {_MONTHS[value.month - 1]} {value.year}"


def quotation_to_html(
    quotation: Quotation,
    issued_on: date | None = None,
    settings: Settings | None = None,
) -> str:
    """Standalone HTML page for printing / saving as PDF. All text is escaped."""
    settings = settings or get_settings()
    issued_on = issued_on or date.today()
    esc = html.escape

    rows = "\n".join(
        "      <tr>"
        f"<td>{esc(item.sku or '-')}</td>"
        f"<td>{esc(item.name)}</td>"
        f"<td class=\"qty\">{item.quantity}</td>"
        f"<td class=\"num\">{format_currency(item.price)}</td>"
        f"<td class=\"num\">{format_currency(item_subtotal(item))}</td>"
        "</tr>"
        for item in quotation.items
    )

    client = ""
    if quotation.client_name:
        client = (
            '  <div class="client-info"><strong>Client:</strong> '
            f"{esc(quotation.client_name)}</div>\n"
        )

    notes = ""
    if quotation.notes:
        notes = (
            f'  <div class="notes"><strong>Notes:</strong> {esc(quotation.notes)}</div>\n'
        )

    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>Quotation - {esc(settings.store_name)}</title>\n"
        f"  <style>{_STYLE}  </style>\n"
        "</head>\n"
        "<body>\n"
        '  <div class="header">\n'
        f'    <div class="logo">{esc(settings.store_name.upper())}</div>\n'
        f'    <div class="date">{_long_date(issued_on)}</div>\n'
        "  </div>\n"
        f"{client}"
        "  <table>\n"
        "    <thead>\n"
        "      <tr><th>SKU</th><th>Description</th><th class=\"qty\">Qty</th>"
        "<th class=\"num\">Unit price</th><th class=\"num\">Subtotal</th></tr>\n"
        "    </thead>\n"
        "    <tbody>\n"
        f"{rows}\n"
        '      <tr class="total-row"><td colspan="4" class="num">TOTAL:</td>'
        f'<td class="num">{format_currency(quotation_total(quotation))}</td></tr>\n'
        "    </tbody>\n"
        "  </table>\n"
        f"{notes}"
        f'  <p class="validity">Quotation valid for '
        f"{_validity_days(quotation, settings)} days</p>\n"
        '  <div class="footer">\n'
        f"    <p><strong>{esc(settings.store_name)}</strong></p>\n"
        f"    <p>{esc(settings.store_phone)} | {esc(settings.store_url)}</p>\n"
        f"    <p>{esc(settings.store_location)}</p>\n"
        "  </div>\n"
        "</body>\n"
        "</html>\n"
    )


# ─── CSV Export ───

CSV_COLUMNS = [
    "Item",
    "SKU",
    "Description",
    "Quantity",
    "Unit Price",
    "Subtotal",
]


def quotation_to_csv(quotation: Quotation) -> str:
    """Convert a quotation to a CSV string with a trailing total row."""
    buf = StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_COLUMNS)

    for i, item in enumerate(quotation.items, start=1):
        writer.writerow(
            [
                i,
                item.sku or "",
                item.name,
                item.quantity,
                f"{Decimal(str(item.price)):.2f}",
                f"{item_subtotal(item):.2f}",
            ]
        )

    # Summary row
    writer.writerow([])
    writer.writerow(
        [
            "",
            "",
            "TOTAL",
            sum(i.quantity for i in quotation.items),
            "",
            f"{quotation_total(quotation):.2f}",
        ]
    )

    return buf.getvalue()
