"""Turn a finished PC build into a priced quotation."""

from __future__ import annotations

from pcbuilder.compatibility.limits import max_ram_kits, max_storage_units
from pcbuilder.config import Settings, get_settings
from pcbuilder.pricing.calculator import calculate_price
from pcbuilder.schemas.component import ComponentKind, PartWithSpec, PCBuild
from pcbuilder.schemas.quotation import Quotation, QuotationItem


def _item(part: PartWithSpec, quantity: int, settings: Settings) -> QuotationItem:
    return QuotationItem(
        id=part.id,
        name=part.name,
        sku=part.sku,
        category_id=part.category_id,
        quantity=quantity,
        cost=part.cost,
        price=calculate_price(part.cost, part.category_id, settings),
    )


def _clamp(requested: int, limit: int) -> int:
    # A quoted line always has at least one unit
    return max(min(requested, limit), 1)


def quotation_from_build(
    build: PCBuild,
    ram_quantity: int = 1,
    storage_quantity: int = 1,
    client_name: str | None = None,
    notes: str | None = None,
    settings: Settings | None = None,
) -> Quotation:
    """One line per filled slot, in slot order, priced from catalog cost.

    RAM and storage may be bought more than once, up to what the build can
    hold; every other slot is a single unit.
    """
    settings = settings or get_settings()
    quantities = {
        ComponentKind.RAM: _clamp(ram_quantity, max_ram_kits(build)),
        ComponentKind.STORAGE: _clamp(storage_quantity, max_storage_units(build)),
    }

    items: list[QuotationItem] = []
    for kind in ComponentKind:
        part = build.get(kind)
        if part is not None:
            items.append(_item(part, quantities.get(kind, 1), settings))

    return Quotation(client_name=client_name, items=items, notes=notes)
