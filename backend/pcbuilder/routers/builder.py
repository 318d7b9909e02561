"""Builder router — compatibility, power and candidate filtering.

Every endpoint except ``/candidates/{slot}`` is stateless: the caller owns
the build and re-posts it after each slot change.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from pcbuilder.compatibility.engine import evaluate
from pcbuilder.compatibility.filters import filter_by_preferences, filter_candidates
from pcbuilder.compatibility.limits import max_ram_kits, max_storage_units
from pcbuilder.compatibility.power import estimate_power
from pcbuilder.quotation.builder import quotation_from_build
from pcbuilder.routers.deps import get_catalog_service
from pcbuilder.schemas.builder import (
    BuildQuotationRequest,
    BuildSummary,
    CandidatesRequest,
)
from pcbuilder.schemas.compatibility import CompatibilityResult, PowerEstimate
from pcbuilder.schemas.component import (
    ComponentKind,
    CpuBrand,
    PartWithSpec,
    PCBuild,
    PsuSpec,
    UsageType,
    spec_of,
)
from pcbuilder.schemas.quotation import Quotation
from pcbuilder.services.catalog_service import CatalogService

router = APIRouter()


@router.post("/evaluate", response_model=CompatibilityResult)
async def evaluate_build(build: PCBuild):
    """Check a (partial) build for incompatibilities."""
    return evaluate(build)


@router.post("/power", response_model=PowerEstimate)
async def estimate_build_power(build: PCBuild):
    """Estimate needed and recommended PSU wattage."""
    return estimate_power(build)


@router.post("/summary", response_model=BuildSummary)
async def summarize_build(build: PCBuild):
    """Compatibility, power and quantity limits in one call."""
    psu = spec_of(build.psu, PsuSpec)
    return BuildSummary(
        compatibility=evaluate(build),
        power=estimate_power(build),
        psu_wattage=(psu.wattage or None) if psu else None,
        max_ram_kits=max_ram_kits(build),
        max_storage_units=max_storage_units(build),
        filled_slots=build.filled_slots(),
    )


@router.post("/candidates", response_model=list[PartWithSpec])
async def filter_inline_candidates(request: CandidatesRequest):
    """Filter a caller-supplied catalog for one slot."""
    candidates = filter_candidates(
        request.catalog, request.target_slot, request.build
    )
    return filter_by_preferences(candidates, request.usage, request.cpu_brand)


@router.post("/candidates/{slot}", response_model=list[PartWithSpec])
async def filter_catalog_candidates(
    slot: ComponentKind,
    build: PCBuild,
    usage: UsageType | None = Query(None),
    cpu_brand: CpuBrand | None = Query(None),
    service: CatalogService = Depends(get_catalog_service),
):
    """Load in-stock parts for ``slot`` and keep those that fit ``build``."""
    catalog = await service.list_candidates(slot)
    candidates = filter_candidates(catalog, slot, build)
    return filter_by_preferences(candidates, usage, cpu_brand)


@router.post("/quotation", response_model=Quotation)
async def quote_build(request: BuildQuotationRequest):
    """Price every chosen part of a build.

    RAM and storage quantities are clamped to what the build can hold.
    """
    return quotation_from_build(
        request.build,
        ram_quantity=request.ram_quantity,
        storage_quantity=request.storage_quantity,
        client_name=request.client_name,
        notes=request.notes,
    )
