"""Request / response schemas for the builder endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pcbuilder.schemas.compatibility import CompatibilityResult, PowerEstimate
from pcbuilder.schemas.component import (
    ComponentKind,
    CpuBrand,
    PartWithSpec,
    PCBuild,
    UsageType,
)


class CandidatesRequest(BaseModel):
    target_slot: ComponentKind
    build: PCBuild = Field(default_factory=PCBuild)
    catalog: list[PartWithSpec] = Field(default_factory=list)
    usage: UsageType | None = None
    cpu_brand: CpuBrand | None = None


class BuildSummary(BaseModel):
    compatibility: CompatibilityResult
    power: PowerEstimate
    psu_wattage: int | None = None
    max_ram_kits: int = 1
    max_storage_units: int = 1
    filled_slots: list[ComponentKind] = Field(default_factory=list)


class BuildQuotationRequest(BaseModel):
    build: PCBuild
    ram_quantity: int = Field(1, ge=1)
    storage_quantity: int = Field(1, ge=1)
    client_name: str | None = None
    notes: str | None = None


class ClassifyResponse(BaseModel):
    category_id: str
    component_type: ComponentKind | None = None
