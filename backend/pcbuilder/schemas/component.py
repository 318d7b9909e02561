"""Component, part and build schemas.

Specs are a tagged union: one model per component kind, discriminated by
``component_type``. Attributes of other kinds simply do not exist on a spec,
so reading a motherboard field off a CPU spec is a type error, not a
runtime convention.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ComponentKind(str, Enum):
    CPU = "cpu"
    MOTHERBOARD = "motherboard"
    RAM = "ram"
    GPU = "gpu"
    PSU = "psu"
    CASE = "case"
    STORAGE = "storage"
    COOLING = "cooling"


class UsageType(str, Enum):
    GAMING = "gaming"
    BASIC = "basic"


class CpuBrand(str, Enum):
    AMD = "AMD"
    INTEL = "Intel"


# ─── Specs ───


class BaseSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_gamer: bool | None = None


class CpuSpec(BaseSpec):
    component_type: Literal["cpu"] = "cpu"
    socket: str | None = None
    tdp_watts: float | None = None
    base_frequency_ghz: float | None = None
    has_integrated_gpu: bool | None = None


class MotherboardSpec(BaseSpec):
    component_type: Literal["motherboard"] = "motherboard"
    socket: str | None = None
    ram_type: str | None = None
    form_factor: str | None = None
    ram_slots: int | None = None
    max_ram_speed_mhz: int | None = None
    m2_slots: int | None = None
    max_m2_size: str | None = None  # longest M.2 drive, e.g. "2280"
    chipset: str | None = None


class RamSpec(BaseSpec):
    component_type: Literal["ram"] = "ram"
    ram_type: str | None = None
    capacity_gb: int | None = None
    speed_mhz: int | None = None
    modules_in_kit: int | None = None


class GpuSpec(BaseSpec):
    component_type: Literal["gpu"] = "gpu"
    tdp_watts: float | None = None
    length_mm: float | None = None
    hdmi_ports: int | None = None
    displayport_ports: int | None = None
    mini_displayport_ports: int | None = None
    vga_ports: int | None = None
    dvi_ports: int | None = None
    brand: str | None = None


class PsuSpec(BaseSpec):
    component_type: Literal["psu"] = "psu"
    wattage: int | None = None
    efficiency_cert: str | None = None
    form_factor: str | None = None
    color: str | None = None
    is_modular: bool | None = None
    has_pcie_cable: bool | None = None


class CaseSpec(BaseSpec):
    component_type: Literal["case"] = "case"
    max_gpu_length_mm: float | None = None
    supported_form_factors: frozenset[str] | None = None
    color: str | None = None
    fans_included: bool | None = None
    fans_count: int | None = None
    psu_mount_position: str | None = None

    @field_serializer("supported_form_factors")
    def serialize_form_factors(
        self, value: frozenset[str] | None
    ) -> list[str] | None:
        # Sets have no stable order across processes
        return sorted(value) if value is not None else None


class StorageSpec(BaseSpec):
    component_type: Literal["storage"] = "storage"
    interface: str | None = None  # M2 | SATA
    subtype: str | None = None  # NVMe, SSD, HDD
    m2_size: str | None = None
    capacity_gb: int | None = None
    speed_mbps: int | None = None
    has_heatsink: bool | None = None


class CoolingSpec(BaseSpec):
    component_type: Literal["cooling"] = "cooling"
    cooling_type: str | None = None  # Air | Liquid
    fans_count: int | None = None
    color: str | None = None


SpecT = TypeVar("SpecT", bound=BaseSpec)

ComponentSpec = Annotated[
    Union[
        CpuSpec,
        MotherboardSpec,
        RamSpec,
        GpuSpec,
        PsuSpec,
        CaseSpec,
        StorageSpec,
        CoolingSpec,
    ],
    Field(discriminator="component_type"),
]

SPEC_TYPES: dict[ComponentKind, type[BaseSpec]] = {
    ComponentKind.CPU: CpuSpec,
    ComponentKind.MOTHERBOARD: MotherboardSpec,
    ComponentKind.RAM: RamSpec,
    ComponentKind.GPU: GpuSpec,
    ComponentKind.PSU: PsuSpec,
    ComponentKind.CASE: CaseSpec,
    ComponentKind.STORAGE: StorageSpec,
    ComponentKind.COOLING: CoolingSpec,
}


# ─── Catalog parts ───


class Part(BaseModel):
    id: str
    name: str
    sku: str | None = None
    category_id: str | None = None
    stock_quantity: int | None = None
    image_url: str | None = None
    cost: float | None = None


class PartWithSpec(Part):
    spec: ComponentSpec | None = None

    def spec_as(self, spec_type: type[SpecT]) -> SpecT | None:
        """Return the spec only if it is of the expected kind."""
        if isinstance(self.spec, spec_type):
            return self.spec
        return None


# ─── Build ───


class PCBuild(BaseModel):
    """A partial or complete build: one optional part per slot."""

    cpu: PartWithSpec | None = None
    motherboard: PartWithSpec | None = None
    ram: PartWithSpec | None = None
    gpu: PartWithSpec | None = None
    psu: PartWithSpec | None = None
    case: PartWithSpec | None = None
    storage: PartWithSpec | None = None
    cooling: PartWithSpec | None = None

    def get(self, slot: ComponentKind) -> PartWithSpec | None:
        return getattr(self, ComponentKind(slot).value)

    def with_part(self, slot: ComponentKind, part: PartWithSpec | None) -> PCBuild:
        """Return a copy of the build with one slot replaced."""
        return self.model_copy(update={ComponentKind(slot).value: part})

    def filled_slots(self) -> list[ComponentKind]:
        return [kind for kind in ComponentKind if self.get(kind) is not None]


def spec_of(part: PartWithSpec | None, spec_type: type[SpecT]) -> SpecT | None:
    """Spec of a possibly empty slot, if it is of the expected kind."""
    if part is None:
        return None
    return part.spec_as(spec_type)
