"""Catalog rows → tagged spec models.

The storefront stores every spec as one wide row with a ``component_type``
discriminator and columns for all kinds. Only the columns of the row's own
kind are carried over; everything else is ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from pcbuilder.catalog.models import ComponentSpecRow, Product
from pcbuilder.schemas.component import (
    BaseSpec,
    CaseSpec,
    ComponentKind,
    CoolingSpec,
    CpuSpec,
    GpuSpec,
    MotherboardSpec,
    Part,
    PartWithSpec,
    PsuSpec,
    RamSpec,
    StorageSpec,
)

logger = logging.getLogger(__name__)


def _cpu(row: ComponentSpecRow) -> CpuSpec:
    return CpuSpec(
        is_gamer=row.is_gamer,
        socket=row.socket,
        tdp_watts=row.cpu_tdp,
        base_frequency_ghz=row.cpu_base_frequency,
        has_integrated_gpu=row.cpu_has_igpu,
    )


def _motherboard(row: ComponentSpecRow) -> MotherboardSpec:
    return MotherboardSpec(
        is_gamer=row.is_gamer,
        socket=row.socket,
        ram_type=row.ram_type,
        form_factor=row.form_factor,
        ram_slots=row.ram_slots,
        max_ram_speed_mhz=row.max_ram_speed,
        m2_slots=row.m2_slots,
        max_m2_size=row.storage_m2_size,
        chipset=row.chipset,
    )


def _ram(row: ComponentSpecRow) -> RamSpec:
    return RamSpec(
        is_gamer=row.is_gamer,
        ram_type=row.ram_type,
        capacity_gb=row.ram_capacity,
        speed_mhz=row.ram_speed,
        modules_in_kit=row.ram_modules,
    )


def _gpu(row: ComponentSpecRow) -> GpuSpec:
    return GpuSpec(
        is_gamer=row.is_gamer,
        tdp_watts=row.gpu_tdp,
        length_mm=row.gpu_length,
        hdmi_ports=row.gpu_hdmi_ports,
        displayport_ports=row.gpu_displayport_ports,
        mini_displayport_ports=row.gpu_mini_displayport_ports,
        vga_ports=row.gpu_vga_ports,
        dvi_ports=row.gpu_dvi_ports,
        brand=row.gpu_brand,
    )


def _psu(row: ComponentSpecRow) -> PsuSpec:
    return PsuSpec(
        is_gamer=row.is_gamer,
        wattage=row.psu_wattage,
        efficiency_cert=row.psu_efficiency,
        form_factor=row.psu_form_factor,
        color=row.psu_color,
        is_modular=row.psu_modular,
        has_pcie_cable=row.psu_pcie_cable,
    )


def _case(row: ComponentSpecRow) -> CaseSpec:
    form_factors = row.case_form_factors
    return CaseSpec(
        is_gamer=row.is_gamer,
        max_gpu_length_mm=row.case_max_gpu_length,
        supported_form_factors=frozenset(form_factors) if form_factors else None,
        color=row.case_color,
        fans_included=row.case_fans_included,
        fans_count=row.case_fans_count,
        psu_mount_position=row.case_psu_position,
    )


def _storage(row: ComponentSpecRow) -> StorageSpec:
    return StorageSpec(
        is_gamer=row.is_gamer,
        interface=row.storage_interface,
        subtype=row.storage_subtype,
        m2_size=row.storage_m2_size,
        capacity_gb=row.storage_capacity,
        speed_mbps=row.storage_speed,
        has_heatsink=row.storage_has_heatsink,
    )


def _cooling(row: ComponentSpecRow) -> CoolingSpec:
    return CoolingSpec(
        is_gamer=row.is_gamer,
        cooling_type=row.cooling_type,
        fans_count=row.cooling_fans_count,
        color=row.cooling_color,
    )


_BUILDERS = {
    ComponentKind.CPU: _cpu,
    ComponentKind.MOTHERBOARD: _motherboard,
    ComponentKind.RAM: _ram,
    ComponentKind.GPU: _gpu,
    ComponentKind.PSU: _psu,
    ComponentKind.CASE: _case,
    ComponentKind.STORAGE: _storage,
    ComponentKind.COOLING: _cooling,
}


def spec_from_row(row: ComponentSpecRow) -> BaseSpec | None:
    """Build the tagged spec for a row; ``None`` for an unknown kind."""
    try:
        kind = ComponentKind(row.component_type)
    except ValueError:
        logger.warning(
            "Skipping spec for product %s: unknown component_type %r",
            row.product_id,
            row.component_type,
        )
        return None
    return _BUILDERS[kind](row)


def part_from_product(product: Product) -> Part:
    return Part(
        id=str(product.id),
        name=product.name,
        sku=product.clave,
        category_id=product.category_id,
        stock_quantity=product.existencias,
        image_url=product.image_url,
        cost=product.costo,
    )


def attach_specs(
    parts: Iterable[Part], specs: Mapping[str, BaseSpec | None]
) -> list[PartWithSpec]:
    """Join parts with their specs by part id; parts without one get ``None``."""
    return [
        PartWithSpec(**part.model_dump(), spec=specs.get(part.id)) for part in parts
    ]
