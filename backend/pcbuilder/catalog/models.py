"""SQLAlchemy ORM mappings of the hosted catalog tables.

The schema is owned by the storefront database; these mappings are only
used for reads.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from pcbuilder.db.session import Base


class Product(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    clave: Mapped[str | None] = mapped_column(String, nullable=True)
    category_id: Mapped[str | None] = mapped_column(String, nullable=True)
    existencias: Mapped[int | None] = mapped_column(Integer, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    costo: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Product {self.clave} {self.name!r}>"


class ProductWarehouseStock(Base):
    __tablename__ = "product_warehouse_stock"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    product_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("products.id"), nullable=False
    )
    existencias: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class ComponentSpecRow(Base):
    """One wide row per product; ``component_type`` says which columns apply."""

    __tablename__ = "component_specs"

    id: Mapped[str] = mapped_column(UUID(as_uuid=False), primary_key=True)
    product_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False), ForeignKey("products.id"), unique=True, nullable=False
    )
    component_type: Mapped[str] = mapped_column(String, nullable=False)
    is_gamer: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # CPU / motherboard
    socket: Mapped[str | None] = mapped_column(String, nullable=True)
    cpu_tdp: Mapped[float | None] = mapped_column(Float, nullable=True)
    cpu_base_frequency: Mapped[float | None] = mapped_column(Float, nullable=True)
    cpu_has_igpu: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    ram_type: Mapped[str | None] = mapped_column(String, nullable=True)
    form_factor: Mapped[str | None] = mapped_column(String, nullable=True)
    ram_slots: Mapped[int | None] = mapped_column(Integer, nullable=True)
    max_ram_speed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    m2_slots: Mapped[int | None] = mapped_column(Integer, nullable=True)
    chipset: Mapped[str | None] = mapped_column(String, nullable=True)

    # RAM
    ram_capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ram_speed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ram_modules: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # GPU
    gpu_tdp: Mapped[float | None] = mapped_column(Float, nullable=True)
    gpu_length: Mapped[float | None] = mapped_column(Float, nullable=True)
    gpu_hdmi_ports: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gpu_displayport_ports: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gpu_mini_displayport_ports: Mapped[int | None] = mapped_column(
        Integer, nullable=True
    )
    gpu_vga_ports: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gpu_dvi_ports: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gpu_brand: Mapped[str | None] = mapped_column(String, nullable=True)

    # PSU
    psu_wattage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    psu_efficiency: Mapped[str | None] = mapped_column(String, nullable=True)
    psu_form_factor: Mapped[str | None] = mapped_column(String, nullable=True)
    psu_color: Mapped[str | None] = mapped_column(String, nullable=True)
    psu_modular: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    psu_pcie_cable: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Case
    case_max_gpu_length: Mapped[float | None] = mapped_column(Float, nullable=True)
    case_form_factors: Mapped[list[str] | None] = mapped_column(
        ARRAY(String), nullable=True
    )
    case_color: Mapped[str | None] = mapped_column(String, nullable=True)
    case_fans_included: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    case_fans_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    case_psu_position: Mapped[str | None] = mapped_column(String, nullable=True)

    # Storage
    storage_interface: Mapped[str | None] = mapped_column(String, nullable=True)
    storage_subtype: Mapped[str | None] = mapped_column(String, nullable=True)
    storage_m2_size: Mapped[str | None] = mapped_column(String, nullable=True)
    storage_capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    storage_speed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    storage_has_heatsink: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Cooling
    cooling_type: Mapped[str | None] = mapped_column(String, nullable=True)
    cooling_fans_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    cooling_color: Mapped[str | None] = mapped_column(String, nullable=True)

    def __repr__(self) -> str:
        return f"<ComponentSpecRow {self.component_type} ({self.product_id})>"
