"""Tests for the power estimator and RAM / storage quantity limits."""

from pcbuilder.compatibility.limits import (
    DEFAULT_RAM_SLOTS,
    MAX_SATA_DRIVES,
    m2_length,
    max_ram_kits,
    max_storage_units,
)
from pcbuilder.compatibility.power import estimate_power, has_known_tdp
from pcbuilder.schemas.component import (
    CpuSpec,
    GpuSpec,
    MotherboardSpec,
    PartWithSpec,
    PCBuild,
    RamSpec,
    StorageSpec,
)


# ─── Fixtures ───


def _cpu(tdp: float | None) -> PartWithSpec:
    return PartWithSpec(id="cpu", name="CPU", spec=CpuSpec(tdp_watts=tdp))


def _gpu(tdp: float | None) -> PartWithSpec:
    return PartWithSpec(id="gpu", name="GPU", spec=GpuSpec(tdp_watts=tdp))


def _board(slots: int | None) -> PartWithSpec:
    return PartWithSpec(id="mb", name="Board", spec=MotherboardSpec(ram_slots=slots))


def _ram(modules: int | None, stock: int | None = None) -> PartWithSpec:
    return PartWithSpec(
        id="ram",
        name="RAM",
        stock_quantity=stock,
        spec=RamSpec(modules_in_kit=modules),
    )


# ═══════════════════════════════════════════════════════════
# Power Estimate
# ═══════════════════════════════════════════════════════════


class TestEstimatePower:
    def test_empty_build_is_baseline(self):
        estimate = estimate_power(PCBuild())
        assert estimate.watts_needed == 100
        assert estimate.watts_recommended == 120

    def test_cpu_and_gpu(self):
        estimate = estimate_power(PCBuild(cpu=_cpu(65), gpu=_gpu(220)))
        assert estimate.watts_needed == 385
        assert estimate.watts_recommended == 462

    def test_fractional_tdp_rounds_up(self):
        estimate = estimate_power(PCBuild(cpu=_cpu(65.5)))
        assert estimate.watts_needed == 166
        assert estimate.watts_recommended == 199

    def test_unknown_tdp_counts_as_zero(self):
        estimate = estimate_power(PCBuild(cpu=_cpu(None), gpu=_gpu(150)))
        assert estimate.watts_needed == 250
        assert estimate.watts_recommended == 300

    def test_known_tdp(self):
        assert not has_known_tdp(PCBuild())
        assert not has_known_tdp(PCBuild(cpu=_cpu(0)))
        assert has_known_tdp(PCBuild(gpu=_gpu(75)))


# ═══════════════════════════════════════════════════════════
# RAM Kit Limit
# ═══════════════════════════════════════════════════════════


class TestMaxRamKits:
    def test_needs_board_and_ram(self):
        assert max_ram_kits(PCBuild()) == 1
        assert max_ram_kits(PCBuild(ram=_ram(2))) == 1
        assert max_ram_kits(PCBuild(motherboard=_board(4))) == 1

    def test_slots_divided_by_modules(self):
        assert max_ram_kits(PCBuild(motherboard=_board(4), ram=_ram(2))) == 2
        assert max_ram_kits(PCBuild(motherboard=_board(2), ram=_ram(4))) == 0

    def test_defaults_when_unknown(self):
        build = PCBuild(motherboard=_board(None), ram=_ram(None))
        assert max_ram_kits(build) == DEFAULT_RAM_SLOTS

    def test_capped_by_stock(self):
        assert max_ram_kits(PCBuild(motherboard=_board(4), ram=_ram(1, stock=3))) == 3

    def test_zero_stock_is_ignored(self):
        assert max_ram_kits(PCBuild(motherboard=_board(4), ram=_ram(1, stock=0))) == 4


# ═══════════════════════════════════════════════════════════
# Storage Limit
# ═══════════════════════════════════════════════════════════


def _m2_board(slots: int | None = None, max_size: str | None = None) -> PartWithSpec:
    return PartWithSpec(
        id="mb",
        name="Board",
        spec=MotherboardSpec(m2_slots=slots, max_m2_size=max_size),
    )


def _drive(
    interface: str | None,
    subtype: str | None = None,
    size: str | None = None,
    stock: int | None = None,
) -> PartWithSpec:
    return PartWithSpec(
        id="ssd",
        name="Drive",
        stock_quantity=stock,
        spec=StorageSpec(interface=interface, subtype=subtype, m2_size=size),
    )


class TestMaxStorageUnits:
    def test_no_drive(self):
        assert max_storage_units(PCBuild(motherboard=_m2_board(3))) == 1

    def test_nvme_limited_by_m2_slots(self):
        build = PCBuild(motherboard=_m2_board(3), storage=_drive("M2", "NVMe", "2280"))
        assert max_storage_units(build) == 3

    def test_nvme_without_board_data_gets_one_slot(self):
        assert max_storage_units(PCBuild(storage=_drive("M2", "NVMe"))) == 1

    def test_nvme_too_long_for_board(self):
        build = PCBuild(
            motherboard=_m2_board(2, max_size="2280"),
            storage=_drive("M2", "NVMe", "22110"),
        )
        assert max_storage_units(build) == 0

    def test_sata_limit(self):
        build = PCBuild(motherboard=_m2_board(0), storage=_drive("SATA", "HDD"))
        assert max_storage_units(build) == MAX_SATA_DRIVES

    def test_drive_without_spec_uses_sata_limit(self):
        build = PCBuild(storage=PartWithSpec(id="ssd", name="Drive"))
        assert max_storage_units(build) == MAX_SATA_DRIVES

    def test_capped_by_stock(self):
        build = PCBuild(storage=_drive("SATA", "SSD", stock=2))
        assert max_storage_units(build) == 2

    def test_m2_length(self):
        assert m2_length("2280") == 2280
        assert m2_length("M.2 22110") == 22110
        assert m2_length(None) is None
        assert m2_length("n/a") is None
