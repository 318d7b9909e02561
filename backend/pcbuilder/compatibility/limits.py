"""Quantity limits for parts that can be added more than once."""

from __future__ import annotations

import re

from pcbuilder.schemas.component import (
    MotherboardSpec,
    PCBuild,
    RamSpec,
    StorageSpec,
    spec_of,
)

# Assumed when the motherboard spec does not say
DEFAULT_RAM_SLOTS = 4
DEFAULT_MODULES_PER_KIT = 1
DEFAULT_M2_SLOTS = 1
DEFAULT_BOARD_M2_SIZE = "22110"
DEFAULT_DRIVE_M2_SIZE = "2280"

# Drive bays / SATA ports assumed on any board
MAX_SATA_DRIVES = 4

_M2_SIZE = re.compile(r"\d{4,}")


def _cap_by_stock(units: int, stock: int | None) -> int:
    if stock:
        return min(units, stock)
    return units


def max_ram_kits(build: PCBuild) -> int:
    """How many copies of the chosen RAM kit fit on the chosen motherboard.

    Bounded by the kit's stock when known. Returns 1 until both a
    motherboard and a RAM kit are chosen.
    """
    if build.motherboard is None or build.ram is None:
        return 1

    board = spec_of(build.motherboard, MotherboardSpec)
    ram = spec_of(build.ram, RamSpec)
    slots = (board.ram_slots if board else None) or DEFAULT_RAM_SLOTS
    modules = (ram.modules_in_kit if ram else None) or DEFAULT_MODULES_PER_KIT

    return _cap_by_stock(slots // modules, build.ram.stock_quantity)


def m2_length(size: str | None) -> int | None:
    """Numeric M.2 form factor: "2280" → 2280, "M.2 22110" → 22110."""
    if not size:
        return None
    match = _M2_SIZE.search(size)
    return int(match.group()) if match else None


def is_nvme(spec: StorageSpec | None) -> bool:
    return (
        spec is not None
        and (spec.interface or "").upper() == "M2"
        and (spec.subtype or "").upper() == "NVME"
    )


def m2_drive_fits(drive: StorageSpec, board: MotherboardSpec | None) -> bool:
    board_size = m2_length(
        (board.max_m2_size if board else None) or DEFAULT_BOARD_M2_SIZE
    )
    drive_size = m2_length(drive.m2_size or DEFAULT_DRIVE_M2_SIZE)
    if board_size is None or drive_size is None:
        return True
    return drive_size <= board_size


def max_storage_units(build: PCBuild) -> int:
    """How many copies of the chosen drive the build can take.

    NVMe drives need an M.2 slot each and must not be longer than the
    board's longest M.2 slot; everything else shares the SATA limit.
    Bounded by the drive's stock when known. Returns 1 until a drive is
    chosen.
    """
    if build.storage is None:
        return 1

    drive = spec_of(build.storage, StorageSpec)
    if is_nvme(drive):
        board = spec_of(build.motherboard, MotherboardSpec)
        if not m2_drive_fits(drive, board):
            return 0
        units = (board.m2_slots if board else None) or DEFAULT_M2_SLOTS
    else:
        units = MAX_SATA_DRIVES

    return _cap_by_stock(units, build.storage.stock_quantity)
