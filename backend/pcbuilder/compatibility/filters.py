"""Candidate Filter — narrow a slot's picker to parts that fit the build.

A candidate is only ever dropped for a *known* conflict. Parts without a
spec, or without the relevant attribute, always stay in the list, as do
all candidates when the already chosen part lacks the data.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from pcbuilder.schemas.component import (
    BaseSpec,
    CaseSpec,
    ComponentKind,
    CpuBrand,
    CpuSpec,
    GpuSpec,
    MotherboardSpec,
    PartWithSpec,
    PCBuild,
    RamSpec,
    UsageType,
    spec_of,
)

Predicate = Callable[[PartWithSpec], bool]


def _attr(part: PartWithSpec, spec_type: type[BaseSpec], name: str):
    spec = part.spec_as(spec_type)
    value = getattr(spec, name, None) if spec is not None else None
    return value or None


def _motherboard_predicate(build: PCBuild) -> Predicate | None:
    cpu = spec_of(build.cpu, CpuSpec)
    socket = cpu.socket if cpu else None
    if not socket:
        return None

    def keep(candidate: PartWithSpec) -> bool:
        other = _attr(candidate, MotherboardSpec, "socket")
        return other is None or other == socket

    return keep


def _cpu_predicate(build: PCBuild) -> Predicate | None:
    board = spec_of(build.motherboard, MotherboardSpec)
    socket = board.socket if board else None
    if not socket:
        return None

    def keep(candidate: PartWithSpec) -> bool:
        other = _attr(candidate, CpuSpec, "socket")
        return other is None or other == socket

    return keep


def _ram_predicate(build: PCBuild) -> Predicate | None:
    board = spec_of(build.motherboard, MotherboardSpec)
    ram_type = board.ram_type if board else None
    if not ram_type:
        return None

    def keep(candidate: PartWithSpec) -> bool:
        other = _attr(candidate, RamSpec, "ram_type")
        return other is None or other == ram_type

    return keep


def _case_predicate(build: PCBuild) -> Predicate | None:
    board = spec_of(build.motherboard, MotherboardSpec)
    form_factor = board.form_factor if board else None
    if not form_factor:
        return None

    def keep(candidate: PartWithSpec) -> bool:
        supported = _attr(candidate, CaseSpec, "supported_form_factors")
        return supported is None or form_factor in supported

    return keep


def _gpu_predicate(build: PCBuild) -> Predicate | None:
    case = spec_of(build.case, CaseSpec)
    max_length = case.max_gpu_length_mm if case else None
    if not max_length:
        return None

    def keep(candidate: PartWithSpec) -> bool:
        length = _attr(candidate, GpuSpec, "length_mm")
        return length is None or length <= max_length

    return keep


# Slots without an entry pass the catalog through unchanged
SLOT_PREDICATES: dict[ComponentKind, Callable[[PCBuild], Predicate | None]] = {
    ComponentKind.MOTHERBOARD: _motherboard_predicate,
    ComponentKind.CPU: _cpu_predicate,
    ComponentKind.RAM: _ram_predicate,
    ComponentKind.CASE: _case_predicate,
    ComponentKind.GPU: _gpu_predicate,
}


def filter_candidates(
    catalog: Sequence[PartWithSpec],
    target_slot: ComponentKind,
    build: PCBuild,
) -> list[PartWithSpec]:
    """Return the catalog parts selectable for ``target_slot`` given ``build``.

    Order is preserved and the result is always a subset of ``catalog``;
    neither input is modified.
    """
    make_predicate = SLOT_PREDICATES.get(ComponentKind(target_slot))
    predicate = make_predicate(build) if make_predicate else None
    if predicate is None:
        return list(catalog)
    return [part for part in catalog if predicate(part)]


# ═══════════════════════════════════════════════════════════
# Shopper preferences
# ═══════════════════════════════════════════════════════════

# Socket substrings that identify a CPU vendor
CPU_BRAND_SOCKETS: dict[CpuBrand, tuple[str, ...]] = {
    CpuBrand.AMD: ("AM4", "AM5"),
    CpuBrand.INTEL: ("1200", "1700"),
}


def _matches_usage(part: PartWithSpec, usage: UsageType) -> bool:
    is_gamer = part.spec.is_gamer if part.spec is not None else None
    if is_gamer is None:
        return True
    return is_gamer == (usage == UsageType.GAMING)


def _matches_cpu_brand(part: PartWithSpec, brand: CpuBrand) -> bool:
    socket = _attr(part, CpuSpec, "socket")
    if socket is None:
        return True
    return any(marker in socket.upper() for marker in CPU_BRAND_SOCKETS[brand])


def filter_by_preferences(
    catalog: Sequence[PartWithSpec],
    usage: UsageType | None = None,
    cpu_brand: CpuBrand | None = None,
) -> list[PartWithSpec]:
    """Narrow a picker by intended usage and, for CPUs, by vendor.

    Like the compatibility filter, parts that do not say (no spec, no
    ``is_gamer`` flag, no socket) are kept.
    """
    result = list(catalog)
    if usage is not None:
        usage = UsageType(usage)
        result = [p for p in result if _matches_usage(p, usage)]
    if cpu_brand is not None:
        cpu_brand = CpuBrand(cpu_brand)
        result = [p for p in result if _matches_cpu_brand(p, cpu_brand)]
    return result
