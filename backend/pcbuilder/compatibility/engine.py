"""PC Build Compatibility Engine — Deterministic Rule-Based Build Checker.

Pure Python. No I/O. Fully unit-testable.

Validates a (possibly partial) PC build against 7 compatibility rules:
  1. CPU ↔ motherboard socket
  2. RAM ↔ motherboard memory type
  3. RAM speed vs motherboard ceiling (advisory)
  4. RAM kit modules vs motherboard slots
  5. Motherboard form factor vs case support
  6. GPU length vs case clearance
  7. PSU wattage vs estimated draw

Input:  PCBuild (Pydantic model)
Output: CompatibilityResult with errors[] and warnings[]

Missing specs never produce errors: a rule either skips or emits a
"cannot verify" warning.
"""

from __future__ import annotations

from typing import Callable

from pcbuilder.compatibility.power import estimate_power, has_known_tdp
from pcbuilder.schemas.compatibility import (
    CompatibilityIssue,
    CompatibilityResult,
    IssueSeverity,
)
from pcbuilder.schemas.component import (
    CaseSpec,
    ComponentKind,
    CpuSpec,
    GpuSpec,
    MotherboardSpec,
    PCBuild,
    PsuSpec,
    RamSpec,
    spec_of,
)

Check = Callable[[PCBuild], list[CompatibilityIssue]]


# ─── Internal Helpers ───


def _known(value: object) -> bool:
    """Null, empty and zero values count as missing data."""
    return value is not None and value != "" and value != 0


def _fmt(value: float) -> str:
    return f"{value:g}"


def _error(
    code: str, message: str, slots: list[ComponentKind], suggestion: str
) -> CompatibilityIssue:
    return CompatibilityIssue(
        code=code,
        severity=IssueSeverity.ERROR,
        message=message,
        slots=slots,
        suggestion=suggestion,
    )


def _warning(
    code: str, message: str, slots: list[ComponentKind], suggestion: str | None = None
) -> CompatibilityIssue:
    return CompatibilityIssue(
        code=code,
        severity=IssueSeverity.WARNING,
        message=message,
        slots=slots,
        suggestion=suggestion,
    )


# ═══════════════════════════════════════════════════════════
# Check 1: CPU Socket
# ═══════════════════════════════════════════════════════════


def check_socket(build: PCBuild) -> list[CompatibilityIssue]:
    """CPU and motherboard must share the exact same socket."""
    if build.cpu is None or build.motherboard is None:
        return []

    slots = [ComponentKind.CPU, ComponentKind.MOTHERBOARD]
    cpu = spec_of(build.cpu, CpuSpec)
    board = spec_of(build.motherboard, MotherboardSpec)
    cpu_socket = cpu.socket if cpu else None
    board_socket = board.socket if board else None

    if not (_known(cpu_socket) and _known(board_socket)):
        return [
            _warning(
                "W_SOCKET_UNVERIFIED",
                "Cannot verify socket compatibility (missing specifications)",
                slots,
            )
        ]

    if cpu_socket != board_socket:
        return [
            _error(
                "E_SOCKET_MISMATCH",
                f"Socket mismatch: CPU {cpu_socket} ≠ motherboard {board_socket}",
                slots,
                f"Choose a motherboard with socket {cpu_socket}",
            )
        ]
    return []


# ═══════════════════════════════════════════════════════════
# Check 2: RAM Type
# ═══════════════════════════════════════════════════════════


def check_ram_type(build: PCBuild) -> list[CompatibilityIssue]:
    """RAM generation (DDR4, DDR5, ...) must match the motherboard."""
    if build.ram is None or build.motherboard is None:
        return []

    slots = [ComponentKind.RAM, ComponentKind.MOTHERBOARD]
    ram = spec_of(build.ram, RamSpec)
    board = spec_of(build.motherboard, MotherboardSpec)
    ram_type = ram.ram_type if ram else None
    board_type = board.ram_type if board else None

    if not (_known(ram_type) and _known(board_type)):
        return [
            _warning(
                "W_RAM_TYPE_UNVERIFIED",
                "Cannot verify RAM compatibility (missing specifications)",
                slots,
            )
        ]

    if ram_type != board_type:
        return [
            _error(
                "E_RAM_TYPE_MISMATCH",
                f"RAM mismatch: {ram_type} ≠ motherboard supports {board_type}",
                slots,
                f"Choose {board_type} memory",
            )
        ]
    return []


# ═══════════════════════════════════════════════════════════
# Check 3: RAM Speed Ceiling
# ═══════════════════════════════════════════════════════════


def check_ram_speed(build: PCBuild) -> list[CompatibilityIssue]:
    """Faster RAM still works, it just runs at the board's limit."""
    ram = spec_of(build.ram, RamSpec)
    board = spec_of(build.motherboard, MotherboardSpec)
    if ram is None or board is None:
        return []
    if not (_known(ram.speed_mhz) and _known(board.max_ram_speed_mhz)):
        return []

    if ram.speed_mhz > board.max_ram_speed_mhz:
        return [
            _warning(
                "W_RAM_DOWNCLOCKED",
                f"RAM {ram.speed_mhz}MHz will run at "
                f"{board.max_ram_speed_mhz}MHz (motherboard limit)",
                [ComponentKind.RAM, ComponentKind.MOTHERBOARD],
            )
        ]
    return []


# ═══════════════════════════════════════════════════════════
# Check 4: RAM Slots
# ═══════════════════════════════════════════════════════════


def check_ram_slots(build: PCBuild) -> list[CompatibilityIssue]:
    """A kit with more modules than the board has slots cannot be installed."""
    ram = spec_of(build.ram, RamSpec)
    board = spec_of(build.motherboard, MotherboardSpec)
    if ram is None or board is None:
        return []
    if not (_known(ram.modules_in_kit) and _known(board.ram_slots)):
        return []

    if ram.modules_in_kit > board.ram_slots:
        return [
            _error(
                "E_RAM_SLOTS_EXCEEDED",
                f"RAM kit has {ram.modules_in_kit} modules but the motherboard "
                f"only has {board.ram_slots} slots",
                [ComponentKind.RAM, ComponentKind.MOTHERBOARD],
                f"Choose a kit with at most {board.ram_slots} modules",
            )
        ]
    return []


# ═══════════════════════════════════════════════════════════
# Check 5: Motherboard Form Factor vs Case
# ═══════════════════════════════════════════════════════════


def check_form_factor(build: PCBuild) -> list[CompatibilityIssue]:
    """The case must list the motherboard's form factor as supported."""
    if build.motherboard is None or build.case is None:
        return []

    slots = [ComponentKind.MOTHERBOARD, ComponentKind.CASE]
    board = spec_of(build.motherboard, MotherboardSpec)
    case = spec_of(build.case, CaseSpec)
    form_factor = board.form_factor if board else None
    supported = case.supported_form_factors if case else None

    if not (_known(form_factor) and supported):
        return [
            _warning(
                "W_FORM_FACTOR_UNVERIFIED",
                "Cannot verify motherboard/case size compatibility",
                slots,
            )
        ]

    if form_factor not in supported:
        return [
            _error(
                "E_FORM_FACTOR_MISMATCH",
                f"Motherboard {form_factor} does not fit in case "
                f"(supports: {', '.join(sorted(supported))})",
                slots,
                f"Choose a case that supports {form_factor}",
            )
        ]
    return []


# ═══════════════════════════════════════════════════════════
# Check 6: GPU Clearance
# ═══════════════════════════════════════════════════════════


def check_gpu_clearance(build: PCBuild) -> list[CompatibilityIssue]:
    """GPU must be no longer than the case's maximum card length.

    Unlike checks 1, 2 and 5 there is no "cannot verify" warning here:
    missing data on either side silently skips the rule.
    """
    gpu = spec_of(build.gpu, GpuSpec)
    case = spec_of(build.case, CaseSpec)
    if gpu is None or case is None:
        return []
    if not (_known(gpu.length_mm) and _known(case.max_gpu_length_mm)):
        return []

    if gpu.length_mm > case.max_gpu_length_mm:
        return [
            _error(
                "E_GPU_CLEARANCE",
                f"GPU too long: {_fmt(gpu.length_mm)}mm > case maximum "
                f"{_fmt(case.max_gpu_length_mm)}mm",
                [ComponentKind.GPU, ComponentKind.CASE],
                "Choose a shorter GPU or a larger case",
            )
        ]
    return []


# ═══════════════════════════════════════════════════════════
# Check 7: Power Budget
# ═══════════════════════════════════════════════════════════


def check_power(build: PCBuild) -> list[CompatibilityIssue]:
    """PSU must cover the estimated draw; below the headroom target is advisory."""
    if build.psu is None:
        return []

    slots = [ComponentKind.PSU, ComponentKind.CPU, ComponentKind.GPU]
    estimate = estimate_power(build)
    psu = spec_of(build.psu, PsuSpec)
    wattage = psu.wattage if psu else None

    if _known(wattage):
        if wattage < estimate.watts_needed:
            return [
                _error(
                    "E_POWER_INSUFFICIENT",
                    f"Insufficient PSU: {wattage}W < {estimate.watts_needed}W required",
                    slots,
                    f"Choose a PSU of at least {estimate.watts_recommended}W",
                )
            ]
        if wattage < estimate.watts_recommended:
            return [
                _warning(
                    "W_POWER_UNDER_RECOMMENDED",
                    f"PSU {wattage}W works but {estimate.watts_recommended}W "
                    f"is recommended for better efficiency",
                    slots,
                )
            ]
        return []

    if has_known_tdp(build):
        return [
            _warning(
                "W_POWER_UNVERIFIED",
                f"Estimated draw: {estimate.watts_needed}W - "
                f"verify that the PSU is sufficient",
                slots,
            )
        ]
    return []


# ═══════════════════════════════════════════════════════════
# Main Evaluator
# ═══════════════════════════════════════════════════════════

# Order matters: messages are reported in this sequence
ALL_CHECKS: list[Check] = [
    check_socket,
    check_ram_type,
    check_ram_speed,
    check_ram_slots,
    check_form_factor,
    check_gpu_clearance,
    check_power,
]


def evaluate(
    build: PCBuild,
    checks: list[Check] | None = None,
) -> CompatibilityResult:
    """Run all (or selected) compatibility checks on a build.

    Args:
        build: The build to check. Empty slots are skipped per rule.
        checks: Optional subset of check functions to run.
                 Defaults to ALL_CHECKS.

    Returns:
        CompatibilityResult; compatible when no check raised an error.
    """
    check_fns = checks if checks is not None else ALL_CHECKS
    issues: list[CompatibilityIssue] = []
    errors: list[str] = []
    warnings: list[str] = []
    checks_passed = 0

    for check_fn in check_fns:
        found = check_fn(build)
        issues.extend(found)
        errs = [i.message for i in found if i.severity == IssueSeverity.ERROR]
        errors.extend(errs)
        warnings.extend(i.message for i in found if i.severity != IssueSeverity.ERROR)
        if not errs:
            checks_passed += 1

    return CompatibilityResult(
        is_compatible=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        issues=issues,
        checks_passed=checks_passed,
        checks_total=len(check_fns),
    )
