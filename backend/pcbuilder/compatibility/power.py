"""Power Estimator — PSU wattage needed for a build."""

from __future__ import annotations

from decimal import Decimal, ROUND_CEILING

from pcbuilder.schemas.compatibility import PowerEstimate
from pcbuilder.schemas.component import (
    CpuSpec,
    GpuSpec,
    PartWithSpec,
    PCBuild,
    spec_of,
)

# Base draw (W) of a system without CPU and discrete GPU
BASE_POWER_WATTS = 100
# 20% headroom over the minimum
PSU_HEADROOM = Decimal("1.2")


def _tdp(part: PartWithSpec | None, spec_type: type[CpuSpec | GpuSpec]) -> Decimal:
    spec = spec_of(part, spec_type)
    if spec is None:
        return Decimal(0)
    return Decimal(str(spec.tdp_watts or 0))


def _ceil(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


def estimate_power(build: PCBuild) -> PowerEstimate:
    """Baseline + CPU TDP + GPU TDP, recommended with 20% headroom.

    Unknown TDPs count as 0, so this always returns a value.
    """
    needed = (
        Decimal(BASE_POWER_WATTS)
        + _tdp(build.cpu, CpuSpec)
        + _tdp(build.gpu, GpuSpec)
    )
    return PowerEstimate(
        watts_needed=_ceil(needed),
        watts_recommended=_ceil(needed * PSU_HEADROOM),
    )


def has_known_tdp(build: PCBuild) -> bool:
    return _tdp(build.cpu, CpuSpec) > 0 or _tdp(build.gpu, GpuSpec) > 0
