from pcbuilder.schemas.component import (
    ComponentKind,
    ComponentSpec,
    Part,
    PartWithSpec,
    PCBuild,
)
from pcbuilder.schemas.compatibility import CompatibilityResult, PowerEstimate
from pcbuilder.schemas.quotation import Quotation, QuotationItem

__all__ = [
    "ComponentKind",
    "ComponentSpec",
    "Part",
    "PartWithSpec",
    "PCBuild",
    "CompatibilityResult",
    "PowerEstimate",
    "Quotation",
    "QuotationItem",
]
