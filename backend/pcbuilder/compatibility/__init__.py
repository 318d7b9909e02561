from pcbuilder.compatibility.classifier import CategoryClassifier, get_classifier
from pcbuilder.compatibility.engine import ALL_CHECKS, evaluate
from pcbuilder.compatibility.filters import filter_by_preferences, filter_candidates
from pcbuilder.compatibility.limits import max_ram_kits, max_storage_units
from pcbuilder.compatibility.power import estimate_power

__all__ = [
    "CategoryClassifier",
    "get_classifier",
    "ALL_CHECKS",
    "evaluate",
    "filter_by_preferences",
    "filter_candidates",
    "max_ram_kits",
    "max_storage_units",
    "estimate_power",
]
