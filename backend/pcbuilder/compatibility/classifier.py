"""Category Classifier — catalog category id → component kind.

The category table is injected, so the engine stays independent of any one
store's taxonomy. Each category id may belong to at most one kind; that is
checked once, when the table is built.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache

from pcbuilder.config import get_settings
from pcbuilder.schemas.component import ComponentKind, PartWithSpec


class CategoryClassifier:
    def __init__(self, table: Mapping[str | ComponentKind, Iterable[str]]):
        lookup: dict[str, ComponentKind] = {}
        categories: dict[ComponentKind, frozenset[str]] = {}

        for raw_kind, category_ids in table.items():
            kind = ComponentKind(raw_kind)
            ids = frozenset(category_ids)
            for category_id in ids:
                owner = lookup.get(category_id)
                if owner is not None and owner != kind:
                    raise ValueError(
                        f"Category '{category_id}' is mapped to both "
                        f"{owner.value} and {kind.value}"
                    )
                lookup[category_id] = kind
            categories[kind] = categories.get(kind, frozenset()) | ids

        self._lookup = lookup
        self._categories = categories

    def classify(self, category_id: str | None) -> ComponentKind | None:
        if not category_id:
            return None
        return self._lookup.get(category_id)

    def category_ids(self, kind: ComponentKind) -> frozenset[str]:
        return self._categories.get(ComponentKind(kind), frozenset())

    def all_category_ids(self) -> frozenset[str]:
        return frozenset(self._lookup)

    def as_table(self) -> dict[str, list[str]]:
        return {
            kind.value: sorted(self.category_ids(kind))
            for kind in ComponentKind
            if kind in self._categories
        }

    def parts_of_kind(
        self, parts: Iterable[PartWithSpec], kind: ComponentKind
    ) -> list[PartWithSpec]:
        """Keep only the parts whose category belongs to ``kind``."""
        kind = ComponentKind(kind)
        return [p for p in parts if self.classify(p.category_id) == kind]


@lru_cache()
def get_classifier() -> CategoryClassifier:
    return CategoryClassifier(get_settings().component_categories)
