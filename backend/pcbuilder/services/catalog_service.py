"""Catalog service — read-only access to parts and their specs."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pcbuilder.catalog.models import ComponentSpecRow, Product, ProductWarehouseStock
from pcbuilder.catalog.search import search_parts
from pcbuilder.catalog.specs import attach_specs, part_from_product, spec_from_row
from pcbuilder.compatibility.classifier import CategoryClassifier
from pcbuilder.schemas.component import BaseSpec, ComponentKind, PartWithSpec

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, db: AsyncSession, classifier: CategoryClassifier):
        self.db = db
        self.classifier = classifier

    async def _load_specs(self, part_ids: list[str]) -> dict[str, BaseSpec | None]:
        if not part_ids:
            return {}
        stmt = select(ComponentSpecRow).where(
            ComponentSpecRow.product_id.in_(part_ids)
        )
        result = await self.db.execute(stmt)
        return {
            str(row.product_id): spec_from_row(row) for row in result.scalars().all()
        }

    async def _load_parts(self, category_ids: frozenset[str]) -> list[PartWithSpec]:
        if not category_ids:
            return []

        in_stock = (
            select(ProductWarehouseStock.product_id)
            .where(ProductWarehouseStock.existencias > 0)
            .distinct()
        )
        stmt = (
            select(Product)
            .where(Product.category_id.in_(sorted(category_ids)))
            .where(Product.is_active.is_(True))
            .where(Product.id.in_(in_stock))
            .order_by(Product.name)
        )
        result = await self.db.execute(stmt)
        parts = [part_from_product(p) for p in result.scalars().all()]
        specs = await self._load_specs([p.id for p in parts])

        logger.info(
            "Loaded %d in-stock parts (%d with specs) for categories %s",
            len(parts),
            len(specs),
            ", ".join(sorted(category_ids)),
        )
        return attach_specs(parts, specs)

    async def list_candidates(self, kind: ComponentKind) -> list[PartWithSpec]:
        """In-stock, active parts of one component kind, with specs."""
        return await self._load_parts(self.classifier.category_ids(kind))

    async def list_all_components(self) -> list[PartWithSpec]:
        return await self._load_parts(self.classifier.all_category_ids())

    async def get_part(self, part_id: str) -> PartWithSpec:
        stmt = select(Product).where(Product.id == part_id)
        result = await self.db.execute(stmt)
        product = result.scalar_one_or_none()
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Part {part_id} not found",
            )
        part = part_from_product(product)
        specs = await self._load_specs([part.id])
        return attach_specs([part], specs)[0]

    async def search(self, query: str, limit: int = 50) -> list[PartWithSpec]:
        parts = await self.list_all_components()
        return search_parts(parts, query)[:limit]
