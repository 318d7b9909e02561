"""Catalog router — category classification, search and part lookup."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query

from pcbuilder.compatibility.classifier import CategoryClassifier, get_classifier
from pcbuilder.routers.deps import get_catalog_service
from pcbuilder.schemas.builder import ClassifyResponse
from pcbuilder.schemas.component import PartWithSpec
from pcbuilder.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/categories")
async def list_categories(
    classifier: CategoryClassifier = Depends(get_classifier),
) -> dict[str, list[str]]:
    """Return the component kind → category ids table."""
    return classifier.as_table()


@router.get("/classify/{category_id}", response_model=ClassifyResponse)
async def classify_category(
    category_id: str,
    classifier: CategoryClassifier = Depends(get_classifier),
):
    """Map a catalog category id to its component kind (null if none)."""
    return ClassifyResponse(
        category_id=category_id,
        component_type=classifier.classify(category_id),
    )


@router.get("/search", response_model=list[PartWithSpec])
async def search_catalog(
    q: str = Query(..., min_length=1),
    limit: int = Query(50, ge=1, le=200),
    service: CatalogService = Depends(get_catalog_service),
):
    """Token search over in-stock PC components."""
    return await service.search(q, limit=limit)


@router.get("/parts/{part_id}", response_model=PartWithSpec)
async def get_part(
    part_id: uuid.UUID,
    service: CatalogService = Depends(get_catalog_service),
):
    """Get one part with its spec."""
    return await service.get_part(str(part_id))
