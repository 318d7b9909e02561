"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from pcbuilder.compatibility.classifier import CategoryClassifier, get_classifier
from pcbuilder.db.session import get_db, is_db_available
from pcbuilder.services.catalog_service import CatalogService


def require_db() -> None:
    if not is_db_available():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog database unavailable",
        )


def get_catalog_service(
    _: None = Depends(require_db),
    db: AsyncSession = Depends(get_db),
    classifier: CategoryClassifier = Depends(get_classifier),
) -> CatalogService:
    return CatalogService(db, classifier)
