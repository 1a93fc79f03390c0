"""GET-Endpoints fuer Health und Metadata."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from fastapi import APIRouter

from lab_indicators.config import Settings
from lab_indicators.domain.labels import BundledMessageResolver

router = APIRouter(tags=["Data"])
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Service Health Check mit Datenbank-Status."""
    settings = Settings()

    labmanager_db = Path(settings.labmanager_db_path)

    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "data_sources": {
            "labmanager_db": {
                "available": labmanager_db.exists(),
                "path": settings.labmanager_db_path,
                "size_mb": round(labmanager_db.stat().st_size / 1_048_576, 1)
                if labmanager_db.exists()
                else 0,
            },
        },
    }


@router.get("/api/v1/data/metadata")
async def data_metadata() -> dict[str, Any]:
    """Metadaten ueber Datenquelle und Standardwerte."""
    settings = Settings()
    return {
        "labmanager_db_available": settings.labmanager_db_available,
        "default_window_years": settings.default_window_years,
        "default_locale": settings.default_locale,
        "locales": BundledMessageResolver().locales,
        "include_sub_organizations": settings.include_sub_organizations,
        "budget_unit": settings.budget_unit.value,
    }
