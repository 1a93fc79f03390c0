"""GET/POST /api/v1/indicators: Indikator-Katalog und Berechnung."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException, Query

from lab_indicators.api.schemas import (
    ExplainabilityMetadata,
    IndicatorInfo,
    IndicatorRequest,
    IndicatorsResponse,
)
from lab_indicators.config import Settings
from lab_indicators.domain.catalog import build_indicator_catalog
from lab_indicators.domain.indicators import AnnualIndicator
from lab_indicators.domain.labels import BundledMessageResolver, reference_period
from lab_indicators.infrastructure.repositories.membership_repo import MembershipRepository
from lab_indicators.infrastructure.repositories.organization_repo import OrganizationRepository
from lab_indicators.infrastructure.repositories.project_repo import ProjectRepository
from lab_indicators.infrastructure.repositories.publication_repo import PublicationRepository
from lab_indicators.use_cases.indicators import analyze_indicators

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Indicators"])


def _catalog(settings: Settings) -> dict[str, AnnualIndicator]:
    return build_indicator_catalog(
        PublicationRepository(settings.labmanager_db_path),
        MembershipRepository(settings.labmanager_db_path),
        ProjectRepository(settings.labmanager_db_path),
        BundledMessageResolver(default_locale=settings.default_locale),
        include_sub_organizations=settings.include_sub_organizations,
        budget_unit=settings.budget_unit,
    )


def _resolve_window(request: IndicatorRequest, default_years: int) -> tuple[int, int]:
    years = request.years or default_years
    if request.start_year is not None and request.end_year is not None:
        return request.start_year, request.end_year
    if request.end_year is not None:
        return request.end_year - years + 1, request.end_year
    if request.start_year is not None:
        return request.start_year, request.start_year + years - 1
    return reference_period(years)


@router.get("/indicators", response_model=list[IndicatorInfo])
async def list_indicators(
    locale: str | None = Query(None, max_length=10),
) -> list[IndicatorInfo]:
    """Alle verfuegbaren Indikatoren mit lokalisiertem Namen."""
    settings = Settings()
    loc = locale or settings.default_locale
    return [
        IndicatorInfo(key=key, name=indicator.name(loc), label=indicator.label(loc))
        for key, indicator in _catalog(settings).items()
    ]


@router.post("/indicators", response_model=IndicatorsResponse)
async def compute_indicators(request: IndicatorRequest) -> IndicatorsResponse:
    """
    Indikatoren einer Organisation berechnen.

    Pro Indikator: Zeitreihe Jahr -> Wert, zusammengefasster Wert
    (Summe bzw. Mittelwert), Label mit Zeitraum und Berechnungsdetails.
    """
    t0 = time.monotonic()
    settings = Settings()
    if not settings.labmanager_db_available:
        logger.warning("Labmanager DB not found: %s", settings.labmanager_db_path)
        raise HTTPException(status_code=503, detail="Labmanager database not available")

    organization = await OrganizationRepository(settings.labmanager_db_path).get_organization(
        request.organization_id
    )
    if organization is None:
        raise HTTPException(
            status_code=404, detail=f"Unknown organization: {request.organization_id}"
        )

    start_year, end_year = _resolve_window(request, settings.default_window_years)
    locale = request.locale or settings.default_locale

    results, sources, methods, warnings = await analyze_indicators(
        organization, start_year, end_year,
        catalog=_catalog(settings),
        keys=request.indicators,
        locale=locale,
        timeout_s=settings.indicator_timeout_s,
    )

    elapsed_ms = int((time.monotonic() - t0) * 1000)
    period = f"{start_year}-{end_year}" if start_year != end_year else str(start_year)

    return IndicatorsResponse(
        organization_id=organization.id,
        organization_name=organization.name,
        analysis_period=period,
        locale=locale,
        indicators=results,
        explainability=ExplainabilityMetadata(
            sources_used=sources,
            methods=methods,
            deterministic=True,
            warnings=warnings,
            query_time_ms=elapsed_ms,
        ),
    )
