"""Indikatoren einer Organisation fuer ein Jahresfenster berechnen."""

from __future__ import annotations

import asyncio
import logging

from lab_indicators.api.schemas import IndicatorResult, YearValue
from lab_indicators.domain.indicators import AnnualIndicator, RatioIndicator
from lab_indicators.domain.models import ResearchOrganization
from lab_indicators.domain.reducers import average_values

logger = logging.getLogger(__name__)


def _method_description(indicator: AnnualIndicator) -> str:
    if isinstance(indicator, RatioIndicator):
        return (
            f"{indicator.key}: {indicator.numerator.key} / {indicator.denominator.key} "
            "pro Jahr (fehlender Nenner -> 0)"
        )
    reducer = "Mittelwert" if indicator.reducer is average_values else "Summe"
    return f"{indicator.key}: Jahreswerte, zusammengefasst per {reducer}"


async def analyze_indicators(
    organization: ResearchOrganization,
    start_year: int,
    end_year: int,
    *,
    catalog: dict[str, AnnualIndicator],
    keys: list[str] | None = None,
    locale: str = "en",
    timeout_s: float = 30.0,
) -> tuple[list[IndicatorResult], list[str], list[str], list[str]]:
    """
    Angeforderte Indikatoren parallel berechnen (per-Indikator Timeout).

    Fehlgeschlagene Indikatoren liefern eine leere Zeitreihe plus Warnung
    (Graceful Degradation); unbekannte Schluessel werden als Warnung gemeldet.

    Returns:
        Tuple aus (Ergebnisse, sources_used, methods, warnings)
    """
    sources: list[str] = []
    methods: list[str] = []
    warnings: list[str] = []

    requested = list(dict.fromkeys(keys)) if keys else list(catalog)
    selected: list[AnnualIndicator] = []
    for key in requested:
        indicator = catalog.get(key)
        if indicator is None:
            warnings.append(f"Unbekannter Indikator: {key}")
        else:
            selected.append(indicator)

    computations = await asyncio.gather(
        *[
            asyncio.wait_for(
                indicator.compute(organization, start_year, end_year), timeout=timeout_s
            )
            for indicator in selected
        ],
        return_exceptions=True,
    )

    results: list[IndicatorResult] = []
    for indicator, computation in zip(selected, computations):
        result = IndicatorResult(
            key=indicator.key,
            name=indicator.name(locale),
            label=indicator.label(locale, start_year, end_year),
        )
        if isinstance(computation, BaseException):
            err_type = type(computation).__name__
            logger.warning(
                "Indicator %s failed: %s: %s", indicator.key, err_type, computation
            )
            warnings.append(f"{indicator.key}: Timeout oder Fehler ({err_type})")
        else:
            result.values = [
                YearValue(year=year, value=value)
                for year, value in sorted(computation.series.items())
            ]
            result.merged_value = indicator.reducer(computation.series)
            result.details = computation.details
            methods.append(_method_description(indicator))
        results.append(result)

    if any(r.values for r in results):
        sources.append("Labmanager DB (lokal)")

    return results, sources, methods, warnings
