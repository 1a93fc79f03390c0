"""Jahresindikatoren: Vertrag, Zaehl-Aggregation und Quotienten.

Ein Indikator berechnet fuer eine Organisation und ein inklusives
Jahresfenster eine Zeitreihe Jahr -> Wert und fasst sie ueber eine
Reduktionsfunktion (Summe, Mittelwert) zu einem Einzelwert zusammen.

Jeder Aufruf rechnet neu; Indikatoren halten keinen veraenderlichen Zustand.
Diagnose-Informationen werden mit dem Ergebnis zurueckgegeben
(`IndicatorComputation`), nicht im Objekt gespeichert.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from lab_indicators.domain.labels import MessageResolver, label_with_years
from lab_indicators.domain.models import (
    IndicatorComputation,
    IndicatorConfigurationError,
    Publication,
    ResearchOrganization,
    YearValueSeries,
)
from lab_indicators.domain.reducers import Reducer, average_values, sum_values
from lab_indicators.domain.year_window import filter_by_year_window

logger = logging.getLogger(__name__)

ItemFetcher = Callable[[int], Awaitable[Iterable[Any]]]
"""Liefert alle Kandidaten einer Organisation (ungefiltert nach Jahr)."""


def publication_year(publication: Publication) -> int | None:
    return publication.publication_year


def describe_series(series: Mapping[int, float]) -> str | None:
    """Zeitreihe als Text, ein "Jahr: Wert" pro Zeile, nach Jahr sortiert."""
    if not series:
        return None
    return "\n".join(f"{year}: {value}" for year, value in sorted(series.items()))


# ---------------------------------------------------------------------------
# Vertrag
# ---------------------------------------------------------------------------


class AnnualIndicator(ABC):
    """Basisklasse aller Jahresindikatoren.

    Args:
        key: Stabiler Bezeichner (camelCase), z.B. "conferencePaperCount".
        messages: Aufloesung lokalisierter Namen/Beschriftungen.
        reducer: Zusammenfassung der Jahreswerte. None -> Summe.
        message_key: Praefix der Nachrichtenschluessel. None -> key.
        message_arg_keys: Nachrichtenschluessel, deren lokalisierte Texte
            als Argumente in Name und Beschriftung eingesetzt werden.
        year_based_label: Beschriftung mit Jahresfenster am Ende.
    """

    def __init__(
        self,
        key: str,
        messages: MessageResolver,
        *,
        reducer: Reducer | None = None,
        message_key: str | None = None,
        message_arg_keys: tuple[str, ...] = (),
        year_based_label: bool = True,
    ) -> None:
        self.key = key
        self.reducer: Reducer = reducer if reducer is not None else sum_values
        self._messages = messages
        self._message_key = message_key or key
        self._message_arg_keys = message_arg_keys
        self._year_based_label = year_based_label

    @abstractmethod
    async def values_per_year(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> YearValueSeries:
        """Werte pro Jahr im inklusiven Fenster [start_year, end_year]."""

    async def compute(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> IndicatorComputation:
        """Zeitreihe plus textuelle Erklaerung der Berechnung."""
        logger.debug(
            "Computing indicator %s for organization %s (%d-%d)",
            self.key, organization.id, start_year, end_year,
        )
        series = await self.values_per_year(organization, start_year, end_year)
        logger.debug("%s = %s", self.key, series)
        return IndicatorComputation(series=series, details=describe_series(series))

    async def merged_value(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> float:
        """Zeitreihe mit der konfigurierten Reduktionsfunktion zusammenfassen."""
        series = await self.values_per_year(organization, start_year, end_year)
        return self.reducer(series)

    def name(self, locale: str) -> str:
        return self._messages.get_message(
            locale, f"{self._message_key}Indicator.name", *self._message_args(locale)
        )

    def label(
        self, locale: str, start_year: int | None = None, end_year: int | None = None
    ) -> str:
        text = self._messages.get_message(
            locale, f"{self._message_key}Indicator.label", *self._message_args(locale)
        )
        if self._year_based_label:
            return label_with_years(text, start_year, end_year)
        return text

    def _message_args(self, locale: str) -> list[str]:
        return [self._messages.get_message(locale, k) for k in self._message_arg_keys]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


# ---------------------------------------------------------------------------
# Zaehl-Indikatoren
# ---------------------------------------------------------------------------


class WindowedCountIndicator(AnnualIndicator):
    """Anzahl ausgewaehlter Elemente (Publikationen, Projekte) pro Jahr.

    Ablauf: alle Kandidaten der Organisation laden -> Jahresfenster ->
    Kategorie-Praedikat -> optionales Zusatz-Praedikat -> Zaehlen pro Jahr.
    Jahre ohne Treffer fehlen in der Zeitreihe (kein 0-Eintrag).

    Raises:
        IndicatorConfigurationError: Wenn kein Kategorie-Praedikat angegeben ist.
    """

    def __init__(
        self,
        key: str,
        messages: MessageResolver,
        fetch_items: ItemFetcher,
        category: Callable[[Any], bool] | None,
        *,
        secondary: Callable[[Any], bool] | None = None,
        year_of: Callable[[Any], int | None] = publication_year,
        reducer: Reducer | None = None,
        message_key: str | None = None,
        message_arg_keys: tuple[str, ...] = (),
        year_based_label: bool = True,
    ) -> None:
        if category is None:
            raise IndicatorConfigurationError(f"Indicator {key!r} requires a category predicate")
        super().__init__(
            key, messages,
            reducer=reducer,
            message_key=message_key,
            message_arg_keys=message_arg_keys,
            year_based_label=year_based_label,
        )
        self._fetch_items = fetch_items
        self._category = category
        self._secondary = secondary
        self._year_of = year_of

    async def values_per_year(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> YearValueSeries:
        items = await self._fetch_items(organization.id)
        selected = (
            p for p in filter_by_year_window(items, self._year_of, start_year, end_year)
            if self._category(p)
        )
        if self._secondary is not None:
            secondary = self._secondary
            selected = (p for p in selected if secondary(p))
        return dict(Counter(self._year_of(p) for p in selected))


# ---------------------------------------------------------------------------
# Quotienten-Indikatoren
# ---------------------------------------------------------------------------


def year_ratio(numerator: float | None, denominator: float | None) -> float:
    """Quotient eines Jahres. Fehlender oder 0-Nenner -> 0.0 (kein Fehler)."""
    if numerator is None or not denominator:
        return 0.0
    return numerator / denominator


class RatioIndicator(AnnualIndicator):
    """Quotient zweier Indikatoren pro Jahr (z.B. Papers pro FTE).

    Die Jahre der Ergebnisreihe sind genau die Jahre des Zaehlers; Jahre,
    die nur im Nenner vorkommen, erscheinen nicht. Standard-Reduktion ist
    der Mittelwert.
    """

    def __init__(
        self,
        key: str,
        messages: MessageResolver,
        numerator: AnnualIndicator,
        denominator: AnnualIndicator,
        *,
        reducer: Reducer | None = None,
        message_key: str | None = None,
        message_arg_keys: tuple[str, ...] = (),
        year_based_label: bool = True,
    ) -> None:
        super().__init__(
            key, messages,
            reducer=reducer if reducer is not None else average_values,
            message_key=message_key,
            message_arg_keys=message_arg_keys,
            year_based_label=year_based_label,
        )
        self.numerator = numerator
        self.denominator = denominator

    async def values_per_year(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> YearValueSeries:
        counts, denominators = await asyncio.gather(
            self.numerator.values_per_year(organization, start_year, end_year),
            self.denominator.values_per_year(organization, start_year, end_year),
        )
        return {
            year: year_ratio(count, denominators.get(year))
            for year, count in counts.items()
        }
