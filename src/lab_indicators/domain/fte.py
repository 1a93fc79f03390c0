"""Personal-Indikatoren pro Jahr: Vollzeitaequivalente (FTE) und Kopfzahlen.

Dienen als Nenner der Quotienten-Indikatoren (z.B. Papers pro Forscher-FTE).
Die Berechnungsdetails listen die ausgewaehlten Personen statt der Zeitreihe.
"""

from __future__ import annotations

import calendar
import logging
from abc import abstractmethod
from collections.abc import Awaitable, Callable, Iterable
from datetime import date

from lab_indicators.domain.indicators import AnnualIndicator
from lab_indicators.domain.labels import MessageResolver
from lab_indicators.domain.models import (
    IndicatorComputation,
    Membership,
    ResearchOrganization,
    YearValueSeries,
)
from lab_indicators.domain.predicates import MembershipPredicate
from lab_indicators.domain.reducers import Reducer, average_values

logger = logging.getLogger(__name__)

MembershipFetcher = Callable[[int], Awaitable[Iterable[Membership]]]


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def overlap_days(membership: Membership, year: int) -> int:
    """Anzahl Tage des Jahres, an denen die Mitgliedschaft gilt (Grenzen inklusiv)."""
    first = date(year, 1, 1)
    last = date(year, 12, 31)
    start = max(membership.since or first, first)
    end = min(membership.to or last, last)
    return max(0, (end - start).days + 1)


def overlaps_window(membership: Membership, start_year: int, end_year: int) -> bool:
    """Mitgliedschaft gilt an mindestens einem Tag des Jahresfensters."""
    if membership.since is not None and membership.since > date(end_year, 12, 31):
        return False
    if membership.to is not None and membership.to < date(start_year, 1, 1):
        return False
    return start_year <= end_year


def describe_persons(names: Iterable[str]) -> str | None:
    """Personen alphabetisch und nummeriert, z.B. "1) Doe, Jane". Leer -> None."""
    lines = [f"{i}) {name}" for i, name in enumerate(sorted(n for n in names if n), start=1)]
    return "\n".join(lines) or None


class _MembershipIndicator(AnnualIndicator):
    def __init__(
        self,
        key: str,
        messages: MessageResolver,
        fetch_memberships: MembershipFetcher,
        selector: MembershipPredicate,
        *,
        reducer: Reducer | None = None,
        message_key: str | None = None,
        year_based_label: bool = True,
    ) -> None:
        super().__init__(
            key, messages,
            reducer=reducer if reducer is not None else average_values,
            message_key=message_key,
            year_based_label=year_based_label,
        )
        self._fetch_memberships = fetch_memberships
        self._selector = selector

    async def _selected(self, organization: ResearchOrganization) -> list[Membership]:
        return [m for m in await self._fetch_memberships(organization.id) if self._selector(m)]

    @abstractmethod
    def _series(
        self, memberships: list[Membership], start_year: int, end_year: int
    ) -> YearValueSeries: ...

    async def values_per_year(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> YearValueSeries:
        return self._series(await self._selected(organization), start_year, end_year)

    async def compute(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> IndicatorComputation:
        logger.debug(
            "Computing indicator %s for organization %s (%d-%d)",
            self.key, organization.id, start_year, end_year,
        )
        memberships = await self._selected(organization)
        series = self._series(memberships, start_year, end_year)
        # Eine Person pro Eintrag, auch bei mehreren Mitgliedschaften
        persons = {
            m.person_id: m.person_name
            for m in memberships
            if overlaps_window(m, start_year, end_year)
        }
        return IndicatorComputation(series=series, details=describe_persons(persons.values()))


class MembershipFteIndicator(_MembershipIndicator):
    """Vollzeitaequivalent ausgewaehlter Mitglieder pro Jahr.

    FTE(Jahr) = Summe ueber Mitgliedschaften von
        Tage_im_Jahr_aktiv / Tage_des_Jahres * FTE-Anteil des Status

    Jahre ohne aktive Mitgliedschaft fehlen in der Zeitreihe.
    """

    def _series(
        self, memberships: list[Membership], start_year: int, end_year: int
    ) -> YearValueSeries:
        series: YearValueSeries = {}
        for year in range(start_year, end_year + 1):
            total_days = days_in_year(year)
            fte = sum(
                overlap_days(m, year) / total_days * m.status.attributes.full_time_equivalent
                for m in memberships
            )
            if fte > 0:
                series[year] = round(fte, 4)
        return series


class MembershipHeadcountIndicator(_MembershipIndicator):
    """Anzahl verschiedener Personen mit ausgewaehlter Mitgliedschaft pro Jahr."""

    def _series(
        self, memberships: list[Membership], start_year: int, end_year: int
    ) -> YearValueSeries:
        series: YearValueSeries = {}
        for year in range(start_year, end_year + 1):
            persons = {m.person_id for m in memberships if overlap_days(m, year) > 0}
            if persons:
                series[year] = len(persons)
        return series
