"""Projekt-Indikatoren: Budgetsumme pro Jahr.

Die Projektanzahl nutzt den generischen `WindowedCountIndicator`
(Zuordnung zum Startjahr), siehe `catalog.py`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable

from lab_indicators.domain.indicators import AnnualIndicator
from lab_indicators.domain.labels import MessageResolver
from lab_indicators.domain.models import Project, ResearchOrganization, Unit, YearValueSeries
from lab_indicators.domain.predicates import ProjectPredicate
from lab_indicators.domain.reducers import Reducer

ProjectFetcher = Callable[[int], Awaitable[Iterable[Project]]]


def project_start_year(project: Project) -> int | None:
    return project.start_year


def annual_budget_shares(project: Project) -> dict[int, float]:
    """Budget gleichmaessig auf die Laufzeitjahre verteilt (in Euro).

    Ohne Startjahr -> leer. Fehlendes oder zu fruehes Endjahr -> nur Startjahr.
    """
    if project.start_year is None:
        return {}
    end_year = project.end_year
    if end_year is None or end_year < project.start_year:
        end_year = project.start_year
    years = range(project.start_year, end_year + 1)
    share = project.budget / len(years)
    return {year: share for year in years}


class ProjectBudgetIndicator(AnnualIndicator):
    """Summe der Budgets ausgewaehlter Projekte pro Jahr, in `unit`.

    Laufen Projekte ueber mehrere Jahre, zaehlt pro Jahr der anteilige
    Betrag. Jahre ohne Budget fehlen in der Zeitreihe. Die Beschriftung
    enthaelt die Einheit (z.B. "k") als Argument.
    """

    def __init__(
        self,
        key: str,
        messages: MessageResolver,
        fetch_projects: ProjectFetcher,
        selector: ProjectPredicate,
        *,
        unit: Unit = Unit.KILO,
        reducer: Reducer | None = None,
        message_key: str | None = None,
    ) -> None:
        super().__init__(key, messages, reducer=reducer, message_key=message_key)
        self._fetch_projects = fetch_projects
        self._selector = selector
        self.unit = unit

    async def values_per_year(
        self, organization: ResearchOrganization, start_year: int, end_year: int
    ) -> YearValueSeries:
        projects = [p for p in await self._fetch_projects(organization.id) if self._selector(p)]
        totals: dict[int, float] = {}
        for project in projects:
            for year, amount in annual_budget_shares(project).items():
                if start_year <= year <= end_year:
                    totals[year] = totals.get(year, 0.0) + amount
        return {
            year: round(amount / self.unit.factor, 4)
            for year, amount in sorted(totals.items())
            if amount > 0
        }

    def _message_args(self, locale: str) -> list[str]:
        return [*super()._message_args(locale), self.unit.label]
