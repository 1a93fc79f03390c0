"""Katalog der verfuegbaren Indikatoren.

Jeder Eintrag ist nur eine Verdrahtung aus Datenquelle, Praedikaten und
Reduktionsfunktion; die Berechnungslogik steckt in den generischen Klassen
(`WindowedCountIndicator`, `RatioIndicator`, `MembershipFteIndicator`, ...).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from lab_indicators.domain.fte import MembershipFteIndicator, MembershipHeadcountIndicator
from lab_indicators.domain.indicators import AnnualIndicator, RatioIndicator, WindowedCountIndicator
from lab_indicators.domain.labels import MessageResolver
from lab_indicators.domain.models import JournalRankingSystem, Membership, Project, Publication, Unit
from lab_indicators.domain.predicates import (
    PublicationPredicate,
    all_of,
    has_phd_student_author,
    has_postdoc_author,
    is_academic_project,
    is_conference_paper,
    is_engineer,
    is_industrial_project,
    is_journal_paper,
    is_permanent_researcher,
    is_phd_student,
    is_postdoc,
    is_researcher,
    is_unranked,
    ranked_in,
)
from lab_indicators.domain.projects import ProjectBudgetIndicator, project_start_year


class PublicationAccessor(Protocol):
    async def get_conference_papers_by_organization_id(
        self, organization_id: int, include_sub_organizations: bool = True
    ) -> Iterable[Publication]: ...

    async def get_journal_papers_by_organization_id(
        self,
        organization_id: int,
        include_sub_organizations: bool = True,
        include_ranking_fields: bool = True,
    ) -> Iterable[Publication]: ...


class MembershipAccessor(Protocol):
    async def get_memberships_by_organization_id(
        self, organization_id: int, include_sub_organizations: bool = True
    ) -> Iterable[Membership]: ...


class ProjectAccessor(Protocol):
    async def get_projects_by_organization_id(
        self, organization_id: int, include_sub_organizations: bool = True
    ) -> Iterable[Project]: ...


# Autorenrolle (Schluessel-Praefix) -> Zusatz-Praedikat
_AUTHOR_ROLES: dict[str, PublicationPredicate | None] = {
    "": None,
    "phd": has_phd_student_author,
    "postdoc": has_postdoc_author,
}

_RANKING_PREFIXES: dict[JournalRankingSystem, str] = {
    JournalRankingSystem.SCIMAGO: "scimago",
    JournalRankingSystem.WOS: "wos",
}


def _camel(*parts: str) -> str:
    words = [p for p in parts if p]
    return words[0] + "".join(w[0].upper() + w[1:] for w in words[1:])


def build_indicator_catalog(
    publications: PublicationAccessor,
    memberships: MembershipAccessor,
    projects: ProjectAccessor,
    messages: MessageResolver,
    *,
    include_sub_organizations: bool = True,
    budget_unit: Unit = Unit.KILO,
) -> dict[str, AnnualIndicator]:
    """Alle Indikatoren nach Schluessel, in Anzeige-Reihenfolge."""

    async def conference_papers(organization_id: int) -> Iterable[Publication]:
        return await publications.get_conference_papers_by_organization_id(
            organization_id, include_sub_organizations
        )

    async def journal_papers(organization_id: int) -> Iterable[Publication]:
        return await publications.get_journal_papers_by_organization_id(
            organization_id, include_sub_organizations, True
        )

    async def members(organization_id: int) -> Iterable[Membership]:
        return await memberships.get_memberships_by_organization_id(
            organization_id, include_sub_organizations
        )

    async def organization_projects(organization_id: int) -> Iterable[Project]:
        return await projects.get_projects_by_organization_id(
            organization_id, include_sub_organizations
        )

    catalog: dict[str, AnnualIndicator] = {}

    def add(indicator: AnnualIndicator) -> AnnualIndicator:
        catalog[indicator.key] = indicator
        return indicator

    # --- Publikationen ---
    for role, secondary in _AUTHOR_ROLES.items():
        add(WindowedCountIndicator(
            _camel(role, "conferencePaperCount"), messages,
            conference_papers, is_conference_paper, secondary=secondary,
        ))

    for system, prefix in _RANKING_PREFIXES.items():
        for role, secondary in _AUTHOR_ROLES.items():
            add(WindowedCountIndicator(
                _camel(role, prefix, "journalPaperCount"), messages,
                journal_papers, ranked_in(system), secondary=secondary,
                message_key=_camel(role, "rankedJournalPaperCount"),
                message_arg_keys=(f"rankingSystem.{system.value}",),
            ))

    add(WindowedCountIndicator(
        "unrankedJournalPaperCount", messages,
        journal_papers, all_of(is_journal_paper, is_unranked),
        year_based_label=False,
    ))

    # --- Projekte ---
    add(WindowedCountIndicator(
        "academicProjectCount", messages,
        organization_projects, is_academic_project, year_of=project_start_year,
    ))
    add(ProjectBudgetIndicator(
        "academicProjectBudget", messages,
        organization_projects, is_academic_project, unit=budget_unit,
    ))
    add(ProjectBudgetIndicator(
        "industrialProjectBudget", messages,
        organization_projects, is_industrial_project, unit=budget_unit,
    ))

    # --- Personal ---
    permanent_fte = add(MembershipFteIndicator(
        "permanentResearcherFte", messages, members, is_permanent_researcher,
    ))
    postdoc_fte = add(MembershipFteIndicator("postdocFte", messages, members, is_postdoc))
    phd_fte = add(MembershipFteIndicator("phdStudentFte", messages, members, is_phd_student))

    # Kopfzahlen ohne Jahresangabe in der Beschriftung
    for key, selector in (
        ("permanentResearcherCount", is_permanent_researcher),
        ("researcherCount", is_researcher),
        ("postdocCount", is_postdoc),
        ("phdStudentCount", is_phd_student),
        ("engineerCount", is_engineer),
    ):
        add(MembershipHeadcountIndicator(
            key, messages, members, selector, year_based_label=False,
        ))

    # --- Quotienten ---
    for system, prefix in _RANKING_PREFIXES.items():
        add(RatioIndicator(
            _camel(prefix, "journalPaperFteRatio"), messages,
            catalog[_camel(prefix, "journalPaperCount")], permanent_fte,
            message_key="rankedJournalPaperFteRatio",
            message_arg_keys=(f"rankingSystem.{system.value}",),
        ))
    add(RatioIndicator(
        "conferencePaperFteRatio", messages,
        catalog["conferencePaperCount"], permanent_fte,
        year_based_label=False,
    ))
    add(RatioIndicator(
        "conferencePaperPostdocRatio", messages,
        catalog["postdocConferencePaperCount"], postdoc_fte,
        year_based_label=False,
    ))
    add(RatioIndicator(
        "phdConferencePaperRatio", messages,
        catalog["phdConferencePaperCount"], phd_fte,
    ))

    return catalog
