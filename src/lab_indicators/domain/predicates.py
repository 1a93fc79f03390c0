"""Auswahl-Praedikate fuer Publikationen, Projekte und Mitgliedschaften.

Die Indikator-Varianten (Konferenz/Zeitschrift, gerankt/ungerankt,
Doktorand/Postdoc) unterscheiden sich nur durch diese Praedikate.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from lab_indicators.domain.models import (
    ACADEMIC_PROJECT_CATEGORIES,
    CONFERENCE_PAPER_TYPES,
    JOURNAL_PAPER_TYPES,
    IndicatorConfigurationError,
    JournalRankingSystem,
    Membership,
    MemberStatus,
    Project,
    ProjectCategory,
    Publication,
    QuartileRanking,
)

T = TypeVar("T")

PublicationPredicate = Callable[[Publication], bool]
ProjectPredicate = Callable[[Project], bool]
MembershipPredicate = Callable[[Membership], bool]

# Ranking-System -> Quartil-Zugriff
_QUARTILE_ACCESSORS: dict[JournalRankingSystem, Callable[[Publication], QuartileRanking | None]] = {
    JournalRankingSystem.SCIMAGO: lambda p: p.scimago_q_index,
    JournalRankingSystem.WOS: lambda p: p.wos_q_index,
}


# --- Publikationen ---

def is_conference_paper(publication: Publication) -> bool:
    """Internationaler oder nationaler Konferenzbeitrag."""
    return publication.publication_type in CONFERENCE_PAPER_TYPES


def is_journal_paper(publication: Publication) -> bool:
    return publication.publication_type in JOURNAL_PAPER_TYPES


def quartile_accessor(
    ranking_system: JournalRankingSystem | str,
) -> Callable[[Publication], QuartileRanking | None]:
    """Zugriffsfunktion auf das Quartil im gewaehlten Ranking-System.

    Raises:
        IndicatorConfigurationError: Wenn das Ranking-System nicht unterstuetzt wird.
    """
    try:
        system = JournalRankingSystem(ranking_system)
        return _QUARTILE_ACCESSORS[system]
    except (ValueError, KeyError) as exc:
        raise IndicatorConfigurationError(
            f"Unsupported ranking system: {ranking_system!r}"
        ) from exc


def ranked_in(ranking_system: JournalRankingSystem | str) -> PublicationPredicate:
    """Praedikat: Quartil im Ranking-System ist nicht NR.

    Die Pruefung des Ranking-Systems erfolgt sofort beim Aufruf, nicht erst
    bei der Auswertung.
    """
    accessor = quartile_accessor(ranking_system)

    def _predicate(publication: Publication) -> bool:
        return QuartileRanking.normalize(accessor(publication)) != QuartileRanking.NR

    return _predicate


def is_unranked(publication: Publication) -> bool:
    """In keinem Ranking-System gerankt."""
    return not publication.is_ranked()


def has_phd_student_author(publication: Publication) -> bool:
    return publication.has_phd_student_author()


def has_postdoc_author(publication: Publication) -> bool:
    return publication.has_postdoc_author()


def all_of(*predicates: Callable[[T], bool]) -> Callable[[T], bool]:
    """Konjunktion mehrerer Praedikate (leere Liste -> immer wahr)."""

    def _predicate(item: T) -> bool:
        return all(p(item) for p in predicates)

    return _predicate


# --- Mitgliedschaften ---

def is_permanent_researcher(membership: Membership) -> bool:
    """Dauerstelle als Forscher/in (keine Doktoranden, keine externen Positionen)."""
    if not membership.permanent_position:
        return False
    status = membership.status
    attrs = status.attributes
    return (
        not attrs.is_external
        and status != MemberStatus.PHD_STUDENT
        and attrs.is_researcher
        and attrs.permanent_position_allowed
    )


def is_researcher(membership: Membership) -> bool:
    attrs = membership.status.attributes
    return attrs.is_researcher and not attrs.is_external


def is_postdoc(membership: Membership) -> bool:
    return membership.status == MemberStatus.POSTDOC


def is_phd_student(membership: Membership) -> bool:
    return membership.status == MemberStatus.PHD_STUDENT


def is_engineer(membership: Membership) -> bool:
    return membership.status in (MemberStatus.ENGINEER, MemberStatus.RESEARCH_ENGINEER)


# --- Projekte ---

def is_academic_project(project: Project) -> bool:
    """Wettbewerbliche Ausschreibung oder Eigenfinanzierung."""
    return project.category in ACADEMIC_PROJECT_CATEGORIES


def is_industrial_project(project: Project) -> bool:
    return project.category == ProjectCategory.NOT_ACADEMIC_PROJECT
