"""Domain-Modelle fuer Labor-Indikatoren.

Zentrale Datenstrukturen der Domain-Schicht. Diese Modelle sind
framework-unabhaengig definiert (nur Pydantic fuer Validierung)
und haben keine Abhaengigkeiten zu aeusseren Schichten (API, Infrastructure).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from pydantic import BaseModel

YearValueSeries = dict[int, int | float]
"""Zeitreihe Jahr -> Wert. Jedes Jahr hoechstens einmal, fehlende Jahre = kein Eintrag."""


class IndicatorConfigurationError(ValueError):
    """Fehlkonfigurierter Indikator (Programmier- oder Deployment-Fehler)."""


# --- Aufzaehlungen ---

class PublicationType(str, Enum):
    """Publikationskategorien."""

    INTERNATIONAL_JOURNAL_PAPER = "INTERNATIONAL_JOURNAL_PAPER"
    NATIONAL_JOURNAL_PAPER = "NATIONAL_JOURNAL_PAPER"
    INTERNATIONAL_CONFERENCE_PAPER = "INTERNATIONAL_CONFERENCE_PAPER"
    NATIONAL_CONFERENCE_PAPER = "NATIONAL_CONFERENCE_PAPER"
    INTERNATIONAL_ORAL_COMMUNICATION = "INTERNATIONAL_ORAL_COMMUNICATION"
    NATIONAL_ORAL_COMMUNICATION = "NATIONAL_ORAL_COMMUNICATION"
    INTERNATIONAL_POSTER = "INTERNATIONAL_POSTER"
    NATIONAL_POSTER = "NATIONAL_POSTER"
    SCIENTIFIC_BOOK = "SCIENTIFIC_BOOK"
    BOOK_CHAPTER = "BOOK_CHAPTER"
    INTERNATIONAL_PATENT = "INTERNATIONAL_PATENT"
    EUROPEAN_PATENT = "EUROPEAN_PATENT"
    NATIONAL_PATENT = "NATIONAL_PATENT"
    PHD_THESIS = "PHD_THESIS"
    TECHNICAL_REPORT = "TECHNICAL_REPORT"
    OTHER = "OTHER"


CONFERENCE_PAPER_TYPES = frozenset({
    PublicationType.INTERNATIONAL_CONFERENCE_PAPER,
    PublicationType.NATIONAL_CONFERENCE_PAPER,
})

JOURNAL_PAPER_TYPES = frozenset({
    PublicationType.INTERNATIONAL_JOURNAL_PAPER,
    PublicationType.NATIONAL_JOURNAL_PAPER,
})


class QuartileRanking(str, Enum):
    """Quartil einer Zeitschrift in einem Ranking-System (NR = nicht gerankt)."""

    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"
    NR = "NR"

    @classmethod
    def normalize(cls, value: QuartileRanking | None) -> QuartileRanking:
        """None wird als NR behandelt."""
        return value if value is not None else cls.NR


class JournalRankingSystem(str, Enum):
    """Ranking-Systeme fuer Zeitschriften."""

    SCIMAGO = "SCIMAGO"
    WOS = "WOS"


class MemberStatus(str, Enum):
    """Status einer Person innerhalb einer Organisation."""

    FULL_PROFESSOR = "FULL_PROFESSOR"
    ASSOCIATE_PROFESSOR = "ASSOCIATE_PROFESSOR"
    RESEARCHER = "RESEARCHER"
    RESEARCH_ENGINEER = "RESEARCH_ENGINEER"
    ENGINEER = "ENGINEER"
    POSTDOC = "POSTDOC"
    PHD_STUDENT = "PHD_STUDENT"
    ADMINISTRATIVE_STAFF = "ADMINISTRATIVE_STAFF"
    MASTER_STUDENT = "MASTER_STUDENT"
    ASSOCIATED_MEMBER = "ASSOCIATED_MEMBER"

    @property
    def attributes(self) -> MemberStatusAttributes:
        return MEMBER_STATUS_ATTRIBUTES[self]


@dataclass(frozen=True, slots=True)
class MemberStatusAttributes:
    """Eigenschaften eines Mitglieder-Status.

    Attributes:
        is_researcher: Forschende Position (zaehlt fuer Forschungs-FTE).
        is_external: Position ausserhalb der Organisation (z.B. assoziiert).
        permanent_position_allowed: Status kann eine Dauerstelle sein.
        full_time_equivalent: Forschungsanteil einer Vollzeitstelle (0.0 - 1.0).
    """

    is_researcher: bool
    is_external: bool
    permanent_position_allowed: bool
    full_time_equivalent: float


# Lehrende Forscher (Professoren) haben ~50% Forschungsanteil.
MEMBER_STATUS_ATTRIBUTES: dict[MemberStatus, MemberStatusAttributes] = {
    MemberStatus.FULL_PROFESSOR: MemberStatusAttributes(True, False, True, 0.5),
    MemberStatus.ASSOCIATE_PROFESSOR: MemberStatusAttributes(True, False, True, 0.5),
    MemberStatus.RESEARCHER: MemberStatusAttributes(True, False, True, 1.0),
    MemberStatus.RESEARCH_ENGINEER: MemberStatusAttributes(True, False, True, 1.0),
    MemberStatus.ENGINEER: MemberStatusAttributes(False, False, True, 1.0),
    MemberStatus.POSTDOC: MemberStatusAttributes(True, False, False, 1.0),
    MemberStatus.PHD_STUDENT: MemberStatusAttributes(True, False, False, 1.0),
    MemberStatus.ADMINISTRATIVE_STAFF: MemberStatusAttributes(False, False, True, 0.0),
    MemberStatus.MASTER_STUDENT: MemberStatusAttributes(False, False, False, 0.0),
    MemberStatus.ASSOCIATED_MEMBER: MemberStatusAttributes(True, True, False, 0.0),
}


class ProjectCategory(str, Enum):
    """Projektkategorien (akademisch, industriell, ...)."""

    OPEN_SOURCE = "OPEN_SOURCE"
    AUTO_FUNDING = "AUTO_FUNDING"
    NOT_ACADEMIC_PROJECT = "NOT_ACADEMIC_PROJECT"
    COMPETITIVE_CALL_PROJECT = "COMPETITIVE_CALL_PROJECT"


ACADEMIC_PROJECT_CATEGORIES = frozenset({
    ProjectCategory.COMPETITIVE_CALL_PROJECT,
    ProjectCategory.AUTO_FUNDING,
})


class Unit(str, Enum):
    """Dezimale Einheit fuer Betraege (z.B. Budgets in k€)."""

    NONE = "NONE"
    KILO = "KILO"
    MEGA = "MEGA"

    @property
    def label(self) -> str:
        return _UNIT_LABELS[self]

    @property
    def factor(self) -> float:
        return _UNIT_FACTORS[self]


_UNIT_LABELS = {Unit.NONE: "", Unit.KILO: "k", Unit.MEGA: "m"}
_UNIT_FACTORS = {Unit.NONE: 1e0, Unit.KILO: 1e3, Unit.MEGA: 1e6}


# --- Entitaeten ---

class ResearchOrganization(BaseModel):
    """Forschungsorganisation (Labor, Team, Abteilung)."""

    id: int
    acronym: str = ""
    name: str = ""
    super_organization_id: int | None = None


class Author(BaseModel):
    """Autor einer Publikation mit Status zum Publikationszeitpunkt."""

    person_id: int
    name: str = ""
    status: MemberStatus | None = None


class Publication(BaseModel):
    """Publikation mit Ranking-Feldern (nur bei Zeitschriftenartikeln gesetzt)."""

    id: int
    title: str = ""
    publication_type: PublicationType = PublicationType.OTHER
    publication_year: int | None = None
    scimago_q_index: QuartileRanking | None = None
    wos_q_index: QuartileRanking | None = None
    authors: list[Author] = []

    def is_ranked(self, ranking_system: JournalRankingSystem | None = None) -> bool:
        """Gerankt im angegebenen System, oder in irgendeinem wenn None."""
        scimago = QuartileRanking.normalize(self.scimago_q_index) != QuartileRanking.NR
        wos = QuartileRanking.normalize(self.wos_q_index) != QuartileRanking.NR
        if ranking_system == JournalRankingSystem.SCIMAGO:
            return scimago
        if ranking_system == JournalRankingSystem.WOS:
            return wos
        return scimago or wos

    def has_phd_student_author(self) -> bool:
        return any(a.status == MemberStatus.PHD_STUDENT for a in self.authors)

    def has_postdoc_author(self) -> bool:
        return any(a.status == MemberStatus.POSTDOC for a in self.authors)


class Membership(BaseModel):
    """Zugehoerigkeit einer Person zu einer Organisation (offene Grenzen = unbegrenzt)."""

    person_id: int
    person_name: str = ""
    organization_id: int
    status: MemberStatus
    since: date | None = None
    to: date | None = None
    permanent_position: bool = False


class Project(BaseModel):
    """Forschungsprojekt einer Organisation mit Gesamtbudget (in Euro).

    Laufzeit in vollen Jahren, beide Grenzen inklusiv; fehlendes Endjahr =
    einjaehriges Projekt.
    """

    id: int
    acronym: str = ""
    name: str = ""
    organization_id: int
    category: ProjectCategory
    start_year: int | None = None
    end_year: int | None = None
    budget: float = 0.0


# --- Berechnungsergebnis ---

@dataclass(frozen=True, slots=True)
class IndicatorComputation:
    """Ergebnis einer Indikator-Berechnung.

    Attributes:
        series: Werte pro Jahr.
        details: Textuelle Erklaerung der Berechnung (Diagnose/Anzeige),
            None wenn nichts berechnet wurde.
    """

    series: YearValueSeries
    details: str | None
