"""Lokalisierte Namen und Beschriftungen fuer Indikatoren.

Der MessageResolver wird explizit an die Indikatoren uebergeben;
es gibt keinen globalen Zustand.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

DEFAULT_LOCALE = "en"


class MessageResolver(Protocol):
    """Aufloesung von Nachrichtenschluesseln in lokalisierte Texte."""

    def get_message(self, locale: str, key: str, *args: object) -> str: ...


_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "rankingSystem.SCIMAGO": "Scimago",
        "rankingSystem.WOS": "WoS",
        "conferencePaperCountIndicator.name": "Number of conference papers",
        "conferencePaperCountIndicator.label": "Conference papers",
        "phdConferencePaperCountIndicator.name": "Number of conference papers with a PhD student as author",
        "phdConferencePaperCountIndicator.label": "Conference papers by PhD students",
        "postdocConferencePaperCountIndicator.name": "Number of conference papers with a postdoc as author",
        "postdocConferencePaperCountIndicator.label": "Conference papers by postdocs",
        "rankedJournalPaperCountIndicator.name": "Number of journal papers ranked on {0}",
        "rankedJournalPaperCountIndicator.label": "Journal papers ranked on {0}",
        "phdRankedJournalPaperCountIndicator.name": "Number of journal papers ranked on {0} with a PhD student as author",
        "phdRankedJournalPaperCountIndicator.label": "Journal papers ranked on {0} by PhD students",
        "postdocRankedJournalPaperCountIndicator.name": "Number of journal papers ranked on {0} with a postdoc as author",
        "postdocRankedJournalPaperCountIndicator.label": "Journal papers ranked on {0} by postdocs",
        "unrankedJournalPaperCountIndicator.name": "Number of unranked journal papers",
        "unrankedJournalPaperCountIndicator.label": "Unranked journal papers",
        "permanentResearcherFteIndicator.name": "Full-time equivalent of permanent researchers",
        "permanentResearcherFteIndicator.label": "Permanent researcher FTE",
        "postdocFteIndicator.name": "Full-time equivalent of postdocs",
        "postdocFteIndicator.label": "Postdoc FTE",
        "phdStudentFteIndicator.name": "Full-time equivalent of PhD students",
        "phdStudentFteIndicator.label": "PhD student FTE",
        "permanentResearcherCountIndicator.name": "Number of permanent researchers",
        "permanentResearcherCountIndicator.label": "Permanent researchers",
        "researcherCountIndicator.name": "Number of researchers",
        "researcherCountIndicator.label": "Researchers",
        "postdocCountIndicator.name": "Number of postdocs",
        "postdocCountIndicator.label": "Postdocs",
        "phdStudentCountIndicator.name": "Number of PhD students",
        "phdStudentCountIndicator.label": "PhD students",
        "engineerCountIndicator.name": "Number of engineers",
        "engineerCountIndicator.label": "Engineers",
        "rankedJournalPaperFteRatioIndicator.name": "Journal papers ranked on {0} per permanent researcher FTE",
        "rankedJournalPaperFteRatioIndicator.label": "Papers ranked on {0} / FTE",
        "conferencePaperFteRatioIndicator.name": "Conference papers per permanent researcher FTE",
        "conferencePaperFteRatioIndicator.label": "Conference papers / FTE",
        "conferencePaperPostdocRatioIndicator.name": "Conference papers per postdoc",
        "conferencePaperPostdocRatioIndicator.label": "Conference papers / postdoc",
        "phdConferencePaperRatioIndicator.name": "Conference papers per PhD student",
        "phdConferencePaperRatioIndicator.label": "Conference papers / PhD student",
        "academicProjectCountIndicator.name": "Number of academic projects",
        "academicProjectCountIndicator.label": "Academic projects",
        "academicProjectBudgetIndicator.name": "Budget of academic projects",
        "academicProjectBudgetIndicator.label": "Academic project budget ({0}€)",
        "industrialProjectBudgetIndicator.name": "Budget of industrial projects",
        "industrialProjectBudgetIndicator.label": "Industrial project budget ({0}€)",
    },
    "fr": {
        "rankingSystem.SCIMAGO": "Scimago",
        "rankingSystem.WOS": "WoS",
        "conferencePaperCountIndicator.name": "Nombre d'articles de conférence",
        "conferencePaperCountIndicator.label": "Articles de conférence",
        "phdConferencePaperCountIndicator.name": "Nombre d'articles de conférence avec un doctorant comme auteur",
        "phdConferencePaperCountIndicator.label": "Articles de conférence des doctorants",
        "postdocConferencePaperCountIndicator.name": "Nombre d'articles de conférence avec un post-doctorant comme auteur",
        "postdocConferencePaperCountIndicator.label": "Articles de conférence des post-doctorants",
        "rankedJournalPaperCountIndicator.name": "Nombre d'articles de revue classés sur {0}",
        "rankedJournalPaperCountIndicator.label": "Articles de revue classés sur {0}",
        "phdRankedJournalPaperCountIndicator.name": "Nombre d'articles de revue classés sur {0} avec un doctorant comme auteur",
        "phdRankedJournalPaperCountIndicator.label": "Articles classés sur {0} des doctorants",
        "postdocRankedJournalPaperCountIndicator.name": "Nombre d'articles de revue classés sur {0} avec un post-doctorant comme auteur",
        "postdocRankedJournalPaperCountIndicator.label": "Articles classés sur {0} des post-doctorants",
        "unrankedJournalPaperCountIndicator.name": "Nombre d'articles de revue non classés",
        "unrankedJournalPaperCountIndicator.label": "Articles de revue non classés",
        "permanentResearcherFteIndicator.name": "Équivalent temps plein des chercheurs permanents",
        "permanentResearcherFteIndicator.label": "ETP chercheurs permanents",
        "postdocFteIndicator.name": "Équivalent temps plein des post-doctorants",
        "postdocFteIndicator.label": "ETP post-doctorants",
        "phdStudentFteIndicator.name": "Équivalent temps plein des doctorants",
        "phdStudentFteIndicator.label": "ETP doctorants",
        "permanentResearcherCountIndicator.name": "Nombre de chercheurs permanents",
        "permanentResearcherCountIndicator.label": "Chercheurs permanents",
        "researcherCountIndicator.name": "Nombre de chercheurs",
        "researcherCountIndicator.label": "Chercheurs",
        "postdocCountIndicator.name": "Nombre de post-doctorants",
        "postdocCountIndicator.label": "Post-doctorants",
        "phdStudentCountIndicator.name": "Nombre de doctorants",
        "phdStudentCountIndicator.label": "Doctorants",
        "engineerCountIndicator.name": "Nombre d'ingénieurs",
        "engineerCountIndicator.label": "Ingénieurs",
        "rankedJournalPaperFteRatioIndicator.name": "Articles classés sur {0} par ETP de chercheur permanent",
        "rankedJournalPaperFteRatioIndicator.label": "Articles classés sur {0} / ETP",
        "conferencePaperFteRatioIndicator.name": "Articles de conférence par ETP de chercheur permanent",
        "conferencePaperFteRatioIndicator.label": "Articles de conférence / ETP",
        "conferencePaperPostdocRatioIndicator.name": "Articles de conférence par post-doctorant",
        "conferencePaperPostdocRatioIndicator.label": "Articles de conférence / post-doctorant",
        "phdConferencePaperRatioIndicator.name": "Articles de conférence par doctorant",
        "phdConferencePaperRatioIndicator.label": "Articles de conférence / doctorant",
        "academicProjectCountIndicator.name": "Nombre de projets académiques",
        "academicProjectCountIndicator.label": "Projets académiques",
        "academicProjectBudgetIndicator.name": "Budget des projets académiques",
        "academicProjectBudgetIndicator.label": "Budget des projets académiques ({0}€)",
        "industrialProjectBudgetIndicator.name": "Budget des projets industriels",
        "industrialProjectBudgetIndicator.label": "Budget des projets industriels ({0}€)",
    },
}


class BundledMessageResolver:
    """MessageResolver mit mitgelieferten Katalogen (en, fr).

    Fallback: unbekannte Locale -> Standard-Locale, unbekannter Schluessel ->
    der Schluessel selbst.
    """

    def __init__(
        self,
        messages: dict[str, dict[str, str]] | None = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._messages = messages if messages is not None else _MESSAGES
        self._default_locale = default_locale

    @property
    def locales(self) -> list[str]:
        return sorted(self._messages)

    def get_message(self, locale: str, key: str, *args: object) -> str:
        language = (locale or self._default_locale).replace("-", "_").split("_")[0].lower()
        catalog = self._messages.get(language) or self._messages.get(self._default_locale, {})
        template = catalog.get(key)
        if template is None:
            template = self._messages.get(self._default_locale, {}).get(key, key)
        return template.format(*args) if args else template


def label_with_years(text: str, start_year: int | None, end_year: int | None) -> str:
    """Beschriftung mit Jahresangabe am Ende, z.B. "Papers (2020-2023)"."""
    if start_year is not None and end_year is not None:
        if start_year != end_year:
            return f"{text} ({start_year}-{end_year})"
        return f"{text} ({start_year})"
    if start_year is not None:
        return f"{text} ({start_year})"
    if end_year is not None:
        return f"{text} ({end_year})"
    return text


def reference_period(years: int, today: date | None = None) -> tuple[int, int]:
    """Referenzzeitraum aus `years` vollen Kalenderjahren, endend mit dem Vorjahr.

    Beispiel: years=3 im Jahr 2024 -> (2021, 2023).
    """
    if years < 1:
        raise ValueError(f"years must be >= 1, got {years}")
    end_year = (today or date.today()).year - 1
    return end_year - years + 1, end_year
