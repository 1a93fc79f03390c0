"""Gemeinsame Fixtures: temporaere Labmanager-DB mit Testdaten."""

import sqlite3
from pathlib import Path

import pytest

from lab_indicators.infrastructure.repositories.schema import create_schema


@pytest.fixture()
def labmanager_db(tmp_path: Path) -> str:
    """Labor (1) mit Team (2) plus eine fremde Organisation (3)."""
    db_path = str(tmp_path / "labmanager.db")
    conn = sqlite3.connect(db_path)
    create_schema(conn)

    conn.executemany("INSERT INTO organizations VALUES (?, ?, ?, ?)", [
        (1, "LAB", "Test Laboratory", None),
        (2, "TEAM", "Test Team", 1),
        (3, "OTHER", "Other Laboratory", None),
    ])
    conn.executemany("INSERT INTO persons VALUES (?, ?)", [
        (1, "Prof, Paula"),
        (2, "Student, Sam"),
        (3, "Postdoc, Pat"),
        (4, "Outsider, Olga"),
    ])
    conn.executemany(
        "INSERT INTO memberships (person_id, organization_id, status, since, to_date, "
        "permanent_position) VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, 1, "FULL_PROFESSOR", "2010-01-01", None, 1),
            (2, 2, "PHD_STUDENT", "2020-01-01", "2022-12-31", 0),
            (3, 2, "POSTDOC", "2021-01-01", "2021-12-31", 0),
            (4, 3, "RESEARCHER", "2015-01-01", None, 1),
        ],
    )
    conn.execute("INSERT INTO journals VALUES (1, 'Journal of Tests')")
    conn.executemany("INSERT INTO journal_rankings VALUES (?, ?, ?, ?)", [
        (1, 2021, "Q1", "NR"),
        (1, 2022, "NR", "NR"),
    ])
    conn.executemany("INSERT INTO publications VALUES (?, ?, ?, ?, ?)", [
        (1, "Conference paper A", "INTERNATIONAL_CONFERENCE_PAPER", 2021, None),
        (2, "Conference paper B", "NATIONAL_CONFERENCE_PAPER", 2022, None),
        (3, "Ranked article", "INTERNATIONAL_JOURNAL_PAPER", 2021, 1),
        (4, "Unranked article", "NATIONAL_JOURNAL_PAPER", 2022, 1),
        (5, "Foreign paper", "INTERNATIONAL_CONFERENCE_PAPER", 2021, None),
        (6, "A book", "SCIENTIFIC_BOOK", 2021, None),
    ])
    conn.executemany("INSERT INTO authorships VALUES (?, ?, ?, ?)", [
        (1, 2, 1, "PHD_STUDENT"),
        (1, 1, 0, "FULL_PROFESSOR"),
        (2, 3, 0, "POSTDOC"),
        (3, 1, 0, "FULL_PROFESSOR"),
        (4, 2, 0, "PHD_STUDENT"),
        (5, 4, 0, "RESEARCHER"),
        (6, 1, 0, "FULL_PROFESSOR"),
    ])
    conn.executemany("INSERT INTO projects VALUES (?, ?, ?, ?, ?, ?, ?, ?)", [
        (1, "CALL", "Competitive call project", 2, "COMPETITIVE_CALL_PROJECT", 2021, 2022, 200000.0),
        (2, "SELF", "Self-funded project", 1, "AUTO_FUNDING", 2022, None, 10000.0),
        (3, "INDUS", "Industrial contract", 1, "NOT_ACADEMIC_PROJECT", 2021, None, 50000.0),
        (4, "OSS", "Open source project", 1, "OPEN_SOURCE", 2021, 2022, 0.0),
        (5, "FOREIGN", "Other lab project", 3, "COMPETITIVE_CALL_PROJECT", 2021, 2021, 99000.0),
    ])
    conn.commit()
    conn.close()
    return db_path
