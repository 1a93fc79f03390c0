"""Create a small labmanager database with demo data.

Usage:
    python scripts/create_demo_db.py [target]

Writes data/labmanager.db (or the given path) with one laboratory, one
team, a handful of members, publications and projects between 2019 and 2023.
"""

import sqlite3
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from lab_indicators.infrastructure.repositories.schema import create_schema  # noqa: E402

TARGET = Path("data/labmanager.db")

ORGANIZATIONS = [
    (1, "LAB", "Demo Laboratory", None),
    (2, "AI-TEAM", "Artificial Intelligence Team", 1),
]

PERSONS = [
    (1, "Martin, Alice"),
    (2, "Dubois, Bruno"),
    (3, "Leroy, Chloe"),
    (4, "Moreau, David"),
    (5, "Petit, Emma"),
]

# (person, organization, status, since, to, permanent)
MEMBERSHIPS = [
    (1, 1, "FULL_PROFESSOR", "2010-09-01", None, 1),
    (2, 2, "RESEARCHER", "2018-01-01", None, 1),
    (3, 2, "PHD_STUDENT", "2019-10-01", "2022-09-30", 0),
    (4, 2, "POSTDOC", "2021-03-01", "2023-02-28", 0),
    (5, 1, "ENGINEER", "2020-01-01", None, 0),
]

JOURNALS = [(1, "Journal of Applied AI"), (2, "Regional Computing Letters")]

# (journal, year, scimago, wos)
JOURNAL_RANKINGS = [
    (1, 2019, "Q1", "Q2"), (1, 2020, "Q1", "Q1"), (1, 2021, "Q2", "Q2"),
    (1, 2022, "Q1", "Q1"), (1, 2023, "Q1", "Q2"),
    (2, 2021, "Q4", "NR"), (2, 2022, "NR", "NR"),
]

# (id, title, type, year, journal)
PUBLICATIONS = [
    (1, "Agent-based traffic simulation", "INTERNATIONAL_CONFERENCE_PAPER", 2019, None),
    (2, "Holonic multiagent systems", "INTERNATIONAL_JOURNAL_PAPER", 2019, 1),
    (3, "Deep learning for road users", "INTERNATIONAL_CONFERENCE_PAPER", 2020, None),
    (4, "Simulation de foules", "NATIONAL_CONFERENCE_PAPER", 2020, None),
    (5, "Energy-aware scheduling", "INTERNATIONAL_JOURNAL_PAPER", 2021, 2),
    (6, "Explainable planning", "INTERNATIONAL_CONFERENCE_PAPER", 2021, None),
    (7, "Federated perception", "INTERNATIONAL_JOURNAL_PAPER", 2022, 1),
    (8, "Smart grids and agents", "NATIONAL_JOURNAL_PAPER", 2022, 2),
    (9, "Autonomous shuttles", "INTERNATIONAL_CONFERENCE_PAPER", 2022, None),
    (10, "Digital twins for mobility", "INTERNATIONAL_JOURNAL_PAPER", 2023, 1),
    (11, "Undated preprint", "INTERNATIONAL_CONFERENCE_PAPER", None, None),
]

# (id, acronym, name, organization, category, start, end, budget in euro)
PROJECTS = [
    (1, "MOBI", "Smart mobility platform", 2, "COMPETITIVE_CALL_PROJECT", 2020, 2023, 480000.0),
    (2, "SELF", "Internal simulation toolkit", 1, "AUTO_FUNDING", 2021, None, 15000.0),
    (3, "INDUS", "Fleet optimisation for a carrier", 2, "NOT_ACADEMIC_PROJECT", 2022, 2023, 120000.0),
    (4, "OSS", "Open agent framework", 1, "OPEN_SOURCE", 2019, 2023, 0.0),
]

# (publication, person, rank, status at publication time)
AUTHORSHIPS = [
    (1, 1, 0, "FULL_PROFESSOR"),
    (2, 1, 0, "FULL_PROFESSOR"), (2, 2, 1, "RESEARCHER"),
    (3, 3, 0, "PHD_STUDENT"), (3, 2, 1, "RESEARCHER"),
    (4, 1, 0, "FULL_PROFESSOR"),
    (5, 2, 0, "RESEARCHER"),
    (6, 4, 0, "POSTDOC"), (6, 3, 1, "PHD_STUDENT"),
    (7, 3, 0, "PHD_STUDENT"), (7, 1, 1, "FULL_PROFESSOR"),
    (8, 2, 0, "RESEARCHER"),
    (9, 4, 0, "POSTDOC"),
    (10, 2, 0, "RESEARCHER"), (10, 5, 1, "ENGINEER"),
    (11, 1, 0, "FULL_PROFESSOR"),
]


def main():
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else TARGET
    target.parent.mkdir(parents=True, exist_ok=True)
    if target.exists():
        target.unlink()
        print(f"Removed existing {target}")

    conn = sqlite3.connect(str(target))
    create_schema(conn)
    conn.executemany("INSERT INTO organizations VALUES (?, ?, ?, ?)", ORGANIZATIONS)
    conn.executemany("INSERT INTO persons VALUES (?, ?)", PERSONS)
    conn.executemany(
        "INSERT INTO memberships (person_id, organization_id, status, since, to_date, "
        "permanent_position) VALUES (?, ?, ?, ?, ?, ?)",
        MEMBERSHIPS,
    )
    conn.executemany("INSERT INTO journals VALUES (?, ?)", JOURNALS)
    conn.executemany("INSERT INTO journal_rankings VALUES (?, ?, ?, ?)", JOURNAL_RANKINGS)
    conn.executemany("INSERT INTO publications VALUES (?, ?, ?, ?, ?)", PUBLICATIONS)
    conn.executemany("INSERT INTO authorships VALUES (?, ?, ?, ?)", AUTHORSHIPS)
    conn.executemany("INSERT INTO projects VALUES (?, ?, ?, ?, ?, ?, ?, ?)", PROJECTS)
    conn.commit()
    conn.close()

    print(f"Created {target}: {len(PUBLICATIONS)} publications, {len(MEMBERSHIPS)} memberships")


if __name__ == "__main__":
    main()
