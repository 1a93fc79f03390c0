"""SQLite-Schema der Labmanager-Datenbank (Organisationen, Personen, Publikationen, Projekte)."""

from __future__ import annotations

import sqlite3

SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS organizations (
        id INTEGER PRIMARY KEY,
        acronym TEXT,
        name TEXT,
        super_organization_id INTEGER REFERENCES organizations(id)
    );
    CREATE TABLE IF NOT EXISTS persons (
        id INTEGER PRIMARY KEY,
        full_name TEXT
    );
    CREATE TABLE IF NOT EXISTS memberships (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        person_id INTEGER NOT NULL REFERENCES persons(id),
        organization_id INTEGER NOT NULL REFERENCES organizations(id),
        status TEXT NOT NULL,
        since TEXT,
        to_date TEXT,
        permanent_position INTEGER NOT NULL DEFAULT 0
    );
    CREATE TABLE IF NOT EXISTS journals (
        id INTEGER PRIMARY KEY,
        name TEXT
    );
    CREATE TABLE IF NOT EXISTS journal_rankings (
        journal_id INTEGER NOT NULL REFERENCES journals(id),
        year INTEGER NOT NULL,
        scimago_q_index TEXT,
        wos_q_index TEXT,
        PRIMARY KEY (journal_id, year)
    );
    CREATE TABLE IF NOT EXISTS publications (
        id INTEGER PRIMARY KEY,
        title TEXT,
        publication_type TEXT NOT NULL,
        publication_year INTEGER,
        journal_id INTEGER REFERENCES journals(id)
    );
    CREATE TABLE IF NOT EXISTS authorships (
        publication_id INTEGER NOT NULL REFERENCES publications(id),
        person_id INTEGER NOT NULL REFERENCES persons(id),
        author_rank INTEGER NOT NULL DEFAULT 0,
        author_status TEXT,
        PRIMARY KEY (publication_id, person_id)
    );
    CREATE TABLE IF NOT EXISTS projects (
        id INTEGER PRIMARY KEY,
        acronym TEXT,
        name TEXT,
        organization_id INTEGER NOT NULL REFERENCES organizations(id),
        category TEXT NOT NULL,
        start_year INTEGER,
        end_year INTEGER,
        budget REAL NOT NULL DEFAULT 0
    );
    CREATE INDEX IF NOT EXISTS idx_memberships_org ON memberships(organization_id);
    CREATE INDEX IF NOT EXISTS idx_memberships_person ON memberships(person_id);
    CREATE INDEX IF NOT EXISTS idx_authorships_person ON authorships(person_id);
    CREATE INDEX IF NOT EXISTS idx_projects_org ON projects(organization_id);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Legt alle Tabellen an (idempotent)."""
    conn.executescript(SCHEMA_SQL)
