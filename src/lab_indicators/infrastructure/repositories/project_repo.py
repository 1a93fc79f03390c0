"""Repository fuer Forschungsprojekte (labmanager.db)."""

from __future__ import annotations

import aiosqlite

from lab_indicators.config import Settings
from lab_indicators.domain.models import Project
from lab_indicators.infrastructure.repositories.organization_repo import organization_scope


class ProjectRepository:
    """Async SQLite-Zugriff auf die Projekte einer Organisation."""

    def __init__(self, db_path: str | None = None) -> None:
        self._db_path = db_path or Settings().labmanager_db_path

    async def get_projects_by_organization_id(
        self, organization_id: int, include_sub_organizations: bool = True
    ) -> list[Project]:
        """Alle Projekte (ungefiltert nach Laufzeit und Kategorie)."""
        prefix, condition, params = organization_scope(
            organization_id, include_sub_organizations
        )
        sql = prefix + f"""
            SELECT id, acronym, name, organization_id, category,
                   start_year, end_year, budget
            FROM projects
            WHERE organization_id {condition}
            ORDER BY id
        """
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(sql, params)
            rows = await cursor.fetchall()

        return [
            Project(
                id=row["id"],
                acronym=row["acronym"] or "",
                name=row["name"] or "",
                organization_id=row["organization_id"],
                category=row["category"],
                start_year=row["start_year"],
                end_year=row["end_year"],
                budget=row["budget"] or 0.0,
            )
            for row in rows
        ]
