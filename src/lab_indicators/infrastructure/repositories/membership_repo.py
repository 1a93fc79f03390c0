"""Repository fuer Mitgliedschaften (labmanager.db)."""

from __future__ import annotations

import aiosqlite

from lab_indicators.config import Settings
from lab_indicators.domain.models import Membership
from lab_indicators.infrastructure.repositories.organization_repo import organization_scope


class MembershipRepository:
    """Async SQLite-Zugriff auf Mitgliedschaften von Personen in Organisationen."""

    def __init__(self, db_path: str | None = None) -> None:
        self._db_path = db_path or Settings().labmanager_db_path

    async def get_memberships_by_organization_id(
        self, organization_id: int, include_sub_organizations: bool = True
    ) -> list[Membership]:
        """Alle Mitgliedschaften (aktiv und beendet), ungefiltert nach Zeitraum."""
        prefix, condition, params = organization_scope(
            organization_id, include_sub_organizations
        )
        sql = prefix + f"""
            SELECT m.person_id, pe.full_name, m.organization_id, m.status,
                   m.since, m.to_date, m.permanent_position
            FROM memberships m
            LEFT JOIN persons pe ON pe.id = m.person_id
            WHERE m.organization_id {condition}
            ORDER BY m.id
        """
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(sql, params)
            rows = await cursor.fetchall()

        return [
            Membership(
                person_id=row["person_id"],
                person_name=row["full_name"] or "",
                organization_id=row["organization_id"],
                status=row["status"],
                since=row["since"],
                to=row["to_date"],
                permanent_position=bool(row["permanent_position"]),
            )
            for row in rows
        ]
