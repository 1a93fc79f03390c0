"""Repository fuer Forschungsorganisationen (labmanager.db)."""

from __future__ import annotations

import aiosqlite

from lab_indicators.config import Settings
from lab_indicators.domain.models import ResearchOrganization

# Organisation + alle Unterorganisationen (rekursiv). Parameter: Wurzel-ID.
ORGANIZATION_TREE_CTE = """
    WITH RECURSIVE org_tree(id) AS (
        SELECT id FROM organizations WHERE id = ?
        UNION
        SELECT o.id FROM organizations o
        JOIN org_tree t ON o.super_organization_id = t.id
    )
"""


def organization_scope(
    organization_id: int, include_sub_organizations: bool
) -> tuple[str, str, list[int]]:
    """SQL-Bausteine fuer die Einschraenkung auf eine Organisation.

    Returns:
        (prefix, condition, params): `prefix` steht vor dem SELECT,
        `condition` folgt auf die Organisations-Spalte, z.B.
        `m.organization_id IN (SELECT id FROM org_tree)`.
    """
    if include_sub_organizations:
        return ORGANIZATION_TREE_CTE, "IN (SELECT id FROM org_tree)", [organization_id]
    return "", "= ?", [organization_id]


class OrganizationRepository:
    """Async SQLite-Zugriff auf die Organisationen."""

    def __init__(self, db_path: str | None = None) -> None:
        self._db_path = db_path or Settings().labmanager_db_path

    async def get_organization(self, organization_id: int) -> ResearchOrganization | None:
        sql = """
            SELECT id, acronym, name, super_organization_id
            FROM organizations
            WHERE id = ?
        """
        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(sql, (organization_id,))
            row = await cursor.fetchone()
        if row is None:
            return None
        return ResearchOrganization(
            id=row["id"],
            acronym=row["acronym"] or "",
            name=row["name"] or "",
            super_organization_id=row["super_organization_id"],
        )

    async def get_sub_organization_ids(self, organization_id: int) -> list[int]:
        """Alle direkten und indirekten Unterorganisationen (ohne die Wurzel)."""
        sql = ORGANIZATION_TREE_CTE + "SELECT id FROM org_tree WHERE id != ? ORDER BY id"
        async with aiosqlite.connect(self._db_path) as db:
            cursor = await db.execute(sql, (organization_id, organization_id))
            return [row[0] for row in await cursor.fetchall()]
