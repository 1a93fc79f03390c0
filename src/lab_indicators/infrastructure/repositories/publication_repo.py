"""Repository fuer Publikationen einer Organisation (labmanager.db).

Eine Publikation gehoert zu einer Organisation, wenn mindestens ein Autor
dort (oder in einer Unterorganisation) Mitglied ist. Die Abfragen sind
bewusst nicht nach Jahr gefiltert; das Jahresfenster wird in den
Indikatoren angewendet.
"""

from __future__ import annotations

from collections.abc import Iterable

import aiosqlite

from lab_indicators.config import Settings
from lab_indicators.domain.models import (
    CONFERENCE_PAPER_TYPES,
    JOURNAL_PAPER_TYPES,
    Author,
    Publication,
    PublicationType,
)
from lab_indicators.infrastructure.repositories.organization_repo import organization_scope


class PublicationRepository:
    """Async SQLite-Zugriff auf Publikationen, Autoren und Zeitschriften-Rankings."""

    def __init__(self, db_path: str | None = None) -> None:
        self._db_path = db_path or Settings().labmanager_db_path

    async def get_publications_by_organization_id(
        self, organization_id: int, include_sub_organizations: bool = True
    ) -> list[Publication]:
        """Alle Publikationen der Organisation (inkl. Ranking-Felder)."""
        return await self._query(organization_id, include_sub_organizations, None, True)

    async def get_conference_papers_by_organization_id(
        self, organization_id: int, include_sub_organizations: bool = True
    ) -> list[Publication]:
        """Konferenzbeitraege (international + national) der Organisation."""
        return await self._query(
            organization_id, include_sub_organizations, CONFERENCE_PAPER_TYPES, False
        )

    async def get_journal_papers_by_organization_id(
        self,
        organization_id: int,
        include_sub_organizations: bool = True,
        include_ranking_fields: bool = True,
    ) -> list[Publication]:
        """Zeitschriftenartikel der Organisation, optional mit Quartilen des Publikationsjahres."""
        return await self._query(
            organization_id, include_sub_organizations, JOURNAL_PAPER_TYPES,
            include_ranking_fields,
        )

    async def _query(
        self,
        organization_id: int,
        include_sub_organizations: bool,
        types: Iterable[PublicationType] | None,
        include_ranking_fields: bool,
    ) -> list[Publication]:
        prefix, condition, params = organization_scope(
            organization_id, include_sub_organizations
        )
        ranking_columns = (
            "r.scimago_q_index, r.wos_q_index"
            if include_ranking_fields
            else "NULL AS scimago_q_index, NULL AS wos_q_index"
        )
        sql = prefix + f"""
            SELECT DISTINCT p.id, p.title, p.publication_type, p.publication_year,
                   {ranking_columns}
            FROM publications p
            JOIN authorships a ON a.publication_id = p.id
            JOIN memberships m ON m.person_id = a.person_id
            LEFT JOIN journal_rankings r
                   ON r.journal_id = p.journal_id AND r.year = p.publication_year
            WHERE m.organization_id {condition}
        """
        query_params: list[str | int] = list(params)
        if types is not None:
            type_values = sorted(t.value for t in types)
            sql += f" AND p.publication_type IN ({', '.join('?' for _ in type_values)})"
            query_params.extend(type_values)
        sql += " ORDER BY p.id"

        async with aiosqlite.connect(self._db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(sql, query_params)
            rows = list(await cursor.fetchall())
            authors = await self._authors_by_publication(db, [row["id"] for row in rows])

        return [
            Publication(
                id=row["id"],
                title=row["title"] or "",
                publication_type=row["publication_type"],
                publication_year=row["publication_year"],
                scimago_q_index=row["scimago_q_index"],
                wos_q_index=row["wos_q_index"],
                authors=authors.get(row["id"], []),
            )
            for row in rows
        ]

    @staticmethod
    async def _authors_by_publication(
        db: aiosqlite.Connection, publication_ids: list[int]
    ) -> dict[int, list[Author]]:
        """Autorenlisten in Rangfolge, Status zum Publikationszeitpunkt."""
        if not publication_ids:
            return {}
        sql = f"""
            SELECT a.publication_id, a.person_id, a.author_status, pe.full_name
            FROM authorships a
            LEFT JOIN persons pe ON pe.id = a.person_id
            WHERE a.publication_id IN ({', '.join('?' for _ in publication_ids)})
            ORDER BY a.publication_id, a.author_rank
        """
        cursor = await db.execute(sql, publication_ids)
        result: dict[int, list[Author]] = {}
        for row in await cursor.fetchall():
            result.setdefault(row["publication_id"], []).append(Author(
                person_id=row["person_id"],
                name=row["full_name"] or "",
                status=row["author_status"],
            ))
        return result
