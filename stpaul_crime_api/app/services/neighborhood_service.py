"""Service layer for neighborhoods."""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from stpaul_crime_api.app.core.db import Database
from stpaul_crime_api.app.schemas.neighborhood import NeighborhoodRead
from stpaul_crime_api.app.services.query_builder import NEIGHBORHOOD_FILTERS, build_query


class NeighborhoodService:
    """Read access to the ``Neighborhoods`` table."""

    BASE_QUERY = "SELECT neighborhood_number, neighborhood_name FROM Neighborhoods"

    @classmethod
    async def list_neighborhoods(
        cls, db: Database, ids: Optional[str] = None
    ) -> List[NeighborhoodRead]:
        """Return neighborhoods ordered by number.

        ``ids`` is the raw ``id`` query parameter, a comma list of
        neighborhood numbers.
        """
        query, params = build_query(
            cls.BASE_QUERY,
            NEIGHBORHOOD_FILTERS,
            {"id": ids},
            order_by="neighborhood_number",
        )
        rows = await db.select(query, params)
        return [cls._row_to_neighborhood_read(row) for row in rows]

    @staticmethod
    def _row_to_neighborhood_read(row: sqlite3.Row) -> NeighborhoodRead:
        return NeighborhoodRead(id=row["neighborhood_number"], name=row["neighborhood_name"])
