"""Service layer for incident codes."""

from __future__ import annotations

import sqlite3
from typing import List, Optional

from stpaul_crime_api.app.core.db import Database
from stpaul_crime_api.app.schemas.code import CodeRead
from stpaul_crime_api.app.services.query_builder import CODE_FILTERS, build_query


class CodeService:
    """Read access to the ``Codes`` table."""

    BASE_QUERY = "SELECT code, incident_type FROM Codes"

    @classmethod
    async def list_codes(cls, db: Database, code: Optional[str] = None) -> List[CodeRead]:
        """Return codes ordered by code, optionally restricted to a comma list."""
        query, params = build_query(cls.BASE_QUERY, CODE_FILTERS, {"code": code}, order_by="code")
        rows = await db.select(query, params)
        return [cls._row_to_code_read(row) for row in rows]

    @staticmethod
    def _row_to_code_read(row: sqlite3.Row) -> CodeRead:
        return CodeRead(code=row["code"], type=row["incident_type"])
