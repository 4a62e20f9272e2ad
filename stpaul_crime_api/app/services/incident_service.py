"""
Service layer for crime incidents.

Besides the filtered incident feed this module implements the two
mutations.  Both follow a check‑then‑act sequence: a read on
``case_number`` decides whether the write may proceed, then the write
is issued as a separate statement.  Nothing makes the pair atomic, so
two concurrent creates with the same case number can both pass the
check; the primary key on ``Incidents.case_number`` rejects the second
insert, and that rejection is reported with the same message as a
failed check.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Union

from stpaul_crime_api.app.core.db import Database
from stpaul_crime_api.app.schemas.incident import IncidentCreate, IncidentRead
from stpaul_crime_api.app.services.query_builder import (
    INCIDENT_FILTERS,
    build_query,
    parse_limit,
)

logger = logging.getLogger(__name__)

CASE_EXISTS = "Case number already exists"
CASE_MISSING = "Case number does not exist"


class IncidentService:
    """Read and write access to the ``Incidents`` table."""

    BASE_QUERY = """
        SELECT case_number,
               DATE(date_time) AS date,
               TIME(date_time) AS time,
               code,
               incident,
               police_grid,
               neighborhood_number,
               block
        FROM Incidents
    """

    @classmethod
    async def list_incidents(
        cls,
        db: Database,
        default_limit: int,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        code: Optional[str] = None,
        grid: Optional[str] = None,
        neighborhood: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> List[IncidentRead]:
        """Return incidents, newest first, capped at ``limit`` rows.

        - ``start_date`` and ``end_date`` bound the date part of the
          timestamp (inclusive).
        - ``code``, ``grid`` and ``neighborhood`` are comma lists.
        - ``limit`` falls back to ``default_limit`` when missing or not
          a non‑negative integer.
        """
        values = {
            "start_date": start_date,
            "end_date": end_date,
            "code": code,
            "grid": grid,
            "neighborhood": neighborhood,
        }
        query, params = build_query(
            cls.BASE_QUERY,
            INCIDENT_FILTERS,
            values,
            order_by="date_time DESC",
            limit=parse_limit(limit, default_limit),
        )
        rows = await db.select(query, params)
        return [cls._row_to_incident_read(row) for row in rows]

    @classmethod
    async def case_exists(cls, db: Database, case_number: Union[str, int]) -> bool:
        rows = await db.select(
            "SELECT case_number FROM Incidents WHERE case_number = ?",
            (case_number,),
        )
        return len(rows) > 0

    @classmethod
    async def create_incident(cls, db: Database, data: IncidentCreate) -> None:
        """Insert a new incident.

        Raises ``ValueError`` if the case number is already present.
        """
        if await cls.case_exists(db, data.case_number):
            raise ValueError(CASE_EXISTS)
        try:
            await db.run(
                """
                INSERT INTO Incidents (case_number, date_time, code, incident, police_grid, neighborhood_number, block)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data.case_number,
                    data.date_time(),
                    data.code,
                    data.incident,
                    data.police_grid,
                    data.neighborhood_number,
                    data.block,
                ),
            )
        except sqlite3.IntegrityError as exc:
            # Lost the race against a concurrent insert of the same case.
            if "UNIQUE" in str(exc) or "PRIMARY KEY" in str(exc):
                raise ValueError(CASE_EXISTS) from exc
            raise
        logger.info("Inserted incident %s", data.case_number)

    @classmethod
    async def delete_incident(cls, db: Database, case_number: Union[str, int]) -> None:
        """Delete an incident by case number.

        Raises ``ValueError`` if no incident has that case number.
        """
        if not await cls.case_exists(db, case_number):
            raise ValueError(CASE_MISSING)
        await db.run("DELETE FROM Incidents WHERE case_number = ?", (case_number,))
        logger.info("Deleted incident %s", case_number)

    @staticmethod
    def _row_to_incident_read(row: sqlite3.Row) -> IncidentRead:
        return IncidentRead(
            case_number=row["case_number"],
            date=row["date"],
            time=row["time"],
            code=row["code"],
            incident=row["incident"],
            police_grid=row["police_grid"],
            neighborhood_number=row["neighborhood_number"],
            block=row["block"],
        )
