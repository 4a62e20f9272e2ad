"""
SQLite store handle.

The crime database is a single SQLite file opened once at startup in
read‑write mode.  It is never created here: if the file is missing or
cannot be opened, the failure is logged and the process keeps running,
but every subsequent query fails and is reported by the calling
handler as an ordinary store error.

Two primitives are exposed on :class:`Database`:

* ``select`` runs a parameterized query and returns all rows;
* ``run`` runs a parameterized INSERT/DELETE and commits it.

Both use ``?`` placeholders.  Nothing is cached.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import List, Optional, Sequence

from fastapi import Request

logger = logging.getLogger(__name__)

# Failures raised while a statement is bound or executed.  sqlite3 raises
# OverflowError, not sqlite3.Error, for integers outside 64 bits.
STORE_ERRORS = (sqlite3.Error, OverflowError)


def get_database_path(database_url: str) -> str:
    """Compute the absolute path to the SQLite database file.

    An absolute ``database_url`` is used as is; a relative one is
    resolved against the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Process‑wide handle on the crime database."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> bool:
        """Open the database file in read‑write mode.

        Returns ``True`` on success.  On failure the error is logged and
        ``False`` is returned; the handle stays closed.
        """
        name = os.path.basename(self.path)
        uri = Path(self.path).as_uri() + "?mode=rw"
        try:
            conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
        except sqlite3.Error as exc:
            logger.error("Error opening %s: %s", name, exc)
            return False
        conn.row_factory = sqlite3.Row
        self._conn = conn
        logger.info("Now connected to %s", name)
        return True

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.OperationalError(
                f"database {os.path.basename(self.path)} is not open"
            )
        return self._conn

    async def select(self, query: str, params: Sequence = ()) -> List[sqlite3.Row]:
        """Run a read query and return every row."""
        cursor = self._connection().execute(query, tuple(params))
        try:
            return cursor.fetchall()
        finally:
            cursor.close()

    async def run(self, query: str, params: Sequence = ()) -> None:
        """Run a write statement and commit it.

        The statement is rolled back if execution fails, so a failed
        write never leaves an open transaction on the shared handle.
        """
        conn = self._connection()
        try:
            conn.execute(query, tuple(params))
            conn.commit()
        except STORE_ERRORS:
            conn.rollback()
            raise


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the shared store handle."""
    return request.app.state.db
