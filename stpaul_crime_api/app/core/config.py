"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts against ``db/stpaul_crime.sqlite3`` on port 8000 when
nothing is set.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "St. Paul Crime API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.  The file must
    # already exist; it is opened read‑write and never created.
    database_url: str = os.getenv("DATABASE_URL", "db/stpaul_crime.sqlite3")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Row cap for GET /incidents when the caller gives no usable ``limit``.
    incident_limit: int = int(os.getenv("INCIDENT_LIMIT", "1000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
