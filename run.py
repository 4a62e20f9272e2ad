"""Entry point for the St. Paul Crime API.

Serves the FastAPI application with Uvicorn.  Host, port and the
database location are read from the environment (see
``stpaul_crime_api.app.core.config``); by default the API listens on
``0.0.0.0:8000`` and opens ``db/stpaul_crime.sqlite3``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from stpaul_crime_api.app.core.config import settings
from stpaul_crime_api.app.main import app


async def run_api() -> None:
    """Start the API server and serve until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is already configured by create_app; keep uvicorn on it.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Now listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
