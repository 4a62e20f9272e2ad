"""
Main entrypoint for the St. Paul Crime API.

This module assembles the FastAPI application, sets up logging and
includes the resource routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn stpaul_crime_api.app.main:app --port 8000

The database handle is created here and attached to ``app.state`` so
that handlers receive it through the ``get_db`` dependency.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import Database, get_database_path
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; the module‑level ``settings`` when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.db = Database(get_database_path(settings.database_url))

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # A failed open is logged but not fatal; requests then fail
        # individually with their resource's error message.
        app.state.db.open()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.db.close()

    return app


app = create_app()
