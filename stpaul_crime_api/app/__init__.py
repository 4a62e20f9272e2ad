"""
Application package initializer.

The service is split into ``core`` (configuration, logging and the
store handle), ``services`` (query construction and row shaping),
``schemas`` (pydantic payloads) and ``api`` (FastAPI routers).
"""

from .main import app  # noqa: F401
