"""
Logging configuration for the API process.

Application modules and the uvicorn server log through the root
logger, so request handling and server lifecycle messages share one
format and one level.  ``run.py`` starts uvicorn with
``log_config=None`` so that uvicorn does not install its own handlers
over the ones set up here.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn; they are re-routed to the root handlers.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, ``INFO`` if unknown."""
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and route server loggers through it.

    The level is applied on every call.  Handlers are only attached
    when the root logger has none yet (a test runner, or an earlier
    ``create_app``, may already have installed some), and a file
    handler for ``logfile`` is added once per path.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).
    logfile : Optional[str]
        Optional path of a file receiving the same records as the
        console.
    """
    numeric_level = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = str(Path(logfile).resolve())
        already_logging = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_path
            for h in root.handlers
        )
        if not already_logging:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(numeric_level)
        server_logger.propagate = True
