"""
app/core/logger.py

Centralised logging configuration for the candidate API.
Every module should obtain its logger via:

    from app.core.logger import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

#: Third-party loggers that are too chatty at INFO.
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "sqlalchemy.engine", "python_multipart")


def _level() -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def _configure_root_logger() -> None:
    """Attach a stdout handler to the root logger, once, at import time."""
    root = logging.getLogger()
    if root.handlers:
        # pytest and uvicorn install their own handlers first.
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_level())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root.setLevel(_level())
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
