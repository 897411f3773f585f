"""
Logging setup for the health records service.

Every record goes to stderr and, when ``LOG_FILE`` is set, also to that
file, using one line format for both.  The handlers installed here are
tagged so that calling :func:`setup_logging` again (each ``create_app``
call does) replaces them instead of stacking duplicates, while handlers
added by someone else (pytest's capture, uvicorn) are left alone.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_health_records_handler"


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, _HANDLER_TAG, False)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, logger_name: Optional[str] = None) -> logging.Logger:
    """Attach the service's console (and optional file) handler to a logger.

    ``level`` is a level name, case insensitive; unknown names fall back
    to ``INFO``.  ``logger_name`` defaults to the root logger.  Returns
    the configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)
    return logger
