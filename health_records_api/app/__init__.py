"""
Application package initializer.

The package is split into ``core`` (configuration, logging, the
SQLite-backed ordered store and record lifecycle), ``schemas``
(pydantic models), ``services`` (validation and CRUD logic) and
``api`` (versioned FastAPI routers).
"""

from .main import app  # noqa: F401
