"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service runs out of the box against a local SQLite file.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Health Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite file backing the ordered stores.  A relative
    # path is resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "health_records.db")

    # Stable region identifiers.  Each entity kind lives in its own
    # region of the key-value table; changing these orphans existing data.
    user_region_id: int = int(os.getenv("USER_REGION_ID", "0"))
    health_record_region_id: int = int(os.getenv("HEALTH_RECORD_REGION_ID", "1"))

    # Per-entry capacity bounds in bytes.  A UUID key is 36 bytes.
    max_key_size: int = int(os.getenv("MAX_KEY_SIZE", "44"))
    max_value_size: int = int(os.getenv("MAX_VALUE_SIZE", "1024"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
