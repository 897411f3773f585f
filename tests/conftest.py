from pathlib import Path
import sys

import pytest


def _ensure_repo_root_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_root_on_path()

from health_records_api.app.core.config import settings  # noqa: E402
from health_records_api.app.core.db import init_db  # noqa: E402


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point every store at a fresh SQLite file for the duration of a test."""
    db_path = tmp_path / "health_records.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path
