import datetime as dt
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture()
def tmp_db_path(tmp_path, monkeypatch):
    from blog_backend.db import close_store

    path = tmp_path / "blog_test.db"
    # Point the store at a throwaway file, and drop any handle left by an earlier test
    close_store()
    monkeypatch.setenv("BLOG_DB_PATH", str(path))
    yield str(path)
    close_store()


@pytest.fixture()
def empty_store(tmp_db_path, monkeypatch):
    """Store initialized with seeding disabled, so tests start from zero posts."""
    from blog_backend.services import seed_svc

    monkeypatch.setattr(seed_svc, "load_seed_posts", lambda path=None: [])
    from blog_backend.db import get_store

    return get_store()


class FakeClock:
    """Deterministic utc_now: each call advances one second."""

    def __init__(self, start=dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.timezone.utc)):
        self.current = start

    def __call__(self):
        t = self.current
        self.current = t + dt.timedelta(seconds=1)
        return t


@pytest.fixture()
def clock(monkeypatch):
    from blog_backend.services import utils

    fake = FakeClock()
    monkeypatch.setattr(utils, "utc_now", fake)
    return fake


@pytest.fixture()
def client(empty_store):
    from fastapi.testclient import TestClient
    from blog_backend.api import app

    return TestClient(app)
