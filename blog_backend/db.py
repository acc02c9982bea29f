from __future__ import annotations

# blog_backend/db.py
import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator

import yaml

logger = logging.getLogger(__name__)

# DB path resolution order:
# 1) env BLOG_DB_PATH (highest priority)
# 2) config.yaml test_db_path (when running under test)
# 3) config.yaml db_path
# 4) fallback: <project root>/blog.db
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "blog.db")

_store: sqlite3.Connection | None = None
_store_lock = threading.Lock()


class StoreInitError(RuntimeError):
    """The backing store could not be opened, created or seeded."""


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        logger.warning("config.yaml unreadable, using defaults", exc_info=True)
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in ("db_path", "test_db_path"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def get_db_path() -> str:
    env_path = os.environ.get("BLOG_DB_PATH")
    cfg = _read_config_yaml()
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg.get("test_db_path"):
        path = cfg["test_db_path"]
    elif cfg.get("db_path"):
        path = cfg["db_path"]
    else:
        path = _ROOT_DB

    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


def _open(path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(
        path,
        check_same_thread=False,
        isolation_level=None,
    )
    conn.execute("PRAGMA foreign_keys = ON;")
    conn.row_factory = sqlite3.Row
    return conn


def get_store() -> sqlite3.Connection:
    """
    Return the process-wide connection, opening it on first use.

    The first caller creates the schema and seeds an empty store while holding
    the lock; everyone else gets the already-initialized handle.
    """
    global _store
    conn = _store
    if conn is not None:
        return conn
    with _store_lock:
        if _store is not None:
            return _store
        # late imports: schema/seed modules import get_conn from here
        from .repository import schema
        from .services.seed_svc import seed_if_empty

        conn = None
        try:
            path = get_db_path()
            conn = _open(path)
            schema.ensure_schema(conn)
            seed_if_empty(conn)
        except (sqlite3.Error, OSError, ValueError, yaml.YAMLError) as e:
            logger.exception("store initialization failed")
            if conn is not None:
                conn.close()
            raise StoreInitError(f"cannot initialize blog store: {e}") from e
        logger.info("blog store ready at %s", path)
        _store = conn
        return conn


@contextmanager
def get_conn() -> Iterator[sqlite3.Connection]:
    """
    Borrow the shared connection. It is not closed on exit; the store lives
    for the whole process.
    """
    yield get_store()


def close_store() -> None:
    """Close and forget the shared connection (tests and shutdown only)."""
    global _store
    with _store_lock:
        if _store is not None:
            _store.close()
            _store = None
