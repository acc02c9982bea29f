from __future__ import annotations

import datetime as dt
import logging
import os
from sqlite3 import Connection
from typing import Any

import yaml

from ..repository import post_repo
from .utils import new_id, to_iso, utc_now

logger = logging.getLogger(__name__)

SEED_POSTS_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "seeds", "posts.yaml")


def load_seed_posts(path: str | None = None) -> list[dict[str, Any]]:
    """Read example posts (title/content/excerpt/tags) from the seed YAML."""
    with open(path or SEED_POSTS_PATH, "r", encoding="utf-8") as f:
        rows = yaml.safe_load(f) or []
    if not isinstance(rows, list):
        raise ValueError("seed file must contain a list of posts")
    out = []
    for i, r in enumerate(rows):
        if not isinstance(r, dict):
            raise ValueError(f"seed post #{i} is not a mapping")
        missing = [k for k in ("title", "content", "excerpt") if not r.get(k)]
        if missing:
            raise ValueError(f"seed post #{i} missing: {', '.join(missing)}")
        out.append({
            "title": str(r["title"]),
            "content": str(r["content"]),
            "excerpt": str(r["excerpt"]),
            "tags": r.get("tags"),
        })
    return out


def seed_if_empty(conn: Connection, now: dt.datetime | None = None, path: str | None = None) -> int:
    """
    Insert the example posts when the posts table is empty.

    Runs once, straight after schema creation. A store with any rows is left
    alone. Returns the number of posts inserted.
    """
    if post_repo.count_all(conn) > 0:
        logger.debug("posts table not empty, skipping seed")
        return 0

    base = now or utc_now()
    seeds = load_seed_posts(path)
    conn.execute("BEGIN")
    try:
        for i, s in enumerate(seeds):
            ts = to_iso(base - dt.timedelta(days=i))
            post = {**s, "id": new_id(), "publish_date": ts, "created_at": ts, "updated_at": ts}
            post_repo.insert_post(conn, post)
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise
    logger.info("seeded %d example posts", len(seeds))
    return len(seeds)
