from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..db import get_conn
from ..domain.content import Post, REQUIRED_POST_FIELDS, ignored_update_keys, missing_fields
from ..repository import post_repo
from . import utils

logger = logging.getLogger(__name__)


def get_all_posts() -> list[Post]:
    """All posts, newest publish_date first."""
    with get_conn() as conn:
        return [dict(r) for r in post_repo.list_all(conn)]


def get_post_by_id(post_id: str) -> Optional[Post]:
    with get_conn() as conn:
        row = post_repo.get_one(conn, post_id)
    return dict(row) if row else None


def create_post(data: Mapping[str, Any]) -> Post:
    """
    Persist a new post. `data` carries title/content/excerpt/publish_date and
    optionally tags; id and timestamps are assigned here.
    """
    missing = missing_fields(data, REQUIRED_POST_FIELDS)
    if missing:
        raise ValueError(f"missing fields: {', '.join(missing)}")
    now = utils.now_iso()
    post: Post = {
        "id": utils.new_id(),
        "title": data["title"],
        "content": data["content"],
        "excerpt": data["excerpt"],
        "tags": data.get("tags"),
        "publish_date": data["publish_date"],
        "created_at": now,
        "updated_at": now,
    }
    with get_conn() as conn:
        post_repo.insert_post(conn, post)
    logger.info("post created id=%s", post["id"])
    return post


def update_post(post_id: str, changes: Mapping[str, Any]) -> bool:
    """
    Apply a partial update: only keys present in `changes` are written,
    updated_at is always refreshed. False when no post has this id.
    """
    ignored = ignored_update_keys(changes)
    if ignored:
        logger.debug("update_post ignoring non-mutable keys: %s", ignored)
    with get_conn() as conn:
        changed = post_repo.update_post(conn, post_id, changes, utils.now_iso())
    if not changed:
        logger.warning("update_post: no post with id=%s", post_id)
    return changed > 0


def delete_post(post_id: str) -> bool:
    """Delete a post; its comments go with it through the FK cascade."""
    with get_conn() as conn:
        deleted = post_repo.delete_post(conn, post_id)
    if deleted:
        logger.info("post deleted id=%s", post_id)
    else:
        logger.warning("delete_post: no post with id=%s", post_id)
    return deleted > 0
