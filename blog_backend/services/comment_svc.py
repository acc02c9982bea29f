from __future__ import annotations

import logging
import sqlite3
from typing import Any, Mapping

from ..db import get_conn
from ..domain.content import Comment, REQUIRED_COMMENT_FIELDS, missing_fields
from ..repository import comment_repo
from . import utils

logger = logging.getLogger(__name__)


def get_comments_by_post_id(post_id: str) -> list[Comment]:
    # no existence check on the post: unknown ids just have no comments
    with get_conn() as conn:
        return [dict(r) for r in comment_repo.list_for_post(conn, post_id)]


def create_comment(data: Mapping[str, Any]) -> Comment:
    """
    Persist a comment under an existing post.

    Raises sqlite3.IntegrityError when post_id does not reference a post.
    """
    missing = missing_fields(data, REQUIRED_COMMENT_FIELDS)
    if missing:
        raise ValueError(f"missing fields: {', '.join(missing)}")
    comment: Comment = {
        "id": utils.new_id(),
        "post_id": data["post_id"],
        "author": data["author"],
        "content": data["content"],
        "created_at": utils.now_iso(),
    }
    try:
        with get_conn() as conn:
            comment_repo.insert_comment(conn, comment)
    except sqlite3.IntegrityError:
        logger.warning("comment rejected, post_id=%s", comment["post_id"])
        raise
    logger.info("comment created id=%s post_id=%s", comment["id"], comment["post_id"])
    return comment


def delete_comment(comment_id: str) -> bool:
    with get_conn() as conn:
        deleted = comment_repo.delete_comment(conn, comment_id)
    if deleted:
        logger.info("comment deleted id=%s", comment_id)
    else:
        logger.warning("delete_comment: no comment with id=%s", comment_id)
    return deleted > 0
