"""
Post/comment shapes and the partial-update builder.

Pure functions only (no DB access), so they can be tested in isolation.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, TypedDict


class Post(TypedDict):
    id: str
    title: str
    content: str
    excerpt: str
    tags: Optional[str]
    publish_date: str
    created_at: str
    updated_at: str


class Comment(TypedDict):
    id: str
    post_id: str
    author: str
    content: str
    created_at: str


# Column order here is the order assignments appear in the UPDATE statement.
MUTABLE_POST_FIELDS: tuple[str, ...] = ("title", "content", "excerpt", "tags", "publish_date")
REQUIRED_POST_FIELDS: tuple[str, ...] = ("title", "content", "excerpt", "publish_date")
REQUIRED_COMMENT_FIELDS: tuple[str, ...] = ("post_id", "author", "content")


def build_post_update(changes: Mapping[str, Any], now: str) -> tuple[list[str], list[Any]]:
    """
    Build the SET clause for a partial post update.

    Only keys present in `changes` are emitted (a present None is a value, e.g.
    clearing tags); `updated_at` is always appended last. Params line up
    positionally with the assignments; the caller appends the id for WHERE.
    """
    assignments: list[str] = []
    params: list[Any] = []
    for col in MUTABLE_POST_FIELDS:
        if col in changes:
            assignments.append(f"{col} = ?")
            params.append(changes[col])
    assignments.append("updated_at = ?")
    params.append(now)
    return assignments, params


def ignored_update_keys(changes: Mapping[str, Any]) -> list[str]:
    return sorted(k for k in changes if k not in MUTABLE_POST_FIELDS)


def missing_fields(data: Mapping[str, Any], required: tuple[str, ...]) -> list[str]:
    return [k for k in required if data.get(k) is None]

