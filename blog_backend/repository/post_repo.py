from __future__ import annotations

from sqlite3 import Connection
from typing import Any, Mapping

from ..domain.content import build_post_update

_COLUMNS = "id, title, content, excerpt, tags, publish_date, created_at, updated_at"


def count_all(conn: Connection) -> int:
    return int(conn.execute("SELECT COUNT(1) AS c FROM posts").fetchone()["c"])


def list_all(conn: Connection):
    return conn.execute(
        f"SELECT {_COLUMNS} FROM posts ORDER BY publish_date DESC, rowid DESC"
    ).fetchall()


def get_one(conn: Connection, post_id: str):
    return conn.execute(f"SELECT {_COLUMNS} FROM posts WHERE id=?", (post_id,)).fetchone()


def insert_post(conn: Connection, post: Mapping[str, Any]) -> None:
    conn.execute(
        f"INSERT INTO posts({_COLUMNS}) "
        "VALUES(:id, :title, :content, :excerpt, :tags, :publish_date, :created_at, :updated_at)",
        dict(post),
    )


def update_post(conn: Connection, post_id: str, changes: Mapping[str, Any], now: str) -> int:
    assignments, params = build_post_update(changes, now)
    params.append(post_id)
    cur = conn.execute(f"UPDATE posts SET {', '.join(assignments)} WHERE id=?", params)
    return cur.rowcount


def delete_post(conn: Connection, post_id: str) -> int:
    cur = conn.execute("DELETE FROM posts WHERE id=?", (post_id,))
    return cur.rowcount
