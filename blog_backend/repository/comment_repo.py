from sqlite3 import Connection
from typing import Any, Mapping


def list_for_post(conn: Connection, post_id: str):
    return conn.execute(
        "SELECT id, post_id, author, content, created_at FROM comments "
        "WHERE post_id=? ORDER BY created_at DESC, rowid DESC",
        (post_id,),
    ).fetchall()


def insert_comment(conn: Connection, comment: Mapping[str, Any]) -> None:
    conn.execute(
        "INSERT INTO comments(id, post_id, author, content, created_at) VALUES(?,?,?,?,?)",
        (comment["id"], comment["post_id"], comment["author"], comment["content"], comment["created_at"]),
    )


def delete_comment(conn: Connection, comment_id: str) -> int:
    return conn.execute("DELETE FROM comments WHERE id=?", (comment_id,)).rowcount

