"""
Create the blog schema and seed example posts if the store is empty.

Usage:
  python -m blog_backend.scripts.init_db [--db path/to/blog.db]
"""
from __future__ import annotations

import argparse
import logging
import os

from blog_backend.db import get_conn, get_db_path
from blog_backend.repository import post_repo


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", help="SQLite file (overrides BLOG_DB_PATH / config.yaml)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if args.db:
        os.environ["BLOG_DB_PATH"] = args.db

    with get_conn() as conn:
        total = post_repo.count_all(conn)
    print({"message": "ok", "db_path": get_db_path(), "posts": total})


if __name__ == "__main__":
    main()
