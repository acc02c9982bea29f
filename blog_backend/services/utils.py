from __future__ import annotations

# blog_backend/services/utils.py
import datetime as dt
import uuid


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def to_iso(t: dt.datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2024-05-01T12:00:00.000Z"""
    return t.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    return to_iso(utc_now())


def new_id() -> str:
    return str(uuid.uuid4())
