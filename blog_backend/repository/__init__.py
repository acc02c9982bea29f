"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings.
Functions take an open Connection and never commit or close it.
"""
from __future__ import annotations
