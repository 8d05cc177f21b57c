"""Test fixtures: sample DDL and seed rows for the integration tests."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent

#: Every built-in dialect target.
ALL_TARGETS = ["mysql", "oracle", "postgres", "sqlite", "sqlserver", "sqlserverce"]

#: (id, customer, status, amount, placed_on) rows inserted into ``orders``.
ORDERS: list[tuple[int, str, str, float, str | None]] = [
    (1, "acme", "open", 120.0, "2024-01-15"),
    (2, "acme", "closed", 75.5, "2024-02-03"),
    (3, "beta", "open", 10.0, "2024-04-20"),
    (4, "beta", "cancelled", 0.0, None),
    (5, "gamma", "open", 300.0, "2024-05-17"),
    (6, "gamma", "closed", 42.0, "2024-07-01"),
    (7, "delta", "open", 99.9, "2024-08-30"),
    (8, "acme", "open", 15.0, "2024-11-11"),
]


def load_ddl() -> str:
    """Return the sample SQLite DDL string."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
