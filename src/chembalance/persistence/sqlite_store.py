"""SQLite history of balance requests."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS balance_request (
  id INTEGER PRIMARY KEY,
  input TEXT NOT NULL,
  success INTEGER NOT NULL,
  equation TEXT,
  coefficients JSON,
  error_kind TEXT,
  created_utc TEXT
);
"""


@dataclass(frozen=True)
class HistoryEntry:
    id: int
    input: str
    success: bool
    equation: str | None
    coefficients: list[int] | None
    error_kind: str | None
    created_utc: str


def connect(history_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a history database."""
    path = Path(history_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(path)


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def save_balance(
    connection: sqlite3.Connection,
    input_text: str,
    equation: str | None = None,
    coefficients: Sequence[int] | None = None,
    error_kind: str | None = None,
    created_utc: str | None = None,
) -> int:
    """Record one request and return its ID; success means no ``error_kind``."""
    created_utc = created_utc or _utc_now()
    cursor = connection.execute(
        "INSERT INTO balance_request (input, success, equation, coefficients, error_kind, created_utc)"
        " VALUES (?, ?, ?, ?, ?, ?)",
        (
            input_text,
            int(error_kind is None),
            equation,
            json.dumps(list(coefficients)) if coefficients is not None else None,
            error_kind,
            created_utc,
        ),
    )
    connection.commit()
    return int(cursor.lastrowid)


def list_history(connection: sqlite3.Connection, limit: int = 20) -> list[HistoryEntry]:
    """Most recent requests first."""
    rows = connection.execute(
        "SELECT id, input, success, equation, coefficients, error_kind, created_utc"
        " FROM balance_request ORDER BY id DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [
        HistoryEntry(
            id=row[0],
            input=row[1],
            success=bool(row[2]),
            equation=row[3],
            coefficients=json.loads(row[4]) if row[4] is not None else None,
            error_kind=row[5],
            created_utc=row[6],
        )
        for row in rows
    ]


def last_equation(connection: sqlite3.Connection) -> str | None:
    """Input text of the most recent request, if any."""
    entries = list_history(connection, limit=1)
    return entries[0].input if entries else None


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
