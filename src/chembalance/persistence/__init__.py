"""Persistence helpers for chembalance."""

from chembalance.persistence.sqlite_store import (
    HistoryEntry,
    connect,
    ensure_schema,
    last_equation,
    list_history,
    save_balance,
)

__all__ = [
    "HistoryEntry",
    "connect",
    "ensure_schema",
    "last_equation",
    "list_history",
    "save_balance",
]
