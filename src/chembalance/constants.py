"""Shared constants."""

from __future__ import annotations

ARROW_SPELLINGS: tuple[str, ...] = ("->", "→", "=")
OUTPUT_ARROW = "→"
TERM_SEPARATOR = " + "

LOG_LEVEL_ENV = "CHEMBALANCE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
