"""
Parsers for the files inside a Google Takeout YouTube export.
"""

from __future__ import annotations

from .history_parser import (
    DEFAULT_LAYOUT,
    HistoryLayout,
    HistoryParser,
    parse_watch_history,
)
from .subscriptions_parser import parse_subscriptions

__all__ = [
    "DEFAULT_LAYOUT",
    "HistoryLayout",
    "HistoryParser",
    "parse_subscriptions",
    "parse_watch_history",
]
