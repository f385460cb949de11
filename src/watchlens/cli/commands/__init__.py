"""
Command implementations for the watchlens CLI.
"""

from __future__ import annotations

__all__: list[str] = []
