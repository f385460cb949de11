"""
CLI interface module for watchlens.

Provides the Typer-based command-line interface for analyzing a Takeout
export and rendering its statistics in the terminal.
"""

from __future__ import annotations

__all__: list[str] = []
