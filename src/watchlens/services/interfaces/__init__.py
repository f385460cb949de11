"""
Service interfaces for watchlens.

Abstract base classes for the collaborators the analysis pipeline relies
on but does not implement itself.
"""

from __future__ import annotations

from .archive_reader_interface import ArchiveReaderInterface
from .chart_sink_interface import ChartKind, ChartSinkInterface

__all__ = [
    "ArchiveReaderInterface",
    "ChartKind",
    "ChartSinkInterface",
]
