"""
Services module for watchlens.

Contains the archive readers, the aggregation logic, the analysis
pipeline and the dashboard presenter.
"""

from __future__ import annotations

from watchlens.services.aggregation_service import AggregationService
from watchlens.services.archive_reader import (
    DirectoryArchiveReader,
    ZipArchiveReader,
    open_archive,
)
from watchlens.services.dashboard import Dashboard
from watchlens.services.takeout_analysis_service import TakeoutAnalysisService

__all__: list[str] = [
    "AggregationService",
    "Dashboard",
    "DirectoryArchiveReader",
    "TakeoutAnalysisService",
    "ZipArchiveReader",
    "open_archive",
]
