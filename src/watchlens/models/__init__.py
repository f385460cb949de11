"""
Data models module for watchlens.

Defines Pydantic models for recovered watch events, subscription rows and
the aggregate statistics computed from them.
"""

from __future__ import annotations

from .aggregates import (
    HOURS_PER_DAY,
    AggregateOutputs,
    ChannelCount,
    DateRange,
    MonthlyPoint,
)
from .analysis import AnalysisResult, ParseReport, RejectionReason
from .subscription import SubscriptionRecord
from .watch_event import CHANNEL_NAMESPACE_MARKER, WatchEvent

__all__ = [
    "AggregateOutputs",
    "AnalysisResult",
    "CHANNEL_NAMESPACE_MARKER",
    "ChannelCount",
    "DateRange",
    "HOURS_PER_DAY",
    "MonthlyPoint",
    "ParseReport",
    "RejectionReason",
    "SubscriptionRecord",
    "WatchEvent",
]
