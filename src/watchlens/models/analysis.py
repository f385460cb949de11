"""
Analysis result models.

Bundles the parsed inputs, the aggregates and a report of how many
watch-history blocks were skipped and why.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field

from .aggregates import AggregateOutputs
from .subscription import SubscriptionRecord
from .watch_event import WatchEvent


class RejectionReason(str, Enum):
    """Why a candidate watch-history block produced no event."""

    NOT_WATCHED = "not_watched"
    MISSING_LINKS = "missing_links"
    NOT_CHANNEL_LINK = "not_channel_link"
    MISSING_DATE = "missing_date"
    INVALID_DATE = "invalid_date"
    EMPTY_FIELD = "empty_field"
    INVALID_RECORD = "invalid_record"
    UNEXPECTED_ERROR = "unexpected_error"


class ParseReport(BaseModel):
    """Counts of accepted and rejected watch-history blocks."""

    candidates: int = Field(default=0, ge=0)
    parsed: int = Field(default=0, ge=0)
    rejected: Dict[RejectionReason, int] = Field(default_factory=dict)

    @property
    def total_rejected(self) -> int:
        return sum(self.rejected.values())

    def record_rejection(self, reason: RejectionReason) -> None:
        self.rejected[reason] = self.rejected.get(reason, 0) + 1


class AnalysisResult(BaseModel):
    """Everything one analysis pass produced."""

    events: List[WatchEvent] = Field(default_factory=list)
    subscriptions: List[SubscriptionRecord] = Field(default_factory=list)
    aggregates: AggregateOutputs = Field(default_factory=AggregateOutputs)
    parse_report: ParseReport = Field(default_factory=ParseReport)
