"""
Aggregate output models.

Summary scalars and series computed from a validated watch-event stream.
These feed the presentation layer and the JSON report.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

HOURS_PER_DAY = 24


class ChannelCount(BaseModel):
    """One row of the top-channels ranking."""

    channel_name: str = Field(..., description="Channel display name")
    count: int = Field(..., ge=1, description="Videos watched from the channel")
    is_subscribed: bool = Field(
        default=False, description="Whether the channel appears in subscriptions"
    )


class MonthlyPoint(BaseModel):
    """One point of the monthly activity series."""

    key: str = Field(
        ..., pattern=r"^\d{4}-\d{2}$", description="Sortable YYYY-MM key, month 01-12"
    )
    label: str = Field(..., description="Display label, e.g. 'Jan 24'")
    count: int = Field(..., ge=1, description="Events in the month")


class DateRange(BaseModel):
    """First and last event instants."""

    start: datetime
    end: datetime
    total_days: int = Field(..., ge=0)


class AggregateOutputs(BaseModel):
    """Full set of derived statistics for one analysis pass."""

    total_videos: int = Field(default=0, ge=0)
    total_subscriptions: int = Field(default=0, ge=0)
    unique_channels: int = Field(default=0, ge=0)
    channel_counts: Dict[str, int] = Field(default_factory=dict)
    top_channels: List[ChannelCount] = Field(default_factory=list)
    day_of_week_counts: Dict[str, int] = Field(default_factory=dict)
    most_active_day: Optional[str] = None
    hour_of_day_counts: List[int] = Field(
        default_factory=lambda: [0] * HOURS_PER_DAY
    )
    monthly_series: List[MonthlyPoint] = Field(default_factory=list)
    date_range: Optional[DateRange] = None
    timezone: str = Field(default="UTC", description="Zone used for bucketing")

    @field_validator("hour_of_day_counts")
    @classmethod
    def validate_hour_slots(cls, v: List[int]) -> List[int]:
        """Exactly one slot per hour of the day."""
        if len(v) != HOURS_PER_DAY:
            raise ValueError(f"Expected {HOURS_PER_DAY} hourly slots, got {len(v)}")
        return v

    @property
    def monthly_labels(self) -> List[str]:
        return [point.label for point in self.monthly_series]

    @property
    def monthly_counts(self) -> List[int]:
        return [point.count for point in self.monthly_series]
