"""
Watch event model for recovered watch-history records.

Defines the Pydantic model for one viewing action read from a Takeout
watch-history page.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

CHANNEL_NAMESPACE_MARKER = "youtube.com/channel"


class WatchEvent(BaseModel):
    """One observed viewing action."""

    video_title: str = Field(..., min_length=1, description="Video title")
    video_url: str = Field(..., description="Video URL as exported")
    channel_name: str = Field(..., min_length=1, description="Channel display name")
    channel_url: str = Field(..., description="Channel page URL")
    timestamp: datetime = Field(
        ..., description="When the video was watched (timezone-aware)"
    )

    @field_validator("video_title", "channel_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate text fields are not empty."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator("channel_url")
    @classmethod
    def validate_channel_url(cls, v: str) -> str:
        """Validate the URL points into the channel namespace."""
        if CHANNEL_NAMESPACE_MARKER not in v:
            raise ValueError(f"Not a channel URL: {v}")
        return v

    @field_validator("timestamp")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        """Naive timestamps cannot be bucketed reproducibly."""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("Timestamp must be timezone-aware")
        return v

    model_config = ConfigDict(frozen=True)
