"""
Subscription record model for the Takeout subscriptions export.
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Actual CSV columns: "Channel Id", "Channel Url", "Channel Title"
CHANNEL_ID_HEADER = "Channel Id"
CHANNEL_URL_HEADER = "Channel Url"
CHANNEL_TITLE_HEADER = "Channel Title"


class SubscriptionRecord(BaseModel):
    """One non-blank row of the subscriptions CSV, keyed by header name."""

    row: Dict[str, str] = Field(
        default_factory=dict, description="Header name to cell value"
    )

    def get(self, header: str) -> Optional[str]:
        """Return a cell value, treating blank cells as missing."""
        value = self.row.get(header)
        if value is None or not value.strip():
            return None
        return value.strip()

    @property
    def channel_id(self) -> Optional[str]:
        return self.get(CHANNEL_ID_HEADER)

    @property
    def channel_url(self) -> Optional[str]:
        return self.get(CHANNEL_URL_HEADER)

    @property
    def channel_title(self) -> Optional[str]:
        return self.get(CHANNEL_TITLE_HEADER)

    model_config = ConfigDict(frozen=True)
