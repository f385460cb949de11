"""
Factory definitions for subscription records.

Rows mirror the real Takeout CSV headers: "Channel Id", "Channel Url",
"Channel Title".
"""

from __future__ import annotations

from typing import Any, List, cast

import factory

from watchlens.models import SubscriptionRecord


class SubscriptionRecordFactory(factory.Factory):
    """Factory for SubscriptionRecord models."""

    class Meta:
        model = SubscriptionRecord

    row = factory.LazyFunction(
        lambda: {
            "Channel Id": "UCuAXFkgsw1L7xaCfnd5JJOw",
            "Channel Url": "http://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw",
            "Channel Title": "Rick Astley",
        }
    )


def create_subscription(
    channel_title: str = "Rick Astley",
    channel_id: str = "UCuAXFkgsw1L7xaCfnd5JJOw",
    channel_url: str | None = None,
    **kwargs: Any,
) -> SubscriptionRecord:
    """Create a SubscriptionRecord from the usual three columns."""
    row = {
        "Channel Id": channel_id,
        "Channel Url": channel_url
        or f"http://www.youtube.com/channel/{channel_id}",
        "Channel Title": channel_title,
    }
    return cast(SubscriptionRecord, SubscriptionRecordFactory.build(row=row, **kwargs))


def create_batch_subscriptions(count: int = 3) -> List[SubscriptionRecord]:
    """Create a batch of SubscriptionRecord instances for testing."""
    base_channels = [
        ("Rick Astley", "UCuAXFkgsw1L7xaCfnd5JJOw"),
        ("Google Developers", "UC_x5XG1OV2P6uZZ5FSM9Ttw"),
        ("The Late Show", "UCMtFAi84ehTSYSE9XoHefig"),
        ("Marques Brownlee", "UCBJycsmduvYEL83R_U4JriQ"),
    ]
    return [
        create_subscription(*base_channels[i % len(base_channels)])
        for i in range(count)
    ]
