"""
Watch-history aggregation service.

Turns a validated stream of watch events into rankings and time
histograms. All calendar bucketing happens in an explicitly injected
time zone so results are reproducible regardless of where they run.

Tie-breaking
------------
- ``top_channels``: equal counts keep first-seen order. Takeout lists the
  most recent activity first, so the more recently watched channel wins.
- ``most_active_day``: equal counts resolve to the first weekday
  encountered in the event stream, for the same reason.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Optional, Sequence, Set

from watchlens.models import (
    HOURS_PER_DAY,
    AggregateOutputs,
    ChannelCount,
    DateRange,
    MonthlyPoint,
    SubscriptionRecord,
    WatchEvent,
)

logger = logging.getLogger(__name__)

# Output is not localized; names are fixed rather than taken from the C locale.
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

DEFAULT_TOP_CHANNELS = 10


def month_key(moment: datetime) -> str:
    """Sortable ``YYYY-MM`` key with a one-based, zero-padded month."""
    return f"{moment.year:04d}-{moment.month:02d}"


def month_label(key: str) -> str:
    """
    Display label for a ``YYYY-MM`` key.

    >>> month_label("2024-01")
    'Jan 24'
    """
    year, month = key.split("-")
    return f"{MONTH_ABBREVIATIONS[int(month) - 1]} {int(year) % 100:02d}"


class AggregationService:
    """
    Compute summary statistics from watch events.

    Parameters
    ----------
    tz : tzinfo
        Zone used for hour, weekday and month bucketing.
    top_channels_limit : int
        Maximum length of the top-channels ranking.
    timezone_name : str | None
        Display name of ``tz``; derived from it when omitted.
    """

    def __init__(
        self,
        tz: tzinfo = timezone.utc,
        top_channels_limit: int = DEFAULT_TOP_CHANNELS,
        timezone_name: Optional[str] = None,
    ) -> None:
        if top_channels_limit < 1:
            raise ValueError("top_channels_limit must be at least 1")
        self.tz = tz
        self.top_channels_limit = top_channels_limit
        self.timezone_name = timezone_name or str(tz)

    def aggregate(
        self,
        events: Sequence[WatchEvent],
        subscriptions: Sequence[SubscriptionRecord] = (),
    ) -> AggregateOutputs:
        """
        Aggregate watch events into the full set of summary outputs.

        Parameters
        ----------
        events : Sequence[WatchEvent]
            Validated events, in export order.
        subscriptions : Sequence[SubscriptionRecord]
            Subscription rows; used for counts and subscription flags.

        Returns
        -------
        AggregateOutputs
            Frequency tables, rankings and series.
        """
        local_times = [event.timestamp.astimezone(self.tz) for event in events]

        channel_counts = self.count_channels(events)
        day_of_week_counts = self.count_weekdays(local_times)
        monthly_series = self.build_monthly_series(local_times)

        outputs = AggregateOutputs(
            total_videos=len(events),
            total_subscriptions=len(subscriptions),
            unique_channels=len(channel_counts),
            channel_counts=channel_counts,
            top_channels=self.rank_channels(channel_counts, events, subscriptions),
            day_of_week_counts=day_of_week_counts,
            most_active_day=self.pick_most_active_day(day_of_week_counts),
            hour_of_day_counts=self.count_hours(local_times),
            monthly_series=monthly_series,
            date_range=self.compute_date_range(local_times),
            timezone=self.timezone_name,
        )

        logger.debug(
            f"Aggregated {outputs.total_videos} events across "
            f"{outputs.unique_channels} channels and {len(monthly_series)} months"
        )
        return outputs

    @staticmethod
    def count_channels(events: Sequence[WatchEvent]) -> Dict[str, int]:
        """Count events per channel name, keyed in first-seen order."""
        channel_counts: Dict[str, int] = {}
        for event in events:
            channel_counts[event.channel_name] = (
                channel_counts.get(event.channel_name, 0) + 1
            )
        return channel_counts

    def rank_channels(
        self,
        channel_counts: Dict[str, int],
        events: Sequence[WatchEvent],
        subscriptions: Sequence[SubscriptionRecord],
    ) -> List[ChannelCount]:
        """Top channels by count, descending; ties keep first-seen order."""
        subscribed_titles: Set[str] = {
            sub.channel_title for sub in subscriptions if sub.channel_title
        }
        subscribed_urls: Set[str] = {
            sub.channel_url.rstrip("/") for sub in subscriptions if sub.channel_url
        }

        channel_urls: Dict[str, Set[str]] = {}
        for event in events:
            channel_urls.setdefault(event.channel_name, set()).add(
                event.channel_url.rstrip("/")
            )

        # sorted() is stable, so equal counts stay in insertion order
        ranked = sorted(channel_counts.items(), key=lambda item: item[1], reverse=True)

        return [
            ChannelCount(
                channel_name=channel_name,
                count=count,
                is_subscribed=(
                    channel_name in subscribed_titles
                    or bool(channel_urls.get(channel_name, set()) & subscribed_urls)
                ),
            )
            for channel_name, count in ranked[: self.top_channels_limit]
        ]

    @staticmethod
    def count_weekdays(local_times: Sequence[datetime]) -> Dict[str, int]:
        """Count events per English weekday name, keyed in first-seen order."""
        day_counts: Dict[str, int] = {}
        for moment in local_times:
            day = WEEKDAY_NAMES[moment.weekday()]
            day_counts[day] = day_counts.get(day, 0) + 1
        return day_counts

    @staticmethod
    def pick_most_active_day(day_of_week_counts: Dict[str, int]) -> Optional[str]:
        """Weekday with the highest count; the first one seen wins a tie."""
        if not day_of_week_counts:
            return None
        # max() returns the first maximal item in iteration order
        return max(day_of_week_counts.items(), key=lambda item: item[1])[0]

    @staticmethod
    def count_hours(local_times: Sequence[datetime]) -> List[int]:
        """Histogram of events by local hour, one slot per hour."""
        hourly_counts = [0] * HOURS_PER_DAY
        for moment in local_times:
            hourly_counts[moment.hour] += 1
        return hourly_counts

    @staticmethod
    def build_monthly_series(local_times: Sequence[datetime]) -> List[MonthlyPoint]:
        """Events per calendar month, ascending, months without events omitted."""
        monthly_counts: Dict[str, int] = {}
        for moment in local_times:
            key = month_key(moment)
            monthly_counts[key] = monthly_counts.get(key, 0) + 1

        return [
            MonthlyPoint(key=key, label=month_label(key), count=monthly_counts[key])
            for key in sorted(monthly_counts)
        ]

    @staticmethod
    def compute_date_range(local_times: Sequence[datetime]) -> Optional[DateRange]:
        """First and last event instants, or None without events."""
        if not local_times:
            return None
        start = min(local_times)
        end = max(local_times)
        return DateRange(start=start, end=end, total_days=(end - start).days)
