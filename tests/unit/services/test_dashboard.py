"""
Tests for the Dashboard presenter.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Sequence, Tuple

from watchlens.services import AggregationService, Dashboard
from watchlens.services.dashboard import (
    HOURLY_ACTIVITY_TITLE,
    MONTHLY_HISTORY_TITLE,
    TOP_CHANNELS_TITLE,
    hour_labels,
)
from watchlens.services.interfaces import ChartKind, ChartSinkInterface
from tests.factories.watch_event_factory import create_channel_events, create_event_at


class RecordingChartSink(ChartSinkInterface):
    """Chart sink that remembers what was rendered and destroyed."""

    def __init__(self) -> None:
        self.live: Dict[int, Tuple[str, List[str], List[int], ChartKind]] = {}
        self.destroyed: List[int] = []
        self._next = 0

    def render_series(
        self,
        title: str,
        labels: Sequence[str],
        values: Sequence[int],
        kind: ChartKind = ChartKind.BAR,
    ) -> int:
        self._next += 1
        self.live[self._next] = (title, list(labels), list(values), kind)
        return self._next

    def destroy(self, handle: int) -> None:
        self.destroyed.append(handle)
        del self.live[handle]

    def by_title(self, title: str):
        return next(chart for chart in self.live.values() if chart[0] == title)


def aggregate(events):
    return AggregationService(tz=timezone.utc).aggregate(events)


class TestDashboard:
    """Test chart rendering and lifecycle."""

    def test_renders_three_charts(self):
        """Test top channels, hourly and monthly charts are drawn."""
        sink = RecordingChartSink()
        dashboard = Dashboard(sink)

        dashboard.show(aggregate(create_channel_events([("A", 2), ("B", 1)])))

        assert dashboard.active_charts == 3
        assert {chart[0] for chart in sink.live.values()} == {
            TOP_CHANNELS_TITLE,
            HOURLY_ACTIVITY_TITLE,
            MONTHLY_HISTORY_TITLE,
        }

    def test_chart_contents(self):
        """Test each chart receives the matching aggregate series."""
        sink = RecordingChartSink()
        events = [
            create_event_at(datetime(2023, 12, 20, 9, tzinfo=timezone.utc), "A"),
            create_event_at(datetime(2024, 1, 3, 9, tzinfo=timezone.utc), "B"),
            create_event_at(datetime(2024, 1, 4, 21, tzinfo=timezone.utc), "A"),
        ]

        Dashboard(sink).show(aggregate(events))

        _, labels, values, kind = sink.by_title(TOP_CHANNELS_TITLE)
        assert (labels, values, kind) == (["A", "B"], [2, 1], ChartKind.HORIZONTAL_BAR)

        _, labels, values, kind = sink.by_title(HOURLY_ACTIVITY_TITLE)
        assert labels == hour_labels()
        assert values[9] == 2 and values[21] == 1
        assert kind is ChartKind.BAR

        _, labels, values, kind = sink.by_title(MONTHLY_HISTORY_TITLE)
        assert (labels, values, kind) == (["Dec 23", "Jan 24"], [1, 2], ChartKind.LINE)

    def test_second_show_replaces_charts(self):
        """Test showing a new result destroys the previous charts first."""
        sink = RecordingChartSink()
        dashboard = Dashboard(sink)

        dashboard.show(aggregate(create_channel_events([("A", 1)])))
        dashboard.show(aggregate(create_channel_events([("B", 2)])))

        assert sorted(sink.destroyed) == [1, 2, 3]
        assert len(sink.live) == 3
        assert dashboard.active_charts == 3

    def test_clear(self):
        """Test clearing destroys everything and is safe to repeat."""
        sink = RecordingChartSink()
        dashboard = Dashboard(sink)
        dashboard.show(aggregate(create_channel_events([("A", 1)])))

        dashboard.clear()
        dashboard.clear()

        assert sink.live == {}
        assert dashboard.active_charts == 0

    def test_hour_labels(self):
        """Test hour labels cover the whole day."""
        labels = hour_labels()

        assert len(labels) == 24
        assert labels[0] == "0:00"
        assert labels[23] == "23:00"
