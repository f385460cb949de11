"""
Dashboard presenter.

Feeds aggregate outputs to a chart sink and owns the charts it created:
showing a new result first destroys every chart from the previous one.
"""

from __future__ import annotations

import logging
from typing import Any, List

from ..models import AggregateOutputs
from .interfaces import ChartKind, ChartSinkInterface

logger = logging.getLogger(__name__)

TOP_CHANNELS_TITLE = "Top Channels"
HOURLY_ACTIVITY_TITLE = "Videos Watched by Hour"
MONTHLY_HISTORY_TITLE = "Videos Watched per Month"


def hour_labels() -> List[str]:
    """Labels for the 24 hourly slots: ``0:00`` through ``23:00``."""
    return [f"{hour}:00" for hour in range(24)]


class Dashboard:
    """
    Renders the standard set of charts for an analysis result.

    Parameters
    ----------
    sink : ChartSinkInterface
        Where charts are drawn.
    """

    def __init__(self, sink: ChartSinkInterface) -> None:
        self.sink = sink
        self._handles: List[Any] = []

    @property
    def active_charts(self) -> int:
        return len(self._handles)

    def clear(self) -> None:
        """Destroy every chart rendered by the previous :meth:`show`."""
        while self._handles:
            self.sink.destroy(self._handles.pop())

    def show(self, aggregates: AggregateOutputs) -> None:
        """Replace any existing charts with charts for ``aggregates``."""
        self.clear()

        top = aggregates.top_channels
        self._handles.append(
            self.sink.render_series(
                TOP_CHANNELS_TITLE,
                [channel.channel_name for channel in top],
                [channel.count for channel in top],
                ChartKind.HORIZONTAL_BAR,
            )
        )
        self._handles.append(
            self.sink.render_series(
                HOURLY_ACTIVITY_TITLE,
                hour_labels(),
                aggregates.hour_of_day_counts,
                ChartKind.BAR,
            )
        )
        self._handles.append(
            self.sink.render_series(
                MONTHLY_HISTORY_TITLE,
                aggregates.monthly_labels,
                aggregates.monthly_counts,
                ChartKind.LINE,
            )
        )
        logger.debug(f"Rendered {len(self._handles)} charts")
