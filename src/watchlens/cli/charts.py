"""
Terminal chart sink.

Draws labelled series as Rich tables with proportional bars. A terminal
cannot un-print output, so destroying a chart only forgets it; the
bookkeeping still lets the dashboard enforce one set of live charts.
"""

from __future__ import annotations

from itertools import count
from typing import Dict, Iterator, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from watchlens.services.interfaces import ChartKind, ChartSinkInterface

BAR_WIDTH = 30
BAR_GLYPH = "█"
LINE_GLYPH = "•"


def scale_bar(value: int, maximum: int, width: int = BAR_WIDTH) -> int:
    """Number of glyphs for ``value`` on a bar whose full length is ``maximum``."""
    if maximum <= 0 or value <= 0:
        return 0
    return max(1, round(value / maximum * width))


class RichChartSink(ChartSinkInterface):
    """
    Render series to a Rich console.

    Parameters
    ----------
    console : Console | None
        Target console; a new one is created when omitted.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self.charts: Dict[int, Tuple[str, ChartKind]] = {}
        self._ids: Iterator[int] = count(1)

    def render_series(
        self,
        title: str,
        labels: Sequence[str],
        values: Sequence[int],
        kind: ChartKind = ChartKind.BAR,
    ) -> int:
        if len(labels) != len(values):
            raise ValueError(
                f"Got {len(labels)} labels for {len(values)} values in '{title}'"
            )

        table = Table(title=title, show_header=True, header_style="bold green")
        table.add_column("Label", style="cyan")
        table.add_column("Videos", style="green", justify="right")
        table.add_column("", style="red")

        maximum = max(values, default=0)
        for label, value in zip(labels, values):
            length = scale_bar(value, maximum)
            if kind is ChartKind.LINE:
                glyphs = " " * max(length - 1, 0) + (LINE_GLYPH if length else "")
            else:
                glyphs = BAR_GLYPH * length
            table.add_row(str(label), f"{value:,}", glyphs)

        self.console.print(table)

        handle = next(self._ids)
        self.charts[handle] = (title, kind)
        return handle

    def destroy(self, handle: int) -> None:
        self.charts.pop(handle, None)
