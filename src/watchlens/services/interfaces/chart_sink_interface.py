"""
Abstract Base Class for chart rendering.

The analysis pipeline only produces labels and numeric series; how they
are drawn (terminal, browser, image) is up to the sink, which also owns
the lifecycle of what it has drawn.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence


class ChartKind(str, Enum):
    """Shape of a rendered series."""

    BAR = "bar"
    HORIZONTAL_BAR = "horizontal_bar"
    LINE = "line"


class ChartSinkInterface(ABC):
    """Abstract interface for a sink that renders labelled numeric series."""

    @abstractmethod
    def render_series(
        self,
        title: str,
        labels: Sequence[str],
        values: Sequence[int],
        kind: ChartKind = ChartKind.BAR,
    ) -> Any:
        """
        Render one labelled series.

        Parameters
        ----------
        title : str
            Chart title.
        labels : Sequence[str]
            One label per value.
        values : Sequence[int]
            Series values, same length as ``labels``.
        kind : ChartKind
            How the series should be drawn.

        Returns
        -------
        Any
            Opaque handle accepted by :meth:`destroy`.
        """
        pass

    @abstractmethod
    def destroy(self, handle: Any) -> None:
        """
        Release a previously rendered chart.

        Parameters
        ----------
        handle : Any
            Handle returned by :meth:`render_series`.
        """
        pass
