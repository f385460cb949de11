"""
Google Takeout watch-history HTML parser.

Recovers watch events from the ``watch-history.html`` activity page of a
YouTube Takeout export. The page is a human-oriented export, not a data
format, so every record is validated step by step and anything that does
not fit the known layout is skipped rather than guessed at.

A record block looks like::

    <div class="content-cell mdl-cell mdl-cell--6-col mdl-typography--body-1">
      Watched <a href="https://www.youtube.com/watch?v=...">Title</a><br>
      <a href="https://www.youtube.com/channel/UC...">Channel</a><br>
      Jan 5, 2024, 10:15:32 PM EST<br>
    </div>
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, ValidationError

from watchlens.exceptions import HistoryParsingError
from watchlens.models import (
    CHANNEL_NAMESPACE_MARKER,
    ParseReport,
    RejectionReason,
    WatchEvent,
)

logger = logging.getLogger(__name__)

_HOUR = 3600

# Abbreviations seen in Takeout exports; dateutil cannot resolve these alone.
TIMEZONE_ABBREVIATIONS: Dict[str, int] = {
    "UTC": 0,
    "GMT": 0,
    "WET": 0,
    "WEST": 1 * _HOUR,
    "BST": 1 * _HOUR,
    "CET": 1 * _HOUR,
    "CEST": 2 * _HOUR,
    "EET": 2 * _HOUR,
    "EEST": 3 * _HOUR,
    "MSK": 3 * _HOUR,
    "IST": 5 * _HOUR + 1800,
    "JST": 9 * _HOUR,
    "KST": 9 * _HOUR,
    "AEST": 10 * _HOUR,
    "AEDT": 11 * _HOUR,
    "NZST": 12 * _HOUR,
    "NZDT": 13 * _HOUR,
    "AST": -4 * _HOUR,
    "ADT": -3 * _HOUR,
    "EST": -5 * _HOUR,
    "EDT": -4 * _HOUR,
    "CST": -6 * _HOUR,
    "CDT": -5 * _HOUR,
    "MST": -7 * _HOUR,
    "MDT": -6 * _HOUR,
    "PST": -8 * _HOUR,
    "PDT": -7 * _HOUR,
    "AKST": -9 * _HOUR,
    "AKDT": -8 * _HOUR,
    "HST": -10 * _HOUR,
}

_WHITESPACE_RE = re.compile(r"\s+")

# Two fill-ins that differ in year, month and day
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


class HistoryLayout(BaseModel):
    """
    Positional assumptions about the Takeout watch-history layout.

    Google has changed this page before; when it changes again, this is
    the only place that should need editing.
    """

    record_selector: str = ".content-cell.mdl-cell--6-col.mdl-typography--body-1"
    action_prefix: str = "Watched"
    video_link_index: int = 0
    channel_link_index: int = 1
    date_segment_index: int = 2
    channel_marker: str = CHANNEL_NAMESPACE_MARKER

    @property
    def min_links(self) -> int:
        return max(self.video_link_index, self.channel_link_index) + 1

    model_config = ConfigDict(frozen=True)


DEFAULT_LAYOUT = HistoryLayout()


@dataclass(frozen=True)
class BlockOutcome:
    """Result of extracting one candidate block: an event or a rejection."""

    event: Optional[WatchEvent] = None
    reason: Optional[RejectionReason] = None


def _reject(reason: RejectionReason) -> BlockOutcome:
    return BlockOutcome(reason=reason)


def normalize_date_text(text: str) -> str:
    """
    Normalize a Takeout date string before parsing.

    Collapses ``", "`` separators, non-breaking and narrow no-break
    spaces and runs of whitespace into single spaces.

    >>> normalize_date_text("Jan 5, 2024, 10:15:32 PM EST")
    'Jan 5 2024 10:15:32 PM EST'
    """
    collapsed = _WHITESPACE_RE.sub(" ", text).strip()
    return collapsed.replace(", ", " ")


def parse_timestamp(
    text: str, default_tz: tzinfo = timezone.utc
) -> Optional[datetime]:
    """
    Resolve Takeout date text to a timezone-aware instant.

    Returns None when the text cannot be resolved, including text that
    lacks a year, month or day. Text without a zone (or with an unknown
    abbreviation) is interpreted in ``default_tz``.
    """
    cleaned = normalize_date_text(text)
    if not cleaned:
        return None
    try:
        parsed = date_parser.parse(
            cleaned, default=_FILL_DEFAULTS[0], tzinfos=TIMEZONE_ABBREVIATIONS
        )
        refill = date_parser.parse(
            cleaned, default=_FILL_DEFAULTS[1], tzinfos=TIMEZONE_ABBREVIATIONS
        )
    except (ValueError, OverflowError):
        return None
    # absent fields come from ``default``, so the two parses differ
    if parsed != refill:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    return parsed


def split_on_line_breaks(block: Tag) -> List[str]:
    """Split a block's contents into text segments at each ``<br>`` element."""
    segments: List[str] = [""]
    for child in block.children:
        if isinstance(child, Tag) and child.name == "br":
            segments.append("")
        elif isinstance(child, Comment):
            continue
        elif isinstance(child, NavigableString):
            segments[-1] += str(child)
        elif isinstance(child, Tag):
            segments[-1] += child.get_text()
    return segments


class HistoryParser:
    """
    Parser for the Takeout watch-history HTML page.

    Parameters
    ----------
    default_tz : tzinfo
        Zone attached to timestamps that carry no recognizable zone.
    layout : HistoryLayout
        Positional layout of the export; defaults to the current format.
    """

    def __init__(
        self,
        default_tz: tzinfo = timezone.utc,
        layout: HistoryLayout = DEFAULT_LAYOUT,
    ) -> None:
        self.default_tz = default_tz
        self.layout = layout

    def parse(self, markup: Union[str, bytes]) -> List[WatchEvent]:
        """
        Parse watch-history markup into watch events in document order.

        Malformed records are skipped; this only raises when ``markup`` is
        not markup at all.
        """
        events, _ = self.parse_with_report(markup)
        return events

    def parse_with_report(
        self, markup: Union[str, bytes]
    ) -> Tuple[List[WatchEvent], ParseReport]:
        """Parse markup and report how many blocks were skipped and why."""
        if not isinstance(markup, (str, bytes)):
            raise HistoryParsingError(
                f"Expected HTML text, got {type(markup).__name__}"
            )

        soup = BeautifulSoup(markup, "html.parser")
        blocks = soup.select(self.layout.record_selector)
        report = ParseReport(candidates=len(blocks))
        events: List[WatchEvent] = []

        logger.debug(f"Found {len(blocks)} candidate watch-history blocks")

        for index, block in enumerate(blocks):
            try:
                outcome = self.extract(block)
            except Exception as e:
                logger.warning(f"Could not parse entry {index}, skipping: {e}")
                outcome = _reject(RejectionReason.UNEXPECTED_ERROR)

            if outcome.event is not None:
                events.append(outcome.event)
            elif outcome.reason is not None:
                report.record_rejection(outcome.reason)
                if outcome.reason is not RejectionReason.NOT_WATCHED:
                    logger.debug(f"Skipped entry {index}: {outcome.reason.value}")

        report.parsed = len(events)
        logger.info(
            f"✅ Parsed {report.parsed} watch events from {report.candidates} blocks"
        )
        return events, report

    def extract(self, block: Tag) -> BlockOutcome:
        """Extract a single watch event from a candidate block."""
        layout = self.layout

        if not block.get_text().strip().startswith(layout.action_prefix):
            return _reject(RejectionReason.NOT_WATCHED)

        # Only links inside this block; neighbouring cells carry product links
        links = block.find_all("a")
        if len(links) < layout.min_links:
            return _reject(RejectionReason.MISSING_LINKS)

        video_link = links[layout.video_link_index]
        channel_link = links[layout.channel_link_index]

        channel_url = str(channel_link.get("href") or "")
        if layout.channel_marker not in channel_url:
            return _reject(RejectionReason.NOT_CHANNEL_LINK)

        video_title = video_link.get_text().strip()
        video_url = str(video_link.get("href") or "")
        channel_name = channel_link.get_text().strip()

        segments = split_on_line_breaks(block)
        if len(segments) <= layout.date_segment_index:
            return _reject(RejectionReason.MISSING_DATE)

        timestamp = parse_timestamp(
            segments[layout.date_segment_index], self.default_tz
        )
        if timestamp is None:
            return _reject(RejectionReason.INVALID_DATE)

        if not video_title or not channel_name:
            return _reject(RejectionReason.EMPTY_FIELD)

        try:
            event = WatchEvent(
                video_title=video_title,
                video_url=video_url,
                channel_name=channel_name,
                channel_url=channel_url,
                timestamp=timestamp,
            )
        except ValidationError:
            return _reject(RejectionReason.INVALID_RECORD)

        return BlockOutcome(event=event)


def parse_watch_history(
    markup: Union[str, bytes], default_tz: tzinfo = timezone.utc
) -> List[WatchEvent]:
    """Parse watch-history markup with the default layout."""
    return HistoryParser(default_tz=default_tz).parse(markup)
