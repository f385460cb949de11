"""
Google Takeout Analysis Service

Runs one analysis pass over a Takeout export:

- Watch History: HTML (``history/watch-history.html``), required
- Subscriptions: CSV (``subscriptions/subscriptions.csv``), optional

Each call to :meth:`TakeoutAnalysisService.analyze` starts from scratch;
nothing from a previous pass is reused.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config.settings import Settings
from ..exceptions import EmptyWatchHistoryError, HistoryNotFoundError
from ..models import AnalysisResult, ParseReport, SubscriptionRecord, WatchEvent
from ..parsers import HistoryParser, parse_subscriptions
from .aggregation_service import AggregationService
from .interfaces import ArchiveReaderInterface

logger = logging.getLogger(__name__)


class TakeoutAnalysisService:
    """
    Service for parsing and summarising a Takeout export.

    Parameters
    ----------
    settings : Settings
        Entry names, time zone and ranking size.
    history_parser : HistoryParser | None
        Parser override; built from ``settings`` when omitted.
    aggregation_service : AggregationService | None
        Aggregator override; built from ``settings`` when omitted.
    """

    def __init__(
        self,
        settings: Settings,
        history_parser: Optional[HistoryParser] = None,
        aggregation_service: Optional[AggregationService] = None,
    ) -> None:
        self.settings = settings
        tz = settings.get_tzinfo()
        self.history_parser = history_parser or HistoryParser(default_tz=tz)
        self.aggregation_service = aggregation_service or AggregationService(
            tz=tz,
            top_channels_limit=settings.top_channels_limit,
            timezone_name=settings.timezone_name,
        )

    def load_watch_history(
        self, reader: ArchiveReaderInterface
    ) -> Tuple[List[WatchEvent], ParseReport]:
        """
        Locate and parse the watch-history page.

        Raises
        ------
        HistoryNotFoundError
            If the archive has no watch-history entry.
        EmptyWatchHistoryError
            If the entry yields no watch events.
        """
        suffix = self.settings.history_entry_suffix
        entry = reader.find_entry(suffix)
        if entry is None:
            logger.error(f"❌ No archive entry ends with {suffix}")
            raise HistoryNotFoundError(entry_suffix=suffix)

        logger.info(f"📺 Parsing watch history from {entry}")
        events, report = self.history_parser.parse_with_report(reader.read_text(entry))

        if not events:
            logger.error(
                f"❌ No watch events recovered from {report.candidates} candidate blocks"
            )
            raise EmptyWatchHistoryError(candidates=report.candidates)

        return events, report

    def load_subscriptions(
        self, reader: ArchiveReaderInterface
    ) -> List[SubscriptionRecord]:
        """
        Locate and parse the subscriptions CSV.

        A missing entry is not an error; it yields no subscriptions.
        """
        suffix = self.settings.subscriptions_entry_suffix
        entry = reader.find_entry(suffix)
        if entry is None:
            logger.warning(f"⚠️  Subscriptions file not found (looked for {suffix})")
            return []

        logger.info(f"📺 Parsing subscriptions from {entry}")
        return parse_subscriptions(reader.read_text(entry))

    def analyze(self, reader: ArchiveReaderInterface) -> AnalysisResult:
        """
        Run a complete parse-and-aggregate pass.

        Parameters
        ----------
        reader : ArchiveReaderInterface
            The opened Takeout export.

        Returns
        -------
        AnalysisResult
            Parsed events and subscriptions plus their aggregates.
        """
        events, report = self.load_watch_history(reader)
        subscriptions = self.load_subscriptions(reader)

        logger.info("📊 Analyzing viewing patterns...")
        aggregates = self.aggregation_service.aggregate(events, subscriptions)

        logger.info(
            f"✅ Analyzed {aggregates.total_videos} videos from "
            f"{aggregates.unique_channels} channels, "
            f"{aggregates.total_subscriptions} subscriptions"
        )
        return AnalysisResult(
            events=events,
            subscriptions=subscriptions,
            aggregates=aggregates,
            parse_report=report,
        )
