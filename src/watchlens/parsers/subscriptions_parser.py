"""
Google Takeout subscriptions CSV parser.

Decodes ``subscriptions.csv`` into header-keyed records. Blank rows are
skipped and rows that do not line up with the header are dropped.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import List, Union

from watchlens.models import SubscriptionRecord

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def parse_subscriptions(text: Union[str, bytes]) -> List[SubscriptionRecord]:
    """
    Parse subscriptions CSV text into records, one per non-blank row.

    Parameters
    ----------
    text : str | bytes
        CSV content with a header row. Bytes are decoded as UTF-8.

    Returns
    -------
    List[SubscriptionRecord]
        Records in file order.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    reader = csv.DictReader(io.StringIO(text))
    subscriptions: List[SubscriptionRecord] = []
    skipped = 0

    for row in reader:
        # DictReader puts surplus cells under None and pads short rows with None
        if None in row or any(value is None for value in row.values()):
            skipped += 1
            logger.debug(f"Skipping malformed subscriptions row {reader.line_num}")
            continue

        if not any(value.strip() for value in row.values()):
            continue

        subscriptions.append(
            SubscriptionRecord(
                row={key.strip(): value for key, value in row.items()}
            )
        )

    if skipped:
        logger.warning(f"⚠️  Skipped {skipped} malformed subscriptions rows")
    logger.info(f"✅ Parsed {len(subscriptions)} subscriptions")
    return subscriptions
