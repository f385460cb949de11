"""
Pytest configuration and fixtures for watchlens tests.
"""

from __future__ import annotations

from typing import Dict, List

import pytest

from watchlens.config.settings import Settings
from watchlens.services.interfaces import ArchiveReaderInterface

from tests.factories.takeout_html_factory import history_page, watched_entry

HISTORY_ENTRY = "Takeout/YouTube and YouTube Music/history/watch-history.html"
SUBSCRIPTIONS_ENTRY = (
    "Takeout/YouTube and YouTube Music/subscriptions/subscriptions.csv"
)

SUBSCRIPTIONS_CSV = (
    "Channel Id,Channel Url,Channel Title\n"
    "UCuAXFkgsw1L7xaCfnd5JJOw,http://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw,Rick Astley\n"
    "\n"
    "UC_x5XG1OV2P6uZZ5FSM9Ttw,http://www.youtube.com/channel/UC_x5XG1OV2P6uZZ5FSM9Ttw,Google Developers\n"
)


class InMemoryArchiveReader(ArchiveReaderInterface):
    """Archive reader backed by a dict of entry name to text."""

    def __init__(self, entries: Dict[str, str]) -> None:
        self.entries = entries
        self.reads: List[str] = []

    def names(self) -> List[str]:
        return list(self.entries)

    def read_bytes(self, name: str) -> bytes:
        self.reads.append(name)
        return self.entries[name].encode("utf-8")


@pytest.fixture
def test_settings(tmp_path):
    """Settings pinned to UTC with a temporary export directory."""
    return Settings(timezone="UTC", export_dir=tmp_path / "exports", _env_file=None)


@pytest.fixture
def sample_history_html():
    """A watch-history page with three valid entries."""
    return history_page(
        [
            watched_entry(
                title="Never Gonna Give You Up",
                date_text="Jan 5, 2024, 10:15:32 PM EST",
            ),
            watched_entry(
                title="Python Tutorial for Beginners",
                video_url="https://www.youtube.com/watch?v=_uQrJ0TkZlc",
                channel_name="Programming with Mosh",
                channel_url="https://www.youtube.com/channel/UCWv7vMbMWH4-V0ZXdmDpPBA",
                date_text="Dec 31, 2023, 9:00:00 AM UTC",
            ),
            watched_entry(
                title="Together Forever",
                video_url="https://www.youtube.com/watch?v=yPYZpwSpKmA",
                date_text="Dec 30, 2023, 11:45:10 PM UTC",
            ),
        ]
    )


@pytest.fixture
def in_memory_archive(sample_history_html):
    """An archive containing both the history page and the subscriptions CSV."""
    return InMemoryArchiveReader(
        {
            "Takeout/archive_browser.html": "<html></html>",
            HISTORY_ENTRY: sample_history_html,
            SUBSCRIPTIONS_ENTRY: SUBSCRIPTIONS_CSV,
        }
    )
