"""
Tests for Takeout archive readers.
"""

from __future__ import annotations

import io
import zipfile

import pytest

from watchlens.exceptions import InvalidArchiveError
from watchlens.services import DirectoryArchiveReader, ZipArchiveReader, open_archive
from tests.conftest import HISTORY_ENTRY, SUBSCRIPTIONS_CSV, SUBSCRIPTIONS_ENTRY


def build_zip(entries):
    """Return zip archive bytes holding the given name to text mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, text in entries.items():
            archive.writestr(name, text)
    return buffer.getvalue()


@pytest.fixture
def takeout_dir(tmp_path, sample_history_html):
    """An extracted Takeout folder."""
    history = tmp_path / "Takeout" / HISTORY_ENTRY.split("Takeout/", 1)[1]
    history.parent.mkdir(parents=True)
    history.write_text(sample_history_html, encoding="utf-8")
    return tmp_path


class TestZipArchiveReader:
    """Test reading zip archives."""

    def test_from_bytes(self, sample_history_html):
        """Test entries can be listed and read from in-memory bytes."""
        data = build_zip(
            {HISTORY_ENTRY: sample_history_html, SUBSCRIPTIONS_ENTRY: SUBSCRIPTIONS_CSV}
        )

        with ZipArchiveReader(data) as reader:
            assert set(reader.names()) == {HISTORY_ENTRY, SUBSCRIPTIONS_ENTRY}
            assert reader.find_entry("history/watch-history.html") == HISTORY_ENTRY
            assert "Rick Astley" in reader.read_text(SUBSCRIPTIONS_ENTRY)

    def test_from_path(self, tmp_path):
        """Test an archive on disk is opened by path."""
        path = tmp_path / "takeout-001.zip"
        path.write_bytes(build_zip({"Takeout/a.txt": "hello"}))

        with ZipArchiveReader(path) as reader:
            assert reader.read_bytes("Takeout/a.txt") == b"hello"

    def test_directories_are_not_listed(self):
        """Test directory entries are excluded from names."""
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("Takeout/", "")
            archive.writestr("Takeout/a.txt", "x")

        with ZipArchiveReader(buffer.getvalue()) as reader:
            assert reader.names() == ["Takeout/a.txt"]

    def test_bad_bytes_raise(self):
        """Test bytes that are not a zip archive are rejected."""
        with pytest.raises(InvalidArchiveError) as exc_info:
            ZipArchiveReader(b"definitely not a zip")

        assert exc_info.value.source == "<bytes>"

    def test_read_text_strips_bom(self):
        """Test a UTF-8 BOM is removed when reading text."""
        with ZipArchiveReader(build_zip({"a.csv": "\ufeffChannel Id\n"})) as reader:
            assert reader.read_text("a.csv") == "Channel Id\n"

    def test_corrupt_entry_raises(self):
        """Test an entry whose bytes fail the CRC check is reported as invalid."""
        data = build_zip({"Takeout/a.txt": "hello world"})
        damaged = data.replace(b"hello world", b"hellO world")

        with ZipArchiveReader(damaged) as reader:
            with pytest.raises(InvalidArchiveError) as exc_info:
                reader.read_bytes("Takeout/a.txt")

        assert "Takeout/a.txt" in exc_info.value.message
        assert exc_info.value.source == "<bytes>"

    def test_find_entry_missing(self):
        """Test a missing suffix yields None."""
        with ZipArchiveReader(build_zip({"Takeout/a.txt": "x"})) as reader:
            assert reader.find_entry("history/watch-history.html") is None


class TestDirectoryArchiveReader:
    """Test reading extracted folders."""

    def test_names_are_relative_posix_paths(self, takeout_dir):
        """Test names look like zip entry names."""
        reader = DirectoryArchiveReader(takeout_dir)

        assert reader.names() == [HISTORY_ENTRY]
        assert reader.find_entry("history/watch-history.html") == HISTORY_ENTRY

    def test_read_bytes(self, takeout_dir, sample_history_html):
        """Test file contents are returned."""
        reader = DirectoryArchiveReader(takeout_dir)

        assert reader.read_text(HISTORY_ENTRY) == sample_history_html

    def test_missing_entry_raises_key_error(self, takeout_dir):
        """Test reading an unknown entry behaves like a zip archive."""
        with pytest.raises(KeyError):
            DirectoryArchiveReader(takeout_dir).read_bytes("nope.txt")

    def test_missing_folder_raises(self, tmp_path):
        """Test a folder that does not exist is rejected."""
        with pytest.raises(InvalidArchiveError):
            DirectoryArchiveReader(tmp_path / "missing")


class TestOpenArchive:
    """Test choosing a reader for a path."""

    def test_directory(self, takeout_dir):
        """Test folders get a directory reader."""
        with open_archive(takeout_dir) as reader:
            assert isinstance(reader, DirectoryArchiveReader)

    def test_zip_file(self, tmp_path):
        """Test .zip files get a zip reader."""
        path = tmp_path / "Takeout.ZIP"
        path.write_bytes(build_zip({"a.txt": "x"}))

        with open_archive(path) as reader:
            assert isinstance(reader, ZipArchiveReader)

    def test_other_file_is_rejected(self, tmp_path):
        """Test files that are not zip archives are rejected."""
        path = tmp_path / "watch-history.html"
        path.write_text("<html></html>", encoding="utf-8")

        with pytest.raises(InvalidArchiveError) as exc_info:
            open_archive(path)

        assert "valid .zip" in exc_info.value.message

    def test_missing_path_is_rejected(self, tmp_path):
        """Test a path that does not exist is rejected."""
        with pytest.raises(InvalidArchiveError):
            open_archive(tmp_path / "nothing.zip")

    def test_corrupt_zip_is_rejected(self, tmp_path):
        """Test a .zip file with bad contents is rejected."""
        path = tmp_path / "broken.zip"
        path.write_bytes(b"PK\x03\x04 truncated")

        with pytest.raises(InvalidArchiveError):
            open_archive(path)
