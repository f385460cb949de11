"""
Takeout archive readers.

Google Takeout hands out ``.zip`` archives; people also unpack them before
pointing tools at them. Both shapes are exposed through
:class:`ArchiveReaderInterface` so the analysis pipeline never cares which
one it got.
"""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from pathlib import Path
from typing import List, Optional, Union

from watchlens.exceptions import InvalidArchiveError
from watchlens.services.interfaces import ArchiveReaderInterface

logger = logging.getLogger(__name__)


class ZipArchiveReader(ArchiveReaderInterface):
    """
    Read entries from a Takeout ``.zip`` archive.

    Parameters
    ----------
    source : Path | bytes
        Path to the archive on disk, or the archive's raw bytes.
    """

    def __init__(self, source: Union[Path, bytes]) -> None:
        description = "<bytes>" if isinstance(source, bytes) else str(source)
        handle = io.BytesIO(source) if isinstance(source, bytes) else source
        try:
            self._zip = zipfile.ZipFile(handle)
        except (zipfile.BadZipFile, OSError) as e:
            raise InvalidArchiveError(
                f"Not a valid .zip archive: {description}", source=description
            ) from e
        self.source = description
        self._names: Optional[List[str]] = None

    def names(self) -> List[str]:
        if self._names is None:
            self._names = [
                info.filename for info in self._zip.infolist() if not info.is_dir()
            ]
        return self._names

    def read_bytes(self, name: str) -> bytes:
        try:
            return self._zip.read(name)
        except (zipfile.BadZipFile, zlib.error, EOFError) as e:
            raise InvalidArchiveError(
                f"Entry {name} in {self.source} is corrupt: {e}", source=self.source
            ) from e

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ZipArchiveReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class DirectoryArchiveReader(ArchiveReaderInterface):
    """
    Read entries from an already-extracted Takeout folder.

    Parameters
    ----------
    root : Path
        The extracted folder (any level above ``YouTube and YouTube Music``).
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise InvalidArchiveError(
                f"Takeout folder not found at {self.root}", source=str(self.root)
            )
        self._names: Optional[List[str]] = None

    def names(self) -> List[str]:
        if self._names is None:
            self._names = sorted(
                path.relative_to(self.root).as_posix()
                for path in self.root.rglob("*")
                if path.is_file()
            )
        return self._names

    def read_bytes(self, name: str) -> bytes:
        path = self.root / name
        if not path.is_file():
            raise KeyError(name)
        return path.read_bytes()

    def close(self) -> None:
        pass

    def __enter__(self) -> "DirectoryArchiveReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_archive(path: Path) -> Union[ZipArchiveReader, DirectoryArchiveReader]:
    """
    Open a Takeout export from disk.

    Parameters
    ----------
    path : Path
        A ``.zip`` archive or an extracted Takeout folder.

    Raises
    ------
    InvalidArchiveError
        If the path is neither.
    """
    path = Path(path)
    if path.is_dir():
        logger.info(f"📁 Reading extracted Takeout folder {path}")
        return DirectoryArchiveReader(path)
    if path.is_file() and path.suffix.lower() == ".zip":
        logger.info(f"📦 Reading Takeout archive {path}")
        return ZipArchiveReader(path)
    raise InvalidArchiveError(
        f"Please provide a valid .zip file or extracted Takeout folder: {path}",
        source=str(path),
    )
