"""
Abstract Base Class for Takeout archive access.

This interface defines the contract the analysis pipeline needs from an
export container, enabling:
- Zip archives and already-extracted folders behind one API
- Testability via in-memory implementations
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class ArchiveReaderInterface(ABC):
    """
    Abstract interface for reading named entries from a Takeout export.

    Entry names always use forward slashes, relative to the export root.

    Examples
    --------
    >>> class InMemoryArchive(ArchiveReaderInterface):
    ...     def names(self) -> List[str]:
    ...         return ["Takeout/YouTube and YouTube Music/history/watch-history.html"]
    """

    @abstractmethod
    def names(self) -> List[str]:
        """
        List every file entry in the export.

        Returns
        -------
        List[str]
            Entry names in container order.
        """
        pass

    @abstractmethod
    def read_bytes(self, name: str) -> bytes:
        """
        Read the raw content of an entry.

        Parameters
        ----------
        name : str
            Entry name as returned by :meth:`names`.

        Raises
        ------
        KeyError
            If the entry does not exist.
        InvalidArchiveError
            If the entry exists but its content cannot be read back.
        """
        pass

    def find_entry(self, suffix: str) -> Optional[str]:
        """
        Locate the first entry whose path ends with ``suffix``.

        Parameters
        ----------
        suffix : str
            Relative path suffix, e.g. ``history/watch-history.html``.

        Returns
        -------
        Optional[str]
            The matching entry name, or None when nothing matches.
        """
        for name in self.names():
            if name.endswith(suffix):
                return name
        return None

    def read_text(self, name: str) -> str:
        """Read an entry as UTF-8 text, dropping a leading byte-order mark."""
        return self.read_bytes(name).decode("utf-8-sig", errors="replace")
