"""
Custom exceptions for the watchlens application.

This module defines domain-specific exceptions for the Takeout analysis
pipeline. Only archive-level problems raise; individual watch-history
records that cannot be recovered are skipped by the parser instead.
"""

from __future__ import annotations


class WatchlensError(Exception):
    """Base exception for all watchlens errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize WatchlensError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class InvalidArchiveError(WatchlensError):
    """
    Exception raised when the input is not a readable Takeout export.

    Raised for paths that are neither a zip archive nor an extracted
    Takeout folder, and for bytes that are not a zip archive.

    Attributes
    ----------
    message : str
        Human-readable error message.
    source : str | None
        Path or description of the rejected input.
    """

    def __init__(
        self,
        message: str = "Please provide a valid .zip Takeout archive",
        source: str | None = None,
    ) -> None:
        """
        Initialize InvalidArchiveError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        source : str | None, optional
            Path or description of the rejected input (default: None).
        """
        self.source = source
        super().__init__(message)


class HistoryNotFoundError(WatchlensError):
    """
    Exception raised when the archive has no watch-history entry.

    This is a fatal input error: without the history page there is
    nothing to analyze.

    Attributes
    ----------
    message : str
        Human-readable error message.
    entry_suffix : str
        The path suffix that was searched for.

    Examples
    --------
    >>> try:
    ...     service.load_watch_history(reader)
    ... except HistoryNotFoundError as e:
    ...     print(f"No entry ending in {e.entry_suffix}")
    ...     raise typer.Exit(1)
    """

    def __init__(
        self,
        entry_suffix: str,
        message: str | None = None,
    ) -> None:
        """
        Initialize HistoryNotFoundError.

        Parameters
        ----------
        entry_suffix : str
            The path suffix that was searched for.
        message : str | None, optional
            Human-readable error message; derived from the suffix when omitted.
        """
        self.entry_suffix = entry_suffix
        super().__init__(
            message
            or f"Could not find {entry_suffix} in the archive. Try a different part"
        )


class EmptyWatchHistoryError(WatchlensError):
    """
    Exception raised when the history entry yields no watch events.

    The entry was present but nothing in it matched the expected
    record layout, which usually means the export is empty or was
    produced in an unrecognized format.

    Attributes
    ----------
    message : str
        Human-readable error message.
    candidates : int
        Number of record blocks that were inspected.
    """

    def __init__(
        self,
        message: str = (
            "No watch history found. The HTML file might be empty "
            "or in an unrecognized format."
        ),
        candidates: int = 0,
    ) -> None:
        self.candidates = candidates
        super().__init__(message)


class HistoryParsingError(WatchlensError):
    """Raised when the history content cannot be interpreted as markup at all."""

    pass
