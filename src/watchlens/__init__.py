"""
watchlens - Personal YouTube watch-history statistics.

Reads a Google Takeout export, recovers the watch history from its HTML
activity page and summarises it into rankings and time histograms.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "watchlens"
__email__ = "noreply@watchlens.dev"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
