"""
Configuration management module for watchlens.

Handles application settings, environment variables, time-zone selection
and the Takeout entry names the pipeline looks for.
"""

from __future__ import annotations

__all__: list[str] = []
