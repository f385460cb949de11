"""
Application settings and configuration management.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from watchlens import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="watchlens")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="WARNING")

    # Time bucketing (None means the machine's local zone)
    timezone: Optional[str] = Field(default=None)

    # Takeout layout
    history_entry_suffix: str = Field(default="history/watch-history.html")
    subscriptions_entry_suffix: str = Field(default="subscriptions/subscriptions.csv")

    # Analysis
    top_channels_limit: int = Field(default=10, ge=1)

    # Export
    export_dir: Path = Field(default=Path("./exports"))

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        """Validate that the time zone is a known IANA name."""
        if v is None or not v.strip():
            return None
        try:
            ZoneInfo(v.strip())
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v.strip()

    @field_validator("history_entry_suffix", "subscriptions_entry_suffix")
    @classmethod
    def validate_entry_suffix(cls, v: str) -> str:
        """Entry suffixes are matched against archive paths using forward slashes."""
        suffix = v.strip().replace("\\", "/")
        if not suffix:
            raise ValueError("Entry suffix cannot be empty")
        return suffix

    @field_validator("export_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Ensure directory paths are Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    def get_tzinfo(self) -> tzinfo:
        """
        Resolve the time zone used for date bucketing.

        Returns
        -------
        tzinfo
            The configured zone, or the machine's local zone when unset.
        """
        if self.timezone:
            return ZoneInfo(self.timezone)
        return local_tzinfo()

    @property
    def timezone_name(self) -> str:
        """Human-readable name of the bucketing zone."""
        if self.timezone:
            return self.timezone
        return datetime.now(local_tzinfo()).tzname() or "local"

    def create_directories(self) -> None:
        """Create required directories if they don't exist."""
        self.export_dir.mkdir(parents=True, exist_ok=True)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def local_tzinfo() -> tzinfo:
    """Return the operating system zone, including its daylight-saving rules."""
    return tz.tzlocal()


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
