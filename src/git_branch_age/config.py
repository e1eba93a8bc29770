"""Layout and threshold defaults."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class Config:
    """Fixed output layout and freshness thresholds.

    There is no user-facing configuration; tests construct their own instances.
    """

    name_width: int = 32
    message_width: int = 64
    ellipsis: str = "..."
    timestamp_format: str = "%Y-%m-%d %H:%M"
    two_weeks: timedelta = timedelta(days=14)
    two_months: timedelta = timedelta(days=60)
    six_months: timedelta = timedelta(days=180)


DEFAULT_CONFIG = Config()
