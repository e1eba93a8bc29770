"""Bucket commit timestamps by age."""

from __future__ import annotations

from datetime import datetime, timezone

from .config import DEFAULT_CONFIG, Config
from .models import Freshness


def classify(
    timestamp: datetime,
    now: datetime | None = None,
    config: Config = DEFAULT_CONFIG,
) -> Freshness:
    """Return the freshness bucket for ``timestamp`` relative to ``now``.

    Thresholds are strict: a commit exactly fourteen days old is still fresh.
    Naive datetimes are taken to be UTC; timestamps in the future are fresh.
    """

    age = _aware(now or datetime.now(timezone.utc)) - _aware(timestamp)
    if age > config.six_months:
        return Freshness.SIX_MONTHS
    if age > config.two_months:
        return Freshness.TWO_MONTHS
    if age > config.two_weeks:
        return Freshness.TWO_WEEKS
    return Freshness.FRESH


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
