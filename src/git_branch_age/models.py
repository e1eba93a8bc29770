"""Dataclasses and enums shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Freshness(Enum):
    """Staleness bucket of a branch, ordered from fresh to most stale."""

    FRESH = 0
    TWO_WEEKS = 1
    TWO_MONTHS = 2
    SIX_MONTHS = 3

    @property
    def color(self) -> str | tuple[int, int, int]:
        """Terminal color understood by ``typer.style``."""
        return _COLORS[self]


_COLORS: dict[Freshness, str | tuple[int, int, int]] = {
    Freshness.FRESH: "green",
    Freshness.TWO_WEEKS: "yellow",
    Freshness.TWO_MONTHS: (255, 128, 0),
    Freshness.SIX_MONTHS: "red",
}


@dataclass(frozen=True)
class BranchSummary:
    """Latest commit information for one local branch."""

    name: str
    authored_at: datetime
    message: str
    sha: str

    @property
    def short_sha(self) -> str:
        return self.sha[:12]
