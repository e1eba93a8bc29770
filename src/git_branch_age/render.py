"""Formatting and colored output for branch summaries."""

from __future__ import annotations

from datetime import datetime

import typer

from .config import DEFAULT_CONFIG, Config
from .freshness import classify
from .models import BranchSummary, Freshness


def format_message(message: str, config: Config = DEFAULT_CONFIG) -> str:
    """Reduce a commit message to a single display line.

    Multi-line messages keep only their first line. A single line longer than
    ``config.message_width`` is cut and suffixed with ``config.ellipsis``.
    """

    lines = message.rstrip("\r\n").split("\n")
    if len(lines) > 1:
        return lines[0].rstrip("\r")

    line = lines[0]
    if len(line) > config.message_width:
        line = line[: config.message_width] + config.ellipsis
    return line


def format_line(summary: BranchSummary, config: Config = DEFAULT_CONFIG) -> str:
    """Tab-separated name, timestamp and message for one branch."""
    stamp = summary.authored_at.strftime(config.timestamp_format)
    message = format_message(summary.message, config)
    return f"{summary.name:<{config.name_width}}\t{stamp}\t{message}"


def print_summary(
    summary: BranchSummary,
    now: datetime | None = None,
    config: Config = DEFAULT_CONFIG,
) -> Freshness:
    """Print ``summary`` to stdout in the color of its freshness bucket."""
    freshness = classify(summary.authored_at, now=now, config=config)
    typer.secho(format_line(summary, config), fg=freshness.color)
    return freshness
