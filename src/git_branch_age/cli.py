"""Typer CLI entrypoint for git-branch-age."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .app import run
from .exceptions import BranchAgeError

app = typer.Typer(
    help="Show the latest commit of every local branch, colored by how stale it is.",
    add_completion=False,
)

LOGGER_NAME = "git_branch_age"

_handler: logging.Handler | None = None


def configure_logging(verbose: bool) -> None:
    """Send package log records to stderr.

    A terminal gets rich output; anything else gets one plain line per record.
    """

    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if _handler is not None:
        logger.removeHandler(_handler)
    if sys.stderr.isatty():
        _handler = RichHandler(
            console=Console(stderr=True, soft_wrap=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        _handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(_handler)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-branch-age {__version__}")
        raise typer.Exit()


@app.command()
def main(
    repo_path: Path = typer.Argument(..., help="Path to the git repository to inspect."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-branch-age version and exit.",
    ),
) -> None:
    """Print each local branch with its latest commit date and subject.

    Lines are green for branches touched in the last two weeks, yellow past two
    weeks, orange past two months and red past six months.
    """
    _ = version  # handled via callback
    configure_logging(verbose)
    try:
        run(repo_path.expanduser())
    except BranchAgeError as exc:
        _fail(str(exc))


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
