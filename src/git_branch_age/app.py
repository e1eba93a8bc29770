"""Main application orchestration."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from . import git, render
from .config import DEFAULT_CONFIG, Config
from .exceptions import BranchLookupError
from .models import BranchSummary

logger = logging.getLogger(__name__)


def run(
    repo_path: Path,
    now: datetime | None = None,
    config: Config = DEFAULT_CONFIG,
) -> list[BranchSummary]:
    """Print one colored line per local branch of the repository at ``repo_path``.

    Raises:
        RepoOpenError: the path is not a repository.
        BranchListError: the branches could not be enumerated.

    Branches that cannot be resolved are logged and skipped. Returns the
    summaries that were printed.
    """

    repo = git.open_repo(repo_path)
    try:
        names = git.list_branch_names(repo)
        now = now or datetime.now(timezone.utc)

        printed: list[BranchSummary] = []
        for name in names:
            try:
                summary = git.summarize_branch(repo, name)
            except BranchLookupError as exc:
                logger.warning("%s", exc)
                continue
            render.print_summary(summary, now=now, config=config)
            printed.append(summary)
        return printed
    finally:
        repo.close()
