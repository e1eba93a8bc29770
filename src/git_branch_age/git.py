"""Thin wrappers around GitPython for reading branches and commits."""

from __future__ import annotations

import logging
from pathlib import Path

from git import Commit, Head, Repo
from git.exc import GitError, InvalidGitRepositoryError, NoSuchPathError, ODBError

from .exceptions import BranchListError, BranchLookupError, RepoOpenError
from .models import BranchSummary

logger = logging.getLogger(__name__)

# Everything GitPython and gitdb raise while reading refs and objects.
_READ_ERRORS = (GitError, ODBError, ValueError, OSError)


def open_repo(path: Path) -> Repo:
    """Open the repository at exactly ``path``; parent directories are not searched."""

    try:
        repo = Repo(str(path))
    except NoSuchPathError as exc:
        raise RepoOpenError(f"could not open repo: path does not exist: {path}") from exc
    except InvalidGitRepositoryError as exc:
        raise RepoOpenError(f"could not open repo: not a git repository: {path}") from exc
    except _READ_ERRORS as exc:
        raise RepoOpenError(f"could not open repo: {exc}") from exc
    logger.debug("Opened repository %s", repo.git_dir)
    return repo


def list_branch_names(repo: Repo) -> list[str]:
    """Return the short names of all local branches."""

    try:
        names = [head.name for head in repo.branches]
    except _READ_ERRORS as exc:
        raise BranchListError(f"could not retrieve branches: {exc}") from exc
    logger.debug("Found %d local branches", len(names))
    return names


def resolve_branch(repo: Repo, name: str) -> Commit:
    """Resolve ``refs/heads/<name>`` to the commit it points at."""

    try:
        head = Head(repo, Head.to_full_path(name))
        commit = head.commit
    except _READ_ERRORS as exc:
        raise BranchLookupError("could not retrieve reference", name, exc) from exc
    logger.debug("Resolved %s to %s", name, commit.hexsha)
    return commit


def latest_commit(repo: Repo, name: str) -> Commit:
    """Return the newest commit, by committer time, reachable from branch ``name``."""

    tip = resolve_branch(repo, name)
    try:
        commits = repo.iter_commits(tip, max_count=1, date_order=True)
    except _READ_ERRORS as exc:
        raise BranchLookupError("could not retrieve commits", name, exc) from exc
    try:
        return next(commits)
    except StopIteration as exc:
        raise BranchLookupError("could not retrieve first commit", name, "history is empty") from exc
    except _READ_ERRORS as exc:
        raise BranchLookupError("could not retrieve first commit", name, exc) from exc


def summarize_branch(repo: Repo, name: str) -> BranchSummary:
    """Build the display summary for branch ``name`` from its latest commit."""
    commit = latest_commit(repo, name)
    message = commit.message
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    return BranchSummary(
        name=name,
        authored_at=commit.authored_datetime,
        message=message,
        sha=commit.hexsha,
    )
