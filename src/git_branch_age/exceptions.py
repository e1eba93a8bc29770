"""Custom exception hierarchy for git-branch-age."""

from __future__ import annotations


class BranchAgeError(RuntimeError):
    """Base error for the CLI."""


class RepoOpenError(BranchAgeError):
    """Raised when the given path cannot be opened as a git repository."""


class BranchListError(BranchAgeError):
    """Raised when the local branches cannot be enumerated."""


class BranchLookupError(BranchAgeError):
    """Raised when a single branch cannot be resolved to its latest commit.

    Not fatal: the caller logs it and moves on to the next branch.
    """

    def __init__(self, step: str, branch: str, cause: BaseException | str):
        self.step = step
        self.branch = branch
        self.cause = cause
        super().__init__(f"{step} for {branch}: {cause}")


__all__ = [
    "BranchAgeError",
    "RepoOpenError",
    "BranchListError",
    "BranchLookupError",
]
