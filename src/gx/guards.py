"""Precondition checks shared by the verb handlers."""

import enum
import logging
from dataclasses import dataclass

from .errors import DetachedHeadError, NotARepositoryError
from .runner import Runner

logger = logging.getLogger(__name__)


class RepoStatus(enum.Enum):
    OK = "ok"
    NOT_A_REPOSITORY = "not-a-repository"
    DETACHED = "detached"


@dataclass(frozen=True)
class RepoCheck:
    """
    Outcome of checking the working directory before a verb runs.

    `branch` is only set when the check asked for the current branch and
    it resolved.

    """

    status: RepoStatus
    branch: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is RepoStatus.OK

    def raise_for_status(self) -> None:
        """Raise the error matching a failed check; do nothing when ok."""
        if self.status is RepoStatus.NOT_A_REPOSITORY:
            raise NotARepositoryError()
        if self.status is RepoStatus.DETACHED:
            raise DetachedHeadError()


def check_repo(runner: Runner, *, need_branch: bool = False) -> RepoCheck:
    """
    Check that git can operate here, optionally resolving the current branch.

    Args:
        runner: Runner bound to the repository to check.
        need_branch: Also resolve the current branch; a detached or unborn
            HEAD yields `RepoStatus.DETACHED`.

    Returns:
        The tagged check result.

    """
    if not runner.inside_repo():
        check = RepoCheck(RepoStatus.NOT_A_REPOSITORY)
    elif not need_branch:
        check = RepoCheck(RepoStatus.OK)
    elif branch := runner.current_branch():
        check = RepoCheck(RepoStatus.OK, branch)
    else:
        check = RepoCheck(RepoStatus.DETACHED)

    logger.debug("repo check: %s", check)
    return check


def require_repo(runner: Runner) -> None:
    """Raise `NotARepositoryError` unless inside a git repository."""
    check_repo(runner).raise_for_status()


def require_branch(runner: Runner) -> str:
    """Return the current branch, raising if outside a repo or detached."""
    check = check_repo(runner, need_branch=True)
    check.raise_for_status()
    assert check.branch
    return check.branch


def resolve_branch(runner: Runner) -> str:
    """
    Return the current branch of a repository already checked by `require_repo`.

    Raises:
        DetachedHeadError: If HEAD is detached or unborn.

    """
    if branch := runner.current_branch():
        return branch
    raise DetachedHeadError()
