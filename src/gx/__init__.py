"""Short verbs for everyday git chores.

Each verb maps onto one or two git commands, echoing every command before it
runs and reporting failures with a distinct exit status.
"""

# Re-export the public API from submodules
from .errors import (
    DetachedHeadError,
    GitCommandError,
    GxError,
    InvalidArgumentError,
    MissingArgumentError,
    NotARepositoryError,
)
from .git import (
    commit_message,
    current_branch,
    is_inside_repo,
    rev_parse,
    run_git,
)
from .guards import (
    RepoCheck,
    RepoStatus,
    check_repo,
    require_branch,
    require_repo,
    resolve_branch,
)
from .runner import Runner

__all__ = (
    "DetachedHeadError",
    "GitCommandError",
    "GxError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "NotARepositoryError",
    "RepoCheck",
    "RepoStatus",
    "Runner",
    "check_repo",
    "commit_message",
    "current_branch",
    "is_inside_repo",
    "require_branch",
    "require_repo",
    "resolve_branch",
    "rev_parse",
    "run_git",
)
