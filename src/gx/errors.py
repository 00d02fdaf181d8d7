"""Error types and their exit statuses.

Each error is a `click.ClickException`, so click's standalone mode prints
`Error: <message>` on stderr and exits with the error's `exit_code`.
"""

import shlex
from collections.abc import Sequence

import click

EXIT_USAGE = 1
EXIT_NOT_A_REPOSITORY = 2
EXIT_UNKNOWN_VERB = 2
EXIT_DETACHED = 3


class GxError(click.ClickException):
    """Base class for errors reported by gx."""

    exit_code = EXIT_USAGE


class MissingArgumentError(GxError):
    """A verb was called without its required argument."""

    exit_code = EXIT_USAGE


class InvalidArgumentError(GxError):
    """A verb argument failed validation."""

    exit_code = EXIT_USAGE


class NotARepositoryError(GxError):
    """The working directory is not inside a git repository."""

    exit_code = EXIT_NOT_A_REPOSITORY

    def __init__(self, message: str = "not a git repository.") -> None:
        super().__init__(message)


class DetachedHeadError(GxError):
    """The current branch could not be resolved."""

    exit_code = EXIT_DETACHED

    def __init__(
        self,
        message: str = "could not determine current branch (detached HEAD?).",
    ) -> None:
        super().__init__(message)


class GitCommandError(GxError):
    """
    A git command exited non-zero.

    The exit status is git's own, so callers see exactly what git returned.
    """

    def __init__(self, args: Sequence[str], returncode: int) -> None:
        self.git_args = list(args)
        self.returncode = returncode
        self.exit_code = returncode
        super().__init__(
            f"'{shlex.join(['git', *self.git_args])}' exited with status {returncode}."
        )
