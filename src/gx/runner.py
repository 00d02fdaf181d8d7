"""Echo-then-execute access to git for verb handlers."""

import logging
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

import click

from . import config, git
from .errors import GitCommandError

logger = logging.getLogger(__name__)

ECHO_PREFIX = ">> "


class Runner:
    """
    Run git on behalf of a verb handler.

    `run` narrates a command on stdout before executing it; the query
    methods are silent lookups. Every git failure becomes a
    `GitCommandError` carrying git's exit status.

    Tests substitute a subclass that records argument vectors instead of
    spawning git.
    """

    def __init__(
        self,
        repo: Path | None = None,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self.repo = repo
        self._echo = echo

    def say(self, message: str = "") -> None:
        """Print a narration line."""
        self._echo(message)

    def run(self, *args: str) -> None:
        """
        Echo `git <args>` and run it, output going straight to the terminal.

        Raises:
            GitCommandError: If git exits non-zero.
        """
        self._echo(ECHO_PREFIX + shlex.join(["git", *args]))
        result = git.run_git(*args, repo=self.repo, check=False)
        if result.returncode != 0:
            logger.debug("git %s failed with status %d", args[0], result.returncode)
            raise GitCommandError(args, result.returncode)

    def inside_repo(self) -> bool:
        return git.is_inside_repo(self.repo)

    def current_branch(self) -> str | None:
        return git.current_branch(self.repo)

    def commit_message(self, rev: str) -> str:
        try:
            return git.commit_message(rev, repo=self.repo)
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(["log", "-1", "--pretty=%B", rev], exc.returncode) from exc

    def rev_parse(self, rev: str) -> str:
        try:
            return git.rev_parse(rev, repo=self.repo)
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(["rev-parse", rev], exc.returncode) from exc

    def remote(self) -> str:
        return config.get_remote(self.repo)

    def log_lines(self) -> str:
        return config.get_log_lines(self.repo)

    def log_format(self) -> str:
        return config.get_log_format(self.repo)
