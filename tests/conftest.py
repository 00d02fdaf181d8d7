"""Shared pytest fixtures for gx tests."""

import shlex
import subprocess
from pathlib import Path

import pytest

from gx.errors import GitCommandError
from gx.runner import ECHO_PREFIX, Runner


@pytest.fixture(autouse=True)
def isolated_git_env(tmp_path, monkeypatch):
    """Keep the user's and system's git config out of the tests."""
    global_config = tmp_path / "gitconfig"
    global_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    # Stop git from discovering a repository above the temp dir
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))


def git(repo: Path, *args: str) -> str:
    """Run git in `repo` for test setup and return stripped stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo, check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


def make_commit(repo: Path, message: str, filename: str | None = None) -> str:
    """Write a file, commit it with `message`, and return the new commit id."""
    path = repo / (filename or f"{message.replace(' ', '_')}.txt")
    path.write_text(f"{message}\n")
    git(repo, "add", path.name)
    git(repo, "commit", "-m", message)
    return git(repo, "rev-parse", "HEAD")


@pytest.fixture
def git_repo(tmp_path):
    """
    Create a temporary git repository for testing.

    Returns:
        Path: Path to the temporary git repository
    """
    repo = tmp_path / "test-repo"
    repo.mkdir()

    git(repo, "init", "-b", "main")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "commit.gpgsign", "false")

    # Create initial commit
    (repo / "README.md").write_text("# Test Repo\n")
    git(repo, "add", "README.md")
    git(repo, "commit", "-m", "Initial commit")

    return repo


@pytest.fixture
def git_repo_with_remote(tmp_path, git_repo):
    """
    Create a git repository with a remote (bare repo).

    Returns:
        tuple: (main_repo_path, remote_repo_path)
    """
    remote_repo = tmp_path / "remote"
    remote_repo.mkdir()
    git(remote_repo, "init", "--bare", "-b", "main")

    git(git_repo, "remote", "add", "origin", str(remote_repo))
    git(git_repo, "push", "-u", "origin", "main")

    return git_repo, remote_repo


@pytest.fixture
def not_a_repo(tmp_path):
    """An empty directory outside any git repository."""
    path = tmp_path / "plain-dir"
    path.mkdir()
    return path


class FakeRunner(Runner):
    """
    Runner that records git argument vectors instead of running git.

    Args:
        inside_repo: Result of the repository check.
        branch: Current branch, or None for a detached HEAD.
        messages: Commit messages keyed by revision.
        revs: Commit ids keyed by revision.
        fail_on: A git subcommand (e.g. "push") that fails with status 1.
        remote: Configured remote name.
    """

    def __init__(
        self,
        *,
        inside_repo: bool = True,
        branch: str | None = "main",
        messages: dict[str, str] | None = None,
        revs: dict[str, str] | None = None,
        fail_on: str | None = None,
        remote: str = "origin",
    ) -> None:
        self.lines: list[str] = []
        super().__init__(echo=self.lines.append)
        self.calls: list[tuple[str, ...]] = []
        self.queries: list[tuple[str, ...]] = []
        self.repo_checks = 0
        self._inside_repo = inside_repo
        self._branch = branch
        self._messages = messages or {}
        self._revs = revs or {}
        self._fail_on = fail_on
        self._remote = remote

    def run(self, *args: str) -> None:
        self._echo(ECHO_PREFIX + shlex.join(["git", *args]))
        self.calls.append(args)
        if args[0] == self._fail_on:
            raise GitCommandError(args, 1)

    def inside_repo(self) -> bool:
        self.repo_checks += 1
        return self._inside_repo

    def current_branch(self) -> str | None:
        return self._branch

    def commit_message(self, rev: str) -> str:
        self.queries.append(("log", rev))
        if rev not in self._messages:
            raise GitCommandError(["log", "-1", "--pretty=%B", rev], 128)
        return self._messages[rev]

    def rev_parse(self, rev: str) -> str:
        self.queries.append(("rev-parse", rev))
        if rev not in self._revs:
            raise GitCommandError(["rev-parse", rev], 128)
        return self._revs[rev]

    def remote(self) -> str:
        return self._remote

    def log_lines(self) -> str:
        return "20"

    def log_format(self) -> str:
        return "%h %s"


@pytest.fixture
def fake_runner():
    """Factory for `FakeRunner` instances."""
    return FakeRunner
