"""Core git operations."""

import logging
import subprocess
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def run_git(
    *args: str,
    repo: Path | None = None,
    check: bool = True,
    capture: bool = False,
    **kwargs: Any,
) -> subprocess.CompletedProcess:
    """
    Run a git command and return the result.

    Args:
        *args: Git command arguments (e.g., "status", "--porcelain")
        repo: Optional repository path. If None, runs in current directory.
        check: Whether to raise CalledProcessError on non-zero exit (default: True)
        capture: Whether to capture stdout/stderr (default: False)
        **kwargs: Additional arguments to pass to subprocess.run()

    Returns:
        CompletedProcess result

    Example:
        # Run in current directory
        run_git("status", "--short", capture=True)

        # Run in specific repo
        run_git("fetch", "origin", repo=Path("/path/to/repo"))
    """
    cmd = ["git"]

    if repo is not None:
        cmd.extend(["-C", str(repo)])

    cmd.extend(args)
    logger.debug("exec: %s", cmd)

    if capture:
        return subprocess.run(
            cmd, capture_output=True, text=True, check=check, **kwargs
        )

    return subprocess.run(cmd, check=check, **kwargs)


def read_git(*args: str, repo: Path | None = None) -> str:
    """
    Run a read-only git command and return its stdout.

    Only stdout is captured; git's own error text goes straight to the
    terminal so failures read exactly as they would from git.

    Raises:
        subprocess.CalledProcessError: If git exits non-zero.

    Example:
        sha = read_git("rev-parse", "HEAD~2")
    """
    result = run_git(*args, repo=repo, stdout=subprocess.PIPE, text=True)
    return result.stdout


def git_config(
    key: str,
    repo: Path | None = None,
    default: str | None = None,
) -> str | None:
    """
    Get a git config value.

    Args:
        key: Config key to retrieve (e.g., "user.name", "gx.remote")
        repo: Optional repository path. If None, uses current directory.
        default: Default value if config key is not set.

    Returns:
        Config value if set, otherwise default.

    Example:
        remote = git_config("gx.remote", default="origin")
    """
    result = run_git("config", key, repo=repo, capture=True, check=False)
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return default


def is_inside_repo(repo: Path | None = None) -> bool:
    """
    Check whether the path (or current directory) belongs to a git repository.

    Example:
        if not is_inside_repo():
            print("not a git repository")
    """
    result = run_git("rev-parse", "--git-dir", repo=repo, capture=True, check=False)
    return result.returncode == 0


def current_branch(repo: Path | None = None) -> str | None:
    """
    Get the currently checked out branch name.

    Args:
        repo: Optional repository path. If None, uses current directory.

    Returns:
        Name of the current branch, or None when HEAD is detached or
        cannot be resolved (e.g., a repository without commits).

    Example:
        branch = current_branch()
        branch = current_branch(Path("/path/to/repo"))
    """
    result = run_git(
        "rev-parse", "--abbrev-ref", "HEAD", repo=repo, capture=True, check=False
    )
    branch = result.stdout.strip()
    if result.returncode != 0 or not branch or branch == "HEAD":
        return None
    return branch


def commit_message(rev: str, repo: Path | None = None) -> str:
    """
    Get the full message (subject and body) of a commit.

    Trailing newlines are stripped; inner blank lines are kept.

    Raises:
        subprocess.CalledProcessError: If `rev` does not name a commit.

    Example:
        message = commit_message("HEAD~2")
    """
    return read_git("log", "-1", "--pretty=%B", rev, repo=repo).rstrip("\n")


def rev_parse(rev: str, repo: Path | None = None) -> str:
    """
    Resolve a revision to a full commit id.

    Raises:
        subprocess.CalledProcessError: If `rev` cannot be resolved.

    Example:
        base = rev_parse("HEAD~3")
    """
    return read_git("rev-parse", rev, repo=repo).strip()
