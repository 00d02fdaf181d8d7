"""Settings read from git config under the `gx.*` namespace."""

from pathlib import Path

from .git import git_config

DEFAULT_REMOTE = "origin"
DEFAULT_LOG_LINES = "20"
DEFAULT_LOG_FORMAT = (
    "%C(auto)%H %C(green) %ad%x08%x08%x08%x08%x08%x08%C(reset)%C(auto)"
    " | %s%d %C(cyan)[%aE]%C(reset)"
)


def get_gx_config(
    key: str,
    repo: Path | None = None,
    default: str | None = None,
) -> str | None:
    """
    Get a gx configuration value.

    Reads from git config under the `gx.*` namespace.

    Args:
        key: Config key without the "gx." prefix (e.g., "remote").
        repo: Optional repository path. If None, uses current directory.
        default: Default value if config key is not set.

    Returns:
        Config value if set, otherwise default.

    Example:
        remote = get_gx_config("remote", default="origin")

    """
    return git_config(f"gx.{key}", repo=repo, default=default)


def get_remote(repo: Path | None = None) -> str:
    """
    Get the remote that push and pull verbs talk to.

    Reads from `gx.remote`.
    Default: `"origin"`

    """
    return get_gx_config("remote", repo=repo) or DEFAULT_REMOTE


def get_log_lines(repo: Path | None = None) -> str:
    """
    Get the number of entries `glog` shows when no count is given.

    Reads from `gx.logLines`.
    Default: `"20"`

    """
    return get_gx_config("logLines", repo=repo) or DEFAULT_LOG_LINES


def get_log_format(repo: Path | None = None) -> str:
    """
    Get the pretty format used by `glog`.

    Reads from `gx.logFormat`.
    Default: hash, date, subject, refs and author email on one line.

    """
    return get_gx_config("logFormat", repo=repo) or DEFAULT_LOG_FORMAT
