"""
Verb handlers.

Each handler takes a `Runner` plus the verb's positional arguments, checks
its preconditions, and runs its git commands in order. Handlers return
normally on success and raise a `GxError` otherwise; the first failing git
command stops the sequence.

"""

import re

from .errors import InvalidArgumentError, MissingArgumentError
from .guards import require_branch, require_repo, resolve_branch
from .runner import Runner

_UNSIGNED_INT_RE = re.compile(r"[0-9]+")

MIN_FLATTEN_COUNT = 2


def _required(value: str | None, what: str) -> str:
    if not value:
        raise MissingArgumentError(f"{what} is required.")
    return value


def so(runner: Runner) -> None:
    """Show the working tree status."""
    require_repo(runner)
    runner.run("status")


def pullhard(runner: Runner) -> None:
    """Fetch the remote and hard-reset the current branch onto its remote copy."""
    branch = require_branch(runner)
    remote = runner.remote()

    runner.say(f"Fetching {remote}...")
    runner.run("fetch", remote)

    runner.say(f"Resetting to {remote}/{branch} (hard)...")
    runner.run("reset", "--hard", f"{remote}/{branch}")

    runner.say(f"Successfully reset to {remote}/{branch}")
    runner.say()
    so(runner)


def glog(runner: Runner, line_count: str | None = None) -> None:
    """Show the last `line_count` commits as a graph."""
    require_repo(runner)
    runner.run(
        "log",
        "-n", line_count or runner.log_lines(),
        f"--pretty=tformat:{runner.log_format()}",
        "--graph",
        "--date=iso-local",
    )


def gpu(runner: Runner) -> None:
    """Push the current branch."""
    branch = require_branch(runner)
    remote = runner.remote()

    runner.say(f"Pushing {branch} to {remote}...")
    runner.run("push", remote, branch)

    runner.say(f"Successfully pushed {branch}")


def gpuf(runner: Runner) -> None:
    """Force-push the current branch."""
    branch = require_branch(runner)
    remote = runner.remote()

    runner.say(f"Force pushing {branch} to {remote}...")
    runner.run("push", "--force", remote, branch)

    runner.say(f"Successfully force pushed {branch}")


def sad(runner: Runner) -> None:
    """Stage every change under the current directory, then show status."""
    require_repo(runner)

    runner.say("Adding all changes...")
    runner.run("add", ".")

    runner.say("Successfully added all changes")
    runner.say()
    so(runner)


def gcom(runner: Runner, message: str | None = None) -> None:
    """Commit staged changes with `message`."""
    require_repo(runner)
    message = _required(message, "commit message")

    runner.say(f'Committing with message: "{message}"')
    runner.run("commit", "-m", message)

    runner.say("Successfully committed")


def gcu(runner: Runner, branch_name: str | None = None) -> None:
    """Check out an existing branch, then show status."""
    require_repo(runner)
    branch_name = _required(branch_name, "branch name")

    runner.say(f"Checking out branch: {branch_name}")
    runner.run("checkout", branch_name)

    runner.say()
    so(runner)


def gcub(runner: Runner, branch_name: str | None = None) -> None:
    """Create a branch and push it with upstream tracking."""
    require_repo(runner)
    branch_name = _required(branch_name, "branch name")
    remote = runner.remote()

    runner.say(f"Creating and checking out branch: {branch_name}")
    runner.run("checkout", "-b", branch_name)

    runner.say(f"Pushing {branch_name} to {remote}...")
    runner.run("push", "-u", remote, branch_name)

    runner.say(f"Successfully created and pushed branch {branch_name}")


def stomp(runner: Runner, destination: str | None = None) -> None:
    """Force-push the current branch over `destination` on the remote."""
    require_repo(runner)
    destination = _required(destination, "branch name")
    branch = resolve_branch(runner)
    remote = runner.remote()

    runner.say(
        f"WARNING: About to force push current branch '{branch}'"
        f" over destination branch '{destination}'"
    )
    runner.say(f"Force pushing {branch} to {destination}...")
    runner.run("push", remote, f"{branch}:{destination}", "--force")

    runner.say(f"Successfully stomped {destination} with {branch}")


def parse_flatten_count(value: str | None) -> int:
    """
    Validate the commit count given to `flatten`.

    Raises:
        MissingArgumentError: If no count was given.
        InvalidArgumentError: If the count is not an unsigned integer
            or is smaller than 2.

    >>> parse_flatten_count("3")
    3

    """
    value = _required(value, "number of commits to flatten")
    if not _UNSIGNED_INT_RE.fullmatch(value):
        raise InvalidArgumentError("number of commits must be a positive integer.")
    count = int(value)
    if count < MIN_FLATTEN_COUNT:
        raise InvalidArgumentError(
            f"need at least {MIN_FLATTEN_COUNT} commits to flatten."
        )
    return count


def flatten(runner: Runner, count: str | None = None) -> None:
    """
    Squash the last `count` commits into one.

    The new commit reuses the message of the oldest squashed commit. The
    branch is moved with a soft reset so the working tree and index keep
    every change; nothing is rolled back if a later step fails.

    """
    require_repo(runner)
    num_commits = parse_flatten_count(count)

    runner.say(f"Flattening last {num_commits} commits...")

    message = runner.commit_message(f"HEAD~{num_commits - 1}")
    base_commit = runner.rev_parse(f"HEAD~{num_commits}")

    runner.say("Resetting to base commit...")
    runner.run("reset", "--soft", base_commit)

    runner.say("Re-committing with message from oldest commit...")
    runner.run("commit", "-m", message)

    runner.say(f"Successfully flattened last {num_commits} commits")
