"""CLI entry point for gx."""

import logging
from pathlib import Path

import click

from . import verbs
from .errors import EXIT_UNKNOWN_VERB, EXIT_USAGE
from .runner import Runner

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Arguments such as "-3" reach the handler instead of failing as options;
# surplus arguments are dropped.
ARG_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}

EPILOG = """\b
Examples:
    gx flatten <number>
    gx gcom "commit message"
    gx gcu <branchname>
    gx gcub <branchname>
    gx glog [num_lines]
    gx gpu
    gx gpuf
    gx pullhard
    gx sad
    gx so
    gx stomp <branchname>
"""


class VerbGroup(click.Group):
    """Group that reports unknown verbs with the usage text and exit status 2."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            click.echo(f"Unknown subcommand: {cmd_name}", err=True)
            click.echo(ctx.get_help(), err=True)
            ctx.exit(EXIT_UNKNOWN_VERB)
        return super().resolve_command(ctx, args)


@click.group(
    cls=VerbGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    epilog=EPILOG,
)
@click.option(
    "-C",
    "repo",
    metavar="PATH",
    type=click.Path(file_okay=False, path_type=Path, resolve_path=True),
    help="Run as if gx was started in PATH.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each git call to stderr.")
@click.pass_context
def cli(ctx: click.Context, repo: Path | None, verbose: bool) -> None:
    """Short verbs for everyday git chores.

    Every git command is echoed with a ">> " prefix before it runs.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Runner(repo)
    logger.debug("repo: %s", ctx.obj.repo or "<cwd>")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(EXIT_USAGE)


@cli.command(name="help", context_settings=ARG_SETTINGS)
@click.pass_context
def help_(ctx: click.Context) -> None:
    """Show this message."""
    click.echo(ctx.parent.get_help())


@cli.command(context_settings=ARG_SETTINGS)
@click.pass_obj
def pullhard(runner: Runner) -> None:
    """Fetch and reset current branch to origin/<branch> on server."""
    verbs.pullhard(runner)


@cli.command(context_settings=ARG_SETTINGS)
@click.argument("num_lines", required=False)
@click.pass_obj
def glog(runner: Runner, num_lines: str | None) -> None:
    """Show git log with graph and pretty printing."""
    verbs.glog(runner, num_lines)


@cli.command(context_settings=ARG_SETTINGS)
@click.pass_obj
def gpu(runner: Runner) -> None:
    """Push current branch to server."""
    verbs.gpu(runner)


@cli.command(context_settings=ARG_SETTINGS)
@click.pass_obj
def gpuf(runner: Runner) -> None:
    """Force push current branch to server."""
    verbs.gpuf(runner)


@cli.command(context_settings=ARG_SETTINGS)
@click.pass_obj
def sad(runner: Runner) -> None:
    """Add all changes to staged list."""
    verbs.sad(runner)


@cli.command(context_settings=ARG_SETTINGS)
@click.argument("message", required=False)
@click.pass_obj
def gcom(runner: Runner, message: str | None) -> None:
    """Commit staged changes with a commit message locally."""
    verbs.gcom(runner, message)


@cli.command(context_settings=ARG_SETTINGS)
@click.pass_obj
def so(runner: Runner) -> None:
    """Show git status, what branch you're on, and changes."""
    verbs.so(runner)


@cli.command(context_settings=ARG_SETTINGS)
@click.argument("branch_name", required=False)
@click.pass_obj
def gcu(runner: Runner, branch_name: str | None) -> None:
    """Switch your current clone to point at another branch."""
    verbs.gcu(runner, branch_name)


@cli.command(context_settings=ARG_SETTINGS)
@click.argument("branch_name", required=False)
@click.pass_obj
def gcub(runner: Runner, branch_name: str | None) -> None:
    """Create a new branch and push local code to server."""
    verbs.gcub(runner, branch_name)


@cli.command(context_settings=ARG_SETTINGS)
@click.argument("destination", required=False)
@click.pass_obj
def stomp(runner: Runner, destination: str | None) -> None:
    """Force push current branch to destination branch on server."""
    verbs.stomp(runner, destination)


@cli.command(context_settings=ARG_SETTINGS)
@click.argument("count", required=False)
@click.pass_obj
def flatten(runner: Runner, count: str | None) -> None:
    """Flatten last N commits into one."""
    verbs.flatten(runner, count)


def main() -> None:
    cli(prog_name="gx")


if __name__ == "__main__":
    main()
