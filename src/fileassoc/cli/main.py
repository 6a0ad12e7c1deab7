# topmark:header:start
#
#   project      : FileAssoc
#   file         : main.py
#   file_relpath : src/fileassoc/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the FileAssoc CLI.

Group-level options (verbosity) are resolved once and configure logging before
any subcommand runs. ``FILEASSOC_LOG_LEVEL`` takes precedence over ``-v``/``-q``.
"""

from __future__ import annotations

import click

from fileassoc.cli.commands.associations import associations_command
from fileassoc.cli.commands.classify import classify_command
from fileassoc.cli.commands.version import version_command
from fileassoc.cli.options import common_verbose_options, resolve_verbosity
from fileassoc.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize logging and shared state on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` receives ``log_level``.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.ensure_object(dict)
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    logger.debug("Log level set to %d", level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FileAssoc CLI: classify file names by association rules.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the FileAssoc CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'fileassoc classify --assoc TYPE=RULE NAME...'.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(classify_command)

cli.add_command(associations_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
