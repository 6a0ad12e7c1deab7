# topmark:header:start
#
#   project      : FileAssoc
#   file         : classify.py
#   file_relpath : src/fileassoc/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileAssoc `classify` command.

Builds an association table from ``--assoc`` rules and prints the file type of
each NAME. Names are classified as strings only; the file system is never
consulted.
"""

from __future__ import annotations

import json

import click

from fileassoc.cli.cmd_common import build_table
from fileassoc.cli.exit_codes import ExitCode
from fileassoc.cli.options import OutputFormat, association_options, output_format_option
from fileassoc.config.logging import get_logger
from fileassoc.constants import UNCLASSIFIED

logger = get_logger(__name__)


@click.command(
    name="classify",
    help="Classify file names against association rules.",
    epilog="""
Generic rules (exact names, wildcards, regexes) are tried in the order given and
always take precedence over extension rules ('*.ext').
""",
)
@association_options
@output_format_option
@click.option(
    "--strict",
    is_flag=True,
    help=f"Exit with code {int(ExitCode.UNCLASSIFIED)} if any name is unclassified.",
)
@click.argument("names", nargs=-1)
def classify_command(
    *,
    assoc_specs: tuple[str, ...],
    output_format: str,
    strict: bool,
    names: tuple[str, ...],
) -> None:
    """Print the file type of each NAME.

    Args:
        assoc_specs (tuple[str, ...]): ``TYPE=RULE`` association specs.
        output_format (str): ``text`` or ``json``.
        strict (bool): Fail when a name is not classified.
        names (tuple[str, ...]): File names (or paths) to classify.
    """
    ctx = click.get_current_context()
    table, _labels = build_table(assoc_specs)

    results: list[tuple[str, str | None]] = []
    for name in names:
        file_type = table.find(name)
        logger.info("%s -> %s", name, file_type.name if file_type is not None else UNCLASSIFIED)
        results.append((name, file_type.name if file_type is not None else None))

    if OutputFormat(output_format) is OutputFormat.JSON:
        payload = [{"name": name, "file_type": ft} for name, ft in results]
        click.echo(json.dumps(payload, indent=2))
    else:
        for name, ft in results:
            click.echo(f"{name}\t{ft if ft is not None else UNCLASSIFIED}")

    if strict and any(ft is None for _name, ft in results):
        ctx.exit(ExitCode.UNCLASSIFIED)
