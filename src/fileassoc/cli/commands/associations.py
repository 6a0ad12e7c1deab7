# topmark:header:start
#
#   project      : FileAssoc
#   file         : associations.py
#   file_relpath : src/fileassoc/cli/commands/associations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileAssoc `associations` command.

Lists, per file type, the rules that survive in the table after all
``--assoc`` values have been applied. Extension rules overridden by a later
``--assoc`` no longer show up under their original file type.
"""

from __future__ import annotations

import json

import click

from fileassoc.cli.cmd_common import build_table
from fileassoc.cli.options import OutputFormat, association_options, output_format_option


@click.command(
    name="associations",
    help="List the effective rules per file type.",
)
@association_options
@output_format_option
def associations_command(*, assoc_specs: tuple[str, ...], output_format: str) -> None:
    """List effective rules per file type, in the order the types were first named."""
    table, labels = build_table(assoc_specs)

    rows: dict[str, list[str]] = {
        name: [m.presentable for m in table.associations_for(label)]
        for name, label in labels.items()
    }

    if OutputFormat(output_format) is OutputFormat.JSON:
        click.echo(json.dumps(rows, indent=2))
        return

    for name, rules in rows.items():
        click.echo(f"{name}: {', '.join(rules) if rules else '(none)'}")
