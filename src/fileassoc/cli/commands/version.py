# topmark:header:start
#
#   project      : FileAssoc
#   file         : version.py
#   file_relpath : src/fileassoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileAssoc `version` command."""

from __future__ import annotations

import click

from fileassoc.constants import FILEASSOC_VERSION


@click.command(name="version", help="Show the version of FileAssoc.")
def version_command() -> None:
    """Print the installed FileAssoc version."""
    click.echo(f"FileAssoc version {FILEASSOC_VERSION}")
