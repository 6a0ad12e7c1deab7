# topmark:header:start
#
#   project      : FileAssoc
#   file         : errors.py
#   file_relpath : src/fileassoc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FileAssoc CLI.

Raise these in commands to signal errors with a standardized message and exit
code; Click prints the message and exits.
"""

from __future__ import annotations

import click

from fileassoc.cli.exit_codes import ExitCode


class FileassocCliError(click.ClickException):
    """Base class for all FileAssoc CLI errors."""

    exit_code = ExitCode.FAILURE


class FileassocUsageError(FileassocCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR
