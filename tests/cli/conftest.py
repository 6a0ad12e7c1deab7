# topmark:header:start
#
#   project      : FileAssoc
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FileAssoc through Click's test runner."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

import pytest
from click.testing import CliRunner, Result

from fileassoc.cli.exit_codes import ExitCode
from fileassoc.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Restore the root logger after each CLI run.

    The CLI reconfigures logging with a handler bound to the runner's stream;
    later tests must not log into that (closed) stream.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["classify", "a.py"]`.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command exited successfully without an exception."""
    assert result.exception is None, result.output
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:  # noqa: N802
    """Assert that the command failed with the FileAssoc usage error code."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
