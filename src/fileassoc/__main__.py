# topmark:header:start
#
#   project      : FileAssoc
#   file         : __main__.py
#   file_relpath : src/fileassoc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FileAssoc via ``python -m fileassoc``.

Delegates directly to :func:`fileassoc.cli.main.cli`, so the module interface
and the ``fileassoc`` console script share a single entry point.

Examples:
    Classify a few names::

        python -m fileassoc classify --assoc python='*.py' setup.py README
"""

from __future__ import annotations

from fileassoc.cli.main import cli

if __name__ == "__main__":
    cli()
