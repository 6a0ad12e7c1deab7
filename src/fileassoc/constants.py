# topmark:header:start
#
#   project      : FileAssoc
#   file         : constants.py
#   file_relpath : src/fileassoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileAssoc Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FILEASSOC_VERSION: str = get_version("fileassoc")

# Placeholder printed by the CLI for unclassified file names
UNCLASSIFIED: str = "-"
