# topmark:header:start
#
#   project      : FileAssoc
#   file         : exit_codes.py
#   file_relpath : src/fileassoc/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FileAssoc CLI.

Values follow the BSD `sysexits` convention where practical so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FileAssoc CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error).
        UNCLASSIFIED: ``classify --strict`` found names no rule applies to.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
    """

    SUCCESS = 0
    FAILURE = 1
    UNCLASSIFIED = 3

    USAGE_ERROR = 64  # EX_USAGE
