# topmark:header:start
#
#   project      : FileAssoc
#   file         : errors.py
#   file_relpath : src/fileassoc/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the FileAssoc library.

The association table itself never raises: "nothing changed" is reported by a
``False`` return. Errors surface where user-provided text is turned into
matchers and where `AssociationStore` is misused.
"""

from __future__ import annotations


class FileassocError(Exception):
    """Base class for all FileAssoc library errors."""


class InvalidMatcherError(FileassocError, ValueError):
    """Raised when a file name rule cannot be turned into a matcher.

    Attributes:
        rule (str): The offending rule text.
    """

    def __init__(self, rule: str, reason: str) -> None:
        super().__init__(f"Invalid file name rule {rule!r}: {reason}")
        self.rule: str = rule
