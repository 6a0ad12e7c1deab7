# topmark:header:start
#
#   project      : FileAssoc
#   file         : labels.py
#   file_relpath : src/fileassoc/labels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identity-compared file type labels.

The association table treats categories as opaque handles compared with
``is``. `FileTypeLabel` is a ready-made handle for callers that do not have
their own category objects (the CLI and the test suite use it).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class FileTypeLabel:
    """Opaque, identity-compared file type handle.

    Two labels with the same name are still *different* file types: equality and
    hashing fall back to object identity (``eq=False``).

    Attributes:
        name (str): Human-readable identifier (e.g. ``"python"``).
        description (str): Optional free-form description.
    """

    name: str
    description: str = ""

    def __str__(self) -> str:
        return self.name
