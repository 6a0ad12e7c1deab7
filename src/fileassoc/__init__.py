# topmark:header:start
#
#   project      : FileAssoc
#   file         : __init__.py
#   file_relpath : src/fileassoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FileAssoc package.

FileAssoc classifies file names into caller-owned file types by matching them
against ordered rules (extensions, exact names, wildcards, regular expressions).
It exposes a copy-on-write friendly association table, a small snapshot store
and a developer CLI.
"""

from __future__ import annotations

from fileassoc.errors import FileassocError, InvalidMatcherError
from fileassoc.labels import FileTypeLabel
from fileassoc.matchers import (
    ExactNameMatcher,
    ExtensionMatcher,
    FileNameMatcher,
    MatcherKind,
    RegexMatcher,
    WildcardMatcher,
    parse_matcher,
)
from fileassoc.store import AssociationStore
from fileassoc.table import Association, FileTypeAssocTable

__all__ = [
    "Association",
    "AssociationStore",
    "ExactNameMatcher",
    "ExtensionMatcher",
    "FileNameMatcher",
    "FileTypeAssocTable",
    "FileTypeLabel",
    "FileassocError",
    "InvalidMatcherError",
    "MatcherKind",
    "RegexMatcher",
    "WildcardMatcher",
    "parse_matcher",
]
