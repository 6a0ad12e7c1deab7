# topmark:header:start
#
#   project      : FileAssoc
#   file         : cmd_common.py
#   file_relpath : src/fileassoc/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the FileAssoc commands."""

from __future__ import annotations

from fileassoc.cli.errors import FileassocUsageError
from fileassoc.config.logging import get_logger
from fileassoc.errors import InvalidMatcherError
from fileassoc.labels import FileTypeLabel
from fileassoc.matchers import parse_matcher
from fileassoc.table import FileTypeAssocTable

logger = get_logger(__name__)


def build_table(
    assoc_specs: tuple[str, ...] | list[str],
) -> tuple[FileTypeAssocTable[FileTypeLabel], dict[str, FileTypeLabel]]:
    """Build an association table from ``TYPE=RULE`` specs.

    One `FileTypeLabel` is created per distinct ``TYPE`` name; rules are added in
    the order given, so later extension rules override earlier ones.

    Args:
        assoc_specs (tuple[str, ...] | list[str]): The raw ``--assoc`` values.

    Returns:
        tuple[FileTypeAssocTable[FileTypeLabel], dict[str, FileTypeLabel]]: The table
            and the labels by name, in first-seen order.

    Raises:
        FileassocUsageError: If a spec is malformed or its rule is invalid.
    """
    table: FileTypeAssocTable[FileTypeLabel] = FileTypeAssocTable()
    labels: dict[str, FileTypeLabel] = {}
    for spec in assoc_specs:
        name, sep, rule = spec.partition("=")
        name = name.strip()
        if not sep or not name:
            raise FileassocUsageError(f"Invalid association {spec!r}: expected TYPE=RULE.")
        try:
            matcher = parse_matcher(rule)
        except InvalidMatcherError as exc:
            raise FileassocUsageError(str(exc)) from exc
        if name not in labels:
            labels[name] = FileTypeLabel(name)
        table.add(matcher, labels[name])
    logger.debug("Built %r from %d association(s)", table, len(assoc_specs))
    return table, labels
