# topmark:header:start
#
#   project      : FileAssoc
#   file         : table.py
#   file_relpath : src/fileassoc/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Association table mapping file name matchers to file types.

`FileTypeAssocTable` holds two coupled indices over the same relation
(matcher -> file type):

* an *extension index* (``dict[str, T]``) for `ExtensionMatcher` rules, with
  exactly one file type per extension (last write wins), and
* a *generic list* of `Association` pairs for every other rule, kept in
  insertion order and tolerant of duplicates.

Lookups by file name always consult the generic list first (in insertion
order) and fall back to the extension index. This precedence is structural and
independent of the order in which rules were added to the two indices.

File types are opaque handles owned by the caller and are compared by
**identity** (``is``) everywhere in this module; the table never creates,
copies or inspects them.

Notes:
    * The table is not synchronized. Use `copy` to take a private working copy,
      mutate it, then publish it by swapping a shared reference
      (see `fileassoc.store.AssociationStore`). Readers of a previously
      published table never observe the edits.
    * No operation raises by design; ``remove``/``remove_all`` report
      "nothing changed" through a ``False`` return.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from fileassoc.config.logging import FileassocLogger, get_logger
from fileassoc.matchers import ExtensionMatcher, FileNameMatcher, MatcherKind
from fileassoc.utils.file import get_extension

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: FileassocLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Association(Generic[T]):
    """A matcher bound to a file type.

    Attributes:
        matcher (FileNameMatcher): The rule.
        file_type (T): The caller-owned file type handle.
    """

    matcher: FileNameMatcher
    file_type: T


def _extension_of(matcher: FileNameMatcher) -> str:
    return cast("ExtensionMatcher", matcher).extension


class FileTypeAssocTable(Generic[T]):
    """Ordered, two-index association table (see module docstring)."""

    def __init__(self) -> None:
        self._extension_mappings: dict[str, T] = {}
        self._matching_mappings: list[Association[T]] = []

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(extensions={len(self._extension_mappings)}, "
            f"generic={len(self._matching_mappings)})"
        )

    def __len__(self) -> int:
        return len(self._extension_mappings) + len(self._matching_mappings)

    def __bool__(self) -> bool:
        return bool(self._extension_mappings or self._matching_mappings)

    # --- Mutation ---

    def add(self, matcher: FileNameMatcher, file_type: T) -> None:
        """Bind ``matcher`` to ``file_type``.

        Extension rules overwrite any previous binding of the same extension
        (silently; the superseded file type is not reported). Other rules are
        appended to the generic list, even if an equal pair is already present.

        Args:
            matcher (FileNameMatcher): The rule to bind.
            file_type (T): The file type handle.
        """
        if matcher.kind is MatcherKind.EXTENSION:
            self._extension_mappings[_extension_of(matcher)] = file_type
        else:
            self._matching_mappings.append(Association(matcher, file_type))
        logger.trace("Associated %s with %r", matcher.presentable, file_type)

    def remove(self, matcher: FileNameMatcher, file_type: T) -> bool:
        """Remove one binding of ``matcher``.

        Extension rules are removed only if currently bound to exactly
        ``file_type``. For generic rules the *first* association with an equal
        matcher is removed whatever file type it is bound to; ``file_type`` is
        not consulted. Callers that need a category-checked removal of a generic
        rule should test `is_associated_with` first.

        Args:
            matcher (FileNameMatcher): The rule to unbind.
            file_type (T): The file type the rule is expected to be bound to.

        Returns:
            bool: True if an association was removed.
        """
        if matcher.kind is MatcherKind.EXTENSION:
            extension: str = _extension_of(matcher)
            if extension in self._extension_mappings and (
                self._extension_mappings[extension] is file_type
            ):
                del self._extension_mappings[extension]
                logger.trace("Removed extension rule %s", matcher.presentable)
                return True
            return False

        for index, assoc in enumerate(self._matching_mappings):
            if matcher == assoc.matcher:
                del self._matching_mappings[index]
                logger.trace("Removed rule %s (was %r)", matcher.presentable, assoc.file_type)
                return True
        return False

    def remove_all(self, file_type: T) -> bool:
        """Remove every association bound to ``file_type``.

        Args:
            file_type (T): The file type whose rules are dropped.

        Returns:
            bool: True if anything was removed.
        """
        stale: list[str] = [
            ext for ext, ft in self._extension_mappings.items() if ft is file_type
        ]
        for ext in stale:
            del self._extension_mappings[ext]

        kept: list[Association[T]] = [
            assoc for assoc in self._matching_mappings if assoc.file_type is not file_type
        ]
        removed_generic: int = len(self._matching_mappings) - len(kept)
        self._matching_mappings = kept

        changed: bool = bool(stale) or removed_generic > 0
        if changed:
            logger.trace(
                "Removed %d extension and %d generic rule(s) for %r",
                len(stale),
                removed_generic,
                file_type,
            )
        return changed

    # --- Queries ---

    def is_associated_with(self, file_type: T, matcher: FileNameMatcher) -> bool:
        """Return True if ``matcher`` is currently bound to exactly ``file_type``."""
        if matcher.kind is MatcherKind.EXTENSION:
            extension: str = _extension_of(matcher)
            return (
                extension in self._extension_mappings
                and self._extension_mappings[extension] is file_type
            )
        return any(
            matcher == assoc.matcher and assoc.file_type is file_type
            for assoc in self._matching_mappings
        )

    def find(self, file_name: str) -> T | None:
        """Return the file type for ``file_name``, or None if no rule applies.

        Generic rules are evaluated in insertion order and the first accepting
        rule wins. Only when none accepts is the file name's extension looked up
        in the extension index.

        Args:
            file_name (str): A bare file name or a path.

        Returns:
            T | None: The matching file type, if any.
        """
        for assoc in self._matching_mappings:
            if assoc.matcher.accept(file_name):
                return assoc.file_type
        return self._extension_mappings.get(get_extension(file_name))

    def find_by_matcher(self, matcher: FileNameMatcher) -> T | None:
        """Return the file type bound to a rule equal to ``matcher``.

        This is an exact rule lookup, not a file name classification.
        """
        if matcher.kind is MatcherKind.EXTENSION:
            return self._extension_mappings.get(_extension_of(matcher))
        for assoc in self._matching_mappings:
            if matcher == assoc.matcher:
                return assoc.file_type
        return None

    def associated_extensions(self, file_type: T) -> list[str]:
        """Return the extensions bound to ``file_type`` (deprecated).

        Prefer `associations_for`, which also reports generic rules.
        """
        warnings.warn(
            "associated_extensions() is deprecated; use associations_for()",
            DeprecationWarning,
            stacklevel=2,
        )
        return [ext for ext, ft in self._extension_mappings.items() if ft is file_type]

    def associations_for(self, file_type: T) -> list[FileNameMatcher]:
        """Return every rule bound to ``file_type``.

        Generic rules come first, in insertion order, followed by one
        synthesized `ExtensionMatcher` per extension bound to ``file_type``.

        Args:
            file_type (T): The file type to report on.

        Returns:
            list[FileNameMatcher]: The bound rules.
        """
        result: list[FileNameMatcher] = [
            assoc.matcher for assoc in self._matching_mappings if assoc.file_type is file_type
        ]
        result.extend(
            ExtensionMatcher(ext) for ext, ft in self._extension_mappings.items() if ft is file_type
        )
        return result

    def has_associations(self, file_type: T) -> bool:
        """Return True if any rule is bound to ``file_type``."""
        if any(ft is file_type for ft in self._extension_mappings.values()):
            return True
        return any(assoc.file_type is file_type for assoc in self._matching_mappings)

    def iter_associations(self) -> Iterator[Association[T]]:
        """Iterate all associations.

        Yields:
            Association[T]: Generic associations in insertion order, then one
            association per extension entry (with a synthesized `ExtensionMatcher`).
        """
        yield from list(self._matching_mappings)
        for ext, ft in list(self._extension_mappings.items()):
            yield Association(ExtensionMatcher(ext), ft)

    def categories(self) -> list[T]:
        """Return the distinct bound file types, by identity, in first-seen order."""
        seen: set[int] = set()
        result: list[T] = []
        for assoc in self.iter_associations():
            if id(assoc.file_type) not in seen:
                seen.add(id(assoc.file_type))
                result.append(assoc.file_type)
        return result

    # --- Snapshots ---

    def copy(self) -> FileTypeAssocTable[T]:
        """Return a table with independent indices and shared matchers/file types.

        Mutating either table afterwards never affects the other.
        """
        clone: FileTypeAssocTable[T] = FileTypeAssocTable()
        clone._extension_mappings = dict(self._extension_mappings)
        clone._matching_mappings = list(self._matching_mappings)
        return clone

    def __copy__(self) -> FileTypeAssocTable[T]:
        return self.copy()
