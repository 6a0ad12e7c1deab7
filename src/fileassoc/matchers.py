# topmark:header:start
#
#   project      : FileAssoc
#   file         : matchers.py
#   file_relpath : src/fileassoc/matchers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File name matchers used by the association table.

A matcher decides whether a file name belongs to a rule. Matchers come in two
kinds, exposed through the `FileNameMatcher.kind` tag:

* `MatcherKind.EXTENSION`: `ExtensionMatcher`, keyed by a case-normalized
  extension. The association table stores these in a dictionary for O(1)
  lookups.
* `MatcherKind.GENERIC`: every other matcher (`ExactNameMatcher`,
  `WildcardMatcher`, `RegexMatcher` or a caller-defined subclass). The table
  keeps these in an ordered list and evaluates them in insertion order.

All provided matchers are frozen dataclasses: equality is value equality and
instances are hashable.

Notes:
    * Wildcard rules use git-wildmatch semantics (via ``pathspec``), except that
      a file below a matching directory is not itself a match.
    * Regex rules use `re.fullmatch` against the base name.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Final

from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from fileassoc.config.logging import FileassocLogger, get_logger
from fileassoc.errors import InvalidMatcherError
from fileassoc.utils.file import SEPARATORS, base_name, get_extension, normalize_extension

logger: FileassocLogger = get_logger(__name__)

REGEX_PREFIX: Final[str] = "re:"
WILDCARD_CHARS: Final[frozenset[str]] = frozenset("*?[")
# Regex group gitwildmatch uses for "everything below a matching directory".
DIR_DESCENDANT_GROUP: Final[str] = "ps_d"


class MatcherKind(Enum):
    """Dispatch tag for file name matchers.

    Attributes:
        EXTENSION: Extension-only rule; stored in the table's extension index.
        GENERIC: Any other rule; stored in the table's ordered generic list.
    """

    EXTENSION = "extension"
    GENERIC = "generic"


class FileNameMatcher(ABC):
    """Base class for rules that accept or reject a file name.

    Subclasses must provide value equality (``__eq__``/``__hash__``); the
    association table relies on it for lookups and removals. Subclasses that
    are not extension rules keep the default `MatcherKind.GENERIC` tag.
    """

    kind: ClassVar[MatcherKind] = MatcherKind.GENERIC

    @abstractmethod
    def accept(self, file_name: str) -> bool:
        """Return True if ``file_name`` matches this rule.

        Args:
            file_name (str): A bare file name or a path.

        Returns:
            bool: True if the rule matches.
        """

    @property
    @abstractmethod
    def presentable(self) -> str:
        """Canonical textual form of the rule (e.g. ``"*.py"``)."""


@dataclass(frozen=True)
class ExtensionMatcher(FileNameMatcher):
    """Match file names by extension.

    The extension is normalized at construction: a single leading dot is
    stripped and the value is lower-cased (``".PY"`` becomes ``"py"``).

    Attributes:
        extension (str): The normalized extension, without a leading dot.
    """

    kind: ClassVar[MatcherKind] = MatcherKind.EXTENSION

    extension: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "extension", normalize_extension(self.extension))

    def accept(self, file_name: str) -> bool:
        return get_extension(file_name) == self.extension

    @property
    def presentable(self) -> str:
        return f"*.{self.extension}"


@dataclass(frozen=True)
class ExactNameMatcher(FileNameMatcher):
    r"""Match an exact base name or a tail subpath.

    If ``file_name`` contains a separator (``/`` or ``\``) it is matched
    against the *tail* of the candidate path (e.g. ``".vscode/settings.json"``).
    Otherwise it must equal the candidate's base name.

    Attributes:
        file_name (str): The name or tail subpath to match.
        ignore_case (bool): Compare case-insensitively.
    """

    file_name: str
    ignore_case: bool = False

    def _fold(self, value: str) -> str:
        value = value.replace("\\", "/")
        return value.casefold() if self.ignore_case else value

    def accept(self, file_name: str) -> bool:
        expected: str = self._fold(self.file_name)
        if any(sep in self.file_name for sep in SEPARATORS):
            candidate: str = self._fold(file_name)
            return candidate == expected or candidate.endswith("/" + expected)
        return self._fold(base_name(file_name)) == expected

    @property
    def presentable(self) -> str:
        return self.file_name


@dataclass(frozen=True)
class WildcardMatcher(FileNameMatcher):
    """Match file names against a shell-style wildcard pattern.

    Patterns without a separator are matched against the base name only
    (``"*.txt"`` accepts ``"docs/a.txt"`` but not ``"a.txt/readme"``). Patterns
    with a ``/`` are matched against the whole, ``/``-normalized name.

    Attributes:
        pattern (str): The wildcard pattern (``*``, ``?``, ``[...]``).

    Raises:
        InvalidMatcherError: If the pattern is empty, a comment, or a negation.
    """

    pattern: str
    _rule: GitWildMatchPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.pattern.strip():
            raise InvalidMatcherError(self.pattern, "empty pattern")
        if self.pattern.startswith(("!", "#")):
            raise InvalidMatcherError(self.pattern, "negations and comments are not rules")
        object.__setattr__(self, "_rule", GitWildMatchPattern(self.pattern))

    def accept(self, file_name: str) -> bool:
        if "/" in self.pattern:
            candidate: str = file_name.replace("\\", "/").lstrip("/")
        else:
            candidate = base_name(file_name)
        result = self._rule.match_file(candidate)
        if result is None:
            return False
        # A file below a matching directory is not itself a match.
        return result.match.groupdict().get(DIR_DESCENDANT_GROUP) is None

    @property
    def presentable(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class RegexMatcher(FileNameMatcher):
    """Match the base name against a regular expression (`re.fullmatch`).

    Attributes:
        pattern (str): The regular expression source.

    Raises:
        InvalidMatcherError: If the pattern does not compile.
    """

    pattern: str
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled: re.Pattern[str] = re.compile(self.pattern)
        except re.error as exc:
            raise InvalidMatcherError(self.pattern, str(exc)) from exc
        object.__setattr__(self, "_regex", compiled)

    def accept(self, file_name: str) -> bool:
        return self._regex.fullmatch(base_name(file_name)) is not None

    @property
    def presentable(self) -> str:
        return f"{REGEX_PREFIX}{self.pattern}"


def _is_plain_extension(candidate: str) -> bool:
    """Return True if ``candidate`` can be stored as a bare extension key."""
    if not candidate or "." in candidate:
        return False
    return not any(ch in WILDCARD_CHARS or ch in SEPARATORS for ch in candidate)


def parse_matcher(text: str) -> FileNameMatcher:
    """Build a matcher from its textual form.

    Rules, checked in order:

    1. ``*.ext`` where ``ext`` is a plain extension -> `ExtensionMatcher`.
    2. ``re:<regex>`` -> `RegexMatcher`.
    3. Any text containing ``*``, ``?`` or ``[`` -> `WildcardMatcher`.
    4. Anything else -> `ExactNameMatcher`.

    For every provided matcher ``m`` built with default options,
    ``parse_matcher(m.presentable) == m``.

    Args:
        text (str): The rule text (surrounding whitespace is ignored).

    Returns:
        FileNameMatcher: The matcher for ``text``.

    Raises:
        InvalidMatcherError: If ``text`` is empty or describes an invalid rule.
    """
    rule: str = text.strip()
    if not rule:
        raise InvalidMatcherError(text, "empty rule")

    matcher: FileNameMatcher
    if rule.startswith("*.") and _is_plain_extension(rule[2:]):
        matcher = ExtensionMatcher(rule[2:])
    elif rule.startswith(REGEX_PREFIX):
        matcher = RegexMatcher(rule[len(REGEX_PREFIX) :])
    elif any(ch in WILDCARD_CHARS for ch in rule):
        matcher = WildcardMatcher(rule)
    else:
        matcher = ExactNameMatcher(rule)

    logger.trace("Parsed rule %r as %r", text, matcher)
    return matcher
