# topmark:header:start
#
#   project      : FileAssoc
#   file         : store.py
#   file_relpath : src/fileassoc/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Copy-on-write publication of association tables.

`AssociationStore` owns the *published* `FileTypeAssocTable` and the lock that
serializes writers. It implements the single-writer discipline the table
itself leaves to its owner:

* Readers call `AssociationStore.snapshot` (or `AssociationStore.find`) and
  get the currently published table. They must not mutate it. Loading the
  published reference is a single attribute read and takes no lock.
* Writers enter `AssociationStore.edit`, which holds the writer lock, hands
  out a private copy of the published table and swaps it in when the block
  exits normally. If the block raises, the copy is discarded.

Typical usage:
    ```python
    store: AssociationStore[FileTypeLabel] = AssociationStore()
    with store.edit() as table:
        table.add(ExtensionMatcher("py"), python)
        table.add(WildcardMatcher("Dockerfile*"), docker)

    store.find("Dockerfile.dev")  # -> docker
    ```

Notes:
    * A snapshot is never mutated after publication, so a reader holding an
      older snapshot keeps seeing a consistent (if stale) view.
    * Nested `edit` blocks in the same thread share the outermost block's
      working copy; only the outermost block publishes. `replace` is rejected
      while an edit is open, since the open block would publish over it.
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import RLock
from typing import TYPE_CHECKING, Generic, TypeVar

from fileassoc.config.logging import FileassocLogger, get_logger
from fileassoc.errors import FileassocError
from fileassoc.table import FileTypeAssocTable

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: FileassocLogger = get_logger(__name__)

T = TypeVar("T")


class AssociationStore(Generic[T]):
    """Holder of the published association table (see module docstring).

    Args:
        initial (FileTypeAssocTable[T] | None): Optional table to publish first.
            It is copied so the caller's instance stays private.
    """

    def __init__(self, initial: FileTypeAssocTable[T] | None = None) -> None:
        self._lock = RLock()
        self._published: FileTypeAssocTable[T] = (
            initial.copy() if initial is not None else FileTypeAssocTable()
        )
        self._generation: int = 0
        # Working copy of the open edit block; only the lock owner touches it.
        self._working: FileTypeAssocTable[T] | None = None

    @property
    def generation(self) -> int:
        """Number of publications since the store was created."""
        return self._generation

    def snapshot(self) -> FileTypeAssocTable[T]:
        """Return the currently published table (read-only by contract)."""
        return self._published

    def find(self, file_name: str) -> T | None:
        """Classify ``file_name`` against the currently published table."""
        return self._published.find(file_name)

    @contextmanager
    def edit(self) -> Iterator[FileTypeAssocTable[T]]:
        """Yield a private copy of the published table and publish it on success.

        A nested call from the thread that already holds the edit yields the same
        working copy and leaves publication to the outermost block. Changes made in
        a nested block are not rolled back if it raises and the outer block
        handles the error.

        Yields:
            FileTypeAssocTable[T]: The working copy to mutate.
        """
        with self._lock:
            if self._working is not None:
                yield self._working
                return
            working: FileTypeAssocTable[T] = self._published.copy()
            self._working = working
            try:
                yield working
            finally:
                self._working = None
            self._publish(working)

    def replace(self, table: FileTypeAssocTable[T]) -> None:
        """Publish a copy of ``table``, replacing the current snapshot.

        Raises:
            FileassocError: If called from inside an open `edit` block.
        """
        with self._lock:
            if self._working is not None:
                raise FileassocError("replace() called inside an open edit() block")
            self._publish(table.copy())

    def _publish(self, table: FileTypeAssocTable[T]) -> None:
        self._published = table
        self._generation += 1
        logger.debug("Published association table #%d: %r", self._generation, table)
