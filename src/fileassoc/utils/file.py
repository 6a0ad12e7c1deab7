# topmark:header:start
#
#   project      : FileAssoc
#   file         : file.py
#   file_relpath : src/fileassoc/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File name helpers for FileAssoc.

These helpers operate on file *names* only; they never touch the file system.
"""

from __future__ import annotations

from typing import Final

SEPARATORS: Final[tuple[str, ...]] = ("/", "\\")


def base_name(file_name: str) -> str:
    """Return the final path component of ``file_name``.

    Both ``/`` and ``\\`` are treated as separators so Windows-style names
    classify the same way on every platform.

    Args:
        file_name (str): A bare file name or a path.

    Returns:
        str: The substring after the last separator (``file_name`` itself if there is none).
    """
    cut: int = max(file_name.rfind(sep) for sep in SEPARATORS)
    return file_name[cut + 1 :]


def get_extension(file_name: str) -> str:
    """Return the lower-cased extension of ``file_name``.

    The extension is the substring after the last dot of the final path
    component. Dots in directory components are ignored, a leading dot counts
    (``".bashrc"`` -> ``"bashrc"``) and names without a dot yield ``""``.

    Args:
        file_name (str): A bare file name or a path.

    Returns:
        str: The case-normalized extension, or ``""`` when there is none.
    """
    name: str = base_name(file_name)
    index: int = name.rfind(".")
    if index < 0:
        return ""
    return name[index + 1 :].lower()


def normalize_extension(extension: str) -> str:
    """Normalize an extension as stored by extension matchers.

    A single leading dot is stripped and the result is lower-cased, so
    ``".PY"``, ``"PY"`` and ``"py"`` all normalize to ``"py"``.
    """
    if extension.startswith("."):
        extension = extension[1:]
    return extension.lower()
