"""Class-name to file-path reconstruction and file presence probing.

``class_name_to_file_path`` approximates the usual namespace-to-directory
layout: it is a heuristic, not a build-system resolution, and can
mis-resolve names whose segments collide with unrelated directory names.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

NAMESPACE_SEPARATOR = "\\"


class FilePresenceOracle(Protocol):
    """Answers whether a file exists. Injected so comparisons stay testable."""

    def exists(self, path: str) -> bool: ...


class FilesystemOracle:
    """Oracle backed by the real file system."""

    def exists(self, path: str) -> bool:
        return Path(path).is_file()


def class_name_to_file_path(file_path: str, class_name: str, extension: str = "") -> str | None:
    """Map a namespaced class name onto the directory tree of ``file_path``.

    Walks ``file_path`` segment by segment until one of them equals a
    segment of ``class_name``; everything up to and including it is the
    shared base. The class segments after the shared one become the rest
    of the path.

    Example:
        ``app/code/Acme/Catalog/etc/di.xml`` + ``Acme\\Catalog\\Model\\Item``
        -> ``app/code/Acme/Catalog/Model/Item.php``

    Returns:
        Candidate path, or None when the two share no segment or nothing
        of the class name is left after the shared segment.
    """
    path_parts = file_path.split("/")
    class_parts = [p for p in class_name.strip().split(NAMESPACE_SEPARATOR) if p]
    if not class_parts:
        return None

    base_parts: list[str] = []
    shared_index: int | None = None
    for part in path_parts:
        base_parts.append(part)
        if part in class_parts:
            shared_index = class_parts.index(part)
            break

    if shared_index is None:
        return None

    remainder = class_parts[shared_index + 1 :]
    if not remainder:
        return None

    base_dir = "/".join(base_parts).rstrip("/")
    return f"{base_dir}/{'/'.join(remainder)}{extension}"
