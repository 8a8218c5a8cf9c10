# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Directory traversal for archive discovery."""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

import pathspec

from jarext.model import ArchiveFile

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION: str = ".jar"


class ExcludeMatcher:
    """Match root-relative paths against gitignore-style exclude patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        """Initialize matcher.

        Args:
            spec: Compiled gitignore matcher.
        """
        self._spec = spec

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "ExcludeMatcher":
        """Build matcher from pattern lines.

        Args:
            patterns: Gitignore-style pattern lines. Blank lines and ``#``
                comments are ignored.

        Returns:
            Configured exclude matcher.
        """
        spec = pathspec.GitIgnoreSpec.from_lines(list(patterns))
        return cls(spec=spec)

    def matches(self, relative_path: str) -> bool:
        """Check whether a file path is excluded.

        Args:
            relative_path: Root-relative POSIX path.

        Returns:
            True when the path should be skipped.
        """
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        return self._spec.match_file(normalized)


def find_files(root: Path) -> list[str]:
    """Recursively list regular files beneath a root directory.

    Args:
        root: Directory to traverse.

    Returns:
        Root-relative file paths with ``/`` separators, sorted lexicographically.

    Raises:
        NotADirectoryError: If ``root`` does not exist or is not a directory.
    """
    if not root.is_dir():
        raise NotADirectoryError(f"File {root} is not a directory or does not exist")
    return sorted(
        path.relative_to(root).as_posix() for path in root.rglob("*") if path.is_file()
    )


def iter_archives(
    root: Path,
    extension: str = ARCHIVE_EXTENSION,
    matcher: ExcludeMatcher | None = None,
) -> Iterator[ArchiveFile]:
    """Yield archives beneath a root directory.

    Args:
        root: Directory to traverse.
        extension: File name suffix identifying archives.
        matcher: Optional exclude matcher applied to relative paths.

    Yields:
        Discovered archives in relative path order.

    Raises:
        NotADirectoryError: If ``root`` does not exist or is not a directory.
    """
    for relative_path in find_files(root):
        if not relative_path.endswith(extension):
            continue
        if matcher is not None and matcher.matches(relative_path):
            logger.debug(f"Skipping excluded archive (file={relative_path})")
            continue
        yield ArchiveFile(relative_path=relative_path, absolute_path=root / relative_path)
