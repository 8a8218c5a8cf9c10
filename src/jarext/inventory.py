# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Sequential archive inventory over an installation tree."""

import logging
import time
from pathlib import Path

from jarext.model import ArchiveRecord
from jarext.resolver import IdentityResolver
from jarext.walker import ARCHIVE_EXTENSION, ExcludeMatcher, iter_archives

logger = logging.getLogger(__name__)


class JarInventory:
    """Discover archives beneath a root and resolve each one in order."""

    def __init__(self, resolver: IdentityResolver, progress_batch_size: int = 10) -> None:
        """Initialize inventory service.

        Args:
            resolver: Identity resolver applied to every archive.
            progress_batch_size: Emit progress log line every N resolved archives.

        Raises:
            ValueError: If ``progress_batch_size`` is not greater than zero.
        """
        if progress_batch_size <= 0:
            raise ValueError("progress_batch_size must be > 0")
        self._resolver = resolver
        self._progress_batch_size = progress_batch_size

    def build(
        self,
        root_path: Path,
        extension: str = ARCHIVE_EXTENSION,
        matcher: ExcludeMatcher | None = None,
    ) -> list[ArchiveRecord]:
        """Resolve every archive beneath a root directory.

        Archives are processed one at a time in discovery order. Any failure
        other than a registry outage propagates and no records are returned.

        Args:
            root_path: Installation directory to inventory.
            extension: File name suffix identifying archives.
            matcher: Optional exclude matcher.

        Returns:
            One record per discovered archive.

        Raises:
            NotADirectoryError: If ``root_path`` is not a directory.
            OSError: If an archive cannot be read.
            CorruptArchiveError: If an archive cannot be opened.
        """
        archives = list(iter_archives(root_path, extension=extension, matcher=matcher))
        total = len(archives)
        logger.info(f"Archives discovered (path={root_path} count={total})")

        records: list[ArchiveRecord] = []
        started_at = time.monotonic()
        for archive in archives:
            records.append(self._resolver.resolve(archive))
            completed = len(records)
            if completed % self._progress_batch_size == 0 or completed == total:
                self._log_progress(
                    completed=completed,
                    total=total,
                    elapsed_seconds=time.monotonic() - started_at,
                )
        return records

    def _log_progress(self, completed: int, total: int, elapsed_seconds: float) -> None:
        percent = 100.0 if total == 0 else (completed / total) * 100.0
        logger.info(
            "jar_inventory_progress completed=%s total=%s percent=%.2f elapsed_seconds=%.1f",
            completed,
            total,
            percent,
            elapsed_seconds,
        )
