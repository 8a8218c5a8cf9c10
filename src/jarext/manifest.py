# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""JAR manifest reading and main-section attribute parsing."""

import logging
import re
import zipfile
import zlib
from pathlib import Path
from types import MappingProxyType

from jarext.model import AttributeMap

logger = logging.getLogger(__name__)

MANIFEST_PATH: str = "META-INF/MANIFEST.MF"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class CorruptArchiveError(RuntimeError):
    """Represent an archive that cannot be opened or read."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Cannot read archive {path}: {message}")
        self.path = path


def read_manifest(path: Path) -> AttributeMap:
    """Read main manifest attributes from an archive.

    Args:
        path: Archive file path.

    Returns:
        Immutable mapping of lowercased attribute names to values. Empty when
        the archive carries no manifest.

    Raises:
        CorruptArchiveError: If the archive cannot be opened or the manifest
            entry cannot be decompressed or is encrypted.
        OSError: If the file cannot be read at all.
    """
    try:
        with zipfile.ZipFile(path) as archive:
            entry_name = _find_manifest_entry(archive.namelist())
            if entry_name is None:
                logger.debug(f"Archive has no manifest (path={path})")
                return MappingProxyType({})
            raw = archive.read(entry_name)
    except (
        zipfile.BadZipFile,
        zlib.error,
        EOFError,
        NotImplementedError,
        RuntimeError,
    ) as exc:
        logger.warning(f"Archive could not be read (path={path} error={exc})")
        raise CorruptArchiveError(path, str(exc)) from exc

    return MappingProxyType(parse_main_attributes(raw.decode("utf-8", errors="replace")))


def parse_main_attributes(text: str) -> dict[str, str]:
    """Parse the main section of a manifest.

    The main section ends at the first blank line. A line starting with a
    single space continues the previous value. Later duplicates win.

    Args:
        text: Decoded manifest content.

    Returns:
        Attribute values keyed by lowercased attribute name.
    """
    attributes: dict[str, str] = {}
    current_key: str | None = None
    for line in _LINE_BREAK.split(text.lstrip("\ufeff")):
        if not line:
            break
        if line.startswith(" "):
            if current_key is not None:
                attributes[current_key] += line[1:]
            continue
        name, separator, value = line.partition(":")
        if not separator or not name.strip():
            logger.debug(f"Ignoring malformed manifest line (line={line!r})")
            current_key = None
            continue
        current_key = name.strip().lower()
        attributes[current_key] = value[1:] if value.startswith(" ") else value
    return attributes


def get_attribute(attributes: AttributeMap, key: str) -> str:
    """Look up one attribute case-insensitively; missing keys yield ``""``."""
    return attributes.get(key.lower(), "")


def _find_manifest_entry(names: list[str]) -> str | None:
    for name in names:
        if name.upper() == MANIFEST_PATH:
            return name
    return None
