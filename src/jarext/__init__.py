# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for jar inventory components."""

from jarext.inventory import JarInventory
from jarext.manifest import CorruptArchiveError, read_manifest
from jarext.model import ArchiveFile, ArchiveRecord, KnownEntry, LatestVersion, RegistryCandidate
from jarext.registry_client import RegistryClient, RegistryUnavailableError, select_candidate
from jarext.resolver import IdentityResolver

__all__ = [
    "ArchiveFile",
    "ArchiveRecord",
    "CorruptArchiveError",
    "IdentityResolver",
    "JarInventory",
    "KnownEntry",
    "LatestVersion",
    "RegistryCandidate",
    "RegistryClient",
    "RegistryUnavailableError",
    "read_manifest",
    "select_candidate",
]
