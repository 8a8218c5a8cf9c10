# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for archive inventory artifacts."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

AttributeMap = Mapping[str, str]


@dataclass(frozen=True)
class ArchiveFile:
    """Reference one discovered archive.

    Attributes:
        relative_path: Root-relative path using ``/`` separators.
        absolute_path: Filesystem path used for reading.
    """

    relative_path: str
    absolute_path: Path


@dataclass(frozen=True)
class KnownEntry:
    """Represent one curated fingerprint identification.

    Attributes:
        sha1: Lowercase SHA-1 hex digest of the archive bytes.
        title: Library title.
        vendor: Library vendor.
        version: Library version.
        file: Distribution file name the digest was taken from.
    """

    sha1: str
    title: str
    vendor: str
    version: str
    file: str = ""


@dataclass(frozen=True)
class RegistryCandidate:
    """Represent one registry match for a content fingerprint.

    Attributes:
        group_id: Registry group coordinate.
        artifact_id: Registry artifact coordinate.
        version: Published version.
        timestamp: Publish time in Unix epoch seconds; ``None`` if unknown.
    """

    group_id: str
    artifact_id: str
    version: str
    timestamp: int | None = None


@dataclass(frozen=True)
class LatestVersion:
    """Represent a latest-version answer for one coordinate."""

    version: str
    timestamp: int | None = None


@dataclass(frozen=True)
class ArchiveRecord:
    """Represent one fully resolved archive row.

    Empty strings mean "unknown". Only ``file`` and ``sha1`` are always set.

    Attributes:
        file: Root-relative archive path.
        title: Resolved display title.
        vendor: Resolved display vendor.
        version: Resolved display version.
        sha1: SHA-1 content fingerprint.
        bundle_name: ``Bundle-Name`` manifest attribute.
        bundle_version: ``Bundle-Version`` manifest attribute.
        bundle_vendor: ``Bundle-Vendor`` manifest attribute.
        impl_title: ``Implementation-Title``, or the known-fingerprint title.
        impl_version: ``Implementation-Version``, or the known-fingerprint version.
        impl_vendor: ``Implementation-Vendor``, or the known-fingerprint vendor.
        spec_title: ``Specification-Title`` manifest attribute.
        spec_version: ``Specification-Version`` manifest attribute.
        spec_vendor: ``Specification-Vendor`` manifest attribute.
        maven_group: Selected registry group id.
        maven_artifact: Selected registry artifact id.
        maven_version: Selected registry version.
        maven_rel_date: Selected candidate release date (``YYYY-MM-DD``).
        maven_latest_ver: Latest version as reported by the registry.
        maven_latest_date: Release date of ``maven_latest_ver``.
        maven_recentest_ver: Most recently published version by timestamp.
        maven_recentest_date: Release date of ``maven_recentest_ver``.
    """

    file: str
    sha1: str
    title: str = ""
    vendor: str = ""
    version: str = ""
    bundle_name: str = ""
    bundle_version: str = ""
    bundle_vendor: str = ""
    impl_title: str = ""
    impl_version: str = ""
    impl_vendor: str = ""
    spec_title: str = ""
    spec_version: str = ""
    spec_vendor: str = ""
    maven_group: str = ""
    maven_artifact: str = ""
    maven_version: str = ""
    maven_rel_date: str = ""
    maven_latest_ver: str = ""
    maven_latest_date: str = ""
    maven_recentest_ver: str = ""
    maven_recentest_date: str = ""
