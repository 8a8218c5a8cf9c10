# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Identity resolution for one archive from manifest, curated and registry sources."""

import logging
from collections.abc import Collection, Sequence
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from jarext.fingerprint import sha1_hex
from jarext.known_fingerprints import KNOWN_ENTRIES, lookup_known
from jarext.manifest import get_attribute, read_manifest
from jarext.model import ArchiveFile, ArchiveRecord, AttributeMap, KnownEntry, LatestVersion
from jarext.precedence import first_non_empty_str
from jarext.registry_client import (
    PREFERRED_GROUPS,
    RegistryClient,
    RegistryUnavailableError,
    resolve_latest_version,
    select_candidate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _MavenInfo:
    group: str = ""
    artifact: str = ""
    version: str = ""
    rel_date: str = ""
    latest_ver: str = ""
    latest_date: str = ""
    recentest_ver: str = ""
    recentest_date: str = ""


class IdentityResolver:
    """Reconcile archive metadata sources into one record."""

    def __init__(
        self,
        registry: RegistryClient,
        known_entries: Sequence[KnownEntry] = KNOWN_ENTRIES,
        preferred_groups: Collection[str] = PREFERRED_GROUPS,
    ) -> None:
        """Initialize resolver.

        Args:
            registry: Registry client used for fingerprint and version lookups.
            known_entries: Curated fingerprint table.
            preferred_groups: Registry group ids preferred when several match.
        """
        self._registry = registry
        self._known_entries = known_entries
        self._preferred_groups = preferred_groups

    def resolve(self, archive: ArchiveFile) -> ArchiveRecord:
        """Identify one archive.

        Args:
            archive: Discovered archive.

        Returns:
            Resolved record.

        Raises:
            OSError: If the archive cannot be read.
            CorruptArchiveError: If the archive cannot be opened.
        """
        sha1 = sha1_hex(archive.absolute_path)
        attributes = read_manifest(archive.absolute_path)
        return self.resolve_attributes(
            file=archive.relative_path, sha1=sha1, attributes=attributes
        )

    def resolve_attributes(
        self, file: str, sha1: str, attributes: AttributeMap
    ) -> ArchiveRecord:
        """Resolve a record from an already fingerprinted archive.

        Args:
            file: Root-relative archive path.
            sha1: Content fingerprint.
            attributes: Main manifest attributes, possibly empty.

        Returns:
            Resolved record. Registry failures leave the Maven fields empty.
        """
        bundle_name = get_attribute(attributes, "bundle-name")
        bundle_vendor = get_attribute(attributes, "bundle-vendor")
        bundle_version = get_attribute(attributes, "bundle-version")
        impl_title = get_attribute(attributes, "implementation-title")
        impl_version = get_attribute(attributes, "implementation-version")
        impl_vendor = get_attribute(attributes, "implementation-vendor")
        spec_title = get_attribute(attributes, "specification-title")
        spec_version = get_attribute(attributes, "specification-version")
        spec_vendor = get_attribute(attributes, "specification-vendor")

        known = lookup_known(sha1, self._known_entries)
        if known is not None:
            logger.debug(f"Known fingerprint matched (file={file} sha1={sha1})")
            impl_title = known.title
            impl_vendor = known.vendor
            impl_version = known.version

        maven = self._lookup_maven(file=file, sha1=sha1)

        return ArchiveRecord(
            file=file,
            sha1=sha1,
            title=first_non_empty_str(bundle_name, impl_title, spec_title, maven.artifact),
            version=first_non_empty_str(
                bundle_version, impl_version, spec_version, maven.version
            ),
            vendor=first_non_empty_str(bundle_vendor, impl_vendor, spec_vendor, maven.group),
            bundle_name=bundle_name,
            bundle_version=bundle_version,
            bundle_vendor=bundle_vendor,
            impl_title=impl_title,
            impl_version=impl_version,
            impl_vendor=impl_vendor,
            spec_title=spec_title,
            spec_version=spec_version,
            spec_vendor=spec_vendor,
            maven_group=maven.group,
            maven_artifact=maven.artifact,
            maven_version=maven.version,
            maven_rel_date=maven.rel_date,
            maven_latest_ver=maven.latest_ver,
            maven_latest_date=maven.latest_date,
            maven_recentest_ver=maven.recentest_ver,
            maven_recentest_date=maven.recentest_date,
        )

    def _lookup_maven(self, file: str, sha1: str) -> _MavenInfo:
        try:
            candidates = self._registry.search_by_sha1(sha1)
        except RegistryUnavailableError as exc:
            logger.warning(
                f"Registry search failed; leaving registry fields empty (file={file} error={exc})"
            )
            return _MavenInfo()

        selected = select_candidate(candidates, self._preferred_groups)
        if selected is None:
            return _MavenInfo()

        info = _MavenInfo(
            group=selected.group_id,
            artifact=selected.artifact_id,
            version=selected.version,
            rel_date=format_date(selected.timestamp),
        )
        try:
            latest, most_recent = resolve_latest_version(
                self._registry, selected.group_id, selected.artifact_id
            )
        except RegistryUnavailableError as exc:
            logger.warning(
                f"Latest version lookup failed; leaving latest fields empty "
                f"(file={file} group={selected.group_id} artifact={selected.artifact_id} error={exc})"
            )
            return info

        return replace(
            info,
            latest_ver=_version_of(latest),
            latest_date=format_date(latest.timestamp) if latest else "",
            recentest_ver=_version_of(most_recent),
            recentest_date=format_date(most_recent.timestamp) if most_recent else "",
        )


def format_date(timestamp: int | None) -> str:
    """Render epoch seconds as a UTC ``YYYY-MM-DD`` date; ``""`` when unknown or out of range."""
    if timestamp is None:
        return ""
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")
    except (OverflowError, OSError, ValueError) as exc:
        logger.warning(
            f"Ignoring out-of-range registry timestamp (timestamp={timestamp} error={exc})"
        )
        return ""


def _version_of(latest: LatestVersion | None) -> str:
    return latest.version if latest else ""
