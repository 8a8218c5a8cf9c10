# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Registry client that never matches, for runs without network access."""

from jarext.model import LatestVersion, RegistryCandidate


class OfflineRegistryClient:
    """Answer every registry lookup with no match."""

    def search_by_sha1(self, sha1: str) -> list[RegistryCandidate]:
        return []

    def get_reported_latest_version(
        self, group_id: str, artifact_id: str
    ) -> LatestVersion | None:
        return None

    def get_most_recent_version(
        self, group_id: str, artifact_id: str
    ) -> LatestVersion | None:
        return None

    def close(self) -> None:
        return None
