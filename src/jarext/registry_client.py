# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Package registry client abstractions."""

import logging
from collections.abc import Collection, Sequence
from typing import Protocol

from jarext.model import LatestVersion, RegistryCandidate
from jarext.precedence import first_non_empty

logger = logging.getLogger(__name__)

PREFERRED_GROUPS: tuple[str, ...] = ("commons-codec", "jdom")


class RegistryUnavailableError(RuntimeError):
    """Represent a failed or malformed registry exchange."""


class RegistryClient(Protocol):
    """Define registry lookups needed for archive identification."""

    def search_by_sha1(self, sha1: str) -> list[RegistryCandidate]:
        """Search published artifacts by content fingerprint.

        Args:
            sha1: Lowercase SHA-1 hex digest.

        Returns:
            Candidates in registry relevance order; empty when nothing matches.

        Raises:
            RegistryUnavailableError: If the registry cannot be queried.
        """

    def get_reported_latest_version(
        self, group_id: str, artifact_id: str
    ) -> LatestVersion | None:
        """Return the registry's own latest-version designation for a coordinate."""

    def get_most_recent_version(
        self, group_id: str, artifact_id: str
    ) -> LatestVersion | None:
        """Return the published version with the greatest timestamp for a coordinate."""

    def close(self) -> None:
        """Release client resources."""


def select_candidate(
    candidates: Sequence[RegistryCandidate],
    preferred_groups: Collection[str] = PREFERRED_GROUPS,
) -> RegistryCandidate | None:
    """Pick the most official-looking candidate.

    Args:
        candidates: Candidates in registry order.
        preferred_groups: Trusted publisher group ids.

    Returns:
        The first candidate from a preferred group, else the first candidate,
        else ``None``.
    """
    preferred = next(
        (candidate for candidate in candidates if candidate.group_id in preferred_groups),
        None,
    )
    return first_non_empty(preferred, candidates[0] if candidates else None)


def resolve_latest_version(
    client: RegistryClient, group_id: str, artifact_id: str
) -> tuple[LatestVersion | None, LatestVersion | None]:
    """Resolve both latest-version views for a coordinate.

    Args:
        client: Registry client.
        group_id: Registry group coordinate.
        artifact_id: Registry artifact coordinate.

    Returns:
        ``(reported_latest, most_recent)``; either may be ``None``.

    Raises:
        RegistryUnavailableError: If either lookup fails.
    """
    reported = client.get_reported_latest_version(group_id, artifact_id)
    most_recent = client.get_most_recent_version(group_id, artifact_id)
    return reported, most_recent
