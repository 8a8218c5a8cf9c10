# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Registry client Maven Central implementation."""

import logging
import os
from typing import Any

import httpx

from jarext.model import LatestVersion, RegistryCandidate
from jarext.registry_client import RegistryUnavailableError

logger = logging.getLogger(__name__)

MAVEN_CENTRAL_SEARCH_URL: str = "https://search.maven.org/solrsearch/select"
MAVEN_URL_ENV_VAR: str = "JAREXT_MAVEN_URL"
DEFAULT_TIMEOUT: float = 30.0
DEFAULT_ROWS: int = 20
DEFAULT_VERSION_ROWS: int = 200


class MavenCentralClient:
    """Query the Maven Central Solr search API.

    Example usage:
        with MavenCentralClient() as client:
            candidates = client.search_by_sha1(sha1)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        rows: int = DEFAULT_ROWS,
        version_rows: int = DEFAULT_VERSION_ROWS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize client configuration.

        Args:
            base_url: Solr ``select`` endpoint. Defaults to the ``JAREXT_MAVEN_URL``
                environment variable or the public Maven Central endpoint.
            timeout: Request timeout in seconds.
            rows: Maximum candidates returned by a fingerprint search.
            version_rows: Maximum versions scanned when looking for the most
                recent publication.
            transport: Optional httpx transport, used to substitute responses.
        """
        self.base_url = (
            base_url or os.environ.get(MAVEN_URL_ENV_VAR) or MAVEN_CENTRAL_SEARCH_URL
        ).rstrip("/")
        self.timeout = timeout
        self._rows = rows
        self._version_rows = version_rows
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def __enter__(self) -> "MavenCentralClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def search_by_sha1(self, sha1: str) -> list[RegistryCandidate]:
        """Search artifacts by SHA-1 fingerprint.

        Args:
            sha1: Lowercase SHA-1 hex digest.

        Returns:
            Candidates in registry relevance order.

        Raises:
            RegistryUnavailableError: If the request fails or the payload is malformed.
        """
        docs = self._select({"q": f'1:"{sha1}"', "rows": self._rows, "wt": "json"})
        return [
            RegistryCandidate(
                group_id=str(doc.get("g") or ""),
                artifact_id=str(doc.get("a") or ""),
                version=str(doc.get("v") or ""),
                timestamp=_to_epoch_seconds(doc.get("timestamp")),
            )
            for doc in docs
        ]

    def get_reported_latest_version(
        self, group_id: str, artifact_id: str
    ) -> LatestVersion | None:
        """Return the ``latestVersion`` the registry reports for a coordinate.

        Raises:
            RegistryUnavailableError: If the request fails or the payload is malformed.
        """
        docs = self._select(
            {"q": _coordinate_query(group_id, artifact_id), "rows": 1, "wt": "json"}
        )
        if not docs or not docs[0].get("latestVersion"):
            return None
        return LatestVersion(
            version=str(docs[0].get("latestVersion") or ""),
            timestamp=_to_epoch_seconds(docs[0].get("timestamp")),
        )

    def get_most_recent_version(
        self, group_id: str, artifact_id: str
    ) -> LatestVersion | None:
        """Return the published version with the greatest timestamp.

        The reported latest version can lag behind; this scans every version
        row of the coordinate instead.

        Raises:
            RegistryUnavailableError: If the request fails or the payload is malformed.
        """
        docs = self._select(
            {
                "q": _coordinate_query(group_id, artifact_id),
                "core": "gav",
                "rows": self._version_rows,
                "wt": "json",
            }
        )
        versions = [
            LatestVersion(
                version=str(doc.get("v") or ""),
                timestamp=_to_epoch_seconds(doc.get("timestamp")),
            )
            for doc in docs
            if doc.get("v")
        ]
        if not versions:
            return None
        return max(versions, key=lambda item: item.timestamp or 0)

    def _select(self, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Run one search request and return its documents.

        Args:
            params: Solr query parameters.

        Returns:
            Documents of the ``response`` section.

        Raises:
            RegistryUnavailableError: If the request fails or the payload is malformed.
        """
        try:
            response = self._client.get(self.base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                f"Maven Central request failed (url={self.base_url} q={params.get('q')} error={exc})"
            )
            raise RegistryUnavailableError(str(exc)) from exc

        section = payload.get("response") if isinstance(payload, dict) else None
        docs = section.get("docs") if isinstance(section, dict) else None
        if not isinstance(docs, list):
            logger.warning(
                f"Maven Central response did not contain documents "
                f"(url={self.base_url} q={params.get('q')} payload={payload!r})"
            )
            raise RegistryUnavailableError(
                "Maven Central response does not contain a document list."
            )
        if section.get("numFound") == 0:
            return []
        return [doc for doc in docs if isinstance(doc, dict)]


def _coordinate_query(group_id: str, artifact_id: str) -> str:
    return f'g:"{group_id}" AND a:"{artifact_id}"'


def _to_epoch_seconds(timestamp: object) -> int | None:
    """Convert a Maven Central millisecond timestamp to epoch seconds.

    Args:
        timestamp: Raw ``timestamp`` document value.

    Returns:
        Epoch seconds, or ``None`` when the value is missing or not numeric.
    """
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        return None
    return int(timestamp) // 1000
