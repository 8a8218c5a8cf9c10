# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Registry client implementations for the jar inventory."""

from jarext.registry.maven_central import MAVEN_CENTRAL_SEARCH_URL, MavenCentralClient
from jarext.registry.offline import OfflineRegistryClient

__all__ = ["MAVEN_CENTRAL_SEARCH_URL", "MavenCentralClient", "OfflineRegistryClient"]
