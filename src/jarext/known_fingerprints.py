# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Curated fingerprints for archives whose embedded metadata is missing or wrong.

Digests were assembled by downloading the upstream distributions and running
``shasum -a 1`` on their JARs. Append new entries; earlier entries win when a
digest is listed twice.
"""

from collections.abc import Iterable

from jarext.model import KnownEntry

KNOWN_ENTRIES: tuple[KnownEntry, ...] = (
    KnownEntry("1136d197e2755bbde296ceee217ec5fe2917477b", "Apache Xerces-J", "Apache", "2.9.1", "xercesImpl.jar"),
    KnownEntry("90b215f48fe42776c8c7f6e3509ec54e84fd65ef", "Apache Xerces-J", "Apache", "2.9.1", "xml-apis.jar"),
    KnownEntry("9161654d2afe7f9063455f02ccca8e4ec2787222", "Apache Xerces-J", "Apache", "2.10.0", "xercesImpl.jar"),
    KnownEntry("3789d9fada2d3d458c4ba2de349d48780f381ee3", "Apache Xerces-J", "Apache", "2.10.0", "xml-apis.jar"),
    KnownEntry("9bb329db1cfc4e22462c9d6b43a8432f5850e92c", "Apache Xerces-J", "Apache", "2.11.0", "xercesImpl.jar"),
    KnownEntry("3789d9fada2d3d458c4ba2de349d48780f381ee3", "Apache Xerces-J", "Apache", "2.11.0", "xml-apis.jar"),
    KnownEntry("f02c844149fd306601f20e0b34853a670bef7fa2", "Apache Xerces-J", "Apache", "2.12.0", "xercesImpl.jar"),
    KnownEntry("3789d9fada2d3d458c4ba2de349d48780f381ee3", "Apache Xerces-J", "Apache", "2.12.0", "xml-apis.jar"),
    KnownEntry("3a206b25679f598a03374afd4e0410d8849b088b", "Apache Xerces-J", "Apache", "2.12.0", "xercesImpl.jar"),
)


def lookup_known(
    sha1: str, entries: Iterable[KnownEntry] = KNOWN_ENTRIES
) -> KnownEntry | None:
    """Find the first curated entry for a content fingerprint.

    Args:
        sha1: Lowercase SHA-1 hex digest.
        entries: Table to search.

    Returns:
        Matching entry, or ``None`` when the digest is not listed.
    """
    for entry in entries:
        if entry.sha1 == sha1:
            return entry
    return None
