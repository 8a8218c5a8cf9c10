# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Report projections and file sinks for archive records."""

import csv
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from jarext.model import ArchiveRecord

logger = logging.getLogger(__name__)

COLUMN_FIELDS: dict[str, str] = {
    "File": "file",
    "Title": "title",
    "Version": "version",
    "Vendor": "vendor",
    "BundleName": "bundle_name",
    "BundleVer": "bundle_version",
    "BundleVendor": "bundle_vendor",
    "ImplTitle": "impl_title",
    "ImplVer": "impl_version",
    "ImplVendor": "impl_vendor",
    "SpecTitle": "spec_title",
    "SpecVer": "spec_version",
    "SpecVendor": "spec_vendor",
    "Sha1": "sha1",
    "MavenGroup": "maven_group",
    "MavenArtifact": "maven_artifact",
    "MavenVersion": "maven_version",
    "MavenRelDate": "maven_rel_date",
    "MavenLatestVer": "maven_latest_ver",
    "MavenLatestDate": "maven_latest_date",
    "MavenRecentestVer": "maven_recentest_ver",
    "MavenRecentestDate": "maven_recentest_date",
}

FULL_COLUMNS: tuple[str, ...] = tuple(COLUMN_FIELDS)

PUBLIC_COLUMNS: tuple[str, ...] = (
    "Title",
    "Vendor",
    "Version",
    "File",
    "MavenGroup",
    "MavenArtifact",
    "MavenVersion",
    "MavenRelDate",
    "MavenRecentestVer",
    "MavenRecentestDate",
)


def to_rows(
    records: Iterable[ArchiveRecord], columns: Sequence[str] = PUBLIC_COLUMNS
) -> list[dict[str, str]]:
    """Project records onto report columns.

    Args:
        records: Resolved archive records.
        columns: Report column names, in output order.

    Returns:
        One ordered column-to-value mapping per record.

    Raises:
        KeyError: If a column name is unknown.
    """
    fields = [(column, COLUMN_FIELDS[column]) for column in columns]
    return [
        {column: getattr(record, field) for column, field in fields} for record in records
    ]


def default_report_name(release: str) -> str:
    """Return the conventional report file name for an installation release."""
    return f"jarexts-R{release}.csv"


def write_csv(
    out_path: Path,
    records: Iterable[ArchiveRecord],
    columns: Sequence[str] = PUBLIC_COLUMNS,
) -> None:
    """Write records to a CSV report, replacing any existing file.

    Args:
        out_path: Destination CSV file path.
        records: Resolved archive records.
        columns: Report column names, in output order.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    rows = to_rows(records, columns)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(columns))
        writer.writeheader()
        writer.writerows(rows)
    logger.info(f"Wrote report (path={out_path} rows={len(rows)})")
