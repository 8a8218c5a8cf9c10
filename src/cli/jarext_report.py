# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI for inventorying bundled JAR libraries."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from jarext.inventory import JarInventory
from jarext.manifest import CorruptArchiveError
from jarext.model import ArchiveRecord
from jarext.registry import MavenCentralClient, OfflineRegistryClient
from jarext.registry.maven_central import DEFAULT_TIMEOUT
from jarext.registry_client import RegistryClient
from jarext.report import (
    FULL_COLUMNS,
    PUBLIC_COLUMNS,
    default_report_name,
    to_rows,
    write_csv,
)
from jarext.resolver import IdentityResolver
from jarext.walker import ARCHIVE_EXTENSION, ExcludeMatcher

logger = logging.getLogger(__name__)

DEFAULT_RELEASE: str = "local"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="jarext-report",
        description="Identify bundled third-party JARs and look up newer releases.",
    )
    parser.add_argument("--path", required=True, help="Installation jarext directory.")
    parser.add_argument(
        "--extension",
        default=ARCHIVE_EXTENSION,
        help="File name suffix identifying archives.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Gitignore-style pattern of paths to skip. Repeatable.",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json", "csv"),
        default="table",
        help="Output format.",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Output file path for json or csv formats.",
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="Include every intermediate column.",
    )
    parser.add_argument(
        "--maven-url",
        required=False,
        help="Maven Central Solr select endpoint.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Registry request timeout in seconds.",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip registry lookups.",
    )
    parser.add_argument(
        "--release",
        default=DEFAULT_RELEASE,
        help="Release label used in the default CSV report name.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the inventory command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    root_path = Path(args.path)
    if not root_path.is_dir():
        logger.warning(f"Path is not a directory (path={root_path})")
        stderr.write(f"File {root_path} is not a directory or does not exist\n")
        return 2
    if args.timeout <= 0:
        logger.warning(f"Invalid timeout (timeout={args.timeout})")
        stderr.write("timeout must be > 0\n")
        return 2

    columns = FULL_COLUMNS if args.full else PUBLIC_COLUMNS
    matcher = ExcludeMatcher.from_patterns(args.exclude) if args.exclude else None

    registry = build_registry_client(
        offline=args.offline, maven_url=args.maven_url, timeout=args.timeout
    )
    try:
        records = JarInventory(resolver=IdentityResolver(registry=registry)).build(
            root_path=root_path, extension=args.extension, matcher=matcher
        )
    except (OSError, CorruptArchiveError) as exc:
        logger.warning(f"Inventory failed (path={root_path} error={exc})")
        stderr.write(f"Inventory failed: {exc}\n")
        return 1
    finally:
        registry.close()

    logger.info(f"Found {len(records)} JAR libs in jarext dir (path={root_path})")
    try:
        _write_output(
            records=records,
            columns=columns,
            output_format=args.format,
            output=args.output,
            release=args.release,
            stdout=stdout,
        )
    except OSError as exc:
        logger.warning(f"Failed to write report (output={args.output} error={exc})")
        stderr.write(f"Failed to write report: {exc}\n")
        return 1
    return 0


def build_registry_client(
    offline: bool, maven_url: str | None, timeout: float
) -> RegistryClient:
    """Create the configured registry client.

    Args:
        offline: Whether to skip network lookups entirely.
        maven_url: Optional Maven Central endpoint override.
        timeout: Request timeout in seconds.

    Returns:
        Configured registry client.
    """
    if offline:
        return OfflineRegistryClient()
    return MavenCentralClient(base_url=maven_url, timeout=timeout)


def _write_output(
    records: list[ArchiveRecord],
    columns: Sequence[str],
    output_format: str,
    output: str | None,
    release: str,
    stdout: TextIO,
) -> None:
    """Dispatch records to the selected sink.

    Raises:
        OSError: If an output file cannot be written.
    """
    if output_format == "csv":
        write_csv(Path(output or default_report_name(release)), records, columns)
    elif output_format == "json":
        if output:
            _write_json_file(records=records, columns=columns, output_path=Path(output))
        else:
            _write_json(records=records, columns=columns, stdout=stdout)
    else:
        _write_table(records=records, columns=columns, stdout=stdout)


def _write_json(
    records: list[ArchiveRecord], columns: Sequence[str], stdout: TextIO
) -> None:
    payload = {"records": to_rows(records, columns)}
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(payload, indent=2),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(
    records: list[ArchiveRecord], columns: Sequence[str], output_path: Path
) -> None:
    """Write raw JSON payload to an output file.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    payload = {"records": to_rows(records, columns)}
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info(f"Wrote report (path={output_path} rows={len(records)})")


def _write_table(
    records: list[ArchiveRecord], columns: Sequence[str], stdout: TextIO
) -> None:
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    table = Table(show_header=True, show_lines=False, expand=True)
    for column in columns:
        table.add_column(column, overflow="fold")
    for row in to_rows(records, columns):
        table.add_row(*row.values())
    console.print(table)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
