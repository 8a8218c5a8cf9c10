# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for the jarext-report CLI."""

import csv
import io
import json
import re
from pathlib import Path

from cli.jarext_report import build_registry_client, run
from jarext.registry import MavenCentralClient, OfflineRegistryClient


def _strip_ansi(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def _run(argv: list[str]) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    exit_code = run(argv, stdout=stdout, stderr=stderr)
    return exit_code, stdout.getvalue(), stderr.getvalue()


def test_inv_cli_001_requires_path_argument() -> None:
    exit_code, _, _ = _run([])

    assert exit_code == 2


def test_inv_cli_002_rejects_missing_root(tmp_path: Path) -> None:
    exit_code, stdout, stderr = _run(["--path", str(tmp_path / "missing"), "--offline"])

    assert exit_code == 2
    assert stdout == ""
    assert "is not a directory or does not exist" in stderr


def test_inv_cli_003_json_output_lists_public_columns(tmp_path: Path, write_jar) -> None:
    write_jar(tmp_path / "a" / "b.jar", manifest="Bundle-Name: Bee\nBundle-Version: 2\n")
    write_jar(tmp_path / "d.jar")

    exit_code, stdout, _ = _run(
        ["--path", str(tmp_path), "--offline", "--format", "json"]
    )

    assert exit_code == 0
    payload = json.loads(_strip_ansi(stdout))
    assert [row["File"] for row in payload["records"]] == ["a/b.jar", "d.jar"]
    assert payload["records"][0]["Title"] == "Bee"
    assert payload["records"][1]["Title"] == ""
    assert "Sha1" not in payload["records"][0]


def test_inv_cli_004_full_json_written_to_output_file(tmp_path: Path, write_jar) -> None:
    root = tmp_path / "jarext"
    write_jar(root / "x.jar", manifest="Implementation-Vendor: Acme\n")
    output_path = tmp_path / "out" / "report.json"

    exit_code, stdout, _ = _run(
        [
            "--path",
            str(root),
            "--offline",
            "--full",
            "--format",
            "json",
            "--output",
            str(output_path),
        ]
    )

    assert exit_code == 0
    assert stdout == ""
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["records"][0]["ImplVendor"] == "Acme"
    assert len(payload["records"][0]["Sha1"]) == 40


def test_inv_cli_005_csv_output_file(tmp_path: Path, write_jar) -> None:
    root = tmp_path / "jarext"
    write_jar(root / "x.jar", manifest="Specification-Title: Spec\n")
    write_jar(root / "skip" / "y.jar")
    output_path = tmp_path / "report.csv"

    exit_code, _, _ = _run(
        [
            "--path",
            str(root),
            "--offline",
            "--exclude",
            "skip/",
            "--format",
            "csv",
            "--output",
            str(output_path),
        ]
    )

    assert exit_code == 0
    with output_path.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert [row["File"] for row in rows] == ["x.jar"]
    assert rows[0]["Title"] == "Spec"


def test_inv_cli_006_csv_default_name_uses_release(
    tmp_path: Path, write_jar, monkeypatch
) -> None:
    root = tmp_path / "jarext"
    write_jar(root / "x.jar")
    monkeypatch.chdir(tmp_path)

    exit_code, _, _ = _run(
        ["--path", str(root), "--offline", "--format", "csv", "--release", "2024b"]
    )

    assert exit_code == 0
    assert (tmp_path / "jarexts-R2024b.csv").is_file()


def test_inv_cli_007_table_output_shows_files(
    tmp_path: Path, write_jar, monkeypatch
) -> None:
    monkeypatch.setenv("COLUMNS", "400")
    write_jar(tmp_path / "lib.jar", manifest="Bundle-Name: Lib\n")

    exit_code, stdout, _ = _run(["--path", str(tmp_path), "--offline"])

    assert exit_code == 0
    compact_text = re.sub(r"[^a-zA-Z0-9_.]+", "", _strip_ansi(stdout))
    assert "lib.jar" in compact_text
    assert "Title" in compact_text


def test_inv_cli_008_corrupt_archive_fails_without_report(tmp_path: Path) -> None:
    root = tmp_path / "jarext"
    root.mkdir()
    (root / "broken.jar").write_bytes(b"garbage")
    output_path = tmp_path / "report.csv"

    exit_code, _, stderr = _run(
        ["--path", str(root), "--offline", "--format", "csv", "--output", str(output_path)]
    )

    assert exit_code == 1
    assert "Inventory failed" in stderr
    assert not output_path.exists()


def test_inv_cli_009_rejects_non_positive_timeout(tmp_path: Path) -> None:
    exit_code, _, stderr = _run(["--path", str(tmp_path), "--timeout", "0"])

    assert exit_code == 2
    assert "timeout" in stderr


def test_inv_cli_010_build_registry_client_honours_offline_flag() -> None:
    offline = build_registry_client(offline=True, maven_url=None, timeout=5.0)
    online = build_registry_client(
        offline=False, maven_url="http://mirror.local/select", timeout=5.0
    )
    try:
        assert isinstance(offline, OfflineRegistryClient)
        assert isinstance(online, MavenCentralClient)
        assert online.base_url == "http://mirror.local/select"
        assert online.timeout == 5.0
    finally:
        online.close()


def test_inv_cli_011_encrypted_manifest_fails_with_message(
    tmp_path: Path, write_jar
) -> None:
    jar = write_jar(tmp_path / "locked.jar", manifest="Bundle-Name: Locked\n")
    data = bytearray(jar.read_bytes())
    data[6] |= 0x01
    data[data.find(b"PK\x01\x02") + 8] |= 0x01
    jar.write_bytes(bytes(data))

    exit_code, stdout, stderr = _run(
        ["--path", str(tmp_path), "--offline", "--format", "json"]
    )

    assert exit_code == 1
    assert stdout == ""
    assert "Inventory failed" in stderr
