# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for archive discovery."""

from pathlib import Path

import pytest

from jarext.walker import ExcludeMatcher, find_files, iter_archives


def _touch(path: Path, content: bytes = b"x") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


def test_inv_walk_001_find_files_lists_all_regular_files_relative_to_root(
    tmp_path: Path,
) -> None:
    _touch(tmp_path / "a" / "b.jar")
    _touch(tmp_path / "a" / "c.txt")
    _touch(tmp_path / "d.jar")
    (tmp_path / "empty").mkdir()

    assert set(find_files(tmp_path)) == {"a/b.jar", "a/c.txt", "d.jar"}


def test_inv_walk_002_iter_archives_keeps_only_archive_extension(tmp_path: Path) -> None:
    _touch(tmp_path / "a" / "b.jar")
    _touch(tmp_path / "a" / "c.txt")
    _touch(tmp_path / "d.jar")

    archives = list(iter_archives(tmp_path))

    assert {archive.relative_path for archive in archives} == {"a/b.jar", "d.jar"}
    for archive in archives:
        assert archive.absolute_path == tmp_path / archive.relative_path


def test_inv_walk_003_extension_match_is_a_suffix_match(tmp_path: Path) -> None:
    _touch(tmp_path / "lib.jar.bak")
    _touch(tmp_path / "Upper.JAR")
    _touch(tmp_path / "nested" / "deep" / "x.jar")

    assert [a.relative_path for a in iter_archives(tmp_path)] == ["nested/deep/x.jar"]


def test_inv_walk_004_missing_root_raises_not_a_directory(tmp_path: Path) -> None:
    with pytest.raises(NotADirectoryError):
        find_files(tmp_path / "missing")


def test_inv_walk_005_file_root_raises_not_a_directory(tmp_path: Path) -> None:
    file_root = tmp_path / "plain.jar"
    _touch(file_root)

    with pytest.raises(NotADirectoryError):
        list(iter_archives(file_root))


def test_inv_walk_006_exclude_patterns_drop_matching_archives(tmp_path: Path) -> None:
    _touch(tmp_path / "keep" / "a.jar")
    _touch(tmp_path / "skip" / "b.jar")
    _touch(tmp_path / "keep" / "c-sources.jar")
    matcher = ExcludeMatcher.from_patterns(["skip/", "*-sources.jar", "# comment", ""])

    archives = list(iter_archives(tmp_path, matcher=matcher))

    assert [a.relative_path for a in archives] == ["keep/a.jar"]


def test_inv_walk_007_results_are_sorted_by_relative_path(tmp_path: Path) -> None:
    for name in ("z.jar", "m/a.jar", "a.jar", "m/b/c.jar"):
        _touch(tmp_path / name)

    assert find_files(tmp_path) == ["a.jar", "m/a.jar", "m/b/c.jar", "z.jar"]
