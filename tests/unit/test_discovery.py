# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from pathlib import Path

import pytest

from ccd.discovery import DiscoveryError, discover_files, load_ignore_spec


def _names(paths: list[Path], root: Path) -> list[str]:
    return [path.relative_to(root).as_posix() for path in paths]


def test_disc_001_directory_target_collects_matching_extensions(
    tmp_path: Path, write_file
) -> None:
    write_file(tmp_path / "src" / "b.js", "")
    write_file(tmp_path / "src" / "a.js", "")
    write_file(tmp_path / "src" / "nested" / "c.js", "")
    write_file(tmp_path / "src" / "readme.md", "")

    paths = discover_files(["src"], root=tmp_path)

    assert _names(paths, tmp_path) == ["src/a.js", "src/b.js", "src/nested/c.js"]


def test_disc_002_glob_target_uses_gitignore_syntax(tmp_path: Path, write_file) -> None:
    write_file(tmp_path / "lib" / "one.js", "")
    write_file(tmp_path / "lib" / "deep" / "two.js", "")
    write_file(tmp_path / "lib" / "three.ts", "")

    paths = discover_files(["lib/**/*.js"], root=tmp_path)

    assert _names(paths, tmp_path) == ["lib/deep/two.js", "lib/one.js"]


def test_disc_003_groups_keep_order_and_drop_duplicates(tmp_path: Path, write_file) -> None:
    write_file(tmp_path / "a.js", "")
    write_file(tmp_path / "b.js", "")

    paths = discover_files(["b.js", "*.js"], root=tmp_path)

    assert _names(paths, tmp_path) == ["b.js", "a.js"]


def test_disc_004_missing_file_target_is_kept_for_the_scanner(
    tmp_path: Path, write_file
) -> None:
    write_file(tmp_path / "a.js", "")

    paths = discover_files(["missing.js", "a.js"], root=tmp_path)

    assert _names(paths, tmp_path) == ["missing.js", "a.js"]


def test_disc_005_gitignored_files_are_skipped_from_expansion(
    tmp_path: Path, write_file
) -> None:
    write_file(tmp_path / ".gitignore", "# build output\nvendor/\npkg/generated.js\n")
    write_file(tmp_path / "app.js", "")
    write_file(tmp_path / "vendor" / "lib.js", "")
    write_file(tmp_path / "pkg" / "generated.js", "")
    write_file(tmp_path / "pkg" / "kept.js", "")

    ignored = discover_files(["."], root=tmp_path)
    everything = discover_files(["."], root=tmp_path, respect_gitignore=False)
    explicit = discover_files(["vendor/lib.js"], root=tmp_path)

    assert _names(ignored, tmp_path) == ["app.js", "pkg/kept.js"]
    assert _names(everything, tmp_path) == [
        "app.js",
        "pkg/generated.js",
        "pkg/kept.js",
        "vendor/lib.js",
    ]
    assert _names(explicit, tmp_path) == ["vendor/lib.js"]


def test_disc_006_root_must_be_a_directory(tmp_path: Path) -> None:
    with pytest.raises(DiscoveryError):
        discover_files(["a.js"], root=tmp_path / "missing")


def test_disc_007_ignore_spec_is_optional_and_must_be_readable(tmp_path: Path) -> None:
    assert load_ignore_spec(tmp_path) is None

    (tmp_path / ".gitignore").write_bytes(b"\xff\xfe\x00")

    with pytest.raises(DiscoveryError, match="Failed to read"):
        discover_files(["."], root=tmp_path)
    assert discover_files(["."], root=tmp_path, respect_gitignore=False) == []
