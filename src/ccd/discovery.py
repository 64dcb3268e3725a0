# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Resolve CLI targets into the ordered list of files to scan."""

import logging
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".js",)
GLOB_CHARACTERS = frozenset("*?[")
GITIGNORE_FILE = ".gitignore"


class DiscoveryError(RuntimeError):
    """Represent an unusable discovery root or ignore file."""


def discover_files(
    targets: list[str],
    root: Path,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    respect_gitignore: bool = True,
) -> list[Path]:
    """Expand targets into files to scan.

    Each target is one group and groups keep their order. A target with glob
    characters is a gitignore-style pattern relative to ``root``; a directory
    contributes its files with matching extensions; anything else is a file
    path and is kept as given, existing or not.

    Args:
        targets: Patterns, directories or file paths.
        root: Base directory for patterns and relative paths.
        extensions: File suffixes collected from directories.
        respect_gitignore: Drop files matched by ``root/.gitignore`` from
            pattern and directory expansion.

    Returns:
        Paths without duplicates, first occurrence wins.

    Raises:
        DiscoveryError: If ``root`` is not a directory or its .gitignore
            cannot be read.
    """
    if not root.is_dir():
        raise DiscoveryError(f"Root path is not a directory: {root}")
    ignore_spec = load_ignore_spec(root) if respect_gitignore else None

    discovered: list[Path] = []
    seen: set[Path] = set()
    for target in targets:
        for file_path in _expand_target(target, root, extensions, ignore_spec):
            key = file_path.resolve()
            if key in seen:
                continue
            seen.add(key)
            discovered.append(file_path)

    logger.info(f"File discovery completed (targets={len(targets)} files={len(discovered)})")
    return discovered


def load_ignore_spec(root: Path) -> pathspec.GitIgnoreSpec | None:
    """Compile the root .gitignore, or return ``None`` when there is none."""
    ignore_path = root / GITIGNORE_FILE
    if not ignore_path.is_file():
        return None
    try:
        lines = ignore_path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise DiscoveryError(f"Failed to read {ignore_path}: {exc}") from exc
    return pathspec.GitIgnoreSpec.from_lines(lines)


def _expand_target(
    target: str,
    root: Path,
    extensions: tuple[str, ...],
    ignore_spec: pathspec.GitIgnoreSpec | None,
) -> list[Path]:
    if GLOB_CHARACTERS.intersection(target):
        spec = pathspec.GitIgnoreSpec.from_lines([target])
        candidates = [root / relative for relative in spec.match_tree_files(str(root))]
        return _without_ignored(sorted(candidates), root, ignore_spec)

    path = Path(target)
    if not path.is_absolute():
        path = root / path
    if path.is_dir():
        candidates = [
            candidate
            for candidate in path.rglob("*")
            if candidate.is_file() and candidate.suffix in extensions
        ]
        return _without_ignored(sorted(candidates), root, ignore_spec)
    return [path]


def _without_ignored(
    candidates: list[Path], root: Path, ignore_spec: pathspec.GitIgnoreSpec | None
) -> list[Path]:
    if ignore_spec is None:
        return candidates
    kept: list[Path] = []
    for candidate in candidates:
        try:
            relative = candidate.relative_to(root).as_posix()
        except ValueError:
            kept.append(candidate)
            continue
        if ignore_spec.match_file(relative):
            logger.debug(f"Skipping ignored file (path={relative})")
            continue
        kept.append(candidate)
    return kept
