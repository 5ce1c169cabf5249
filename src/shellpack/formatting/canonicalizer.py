#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Deterministic JSON canonicalization for project files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from provide.foundation import logger
from provide.foundation.console import pout
from provide.foundation.file import atomic_write_text

from shellpack.config.defaults import DEFAULT_EXCLUDE_DIRS
from shellpack.exceptions import JsonParseError, SourceReadError
from shellpack.formatting.discovery import DirectoryTree, LocalDirectoryTree, iter_json_files
from shellpack.formatting.render import render
from shellpack.formatting.values import parse_json, sort_keys_deep


def canonicalize(raw_text: str) -> str:
    """Return the canonical text of a JSON document.

    Structurally equal documents always produce identical text, and the
    output is a fixed point: canonicalizing it again returns it unchanged.

    Raises:
        JsonParseError: If ``raw_text`` is not valid JSON.
    """
    value = parse_json(raw_text)
    try:
        return render(sort_keys_deep(value)) + "\n"
    except RecursionError as e:
        raise JsonParseError("nesting too deep") from e


def _read_source(path: Path) -> str:
    try:
        # Bytes keep CRLF and trailing whitespace visible to the comparison
        return path.read_bytes().decode("utf-8")
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid UTF-8 ({e.reason})") from e


def format_json_file(path: Path, project_root: Path) -> bool:
    """Rewrite ``path`` in canonical form if it is not already canonical.

    Returns:
        True if the file was rewritten, False if it was left untouched

    Raises:
        SourceReadError: If the file cannot be read
        JsonParseError: If the file is not valid JSON
    """
    raw = _read_source(path)
    try:
        formatted = canonicalize(raw)
    except JsonParseError as e:
        raise e.with_path(path) from e

    if raw == formatted:
        logger.trace("JSON already canonical", path=str(path))
        return False

    atomic_write_text(path, formatted)
    relative = path.relative_to(project_root) if path.is_relative_to(project_root) else path
    logger.debug("Formatted JSON file", path=str(relative))
    pout(f"Formatted: {relative}")
    return True


def format_json_tree(
    root: Path,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    tree: DirectoryTree | None = None,
) -> list[Path]:
    """Canonicalize every JSON file under ``root``.

    Files are processed one at a time; the first failure propagates and
    stops the run.

    Returns:
        The files that were rewritten
    """
    tree = tree or LocalDirectoryTree()
    rewritten: list[Path] = []
    checked = 0
    for json_path in iter_json_files(root, exclude_dirs, tree):
        checked += 1
        if format_json_file(Path(json_path), root):
            rewritten.append(Path(json_path))

    logger.info("JSON formatting complete", root=str(root), checked=checked, rewritten=len(rewritten))
    return rewritten


# 🌶️📦🔚
