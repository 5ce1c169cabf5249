#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for shellpack."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import httpx

from shellpack.archive.builder import PackageLayout, build_extension_package
from shellpack.archive.validator import ArchiveReport, validate_archive
from shellpack.config.defaults import (
    DEFAULT_EGO_URL,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_SCHEMA_FILE,
    PACKAGE_JSON_FILE,
    README_FILE,
)
from shellpack.formatting.canonicalizer import canonicalize, format_json_tree
from shellpack.release.badges import BadgeUpdate, update_readme_badges
from shellpack.release.published import fetch_published_version, read_manifest_version

__all__ = [
    "PackageLayout",
    "build_extension_package",
    "canonicalize",
    "format_project_json",
    "sync_version_badges",
    "validate_package",
]


def format_project_json(
    project_root: Path,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> list[Path]:
    """Canonicalize every JSON file in a project.

    Walks ``project_root`` recursively, skipping entries named in
    ``exclude_dirs``, and rewrites each JSON file whose text is not already
    canonical. Files are handled one at a time and the first malformed file
    stops the run.

    Args:
        project_root: Directory to walk
        exclude_dirs: Entry names to skip at any depth

    Returns:
        The rewritten files

    Raises:
        JsonParseError: If a JSON file is malformed
        SourceReadError: If a JSON file cannot be read

    Example:
        ```python
        from pathlib import Path
        from shellpack import format_project_json

        for path in format_project_json(Path(".")):
            print(f"Formatted: {path}")
        ```
    """
    return format_json_tree(project_root, exclude_dirs)


def validate_package(archive_path: Path, schema_path: Path | None = None) -> ArchiveReport:
    """Check that an archive holds exactly the files its build schema declares.

    Args:
        archive_path: Path to the zip package
        schema_path: Build schema (default: ``.build-schema.json`` beside the archive)

    Returns:
        The validation report of a matching archive

    Raises:
        SchemaNotFoundError: If the schema document is missing
        ArchiveReadError: If the archive cannot be listed
        SchemaMismatchError: If anything is missing or unexpected; the error
            carries the full report
    """
    schema_path = schema_path or archive_path.parent / DEFAULT_SCHEMA_FILE
    return validate_archive(archive_path, schema_path)


def sync_version_badges(
    project_root: Path,
    ego_url: str = DEFAULT_EGO_URL,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> BadgeUpdate:
    """Compare the local manifest version with the published one and update README badges.

    The published lookup never fails the call; an unreachable site shows up
    as an ``N/A`` badge. A missing or invalid ``package.json`` is fatal.
    """
    local = read_manifest_version(project_root / PACKAGE_JSON_FILE)
    published = fetch_published_version(ego_url, client=client, timeout=timeout)
    return update_readme_badges(project_root / README_FILE, local, published, ego_url)


# 🌶️📦🔚
