#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build driver: stage extension files, zip them and validate the result."""

from __future__ import annotations

from collections.abc import Iterable
import json
from pathlib import Path
import tempfile
import zipfile

from attrs import field, frozen
from provide.foundation import logger
from provide.foundation.file import ensure_dir, safe_copy

from shellpack.archive.validator import ArchiveReport, validate_archive
from shellpack.config.defaults import (
    ARCHIVE_SUFFIX,
    COPIED_DIRS,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_SCHEMA_FILE,
    DEFAULT_SOURCE_DIR,
    FILTERED_DIRS,
    METADATA_FILE,
    ROOT_FILE_PATTERNS,
    ZIP_DIR_MODE,
    ZIP_EPOCH,
    ZIP_FILE_MODE,
    ZIP_SEPARATOR,
)
from shellpack.exceptions import PackagingError, SchemaMismatchError, SourceReadError
from shellpack.formatting.canonicalizer import format_json_tree


@frozen
class PackageLayout:
    """Which extension sources end up where in the package.

    Root patterns land at the archive root, copied directories are taken
    whole, and filtered directories only keep files matching their pattern.
    """

    source_dir: str = DEFAULT_SOURCE_DIR
    root_patterns: tuple[str, ...] = field(default=ROOT_FILE_PATTERNS, converter=tuple)
    copied_dirs: tuple[str, ...] = field(default=COPIED_DIRS, converter=tuple)
    filtered_dirs: dict[str, str] = field(factory=lambda: dict(FILTERED_DIRS))


def read_extension_uuid(metadata_path: Path) -> str:
    """Read the extension UUID that names the package."""
    try:
        metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SourceReadError(metadata_path, str(e)) from e
    except json.JSONDecodeError as e:
        raise PackagingError(f"Invalid extension metadata {metadata_path}: {e}") from e

    uuid = metadata.get("uuid") if isinstance(metadata, dict) else None
    if not isinstance(uuid, str) or not uuid:
        raise PackagingError(f"Extension metadata {metadata_path} has no 'uuid'")
    return uuid


def _copy_file(source: Path, destination: Path, staged: list[Path]) -> None:
    safe_copy(source, destination, preserve_mode=True, overwrite=True)
    staged.append(destination)
    logger.trace(f"  📄 Staged: {destination.name}")


def stage_extension(project_root: Path, layout: PackageLayout, staging_dir: Path) -> list[Path]:
    """Copy the files that belong in the package into ``staging_dir``.

    Returns:
        The staged file paths

    Raises:
        PackagingError: If the source tree or a copied directory is missing
    """
    source = project_root / layout.source_dir
    if not source.is_dir():
        raise PackagingError(f"Extension source directory not found: {source}")

    staged: list[Path] = []
    for pattern in layout.root_patterns:
        for path in sorted(source.glob(pattern)):
            if path.is_file():
                _copy_file(path, staging_dir / path.name, staged)

    for name in layout.copied_dirs:
        source_subdir = source / name
        if not source_subdir.is_dir():
            raise PackagingError(f"Required directory not found: {source_subdir}")
        target_subdir = staging_dir / name
        ensure_dir(target_subdir)
        for path in sorted(source_subdir.rglob("*")):
            target = target_subdir / path.relative_to(source_subdir)
            if path.is_dir():
                ensure_dir(target)
            else:
                _copy_file(path, target, staged)

    for name, pattern in layout.filtered_dirs.items():
        target_subdir = staging_dir / name
        ensure_dir(target_subdir)
        for path in sorted((source / name).glob(pattern)):
            if path.is_file():
                _copy_file(path, target_subdir / path.name, staged)

    logger.info("Staged extension files", count=len(staged), staging_dir=str(staging_dir))
    return staged


def _archive_names(staging_dir: Path) -> Iterable[tuple[str, Path]]:
    for path in sorted(staging_dir.rglob("*")):
        name = path.relative_to(staging_dir).as_posix()
        yield (name + ZIP_SEPARATOR if path.is_dir() else name), path


def write_zip(staging_dir: Path, archive_path: Path) -> list[str]:
    """Zip ``staging_dir`` with its contents at the archive root.

    Entries are sorted and carry a fixed timestamp, so the same staged
    files always give the same archive bytes.

    Returns:
        The entry names written
    """
    names: list[str] = []
    with zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, path in _archive_names(staging_dir):
            info = zipfile.ZipInfo(name, date_time=ZIP_EPOCH)
            if path.is_dir():
                info.external_attr = (0o40000 | ZIP_DIR_MODE) << 16
                archive.writestr(info, b"")
            else:
                info.external_attr = (0o100000 | ZIP_FILE_MODE) << 16
                info.compress_type = zipfile.ZIP_DEFLATED
                archive.writestr(info, path.read_bytes())
            names.append(name)

    logger.info("Created package archive", archive=str(archive_path), entries=len(names))
    return names


def build_extension_package(
    project_root: Path,
    layout: PackageLayout | None = None,
    schema_path: Path | None = None,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    format_json: bool = True,
) -> tuple[Path, ArchiveReport]:
    """Run the packaging pipeline for the extension under ``project_root``.

    Stages run in order: canonicalize project JSON, stage the extension
    files, zip them into ``<uuid>.zip`` at the project root, then validate
    the archive against the build schema. Any failure stops the pipeline.
    An archive that fails validation is deleted before the error propagates.

    Returns:
        Tuple of the archive path and its validation report

    Raises:
        JsonParseError: If a project JSON file is malformed
        PackagingError: If the sources are incomplete
        SchemaMismatchError: If the archive does not match the schema
    """
    layout = layout or PackageLayout()
    schema_path = schema_path or project_root / DEFAULT_SCHEMA_FILE

    if format_json:
        format_json_tree(project_root, exclude_dirs)

    uuid = read_extension_uuid(project_root / layout.source_dir / METADATA_FILE)
    archive_path = project_root / f"{uuid}{ARCHIVE_SUFFIX}"
    archive_path.unlink(missing_ok=True)

    with tempfile.TemporaryDirectory(prefix="shellpack-") as temp_dir:
        staging_dir = Path(temp_dir)
        logger.debug("Using temporary directory", staging_dir=str(staging_dir))
        stage_extension(project_root, layout, staging_dir)
        write_zip(staging_dir, archive_path)

    try:
        report = validate_archive(archive_path, schema_path)
    except SchemaMismatchError:
        archive_path.unlink(missing_ok=True)
        raise

    return archive_path, report


# 🌶️📦🔚
