#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reconcile archive contents against the build schema."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from attrs import field, frozen
from provide.foundation import logger

from shellpack.archive.listing import list_archive_entries
from shellpack.archive.schema import BuildSchema, load_schema
from shellpack.config.defaults import ZIP_SEPARATOR
from shellpack.exceptions import SchemaMismatchError


class EntryKind(Enum):
    FILE = "File"
    DIRECTORY = "Directory"


@frozen
class UnexpectedEntry:
    kind: EntryKind
    path: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path}"


@frozen
class ArchiveReport:
    """Outcome of one reconciliation run."""

    missing: tuple[str, ...] = field(converter=tuple)
    unexpected: tuple[UnexpectedEntry, ...] = field(converter=tuple)
    found: frozenset[str] = field(converter=frozenset)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.unexpected

    def lines(self) -> list[str]:
        """Human-readable report, missing items first."""
        lines: list[str] = []
        if self.missing:
            lines.append("Missing expected files:")
            lines.extend(f"   - {path}" for path in self.missing)
        if self.unexpected:
            lines.append("Unexpected items in ZIP:")
            lines.extend(f"   - {item}" for item in self.unexpected)
        return lines


def check_entries(entries: Iterable[str], schema: BuildSchema) -> ArchiveReport:
    """Compare archive entries with the schema without raising.

    Directory entries (trailing ``/``) only need to be declared directories;
    their contents are covered by the file check. Every declared file that
    never appears is reported as missing.
    """
    allowed_files = schema.file_set
    allowed_dirs = schema.directory_set
    unexpected: list[UnexpectedEntry] = []
    found: set[str] = set()

    for entry in entries:
        if entry.endswith(ZIP_SEPARATOR):
            directory = entry.removesuffix(ZIP_SEPARATOR)
            if directory and directory not in allowed_dirs:
                unexpected.append(UnexpectedEntry(EntryKind.DIRECTORY, directory))
        elif entry in allowed_files:
            found.add(entry)
        else:
            unexpected.append(UnexpectedEntry(EntryKind.FILE, entry))

    missing = [path for path in schema.allowed_files if path not in found]
    return ArchiveReport(missing=missing, unexpected=unexpected, found=found)


def validate_entries(entries: Iterable[str], schema: BuildSchema) -> ArchiveReport:
    """Reconcile entries with the schema.

    Raises:
        SchemaMismatchError: If anything is missing or unexpected. The
            attached report lists every discrepancy.
    """
    report = check_entries(entries, schema)
    if not report.ok:
        logger.error(
            "Archive does not match build schema",
            missing=list(report.missing),
            unexpected=[str(item) for item in report.unexpected],
        )
        raise SchemaMismatchError(report)

    logger.debug("Archive matches build schema", files=len(report.found))
    return report


def validate_archive(archive_path: Path, schema_path: Path) -> ArchiveReport:
    """Load the schema, list the archive and reconcile the two."""
    schema = load_schema(schema_path)
    entries = list_archive_entries(archive_path)
    logger.debug("Listed archive", archive=str(archive_path), entries=len(entries))
    return validate_entries(entries, schema)


# 🌶️📦🔚
