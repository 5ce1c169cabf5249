#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Packaging and validation of extension archives."""

from shellpack.archive.builder import (
    PackageLayout,
    build_extension_package,
    read_extension_uuid,
    stage_extension,
    write_zip,
)
from shellpack.archive.listing import list_archive_entries
from shellpack.archive.schema import BuildSchema, load_schema
from shellpack.archive.validator import (
    ArchiveReport,
    EntryKind,
    UnexpectedEntry,
    check_entries,
    validate_archive,
    validate_entries,
)

__all__ = [
    "ArchiveReport",
    "BuildSchema",
    "EntryKind",
    "PackageLayout",
    "UnexpectedEntry",
    "build_extension_package",
    "check_entries",
    "list_archive_entries",
    "load_schema",
    "read_extension_uuid",
    "stage_extension",
    "validate_archive",
    "validate_entries",
    "write_zip",
]

# 🌶️📦🔚
