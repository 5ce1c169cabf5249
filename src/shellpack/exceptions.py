#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for shellpack."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from provide.foundation.errors import FoundationError

if TYPE_CHECKING:
    from shellpack.archive.validator import ArchiveReport


class ShellpackError(FoundationError):
    """Base exception for all shellpack errors."""

    pass


class ParseError(ShellpackError):
    """Raised when a document cannot be parsed."""

    pass


class JsonParseError(ParseError):
    """Raised when JSON text is malformed."""

    def __init__(self, detail: str, path: Path | None = None) -> None:
        self.detail = detail
        self.path = path
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}invalid JSON: {detail}")

    def with_path(self, path: Path) -> JsonParseError:
        """Return a copy of this error that names the offending file."""
        return JsonParseError(self.detail, path)


class SourceReadError(ShellpackError):
    """Raised when an input file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class SchemaNotFoundError(SourceReadError):
    """Raised when the build schema document does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "schema file not found")


class SchemaFormatError(ShellpackError):
    """Raised when the build schema document has the wrong shape."""

    pass


class ArchiveReadError(ShellpackError):
    """Raised when an archive listing cannot be produced."""

    pass


class SchemaMismatchError(ShellpackError):
    """Raised when archive contents disagree with the build schema."""

    def __init__(self, report: ArchiveReport) -> None:
        self.report = report
        super().__init__(
            f"Archive does not match schema: {len(report.missing)} missing, "
            f"{len(report.unexpected)} unexpected"
        )


class PackagingError(ShellpackError):
    """Raised for errors during packaging orchestration."""

    pass


class ManifestVersionError(ShellpackError):
    """Raised when the local manifest version cannot be determined."""

    pass


# 🌶️📦🔚
