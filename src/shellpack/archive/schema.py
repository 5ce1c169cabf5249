#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build schema: the flat allow-list a package must match."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from attrs import field, frozen
from provide.foundation import logger

from shellpack.exceptions import JsonParseError, SchemaFormatError, SchemaNotFoundError, SourceReadError
from shellpack.formatting.values import parse_json

SCHEMA_FIELDS = ("allowed_files", "allowed_directories")


@frozen
class BuildSchema:
    """Declared package contents.

    Paths are relative, case-sensitive and carry no trailing slash. The
    tuples keep declaration order for reporting.
    """

    allowed_files: tuple[str, ...] = field(converter=tuple)
    allowed_directories: tuple[str, ...] = field(converter=tuple)

    @property
    def file_set(self) -> frozenset[str]:
        return frozenset(self.allowed_files)

    @property
    def directory_set(self) -> frozenset[str]:
        return frozenset(self.allowed_directories)

    @classmethod
    def from_dict(cls, data: Any) -> BuildSchema:
        """Build a schema from a parsed JSON document."""
        if not isinstance(data, dict):
            raise SchemaFormatError("Build schema must be a JSON object")
        lists = {name: _path_list(data, name) for name in SCHEMA_FIELDS}
        return cls(**lists)


def _path_list(data: dict[str, Any], name: str) -> list[str]:
    if name not in data:
        raise SchemaFormatError(f"Build schema is missing '{name}'")
    value = data[name]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise SchemaFormatError(f"Build schema field '{name}' must be a list of path strings")
    return value


def load_schema(path: Path) -> BuildSchema:
    """Read and check the build schema document.

    Raises:
        SchemaNotFoundError: If the document does not exist
        SourceReadError: If it exists but cannot be read
        JsonParseError: If it is not valid JSON
        SchemaFormatError: If it lacks either allow-list
    """
    if not path.is_file():
        raise SchemaNotFoundError(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e

    try:
        data = parse_json(raw)
    except JsonParseError as e:
        raise e.with_path(path) from e

    schema = BuildSchema.from_dict(data)
    logger.debug(
        "Loaded build schema",
        path=str(path),
        files=len(schema.allowed_files),
        directories=len(schema.allowed_directories),
    )
    return schema


# 🌶️📦🔚
