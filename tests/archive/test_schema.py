#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for build schema loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from shellpack.archive import BuildSchema, load_schema
from shellpack.exceptions import JsonParseError, SchemaFormatError, SchemaNotFoundError


def test_load_schema_keeps_declaration_order(tmp_path: Path) -> None:
    path = tmp_path / ".build-schema.json"
    path.write_text('{"allowed_files": ["b.js", "a.js"], "allowed_directories": ["library", "schemas"]}')

    schema = load_schema(path)

    assert schema.allowed_files == ("b.js", "a.js")
    assert schema.allowed_directories == ("library", "schemas")
    assert schema.file_set == frozenset({"a.js", "b.js"})


def test_missing_schema(tmp_path: Path) -> None:
    with pytest.raises(SchemaNotFoundError) as exc_info:
        load_schema(tmp_path / ".build-schema.json")
    assert exc_info.value.path == tmp_path / ".build-schema.json"


def test_malformed_schema_json(tmp_path: Path) -> None:
    path = tmp_path / ".build-schema.json"
    path.write_text('{"allowed_files": [')

    with pytest.raises(JsonParseError) as exc_info:
        load_schema(path)
    assert exc_info.value.path == path


@pytest.mark.parametrize(
    ("document", "message"),
    [
        ("[]", "must be a JSON object"),
        ('{"allowed_files": []}', "missing 'allowed_directories'"),
        ('{"allowed_directories": []}', "missing 'allowed_files'"),
        ('{"allowed_files": "a.js", "allowed_directories": []}', "must be a list"),
        ('{"allowed_files": [1], "allowed_directories": []}', "must be a list"),
    ],
)
def test_schema_shape_is_checked(tmp_path: Path, document: str, message: str) -> None:
    path = tmp_path / ".build-schema.json"
    path.write_text(document)

    with pytest.raises(SchemaFormatError, match=message):
        load_schema(path)


def test_schema_is_immutable() -> None:
    schema = BuildSchema(allowed_files=["a.js"], allowed_directories=[])
    assert isinstance(schema.allowed_files, tuple)
    with pytest.raises(AttributeError):
        schema.allowed_files = ("b.js",)  # type: ignore[misc]


# 🌶️📦🔚
