#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for shellpack tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import json
from pathlib import Path, PurePath

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from shellpack.formatting.discovery import TreeEntry

EXTENSION_UUID = "brightness-restore@DarkPhilosophy"

BUILD_SCHEMA = {
    "allowed_directories": ["library", "schemas"],
    "allowed_files": [
        "extension.js",
        "prefs.js",
        "metadata.json",
        "library/brightness.js",
        "schemas/org.gnome.shell.extensions.brightness-restore.gschema.xml",
    ],
}


class MemoryTree:
    """In-memory DirectoryTree built from nested dicts.

    Dict values are directories, anything else is a file. The walk must
    start at PurePosixPath("/").
    """

    def __init__(self, layout: dict[str, object]) -> None:
        self.layout = layout
        self.listed: list[PurePath] = []

    def _node(self, path: PurePath) -> dict[str, object]:
        node = self.layout
        for part in path.parts[1:]:
            child = node[part]
            assert isinstance(child, dict)
            node = child
        return node

    def entries(self, path: PurePath) -> Iterable[TreeEntry]:
        self.listed.append(path)
        node = self._node(path)
        return [TreeEntry(name=name, is_dir=isinstance(child, dict)) for name, child in node.items()]


@pytest.fixture
def schema_writer() -> Callable[[Path, dict[str, list[str]]], Path]:
    """Writer for canonical build schema documents."""
    return write_schema


@pytest.fixture
def memory_tree() -> type[MemoryTree]:
    """In-memory directory tree factory for discovery tests."""
    return MemoryTree


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def extension_project(tmp_path: Path) -> Path:
    """Create an extension project laid out the way the packager expects.

    The JSON files are already canonical so formatting leaves them alone.
    """
    project = tmp_path / "project"
    source = project / "extension"
    (source / "library").mkdir(parents=True)
    (source / "schemas").mkdir()

    (source / "extension.js").write_text("export default class Extension {}\n")
    (source / "prefs.js").write_text("export default class Prefs {}\n")
    (source / "metadata.json").write_text(
        '{\n  "name": "Brightness Restore",\n  "shell-version": ["45", "46"],\n'
        f'  "uuid": "{EXTENSION_UUID}"\n}}\n'
    )
    (source / "library" / "brightness.js").write_text("export const level = 1;\n")
    (source / "schemas" / "org.gnome.shell.extensions.brightness-restore.gschema.xml").write_text(
        "<schemalist/>\n"
    )
    (source / "schemas" / "gschemas.compiled").write_bytes(b"\x00compiled")
    (source / "README.txt").write_text("not packaged\n")

    write_schema(project / ".build-schema.json", BUILD_SCHEMA)
    (project / "package.json").write_text('{\n  "name": "brightness-restore",\n  "version": "14.0.0"\n}\n')
    return project


def write_schema(path: Path, schema: dict[str, list[str]]) -> Path:
    lines = [
        "{",
        f'  "allowed_directories": {json.dumps(schema["allowed_directories"])},',
        f'  "allowed_files": {json.dumps(schema["allowed_files"])}',
        "}",
    ]
    path.write_text("\n".join(lines) + "\n")
    return path


# 🌶️📦🔚
