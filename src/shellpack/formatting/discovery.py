#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""JSON file discovery over an injectable directory tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path, PurePath
from typing import Protocol

from attrs import frozen

from shellpack.config.defaults import JSON_SUFFIX


@frozen
class TreeEntry:
    """A single directory entry."""

    name: str
    is_dir: bool


class DirectoryTree(Protocol):
    """Anything that can list the entries of a directory."""

    def entries(self, path: PurePath) -> Iterable[TreeEntry]: ...


class LocalDirectoryTree:
    """DirectoryTree backed by the real filesystem."""

    def entries(self, path: PurePath) -> Iterable[TreeEntry]:
        children = sorted(Path(path).iterdir(), key=lambda child: child.name)
        return [TreeEntry(name=child.name, is_dir=child.is_dir()) for child in children]


def is_json_file(name: str) -> bool:
    return name.endswith(JSON_SUFFIX)


def iter_json_files(
    root: PurePath,
    exclude_dirs: Iterable[str],
    tree: DirectoryTree,
) -> Iterator[PurePath]:
    """Walk ``tree`` depth-first from ``root`` and yield every JSON file.

    Any entry whose name is listed in ``exclude_dirs`` is skipped before it
    is inspected, so excluded names never contribute files.

    Args:
        root: Directory to start from
        exclude_dirs: Entry names to skip at any depth
        tree: Source of directory listings

    Yields:
        Paths of JSON files, in walk order
    """
    excluded = frozenset(exclude_dirs)
    for entry in tree.entries(root):
        if entry.name in excluded:
            continue
        child = root / entry.name
        if entry.is_dir:
            yield from iter_json_files(child, excluded, tree)
        elif is_json_file(entry.name):
            yield child


# 🌶️📦🔚
