#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Deterministic JSON formatting for extension sources."""

from shellpack.formatting.canonicalizer import canonicalize, format_json_file, format_json_tree
from shellpack.formatting.discovery import (
    DirectoryTree,
    LocalDirectoryTree,
    TreeEntry,
    iter_json_files,
)
from shellpack.formatting.render import render, render_inline, render_scalar
from shellpack.formatting.values import JsonValue, parse_json, sort_keys_deep

__all__ = [
    "DirectoryTree",
    "JsonValue",
    "LocalDirectoryTree",
    "TreeEntry",
    "canonicalize",
    "format_json_file",
    "format_json_tree",
    "iter_json_files",
    "parse_json",
    "render",
    "render_inline",
    "render_scalar",
    "sort_keys_deep",
]

# 🌶️📦🔚
