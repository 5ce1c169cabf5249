#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for shellpack configuration."""

from __future__ import annotations

# =================================
# JSON formatting defaults
# =================================
DEFAULT_EXCLUDE_DIRS = frozenset({".git", "node_modules", "backup"})
JSON_SUFFIX = ".json"
INDENT_UNIT = "  "

# =================================
# Archive defaults
# =================================
DEFAULT_SCHEMA_FILE = ".build-schema.json"
ARCHIVE_SUFFIX = ".zip"
ZIP_SEPARATOR = "/"
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)  # Earliest timestamp a zip entry can carry
ZIP_FILE_MODE = 0o644
ZIP_DIR_MODE = 0o755

# =================================
# Extension layout defaults
# =================================
DEFAULT_SOURCE_DIR = "extension"
METADATA_FILE = "metadata.json"
ROOT_FILE_PATTERNS = ("*.js", METADATA_FILE)
COPIED_DIRS = ("library",)
FILTERED_DIRS = {"schemas": "*.gschema.xml"}

# =================================
# Release defaults
# =================================
PACKAGE_JSON_FILE = "package.json"
README_FILE = ".github/README.md"
DEFAULT_EGO_URL = "https://extensions.gnome.org/extension/9214/brightness-restore/"
EGO_INFO_URL = "https://extensions.gnome.org/extension-info/"
DEFAULT_HTTP_TIMEOUT = 10.0
HTTP_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) VersionFetcher/1.0"
BADGE_START = "<!-- EGO-VERSION-START -->"
BADGE_END = "<!-- EGO-VERSION-END -->"

# 🌶️📦🔚
