#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Version reconciliation between the local manifest and extensions.gnome.org."""

from shellpack.release.badges import BadgeAction, BadgeUpdate, render_badges, update_readme_badges
from shellpack.release.published import (
    Found,
    PublishedVersion,
    Unknown,
    extract_extension_id,
    fetch_published_version,
    read_manifest_version,
)

__all__ = [
    "BadgeAction",
    "BadgeUpdate",
    "Found",
    "PublishedVersion",
    "Unknown",
    "extract_extension_id",
    "fetch_published_version",
    "read_manifest_version",
    "render_badges",
    "update_readme_badges",
]

# 🌶️📦🔚
