#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Archive listing."""

from __future__ import annotations

from pathlib import Path
import zipfile

from shellpack.exceptions import ArchiveReadError


def list_archive_entries(archive_path: Path) -> list[str]:
    """List entry names of a zip archive in stored order.

    Directory entries keep their trailing ``/``.

    Raises:
        ArchiveReadError: If the archive is missing or not a zip file
    """
    if not archive_path.is_file():
        raise ArchiveReadError(f"Archive not found: {archive_path}")
    try:
        with zipfile.ZipFile(archive_path, "r") as archive:
            return archive.namelist()
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveReadError(f"Cannot list {archive_path}: {e}") from e


# 🌶️📦🔚
