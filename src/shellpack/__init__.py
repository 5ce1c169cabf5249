#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""shellpack core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from shellpack.exceptions import (
    JsonParseError,
    SchemaMismatchError,
    ShellpackError,
)
from shellpack.package import (
    build_extension_package,
    canonicalize,
    format_project_json,
    sync_version_badges,
    validate_package,
)

__version__ = get_version("shellpack", caller_file=__file__)

__all__ = [
    "JsonParseError",
    "SchemaMismatchError",
    "ShellpackError",
    "__version__",
    "build_extension_package",
    "canonicalize",
    "format_project_json",
    "sync_version_badges",
    "validate_package",
]

# 🌶️📦🔚
