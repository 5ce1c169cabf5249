#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""shellpack configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from shellpack.config.runtime import ShellpackRuntimeConfig

__all__ = [
    "ShellpackRuntimeConfig",
]

# 🌶️📦🔚
