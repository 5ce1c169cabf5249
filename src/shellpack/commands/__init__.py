#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the shellpack CLI."""

from __future__ import annotations

from shellpack.commands.badges import badges_command
from shellpack.commands.format import format_command
from shellpack.commands.pack import pack_command
from shellpack.commands.validate import validate_command

__all__ = [
    "badges_command",
    "format_command",
    "pack_command",
    "validate_command",
]

# 🌶️📦🔚
