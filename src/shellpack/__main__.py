#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Allow running shellpack with ``python -m shellpack``."""

from shellpack.cli import main

if __name__ == "__main__":
    main()

# 🌶️📦🔚
