#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test for running shellpack as a module."""

import runpy
import sys

import pytest


def test_main_module_entrypoint() -> None:
    """Tests that `python -m shellpack` reaches the CLI."""
    # Click's --version flag exits with SystemExit(0)
    with pytest.raises(SystemExit) as e:
        original_argv = sys.argv
        sys.argv = ["shellpack", "--version"]
        try:
            runpy.run_module("shellpack", run_name="__main__")
        finally:
            sys.argv = original_argv

    assert e.value.code == 0


# 🌶️📦🔚
