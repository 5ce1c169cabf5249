#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Two-mode JSON renderer: arrays inline, objects as indented blocks.

Integral floats print as plain integers below 1e21, the same cut-over
JavaScript's number formatting uses, and switch to exponent form from there.
"""

from __future__ import annotations

import json
import math

from shellpack.config.defaults import INDENT_UNIT
from shellpack.formatting.values import JsonValue

_EXPONENT_THRESHOLD = 1e21


def render_number(value: int | float) -> str:
    """Render a number in its shortest JSON form."""
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"{value!r} has no JSON representation")
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))

    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else "+"
        digits = exponent.lstrip("+-").lstrip("0") or "0"
        text = f"{mantissa.removesuffix('.0')}e{sign}{digits}"
    return text


def render_scalar(value: None | bool | int | float | str) -> str:
    """Render a scalar JSON value."""
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case int() | float():
            return render_number(value)
        case str():
            return json.dumps(value, ensure_ascii=False)
        case _:
            raise TypeError(f"Not a JSON scalar: {type(value).__name__}")


def render_inline(value: JsonValue) -> str:
    """Render any value on a single line."""
    match value:
        case list():
            return "[" + ", ".join(render_inline(item) for item in value) + "]"
        case dict():
            pairs = (f"{render_scalar(key)}: {render_inline(item)}" for key, item in value.items())
            return "{" + ", ".join(pairs) + "}"
        case _:
            return render_scalar(value)


def render(value: JsonValue, level: int = 0) -> str:
    """Render a value in canonical layout.

    Arrays are always inline, whatever they contain and however deep they sit.
    Objects are multiline blocks indented two spaces per level, except the
    empty object which renders as ``{}``.
    """
    match value:
        case list():
            return render_inline(value)
        case dict():
            if not value:
                return "{}"
            indent = INDENT_UNIT * level
            next_indent = INDENT_UNIT * (level + 1)
            lines = [
                f"{next_indent}{render_scalar(key)}: {render(item, level + 1)}" for key, item in value.items()
            ]
            return "{\n" + ",\n".join(lines) + f"\n{indent}}}"
        case _:
            return render_scalar(value)


# 🌶️📦🔚
