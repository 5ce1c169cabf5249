#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""JSON value model, parsing and key normalization."""

from __future__ import annotations

import json
import math
from typing import TypeAlias

from shellpack.exceptions import JsonParseError

JsonValue: TypeAlias = None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]


def _reject_constant(name: str) -> float:
    raise JsonParseError(f"non-standard constant {name!r}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise JsonParseError(f"number {text!r} is out of range")
    return value


def parse_json(raw_text: str) -> JsonValue:
    """Parse JSON text, rejecting anything outside strict JSON.

    Raises:
        JsonParseError: If the text is not valid JSON, nests too deeply, or
            holds a number Python cannot represent.
    """
    try:
        value: JsonValue = json.loads(
            raw_text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except JsonParseError:
        raise
    except json.JSONDecodeError as e:
        raise JsonParseError(f"{e.msg} (line {e.lineno}, column {e.colno})") from e
    except RecursionError as e:
        raise JsonParseError("nesting too deep") from e
    except ValueError as e:
        raise JsonParseError(str(e)) from e
    return value


def sort_keys_deep(value: JsonValue) -> JsonValue:
    """Return a copy of ``value`` with every object's keys in code-point order.

    Objects nested inside arrays are sorted too; array element order is kept.
    """
    match value:
        case dict():
            return {key: sort_keys_deep(value[key]) for key in sorted(value)}
        case list():
            return [sort_keys_deep(item) for item in value]
        case None | bool() | int() | float() | str():
            return value
        case _:
            raise TypeError(f"Not a JSON value: {type(value).__name__}")


# 🌶️📦🔚
