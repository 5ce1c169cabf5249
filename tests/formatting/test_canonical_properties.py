#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Property-based tests for the canonical JSON layout."""

from __future__ import annotations

import json
import random
from typing import Any

from hypothesis import given, settings, strategies as st

from shellpack.formatting import canonicalize, render, sort_keys_deep

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**63), max_value=2**63),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=12),
)

json_values = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=8), children, max_size=5),
    ),
    max_leaves=25,
)


def shuffle_keys(value: Any, rng: random.Random) -> Any:
    """Rebuild ``value`` with every object's keys in a random order."""
    if isinstance(value, dict):
        keys = list(value)
        rng.shuffle(keys)
        return {key: shuffle_keys(value[key], rng) for key in keys}
    if isinstance(value, list):
        return [shuffle_keys(item, rng) for item in value]
    return value


def collect_arrays(value: Any) -> list[list[Any]]:
    found: list[list[Any]] = []
    if isinstance(value, dict):
        for item in value.values():
            found.extend(collect_arrays(item))
    elif isinstance(value, list):
        found.append(value)
        for item in value:
            found.extend(collect_arrays(item))
    return found


class TestCanonicalProperties:
    @given(json_values)
    @settings(max_examples=200)
    def test_canonical_text_is_a_fixed_point(self, value: Any) -> None:
        once = canonicalize(json.dumps(value, ensure_ascii=False))
        assert canonicalize(once) == once

    @given(json_values, st.randoms(use_true_random=False))
    @settings(max_examples=200)
    def test_key_order_never_changes_the_output(self, value: Any, rng: random.Random) -> None:
        original = json.dumps(value, ensure_ascii=False)
        shuffled = json.dumps(shuffle_keys(value, rng), ensure_ascii=False)
        assert canonicalize(shuffled) == canonicalize(original)

    @given(json_values)
    @settings(max_examples=200)
    def test_values_and_array_order_survive(self, value: Any) -> None:
        # -0.0 and integral floats come back as equal ints
        assert json.loads(canonicalize(json.dumps(value))) == value

    @given(json_values)
    @settings(max_examples=200)
    def test_arrays_render_on_one_line(self, value: Any) -> None:
        canonical = canonicalize(json.dumps(value))
        for array in collect_arrays(sort_keys_deep(value)):
            text = render(array)
            assert "\n" not in text
            assert text in canonical
