#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for in-place JSON formatting."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from shellpack.exceptions import JsonParseError, SourceReadError
from shellpack.formatting import format_json_file, format_json_tree


class TestFormatJsonFile:
    def test_rewrites_non_canonical_file(self, tmp_path: Path) -> None:
        path = tmp_path / "metadata.json"
        path.write_text('{"b":1,"a":{"d":2,"c":3}}')

        with patch("shellpack.formatting.canonicalizer.pout") as mock_pout:
            assert format_json_file(path, tmp_path) is True

        assert path.read_text() == '{\n  "a": {\n    "c": 3,\n    "d": 2\n  },\n  "b": 1\n}\n'
        mock_pout.assert_called_once_with("Formatted: metadata.json")

    def test_second_pass_writes_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "metadata.json"
        path.write_text('{"b":1,"a":{"d":2,"c":3}}')
        format_json_file(path, tmp_path)

        with patch("shellpack.formatting.canonicalizer.atomic_write_text") as mock_write:
            assert format_json_file(path, tmp_path) is False
        mock_write.assert_not_called()

    def test_crlf_counts_as_a_difference(self, tmp_path: Path) -> None:
        path = tmp_path / "a.json"
        path.write_bytes(b'{\r\n  "a": 1\r\n}\r\n')

        assert format_json_file(path, tmp_path) is True
        assert path.read_bytes() == b'{\n  "a": 1\n}\n'

    def test_missing_trailing_newline_is_added(self, tmp_path: Path) -> None:
        path = tmp_path / "a.json"
        path.write_text("{}")

        assert format_json_file(path, tmp_path) is True
        assert path.read_text() == "{}\n"

    def test_invalid_json_names_the_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"a": ')

        with pytest.raises(JsonParseError) as exc_info:
            format_json_file(path, tmp_path)

        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)
        assert path.read_text() == '{"a": '

    @pytest.mark.parametrize(
        "raw",
        ['{"a": 1e400}', '{"a": ' + "9" * 5000 + "}", "[" * 100000 + "]" * 100000],
        ids=["overflowing-float", "huge-integer", "deep-nesting"],
    )
    def test_unrepresentable_json_names_the_file(self, tmp_path: Path, raw: str) -> None:
        path = tmp_path / "odd.json"
        path.write_text(raw)

        with pytest.raises(JsonParseError) as exc_info:
            format_json_file(path, tmp_path)

        assert exc_info.value.path == path
        assert path.read_text() == raw

    def test_unreadable_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError, match="missing.json"):
            format_json_file(tmp_path / "missing.json", tmp_path)

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"a": "\xe9"}')

        with pytest.raises(SourceReadError, match="UTF-8"):
            format_json_file(path, tmp_path)


class TestFormatJsonTree:
    def test_formats_only_files_that_need_it(self, tmp_path: Path) -> None:
        (tmp_path / "ok.json").write_text('{\n  "a": 1\n}\n')
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "messy.json").write_text('{"z":1,"a":[1,2]}')

        rewritten = format_json_tree(tmp_path)

        assert rewritten == [tmp_path / "sub" / "messy.json"]
        assert (tmp_path / "sub" / "messy.json").read_text() == '{\n  "a": [1, 2],\n  "z": 1\n}\n'

    def test_skips_excluded_directories(self, tmp_path: Path) -> None:
        (tmp_path / "node_modules").mkdir()
        vendored = tmp_path / "node_modules" / "dep.json"
        vendored.write_text('{"b":1,"a":2}')

        assert format_json_tree(tmp_path) == []
        assert vendored.read_text() == '{"b":1,"a":2}'

    def test_first_failure_stops_the_run(self, tmp_path: Path) -> None:
        (tmp_path / "a.json").write_text("not json")
        later = tmp_path / "b.json"
        later.write_text('{"b":1,"a":2}')

        with pytest.raises(JsonParseError):
            format_json_tree(tmp_path)

        assert later.read_text() == '{"b":1,"a":2}'


# 🌶️📦🔚
