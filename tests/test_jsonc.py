# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for JSONC comment stripping and parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolroute.jsonc import JSONCDecodeError, load, loads, strip_comments


def test_strip_line_comments() -> None:
    text = '{\n  // leading comment\n  "a": 1, // trailing\n  "b": 2\n}'

    assert loads(text) == {"a": 1, "b": 2}


def test_strip_preserves_urls_inside_strings() -> None:
    text = '{"url": "https://example.com/path", // comment\n "x": "a//b"}'

    assert loads(text) == {"url": "https://example.com/path", "x": "a//b"}


def test_escaped_quote_does_not_end_string() -> None:
    text = r'{"msg": "say \"hi\" // not a comment"}'

    assert loads(text) == {"msg": 'say "hi" // not a comment'}


def test_escaped_backslash_before_closing_quote() -> None:
    text = '{"path": "C:\\\\dir\\\\", "n": 1} // trailing'

    assert loads(text) == {"path": "C:\\dir\\", "n": 1}


def test_block_comments_single_and_multi_line() -> None:
    text = '{\n  /* inline */ "a": 1,\n  /*\n   spans\n   lines\n  */\n  "b": "/* kept */"\n}'

    assert loads(text) == {"a": 1, "b": "/* kept */"}


def test_block_comment_keeps_line_numbers() -> None:
    text = "/*\n\n*/\n{"

    with pytest.raises(JSONCDecodeError) as excinfo:
        loads(text)

    assert "line 4" in str(excinfo.value)


def test_strip_comments_without_trailing_newline() -> None:
    assert strip_comments('{"a": 1} // end') == '{"a": 1} '


def test_load_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.jsonc"
    path.write_text('{"extensions": {".go": "go"}} // ok\n', encoding="utf-8")

    assert load(path) == {"extensions": {".go": "go"}}


def test_loads_reports_source_on_error() -> None:
    with pytest.raises(JSONCDecodeError, match="custom.jsonc"):
        loads("{not json}", source="custom.jsonc")
