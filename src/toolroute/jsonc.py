# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reading JSON documents that carry ``//`` and ``/* */`` comments."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Final

_QUOTE: Final[str] = '"'
_ESCAPE: Final[str] = "\\"


class JSONCDecodeError(ValueError):
    """Raised when a JSONC document is not valid JSON once comments are removed."""


def strip_comments(text: str) -> str:
    """Remove comments from ``text`` while leaving string literals untouched.

    Line comments run to the end of the line. Block comments may span lines; the
    newlines they cover are kept so line numbers in later parse errors still
    point at the original document. Within a string literal a backslash escapes
    the following character, so ``"a\\"//b"`` stays a single string.

    Args:
        text: Raw JSONC document.

    Returns:
        str: Document with every comment removed.
    """

    out: list[str] = []
    in_string = False
    in_block = False
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        nxt = text[index + 1] if index + 1 < length else ""
        if in_block:
            if char == "*" and nxt == "/":
                in_block = False
                index += 2
                continue
            if char == "\n":
                out.append(char)
            index += 1
            continue
        if in_string:
            out.append(char)
            if char == _ESCAPE and nxt:
                out.append(nxt)
                index += 2
                continue
            if char == _QUOTE or char == "\n":
                in_string = False
            index += 1
            continue
        if char == _QUOTE:
            in_string = True
        elif char == "/" and nxt == "/":
            newline = text.find("\n", index)
            if newline == -1:
                break
            index = newline
            continue
        elif char == "/" and nxt == "*":
            in_block = True
            index += 2
            continue
        out.append(char)
        index += 1
    return "".join(out)


def loads(text: str, *, source: str = "<string>") -> Any:
    """Parse a JSONC document held in memory.

    Raises:
        JSONCDecodeError: If the document is not valid JSON after stripping comments.
    """

    try:
        return json.loads(strip_comments(text))
    except json.JSONDecodeError as exc:
        raise JSONCDecodeError(f"{source}: failed to parse JSONC ({exc.msg} at line {exc.lineno})") from exc


def load(path: Path) -> Any:
    """Load a JSONC document from disk.

    Args:
        path: Filesystem path to the document.

    Returns:
        Any: Parsed JSON value.

    Raises:
        OSError: If the file cannot be read.
        JSONCDecodeError: If the document cannot be parsed.
    """

    text = path.read_text(encoding="utf-8")
    return loads(text, source=str(path))


__all__ = ["JSONCDecodeError", "load", "loads", "strip_comments"]
