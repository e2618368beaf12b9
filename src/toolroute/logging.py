# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing presentation helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.text import Text

from .console import detect_tty, get_console_manager

SUCCESS_ICON = "✅ "
WARNING_ICON = "⚠️ "
FAILURE_ICON = "❌ "
DETAIL_INDENT = "   "


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _styled(msg: str, *, icon: str, style: str, use_emoji: bool, use_color: bool | None) -> Text:
    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(f"{emoji(icon, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(style)
    return text


def success(msg: str, *, use_emoji: bool = True, use_color: bool | None = None) -> Text:
    """Return ``msg`` styled as a success line.

    Args:
        msg: Message text to style.
        use_emoji: Flag indicating whether the success icon is prefixed.
        use_color: Optional explicit colour flag overriding TTY detection.

    Returns:
        Text: Rich text carrying the success styling. Empty input yields empty text.
    """

    if not msg:
        return Text()
    return _styled(msg, icon=SUCCESS_ICON, style="green", use_emoji=use_emoji, use_color=use_color)


def warning(msg: str, *, use_emoji: bool = True, use_color: bool | None = None) -> Text:
    """Return ``msg`` styled as a warning line.

    Args:
        msg: Message text to style.
        use_emoji: Flag indicating whether the warning icon is prefixed.
        use_color: Optional explicit colour flag overriding TTY detection.

    Returns:
        Text: Rich text carrying the warning styling. Empty input yields empty text.
    """

    if not msg:
        return Text()
    return _styled(msg, icon=WARNING_ICON, style="yellow", use_emoji=use_emoji, use_color=use_color)


def _print(text: Text, *, use_emoji: bool, use_color: bool | None) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    console.print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print(success(msg, use_emoji=use_emoji, use_color=use_color), use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print(warning(msg, use_emoji=use_emoji, use_color=use_color), use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    text = _styled(msg, icon=FAILURE_ICON, style="red", use_emoji=use_emoji, use_color=use_color)
    _print(text, use_emoji=use_emoji, use_color=use_color)


def detail(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an indented, unstyled line beneath a preceding header."""

    _print(Text(f"{DETAIL_INDENT}{msg}"), use_emoji=False, use_color=use_color)


__all__ = [
    "detail",
    "emoji",
    "fail",
    "ok",
    "success",
    "warn",
    "warning",
]
