"""Reusable helpers for composing Markdown messages."""

from __future__ import annotations

from typing import Iterable, List
from telegram.helpers import escape_markdown


def escape_telegram_markdown(text: object) -> str:
    """
    Escape text for Telegram legacy Markdown.

    Args:
        text: Text to escape, typically a visitor-supplied name or message

    Returns:
        Escaped markdown string safe for Telegram
    """
    return escape_markdown(str(text), version=1)


def bold_telegram_text(text: object) -> str:
    """Return bold Telegram Markdown text."""
    return f"*{escape_telegram_markdown(text)}*"


class MarkdownBlockBuilder:
    """Utility for building Markdown messages with bullet support."""

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        self._lines: List[str] = []

    def line(self, text: str = "") -> "MarkdownBlockBuilder":
        self._lines.append(text)
        return self

    def heading(self, text: str) -> "MarkdownBlockBuilder":
        if text:
            self._lines.append(bold_telegram_text(text))
        return self

    def bullets(self, items: Iterable[str]) -> "MarkdownBlockBuilder":
        for item in items:
            if item:
                self._lines.append(f"• {item}")
        return self

    def blank(self) -> "MarkdownBlockBuilder":
        self._lines.append("")
        return self

    def build(self) -> str:
        return "\n".join(self._lines)


__all__ = [
    "MarkdownBlockBuilder",
    "escape_telegram_markdown",
    "bold_telegram_text",
]
