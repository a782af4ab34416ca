"""Markdown string builders used by the block renderer."""

from __future__ import annotations

import re

TAB = "\t"

# Only "\n" ends a line; other Unicode line separators stay inside the text.
_LINE_BREAK_RE = re.compile(r"(?<=\n)")


def inline_code(text: str) -> str:
    return f"`{text}`"


def bold(text: str) -> str:
    return f"**{text}**"


def italic(text: str) -> str:
    return f"_{text}_"


def strikethrough(text: str) -> str:
    return f"~~{text}~~"


def underline(text: str) -> str:
    return f"<u>{text}</u>"


def link(text: str, href: str) -> str:
    return f"[{text}]({href})"


def image(alt: str, href: str) -> str:
    return f"![{alt}]({href})"


def code_block(text: str, language: str | None = None) -> str:
    return f"```{language or ''}\n{text}\n```"


def heading1(text: str) -> str:
    return f"# {text}"


def heading2(text: str) -> str:
    return f"## {text}"


def heading3(text: str) -> str:
    return f"### {text}"


def quote(text: str) -> str:
    return f"> {text}"


def bullet(text: str) -> str:
    return f"- {text}"


def todo(text: str, checked: bool) -> str:
    mark = "x" if checked else " "
    return f"- [{mark}] {text}"


def divider() -> str:
    return "---"


def add_tab_space(text: str, depth: int = 0) -> str:
    """Indent every line of ``text`` by ``depth`` tabs."""
    if depth <= 0:
        return text
    indent = TAB * depth
    return "".join(indent + line for line in _LINE_BREAK_RE.split(text) if line)
