"""Flatten a fragment tree into a Markdown string."""

from __future__ import annotations

from typing import Iterable

from notion2md import md
from notion2md.schemas import Fragment


def to_markdown_string(fragments: Iterable[Fragment] | None = None, depth: int = 0) -> str:
    """Serialize ``fragments`` with one tab of indentation per nesting level.

    Fragments with empty content emit nothing themselves; their children are
    still serialized one level deeper.
    """
    # Blocks end with a single newline and no blank line, so adjacent
    # paragraphs join and a paragraph followed by "---" reads as a setext heading.
    parts: list[str] = []
    for fragment in fragments or []:
        if fragment.content:
            parts.append(md.add_tab_space(fragment.content, depth) + "\n")
        if fragment.children:
            parts.append(to_markdown_string(fragment.children, depth + 1))
    return "".join(parts)
