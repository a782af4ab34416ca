"""Apply Notion rich text annotations to plain text."""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

from notion2md import md
from notion2md.schemas import Annotations

_WHITESPACE_ONLY_RE = re.compile(r"^\s*$")
_SURROUNDING_SPACE_RE = re.compile(r"^(\s*)(.*?)(\s*)\Z", re.DOTALL)

# Code spans go innermost so no other marker ends up inside the backticks.
_STYLE_ORDER: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("code", md.inline_code),
    ("bold", md.bold),
    ("italic", md.italic),
    ("strikethrough", md.strikethrough),
    ("underline", md.underline),
)


def annotate_plain_text(
    text: str, annotations: Annotations | Mapping[str, Any] | None
) -> str:
    """Wrap ``text`` in Markdown markers for each enabled annotation.

    Whitespace-only text is returned as is. Leading and trailing whitespace
    stays outside the markers, so ``" hi "`` in bold becomes ``" **hi** "``.

    Args:
        text: Plain text of a single rich text run.
        annotations: Annotation flags, as a model or the raw API mapping.

    Returns:
        The styled text.
    """
    if _WHITESPACE_ONLY_RE.match(text):
        return text

    if annotations is None:
        flags = Annotations()
    elif isinstance(annotations, Annotations):
        flags = annotations
    else:
        flags = Annotations.model_validate(annotations)

    match = _SURROUNDING_SPACE_RE.match(text)
    leading, core, trailing = match.groups() if match else ("", text, "")

    for name, style in _STYLE_ORDER:
        if getattr(flags, name):
            core = style(core)

    return leading + core + trailing
