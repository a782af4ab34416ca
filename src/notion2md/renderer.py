"""Render a single Notion block (children excluded) as Markdown."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from notion2md import md
from notion2md.annotations import annotate_plain_text
from notion2md.exceptions import InvalidNodeError
from notion2md.schemas import TextRun

logger = logging.getLogger(__name__)

Block = Mapping[str, Any]

_MEDIA_TYPES = frozenset({"image", "video", "file", "pdf"})
_LINK_TYPES = frozenset({"bookmark", "embed", "link_preview"})
_MEDIA_SOURCE_KINDS = ("external", "file")


def block_to_markdown(block: Block | None) -> str:
    """Convert one Notion block into Markdown, ignoring its children.

    Rendering runs in two passes: :func:`extract_content` produces the raw
    text of the block, then :func:`wrap_block` applies block-level markup
    such as headings, quotes and list bullets.

    Args:
        block: A block object as returned by the Notion API.

    Returns:
        The Markdown for the block, or an empty string for block types and
        payload shapes that are not supported.

    Raises:
        InvalidNodeError: If ``block`` is missing.
    """
    if not block:
        raise InvalidNodeError("notion block required")

    block_type = block.get("type", "")
    content = extract_content(block)
    if block_type in _SELF_CONTAINED_TYPES:
        return content
    return wrap_block(block_type, content, block)


def extract_content(block: Block) -> str:
    """Return the raw Markdown content of ``block`` before block wrapping."""
    block_type = block.get("type", "")
    extractor = _CONTENT_EXTRACTORS.get(block_type, _rich_text_content)
    return extractor(block_type, _payload(block))


def wrap_block(block_type: str, content: str, block: Block) -> str:
    """Apply block-level Markdown for ``block_type`` around ``content``."""
    wrapper = _BLOCK_WRAPPERS.get(block_type)
    if wrapper is None:
        return content
    return wrapper(content, _payload(block))


def rich_text_to_markdown(runs: list[Mapping[str, Any]] | None) -> str:
    """Concatenate annotated rich text runs, linking runs that carry an href."""
    parts: list[str] = []
    for raw_run in runs or []:
        run = TextRun.model_validate(raw_run)
        text = annotate_plain_text(run.plain_text, run.annotations)
        if run.href:
            text = md.link(text, run.href)
        parts.append(text)
    return "".join(parts)


def _payload(block: Block) -> Mapping[str, Any]:
    payload = block.get(block.get("type", ""))
    return payload if isinstance(payload, Mapping) else {}


def _media_url(block_type: str, payload: Mapping[str, Any]) -> str | None:
    source_kind = payload.get("type")
    if source_kind in _MEDIA_SOURCE_KINDS:
        source = payload.get(source_kind)
        url = source.get("url") if isinstance(source, Mapping) else None
        if isinstance(url, str) and url:
            return url
    logger.debug("Skipping %s block with unrecognized source %r", block_type, source_kind)
    return None


def _media_content(block_type: str, payload: Mapping[str, Any]) -> str:
    url = _media_url(block_type, payload)
    if url is None:
        return ""
    if block_type == "image":
        return md.image("image", url)
    return md.link(block_type, url)


def _divider_content(block_type: str, payload: Mapping[str, Any]) -> str:
    return md.divider()


def _equation_content(block_type: str, payload: Mapping[str, Any]) -> str:
    return md.code_block(payload.get("expression", ""))


def _link_content(block_type: str, payload: Mapping[str, Any]) -> str:
    url = payload.get("url")
    if not url:
        logger.debug("Skipping %s block without url", block_type)
        return ""
    return md.link(block_type, url)


def _rich_text_content(block_type: str, payload: Mapping[str, Any]) -> str:
    # "text" is the key used before the 2022-02-22 API version.
    runs = payload.get("rich_text")
    if runs is None:
        runs = payload.get("text")
    return rich_text_to_markdown(runs)


def _wrap_code(content: str, payload: Mapping[str, Any]) -> str:
    return md.code_block(content, payload.get("language"))


def _wrap_todo(content: str, payload: Mapping[str, Any]) -> str:
    return md.todo(content, bool(payload.get("checked")))


def _plain_wrapper(formatter: Callable[[str], str]) -> Callable[[str, Mapping[str, Any]], str]:
    def wrap(content: str, payload: Mapping[str, Any]) -> str:
        return formatter(content)

    return wrap


_CONTENT_EXTRACTORS: dict[str, Callable[[str, Mapping[str, Any]], str]] = {
    **{block_type: _media_content for block_type in _MEDIA_TYPES},
    **{block_type: _link_content for block_type in _LINK_TYPES},
    "divider": _divider_content,
    "equation": _equation_content,
}

_SELF_CONTAINED_TYPES = frozenset(_CONTENT_EXTRACTORS)

# Numbered items share the bullet marker; sibling numbering is not tracked.
_BLOCK_WRAPPERS: dict[str, Callable[[str, Mapping[str, Any]], str]] = {
    "code": _wrap_code,
    "heading_1": _plain_wrapper(md.heading1),
    "heading_2": _plain_wrapper(md.heading2),
    "heading_3": _plain_wrapper(md.heading3),
    "quote": _plain_wrapper(md.quote),
    "bulleted_list_item": _plain_wrapper(md.bullet),
    "numbered_list_item": _plain_wrapper(md.bullet),
    "to_do": _wrap_todo,
}
