"""Convert a Notion page tree into Markdown."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Iterable, Mapping, Protocol

from notion2md.exceptions import ConfigurationError
from notion2md.notion_client import NotionClient
from notion2md.renderer import block_to_markdown
from notion2md.schemas import Fragment
from notion2md.serializer import to_markdown_string

logger = logging.getLogger(__name__)


class BlockChildrenFetcher(Protocol):
    """Anything that can list the children of a block."""

    def get_block_children(self, block_id: str) -> Awaitable[list[dict[str, Any]]]:
        ...


class NotionToMarkdown:
    """Walk a Notion block tree and render it as Markdown.

    Children are fetched on demand, one block at a time and in document
    order. Any render or fetch error aborts the whole conversion.

    Attributes:
        client: The fetcher bound at construction, usually a
            :class:`~notion2md.notion_client.NotionClient`.
    """

    def __init__(self, *, client: BlockChildrenFetcher | None) -> None:
        self.client = client

    async def page_to_markdown(self, page_id: str) -> str:
        """Return the full Markdown document for ``page_id``."""
        fragments = await self.page_to_fragments(page_id)
        return self.to_markdown_string(fragments)

    async def page_to_fragments(self, page_id: str) -> list[Fragment]:
        """Fetch the children of ``page_id`` and convert them to fragments."""
        self._ensure_client()
        logger.debug("Converting page %s", page_id)
        blocks = await self.client.get_block_children(page_id)
        return await self.blocks_to_fragments(blocks)

    async def blocks_to_fragments(
        self, blocks: Iterable[Mapping[str, Any]] | None
    ) -> list[Fragment]:
        """Convert ``blocks`` and their descendants, preserving order."""
        self._ensure_client()
        fragments: list[Fragment] = []
        for block in blocks or []:
            content = self.block_to_markdown(block)
            children: list[Fragment] = []
            if block.get("has_children"):
                child_blocks = await self.client.get_block_children(block["id"])
                children = await self.blocks_to_fragments(child_blocks)
            fragments.append(Fragment(content=content, children=children))
        return fragments

    @staticmethod
    def block_to_markdown(block: Mapping[str, Any] | None) -> str:
        """Render a single block, ignoring its children."""
        return block_to_markdown(block)

    @staticmethod
    def to_markdown_string(fragments: Iterable[Fragment] | None = None, depth: int = 0) -> str:
        """Serialize fragments into one Markdown string."""
        return to_markdown_string(fragments, depth)

    def _ensure_client(self) -> None:
        getter = getattr(self.client, "get_block_children", None)
        if self.client is None or not callable(getter):
            raise ConfigurationError(
                "Notion client is not provided; construct NotionToMarkdown(client=...)."
            )


async def convert_page(page_id: str, *, auth: str | None = None) -> str:
    """Fetch ``page_id`` with a fresh :class:`NotionClient` and return its Markdown.

    Args:
        page_id: ID of the page to convert.
        auth: Integration token. Defaults to ``NOTION_TOKEN``.

    Returns:
        The serialized Markdown document.
    """
    async with NotionClient(auth) as client:
        return await NotionToMarkdown(client=client).page_to_markdown(page_id)
