"""Fetch block children from the Notion API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from notion2md.config import (
    NOTION2MD_API_BASE_URL,
    NOTION2MD_FETCH_TIMEOUT_S,
    NOTION2MD_NOTION_VERSION,
    NOTION2MD_PAGE_SIZE,
    NOTION2MD_USER_AGENT,
    NOTION_TOKEN,
    clamp_page_size,
)
from notion2md.exceptions import ConfigurationError, FetchError
from notion2md.http_utils import fetch_json_with_retries

logger = logging.getLogger(__name__)


class NotionClient:
    """Minimal async Notion API client exposing ``get_block_children``.

    Use it as an async context manager to share one pooled connection across
    every request of a conversion::

        async with NotionClient(token) as client:
            markdown = await NotionToMarkdown(client=client).page_to_markdown(page_id)

    Outside a context manager each request opens its own short-lived client.
    """

    def __init__(
        self,
        auth: str | None = None,
        *,
        base_url: str = NOTION2MD_API_BASE_URL,
        notion_version: str = NOTION2MD_NOTION_VERSION,
        page_size: int = NOTION2MD_PAGE_SIZE,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        token = auth or NOTION_TOKEN
        if not token:
            raise ConfigurationError(
                "Notion integration token is missing; pass auth= or set NOTION_TOKEN."
            )
        self.base_url = base_url.rstrip("/")
        self.page_size = clamp_page_size(page_size)
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Notion-Version": notion_version,
            "User-Agent": NOTION2MD_USER_AGENT,
        }
        self._http_client = http_client
        self._owns_http_client = False

    async def __aenter__(self) -> NotionClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(NOTION2MD_FETCH_TIMEOUT_S))
            self._owns_http_client = True
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the pooled HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    async def get_block_children(self, block_id: str) -> list[dict[str, Any]]:
        """Return every child block of ``block_id`` in order.

        Follows ``has_more``/``next_cursor`` until the listing is exhausted.

        Args:
            block_id: ID of a page or block.

        Returns:
            The child block objects, in the order Notion returns them.

        Raises:
            BlockNotFoundError: If the block does not exist or is not shared.
            FetchError: If the API fails or returns a malformed listing.
        """
        url = f"{self.base_url}/blocks/{block_id}/children"
        results: list[dict[str, Any]] = []
        cursor: str | None = None

        while True:
            params: dict[str, Any] = {"page_size": self.page_size}
            if cursor:
                params["start_cursor"] = cursor

            data = await fetch_json_with_retries(
                url, headers=self.headers, params=params, client=self._http_client
            )
            page = data.get("results")
            if not isinstance(page, list):
                raise FetchError(f"Malformed block listing from {url}")
            results.extend(page)

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break

        logger.debug("Fetched %d children for block %s", len(results), block_id)
        return results
