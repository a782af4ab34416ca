"""Tests for the Notion API client."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notion2md.exceptions import ConfigurationError, FetchError
from notion2md.notion_client import NotionClient


class TestConstruction:
    """Token and header handling."""

    def test_missing_token_raises(self) -> None:
        with patch("notion2md.notion_client.NOTION_TOKEN", None):
            with pytest.raises(ConfigurationError, match="token is missing"):
                NotionClient()

    def test_falls_back_to_environment_token(self) -> None:
        with patch("notion2md.notion_client.NOTION_TOKEN", "env-token"):
            client = NotionClient()

        assert client.headers["Authorization"] == "Bearer env-token"

    def test_sets_notion_headers(self) -> None:
        client = NotionClient("secret", notion_version="2022-06-28")

        assert client.headers["Authorization"] == "Bearer secret"
        assert client.headers["Notion-Version"] == "2022-06-28"
        assert "User-Agent" in client.headers

    @pytest.mark.parametrize(("page_size", "expected"), [(0, 1), (-5, 1), (500, 100), (25, 25)])
    def test_page_size_is_clamped(self, page_size: int, expected: int) -> None:
        assert NotionClient("secret", page_size=page_size).page_size == expected


class TestGetBlockChildren:
    """Pagination over the block children endpoint."""

    @pytest.mark.asyncio
    async def test_single_page(self) -> None:
        client = NotionClient("secret", base_url="https://api.test/v1/", page_size=50)

        with patch(
            "notion2md.notion_client.fetch_json_with_retries",
            new=AsyncMock(return_value={"results": [{"id": "a"}], "has_more": False}),
        ) as mock_fetch:
            blocks = await client.get_block_children("page-id")

        assert blocks == [{"id": "a"}]
        mock_fetch.assert_awaited_once_with(
            "https://api.test/v1/blocks/page-id/children",
            headers=client.headers,
            params={"page_size": 50},
            client=None,
        )

    @pytest.mark.asyncio
    async def test_follows_cursor_until_exhausted(self) -> None:
        client = NotionClient("secret")
        pages = [
            {"results": [{"id": "a"}, {"id": "b"}], "has_more": True, "next_cursor": "c1"},
            {"results": [{"id": "c"}], "has_more": True, "next_cursor": "c2"},
            {"results": [{"id": "d"}], "has_more": False, "next_cursor": None},
        ]

        with patch(
            "notion2md.notion_client.fetch_json_with_retries",
            new=AsyncMock(side_effect=pages),
        ) as mock_fetch:
            blocks = await client.get_block_children("page-id")

        assert [block["id"] for block in blocks] == ["a", "b", "c", "d"]
        cursors = [call.kwargs["params"].get("start_cursor") for call in mock_fetch.await_args_list]
        assert cursors == [None, "c1", "c2"]

    @pytest.mark.asyncio
    async def test_malformed_listing_raises(self) -> None:
        client = NotionClient("secret")

        with patch(
            "notion2md.notion_client.fetch_json_with_retries",
            new=AsyncMock(return_value={"object": "list"}),
        ):
            with pytest.raises(FetchError, match="Malformed block listing"):
                await client.get_block_children("page-id")


class TestContextManager:
    """Pooled HTTP client lifecycle."""

    @pytest.mark.asyncio
    async def test_opens_and_closes_pooled_client(self) -> None:
        http_client = MagicMock()
        http_client.aclose = AsyncMock()

        with patch("notion2md.notion_client.httpx.AsyncClient", return_value=http_client):
            async with NotionClient("secret") as client:
                assert client._http_client is http_client

        http_client.aclose.assert_awaited_once()
        assert client._http_client is None

    @pytest.mark.asyncio
    async def test_does_not_close_injected_client(self) -> None:
        http_client = MagicMock()
        http_client.aclose = AsyncMock()

        async with NotionClient("secret", http_client=http_client) as client:
            assert client._http_client is http_client

        http_client.aclose.assert_not_awaited()
