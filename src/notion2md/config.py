"""Local configuration for notion2md."""

from __future__ import annotations

import os


DEFAULT_API_BASE_URL = "https://api.notion.com/v1"
DEFAULT_NOTION_VERSION = "2022-06-28"
DEFAULT_PAGE_SIZE = 100
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "notion2md/0.1 (+https://github.com/notion2md/notion2md)"
DEFAULT_LOG_LEVEL = "WARNING"


def clamp_page_size(value: int) -> int:
    """Bound a page size to the 1..100 range the Notion API accepts."""
    return max(1, min(value, 100))


# Integration token; the CLI and NotionClient fall back to this when none is passed.
NOTION_TOKEN = os.getenv("NOTION_TOKEN")
NOTION2MD_API_BASE_URL = os.getenv("NOTION2MD_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
NOTION2MD_NOTION_VERSION = os.getenv("NOTION2MD_NOTION_VERSION", DEFAULT_NOTION_VERSION)
NOTION2MD_PAGE_SIZE = clamp_page_size(int(os.getenv("NOTION2MD_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))))
NOTION2MD_FETCH_TIMEOUT_S = float(os.getenv("NOTION2MD_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
NOTION2MD_FETCH_MAX_RETRIES = int(os.getenv("NOTION2MD_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
NOTION2MD_FETCH_BACKOFF_S = float(os.getenv("NOTION2MD_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
NOTION2MD_USER_AGENT = os.getenv("NOTION2MD_USER_AGENT", DEFAULT_USER_AGENT)
NOTION2MD_LOG_LEVEL = os.getenv("NOTION2MD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
