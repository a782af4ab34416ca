"""Parse Notion page URLs and IDs."""

from __future__ import annotations

import re
from urllib.parse import urlparse

_HEX_ID_RE = re.compile(r"([0-9a-f]{32})$", re.IGNORECASE)
_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
_ALLOWED_HOSTS = frozenset({"notion.so", "www.notion.so"})
_PUBLIC_SITE_SUFFIX = ".notion.site"


def parse_notion_id(input_text: str) -> str:
    """Return the hyphenated block ID for a Notion page ID or URL.

    Accepts a raw 32 character ID, a hyphenated UUID, or a ``notion.so`` /
    ``*.notion.site`` URL whose last path segment ends with the ID (the page
    title slug and query string are ignored).

    Raises:
        ValueError: If the input holds no recognizable ID or the URL host is
            not a Notion host.
    """
    text = input_text.strip()
    if not text:
        raise ValueError("Empty Notion page reference")

    if _UUID_RE.match(text):
        return text.lower()

    if "://" in text:
        candidate = _id_from_url(text)
    else:
        candidate = text

    match = _HEX_ID_RE.search(candidate.replace("-", ""))
    if not match:
        raise ValueError(f"No Notion page ID found in {input_text!r}")
    return _hyphenate(match.group(1).lower())


def _id_from_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.username or parsed.password:
        raise ValueError("URLs with credentials are not allowed")

    host = (parsed.hostname or "").lower()
    if host not in _ALLOWED_HOSTS and not host.endswith(_PUBLIC_SITE_SUFFIX):
        raise ValueError(f"Unsupported host: {host or url}")

    segments = [segment for segment in parsed.path.split("/") if segment]
    if not segments:
        raise ValueError(f"No Notion page ID found in {url!r}")
    return segments[-1]


def _hyphenate(hex_id: str) -> str:
    return f"{hex_id[:8]}-{hex_id[8:12]}-{hex_id[12:16]}-{hex_id[16:20]}-{hex_id[20:]}"
