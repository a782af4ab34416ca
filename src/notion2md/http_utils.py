"""HTTP utilities for calling the Notion API with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final, Mapping

import httpx

from notion2md.config import (
    NOTION2MD_FETCH_BACKOFF_S,
    NOTION2MD_FETCH_MAX_RETRIES,
    NOTION2MD_FETCH_TIMEOUT_S,
)
from notion2md.exceptions import (
    AuthenticationError,
    BlockNotFoundError,
    FetchError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})
AUTH_STATUS_CODES: Final[frozenset[int]] = frozenset({401, 403})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_json_with_retries(
    url: str,
    *,
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """GET a JSON document, retrying transient failures.

    Args:
        url: The URL to fetch.
        headers: Extra request headers (authorization, API version).
        params: Query string parameters.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Returns:
        The decoded JSON object.

    Raises:
        BlockNotFoundError: On 404.
        AuthenticationError: On 401 or 403.
        RateLimitError: If still rate limited after the last retry.
        FetchError: On other 4xx responses, if the fetch fails after all
            retries, or if the body is not a JSON object.
    """
    last_exc: Exception | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> dict[str, Any]:
        nonlocal last_exc

        for attempt in range(NOTION2MD_FETCH_MAX_RETRIES + 1):
            retry_after: float | None = None
            try:
                response = await http_client.get(url, headers=headers, params=params)

                if response.status_code == 404:
                    raise BlockNotFoundError(f"Resource not found at {url}: {_error_message(response)}")

                if response.status_code in AUTH_STATUS_CODES:
                    raise AuthenticationError(
                        f"HTTP {response.status_code} from {url}: {_error_message(response)}"
                    )

                if response.status_code in RETRY_STATUS_CODES:
                    exc_class = RateLimitError if response.status_code == 429 else FetchError
                    last_exc = exc_class(f"HTTP {response.status_code} from {url}")
                    retry_after = _retry_after_seconds(response)
                elif 400 <= response.status_code < 500:
                    raise FetchError(
                        f"HTTP {response.status_code} from {url}: {_error_message(response)}"
                    )
                else:
                    response.raise_for_status()
                    return _decode_json(response, url)
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < NOTION2MD_FETCH_MAX_RETRIES:
                backoff = NOTION2MD_FETCH_BACKOFF_S * (2**attempt)
                if retry_after is not None:
                    backoff = max(backoff, retry_after)
                logger.debug("Retrying %s in %.2fs after %s", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        if isinstance(last_exc, RateLimitError):
            raise last_exc
        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(NOTION2MD_FETCH_TIMEOUT_S),
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)


def _decode_json(response: httpx.Response, url: str) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as exc:
        raise FetchError(f"Invalid JSON from {url}") from exc
    if not isinstance(data, dict):
        raise FetchError(f"Unexpected JSON payload from {url}")
    return data


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text


def _retry_after_seconds(response: httpx.Response) -> float | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return max(float(value), 0.0)
    except (TypeError, ValueError):
        return None
