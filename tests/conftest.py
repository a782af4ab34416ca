"""Test setup for notion2md."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


def _text_run(
    plain_text: str, href: str | None = None, **annotations: bool
) -> dict[str, Any]:
    return {
        "type": "text",
        "text": {"content": plain_text, "link": {"url": href} if href else None},
        "plain_text": plain_text,
        "href": href,
        "annotations": {
            "bold": False,
            "italic": False,
            "strikethrough": False,
            "underline": False,
            "code": False,
            "color": "default",
            **annotations,
        },
    }


def _block(
    block_type: str,
    payload: dict[str, Any] | None = None,
    *,
    block_id: str = "block",
    has_children: bool = False,
) -> dict[str, Any]:
    return {
        "object": "block",
        "id": block_id,
        "type": block_type,
        "has_children": has_children,
        block_type: payload if payload is not None else {},
    }


def _text_block(
    block_type: str,
    text: str,
    *,
    block_id: str = "block",
    has_children: bool = False,
    **payload: Any,
) -> dict[str, Any]:
    return _block(
        block_type,
        {"rich_text": [_text_run(text)], **payload},
        block_id=block_id,
        has_children=has_children,
    )


@pytest.fixture
def text_run() -> Callable[..., dict[str, Any]]:
    """Factory for rich text run objects shaped like the Notion API."""
    return _text_run


@pytest.fixture
def make_block() -> Callable[..., dict[str, Any]]:
    """Factory for block objects with an arbitrary payload."""
    return _block


@pytest.fixture
def text_block() -> Callable[..., dict[str, Any]]:
    """Factory for blocks holding a single plain rich text run."""
    return _text_block
