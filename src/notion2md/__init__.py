"""notion2md: convert Notion pages into Markdown."""

from notion2md.annotations import annotate_plain_text
from notion2md.converter import NotionToMarkdown, convert_page
from notion2md.exceptions import (
    AuthenticationError,
    BlockNotFoundError,
    ConfigurationError,
    FetchError,
    InvalidNodeError,
    Notion2mdError,
    RateLimitError,
)
from notion2md.notion_client import NotionClient
from notion2md.query_parser import parse_notion_id
from notion2md.renderer import block_to_markdown
from notion2md.schemas import Annotations, Fragment, TextRun
from notion2md.serializer import to_markdown_string

__all__ = [
    "Annotations",
    "AuthenticationError",
    "BlockNotFoundError",
    "ConfigurationError",
    "FetchError",
    "Fragment",
    "InvalidNodeError",
    "Notion2mdError",
    "NotionClient",
    "NotionToMarkdown",
    "RateLimitError",
    "TextRun",
    "annotate_plain_text",
    "block_to_markdown",
    "convert_page",
    "parse_notion_id",
    "to_markdown_string",
]
