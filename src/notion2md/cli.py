"""Command line interface for notion2md."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from notion2md.converter import convert_page
from notion2md.exceptions import Notion2mdError
from notion2md.query_parser import parse_notion_id
from notion2md.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notion2md", description="Convert a Notion page into Markdown."
    )
    parser.add_argument("page", help="Notion page ID or URL")
    parser.add_argument(
        "--token", help="Notion integration token (defaults to NOTION_TOKEN)"
    )
    parser.add_argument(
        "-o",
        "--output",
        default="-",
        help="Output file path, or '-' for stdout (default)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to NOTION2MD_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        page_id = parse_notion_id(args.page)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        markdown = asyncio.run(convert_page(page_id, auth=args.token))
    except Notion2mdError as exc:
        logger.debug("Conversion of %s failed", page_id, exc_info=True)
        print(f"notion2md: error: {exc}", file=sys.stderr)
        return 1

    if args.output == "-":
        sys.stdout.write(markdown)
    else:
        Path(args.output).write_text(markdown, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    return 0
