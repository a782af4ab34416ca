"""Tests for the notion2md command line."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from notion2md.cli import main
from notion2md.exceptions import BlockNotFoundError

_PAGE_ID = "0123456789abcdef0123456789abcdef"
_UUID = "01234567-89ab-cdef-0123-456789abcdef"


class TestMain:
    """Tests for the main() entry point."""

    def test_writes_markdown_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "notion2md.cli.convert_page", new=AsyncMock(return_value="# Title\n")
        ) as mock_convert:
            exit_code = main([_PAGE_ID, "--token", "secret"])

        assert exit_code == 0
        assert capsys.readouterr().out == "# Title\n"
        mock_convert.assert_awaited_once_with(_UUID, auth="secret")

    def test_writes_markdown_to_file(self, tmp_path: Path) -> None:
        output = tmp_path / "page.md"

        with patch("notion2md.cli.convert_page", new=AsyncMock(return_value="body\n")):
            exit_code = main([f"https://www.notion.so/Page-{_PAGE_ID}", "-o", str(output)])

        assert exit_code == 0
        assert output.read_text(encoding="utf-8") == "body\n"

    def test_reports_library_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "notion2md.cli.convert_page",
            new=AsyncMock(side_effect=BlockNotFoundError("no such block")),
        ):
            exit_code = main([_PAGE_ID])

        assert exit_code == 1
        assert "no such block" in capsys.readouterr().err

    def test_rejects_invalid_page_reference(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["https://example.com/page"])

        assert exc_info.value.code == 2
