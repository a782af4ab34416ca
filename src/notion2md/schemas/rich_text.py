"""Rich text models as returned by the Notion API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Annotations(BaseModel):
    """Styling flags attached to a rich text run.

    Attributes:
        bold: Render as strong text.
        italic: Render as emphasised text.
        strikethrough: Render struck through.
        underline: Render underlined.
        code: Render as inline code.
        color: Notion colour name; carried but not rendered.
    """

    model_config = ConfigDict(extra="ignore")

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


class TextRun(BaseModel):
    """A contiguous span of text sharing one annotation set."""

    model_config = ConfigDict(extra="ignore")

    plain_text: str = ""
    annotations: Annotations = Field(default_factory=Annotations)
    href: str | None = None
