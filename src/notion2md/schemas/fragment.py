"""Rendered fragment tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Fragment(BaseModel):
    """A rendered block and its rendered children, one nesting level deeper."""

    content: str = ""
    children: list["Fragment"] = Field(default_factory=list)
