"""Shared schemas for notion2md."""

from notion2md.schemas.fragment import Fragment
from notion2md.schemas.rich_text import Annotations, TextRun

__all__ = ["Annotations", "Fragment", "TextRun"]
