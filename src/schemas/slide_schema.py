"""Pydantic models for classified slide content."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    """Line classifications recognized in slide files."""

    TITLE = "title"
    SUBHEADER = "subheader"
    ASCIIART = "asciiart"
    BODY = "body"


class ContentItem(BaseModel):
    """A single classified line of a slide."""

    model_config = ConfigDict(frozen=True)

    type: ContentType
    text: str = ""


class SlideContent(BaseModel):
    """Classified content of one slide file, in file order."""

    path: Path
    items: list[ContentItem] = Field(default_factory=list)

    def count_by_type(self) -> dict[ContentType, int]:
        """Return how many items of each content type the slide holds."""
        counts = {content_type: 0 for content_type in ContentType}
        for item in self.items:
            counts[item.type] += 1
        return counts
