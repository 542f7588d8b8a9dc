"""Classify slide lines by their inline content-type markers."""

from collections.abc import Iterable

from src.schemas.slide_schema import ContentItem, ContentType

# Checked in this order; the first marker found wins.
MARKERS: tuple[tuple[str, ContentType], ...] = (
    ("[title]", ContentType.TITLE),
    ("[subheader]", ContentType.SUBHEADER),
    ("[asciiart]", ContentType.ASCIIART),
    ("[body]", ContentType.BODY),
)


def classify(line: str) -> ContentItem:
    """Classify one raw line of a slide file.

    When a marker is present the displayed text is everything before its
    first occurrence; the marker and whatever follows it are dropped. A line
    without any marker is body text, kept exactly as written.
    """
    for marker, content_type in MARKERS:
        position = line.find(marker)
        if position > -1:
            return ContentItem(type=content_type, text=line[:position])
    return ContentItem(type=ContentType.BODY, text=line)


def classify_lines(lines: Iterable[str]) -> list[ContentItem]:
    return [classify(line) for line in lines]
