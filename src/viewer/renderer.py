"""Draw classified slide content to the terminal.

Each slide is drawn top to bottom in file order. ASCII-art lines are turned
into banners with pyfiglet in the default executor; the renderer awaits each
banner before moving on, so output order always matches the slide file.
"""

import asyncio
import logging
import sys
from typing import TextIO

import pyfiglet

from src.schemas.deck_config import ColorConfig
from src.schemas.slide_schema import ContentItem, ContentType, SlideContent

from .ansi import CLEAR_SCREEN, colorize

logger = logging.getLogger(__name__)

DEFAULT_FONT = "standard"
ERROR_COLOR = "red"


class RenderError(RuntimeError):
    """Banner art could not be generated for a line."""


async def generate_banner(text: str, font: str = DEFAULT_FONT) -> str:
    """Render ``text`` as a multi-line figlet banner."""
    loop = asyncio.get_running_loop()
    try:
        banner = await loop.run_in_executor(None, pyfiglet.figlet_format, text, font)
    except pyfiglet.FigletError as e:
        raise RenderError(f"Could not generate banner for '{text}': {e}") from e
    return banner.rstrip("\n")


def _header(slide_index: int, total_slides: int) -> str:
    return f"SLIDE: {slide_index + 1}/{total_slides}\n\n"


async def _render_item(item: ContentItem, colors: ColorConfig) -> str | None:
    if item.type == ContentType.ASCIIART:
        logger.debug("Printing asciiart content")
        if not item.text:
            return colorize(item.text, colors.asciiart)
        try:
            banner = await generate_banner(item.text)
        except RenderError as e:
            logger.error(f"Skipping ascii art line: {e}")
            return None
        return colorize(banner, colors.asciiart)

    logger.debug(f"Printing {item.type.value} content")
    return colorize(item.text, colors.for_type(item.type))


async def render(
    content: SlideContent,
    color_config: ColorConfig,
    slide_index: int,
    total_slides: int,
    out: TextIO | None = None,
) -> None:
    """Clear the terminal and draw one slide.

    Args:
        content: Classified lines of the slide, in file order.
        color_config: Colors for this slide's content types.
        slide_index: Zero-based index of the slide, shown one-based.
        total_slides: Number of slides in the deck.
        out: Stream to write to (default: stdout).
    """
    out = out or sys.stdout
    out.write(CLEAR_SCREEN)
    out.write(_header(slide_index, total_slides))
    for item in content.items:
        rendered = await _render_item(item, color_config)
        if rendered is not None:
            out.write(rendered + "\n")
    out.flush()


def render_error(
    message: str,
    slide_index: int,
    total_slides: int,
    out: TextIO | None = None,
) -> None:
    """Draw an error screen in place of a slide that failed to load."""
    out = out or sys.stdout
    out.write(CLEAR_SCREEN)
    out.write(_header(slide_index, total_slides))
    out.write(colorize(message, ERROR_COLOR) + "\n")
    out.flush()
