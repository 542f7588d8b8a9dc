"""Read slide files into classified content."""

import asyncio
import logging

from src.schemas.deck_config import SlideDescriptor
from src.schemas.slide_schema import SlideContent
from src.utils.file_utils import read_lines

from .marker_parser import classify

logger = logging.getLogger(__name__)


class SlideReadError(OSError):
    """A slide file could not be read or decoded."""


class SlideNotFoundError(SlideReadError):
    """A slide file does not exist."""


async def load_slide(descriptor: SlideDescriptor) -> SlideContent:
    """Read and classify every line of a slide file.

    The file is read in the default executor so the event loop keeps
    collecting key presses. The returned content is complete; nothing is
    handed out while the file is still being read.

    Raises:
        SlideNotFoundError: The file does not exist.
        SlideReadError: The file exists but cannot be read as UTF-8 text.
    """
    path = descriptor.file_path
    logger.debug(f"Reading slide {path}")

    loop = asyncio.get_running_loop()
    try:
        lines = await loop.run_in_executor(None, read_lines, path)
    except FileNotFoundError as e:
        raise SlideNotFoundError(f"Slide file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SlideReadError(f"Could not read slide file {path}: {e}") from e

    content = SlideContent(path=path)
    for line in lines:
        item = classify(line)
        logger.debug(f"Read {item.type.value} content")
        content.items.append(item)

    logger.debug(f"Loaded {len(content.items)} lines from {path}")
    return content
