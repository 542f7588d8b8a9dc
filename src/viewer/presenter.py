"""Presentation input loop: navigate, reload, render.

One slide cycle (load, then render) runs at a time. Keys that arrive during
a cycle are queued and replayed in order once it finishes.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import TextIO

from src.parsers.slide_loader import SlideReadError, load_slide
from src.schemas.deck_config import DeckConfig

from .navigator import PresentationState, advance, retreat
from .renderer import render, render_error
from .terminal import Key, KeyReader, raw_terminal

logger = logging.getLogger(__name__)


class Presenter:
    """Drives a presentation from key presses."""

    def __init__(self, state: PresentationState, out: TextIO | None = None):
        self.state = state
        self.out = out or sys.stdout

    @classmethod
    def from_config_file(cls, path: str | Path, out: TextIO | None = None) -> "Presenter":
        return cls(PresentationState.from_config(DeckConfig.load(path)), out=out)

    async def start(self) -> None:
        """Load and draw the first slide.

        Raises SlideReadError if it cannot be read; there is nothing to fall
        back to at startup.
        """
        content = await load_slide(self.state.current_slide)
        self.state = self.state.with_content(content)
        await self._draw()

    async def handle(self, key: Key) -> bool:
        """Act on one key press. Returns False when the presentation should end."""
        if key == Key.QUIT:
            logger.debug("Quit requested")
            return False
        if key == Key.NEXT:
            await self.show(advance(self.state))
        elif key == Key.PREVIOUS:
            await self.show(retreat(self.state))
        return True

    async def show(self, target: PresentationState) -> None:
        """Load the target slide and draw it.

        On a read failure the current state is kept, an error screen is drawn
        and the failure is logged; the next key navigates from where we were.
        """
        slide = target.current_slide
        try:
            content = await load_slide(slide)
        except SlideReadError as e:
            logger.error(f"Could not load slide {target.current_index + 1}: {e}")
            render_error(str(e), target.current_index, target.total, out=self.out)
            return
        self.state = target.with_content(content)
        await self._draw()

    async def run(self, keys: "asyncio.Queue[Key]") -> None:
        """Process queued keys until a quit key arrives."""
        while True:
            key = await keys.get()
            if not await self.handle(key):
                return

    async def _draw(self) -> None:
        await render(
            self.state.content,
            self.state.current_slide.color_config,
            self.state.current_index,
            self.state.total,
            out=self.out,
        )


async def present(
    config_path: str | Path,
    fd: int | None = None,
    out: TextIO | None = None,
) -> None:
    """Run an interactive presentation on the controlling terminal.

    Raises ConfigParseError for a bad configuration and SlideReadError when
    the first slide cannot be read.
    """
    presenter = Presenter.from_config_file(config_path, out=out)
    fd = sys.stdin.fileno() if fd is None else fd
    keys: asyncio.Queue[Key] = asyncio.Queue()
    reader = KeyReader(fd, keys)

    with raw_terminal(fd):
        reader.start()
        try:
            await presenter.start()
            await presenter.run(keys)
        finally:
            reader.stop()
