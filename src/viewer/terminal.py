"""Raw-mode keyboard input for the presenter."""

import asyncio
import logging
import os
import termios
from contextlib import contextmanager
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Presenter commands produced by key presses."""

    NEXT = "next"
    PREVIOUS = "previous"
    QUIT = "quit"


# Both normal (CSI) and application (SS3) cursor-key sequences.
_SEQUENCES: dict[bytes, Key] = {
    b"\x1b[C": Key.NEXT,
    b"\x1bOC": Key.NEXT,
    b"\x1b[D": Key.PREVIOUS,
    b"\x1bOD": Key.PREVIOUS,
    b" ": Key.NEXT,
    b"\x03": Key.QUIT,
}


def decode_keys(data: bytes) -> list[Key]:
    """Translate raw bytes read from the terminal into presenter keys.

    A single read may hold several key presses; unrecognized bytes and
    escape sequences are skipped.
    """
    keys: list[Key] = []
    i = 0
    while i < len(data):
        for sequence, key in _SEQUENCES.items():
            if data.startswith(sequence, i):
                keys.append(key)
                i += len(sequence)
                break
        else:
            if data[i:i + 1] == b"\x1b" and data[i + 1:i + 2] in (b"[", b"O"):
                # unknown escape sequence: skip through its final byte
                i += 2
                while i < len(data) and not 0x40 <= data[i] <= 0x7E:
                    i += 1
            i += 1
    return keys


@contextmanager
def raw_terminal(fd: int) -> Iterator[None]:
    """Put the terminal on ``fd`` into raw keypress mode for the duration.

    Echo, line buffering and signal keys are disabled so Ctrl-C arrives as a
    byte; output processing is left on so newlines still return the carriage.
    """
    saved = termios.tcgetattr(fd)
    attrs = termios.tcgetattr(fd)
    attrs[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    attrs[6][termios.VMIN] = 1
    attrs[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSAFLUSH, attrs)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, saved)


class KeyReader:
    """Feed decoded key presses from a file descriptor into a queue.

    Keys pressed while a slide is loading or rendering wait in the queue and
    are handled in order afterwards.
    """

    def __init__(self, fd: int, queue: "asyncio.Queue[Key]"):
        self.fd = fd
        self.queue = queue
        self._loop: asyncio.AbstractEventLoop | None = None

    def start(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._loop.add_reader(self.fd, self._on_readable)

    def stop(self) -> None:
        if self._loop is not None:
            self._loop.remove_reader(self.fd)
            self._loop = None

    def _on_readable(self) -> None:
        data = os.read(self.fd, 64)
        if not data:
            # end of input behaves like Ctrl-C
            self.queue.put_nowait(Key.QUIT)
            self.stop()
            return
        for key in decode_keys(data):
            logger.debug(f"Key pressed: {key.value}")
            self.queue.put_nowait(key)
