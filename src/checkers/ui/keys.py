from __future__ import annotations
import logging
import os
import select
import sys
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional

from checkers.config import ESCAPE_TIMEOUT_SEC
from checkers.game.actions import KEY_DOWN, KEY_ENTER, KEY_ESCAPE, KEY_LEFT, KEY_RIGHT, KEY_UP

logger = logging.getLogger(__name__)

KEY_UNKNOWN = -1

# Final byte of "ESC [ x" / "ESC O x" arrow sequences
_ANSI_ARROWS: Dict[int, int] = {
    ord("A"): KEY_UP,
    ord("B"): KEY_DOWN,
    ord("C"): KEY_RIGHT,
    ord("D"): KEY_LEFT,
}

# Prefix bytes msvcrt.getch returns before an extended key's scan code
_WIN_EXTENDED = (b"\x00", b"\xe0")

ByteSource = Callable[[Optional[float]], Optional[int]]


class KeyReadError(RuntimeError):
    pass


def translate(next_byte: ByteSource) -> int:
    """
    Turn a terminal byte stream into one raw key code.

    `next_byte(timeout)` returns the next byte, or None when nothing arrives
    within `timeout` seconds (timeout=None blocks).
    """
    b = next_byte(None)
    if b is None:
        raise KeyReadError("No key available.")
    if b == ord("\n"):
        return KEY_ENTER
    if b != KEY_ESCAPE:
        return b

    follow = next_byte(ESCAPE_TIMEOUT_SEC)
    if follow is None:
        return KEY_ESCAPE

    if follow in (ord("["), ord("O")):
        final = next_byte(ESCAPE_TIMEOUT_SEC)
        if final in _ANSI_ARROWS:
            return _ANSI_ARROWS[final]

    # Some other escape sequence (F-keys, Delete, ...): swallow the rest of it.
    while next_byte(0) is not None:
        pass
    logger.debug("Ignoring unrecognised escape sequence.")
    return KEY_UNKNOWN


def _posix_byte_source(fd: int) -> ByteSource:
    def next_byte(timeout: Optional[float]) -> Optional[int]:
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None
        data = os.read(fd, 1)
        if not data:
            raise KeyReadError("Standard input was closed.")
        return data[0]

    return next_byte


def _stdin_fd() -> int:
    try:
        return sys.stdin.fileno()
    except (OSError, ValueError) as e:
        raise KeyReadError(f"Standard input is not a terminal: {e}") from e


@contextmanager
def terminal_session() -> Iterator[None]:
    """
    Put the terminal into cbreak mode for the whole game and restore it after.

    Keys typed while a frame is being painted stay queued for the next read.
    No-op on Windows, where msvcrt reads unbuffered anyway.
    """
    if sys.platform == "win32":
        yield
        return

    import termios
    import tty

    fd = _stdin_fd()
    try:
        saved = termios.tcgetattr(fd)
    except termios.error as e:
        raise KeyReadError(f"Standard input is not a terminal: {e}") from e

    try:
        # cbreak keeps Ctrl-C working, unlike full raw mode.
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_posix() -> int:
    fd = _stdin_fd()
    try:
        return translate(_posix_byte_source(fd))
    except OSError as e:
        raise KeyReadError(f"Error while reading a key: {e}") from e


def _read_windows() -> int:
    import msvcrt

    try:
        ch = msvcrt.getch()
        if ch in _WIN_EXTENDED:
            ch = msvcrt.getch()
    except OSError as e:
        raise KeyReadError(f"Error while reading a key: {e}") from e
    return ch[0]


def read_key() -> int:
    """
    Block until one key is pressed and return its raw code.
    On POSIX call it inside terminal_session(), otherwise input is line-buffered.
    """
    if sys.platform == "win32":
        return _read_windows()
    return _read_posix()
