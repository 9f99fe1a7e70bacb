"""A terminal spinner that animates a character set on a background thread."""

from __future__ import annotations

import os
import sys
import threading
from typing import Callable, Optional, Sequence, TextIO

_ON_WINDOWS = os.name == "nt"

_HIDE_CURSOR = "\033[?25l"
_SHOW_CURSOR = "\033[?25h"

_COLOR_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "reset": 0,
    "bold": 1,
    "faint": 2,
    "italic": 3,
    "underline": 4,
    "blinkslow": 5,
    "blinkrapid": 6,
    "reversevideo": 7,
    "concealed": 8,
    "crossedout": 9,
    "fgBlack": 30,
    "fgRed": 31,
    "fgGreen": 32,
    "fgYellow": 33,
    "fgBlue": 34,
    "fgMagenta": 35,
    "fgCyan": 36,
    "fgWhite": 37,
    "fgHiBlack": 90,
    "fgHiRed": 91,
    "fgHiGreen": 92,
    "fgHiYellow": 93,
    "fgHiBlue": 94,
    "fgHiMagenta": 95,
    "fgHiCyan": 96,
    "fgHiWhite": 97,
    "bgBlack": 40,
    "bgRed": 41,
    "bgGreen": 42,
    "bgYellow": 43,
    "bgBlue": 44,
    "bgMagenta": 45,
    "bgCyan": 46,
    "bgWhite": 47,
    "bgHiBlack": 100,
    "bgHiRed": 101,
    "bgHiGreen": 102,
    "bgHiYellow": 103,
    "bgHiBlue": 104,
    "bgHiMagenta": 105,
    "bgHiCyan": 106,
    "bgHiWhite": 107,
}


class InvalidColorError(ValueError):
    """Raised when a color or attribute name is not recognised."""

    def __init__(self) -> None:
        super().__init__("invalid color")


def _color_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _colorize(codes: Sequence[int], text: str) -> str:
    if not _color_enabled():
        return text
    joined = ";".join(str(code) for code in codes)
    return f"\x1b[{joined}m{text}\x1b[0m"


def generate_number_sequence(length: int) -> list[str]:
    """Return the strings ``"0"`` up to ``str(length - 1)``."""
    if length < 0:
        raise ValueError("length must not be negative")
    return [str(i) for i in range(length)]


class Spinner:
    """A progress indicator cycling through ``chars`` every ``delay`` seconds.

    Giving ``color`` applies it immediately, which (re)starts the spinner.
    """

    def __init__(
        self,
        chars: list[str],
        delay: float,
        color: Optional[str] = None,
        suffix: str = "",
        final_msg: str = "",
        hide_cursor: bool = False,
        writer: Optional[TextIO] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._chars = chars
        self._codes: list[int] = [_COLOR_CODES["fgWhite"]]
        self._active = False
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._last_output = ""
        self.delay = delay
        self.prefix = ""
        self.suffix = suffix
        self.final_msg = final_msg
        self.hide_cursor = hide_cursor
        self.writer: TextIO = writer if writer is not None else sys.stdout
        self.pre_update: Optional[Callable[["Spinner"], None]] = None
        self.post_update: Optional[Callable[["Spinner"], None]] = None
        if color is not None:
            self.set_color(color)

    def active(self) -> bool:
        """Report whether the spinner is running."""
        return self._active

    def start(self) -> None:
        """Start the indicator; does nothing if it is already running."""
        with self._lock:
            if self._active:
                return
            if self.hide_cursor and not _ON_WINDOWS:
                print(_HIDE_CURSOR, end="", flush=True)
            self._active = True
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run, args=(self._stop_event, self.delay), daemon=True
            )
            self._thread.start()

    def _run(self, stop_event: threading.Event, delay: float) -> None:
        index = 0
        while not stop_event.wait(delay):
            with self._lock:
                if not self._active:
                    return
                chars = self._chars
                if not chars:
                    continue
                if index >= len(chars):
                    index = 0
                char = chars[index]
                index += 1

                self._erase()
                if self.pre_update is not None:
                    self.pre_update(self)

                if _ON_WINDOWS and self.writer is sys.stderr:
                    shown = char
                else:
                    shown = _colorize(self._codes, char)
                self._write(f"\r{self.prefix}{shown}{self.suffix} ")
                self._last_output = f"\r{self.prefix}{char}{self.suffix} "

                if self.post_update is not None:
                    self.post_update(self)

    def stop(self) -> None:
        """Stop the indicator, erase it and write the final message, if any."""
        with self._lock:
            if not self._active:
                return
            self._active = False
            self._stop_event.set()
            thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            if self.hide_cursor and not _ON_WINDOWS:
                print(_SHOW_CURSOR, end="", flush=True)
            self._erase()
            if self.final_msg:
                self._write(self.final_msg)

    def restart(self) -> None:
        """Stop and start the indicator."""
        self.stop()
        self.start()

    def reverse(self) -> None:
        """Reverse the order of the character set in place."""
        with self._lock:
            self._chars.reverse()

    def set_color(self, *colors: str) -> None:
        """Use the given colors and attributes, then restart the spinner."""
        codes = []
        for name in colors:
            if name not in _COLOR_CODES:
                raise InvalidColorError()
            codes.append(_COLOR_CODES[name])
        with self._lock:
            self._codes = codes
        self.restart()

    def update_speed(self, delay: float) -> None:
        """Set the delay between frames; it applies from the next start."""
        with self._lock:
            self.delay = delay

    def update_char_set(self, chars: list[str]) -> None:
        """Replace the character set."""
        with self._lock:
            self._chars = chars

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _write(self, text: str) -> None:
        self.writer.write(text)
        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()

    def _erase(self) -> None:
        """Erase the last frame; the caller holds the lock."""
        count = len(self._last_output)
        if _ON_WINDOWS:
            self._write("\r" + " " * count + "\r")
            self._last_output = ""
            return
        for sequence in ("\b", "\127", "\b", "\033[K"):
            self._write(sequence * count)
        self._write("\r\033[K")
        self._last_output = ""