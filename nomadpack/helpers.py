"""Small helpers: title casing and interrupt-aware cancellation."""

from __future__ import annotations

import re
import signal
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

_WORD = re.compile(r"[^\W_]+(?:['\u2019][^\W_]+)*")

_PARENT_POLL_SECONDS = 0.05


def title(text: str) -> str:
    """Return ``text`` with each word capitalised and the rest of the word in lower case."""
    return _WORD.sub(lambda m: m[0][:1].upper() + m[0][1:].lower(), text)


@contextmanager
def with_interrupt(
    parent: Optional[threading.Event] = None,
) -> Iterator[threading.Event]:
    """Yield an event that is set on SIGINT, when ``parent`` is set, or on exit.

    While active, SIGINT sets the event instead of raising KeyboardInterrupt;
    the previous handler is restored on exit.
    """
    done = threading.Event()

    def _on_interrupt(signum, frame):
        done.set()

    previous = signal.signal(signal.SIGINT, _on_interrupt)

    watcher = None
    if parent is not None:

        def _follow_parent() -> None:
            while not done.is_set():
                if parent.wait(_PARENT_POLL_SECONDS):
                    done.set()

        watcher = threading.Thread(target=_follow_parent, daemon=True)
        watcher.start()

    try:
        yield done
    finally:
        signal.signal(signal.SIGINT, previous)
        done.set()
        if watcher is not None:
            watcher.join()