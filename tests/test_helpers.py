import signal
import threading

import pytest

from nomadpack.helpers import title, with_interrupt


@pytest.mark.parametrize(
    "text, expected",
    [("hello", "Hello"), ("hello world", "Hello World")],
)
def test_title(text, expected):
    assert title(text) == expected


def test_title_lowercases_rest_of_word():
    assert title("hELLO wORLD") == title("hello world")


def test_interrupt_sets_event_and_restores_handler():
    original = signal.getsignal(signal.SIGINT)
    with with_interrupt() as done:
        assert not done.is_set()
        signal.raise_signal(signal.SIGINT)
        assert done.wait(2)
    assert signal.getsignal(signal.SIGINT) is original


def test_parent_event_propagates():
    parent = threading.Event()
    with with_interrupt(parent) as done:
        assert not done.is_set()
        parent.set()
        assert done.wait(2)


def test_exit_cancels():
    with with_interrupt() as done:
        pass
    assert done.is_set()