"""Helper functions offered to pack templates."""

from __future__ import annotations

from typing import Any

_RUNE_ERROR = "\ufffd"
_MAX_RUNE = 0x10FFFF
_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _escape_char(ch: str, quote: str) -> str:
    code = ord(ch)
    if 0xDC80 <= code <= 0xDCFF:
        # A byte that was not valid UTF-8.
        return f"\\x{code - 0xDC00:02x}"
    if ch == quote or ch == "\\":
        return "\\" + ch
    if ch.isprintable():
        return ch
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _quote(text: str, quote: str = '"') -> str:
    return quote + "".join(_escape_char(ch, quote) for ch in text) + quote


def go_quote(value: Any) -> str:
    """Quote ``value`` as a double-quoted, escaped string literal.

    Integers are quoted as single-quoted character literals and lists as
    space-separated quoted elements in brackets.
    """
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (bytes, bytearray)):
        return _quote(bytes(value).decode("utf-8", errors="surrogateescape"))
    if isinstance(value, bool):
        return f"%!q(bool={'true' if value else 'false'})"
    if isinstance(value, int):
        if 0 <= value <= _MAX_RUNE and not 0xD800 <= value <= 0xDFFF:
            return _quote(chr(value), "'")
        return _quote(_RUNE_ERROR, "'")
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(go_quote(item) for item in value) + "]"
    return f"%!q({type(value).__name__}={value})"


def to_string_list(value: Any) -> str:
    """Render a list as an HCL list of quoted strings, e.g. ``["dc1", "dc2"]``.

    Anything other than a list or tuple is quoted as a single element.
    """
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(go_quote(item) for item in value) + "]"
    return "[" + go_quote(value) + "]"


def file_contents(path: str) -> str:
    """Return the contents of the file at ``path``.

    Raises OSError naming the path if it cannot be read.
    """
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError as exc:
        raise OSError(f"failed to read {path}: {exc}") from exc
    return content.decode("utf-8", errors="surrogateescape")