"""Environment defaults plus parsing and formatting helpers for flag values."""

from __future__ import annotations

import math
import os
import re
from datetime import timedelta
from decimal import Decimal

MAX_LINE_LENGTH = 78

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_PREFIX_BASES = {"x": 16, "o": 8, "b": 2}

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000

_DURATION_UNITS = {
    "ns": 1,
    "us": _NS_PER_US,
    "\u00b5s": _NS_PER_US,
    "\u03bcs": _NS_PER_US,
    "ms": _NS_PER_MS,
    "s": _NS_PER_S,
    "m": 60 * _NS_PER_S,
    "h": 3600 * _NS_PER_S,
}
_DURATION_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

_WRAP_PENALTY = 100_000
_WRAP_MAX_COST = 2**31 - 1


def env_default(key: str, default: str) -> str:
    """Return the environment variable ``key`` if set, else ``default``."""
    return os.environ.get(key, default)


def env_bool_default(key: str, default: bool) -> bool:
    """Return the environment variable ``key`` parsed as a boolean, else ``default``.

    Raises ValueError if the variable is set but is not a boolean.
    """
    raw = os.environ.get(key)
    if raw is None:
        return default
    return parse_bool(raw)


def env_duration_default(key: str, default: timedelta) -> timedelta:
    """Return the environment variable ``key`` parsed as a duration, else ``default``.

    Raises ValueError if the variable is set but is not a duration.
    """
    raw = os.environ.get(key)
    if raw is None:
        return default
    return parse_duration(raw)


def parse_bool(text: str) -> bool:
    """Parse the boolean spellings 1, t, T, TRUE, true, True and their false forms."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value {text!r}")


def _parse_integer(text: str, *, signed: bool) -> int:
    kind = "integer" if signed else "unsigned integer"
    body = text
    negative = False
    if signed and body and body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]

    base = 10
    digits = body
    marked = body
    if len(body) >= 2 and body[0] == "0":
        prefix = body[1].lower()
        if prefix in _PREFIX_BASES:
            base = _PREFIX_BASES[prefix]
            digits = body[2:]
            marked = "0" + digits
        else:
            base = 8
            digits = body[1:]

    if "_" in marked and (
        marked.startswith("_") or marked.endswith("_") or "__" in marked
    ):
        raise ValueError(f"invalid {kind} value {text!r}")

    clean = digits.replace("_", "")
    if not clean and base == 8 and body == "0":
        clean = "0"
    allowed = set(_DIGITS[:base])
    if not clean or any(ch.lower() not in allowed for ch in clean):
        raise ValueError(f"invalid {kind} value {text!r}")

    number = int(clean, base)
    if negative:
        number = -number
    low, high = (_INT64_MIN, _INT64_MAX) if signed else (0, _UINT64_MAX)
    if not low <= number <= high:
        raise ValueError(f"{kind} value {text!r} out of range")
    return number


def parse_int(text: str) -> int:
    """Parse a signed 64-bit integer, honouring 0x, 0o, 0b and leading-zero octal prefixes."""
    return _parse_integer(text, signed=True)


def parse_uint(text: str) -> int:
    """Parse an unsigned 64-bit integer, honouring 0x, 0o, 0b and leading-zero octal prefixes."""
    return _parse_integer(text, signed=False)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``300ms``, ``-1.5h`` or ``2h45m``.

    Every component needs a unit (ns, us, µs, ms, s, m, h); a bare ``0`` is
    accepted. Precision below a microsecond is truncated.
    """
    body = text
    negative = False
    if body and body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration {text!r}")

    total_ns = 0
    position = 0
    while position < len(body):
        match = _DURATION_COMPONENT.match(body, position)
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ValueError(f"invalid duration {text!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {text!r}")
        scale = _DURATION_UNITS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {text!r}")
        total_ns += int(whole or "0") * scale
        if fraction:
            total_ns += int(fraction) * scale // 10 ** len(fraction)
        if total_ns > _INT64_MAX:
            raise ValueError(f"invalid duration {text!r}")
        position = match.end()

    result = timedelta(microseconds=total_ns // _NS_PER_US)
    return -result if negative else result


def _split_fraction(value: int, precision: int) -> tuple[int, str]:
    scale = 10**precision
    digits = str(value % scale).rjust(precision, "0").rstrip("0")
    return value // scale, f".{digits}" if digits else ""


def format_duration(value: timedelta) -> str:
    """Format a duration the way ``parse_duration`` reads it, e.g. ``1h30m0s``."""
    total_ns = (
        (value.days * 86_400 + value.seconds) * _NS_PER_S
        + value.microseconds * _NS_PER_US
    )
    if total_ns == 0:
        return "0s"
    sign = "-" if total_ns < 0 else ""
    remaining = abs(total_ns)

    if remaining < _NS_PER_S:
        if remaining < _NS_PER_US:
            return f"{sign}{remaining}ns"
        if remaining < _NS_PER_MS:
            whole, fraction = _split_fraction(remaining, 3)
            return f"{sign}{whole}{fraction}\u00b5s"
        whole, fraction = _split_fraction(remaining, 6)
        return f"{sign}{whole}{fraction}ms"

    seconds, fraction = _split_fraction(remaining, 9)
    text = f"{seconds % 60}{fraction}s"
    minutes = seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def _fixed_notation(digits: str, point: int) -> str:
    if point <= 0:
        return "0." + "0" * -point + digits
    if point >= len(digits):
        return digits + "0" * (point - len(digits))
    return f"{digits[:point]}.{digits[point:]}"


def format_float(value: float, fmt: str = "g") -> str:
    """Format ``value`` with the fewest digits that read back exactly.

    ``fmt`` is ``"e"`` for scientific notation (``1.5e+00``) or ``"g"`` for
    scientific notation only when the exponent is below -4 or at least 6.
    """
    if fmt not in ("e", "g"):
        raise ValueError(f"unsupported float format {fmt!r}")
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"

    sign, digit_tuple, exponent = Decimal(repr(number)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    scientific = exponent + len(digits) - 1
    prefix = "-" if sign else ""

    if fmt == "e" or scientific < -4 or scientific >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{scientific:+03d}"
    return prefix + _fixed_notation(digits, scientific + 1)


def _wrap_lines(text: str, limit: int) -> list[str]:
    """Break text into lines of at most ``limit`` characters with minimum raggedness."""
    words = text.strip().replace("\n", " ").split(" ")
    count = len(words)
    offsets = [0]
    for word in words:
        offsets.append(offsets[-1] + len(word))

    def span(first: int, last: int) -> int:
        return offsets[last + 1] - offsets[first] + (last - first)

    cost = [_WRAP_MAX_COST] * count
    breaks = [count] * count
    for first in reversed(range(count)):
        if span(first, count - 1) <= limit or first == count - 1:
            cost[first] = 0
            breaks[first] = count
            continue
        for nxt in range(first + 1, count):
            width = span(first, nxt - 1)
            candidate = (limit - width) ** 2 + cost[nxt]
            if width > limit:
                candidate += _WRAP_PENALTY
            if candidate < cost[first]:
                cost[first] = candidate
                breaks[first] = nxt

    lines = []
    start = 0
    while start < count:
        lines.append(" ".join(words[start : breaks[start]]))
        start = breaks[start]
    return lines


def wrap_with_padding(text: str, pad: int) -> str:
    """Wrap ``text`` to the maximum line length, indenting each line by ``pad`` spaces."""
    indent = " " * pad
    return "\n".join(indent + line for line in _wrap_lines(text, MAX_LINE_LENGTH - pad))