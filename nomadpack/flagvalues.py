"""Typed flag values and the declarations that create them."""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Optional, TypeVar

from .flagenv import (
    format_duration,
    format_float,
    parse_bool,
    parse_duration,
    parse_int,
    parse_uint,
)

_T = TypeVar("_T")


class FlagValue(ABC):
    """A flag's current value, settable from command-line text."""

    example_text = ""
    type_label = ""
    is_bool_flag = False

    def __init__(
        self,
        value: Any,
        *,
        hidden: bool = False,
        set_hook: Optional[Callable[[Any], None]] = None,
    ) -> None:
        self.value = value
        self.hidden = hidden
        self.set_hook = set_hook

    @abstractmethod
    def set(self, text: str) -> None:
        """Parse ``text`` and store it; raise ValueError if it is invalid."""

    def get(self) -> Any:
        return self.value

    def example(self) -> str:
        return self.example_text

    def type_name(self) -> str:
        return self.type_label

    def _store(self, value: Any) -> None:
        self.value = value
        if self.set_hook is not None:
            self.set_hook(value)


@dataclass
class VarFlag:
    """A flag ready to be registered: its value plus help and lookup details."""

    name: str
    value: FlagValue
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    default: str = ""
    env_var: str = ""
    completion: Any = None
    shorthand: str = ""
    no_opt_default: Optional[str] = None


@dataclass(kw_only=True)
class _FlagSpec:
    name: str
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    hidden: bool = False
    env_var: str = ""
    completion: Any = None
    shorthand: str = ""

    def _env_or(self, parse: Callable[[str], _T], fallback: _T) -> _T:
        """Parse the environment variable if set and valid, else return ``fallback``."""
        if not self.env_var:
            return fallback
        raw = os.environ.get(self.env_var)
        if raw is None:
            return fallback
        try:
            return parse(raw)
        except ValueError:
            return fallback

    def _var_flag(
        self,
        value: FlagValue,
        default: str,
        *,
        shorthand: Optional[str] = None,
        no_opt_default: Optional[str] = None,
    ) -> VarFlag:
        return VarFlag(
            name=self.name,
            value=value,
            aliases=list(self.aliases),
            usage=self.usage,
            default=default,
            env_var=self.env_var,
            completion=self.completion,
            shorthand=self.shorthand if shorthand is None else shorthand,
            no_opt_default=no_opt_default,
        )


def _parse_float(text: str) -> float:
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float value {text!r}")
    bare = text.lower().lstrip("+-")
    try:
        number = float.fromhex(text) if bare.startswith("0x") else float(text)
    except OverflowError as exc:
        raise ValueError(f"float value {text!r} out of range") from exc
    except ValueError as exc:
        raise ValueError(f"invalid float value {text!r}") from exc
    if math.isinf(number) and bare not in ("inf", "infinity"):
        raise ValueError(f"float value {text!r} out of range")
    return number


def append_duration_suffix(text: str) -> str:
    """Treat a duration without an s, m or h suffix as a number of seconds."""
    if text.endswith(("s", "m", "h")):
        return text
    return text + "s"


def _parse_suffixed_duration(text: str) -> timedelta:
    return parse_duration(append_duration_suffix(text))


class BoolValue(FlagValue):
    """A boolean flag value; the flag may be given without ``=value``."""

    example_text = ""
    type_label = "bool"
    is_bool_flag = True

    def set(self, text: str) -> None:
        self._store(parse_bool(text))

    def __str__(self) -> str:
        return "true" if self.value else "false"


class IntValue(FlagValue):
    """A signed integer flag value."""

    example_text = "int"
    type_label = "int"

    def set(self, text: str) -> None:
        self._store(parse_int(text))

    def __str__(self) -> str:
        return str(self.value)


class Int64Value(FlagValue):
    """A signed 64-bit integer flag value."""

    example_text = "int"
    type_label = "int64"

    def set(self, text: str) -> None:
        self._store(parse_int(text))

    def __str__(self) -> str:
        return str(self.value)


class UintValue(FlagValue):
    """An unsigned integer flag value."""

    example_text = "uint"
    type_label = "uint"

    def set(self, text: str) -> None:
        self._store(parse_uint(text))

    def __str__(self) -> str:
        return str(self.value)


class Uint64Value(FlagValue):
    """An unsigned 64-bit integer flag value."""

    example_text = "uint"
    type_label = "uint64"

    def set(self, text: str) -> None:
        self._store(parse_uint(text))

    def __str__(self) -> str:
        return str(self.value)


class Float64Value(FlagValue):
    """A floating-point flag value."""

    example_text = "float"
    type_label = "float64"

    def set(self, text: str) -> None:
        self._store(_parse_float(text))

    def __str__(self) -> str:
        return format_float(self.value, "g")


class DurationValue(FlagValue):
    """A duration flag value; a bare number means seconds."""

    example_text = "duration"
    type_label = "duration"

    def set(self, text: str) -> None:
        self._store(_parse_suffixed_duration(text))

    def __str__(self) -> str:
        return format_duration(self.value)


@dataclass(kw_only=True)
class BoolVar(_FlagSpec):
    """Declaration of a boolean flag."""

    default: bool = False
    set_hook: Optional[Callable[[bool], None]] = None

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(parse_bool, self.default)
        value = BoolValue(initial, hidden=self.hidden, set_hook=self.set_hook)
        return self._var_flag(
            value, "true" if self.default else "false", no_opt_default="true"
        )


@dataclass(kw_only=True)
class IntVar(_FlagSpec):
    """Declaration of a signed integer flag."""

    default: int = 0
    set_hook: Optional[Callable[[int], None]] = None

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(parse_int, self.default)
        value = IntValue(initial, hidden=self.hidden, set_hook=self.set_hook)
        return self._var_flag(value, str(self.default) if self.default else "")


@dataclass(kw_only=True)
class Int64Var(_FlagSpec):
    """Declaration of a signed 64-bit integer flag."""

    default: int = 0
    set_hook: Optional[Callable[[int], None]] = None

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(parse_int, self.default)
        value = Int64Value(initial, hidden=self.hidden, set_hook=self.set_hook)
        return self._var_flag(value, str(self.default) if self.default else "")


@dataclass(kw_only=True)
class UintVar(_FlagSpec):
    """Declaration of an unsigned integer flag."""

    default: int = 0
    set_hook: Optional[Callable[[int], None]] = None

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(parse_uint, self.default)
        value = UintValue(initial, hidden=self.hidden, set_hook=self.set_hook)
        return self._var_flag(value, str(self.default) if self.default else "")


@dataclass(kw_only=True)
class Uint64Var(_FlagSpec):
    """Declaration of an unsigned 64-bit integer flag."""

    default: int = 0
    set_hook: Optional[Callable[[int], None]] = None

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(parse_uint, self.default)
        value = Uint64Value(initial, hidden=self.hidden, set_hook=self.set_hook)
        # The declared default of this flag type is never shown in help.
        return self._var_flag(value, "")


@dataclass(kw_only=True)
class Float64Var(_FlagSpec):
    """Declaration of a floating-point flag; it takes no shorthand."""

    default: float = 0.0

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(_parse_float, self.default)
        value = Float64Value(initial, hidden=self.hidden)
        default = format_float(self.default, "e") if self.default != 0 else ""
        return self._var_flag(value, default, shorthand="")


@dataclass(kw_only=True)
class DurationVar(_FlagSpec):
    """Declaration of a duration flag."""

    default: timedelta = field(default_factory=timedelta)

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(_parse_suffixed_duration, self.default)
        value = DurationValue(initial, hidden=self.hidden)
        default = format_duration(self.default) if self.default else ""
        return self._var_flag(value, default)