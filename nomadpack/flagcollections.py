"""Flag values that hold several strings: enums, string slices and string maps."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from .flagvalues import FlagValue, VarFlag, _FlagSpec


def _split_trimmed(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",")]


def _possible_values_usage(usage: str, values: Iterable[str]) -> str:
    possible = ", ".join(values)
    return usage.rstrip(". \t") + ". One possible value from: " + possible + "."


def _not_valid(value: str, values: Iterable[str]) -> ValueError:
    return ValueError(f"'{value}' not valid. Must be one of: {', '.join(values)}")


def map_to_kv(mapping: Optional[dict[str, str]]) -> str:
    """Render a mapping as ``key=value`` pairs sorted by key and joined by commas."""
    if not mapping:
        return ""
    return ",".join(f"{key}={mapping[key]}" for key in sorted(mapping))


class EnumValue(FlagValue):
    """A list of strings, each of which must be one of the allowed values."""

    example_text = "string"
    type_label = "enum"

    def __init__(
        self,
        value: Optional[list[str]],
        *,
        values: Iterable[str],
        hidden: bool = False,
    ) -> None:
        super().__init__(list(value or []), hidden=hidden)
        self.values = list(values)

    def set(self, text: str) -> None:
        for part in text.split(","):
            candidate = part.strip()
            if candidate not in self.values:
                raise _not_valid(candidate, self.values)
            self.value.append(candidate)

    def __str__(self) -> str:
        return ",".join(self.value)


class EnumSingleValue(FlagValue):
    """A single string that must be one of the allowed values."""

    example_text = "string"
    type_label = "EnumSingle"

    def __init__(
        self,
        value: str,
        *,
        values: Iterable[str],
        hidden: bool = False,
        set_hook: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(value, hidden=hidden, set_hook=set_hook)
        self.values = list(values)

    def set(self, text: str) -> None:
        if text not in self.values:
            raise _not_valid(text, self.values)
        self._store(text)

    def __str__(self) -> str:
        return self.value


class StringMapValue(FlagValue):
    """A mapping filled from repeated ``key=value`` arguments."""

    example_text = "key=value"
    type_label = "StringMap"

    def __init__(
        self, value: Optional[dict[str, str]], *, hidden: bool = False
    ) -> None:
        super().__init__(dict(value or {}), hidden=hidden)

    def set(self, text: str) -> None:
        key, sep, item = text.partition("=")
        if not sep:
            raise ValueError(f'missing = in KV pair: "{text}"')
        self.value[key] = item

    def __str__(self) -> str:
        return map_to_kv(self.value)


class StringSliceValue(FlagValue):
    """A list of strings; the first explicit setting replaces the default."""

    example_text = "string"
    type_label = "StringSlice"

    def __init__(self, value: Optional[list[str]], *, hidden: bool = False) -> None:
        super().__init__(list(value or []), hidden=hidden)
        self._explicitly_set = False

    def set(self, text: str) -> None:
        if not self._explicitly_set:
            self._explicitly_set = True
            self.value = []
        self.value.extend(text.strip().split(","))

    def __str__(self) -> str:
        return ",".join(self.value)


@dataclass(kw_only=True)
class EnumVar(_FlagSpec):
    """Declaration of a flag accepting several values from a fixed list."""

    values: list[str] = field(default_factory=list)
    default: Optional[list[str]] = None

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(_split_trimmed, self.default)
        value = EnumValue(initial, values=self.values, hidden=self.hidden)
        flag = self._var_flag(value, ",".join(self.default or []))
        flag.usage = _possible_values_usage(self.usage, self.values)
        return flag


@dataclass(kw_only=True)
class EnumSingleVar(_FlagSpec):
    """Declaration of a flag accepting one value from a fixed list."""

    values: list[str] = field(default_factory=list)
    default: str = ""
    set_hook: Optional[Callable[[str], None]] = None

    def to_var_flag(self) -> VarFlag:
        initial = self._env_or(lambda raw: raw, self.default)
        value = EnumSingleValue(
            initial, values=self.values, hidden=self.hidden, set_hook=self.set_hook
        )
        flag = self._var_flag(value, self.default)
        flag.usage = _possible_values_usage(self.usage, self.values)
        return flag


@dataclass(kw_only=True)
class StringMapVar(_FlagSpec):
    """Declaration of a repeatable ``key=value`` flag; it is never read from the environment."""

    default: Optional[dict[str, str]] = None

    def to_var_flag(self) -> VarFlag:
        value = StringMapValue(self.default, hidden=self.hidden)
        flag = self._var_flag(value, map_to_kv(self.default))
        return dataclasses.replace(flag, env_var="")


@dataclass(kw_only=True)
class StringSliceVar(_FlagSpec):
    """Declaration of a comma-separated, repeatable string list flag."""

    default: Optional[list[str]] = None

    def to_var_flag(self) -> VarFlag:
        initial: Any = self._env_or(_split_trimmed, self.default)
        value = StringSliceValue(initial, hidden=self.hidden)
        return self._var_flag(value, ",".join(self.default or []))