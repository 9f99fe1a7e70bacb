"""Grouped command-line flag sets.

Flags are parsed posix style by default (``--name value``, ``-n value``,
flags may follow positional arguments). When the arguments contain a
single-dash long flag such as ``-name``, a single-dash parser is used instead,
which stops at the first positional argument. Flags are declared in named
groups so that help can be generated per group.
"""

from __future__ import annotations

import json
import re
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from .flagcollections import StringMapValue, StringSliceValue
from .flagenv import wrap_with_padding
from .flagvalues import (
    DurationValue,
    Float64Value,
    FlagValue,
    Int64Value,
    IntValue,
    Uint64Value,
    UintValue,
    VarFlag,
)

_WHITESPACE = re.compile(r"\s+")

_FLAG_AFTER_ARGS = (
    "Flags must be specified before positional arguments when using single-dash\n"
    ' long flags. For example, "nomad-pack plan -verbose example" instead\n'
    ' of "nomad-pack plan example -verbose".\n'
    "\n"
    " The CLI also accepts posix flags, which does allow flags after positional\n"
    ' arguments. For example, both "nomad-pack plan --verbose example" and\n'
    ' "nomad-pack plan example --verbose" are valid commands.'
)


class FlagError(Exception):
    """Raised when command-line flags cannot be parsed or registered."""


@dataclass(eq=False)
class Flag:
    """A registered flag: its value plus the details shown in help."""

    name: str
    value: FlagValue
    usage: str = ""
    shorthand: str = ""
    def_value: str = ""
    hidden: bool = False
    deprecated: str = ""
    no_opt_def_val: str = ""
    changed: bool = False


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _quote_char(char: str) -> str:
    return f"'{char}'"


class _PosixFlags:
    """Posix-style flag registry and parser."""

    def __init__(self) -> None:
        self.formal: dict[str, Flag] = {}
        self.shorthands: dict[str, Flag] = {}
        self.actual: dict[str, Flag] = {}
        self.parsed = False
        self.args: list[str] = []

    def add(self, flag: Flag) -> None:
        if flag.name in self.formal:
            raise FlagError(f"flag redefined: {flag.name}")
        if flag.shorthand:
            if len(flag.shorthand) > 1:
                raise FlagError(
                    f"{_quote(flag.shorthand)} shorthand is more than one character"
                )
            if flag.shorthand in self.shorthands:
                raise FlagError(
                    f"unable to redefine {_quote_char(flag.shorthand)} shorthand "
                    f"in flag set: it's already used for "
                    f"{_quote(self.shorthands[flag.shorthand].name)} flag"
                )
            self.shorthands[flag.shorthand] = flag
        self.formal[flag.name] = flag

    def sorted_flags(self) -> list[Flag]:
        return [self.formal[name] for name in sorted(self.formal)]

    def parse(self, arguments: Iterable[str]) -> None:
        self.parsed = True
        self.args = []
        remaining = deque(arguments)
        while remaining:
            arg = remaining.popleft()
            if len(arg) < 2 or arg[0] != "-":
                self.args.append(arg)
                continue
            if arg[1] == "-":
                if len(arg) == 2:
                    self.args.extend(remaining)
                    return
                self._parse_long(arg, remaining)
            else:
                shorts = arg[1:]
                while shorts:
                    shorts = self._parse_short(shorts, remaining)

    def _parse_long(self, arg: str, remaining: deque) -> None:
        body = arg[2:]
        if body[0] in "-=":
            raise FlagError(f"bad flag syntax: {arg}")
        name, sep, value = body.partition("=")
        flag = self.formal.get(name)
        if flag is None:
            if name == "help":
                raise FlagError("help requested")
            raise FlagError(f"unknown flag: --{name}")
        if not sep:
            if flag.no_opt_def_val:
                value = flag.no_opt_def_val
            elif remaining:
                value = remaining.popleft()
            else:
                raise FlagError(f"flag needs an argument: {arg}")
        self._set(flag, value)

    def _parse_short(self, shorts: str, remaining: deque) -> str:
        char, rest = shorts[0], shorts[1:]
        flag = self.shorthands.get(char)
        if flag is None:
            if char == "h":
                raise FlagError("help requested")
            raise FlagError(f"unknown shorthand flag: {_quote_char(char)} in -{shorts}")
        if len(shorts) > 2 and shorts[1] == "=":
            value, rest = shorts[2:], ""
        elif flag.no_opt_def_val:
            value = flag.no_opt_def_val
        elif len(shorts) > 1:
            value, rest = shorts[1:], ""
        elif remaining:
            value = remaining.popleft()
        else:
            raise FlagError(
                f"flag needs an argument: {_quote_char(char)} in -{shorts}"
            )
        self._set(flag, value)
        return rest

    def _set(self, flag: Flag, value: str) -> None:
        try:
            flag.value.set(value)
        except ValueError as exc:
            label = (
                f"-{flag.shorthand}, --{flag.name}" if flag.shorthand else f"--{flag.name}"
            )
            raise FlagError(
                f"invalid argument {_quote(value)} for {_quote(label)} flag: {exc}"
            ) from exc
        flag.changed = True
        self.actual[flag.name] = flag


class _SingleDashFlags:
    """Single-dash long flag registry and parser; stops at the first positional."""

    def __init__(self) -> None:
        self.formal: dict[str, FlagValue] = {}
        self.parsed = False
        self.args: list[str] = []

    def add(self, name: str, value: FlagValue) -> None:
        if name in self.formal:
            raise FlagError(f"flag redefined: {name}")
        self.formal[name] = value

    def parse(self, arguments: Iterable[str]) -> None:
        self.parsed = True
        self.args = list(arguments)
        while self._parse_one():
            pass

    def _parse_one(self) -> bool:
        if not self.args:
            return False
        arg = self.args[0]
        if len(arg) < 2 or arg[0] != "-":
            return False
        dashes = 1
        if arg[1] == "-":
            dashes = 2
            if len(arg) == 2:
                self.args.pop(0)
                return False
        name = arg[dashes:]
        if not name or name[0] in "-=":
            raise FlagError(f"bad flag syntax: {arg}")
        self.args.pop(0)
        name, has_value, value = name.partition("=")
        flag_value = self.formal.get(name)
        if flag_value is None:
            if name in ("help", "h"):
                raise FlagError("help requested")
            raise FlagError(f"flag provided but not defined: -{name}")

        if flag_value.is_bool_flag:
            try:
                flag_value.set(value if has_value else "true")
            except ValueError as exc:
                if has_value:
                    raise FlagError(
                        f"invalid boolean value {_quote(value)} for -{name}: {exc}"
                    ) from exc
                raise FlagError(f"invalid boolean flag {name}: {exc}") from exc
            return True

        if not has_value:
            if not self.args:
                raise FlagError(f"flag needs an argument: -{name}")
            value = self.args.pop(0)
        try:
            flag_value.set(value)
        except ValueError as exc:
            raise FlagError(
                f"invalid value {_quote(value)} for flag -{name}: {exc}"
            ) from exc
        return True


class Set:
    """A named group of flags, such as "Common Options"."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._own = _PosixFlags()
        self._union = _PosixFlags()
        self._single = _SingleDashFlags()
        self._completions: dict[str, Any] = {}
        self._vars: list[VarFlag] = []

    def visit(self) -> Iterator[Flag]:
        """Yield this group's flags that were set by parsing, ordered by name."""
        return (flag for flag in self._own.sorted_flags() if flag.changed)

    def visit_all(self) -> Iterator[Flag]:
        """Yield all of this group's flags, ordered by name."""
        return iter(self._own.sorted_flags())

    def visit_vars(self) -> Iterator[VarFlag]:
        """Yield the flag declarations registered with this group, in order."""
        return iter(list(self._vars))

    def add(self, spec: Any) -> FlagValue:
        """Register a flag declaration such as IntVar and return its value."""
        return self.var_flag(spec.to_var_flag())

    def var_flag(self, var_flag: VarFlag) -> FlagValue:
        """Register a prepared flag, building its full usage text; return its value."""
        self._vars.append(var_flag)
        value = var_flag.value

        if value.hidden:
            self.var(value, var_flag.name, "", var_flag.shorthand)
            self._apply_no_opt_default(var_flag)
            return value

        usage = var_flag.usage
        if var_flag.aliases:
            quoted = [f'"-{alias}"' for alias in var_flag.aliases]
            if len(quoted) == 1:
                aliases = quoted[0]
            elif len(quoted) == 2:
                aliases = f"{quoted[0]} and {quoted[1]}"
            else:
                aliases = ", ".join(quoted[:-1] + [f"and {quoted[-1]}"])
            usage += f" This is aliased as {aliases}."

        if var_flag.default:
            if value.type_name() == "string":
                usage += f" Defaults to {_quote(var_flag.default)}."
            else:
                usage += f" Defaults to {var_flag.default}."

        if var_flag.env_var:
            usage += (
                f" This can also be specified via the {var_flag.env_var} "
                "environment variable."
            )

        for alias in var_flag.aliases:
            self._union.add(Flag(name=alias, value=value, def_value=str(value)))

        self.var(value, var_flag.name, usage, var_flag.shorthand)
        self._completions["--" + var_flag.name] = var_flag.completion
        self._apply_no_opt_default(var_flag)
        return value

    def var(
        self, value: FlagValue, name: str, usage: str, shorthand: str = ""
    ) -> Flag:
        """Register a raw value under ``name`` with no usage decoration."""
        flag = Flag(
            name=name,
            value=value,
            usage=usage,
            shorthand=shorthand,
            def_value=str(value),
        )
        self._union.add(flag)
        self._own.add(flag)
        self._single.add(name, value)
        return flag

    def _apply_no_opt_default(self, var_flag: VarFlag) -> None:
        if var_flag.no_opt_default is not None:
            self._union.formal[var_flag.name].no_opt_def_val = var_flag.no_opt_default


class Sets:
    """A group of flag sets parsed together as one command line."""

    def __init__(self) -> None:
        self._union = _PosixFlags()
        self._single = _SingleDashFlags()
        self._completions: dict[str, Any] = {}
        self._sets: list[Set] = []

    def new_set(self, name: str) -> Set:
        """Create a named group whose flags are parsed with this collection."""
        flag_set = Set(name)
        flag_set._union = self._union
        flag_set._single = self._single
        flag_set._completions = self._completions
        self._sets.append(flag_set)
        return flag_set

    def completions(self) -> dict[str, Any]:
        """Return the completion predictors keyed by ``--name``."""
        return self._completions

    def parse(self, args: Iterable[str]) -> None:
        """Parse ``args``, raising FlagError on any problem."""
        args = list(args)
        if has_go_flags(args):
            self._single.parse(args)
            check_flags_after_args(self._single.args, self)
            return
        self._union.parse(args)

    def parsed(self) -> bool:
        return self._union.parsed

    def args(self) -> list[str]:
        """Return the positional arguments left after parsing."""
        if self._single.parsed:
            return list(self._single.args)
        return list(self._union.args)

    def uses_goflags(self) -> bool:
        """Report whether the single-dash parser was used."""
        return self._single.parsed

    def visit(self) -> Iterator[Flag]:
        """Yield the flags set by posix parsing, ordered by name."""
        actual = self._union.actual
        return (actual[name] for name in sorted(actual))

    def help(self) -> str:
        """Build help text grouped by flag set."""
        parts = []
        for flag_set in self._sets:
            parts.append(f"{flag_set.name}:\n\n")
            parts.extend(
                format_flag_detail(flag)
                for flag in flag_set.visit_all()
                if not flag.hidden
            )
        return "".join(parts).rstrip("\n")

    def visit_sets(self) -> Iterator[tuple[str, Set]]:
        """Yield ``(name, set)`` for every group, in creation order."""
        return ((flag_set.name, flag_set) for flag_set in list(self._sets))

    def hide_unused_flags(self, set_name: str, flag_names: Iterable[str]) -> None:
        """Hide the named flags of the group ``set_name`` from help."""
        hidden = set(flag_names)
        for name, flag_set in self.visit_sets():
            if name != set_name:
                continue
            for flag in flag_set.visit_all():
                if flag.name in hidden:
                    flag.hidden = True


def has_go_flags(args: Iterable[str]) -> bool:
    """Report whether any argument is a single-dash long flag such as ``-name``."""
    return any(len(arg) > 2 and arg[0] == "-" and arg[1] != "-" for arg in args)


def check_flags_after_args(args: Iterable[str], sets: Sets) -> None:
    """Raise FlagError if a known flag appears among the positional arguments."""
    names = set()
    for arg in args:
        if arg == "--":
            break
        if len(arg) < 2 or arg[0] != "-":
            continue
        if arg[1] == "-":
            arg = arg[1:]
        if arg[1] == "-":
            continue
        arg = arg.split("=", 1)[0]
        names.add(arg[1:])
    if not names:
        return

    for _, flag_set in sets.visit_sets():
        if any(flag.name in names for flag in flag_set.visit_all()):
            raise FlagError(_FLAG_AFTER_ARGS)


def default_is_zero_value(flag: Flag) -> bool:
    """Report whether the flag's default is the zero value of its type."""
    value = flag.value
    if value.is_bool_flag:
        return flag.def_value == "false"
    if isinstance(value, DurationValue):
        return flag.def_value in ("0", "0s")
    if isinstance(value, (IntValue, Int64Value, UintValue, Uint64Value, Float64Value)):
        return flag.def_value == "0"
    if isinstance(value, StringSliceValue):
        return flag.def_value in ("[]", "")
    if isinstance(value, StringMapValue):
        return flag.def_value == ""
    return str(value) in ("false", "<nil>", "", "0")


def format_flag_detail(flag: Flag) -> str:
    """Format one flag's help entry; hidden values produce an empty string."""
    value = flag.value
    if value.hidden:
        return ""

    if flag.shorthand:
        line = f"  -{flag.shorthand}, --{flag.name}"
    else:
        line = f"      --{flag.name}"

    example = value.example()
    if example:
        line += f"=<{example}>"

    if not default_is_zero_value(flag):
        if value.type_name() == "string":
            line += f" (default {_quote(flag.def_value)})"
        else:
            line += f" (default {flag.def_value})"
    if flag.deprecated:
        line += f" (DEPRECATED: {flag.deprecated})"

    usage = _WHITESPACE.sub(" ", flag.usage)
    return f"{line}\n{wrap_with_padding(usage, 8)}\n\n"