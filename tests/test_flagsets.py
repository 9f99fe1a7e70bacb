from datetime import timedelta

import pytest

from nomadpack.flagcollections import EnumValue, StringSliceVar
from nomadpack.flagsets import (
    Flag,
    FlagError,
    Set,
    Sets,
    check_flags_after_args,
    default_is_zero_value,
    format_flag_detail,
    has_go_flags,
)
from nomadpack.flagvalues import BoolVar, DurationValue, IntValue, IntVar


@pytest.fixture
def alpha_beta():
    sets = Sets()
    alpha = sets.new_set("setA").add(IntVar(name="alpha", shorthand="a"))
    beta = sets.new_set("setB").add(IntVar(name="beta", shorthand="b"))
    return sets, alpha, beta


@pytest.mark.parametrize(
    "args",
    [
        ["-b", "42", "-a", "21"],
        ["-b", "42", "something", "-a", "21"],
        ["-b", "42", "something", "--alpha", "21"],
        ["--beta", "42", "something", "--alpha", "21"],
    ],
)
def test_sets_parse_ok(alpha_beta, args):
    sets, alpha, beta = alpha_beta
    sets.parse(args)
    assert alpha.get() == 21
    assert beta.get() == 42


def test_sets_missing_value(alpha_beta):
    sets, _, _ = alpha_beta
    with pytest.raises(FlagError, match="unknown shorthand flag: 'd' in -d"):
        sets.parse(["-d", "42", "-a", "21"])


def test_string_slice():
    sets = Sets()
    val_a = sets.new_set("A").add(StringSliceVar(name="a"))
    val_b = sets.new_set("B").add(StringSliceVar(name="b"))
    sets.parse(["--b", "somevalueB", "--a", "somevalueA,somevalueB"])
    assert val_b.get() == ["somevalueB"]
    assert val_a.get() == ["somevalueA", "somevalueB"]


def test_posix_positional_args(alpha_beta):
    sets, _, _ = alpha_beta
    assert sets.parsed() is False
    sets.parse(["-b", "42", "something", "-a", "21", "--", "--alpha"])
    assert sets.parsed() is True
    assert sets.uses_goflags() is False
    assert sets.args() == ["something", "--alpha"]


def test_single_dash_parse(alpha_beta):
    sets, alpha, beta = alpha_beta
    sets.parse(["-alpha", "21", "-beta=7", "pos"])
    assert sets.uses_goflags() is True
    assert alpha.get() == 21
    assert beta.get() == 7
    assert sets.args() == ["pos"]


def test_single_dash_flag_after_args(alpha_beta):
    sets, _, _ = alpha_beta
    with pytest.raises(FlagError, match="before positional arguments"):
        sets.parse(["-alpha", "21", "pos", "-beta", "3"])


def test_single_dash_unknown_flag(alpha_beta):
    sets, _, _ = alpha_beta
    with pytest.raises(FlagError, match="flag provided but not defined: -gamma"):
        sets.parse(["-gamma", "1"])


def test_single_dash_invalid_value(alpha_beta):
    sets, _, _ = alpha_beta
    with pytest.raises(FlagError, match='invalid value "x" for flag -alpha'):
        sets.parse(["-alpha", "x"])


def test_posix_invalid_value(alpha_beta):
    sets, _, _ = alpha_beta
    with pytest.raises(FlagError, match='invalid argument "x" for "-a, --alpha" flag'):
        sets.parse(["--alpha", "x"])


def test_posix_unknown_and_missing(alpha_beta):
    sets, _, _ = alpha_beta
    with pytest.raises(FlagError, match="unknown flag: --gamma"):
        sets.parse(["--gamma", "1"])
    with pytest.raises(FlagError, match="flag needs an argument: --alpha"):
        sets.parse(["--alpha"])


def test_bool_flag_without_value():
    sets = Sets()
    verbose = sets.new_set("Common").add(BoolVar(name="verbose", shorthand="v"))
    sets.parse(["-v", "pos"])
    assert verbose.get() is True
    assert sets.args() == ["pos"]
    sets.parse(["--verbose=false"])
    assert verbose.get() is False


def test_single_dash_bool_flag():
    sets = Sets()
    verbose = sets.new_set("Common").add(BoolVar(name="verbose"))
    sets.parse(["-verbose", "pos"])
    assert verbose.get() is True
    assert sets.args() == ["pos"]


def test_alias_parses_and_is_documented():
    sets = Sets()
    group = sets.new_set("Common")
    value = group.add(IntVar(name="count", aliases=["cnt"], usage="How many."))
    sets.parse(["--cnt", "5"])
    assert value.get() == 5
    (flag,) = list(group.visit_all())
    assert flag.usage == 'How many. This is aliased as "-cnt".'


def test_three_aliases_sentence():
    group = Set("G")
    group.add(IntVar(name="n", aliases=["x", "y", "z"], usage="N."))
    (flag,) = list(group.visit_all())
    assert flag.usage == 'N. This is aliased as "-x", "-y", and "-z".'


def test_env_var_usage():
    group = Set("G")
    group.add(IntVar(name="n", env_var="N_ENV", usage="N."))
    (flag,) = list(group.visit_all())
    assert flag.usage == (
        "N. This can also be specified via the N_ENV environment variable."
    )


def test_help_output():
    sets = Sets()
    sets.new_set("Common Options").add(
        IntVar(name="alpha", shorthand="a", usage="Alpha value.", default=3)
    )
    sets.new_set("Other").add(BoolVar(name="verbose", usage="Be loud."))
    assert sets.help() == (
        "Common Options:\n\n"
        "  -a, --alpha=<int> (default 3)\n"
        "        Alpha value. Defaults to 3.\n\n"
        "Other:\n\n"
        "      --verbose\n"
        "        Be loud. Defaults to false."
    )


def test_hidden_flag_not_in_help_or_completions():
    sets = Sets()
    group = sets.new_set("Common")
    group.add(BoolVar(name="secret-mode", hidden=True))
    group.add(IntVar(name="shown"))
    assert "secret-mode" not in sets.help()
    assert "--shown" in sets.help()
    assert list(sets.completions()) == ["--shown"]


def test_hide_unused_flags():
    sets = Sets()
    group = sets.new_set("Common")
    group.add(IntVar(name="keep"))
    group.add(IntVar(name="drop"))
    sets.hide_unused_flags("Common", ["drop"])
    text = sets.help()
    assert "--keep" in text
    assert "--drop" not in text


def test_visit_reports_set_flags(alpha_beta):
    sets, _, _ = alpha_beta
    sets.parse(["--beta", "2"])
    assert [flag.name for flag in sets.visit()] == ["beta"]
    groups = dict(sets.visit_sets())
    assert [flag.name for flag in groups["setB"].visit()] == ["beta"]
    assert list(groups["setA"].visit()) == []


def test_visit_vars_and_visit_all_order():
    group = Set("G")
    group.add(IntVar(name="zeta"))
    group.add(IntVar(name="eta"))
    assert [v.name for v in group.visit_vars()] == ["zeta", "eta"]
    assert [f.name for f in group.visit_all()] == ["eta", "zeta"]


def test_redefinition_rejected():
    sets = Sets()
    sets.new_set("A").add(IntVar(name="same"))
    with pytest.raises(FlagError, match="flag redefined: same"):
        sets.new_set("B").add(IntVar(name="same"))


@pytest.mark.parametrize(
    "args, expected",
    [
        (["-b", "42"], False),
        (["--beta", "42"], False),
        (["-beta", "42"], True),
        (["pos", "-ab"], True),
        ([], False),
    ],
)
def test_has_go_flags(args, expected):
    assert has_go_flags(args) is expected


def test_check_flags_after_args(alpha_beta):
    sets, _, _ = alpha_beta
    assert check_flags_after_args(["pos", "--", "-alpha"], sets) is None
    assert check_flags_after_args(["pos", "-unknown"], sets) is None
    with pytest.raises(FlagError, match="positional arguments"):
        check_flags_after_args(["pos", "--alpha=3"], sets)


def test_default_is_zero_value():
    assert default_is_zero_value(
        Flag(name="d", value=DurationValue(timedelta(0)), def_value="0s")
    )
    assert not default_is_zero_value(
        Flag(name="i", value=IntValue(5), def_value="5")
    )
    assert default_is_zero_value(
        Flag(name="e", value=EnumValue([], values=["x"]), def_value="")
    )


def test_format_flag_detail_deprecated_and_hidden():
    flag = Flag(name="old", value=IntValue(0), usage="Old.", def_value="0",
                deprecated="use new")
    assert format_flag_detail(flag) == (
        "      --old=<int> (DEPRECATED: use new)\n        Old.\n\n"
    )
    hidden = Flag(name="h", value=IntValue(0, hidden=True), def_value="0")
    assert format_flag_detail(hidden) == ""