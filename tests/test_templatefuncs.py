import pytest

from nomadpack.templatefuncs import file_contents, go_quote, to_string_list


@pytest.mark.parametrize(
    "values, expected",
    [
        (["dc1", "dc2", "dc3", "dc4"], '["dc1", "dc2", "dc3", "dc4"]'),
        (["dc1"], '["dc1"]'),
        ([], "[]"),
    ],
)
def test_to_string_list(values, expected):
    assert to_string_list(values) == expected


def test_to_string_list_single_value():
    assert to_string_list("dc1") == '["dc1"]'


def test_to_string_list_escapes_quotes():
    assert to_string_list(['a"b']) == '["a\\"b"]'


def test_go_quote_escapes_control_characters():
    assert go_quote("line\nnext\t") == '"line\\nnext\\t"'
    assert go_quote("\x01") == '"\\x01"'
    assert go_quote("back\\slash") == '"back\\\\slash"'


def test_go_quote_keeps_printable_unicode():
    assert go_quote("∫é") == '"∫é"'


def test_go_quote_invalid_utf8_bytes():
    assert go_quote(b"a\xffb") == '"a\\xffb"'


def test_go_quote_integer_is_character_literal():
    assert go_quote(65) == "'A'"
    assert go_quote(ord("'")) == "'\\''"


def test_go_quote_list():
    assert go_quote(["a", "b"]) == '["a" "b"]'


def test_file_contents_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("hello\nworld", encoding="utf-8")
    assert file_contents(str(path)) == "hello\nworld"


def test_file_contents_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(OSError, match="failed to read"):
        file_contents(str(missing))