import pytest

from nomadpack.charsets import CHAR_SETS, char_set


def test_known_set_contents():
    assert char_set(9) == ["|", "/", "-", "\\"]


def test_clock_set_starts_at_one_oclock():
    clocks = char_set(37)
    assert len(clocks) == 12
    assert clocks[0] == "\U0001F550"


def test_half_hour_clock_set_interleaves():
    clocks = char_set(37)
    mixed = char_set(38)
    assert mixed[0::2] == clocks
    assert mixed[1] == "\U0001F55C"
    assert len(mixed) == 2 * len(clocks)


def test_returned_list_is_a_copy():
    first = char_set(8)
    first.append("extra")
    first.reverse()
    assert char_set(8) == [".", "o", "O", "@", "*"]


def test_missing_set_raises_key_error():
    with pytest.raises(KeyError):
        char_set(1000)


@pytest.mark.parametrize("index", sorted(CHAR_SETS))
def test_every_set_is_non_empty_strings(index):
    chars = char_set(index)
    assert chars
    assert all(isinstance(ch, str) and ch for ch in chars)


def test_set_indices_are_contiguous():
    lengths = [len(char_set(index)) for index in range(78)]
    assert all(length > 0 for length in lengths)
    assert lengths[9] == 4
    with pytest.raises(KeyError):
        char_set(78)