import string

import pytest

from kpltools.charcode import CharCode, char_code


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters(ch):
    assert char_code(ch) is CharCode.LETTER


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert char_code(ch) is CharCode.DIGIT


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_spaces(ch):
    assert char_code(ch) is CharCode.SPACE


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("+", CharCode.PLUS),
        ("-", CharCode.MINUS),
        ("*", CharCode.TIMES),
        ("/", CharCode.SLASH),
        ("<", CharCode.LT),
        (">", CharCode.GT),
        ("!", CharCode.EXCLAIMATION),
        ("=", CharCode.EQ),
        (",", CharCode.COMMA),
        (".", CharCode.PERIOD),
        (":", CharCode.COLON),
        (";", CharCode.SEMICOLON),
        ("'", CharCode.SINGLEQUOTE),
        ("(", CharCode.LPAR),
        (")", CharCode.RPAR),
    ],
)
def test_symbols(ch, expected):
    assert char_code(ch) is expected


@pytest.mark.parametrize("ch", ["?", "@", "[", "_", "{", "~", '"', "#", "\x00", "\x7f", "\xe9"])
def test_unknown(ch):
    assert char_code(ch) is CharCode.UNKNOWN


def test_end_of_input_is_unknown():
    assert char_code(None) is CharCode.UNKNOWN


def test_every_byte_value_is_classified():
    codes = {char_code(chr(i)) for i in range(256)}
    assert codes == set(CharCode)


def test_only_ascii_range_is_known():
    assert all(char_code(chr(i)) is CharCode.UNKNOWN for i in range(128, 256))


def test_rejects_multiple_characters():
    with pytest.raises(ValueError):
        char_code("ab")