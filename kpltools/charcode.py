"""Character classes of the KPL source alphabet."""

from __future__ import annotations

import enum


class CharCode(enum.Enum):
    """The class a source character belongs to."""

    SPACE = enum.auto()
    LETTER = enum.auto()
    DIGIT = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    TIMES = enum.auto()
    SLASH = enum.auto()
    LT = enum.auto()
    GT = enum.auto()
    EXCLAIMATION = enum.auto()
    EQ = enum.auto()
    COMMA = enum.auto()
    PERIOD = enum.auto()
    COLON = enum.auto()
    SEMICOLON = enum.auto()
    SINGLEQUOTE = enum.auto()
    LPAR = enum.auto()
    RPAR = enum.auto()
    UNKNOWN = enum.auto()


_SYMBOLS: dict[str, CharCode] = {
    "+": CharCode.PLUS,
    "-": CharCode.MINUS,
    "*": CharCode.TIMES,
    "/": CharCode.SLASH,
    "<": CharCode.LT,
    ">": CharCode.GT,
    "!": CharCode.EXCLAIMATION,
    "=": CharCode.EQ,
    ",": CharCode.COMMA,
    ".": CharCode.PERIOD,
    ":": CharCode.COLON,
    ";": CharCode.SEMICOLON,
    "'": CharCode.SINGLEQUOTE,
    "(": CharCode.LPAR,
    ")": CharCode.RPAR,
}

_SPACES = frozenset(" \t\n\v\f\r")


def char_code(ch: str | None) -> CharCode:
    """Classify one character; None (end of input) and non-ASCII are UNKNOWN."""
    if ch is None:
        return CharCode.UNKNOWN
    if len(ch) != 1:
        raise ValueError("char_code expects a single character")
    if ch in _SPACES:
        return CharCode.SPACE
    if ("a" <= ch <= "z") or ("A" <= ch <= "Z"):
        return CharCode.LETTER
    if "0" <= ch <= "9":
        return CharCode.DIGIT
    return _SYMBOLS.get(ch, CharCode.UNKNOWN)