"""Character-by-character reading of source text with position tracking."""

from __future__ import annotations

import os


class CharReader:
    """Reads source text one character at a time.

    ``current_char`` is the character just read, or None once the input is
    exhausted. ``line_no`` starts at 1; ``col_no`` is the column of
    ``current_char`` and is reset to 0 on each newline. The first character
    is read on construction.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.line_no = 1
        self.col_no = 0
        self.current_char: str | None = None
        self.read_char()

    def read_char(self) -> str | None:
        """Advance to the next character and return it (None at the end)."""
        if self._pos < len(self._text):
            self.current_char = self._text[self._pos]
            self._pos += 1
        else:
            self.current_char = None
        self.col_no += 1
        if self.current_char == "\n":
            self.line_no += 1
            self.col_no = 0
        return self.current_char


def open_reader(path: str | os.PathLike[str]) -> CharReader:
    """Read the file at ``path`` and return a reader over its contents.

    Raises OSError if the file cannot be opened.
    """
    with open(path, encoding="latin-1", newline="") as stream:
        return CharReader(stream.read())