"""Build an alphabetical index of the words in a text and their lines."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from kpltools.bstree import BSTree


def extract_words(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(word, line)`` for each indexable word in ``text``.

    Words are runs of ASCII letters, lowercased. A word whose capital letter
    follows a space is taken as a proper noun and skipped. A word is only
    emitted when a non-letter ends it, so a word at the very end of the text
    with nothing after it is dropped.
    """
    line = 1
    previous = "f"
    letters: list[str] = []
    proper_noun = False
    for ch in text:
        if "A" <= ch <= "Z":
            ch = ch.lower()
            if previous == " ":
                proper_noun = True
        if "a" <= ch <= "z":
            letters.append(ch)
        else:
            if letters and not proper_noun:
                yield "".join(letters), line
            letters = []
            proper_noun = False
            if ch == "\n":
                line += 1
        previous = ch


def load_stop_words(text: str) -> set[str]:
    """Return the words of a stop-word text, read by the same rules."""
    return {word for word, _ in extract_words(text)}


@dataclass
class WordEntry:
    """A word together with every line it occurs on."""

    word: str
    lines: list[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.lines)


class WordIndex:
    """An index of words kept in a binary search tree."""

    def __init__(self, stop_words: Iterable[str] = ()) -> None:
        self.stop_words = frozenset(stop_words)
        self._tree = BSTree()

    def add(self, word: str, line: int) -> WordEntry:
        """Record one occurrence of ``word`` on ``line``."""
        entry = self._tree.search(word)
        if entry is None:
            entry = WordEntry(word)
            self._tree.insert(word, entry)
        entry.lines.append(line)
        return entry

    def add_text(self, text: str) -> None:
        for word, line in extract_words(text):
            if word not in self.stop_words:
                self.add(word, line)

    def entries(self) -> list[WordEntry]:
        """Return the entries in alphabetical order."""
        return [entry for _, entry in self._tree.items()]

    def format(self) -> str:
        """Render one line per word: the word, its count and its lines."""
        return "".join(
            f"{entry.word} {entry.count}"
            + "".join(f", {line}" for line in entry.lines)
            + "\n"
            for entry in self.entries()
        )


def _read_text(path: str) -> str | None:
    try:
        return Path(path).read_text(encoding="latin-1")
    except OSError:
        print(f"cant open {path}")
        return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Index the words of a text file.")
    parser.add_argument("text", nargs="?", default="alice30.txt", help="text to index")
    parser.add_argument("--stop-words", default="stopw.txt", help="file of words to ignore")
    parser.add_argument("--output", default="ketqua.txt", help="file to write the index to")
    args = parser.parse_args(argv)

    stop_text = _read_text(args.stop_words)
    index = WordIndex(load_stop_words(stop_text) if stop_text is not None else ())
    text = _read_text(args.text)
    if text is not None:
        index.add_text(text)

    report = index.format()
    Path(args.output).write_text(report, encoding="latin-1")
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())