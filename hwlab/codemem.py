"""Code memory: a fixed-capacity store of 16-bit instruction words kept as bit strings."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TextIO

WORD_BITS = 16
DEFAULT_CAPACITY = 1024


class CodeMemory:
    """Read-only instruction memory addressed by word.

    Addresses inside the capacity that hold no loaded word read as an empty
    string; addresses outside the capacity raise ``IndexError``.
    """

    def __init__(self, words: Iterable[str] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._words = list(words)
        if len(self._words) > capacity:
            raise ValueError(
                f"{len(self._words)} words do not fit in a code memory of {capacity} words"
            )
        self.capacity = capacity

    def __getitem__(self, addr: int) -> str:
        if not 0 <= addr < self.capacity:
            raise IndexError(f"code address {addr} outside 0..{self.capacity - 1}")
        if addr < len(self._words):
            return self._words[addr]
        return ""

    def __len__(self) -> int:
        return self.capacity

    @property
    def words(self) -> tuple[str, ...]:
        """The words that were loaded, in address order."""
        return tuple(self._words)

    def __repr__(self) -> str:
        return f"CodeMemory({len(self._words)} words, capacity={self.capacity})"


def _bits(stream: TextIO) -> Iterator[str]:
    for line in stream:
        for ch in line:
            if not ch.isspace():
                yield ch


def read_words(stream: TextIO, count: int) -> list[str]:
    """Read ``count`` words of 16 characters each, skipping all whitespace."""
    bits = _bits(stream)
    words = []
    for index in range(count):
        word = "".join(islice(bits, WORD_BITS))
        if len(word) < WORD_BITS:
            raise ValueError(
                f"input ended inside word {index}: expected {WORD_BITS} bits, got {len(word)}"
            )
        words.append(word)
    return words


def load_code(
    path: str | os.PathLike[str], lines: int, capacity: int = DEFAULT_CAPACITY
) -> CodeMemory:
    """Load ``lines`` words from the file at ``path`` into a new code memory."""
    with open(path, encoding="utf-8") as stream:
        words = read_words(stream, lines)
    return CodeMemory(words, capacity)