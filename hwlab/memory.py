"""Word-addressed static RAM used as data memory."""

from __future__ import annotations

DEFAULT_SIZE = 256


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class SRAM:
    """A fixed number of signed 32-bit words, all starting at zero."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 0:
            raise ValueError(f"memory size must not be negative, got {size}")
        self._cells = [0] * size

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"memory address {index} outside 0..{len(self._cells) - 1}")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._cells[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check(index)
        self._cells[index] = _to_int32(value)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def dump(self, start: int, end: int) -> str:
        """Text dump of the words from ``start`` to ``end`` inclusive."""
        header = f"--- Memory Dump (addr :  {start}~{end})\n"
        if start > end:
            return header + "\n"
        self._check(start)
        self._check(end)
        body = "".join(f"{value} " for value in self._cells[start : end + 1])
        return header + body + "\n"

    def __repr__(self) -> str:
        return f"SRAM(size={len(self._cells)})"