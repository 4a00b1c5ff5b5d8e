"""The sixteen-register file with a program counter."""

from __future__ import annotations

REGISTER_COUNT = 16


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class RegisterFile:
    """Sixteen signed 32-bit registers R0..R15 and a program counter ``pc``."""

    def __init__(self) -> None:
        self._regs = [0] * REGISTER_COUNT
        self.pc = 0

    def _check(self, index: int) -> None:
        if not 0 <= index < REGISTER_COUNT:
            raise IndexError(f"register R{index} does not exist")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._regs[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check(index)
        self._regs[index] = _to_int32(value)

    def __len__(self) -> int:
        return REGISTER_COUNT

    def __iter__(self):
        return iter(self._regs)

    def dump(self) -> str:
        """Text listing of every register, one per line."""
        lines = ["... register file ....."]
        lines.extend(f" R{i}: {value}" for i, value in enumerate(self._regs))
        return "\n".join(lines) + "\n"

    def result_line(self) -> str:
        """The one-line report of R0."""
        return f"Result :{self._regs[0]}\n"

    def __repr__(self) -> str:
        return f"RegisterFile(pc={self.pc}, regs={self._regs})"