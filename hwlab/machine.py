"""The tiny processor: fetch, decode and execute a program from code memory."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO

from .codemem import CodeMemory, load_code
from .decode import Decoder, Instruction, Variant
from .execute import ExecuteUnit, UnsupportedInstruction
from .memory import SRAM
from .registers import RegisterFile

UNSUPPORTED_MESSAGE = "Not executable instruction, not yet implemented sorry...!!"

# Range of data memory shown after a run, for the variants that show it.
_MEMORY_DUMP = {Variant.SSS: (0, 26), Variant.HW3: (0, 74)}


@dataclass(frozen=True)
class Step:
    """What one fetch-decode-execute cycle did."""

    pc: int
    word: str
    instruction: Instruction
    text: str | None
    clocks: int
    error: str | None = None


class Machine:
    """Code memory, decoder, execute unit, registers and data memory wired together."""

    def __init__(self, code: CodeMemory, variant: Variant = Variant.HW3) -> None:
        self.code = code
        self.variant = variant
        self.registers = RegisterFile()
        self.memory = SRAM()
        self.decoder = Decoder(code, variant)
        self.executor = ExecuteUnit(variant, self.registers, self.memory)
        self.total_clocks = 0
        self._cursor = 0

    @property
    def pc(self) -> int:
        """Address of the next instruction to fetch."""
        return self.registers.pc if self.executor.clocked else self._cursor

    def step(self) -> Step:
        """Run one instruction.

        Variants that count clocks raise ``UnsupportedInstruction`` for an
        instruction they cannot execute, since the program counter would never
        move past it; the others report it in ``Step.error`` and go on.
        """
        pc = self.pc
        word = self.decoder.fetch(pc)
        instruction = self.decoder.decode()
        text = self.decoder.show()
        error = None
        try:
            clocks = self.executor.execute(instruction)
        except UnsupportedInstruction:
            if self.executor.clocked:
                raise
            clocks = 0
            error = UNSUPPORTED_MESSAGE
        if not self.executor.clocked:
            self._cursor += 1
        self.total_clocks += clocks
        return Step(pc, word, instruction, text, clocks, error)

    def run(self, lines: int, out: TextIO | None = None) -> int:
        """List and run the first ``lines`` words, report to ``out``; return total clocks."""
        out = out if out is not None else sys.stdout
        for addr in range(lines):
            out.write(f"{self.code[addr]}\n")

        while self.pc < lines:
            step = self.step()
            out.write(f"Fetching from code memory at {step.pc}\n")
            if step.text is not None:
                out.write(f"{step.text}\n")
            if step.error is not None:
                out.write(f"{step.error}\n")

        out.write(self._summary())
        return self.total_clocks

    def _summary(self) -> str:
        if self.variant is Variant.BASIC:
            return "After executing instruction .. \n" + self._basic_dump()
        parts = ["After executing instruction ...\n"]
        if self.executor.clocked:
            parts.append(f"Total Clocks: {self.total_clocks}\n")
        if self.variant is Variant.HW2:
            parts.append(self.registers.result_line())
        else:
            parts.append(self.registers.dump())
        if self.variant in _MEMORY_DUMP:
            start, end = _MEMORY_DUMP[self.variant]
            parts.append(self.memory.dump(start, end))
        return "".join(parts)

    def _basic_dump(self) -> str:
        lines = [" ... register file ...."]
        for index, value in enumerate(self.registers):
            prefix = " " if index < 10 else ""
            lines.append(f"{prefix}R{index}: {value}")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Machine(variant={self.variant.value}, pc={self.pc})"


def main(argv: list[str] | None = None) -> int:
    """Load a program file and run it."""
    parser = argparse.ArgumentParser(prog="tpu", description="Run a tiny processor program.")
    parser.add_argument("input", help="file of 16-bit instruction words written as 0/1")
    parser.add_argument("lines", type=int, help="number of instruction words to load")
    parser.add_argument(
        "--variant",
        choices=[variant.value for variant in Variant],
        default=Variant.HW3.value,
        help="instruction-set variant (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    try:
        code = load_code(args.input, args.lines)
    except (OSError, ValueError) as exc:
        print(f"tpu: {exc}", file=sys.stderr)
        return 1

    machine = Machine(code, Variant(args.variant))
    try:
        machine.run(args.lines)
    except (UnsupportedInstruction, IndexError, ValueError) as exc:
        print(f"tpu: {exc}", file=sys.stderr)
        return 1
    return 0