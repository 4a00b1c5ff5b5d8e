"""The execute stage: carries out decoded instructions on registers and memory."""

from __future__ import annotations

from collections.abc import Callable

from .decode import Instruction, Variant, mnemonic
from .memory import SRAM
from .registers import RegisterFile

# Clock cycles per operation, for the variants that count them.
CLOCKS = {
    "MOV0": 8,
    "MOV1": 8,
    "MOV2": 12,
    "MOV3": 6,
    "ADD": 4,
    "SUB": 4,
    "JZ": 12,
    "MUL": 30,
    "MOV4": 2,
}

# Operations that are charged at the cost of another entry in the table.
_COST_ALIAS = {"JZ1": "JZ", "JZ2": "JZ", "JZ3": "JZ", "MOV2_": "MOV2"}

_BASIC_OPS = frozenset({"MOV3", "ADD", "SUB"})
_SSS_OPS = frozenset({"MOV3", "MOV0", "MOV1", "ADD", "SUB", "MUL"})
_HW2_OPS = frozenset({"MOV0", "MOV1", "MOV2", "MOV3", "ADD", "SUB", "JZ", "MUL", "MOV4"})
_HW3_OPS = _HW2_OPS | {"MOV5", "JZ1", "JZ2", "JZ3", "MOV2_"}

_SUPPORTED: dict[Variant, frozenset[str]] = {
    Variant.BASIC: _BASIC_OPS,
    Variant.SSS: _SSS_OPS,
    Variant.HW2: _HW2_OPS,
    Variant.HW3: _HW3_OPS,
}

# Variants that advance the program counter and report clock cycles.
_CLOCKED = frozenset({Variant.HW2, Variant.HW3})

_BRANCH_CONDITIONS: dict[Variant, dict[str, Callable[[int], bool]]] = {
    Variant.HW2: {"JZ": lambda value: value > 0},
    Variant.HW3: {
        "JZ": lambda value: value == 0,
        "JZ1": lambda value: value < 6,
        "JZ2": lambda value: value < 31,
        "JZ3": lambda value: value < 76,
    },
}


class UnsupportedInstruction(Exception):
    """Raised for an instruction the variant cannot execute."""

    def __init__(self, instruction: Instruction, variant: Variant) -> None:
        self.instruction = instruction
        self.variant = variant
        super().__init__(
            f"Not executable instruction, not yet implemented "
            f"(opcode {instruction.opcode} in variant {variant.value})"
        )


class ExecuteUnit:
    """Executes decoded instructions for one instruction-set variant."""

    def __init__(
        self,
        variant: Variant = Variant.HW3,
        registers: RegisterFile | None = None,
        memory: SRAM | None = None,
    ) -> None:
        self.variant = variant
        self.registers = registers if registers is not None else RegisterFile()
        self.memory = memory if memory is not None else SRAM()

    @property
    def clocked(self) -> bool:
        """Whether this variant advances the program counter and counts clocks."""
        return self.variant in _CLOCKED

    def execute(self, instruction: Instruction) -> int:
        """Execute ``instruction`` and return the clock cycles it took.

        Variants that do not count clocks return 0 and leave the program
        counter alone. Raises ``UnsupportedInstruction`` for an opcode the
        variant cannot execute; nothing is changed in that case.
        """
        name = mnemonic(self.variant, instruction.opcode)
        if name is None or name not in _SUPPORTED[self.variant]:
            raise UnsupportedInstruction(instruction, self.variant)

        jump = self._perform(name, instruction)

        if not self.clocked:
            return 0
        self.registers.pc += 1 + jump
        # MOV5 lies beyond the clock table and is charged nothing.
        return CLOCKS.get(_COST_ALIAS.get(name, name), 0)

    def _perform(self, name: str, ins: Instruction) -> int:
        """Carry out the operation; return the branch offset taken, if any."""
        regs = self.registers
        mem = self.memory
        if name == "MOV0":
            regs[ins.op1] = mem[ins.address]
        elif name == "MOV1":
            mem[ins.address] = regs[ins.op1]
        elif name == "MOV2":
            mem[regs[ins.op1]] = regs[ins.low_reg]
        elif name == "MOV2_":
            mem[regs[ins.op1] - 1] = regs[ins.low_reg]
        elif name == "MOV3":
            regs[ins.op1] = ins.op2
        elif name == "MOV4":
            regs[ins.op1] = regs[ins.high_reg]
        elif name == "MOV5":
            regs[ins.op1] = mem[regs[ins.low_reg]]
        elif name == "ADD":
            regs[ins.op1] = regs[ins.op1] + regs[ins.high_reg]
        elif name == "SUB":
            regs[ins.op1] = regs[ins.op1] - regs[ins.high_reg]
        elif name == "MUL":
            regs[ins.op1] = regs[ins.op1] * regs[ins.high_reg]
        else:
            condition = _BRANCH_CONDITIONS[self.variant][name]
            return ins.op2 if condition(regs[ins.op1]) else 0
        return 0

    def __repr__(self) -> str:
        return f"ExecuteUnit(variant={self.variant.value})"