"""Instruction decoding and disassembly for the tiny 16-bit processor.

An instruction word is 16 characters of '0'/'1': a 4-bit opcode, a 4-bit
first operand (a register number) and an 8-bit signed second operand.
Several instruction-set variants share that layout but assign opcodes and
print instructions differently.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .codemem import WORD_BITS, CodeMemory


class Variant(enum.Enum):
    """The instruction-set variants the decoder understands."""

    BASIC = "basic"
    HW2 = "hw2"
    HW3 = "hw3"
    SSS = "sss"

    @property
    def opcodes(self) -> Mapping[int, str]:
        """Opcode number to mnemonic for this variant."""
        return _OPCODES[self]


_BASIC_OPCODES = {0: "MOV0", 1: "MOV1", 2: "MOV2", 3: "MOV3", 4: "ADD", 5: "SUB", 6: "JZ"}
_HW2_OPCODES = {**_BASIC_OPCODES, 7: "MUL", 8: "MOV4"}
_HW3_OPCODES = {**_HW2_OPCODES, 9: "MOV5", 10: "JZ1", 11: "JZ2", 12: "JZ3", 15: "MOV2_"}
_SSS_OPCODES = {0: "MOV0", 1: "MOV1", 2: "MOV2", 3: "MOV3", 4: "ADD", 5: "SUB", 6: "MUL", 7: "JZ"}

_OPCODES: dict[Variant, Mapping[int, str]] = {
    Variant.BASIC: MappingProxyType(_BASIC_OPCODES),
    Variant.HW2: MappingProxyType(_HW2_OPCODES),
    Variant.HW3: MappingProxyType(_HW3_OPCODES),
    Variant.SSS: MappingProxyType(_SSS_OPCODES),
}

# Templates use the fields name, op1, op2, high, low and addr.
_IMMEDIATE = "{name} R{op1}, #{op2}"
_REG_REG = "{name} R{op1}, R{high}"
_LOAD_DIRECT = "{name} R{op1}, [{addr}]"
_STORE_DIRECT = "{name} [{addr}], R{op1}"
_BRANCH = "{name} R{op1}, {op2}"
_STORE_INDIRECT = "{name} [R{op1}], R{low}"

_COMMON_FORMATS = {
    "MOV3": _IMMEDIATE,
    "ADD": _REG_REG,
    "SUB": _REG_REG,
    "MUL": _REG_REG,
    "MOV0": _LOAD_DIRECT,
    "MOV1": _STORE_DIRECT,
}

_FORMATS: dict[Variant, dict[str, str]] = {
    Variant.BASIC: {
        "MOV3": _IMMEDIATE,
        "ADD": "{name}  R{op1}, R{op2}",
        "SUB": "{name}  R{op1}, R{op2}",
    },
    Variant.HW2: {
        **_COMMON_FORMATS,
        "MOV2": "{name} R{low}, [R{op1}]",
        "JZ": _BRANCH,
        "MOV4": "{name} R{high}, R{op1}",
    },
    Variant.HW3: {
        **_COMMON_FORMATS,
        "MOV2": _STORE_INDIRECT,
        "JZ": _BRANCH,
        "MOV4": _REG_REG,
        "MOV5": "{name} R{op1}, [R{low}]",
        "JZ1": _BRANCH,
        "JZ2": _BRANCH,
        "JZ3": _BRANCH,
        "MOV2_": _STORE_INDIRECT,
    },
    Variant.SSS: dict(_COMMON_FORMATS),
}

_FALLBACK: dict[Variant, str | None] = {
    Variant.BASIC: "Not yet implemented",
    Variant.HW2: None,
    Variant.HW3: None,
    Variant.SSS: None,
}


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction: opcode and op1 are 4-bit, op2 is signed 8-bit."""

    opcode: int
    op1: int
    op2: int

    @property
    def high_reg(self) -> int:
        """Register number held in the upper nibble of op2."""
        return (self.op2 >> 4) & 0xF

    @property
    def low_reg(self) -> int:
        """Register number held in the lower nibble of op2."""
        return self.op2 & 0xF

    @property
    def address(self) -> int:
        """op2 read as an unsigned 8-bit address."""
        return self.op2 & 0xFF


def decode_word(word: str) -> Instruction:
    """Decode the first 16 characters of ``word``; any character but '1' is a zero bit."""
    if len(word) < WORD_BITS:
        raise ValueError(f"instruction word needs {WORD_BITS} bits, got {len(word)}: {word!r}")
    value = 0
    for ch in word[:WORD_BITS]:
        value = (value << 1) | (ch == "1")
    raw = value & 0xFF
    return Instruction(
        opcode=(value >> 12) & 0xF,
        op1=(value >> 8) & 0xF,
        op2=raw - 0x100 if raw & 0x80 else raw,
    )


def mnemonic(variant: Variant, opcode: int) -> str | None:
    """The mnemonic of ``opcode`` in ``variant``, or None if it has none."""
    return variant.opcodes.get(opcode)


def disassemble(instruction: Instruction, variant: Variant) -> str | None:
    """Assembly text for ``instruction``, or None where the variant prints nothing."""
    name = mnemonic(variant, instruction.opcode)
    template = _FORMATS[variant].get(name) if name is not None else None
    if template is None:
        return _FALLBACK[variant]
    return template.format(
        name=name,
        op1=instruction.op1,
        op2=instruction.op2,
        high=instruction.high_reg,
        low=instruction.low_reg,
        addr=instruction.address,
    )


class Decoder:
    """Fetches words from code memory and decodes them."""

    def __init__(self, code: CodeMemory, variant: Variant = Variant.HW3) -> None:
        self.code = code
        self.variant = variant
        self.word: str | None = None
        self.instruction: Instruction | None = None

    def fetch(self, pc: int) -> str:
        """Load the word at ``pc`` into the instruction buffer and return it."""
        if not 0 <= pc < len(self.code):
            raise IndexError(f"program counter {pc} outside code memory 0..{len(self.code) - 1}")
        self.word = self.code[pc]
        return self.word

    def decode(self) -> Instruction:
        """Decode the word in the instruction buffer."""
        if self.word is None:
            raise RuntimeError("nothing fetched to decode")
        self.instruction = decode_word(self.word)
        return self.instruction

    def show(self) -> str | None:
        """Disassembly of the last decoded instruction."""
        if self.instruction is None:
            raise RuntimeError("no instruction decoded yet")
        return disassemble(self.instruction, self.variant)