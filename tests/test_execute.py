import pytest

from hwlab.decode import Instruction, Variant, decode_word
from hwlab.execute import CLOCKS, ExecuteUnit, UnsupportedInstruction
from hwlab.memory import SRAM
from hwlab.registers import RegisterFile


def opcode_of(variant, name):
    return next(code for code, mn in variant.opcodes.items() if mn == name)


def ins(variant, name, op1, op2):
    return Instruction(opcode_of(variant, name), op1, op2)


def make(variant=Variant.HW3):
    regs = RegisterFile()
    mem = SRAM()
    return ExecuteUnit(variant, regs, mem), regs, mem


def test_mov3_from_decoded_word():
    unit, regs, _ = make()
    clocks = unit.execute(decode_word("0011000100000010"))
    assert regs[1] == 2
    assert regs.pc == 1
    assert clocks == CLOCKS["MOV3"] == 6


def test_mov3_negative_immediate():
    unit, regs, _ = make()
    unit.execute(ins(Variant.HW3, "MOV3", 4, -5))
    assert regs[4] == -5


@pytest.mark.parametrize("variant", list(Variant))
def test_add_and_sub_use_high_nibble(variant):
    unit, regs, _ = make(variant)
    regs[1], regs[2] = 3, 4
    unit.execute(ins(variant, "ADD", 1, 2 << 4))
    assert regs[1] == 3 + 4
    unit.execute(ins(variant, "SUB", 1, 2 << 4))
    assert regs[1] == 3
    assert regs[2] == 4


@pytest.mark.parametrize("variant", [Variant.HW2, Variant.HW3, Variant.SSS])
def test_mul(variant):
    unit, regs, _ = make(variant)
    regs[3], regs[5] = 6, 7
    unit.execute(ins(variant, "MUL", 3, 5 << 4))
    assert regs[3] == 6 * 7


@pytest.mark.parametrize("variant", [Variant.HW2, Variant.HW3, Variant.SSS])
def test_mov1_then_mov0_round_trip(variant):
    unit, regs, mem = make(variant)
    regs[2] = 99
    unit.execute(ins(variant, "MOV1", 2, 200 - 256))
    assert mem[200] == 99
    unit.execute(ins(variant, "MOV0", 7, 200 - 256))
    assert regs[7] == 99


def test_clocked_variant_counts_and_advances():
    unit, regs, _ = make(Variant.HW2)
    total = unit.execute(ins(Variant.HW2, "MUL", 1, 0))
    total += unit.execute(ins(Variant.HW2, "MOV4", 1, 0))
    assert total == CLOCKS["MUL"] + CLOCKS["MOV4"]
    assert regs.pc == 2
    assert unit.clocked


@pytest.mark.parametrize("variant", [Variant.BASIC, Variant.SSS])
def test_unclocked_variants_leave_pc(variant):
    unit, regs, _ = make(variant)
    assert unit.execute(ins(variant, "MOV3", 0, 9)) == 0
    assert regs.pc == 0
    assert not unit.clocked


def test_hw3_jz_taken_when_zero():
    unit, regs, _ = make()
    regs.pc = 4
    assert unit.execute(ins(Variant.HW3, "JZ", 0, 3)) == CLOCKS["JZ"]
    assert regs.pc == 4 + 1 + 3


def test_hw3_jz_not_taken_when_nonzero():
    unit, regs, _ = make()
    regs[0] = 1
    regs.pc = 4
    unit.execute(ins(Variant.HW3, "JZ", 0, 3))
    assert regs.pc == 4 + 1


def test_hw3_jz_backwards():
    unit, regs, _ = make()
    regs.pc = 10
    unit.execute(ins(Variant.HW3, "JZ", 0, -4))
    assert regs.pc == 10 + 1 - 4


def test_hw2_jz_branches_on_positive():
    unit, regs, _ = make(Variant.HW2)
    regs[1] = 5
    unit.execute(ins(Variant.HW2, "JZ", 1, 2))
    assert regs.pc == 1 + 2
    regs[1] = 0
    unit.execute(ins(Variant.HW2, "JZ", 1, 2))
    assert regs.pc == 1 + 2 + 1


@pytest.mark.parametrize(
    "name, limit", [("JZ1", 6), ("JZ2", 31), ("JZ3", 76)]
)
def test_hw3_threshold_branches(name, limit):
    unit, regs, _ = make()
    regs[2] = limit - 1
    assert unit.execute(ins(Variant.HW3, name, 2, 5)) == CLOCKS["JZ"]
    assert regs.pc == 1 + 5
    regs.pc = 0
    regs[2] = limit
    unit.execute(ins(Variant.HW3, name, 2, 5))
    assert regs.pc == 1


def test_hw3_mov2_stores_indirect():
    unit, regs, mem = make()
    regs[1], regs[3] = 40, 11
    assert unit.execute(ins(Variant.HW3, "MOV2", 1, 3)) == CLOCKS["MOV2"]
    assert mem[40] == 11


def test_hw3_mov2_underscore_stores_one_below():
    unit, regs, mem = make()
    regs[1], regs[3] = 40, 11
    assert unit.execute(ins(Variant.HW3, "MOV2_", 1, 3)) == CLOCKS["MOV2"]
    assert mem[39] == 11
    assert mem[40] == 0


def test_hw3_mov5_loads_indirect():
    unit, regs, mem = make()
    mem[17] = 23
    regs[4] = 17
    unit.execute(ins(Variant.HW3, "MOV5", 6, 4))
    assert regs[6] == 23
    assert regs.pc == 1


@pytest.mark.parametrize("variant", [Variant.HW2, Variant.HW3])
def test_mov4_copies_high_nibble_register(variant):
    unit, regs, _ = make(variant)
    regs[9] = 31
    unit.execute(ins(variant, "MOV4", 2, 9 << 4))
    assert regs[2] == regs[9] == 31


def test_basic_rejects_memory_ops():
    unit, regs, _ = make(Variant.BASIC)
    with pytest.raises(UnsupportedInstruction) as info:
        unit.execute(ins(Variant.BASIC, "MOV0", 1, 1))
    assert info.value.variant is Variant.BASIC
    assert regs[1] == 0


def test_sss_rejects_jz():
    unit, _, _ = make(Variant.SSS)
    with pytest.raises(UnsupportedInstruction):
        unit.execute(ins(Variant.SSS, "JZ", 0, 1))


def test_unknown_opcode_leaves_state():
    unit, regs, _ = make()
    with pytest.raises(UnsupportedInstruction) as info:
        unit.execute(Instruction(13, 0, 0))
    assert info.value.instruction.opcode == 13
    assert regs.pc == 0


def test_indirect_store_outside_memory_raises():
    unit, regs, _ = make()
    regs[1] = -3
    with pytest.raises(IndexError):
        unit.execute(ins(Variant.HW3, "MOV2", 1, 0))
    assert regs.pc == 0


def test_default_construction_creates_state():
    unit = ExecuteUnit(Variant.HW3)
    unit.execute(ins(Variant.HW3, "MOV3", 0, 8))
    unit.execute(ins(Variant.HW3, "MOV1", 0, 5))
    assert unit.memory[5] == 8
    assert unit.registers.pc == 2