import pytest

from hwlab.memory import SRAM


def test_default_size():
    assert len(SRAM()) == 256


def test_starts_zeroed():
    assert list(SRAM(8)) == [0] * 8


def test_write_then_read():
    mem = SRAM()
    mem[200] = 17
    assert mem[200] == 17
    assert mem[199] == 0


def test_values_wrap_to_signed_32_bits():
    mem = SRAM(4)
    mem[0] = 2**32 + 5
    assert mem[0] == 5


@pytest.mark.parametrize("index", [-1, 256, 1000])
def test_out_of_range_read(index):
    with pytest.raises(IndexError):
        SRAM()[index]


def test_out_of_range_write():
    mem = SRAM()
    with pytest.raises(IndexError):
        mem[256] = 1
    assert list(mem) == [0] * 256


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        SRAM(-1)


def test_dump_header_and_values():
    mem = SRAM()
    mem[0] = 3
    mem[2] = -4
    text = mem.dump(0, 3)
    header, body = text.splitlines()
    assert header == "--- Memory Dump (addr :  0~3)"
    assert body.split() == ["3", "0", "-4", "0"]


def test_dump_each_value_followed_by_space():
    mem = SRAM(4)
    text = mem.dump(1, 2)
    assert text.endswith("0 0 \n")


def test_dump_matches_contents():
    mem = SRAM(16)
    for index in range(16):
        mem[index] = index * index
    body = mem.dump(4, 9).splitlines()[1]
    assert [int(v) for v in body.split()] == [mem[i] for i in range(4, 10)]


def test_dump_empty_range():
    text = SRAM().dump(5, 4)
    assert text == "--- Memory Dump (addr :  5~4)\n\n"


def test_dump_past_end_raises():
    with pytest.raises(IndexError):
        SRAM(10).dump(0, 10)