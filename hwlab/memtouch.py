"""Allocate memory a megabyte at a time, optionally touching every page."""

from __future__ import annotations

import argparse
import enum
import sys
from typing import TextIO

ONE_MEG = 1048576
PAGE_SIZE = 4096
STATUS_EVERY = 100


class TouchMode(enum.Enum):
    """What to do with each page of every allocated megabyte."""

    NOTHING = "Nothing"
    READ = "Read"
    WRITE = "Write"


def parse_mode(text: str) -> TouchMode:
    """The mode whose name ``text`` starts with; raise ``ValueError`` if none."""
    for mode in TouchMode:
        if text.startswith(mode.value):
            return mode
    raise ValueError("Unable to recognize the Read|Write|Nothing portion of the command")


def allocate_and_touch(megabytes: int, mode: TouchMode, out: TextIO | None = None) -> int:
    """Allocate up to ``megabytes`` blocks of 1 MiB and touch them; return how many were allocated.

    All blocks stay allocated until the function returns. Running out of
    memory ends the allocation early with a report on ``out``.
    """
    out = out if out is not None else sys.stdout
    blocks: list[bytearray] = []
    value = 0
    while len(blocks) < megabytes:
        try:
            block = bytearray(ONE_MEG)
        except MemoryError:
            out.write("The program is ending because we could allocate no more memory.\n")
            out.write(f"Total megabytes allocated = {len(blocks)}\n")
            break
        blocks.append(block)
        if len(blocks) % STATUS_EVERY == 0:
            out.write(f"We have allocated {len(blocks)} Megabytes\n")

        if mode is TouchMode.READ:
            for offset in range(0, ONE_MEG, PAGE_SIZE):
                value = block[offset]
        elif mode is TouchMode.WRITE:
            for offset in range(0, ONE_MEG, PAGE_SIZE):
                block[offset] = value
    return len(blocks)


def main(argv: list[str] | None = None) -> int:
    """Parse the size and mode and run the allocation."""
    parser = argparse.ArgumentParser(
        prog="memtouch", usage="%(prog)s <MemorySizeInMegabyte> <Read|Write|Nothing>"
    )
    parser.add_argument("megabytes", type=int)
    parser.add_argument("mode")
    args = parser.parse_args(argv)

    try:
        mode = parse_mode(args.mode)
    except ValueError as exc:
        print(exc)
        return 1
    allocate_and_touch(args.megabytes, mode, sys.stdout)
    return 0