"""Recurse ever deeper, holding a buffer in each frame, and report addresses."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

ONE_MEG = 1048576
STACK_ALLOC = ONE_MEG // 20
MAX_TEXT = 25

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def commas(amount: int, base: int = 16, group: int = 4) -> str:
    """Write ``amount`` in ``base`` with a comma between every ``group`` digits.

    Zero gives an empty string. Results longer than the fixed text width
    raise ``OverflowError``.
    """
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if group <= 0:
        raise ValueError(f"group must be positive, got {group}")

    pieces: list[str] = []
    place = 0
    while amount > 0:
        if place % group == 0 and place > 0:
            pieces.append(",")
        amount, digit = divmod(amount, base)
        pieces.append(_DIGITS[digit])
        place += 1
    text = "".join(reversed(pieces))
    if len(text) > MAX_TEXT - 1:
        raise OverflowError(f"{text} does not fit in {MAX_TEXT - 1} characters")
    return text


def probe_stack(max_depth: int | None = None, out: TextIO | None = None) -> int:
    """Recurse until ``max_depth`` levels or until recursion or memory runs out.

    Each level keeps a buffer of ``STACK_ALLOC`` bytes alive and reports the
    address of the first level's anchor, the end of its own buffer and the
    distance between them. Returns the number of levels reached.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must not be negative, got {max_depth}")
    out = out if out is not None else sys.stdout

    anchor = bytearray(1)
    top = id(anchor)
    top_text = commas(top)
    out.write(f"First location on stack: {top_text}\n")

    reached = 0

    def descend(depth: int) -> None:
        nonlocal reached
        if max_depth is not None and depth >= max_depth:
            return
        frame_data = bytearray(STACK_ALLOC)
        bottom = id(frame_data) + len(frame_data)
        out.write(
            f"Iteration = {depth:3d}:  Stack Top/Bottom/Bytes: "
            f"{top_text}  {commas(bottom)}  {top - bottom}\n"
        )
        reached = depth + 1
        descend(depth + 1)

    try:
        descend(0)
    except (RecursionError, MemoryError):
        pass
    return reached


def main(argv: list[str] | None = None) -> int:
    """Run the stack probe."""
    parser = argparse.ArgumentParser(prog="stackdepth", description="Recurse until resources run out.")
    parser.add_argument("--max-depth", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        probe_stack(args.max_depth, sys.stdout)
    except ValueError as exc:
        print(f"stackdepth: {exc}", file=sys.stderr)
        return 1
    return 0