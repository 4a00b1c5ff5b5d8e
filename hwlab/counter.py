"""Two threads bump a shared counter without a lock, two with one."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import TextIO

DEFAULT_ITERATIONS = 10000


def run_counters(iterations: int = DEFAULT_ITERATIONS, out: TextIO | None = None) -> tuple[int, int]:
    """Run the four threads and return ``(unlocked_total, locked_total)``.

    The unlocked total may lose updates; the locked total is always
    ``2 * iterations``.
    """
    if iterations < 0:
        raise ValueError(f"iterations must not be negative, got {iterations}")
    out = out if out is not None else sys.stdout

    counts = {"plain": 0, "locked": 0}
    counter_lock = threading.Lock()
    output_lock = threading.Lock()

    def emit(text: str) -> None:
        with output_lock:
            out.write(text)

    def plain(name: str) -> None:
        for _ in range(iterations):
            counts["plain"] += 1
        emit(f"thread {name} execution => result : {counts['plain']} \n")

    def locked(name: str) -> None:
        with counter_lock:
            for _ in range(iterations):
                counts["locked"] += 1
            emit(f"mutex_thread {name} execution => result : {counts['locked']} \n")

    threads = [
        threading.Thread(target=plain, args=("t1",)),
        threading.Thread(target=plain, args=("t2",)),
        threading.Thread(target=locked, args=("t3",)),
        threading.Thread(target=locked, args=("t4",)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    out.write(f"global: {counts['plain']}\nm_global: {counts['locked']}\n")
    return counts["plain"], counts["locked"]


def main(argv: list[str] | None = None) -> int:
    """Run the counter threads and print their results."""
    parser = argparse.ArgumentParser(prog="counter", description="Compare locked and unlocked counting.")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    args = parser.parse_args(argv)
    try:
        run_counters(args.iterations, sys.stdout)
    except ValueError as exc:
        print(f"counter: {exc}", file=sys.stderr)
        return 1
    return 0