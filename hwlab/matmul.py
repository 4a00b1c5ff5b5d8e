"""Row-partitioned matrix computation spread over threads."""

from __future__ import annotations

import argparse
import sys
import threading
import time

Matrix = list[list[float]]

PRINT_LIMIT = 10


def allocate_matrix(size: int, fill: float = 0.0) -> Matrix:
    """A ``size`` x ``size`` matrix with every element set to ``fill``."""
    if size < 0:
        raise ValueError(f"matrix size must not be negative, got {size}")
    return [[fill] * size for _ in range(size)]


def format_matrix(matrix: Matrix) -> str:
    """Rows of comma-separated values in six-decimal fixed notation."""
    return "".join(",".join(f"{value:f}" for value in row) + "\n" for row in matrix)


def multiply_rows(a: Matrix, b: Matrix, c: Matrix, start: int, end: int) -> None:
    """Fill rows ``start``..``end - 1`` of ``c``.

    Each element is ``c[i][j] = sum over k of a[i][j] * b[k][j]``.
    """
    size = len(a)
    for i in range(start, end):
        row_a = a[i]
        row_c = c[i]
        for j in range(size):
            total = 0.0
            for k in range(size):
                total += row_a[j] * b[k][j]
            row_c[j] = total


def threaded_multiply(a: Matrix, b: Matrix, num_threads: int) -> Matrix:
    """Compute the result matrix with each thread handling an equal block of rows."""
    size = len(a)
    if num_threads <= 0:
        raise ValueError(f"number of threads must be positive, got {num_threads}")
    if size % num_threads != 0:
        raise ValueError(f"size {size} must be a multiple of num of threads {num_threads}")
    if len(b) != size or any(len(row) != size for row in (*a, *b)):
        raise ValueError("both matrices must be square and of the same size")

    c = allocate_matrix(size)
    portion = size // num_threads
    threads = [
        threading.Thread(target=multiply_rows, args=(a, b, c, tid * portion, (tid + 1) * portion))
        for tid in range(num_threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return c


def main(argv: list[str] | None = None) -> int:
    """Multiply two matrices of ones and report the time taken."""
    parser = argparse.ArgumentParser(prog="matmul", description="Threaded matrix computation.")
    parser.add_argument("size", type=int, help="matrix size")
    parser.add_argument("num_threads", type=int, help="number of threads")
    args = parser.parse_args(argv)

    try:
        a = allocate_matrix(args.size, 1.0)
        b = allocate_matrix(args.size, 1.0)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.size <= PRINT_LIMIT:
        sys.stdout.write("Matrix 1:\n" + format_matrix(a))
        sys.stdout.write("Matrix 2:\n" + format_matrix(b))

    started = time.perf_counter()
    try:
        c = threaded_multiply(a, b, args.num_threads)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    elapsed_us = (time.perf_counter() - started) * 1_000_000

    if args.size <= PRINT_LIMIT:
        sys.stdout.write("Matrix 3:\n" + format_matrix(c))
    sys.stdout.write(f"It took {elapsed_us:f} msec in thread matrix \n")
    return 0