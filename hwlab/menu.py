"""Interactive menu that feeds the same items into a stack and a queue."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .adt import Queue, Stack

INSTRUCTIONS = (
    "Enter your choice:\n"
    "   1 to add an items to the queue,stack \n"
    "   2 to remove an item from the queue,stack \n"
    "   3 to end \n"
)


def _parse_choice(line: str) -> int | None:
    text = line.strip()
    digits = ""
    for index, ch in enumerate(text):
        if ch.isdigit() or (index == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return None


def _show(value: Any) -> str:
    return "(null)" if value is None else str(value)


def run_menu(inp: TextIO | None = None, out: TextIO | None = None) -> tuple[Stack, Queue]:
    """Run the menu until an invalid choice or end of input; return the stack and queue."""
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout

    out.write("creating stack...\n")
    stack = Stack()
    out.write("creating queue...\n")
    queue = Queue()

    while True:
        out.write(INSTRUCTIONS)
        out.write("? ")
        line = inp.readline()
        if not line:
            break
        choice = _parse_choice(line)

        if choice == 1:
            out.write("Enter the numbers: ")
            numbers = inp.readline().rstrip("\r\n")
            for token in (part for part in numbers.split(" ") if part):
                out.write(f"{token} ")
                out.write("pushing a data into stack... \n")
                stack.push(token)
                out.write(f"{token} ")
                out.write("pushing a data into queue... \n")
                queue.enqueue(token)
            out.write(stack.describe())
            out.write(queue.describe())
        elif choice == 2:
            out.write("popping a stack... \n")
            try:
                popped = stack.pop()
            except IndexError:
                out.write("there is no stack")
                popped = None
            out.write("deleteing a queue... \n")
            try:
                dequeued = queue.dequeue()
            except IndexError:
                out.write("there is no queue")
                dequeued = None
            out.write(f"The popped value is {_show(popped)} \n")
            out.write(f"The dequeued value is {_show(dequeued)} \n")
            out.write(stack.describe())
            out.write(queue.describe())
        else:
            out.write("Invalid choice.\n\n")
            break

    return stack, queue


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0