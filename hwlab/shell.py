"""A very small interactive shell that runs a fixed set of commands."""

from __future__ import annotations

import subprocess
import sys
from typing import TextIO

BANNER = "------------ My Shell ------------\n\n"
PROMPT = "[MyShell]# "
QUIT_WORDS = frozenset({"quit", "q"})
_BIN_DIR = "/bin/"

_FIXED_ARGVS: tuple[tuple[str, ...], ...] = (
    ("ls",),
    ("ls", "-l"),
    ("ls", "-a"),
    ("ls", "-alF"),
    ("pwd",),
    ("date",),
)
_EXACT_COMMANDS = {" ".join(args): args for args in _FIXED_ARGVS}


def _operand(line: str, start: int) -> list[str]:
    rest = line[start:]
    return [rest] if rest else []


def resolve_command(line: str) -> tuple[str, list[str]] | None:
    """Map an input line to ``(executable, argv)``, or None if it is not a known command.

    ``rm`` and ``mkdir`` take the rest of the line after the command and one
    separating character as their single operand; a line starting with ``./``
    runs that file with the name after ``./`` as its argv[0].
    """
    if line in _EXACT_COMMANDS:
        args = _EXACT_COMMANDS[line]
        return _BIN_DIR + args[0], list(args)
    if line.startswith("rm"):
        return _BIN_DIR + "rm", ["rm", *_operand(line, 3)]
    if line.startswith("mkdir"):
        return _BIN_DIR + "mkdir", ["mkdir", *_operand(line, 6)]
    if line.startswith("./"):
        return line, [line[2:]]
    return None


def run_shell(inp: TextIO | None = None, out: TextIO | None = None) -> int:
    """Read commands until ``quit``, ``q`` or end of input; return how many were started."""
    inp = inp if inp is not None else sys.stdin
    out = out if out is not None else sys.stdout

    out.write(BANNER)
    started = 0
    while True:
        out.write(PROMPT)
        raw = inp.readline()
        if not raw:
            break
        line = raw.rstrip("\r\n")

        if line in QUIT_WORDS:
            out.write("quit..\n\n")
            break

        command = resolve_command(line)
        if command is None:
            out.write("Command Not Found..\n\n")
            continue

        executable, args = command
        started += 1
        try:
            result = subprocess.run(
                args, executable=executable, capture_output=True, text=True, check=False
            )
        except OSError as exc:
            out.write(f"{executable}: {exc.strerror}\n")
        else:
            out.write(result.stdout)
            out.write(result.stderr)
        out.write("\n")
    return started


def main(argv: list[str] | None = None) -> int:
    """Run the shell on standard input and output."""
    run_shell(sys.stdin, sys.stdout)
    return 0