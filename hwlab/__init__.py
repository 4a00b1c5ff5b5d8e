"""A tiny 16-bit processor emulator and small operating-systems exercises."""

__version__ = "0.1.0"
__all__ = [
    "adt",
    "codemem",
    "counter",
    "decode",
    "execute",
    "machine",
    "matmul",
    "memory",
    "memtouch",
    "menu",
    "registers",
    "shell",
    "stackdepth",
]