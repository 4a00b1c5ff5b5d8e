# hwlab

An emulator for a tiny 16-bit processor (the "tPU"), plus a handful of
small operating-systems exercises: a queue/stack menu, a minimal shell, a
shared-counter demonstration with and without a lock, a threaded matrix
computation, a memory-touching allocator and a recursion-depth probe.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## The tPU emulator

A program is a text file of 16-bit instruction words written as `0`/`1`
characters. All whitespace in the file is skipped, so words may be split
across lines or run together. Each word is split into a 4-bit opcode, a
4-bit first operand (a register number) and an 8-bit signed second operand.

    hwlab-tpu program.txt 5
    hwlab-tpu program.txt 5 --variant hw2

The first argument is the program file, the second the number of words to
load. `--variant` picks the instruction set: `basic`, `hw2`, `hw3` (the
default) or `sss`. The emulator prints the loaded words, then for each
instruction prints the fetch address and its disassembly and executes it.

- `basic` knows `MOV3`, `ADD` and `SUB`; `sss` adds `MOV0`, `MOV1` and
  `MUL`. These run each loaded word once, in order, and report instructions
  they cannot execute without stopping. At the end they print the register
  file (`sss` also dumps data memory 0..26).
- `hw2` and `hw3` keep a program counter, support jumps and count clock
  cycles. `hw2` has `MOV0`..`MOV4`, `ADD`, `SUB`, `MUL` and `JZ` (which
  jumps when the register is greater than zero) and ends by printing the
  total clocks and R0. `hw3` adds `MOV5`, `MOV2_` and the jumps `JZ`
  (register is zero), `JZ1` (< 6), `JZ2` (< 31) and `JZ3` (< 76), and ends
  with the total clocks, the register file and data memory 0..74. An
  instruction they cannot execute stops the run with an error.

From Python:

    from hwlab.codemem import load_code
    from hwlab.decode import Variant
    from hwlab.machine import Machine

    code = load_code("program.txt", 5)
    machine = Machine(code, Variant.HW3)
    total_clocks = machine.run(5)

`Machine.step()` runs a single instruction and returns a record of the
address, word, decoded instruction, disassembly and clocks.
`hwlab.decode.decode_word` turns a bit string into an `Instruction`, and
`hwlab.decode.disassemble` turns that into assembly text.
`hwlab.execute.ExecuteUnit` executes instructions and raises
`UnsupportedInstruction` for ones the variant lacks.
`hwlab.registers.RegisterFile` (16 signed 32-bit registers and `pc`) and
`hwlab.memory.SRAM` (256 words by default) can be indexed like lists; out of
range indexes raise `IndexError`.

## Operating-systems exercises

    hwlab-adt                       # menu feeding numbers into a queue and a stack
    hwlab-shell                     # a small shell for a fixed set of commands
    hwlab-counter --iterations 10000
    hwlab-matmul 8 4                # 8x8 matrices of ones, 4 threads
    hwlab-memtouch 100 Write        # allocate 100 MiB; Read, Write or Nothing
    hwlab-stackdepth --max-depth 50

- `hwlab-adt`: choice 1 reads a line of space-separated items and pushes
  each onto the stack and the queue; choice 2 pops and dequeues one item.
  Any other choice, or end of input, ends the menu. The containers are
  `hwlab.adt.Stack` and `hwlab.adt.Queue`.
- `hwlab-shell`: runs `ls`, `ls -l`, `ls -a`, `ls -alF`, `pwd` and `date`
  from `/bin`, `rm <name>` and `mkdir <name>`, and `./program`. Each
  command's output is printed once it has finished. `quit` or `q` leaves.
- `hwlab-counter`: two threads add to a shared counter without a lock and
  two with one, and the totals are printed.
- `hwlab-matmul`: the size must be a multiple of the thread count; each
  thread fills an equal block of rows, with element `(i, j)` computed as
  the sum over `k` of `a[i][j] * b[k][j]`. Matrices of size 10 or smaller
  are printed. The elapsed time is measured in microseconds, though the
  line printed labels it "msec".
- `hwlab-memtouch`: the mode is matched on its prefix; progress is printed
  every 100 MiB, and running out of memory ends the allocation early.
- `hwlab-stackdepth`: recurses, holding about 51 KiB per level, until the
  given depth or until recursion or memory runs out. `hwlab.stackdepth.commas`
  formats numbers in hexadecimal with a comma every four digits.

## What it does not do

The emulator has no assembler: programs must be written as bit strings.
The shell has no pipes, redirection, `cd` or arbitrary commands, and does
not stream a command's output while it runs. `hwlab-stackdepth` reports
Python object addresses, not positions on the machine stack.