# hackvmc

`hackvmc` translates the memory-access commands of the Hack stack machine
(`.vm` files) into Hack assembly (`.asm` files).

## Installation

```
pip install .
```

## Command line

```
hackvmc Program.vm
```

This translates `Program.vm` and writes the assembly to `Program.asm` next to
the source file. An existing file of that name is overwritten. On success the
command prints the processor time it took.

A destination can be given as a second argument instead. It must already exist
and its extension must be `asm`:

```
hackvmc Program.vm out.asm
```

The same command can also be run as `python -m hackvmc.cli`.

The command prints a message on standard error and exits with status 1 when:

- no source file is given, or the source file does not exist;
- the source file name's extension is not `vm`;
- a destination is given that does not exist, or whose extension is not `asm`;
- a file cannot be read or written;
- a command cannot be translated (see below).

The extension of a file name is everything after its *first* dot, so
`Program.vm` is accepted but `my.program.vm` is not (its extension is
`program.vm`). Likewise the default output name keeps everything up to the
first dot and appends `asm`.

## What is translated

Each line is split on whitespace. A line whose first word is `push` or `pop`
is translated using its second word as the segment and its third as the index;
any further words are ignored. The segments are:

| segment    | RAM address used as base |
|------------|--------------------------|
| `constant` | (none: the index itself) |
| `local`    | 1                        |
| `argument` | 2                        |
| `this`     | 3                        |
| `that`     | 4                        |
| `temp`     | 5                        |
| `pointer`  | 16                       |
| `static`   | 17                       |

The stack pointer is kept at RAM address 0. For every segment except
`constant`, the target address is the value stored at the segment's RAM
address plus the index. `pop` uses RAM address 5 as scratch space while
computing the target address.

Lines with any other first word, blank lines, and `push`/`pop` lines naming an
unknown segment produce no output.

`hackvmc.codegen.TranslationError` is raised (and reported by the command with
the line number) when a `push` or `pop` line lacks a segment or an index, or
when a line tries to `pop` into `constant`.

## Library use

```python
from hackvmc.codegen import translate_lines, translate_command, split_command, push, pop
from hackvmc.segments import Segment, segment_from_name

asm = translate_lines(["push constant 7", "pop local 2"])

words = split_command("push argument 1")   # ["push", "argument", "1"]
asm = translate_command(words)

asm = push(Segment.THIS, 3)
asm = pop(Segment.THAT, "0")

assert segment_from_name("temp") is Segment.TEMP
assert Segment.TEMP.vm_name == "temp"
```

`segment_from_name` raises `ValueError` for a name it does not know; names are
case sensitive.

`hackvmc.cli` also provides `file_extension`, `file_prefix` and `output_path`,
the file-name helpers the command uses.

## What it does not do

`hackvmc` handles only `push` and `pop`. It produces no code for arithmetic and
logical commands, labels, branching, function calls or returns, writes no
bootstrap code, and translates one file at a time rather than a directory.

## Running the tests

```
pip install .[test]
pytest
```