"""Translation of VM stack commands into Hack assembly."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from hackvmc.segments import STACK_POINTER, Segment, segment_from_name

_SCRATCH = Segment.TEMP.value


class TranslationError(Exception):
    """Raised when a VM command cannot be translated."""


def split_command(line: str) -> list[str]:
    """Split a line of VM code into its words."""
    return line.split()


def push(segment: Segment, index: str | int) -> str:
    """Return assembly that pushes ``segment[index]`` onto the stack."""
    if segment is Segment.CONSTANT:
        load = f"@{index}\nD=A\n"
    else:
        load = f"@{index}\nD=A\n@{segment.value}\nA=M+D\nD=M\n"
    return load + f"@{STACK_POINTER}\nAM=M+1\nA=A-1\nM=D\n"


def pop(segment: Segment, index: str | int) -> str:
    """Return assembly that pops the stack top into ``segment[index]``."""
    if segment is Segment.CONSTANT:
        raise TranslationError("Cannot pop a constant from stack")
    return (
        f"@{STACK_POINTER}\nAM=M-1\n"
        f"@{index}\nD=A\n@{segment.value}\nD=M+D\n@{_SCRATCH}\nM=D\n"
        f"@{STACK_POINTER}\nA=M\nD=M\n@{_SCRATCH}\nA=M\nM=D\n"
    )


def translate_command(words: Sequence[str]) -> str:
    """Translate one split VM command into assembly.

    Only ``push`` and ``pop`` produce code; other commands and unknown
    segments yield an empty string.
    """
    if not words:
        return ""
    command = words[0]
    if command not in ("push", "pop"):
        return ""
    if len(words) < 3:
        raise TranslationError(f"{command} needs a segment and an index")
    try:
        segment = segment_from_name(words[1])
    except ValueError:
        return ""
    index = words[2]
    return push(segment, index) if command == "push" else pop(segment, index)


def translate_lines(lines: Iterable[str]) -> str:
    """Translate lines of VM code into one block of assembly."""
    parts = []
    for number, line in enumerate(lines, start=1):
        try:
            parts.append(translate_command(split_command(line)))
        except TranslationError as exc:
            raise TranslationError(f"line {number}: {exc}") from exc
    return "".join(parts)