"""Command-line entry point: translate a ``.vm`` file into a ``.asm`` file."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from hackvmc.codegen import TranslationError, translate_lines

SOURCE_EXTENSION = "vm"
DEST_EXTENSION = "asm"


def file_extension(file_name: str) -> str:
    """Return everything after the first dot of ``file_name``, or ``""``."""
    _, dot, extension = file_name.partition(".")
    if not dot:
        print("The file has no valid extension", file=sys.stderr)
        return ""
    return extension


def file_prefix(file_name: str) -> str:
    """Return ``file_name`` up to and including its first dot."""
    head, dot, _ = file_name.partition(".")
    if not dot:
        raise ValueError(f"file name has no extension: {file_name!r}")
    return head + dot


def output_path(source: str | Path) -> Path:
    """Return the assembly file path that sits beside ``source``."""
    source = Path(source)
    return source.with_name(file_prefix(source.name) + DEST_EXTENSION)


def _parse_args(argv: list[str] | None) -> argparse.Namespace | None:
    parser = argparse.ArgumentParser(
        prog="hackvmc", description="Translate VM code into Hack assembly."
    )
    parser.add_argument("source", nargs="?", help="the .vm file to translate")
    parser.add_argument("destination", nargs="?", help="an existing .asm file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the translator and return the exit status."""
    start = time.process_time()
    args = _parse_args(argv)

    if args.source is None:
        print("Please provide a vm file to be compiled", file=sys.stderr)
        return 1

    source = Path(args.source)
    if not source.exists():
        print(f"{source}: No such file or directory", file=sys.stderr)
        return 1
    if file_extension(source.name) != SOURCE_EXTENSION:
        print("The Source file is not valid. Choose another File", file=sys.stderr)
        return 1

    if args.destination is None:
        destination = output_path(source)
    else:
        destination = Path(args.destination)
        if not destination.exists():
            print(f"{destination}: No such file or directory", file=sys.stderr)
            return 1
        if file_extension(destination.name) != DEST_EXTENSION:
            print("The destination file is not a valid file", file=sys.stderr)
            return 1

    try:
        with source.open(encoding="utf-8") as lines:
            assembly = translate_lines(lines)
        destination.write_text(assembly, encoding="utf-8")
    except OSError as exc:
        print(f"An error has occured when opening the files: {exc}", file=sys.stderr)
        return 1
    except TranslationError as exc:
        print(exc, file=sys.stderr)
        return 1

    elapsed = time.process_time() - start
    print(f"Execution time: {elapsed:f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())