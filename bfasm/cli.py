from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .compiler import BrainfuckCompiler
from .parser import ParseError
from .template import TemplateError, write_output

DEFAULT_OUTPUT = "./output.asm"


def _read_source(path: str) -> str:
    source_path = Path(path)
    if not source_path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    return source_path.read_text(encoding="utf-8", errors="replace")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compile a Brainfuck program to x86-64 NASM assembly"
    )
    parser.add_argument("source", help="Path to Brainfuck source file")
    parser.add_argument(
        "destination",
        nargs="?",
        default=DEFAULT_OUTPUT,
        help=f"Destination file for emitted assembly (default: {DEFAULT_OUTPUT})",
    )
    args = parser.parse_args(argv)

    try:
        source_text = _read_source(args.source)
    except OSError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        compiler = BrainfuckCompiler()
    except (OSError, TemplateError) as exc:
        print(f"error loading template: {exc}", file=sys.stderr)
        return 1

    try:
        result = compiler.compile(source_text)
    except ParseError as exc:
        print(f"Compilation error ({exc.kind}): {exc}", file=sys.stderr)
        return 1

    try:
        write_output(Path(args.destination), result.assembly)
    except OSError as exc:
        print(f"error writing file: {exc}", file=sys.stderr)
        return 1

    print(f"wrote {args.destination}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
