from __future__ import annotations

from pathlib import Path
from typing import List, Optional

TEMPLATE_MARKER = ";   code"
DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "x86_64_linux.asm"


class TemplateError(ValueError):
    pass


def load_template(path: Optional[Path] = None) -> str:
    template_path = Path(path) if path is not None else DEFAULT_TEMPLATE_PATH
    return template_path.read_text(encoding="utf-8")


def _marker_index(lines: List[str]) -> int:
    matches = [
        index for index, line in enumerate(lines) if line.rstrip("\r\n") == TEMPLATE_MARKER
    ]
    if len(matches) != 1:
        raise TemplateError(
            f"Template must contain the marker line {TEMPLATE_MARKER!r} exactly once "
            f"(found {len(matches)})"
        )
    return matches[0]


def check_template(template: str) -> str:
    _marker_index(template.splitlines(keepends=True))
    return template


def assemble(code: str, template: str) -> str:
    """Replace the template's marker line with the generated code.

    The marker must match a whole line exactly, including its leading
    comment syntax and spacing; the line ending after it is kept.
    """
    lines = template.splitlines(keepends=True)
    index = _marker_index(lines)
    lines[index] = code + lines[index][len(TEMPLATE_MARKER):]
    return "".join(lines)


def write_output(path: Path, assembly: str) -> None:
    Path(path).write_text(assembly, encoding="utf-8")


__all__ = [
    "DEFAULT_TEMPLATE_PATH",
    "TEMPLATE_MARKER",
    "TemplateError",
    "assemble",
    "check_template",
    "load_template",
    "write_output",
]
