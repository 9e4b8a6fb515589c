from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .parser import (
    DecPtr,
    DecVal,
    GetChar,
    IncPtr,
    IncVal,
    Loop,
    PutChar,
    Token,
)

INDENT = "    "

_LEAF_INSTRUCTIONS = {
    IncPtr: "inc r8",
    DecPtr: "dec r8",
    IncVal: "inc byte [buffer + r8]",
    DecVal: "dec byte [buffer + r8]",
    GetChar: "get",
    PutChar: "put",
}


@dataclass
class LabelCounter:
    """Label source shared by every loop of one compilation."""

    value: int = 0

    def advance(self, step: int = 2) -> int:
        self.value += step
        return self.value


def label_name(number: int) -> str:
    return f".L{number}"


class CodeGenerator:
    def __init__(self, counter: Optional[LabelCounter] = None) -> None:
        self.counter = counter if counter is not None else LabelCounter()

    def generate(self, tokens: List[Token]) -> List[str]:
        lines: List[str] = []
        self._emit_block(tokens, lines)
        return lines

    def generate_text(self, tokens: List[Token]) -> str:
        return "".join(line + "\n" for line in self.generate(tokens))

    def _emit_block(self, tokens: List[Token], lines: List[str]) -> None:
        for token in tokens:
            if isinstance(token, Loop):
                self._emit_loop(token, lines)
            else:
                lines.append(INDENT + _LEAF_INSTRUCTIONS[type(token)])

    def _emit_loop(self, loop: Loop, lines: List[str]) -> None:
        # Test at the bottom: jump straight to the check, then fall back into
        # the body while the current cell is nonzero.
        check_label = self.counter.advance()
        body_label = check_label + 1
        lines.append(f"{INDENT}jmp {label_name(check_label)}")
        lines.append(f"{label_name(body_label)}:")
        self._emit_block(loop.body, lines)
        lines.append(f"{label_name(check_label)}:")
        lines.append(f"{INDENT}loop_check {label_name(body_label)}")


def generate(tokens: List[Token]) -> str:
    """Assembly text for a program, numbering labels from a fresh counter."""
    return CodeGenerator().generate_text(tokens)


__all__ = ["CodeGenerator", "LabelCounter", "generate", "label_name"]
