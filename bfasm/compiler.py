from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .codegen import CodeGenerator, LabelCounter
from .lexer import filter_commands
from .parser import DEFAULT_MAX_DEPTH, Loop, Parser, Token
from .template import assemble, check_template, load_template


@dataclass
class CompilationResult:
    filtered: str
    program: List[Token]
    code: str
    assembly: str
    label_count: int

    @property
    def loop_count(self) -> int:
        return count_loops(self.program)


@dataclass
class BrainfuckCompiler:
    template: Optional[str] = None
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH

    _template_text: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        text = self.template if self.template is not None else load_template()
        self._template_text = check_template(text)

    def compile(self, source: str) -> CompilationResult:
        filtered = filter_commands(source)
        program = Parser(max_depth=self.max_depth).parse(filtered)
        counter = LabelCounter()
        code = CodeGenerator(counter).generate_text(program)
        return CompilationResult(
            filtered=filtered,
            program=program,
            code=code,
            assembly=assemble(code, self._template_text),
            label_count=counter.value,
        )


def count_loops(tokens: List[Token]) -> int:
    total = 0
    for token in tokens:
        if isinstance(token, Loop):
            total += 1 + count_loops(token.body)
    return total


__all__ = ["BrainfuckCompiler", "CompilationResult", "count_loops"]
