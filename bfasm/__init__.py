from .codegen import CodeGenerator, LabelCounter, generate
from .compiler import BrainfuckCompiler, CompilationResult
from .lexer import COMMANDS, filter_commands
from .parser import (
    InvariantViolation,
    Loop,
    NestingTooDeep,
    ParseError,
    Parser,
    UnmatchedCloseBracket,
    UnmatchedOpenBracket,
    parse,
    render,
)
from .template import TEMPLATE_MARKER, TemplateError, assemble

__all__ = [
    "BrainfuckCompiler",
    "COMMANDS",
    "CodeGenerator",
    "CompilationResult",
    "InvariantViolation",
    "LabelCounter",
    "Loop",
    "NestingTooDeep",
    "ParseError",
    "Parser",
    "TEMPLATE_MARKER",
    "TemplateError",
    "UnmatchedCloseBracket",
    "UnmatchedOpenBracket",
    "assemble",
    "filter_commands",
    "generate",
    "parse",
    "render",
]
