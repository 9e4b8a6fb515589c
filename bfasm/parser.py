from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_MAX_DEPTH = 256


class ParseError(Exception):
    kind = "ParseError"


class UnmatchedOpenBracket(ParseError):
    kind = "UnmatchedOpenBracket"

    def __init__(self) -> None:
        super().__init__("Unmatched '[': reached end of input inside a loop")


class UnmatchedCloseBracket(ParseError):
    kind = "UnmatchedCloseBracket"

    def __init__(self) -> None:
        super().__init__("Unmatched ']': no enclosing loop to close")


class NestingTooDeep(ParseError):
    kind = "NestingTooDeep"

    def __init__(self, limit: int) -> None:
        super().__init__(f"Loop nesting exceeds the maximum depth of {limit}")
        self.limit = limit


class InvariantViolation(RuntimeError):
    """Raised when the parser sees input the command filter should have removed."""


# === AST Nodes ===


class Token:
    symbol = ""


@dataclass
class IncPtr(Token):
    symbol = ">"


@dataclass
class DecPtr(Token):
    symbol = "<"


@dataclass
class IncVal(Token):
    symbol = "+"


@dataclass
class DecVal(Token):
    symbol = "-"


@dataclass
class GetChar(Token):
    symbol = ","


@dataclass
class PutChar(Token):
    symbol = "."


@dataclass
class Loop(Token):
    body: List[Token] = field(default_factory=list)


Program = List[Token]

_LEAVES = {
    ">": IncPtr,
    "<": DecPtr,
    "+": IncVal,
    "-": DecVal,
    ",": GetChar,
    ".": PutChar,
}


# === Parser ===


class Parser:
    def __init__(self, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth

    def parse(self, source: str) -> Program:
        """Build the token tree for an already filtered command string."""
        self.source = source
        self.pos = 0
        return self._parse_block(depth=0)

    def _peek(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def _advance(self) -> Optional[str]:
        ch = self._peek()
        if ch is not None:
            self.pos += 1
        return ch

    def _parse_block(self, depth: int) -> List[Token]:
        tokens: List[Token] = []
        while self.pos < len(self.source):
            ch = self._advance()
            if ch == "]":
                if depth == 0:
                    raise UnmatchedCloseBracket()
                return tokens
            if ch == "[":
                tokens.append(self._parse_loop(depth + 1))
                continue
            leaf = _LEAVES.get(ch)
            if leaf is None:
                raise InvariantViolation(f"unexpected character reached the parser: {ch!r}")
            tokens.append(leaf())
        if depth > 0:
            raise UnmatchedOpenBracket()
        return tokens

    def _parse_loop(self, depth: int) -> Loop:
        if self.max_depth is not None and depth > self.max_depth:
            raise NestingTooDeep(self.max_depth)
        start = self.pos
        body = self._parse_block(depth)
        # the body plus its own closing bracket
        if self.pos - start != consumed_length(body) + 1:
            raise InvariantViolation(
                f"loop at {start - 1} consumed {self.pos - start} characters, "
                f"expected {consumed_length(body) + 1}"
            )
        return Loop(body)


def parse(source: str, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> Program:
    return Parser(max_depth=max_depth).parse(source)


def consumed_length(tokens: List[Token]) -> int:
    """Number of source characters a token sequence was parsed from."""
    total = 0
    for token in tokens:
        if isinstance(token, Loop):
            total += consumed_length(token.body) + 2
        else:
            total += 1
    return total


def render(tokens: List[Token]) -> str:
    parts: List[str] = []
    for token in tokens:
        if isinstance(token, Loop):
            parts.append("[" + render(token.body) + "]")
        else:
            parts.append(token.symbol)
    return "".join(parts)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DecPtr",
    "DecVal",
    "GetChar",
    "IncPtr",
    "IncVal",
    "InvariantViolation",
    "Loop",
    "NestingTooDeep",
    "ParseError",
    "Parser",
    "Program",
    "PutChar",
    "Token",
    "UnmatchedCloseBracket",
    "UnmatchedOpenBracket",
    "consumed_length",
    "parse",
    "render",
]
