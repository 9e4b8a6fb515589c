from __future__ import annotations

from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, validator

from bfasm.compiler import BrainfuckCompiler
from bfasm.lexer import filter_commands
from bfasm.parser import DEFAULT_MAX_DEPTH, Loop, ParseError, Parser, Token
from bfasm.template import check_template, load_template


def _tree_to_json(tokens: List[Token]) -> List[Any]:
    return [
        _tree_to_json(token.body) if isinstance(token, Loop) else token.symbol
        for token in tokens
    ]


def _parse_error(exc: ParseError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"kind": exc.kind, "message": str(exc)},
    )


class CompileRequest(BaseModel):
    source: str
    template: Optional[str] = None
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=DEFAULT_MAX_DEPTH)

    @validator("template")
    def validate_template(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            check_template(value)
        return value


class CompileResponse(BaseModel):
    code: str
    assembly: str
    loop_count: int
    label_count: int


class ParseRequest(BaseModel):
    source: str
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=DEFAULT_MAX_DEPTH)


class ParseResponse(BaseModel):
    filtered: str
    tree: List[Any]


def create_app(*, template: Optional[str] = None) -> FastAPI:
    default_template = check_template(template if template is not None else load_template())
    app = FastAPI(title="bfasm compile API", version="0.1.0")

    @app.post("/api/compile", response_model=CompileResponse)
    def compile_source(payload: CompileRequest) -> CompileResponse:
        compiler = BrainfuckCompiler(
            template=payload.template if payload.template is not None else default_template,
            max_depth=payload.max_depth,
        )
        try:
            result = compiler.compile(payload.source)
        except ParseError as exc:
            raise _parse_error(exc) from exc
        return CompileResponse(
            code=result.code,
            assembly=result.assembly,
            loop_count=result.loop_count,
            label_count=result.label_count,
        )

    @app.post("/api/parse", response_model=ParseResponse)
    def parse_source(payload: ParseRequest) -> ParseResponse:
        filtered = filter_commands(payload.source)
        try:
            program = Parser(max_depth=payload.max_depth).parse(filtered)
        except ParseError as exc:
            raise _parse_error(exc) from exc
        return ParseResponse(filtered=filtered, tree=_tree_to_json(program))

    @app.get("/api/template", response_class=PlainTextResponse)
    def get_template() -> str:
        return default_template

    return app


__all__ = ["create_app"]
