from __future__ import annotations

from typing import Literal as TypingLiteral

from pydantic import BaseModel, Field

from decllang import ast
from decllang.errors import ParseError, ParseErrorKind
from decllang.parser import ParseResult
from decllang.tokens import Token, TokenKind, display_text


class TokenModel(BaseModel):
    kind: TokenKind
    text: str
    line: int = Field(ge=1)
    col: int = Field(ge=1)

    @classmethod
    def from_token(cls, token: Token) -> "TokenModel":
        return cls(kind=token.kind, text=display_text(token.text), line=token.line, col=token.col)


class ExprModel(BaseModel):
    node: TypingLiteral["literal", "identifier"]
    value: str
    kind: ast.ValueType | None = None

    @classmethod
    def from_expr(cls, expr: ast.Expr) -> "ExprModel":
        if isinstance(expr, ast.Literal):
            return cls(node="literal", value=display_text(expr.value), kind=expr.kind)
        if isinstance(expr, ast.Identifier):
            return cls(node="identifier", value=display_text(expr.name))
        raise TypeError(f"unknown expr: {type(expr).__name__}")


class DeclarationModel(BaseModel):
    type: ast.ValueType
    name: str
    init: ExprModel | None = None

    @classmethod
    def from_decl(cls, decl: ast.VarDecl) -> "DeclarationModel":
        init = None if decl.init is None else ExprModel.from_expr(decl.init)
        return cls(type=decl.type, name=display_text(decl.name), init=init)


class DiagnosticModel(BaseModel):
    kind: ParseErrorKind
    message: str
    token: TokenModel

    @classmethod
    def from_error(cls, error: ParseError) -> "DiagnosticModel":
        return cls(kind=error.kind, message=error.message, token=TokenModel.from_token(error.token))


class ParseReport(BaseModel):
    ok: bool
    declarations: list[DeclarationModel] = Field(default_factory=list)
    error: DiagnosticModel | None = None

    @classmethod
    def from_result(cls, result: ParseResult) -> "ParseReport":
        decls = result.program.decls if result.program is not None else result.completed
        return cls(
            ok=result.ok,
            declarations=[DeclarationModel.from_decl(d) for d in decls],
            error=None if result.error is None else DiagnosticModel.from_error(result.error),
        )
