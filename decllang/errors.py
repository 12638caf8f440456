from __future__ import annotations

from enum import Enum

from decllang.tokens import Token, TokenKind


class ParseErrorKind(str, Enum):
    UNEXPECTED_EOF = "UnexpectedEOF"
    FAILED_TO_FIND_TOKEN = "FailedToFindToken"
    EXPECTED_TYPE_TOKEN = "ExpectedTypeToken"
    EXPECTED_IDENTIFIER = "ExpectedIdentifier"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    EXPECTED_FLOAT_LIT = "ExpectedFloatLit"
    EXPECTED_INT_LIT = "ExpectedIntLit"
    EXPECTED_STRING_LIT = "ExpectedStringLit"
    EXPECTED_BOOL_LIT = "ExpectedBoolLit"
    EXPECTED_EXPR = "ExpectedExpr"


class ParseError(Exception):
    def __init__(self, kind: ParseErrorKind, token: Token, message: str = "") -> None:
        self.kind = kind
        self.token = token
        self.message = message
        super().__init__(f"line {token.line} col {token.col}: {kind.value}: {message}")

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def col(self) -> int:
        return self.token.col


def describe(item: Token | TokenKind | ParseErrorKind | ParseError) -> str:
    """Stable display name for a token (by kind), a token kind, or a parse error kind."""
    if isinstance(item, (TokenKind, ParseErrorKind)):
        return item.value
    if isinstance(item, (Token, ParseError)):
        return item.kind.value
    raise TypeError(f"cannot describe {type(item).__name__}")
