from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NoReturn

from decllang.ast import Expr, Identifier, Literal, Program, ValueType, VarDecl
from decllang.errors import ParseError, ParseErrorKind
from decllang.tokens import Token, TokenKind

logger = logging.getLogger("decllang.parser")

_LITERAL_TYPES: dict[TokenKind, ValueType] = {
    TokenKind.INTLIT: ValueType.INT,
    TokenKind.FLOATLIT: ValueType.FLOAT,
    TokenKind.STRINGLIT: ValueType.STRING,
    TokenKind.BOOLLIT: ValueType.BOOL,
}

_DECL_TYPES: dict[TokenKind, ValueType] = {
    TokenKind.INT: ValueType.INT,
    TokenKind.FLOAT: ValueType.FLOAT,
    TokenKind.STRING: ValueType.STRING,
    TokenKind.BOOL: ValueType.BOOL,
}

# Mismatch errors are named after the declared type, not the literal found.
_MISMATCH: dict[ValueType, tuple[ParseErrorKind, str]] = {
    ValueType.INT: (ParseErrorKind.EXPECTED_INT_LIT, "expected integer literal"),
    ValueType.FLOAT: (ParseErrorKind.EXPECTED_FLOAT_LIT, "expected float literal"),
    ValueType.STRING: (ParseErrorKind.EXPECTED_STRING_LIT, "expected string literal"),
    ValueType.BOOL: (ParseErrorKind.EXPECTED_BOOL_LIT, "expected boolean literal"),
}


@dataclass
class ParseResult:
    program: Program | None
    error: ParseError | None = None
    completed: list[VarDecl] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


class Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.index = 0
        self.decls: list[VarDecl] = []

    def current(self) -> Token:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        # Truncated token streams carry no EOF; synthesize one at the last token,
        # whose source extent is not recoverable from its decoded text.
        if not self.tokens:
            return Token(TokenKind.EOF, "", 1, 1)
        last = self.tokens[-1]
        return Token(TokenKind.EOF, "", last.line, last.col)

    def at_end(self) -> bool:
        return self.current().kind == TokenKind.EOF

    def advance(self) -> Token:
        tok = self.current()
        if not self.at_end():
            self.index += 1
        return tok

    def check(self, kind: TokenKind) -> bool:
        return self.current().kind == kind

    def match(self, kind: TokenKind) -> bool:
        if self.check(kind):
            self.advance()
            return True
        return False

    def expect(self, kind: TokenKind, err: ParseErrorKind, message: str) -> Token:
        if not self.check(kind):
            self.fail(err, message)
        return self.advance()

    def fail(self, kind: ParseErrorKind, message: str) -> NoReturn:
        tok = self.current()
        logger.debug("parse failed: %s at line %d col %d", kind.value, tok.line, tok.col)
        raise ParseError(kind, tok, message)

    def parse_program(self) -> Program:
        while not self.at_end():
            self.decls.append(self.parse_statement())
        return Program(list(self.decls))

    def parse_statement(self) -> VarDecl:
        if self.current().kind not in _DECL_TYPES:
            self.fail(ParseErrorKind.EXPECTED_TYPE_TOKEN, "expected a type at start of statement")
        return self.parse_var_decl()

    def parse_var_decl(self) -> VarDecl:
        decl_type = _DECL_TYPES[self.advance().kind]
        name = self.expect(
            TokenKind.IDENTIFIER,
            ParseErrorKind.EXPECTED_IDENTIFIER,
            "expected variable name after type",
        ).text

        init: Expr | None = None
        if self.match(TokenKind.ASSIGNOP):
            init = self.parse_expression(decl_type)

        self.expect(
            TokenKind.SEMICOLON,
            ParseErrorKind.FAILED_TO_FIND_TOKEN,
            "expected ';' after variable declaration",
        )
        return VarDecl(decl_type, name, init)

    def parse_expression(self, expected: ValueType) -> Expr:
        tok = self.current()
        literal_type = _LITERAL_TYPES.get(tok.kind)
        if literal_type is not None:
            if literal_type != expected:
                err, message = _MISMATCH[expected]
                self.fail(err, f"{message} for '{expected.value}' declaration")
            self.advance()
            return Literal(tok.text, literal_type)
        if tok.kind == TokenKind.IDENTIFIER:
            self.advance()
            return Identifier(tok.text)
        self.fail(ParseErrorKind.EXPECTED_EXPR, "expected an expression after '='")


def parse(tokens: Sequence[Token]) -> Program:
    """Parse a token sequence into a program of declarations, raising ParseError."""
    return Parser(tokens).parse_program()


def try_parse(tokens: Sequence[Token]) -> ParseResult:
    parser = Parser(tokens)
    try:
        program = parser.parse_program()
    except ParseError as e:
        return ParseResult(program=None, error=e, completed=list(parser.decls))
    return ParseResult(program=program, completed=list(program.decls))
