from __future__ import annotations

from decllang.ast import Program
from decllang.lexer import tokenize
from decllang.parser import ParseResult, parse, try_parse
from decllang.tokens import Token, TokenKind


def tokenize_source(src: str, *, strip_comments: bool = False) -> list[Token]:
    tokens = tokenize(src)
    if strip_comments:
        return [t for t in tokens if t.kind != TokenKind.COMMENT]
    return tokens


def parse_source(src: str, *, strip_comments: bool = True) -> Program:
    return parse(tokenize_source(src, strip_comments=strip_comments))


def check_source(src: str, *, strip_comments: bool = True) -> ParseResult:
    return try_parse(tokenize_source(src, strip_comments=strip_comments))
