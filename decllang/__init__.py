from __future__ import annotations

from decllang.api import check_source, parse_source, tokenize_source
from decllang.ast import Expr, Identifier, Literal, Program, ValueType, VarDecl
from decllang.errors import ParseError, ParseErrorKind, describe
from decllang.lexer import tokenize
from decllang.parser import ParseResult, Parser, parse, try_parse
from decllang.tokens import Token, TokenKind

__all__ = [
    "__version__",
    # Tokens
    "Token",
    "TokenKind",
    "tokenize",
    # AST
    "Expr",
    "Identifier",
    "Literal",
    "Program",
    "ValueType",
    "VarDecl",
    # Parsing
    "Parser",
    "ParseResult",
    "parse",
    "try_parse",
    # Errors
    "ParseError",
    "ParseErrorKind",
    "describe",
    # Source-level helpers
    "check_source",
    "parse_source",
    "tokenize_source",
]

__version__ = "0.1.0"
