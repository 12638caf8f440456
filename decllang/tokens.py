from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    # keywords
    FUNCTION = "T_FUNCTION"
    INT = "T_INT"
    FLOAT = "T_FLOAT"
    STRING = "T_STRING"
    BOOL = "T_BOOL"
    RETURN = "T_RETURN"
    IF = "T_IF"
    ELSE = "T_ELSE"
    FOR = "T_FOR"
    WHILE = "T_WHILE"
    BREAK = "T_BREAK"
    CONTINUE = "T_CONTINUE"

    IDENTIFIER = "T_IDENTIFIER"
    INTLIT = "T_INTLIT"
    FLOATLIT = "T_FLOATLIT"
    STRINGLIT = "T_STRINGLIT"
    BOOLLIT = "T_BOOLLIT"

    ASSIGNOP = "T_ASSIGNOP"
    EQUALSOP = "T_EQUALSOP"
    PLUS = "T_PLUS"
    MINUS = "T_MINUS"
    MULT = "T_MULT"
    DIV = "T_DIV"
    MOD = "T_MOD"
    LT = "T_LT"
    GT = "T_GT"
    LTE = "T_LTE"
    GTE = "T_GTE"
    NEQ = "T_NEQ"
    AND = "T_AND"
    OR = "T_OR"
    NOT = "T_NOT"
    BITAND = "T_BITAND"
    BITOR = "T_BITOR"
    BITXOR = "T_BITXOR"
    BITNOT = "T_BITNOT"
    LEFTSHIFT = "T_LEFTSHIFT"
    RIGHTSHIFT = "T_RIGHTSHIFT"
    PARENL = "T_PARENL"
    PARENR = "T_PARENR"
    BRACEL = "T_BRACEL"
    BRACER = "T_BRACER"
    BRACKL = "T_BRACKL"
    BRACKR = "T_BRACKR"
    COMMA = "T_COMMA"
    SEMICOLON = "T_SEMICOLON"
    COLON = "T_COLON"
    QUESTION = "T_QUESTION"
    DOT = "T_DOT"

    COMMENT = "T_COMMENT"
    UNKNOWN = "T_UNKNOWN"
    EOF = "T_EOF"
    INVALID_IDENTIFIER = "T_INVALID_IDENTIFIER"
    INCREMENT = "T_INCREMENT"
    PLUS_ASSIGN = "T_PLUS_ASSIGN"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    line: int
    col: int


KEYWORDS: dict[str, TokenKind] = {
    "fn": TokenKind.FUNCTION,
    "int": TokenKind.INT,
    "float": TokenKind.FLOAT,
    "string": TokenKind.STRING,
    "bool": TokenKind.BOOL,
    "return": TokenKind.RETURN,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "for": TokenKind.FOR,
    "while": TokenKind.WHILE,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "true": TokenKind.BOOLLIT,
    "false": TokenKind.BOOLLIT,
}

# Checked in order before falling back to SYMBOLS.
MULTI_CHAR_OPERATORS: tuple[tuple[str, TokenKind], ...] = (
    ("==", TokenKind.EQUALSOP),
    ("++", TokenKind.INCREMENT),
    ("+=", TokenKind.PLUS_ASSIGN),
)

SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "%": TokenKind.MOD,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    "!": TokenKind.NOT,
    "&": TokenKind.BITAND,
    "|": TokenKind.BITOR,
    "^": TokenKind.BITXOR,
    "~": TokenKind.BITNOT,
    "(": TokenKind.PARENL,
    ")": TokenKind.PARENR,
    "{": TokenKind.BRACEL,
    "}": TokenKind.BRACER,
    "[": TokenKind.BRACKL,
    "]": TokenKind.BRACKR,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
    ".": TokenKind.DOT,
    "=": TokenKind.ASSIGNOP,
}


def display_text(text: str) -> str:
    """Escape bytes that were undecodable in the source (kept as lone surrogates)."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
