from __future__ import annotations

import logging

from decllang.tokens import KEYWORDS, MULTI_CHAR_OPERATORS, SYMBOLS, Token, TokenKind

logger = logging.getLogger("decllang.lexer")

_WHITESPACE = frozenset(" \t\n\r\v\f")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"'}


def _is_ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ident_start(ch: str) -> bool:
    return _is_ascii_alpha(ch) or ch == "_" or ord(ch) >= 128


def _is_ident_char(ch: str) -> bool:
    return _is_ident_start(ch) or _is_digit(ch)


def _is_word_char(ch: str) -> bool:
    return _is_ascii_alpha(ch) or _is_digit(ch) or ch == "_"


class _Scanner:
    def __init__(self, src: str) -> None:
        self.src = src
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []

    def _peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.src[i] if i < len(self.src) else ""

    def _advance(self) -> str:
        ch = self.src[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _emit(self, kind: TokenKind, text: str, line: int, col: int) -> None:
        self.tokens.append(Token(kind, text, line, col))

    def run(self) -> list[Token]:
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch in _WHITESPACE:
                self._advance()
            elif _is_ident_start(ch):
                self._word()
            elif _is_digit(ch):
                if not self._number():
                    return self.tokens
            elif ch == '"':
                self._string()
            elif ch == "/" and self._peek(1) == "/":
                self._line_comment()
            elif ch == "/" and self._peek(1) == "*":
                self._block_comment()
            else:
                self._symbol()
        self._emit(TokenKind.EOF, "", self.line, self.col)
        return self.tokens

    def _word(self) -> None:
        line, col = self.line, self.col
        start = self.pos
        while self.pos < len(self.src) and _is_ident_char(self.src[self.pos]):
            self._advance()
        text = self.src[start : self.pos]
        self._emit(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, line, col)

    def _number(self) -> bool:
        """Scan a numeric literal; False means scanning must stop here."""
        line, col = self.line, self.col
        start = self.pos
        dot_seen = False
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch == ".":
                if dot_seen:
                    text = self.src[start : self.pos]
                    logger.warning(
                        "multiple decimal points in number %r at line %d col %d", text, line, col
                    )
                    self._emit(TokenKind.INVALID_IDENTIFIER, text, line, col)
                    return False
                dot_seen = True
            elif not _is_digit(ch):
                break
            self._advance()

        nxt = self._peek()
        if nxt and (_is_ascii_alpha(nxt) or nxt == "_"):
            while self.pos < len(self.src) and _is_word_char(self.src[self.pos]):
                self._advance()
            self._emit(TokenKind.INVALID_IDENTIFIER, self.src[start : self.pos], line, col)
            return True

        kind = TokenKind.FLOATLIT if dot_seen else TokenKind.INTLIT
        self._emit(kind, self.src[start : self.pos], line, col)
        return True

    def _string(self) -> None:
        line, col = self.line, self.col
        self._advance()
        out: list[str] = []
        while self.pos < len(self.src) and self.src[self.pos] != '"':
            ch = self._advance()
            if ch == "\\" and self.pos < len(self.src):
                esc = self._advance()
                out.append(_ESCAPES.get(esc, esc))
            else:
                out.append(ch)
        if self.pos < len(self.src):
            self._advance()
        self._emit(TokenKind.STRINGLIT, "".join(out), line, col)

    def _line_comment(self) -> None:
        line, col = self.line, self.col
        self._advance()
        self._advance()
        start = self.pos
        while self.pos < len(self.src) and self.src[self.pos] != "\n":
            self._advance()
        self._emit(TokenKind.COMMENT, self.src[start : self.pos], line, col)

    def _block_comment(self) -> None:
        line, col = self.line, self.col
        self._advance()
        self._advance()
        start = self.pos
        end = self.src.find("*/", start)
        stop = len(self.src) if end == -1 else end
        while self.pos < stop:
            self._advance()
        text = self.src[start:stop]
        if end != -1:
            self._advance()
            self._advance()
        self._emit(TokenKind.COMMENT, text, line, col)

    def _symbol(self) -> None:
        line, col = self.line, self.col
        for op, kind in MULTI_CHAR_OPERATORS:
            if self.src.startswith(op, self.pos):
                for _ in op:
                    self._advance()
                self._emit(kind, op, line, col)
                return
        ch = self._advance()
        self._emit(SYMBOLS.get(ch, TokenKind.UNKNOWN), ch, line, col)


def tokenize(src: str) -> list[Token]:
    """Split source text into tokens.

    Never raises: lexical problems come back as ``T_INVALID_IDENTIFIER`` or
    ``T_UNKNOWN`` tokens. The result ends with a single ``T_EOF`` token, except
    when a number carries a second decimal point; scanning stops at that
    invalid token and no ``T_EOF`` follows.
    """
    return _Scanner(src).run()
