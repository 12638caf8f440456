from __future__ import annotations

import pytest

from decllang.ast import Identifier, Literal, ValueType, VarDecl
from decllang.errors import ParseError, ParseErrorKind
from decllang.lexer import tokenize
from decllang.parser import parse, try_parse
from decllang.sexpr import to_sexpr
from decllang.tokens import Token, TokenKind


def test_parse_single_declaration():
    program = parse(tokenize("int x1 = 42;"))
    assert program.decls == [VarDecl(ValueType.INT, "x1", Literal("42", ValueType.INT))]


@pytest.mark.parametrize(
    "src,decl_type,value",
    [
        ("int n = 7;", ValueType.INT, "7"),
        ("float pi = 3.14;", ValueType.FLOAT, "3.14"),
        ('string name = "Rahim";', ValueType.STRING, "Rahim"),
        ("bool flag = false;", ValueType.BOOL, "false"),
    ],
)
def test_parse_matching_literal(src: str, decl_type: ValueType, value: str):
    program = parse(tokenize(src))
    assert len(program) == 1
    decl = program[0]
    assert decl.type == decl_type
    assert decl.init == Literal(value, decl_type)


@pytest.mark.parametrize("kw", ["int", "float", "string", "bool"])
def test_parse_without_initializer(kw: str):
    program = parse(tokenize(f"{kw} v;"))
    assert program.decls == [VarDecl(ValueType(kw), "v", None)]


def test_identifier_initializer_is_not_type_checked():
    program = parse(tokenize("int a = 1; string s = a;"))
    assert program[1] == VarDecl(ValueType.STRING, "s", Identifier("a"))


def test_parse_multiple_in_source_order():
    program = parse(tokenize("int a = 1;\nfloat b;\nbool c = true;"))
    assert [d.name for d in program] == ["a", "b", "c"]
    assert to_sexpr(program) == "(program (decl int a (lit int 1)) (decl float b) (decl bool c (lit bool true)))"


def test_empty_program():
    assert parse(tokenize("")).decls == []


def test_missing_semicolon_fails_at_eof():
    with pytest.raises(ParseError) as exc:
        parse(tokenize("int x = 42"))
    assert exc.value.kind == ParseErrorKind.FAILED_TO_FIND_TOKEN
    assert exc.value.token.kind == TokenKind.EOF


def test_missing_type_fails_at_identifier():
    with pytest.raises(ParseError) as exc:
        parse(tokenize("x = 42;"))
    assert exc.value.kind == ParseErrorKind.EXPECTED_TYPE_TOKEN
    assert exc.value.token == Token(TokenKind.IDENTIFIER, "x", 1, 1)


def test_type_mismatch_is_named_after_declared_type():
    with pytest.raises(ParseError) as exc:
        parse(tokenize('int x = "Rahim";'))
    assert exc.value.kind == ParseErrorKind.EXPECTED_INT_LIT
    assert exc.value.token == Token(TokenKind.STRINGLIT, "Rahim", 1, 9)


@pytest.mark.parametrize(
    "src,kind,offending",
    [
        ("float pi = true;", ParseErrorKind.EXPECTED_FLOAT_LIT, TokenKind.BOOLLIT),
        ('float pi = "abc";', ParseErrorKind.EXPECTED_FLOAT_LIT, TokenKind.STRINGLIT),
        ("string name = 42;", ParseErrorKind.EXPECTED_STRING_LIT, TokenKind.INTLIT),
        ("bool flag = 123;", ParseErrorKind.EXPECTED_BOOL_LIT, TokenKind.INTLIT),
        ("int n = 1.5;", ParseErrorKind.EXPECTED_INT_LIT, TokenKind.FLOATLIT),
    ],
)
def test_type_mismatch_matrix(src: str, kind: ParseErrorKind, offending: TokenKind):
    with pytest.raises(ParseError) as exc:
        parse(tokenize(src))
    assert exc.value.kind == kind
    assert exc.value.token.kind == offending


@pytest.mark.parametrize(
    "src,kind,at",
    [
        ("int = 42;", ParseErrorKind.EXPECTED_IDENTIFIER, TokenKind.ASSIGNOP),
        ("int 123 = 5;", ParseErrorKind.EXPECTED_IDENTIFIER, TokenKind.INTLIT),
        ("int x = ;", ParseErrorKind.EXPECTED_EXPR, TokenKind.SEMICOLON),
        ("int x 42;", ParseErrorKind.FAILED_TO_FIND_TOKEN, TokenKind.INTLIT),
        ("int y = 5; int z = ", ParseErrorKind.EXPECTED_EXPR, TokenKind.EOF),
        ("int", ParseErrorKind.EXPECTED_IDENTIFIER, TokenKind.EOF),
        ("fn f;", ParseErrorKind.EXPECTED_TYPE_TOKEN, TokenKind.FUNCTION),
        ("int x = 123abc;", ParseErrorKind.EXPECTED_EXPR, TokenKind.INVALID_IDENTIFIER),
    ],
)
def test_error_kinds(src: str, kind: ParseErrorKind, at: TokenKind):
    with pytest.raises(ParseError) as exc:
        parse(tokenize(src))
    assert exc.value.kind == kind
    assert exc.value.token.kind == at


def test_comment_token_is_not_a_statement():
    with pytest.raises(ParseError) as exc:
        parse(tokenize("// note\nint x;"))
    assert exc.value.kind == ParseErrorKind.EXPECTED_TYPE_TOKEN
    assert exc.value.token.kind == TokenKind.COMMENT


def test_truncated_tokens_report_invalid_number():
    tokens = tokenize("int x = 1.2.3;")
    assert tokens[-1].kind == TokenKind.INVALID_IDENTIFIER
    with pytest.raises(ParseError) as exc:
        parse(tokens)
    assert exc.value.kind == ParseErrorKind.EXPECTED_EXPR
    assert exc.value.token.text == "1.2"


def test_truncated_tokens_synthesize_eof():
    tokens = tokenize("int x = 1; float y = 2.0.1")
    with pytest.raises(ParseError) as exc:
        parse(tokens[:-1])
    assert exc.value.kind == ParseErrorKind.EXPECTED_EXPR
    assert exc.value.token.kind == TokenKind.EOF
    assert exc.value.token.line == 1


def test_parse_without_trailing_eof_succeeds():
    tokens = tokenize("bool ok = true;")[:-1]
    assert parse(tokens).decls == [VarDecl(ValueType.BOOL, "ok", Literal("true", ValueType.BOOL))]


def test_try_parse_success():
    result = try_parse(tokenize("int a; int b = a;"))
    assert result.ok
    assert result.error is None
    assert result.program is not None
    assert len(result.program) == 2


def test_try_parse_keeps_declarations_before_failure():
    result = try_parse(tokenize("int a = 1; float b = 2.5; bool c = 3;"))
    assert not result.ok
    assert result.program is None
    assert result.error is not None
    assert result.error.kind == ParseErrorKind.EXPECTED_BOOL_LIT
    assert [d.name for d in result.completed] == ["a", "b"]


def test_synthetic_eof_sits_at_last_token():
    tokens = tokenize('string s = "a\nbcdef"')[:-1]
    with pytest.raises(ParseError) as exc:
        parse(tokens)
    assert exc.value.kind == ParseErrorKind.FAILED_TO_FIND_TOKEN
    assert exc.value.token == Token(TokenKind.EOF, "", 1, 12)


def test_declared_type_comes_from_token_kind():
    tokens = [
        Token(TokenKind.INT, "Int", 1, 1),
        Token(TokenKind.IDENTIFIER, "x", 1, 5),
        Token(TokenKind.SEMICOLON, ";", 1, 6),
        Token(TokenKind.EOF, "", 1, 7),
    ]
    assert parse(tokens).decls == [VarDecl(ValueType.INT, "x", None)]
