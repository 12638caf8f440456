from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from decllang.api import check_source, tokenize_source
from decllang.config import load_settings, parse_log_level
from decllang.errors import ParseError, describe
from decllang.schemas import ParseReport, TokenModel
from decllang.sexpr import format_tree, to_sexpr
from decllang.tokens import Token, display_text

logger = logging.getLogger("decllang.cli")


def _source_arg(value: str) -> str:
    if value != "-" and not Path(value).exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return value


def _log_level_arg(value: str) -> str:
    try:
        return parse_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _read_source(value: str) -> str:
    # Undecodable bytes survive as lone surrogates, which the lexer treats as identifier characters.
    raw = sys.stdin.buffer.read() if value == "-" else Path(value).read_bytes()
    return raw.decode("utf-8", errors="surrogateescape")


def format_token(token: Token) -> str:
    return f'{describe(token)}\t"{display_text(token.text)}"\tLine: {token.line}\tCol: {token.col}'


def format_error(error: ParseError) -> str:
    tok = error.token
    return (
        f"Parse error: {describe(error)} at token ({describe(tok)}, \"{display_text(tok.text)}\") "
        f"line {tok.line} col {tok.col} msg: {error.message}"
    )


def _add_comment_flags(p: argparse.ArgumentParser) -> None:
    group = p.add_mutually_exclusive_group()
    group.add_argument("--strip-comments", dest="strip_comments", action="store_true", default=None)
    group.add_argument("--keep-comments", dest="strip_comments", action="store_false")


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(prog="decllang")
    parser.add_argument("--log-level", type=_log_level_arg, default=None)
    sub = parser.add_subparsers(dest="cmd", required=True)

    tok_p = sub.add_parser("tokens")
    tok_p.add_argument("source", type=_source_arg)
    tok_p.add_argument("--json", action="store_true")
    _add_comment_flags(tok_p)

    parse_p = sub.add_parser("parse")
    parse_p.add_argument("source", type=_source_arg)
    fmt = parse_p.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true")
    fmt.add_argument("--sexpr", action="store_true")
    _add_comment_flags(parse_p)

    args = parser.parse_args(argv)
    level = args.log_level or settings.log_level
    logging.basicConfig(level=level)
    logging.getLogger("decllang").setLevel(level)

    src = _read_source(args.source)

    if args.cmd == "tokens":
        tokens = tokenize_source(src, strip_comments=bool(args.strip_comments))
        if args.json:
            print(json.dumps([TokenModel.from_token(t).model_dump(mode="json") for t in tokens]))
        else:
            for t in tokens:
                print(format_token(t))
        return 0

    if args.cmd == "parse":
        strip = settings.strip_comments if args.strip_comments is None else args.strip_comments
        result = check_source(src, strip_comments=strip)
        if args.json:
            print(ParseReport.from_result(result).model_dump_json())
        elif result.error is None:
            assert result.program is not None
            out = display_text(to_sexpr(result.program) if args.sexpr else format_tree(result.program))
            if out:
                print(out)
        if result.error is not None:
            logger.info("%s: %s", args.source, result.error)
            print(format_error(result.error), file=sys.stderr)
            return 1
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")
