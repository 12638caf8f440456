from __future__ import annotations

from decllang import ast


def to_sexpr(program: ast.Program) -> str:
    parts = ["(program"]
    for decl in program.decls:
        parts.append(" " + _decl(decl))
    parts.append(")")
    return "".join(parts)


def _decl(decl: ast.VarDecl) -> str:
    if decl.init is None:
        return f"(decl {decl.type.value} {decl.name})"
    return f"(decl {decl.type.value} {decl.name} {_expr(decl.init)})"


def _expr(expr: ast.Expr) -> str:
    if isinstance(expr, ast.Literal):
        return f"(lit {expr.kind.value} {_atom(expr.value)})"
    if isinstance(expr, ast.Identifier):
        return f"(var {expr.name})"
    raise TypeError(f"unknown expr: {type(expr).__name__}")


def _atom(value: str) -> str:
    # String literal values may hold spaces or parens; quote anything that is not a bare word.
    if value and all(ch.isalnum() or ch in "._" for ch in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def format_tree(program: ast.Program, *, indent: int = 0) -> str:
    lines: list[str] = []
    for decl in program.decls:
        _tree_decl(decl, indent, lines)
    return "\n".join(lines)


def _pad(n: int) -> str:
    return "  " * n


def _tree_decl(decl: ast.VarDecl, indent: int, lines: list[str]) -> None:
    lines.append(f"{_pad(indent)}VarDecl({decl.type.value} {decl.name})")
    if decl.init is not None:
        lines.append(f"{_pad(indent + 1)}Initializer:")
        lines.append(_pad(indent + 2) + _tree_expr(decl.init))


def _tree_expr(expr: ast.Expr) -> str:
    if isinstance(expr, ast.Literal):
        return f"Literal({expr.kind.value}: {expr.value})"
    if isinstance(expr, ast.Identifier):
        return f"Identifier({expr.name})"
    raise TypeError(f"unknown expr: {type(expr).__name__}")
