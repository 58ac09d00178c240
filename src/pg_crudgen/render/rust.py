"""Render abstract declarations as Rust source text."""

from __future__ import annotations

from typing import Iterable

from pg_crudgen.codegen.decl import (
    Block,
    Declaration,
    FunctionDecl,
    ImplBlock,
    Statement,
    StructDecl,
)

INDENT = "    "
MODULE_IMPORTS = ("use sqlx::{postgres::PgQueryResult, PgPool, Result};",)


def _prefixed(vis: str | None, text: str) -> str:
    return f"{vis} {text}" if vis else text


def render_struct(struct: StructDecl) -> list[str]:
    lines: list[str] = []
    if struct.doc:
        lines.append(f"/// {struct.doc}")
    if struct.derives:
        lines.append(f"#[derive({', '.join(struct.derives)})]")
    lines.append(_prefixed(struct.vis, f"struct {struct.name} {{"))
    for item in struct.fields:
        lines.append(INDENT + _prefixed(item.vis, f"{item.name}: {item.type},"))
    lines.append("}")
    return lines


def _render_statements(body: Iterable[Statement], depth: int) -> list[str]:
    lines: list[str] = []
    for statement in body:
        if isinstance(statement, Block):
            lines.append(INDENT * depth + f"{statement.header} {{")
            lines.extend(_render_statements(statement.body, depth + 1))
            lines.append(INDENT * depth + "}")
        else:
            lines.append(INDENT * depth + statement)
    return lines


def render_function(function: FunctionDecl, depth: int = 0) -> list[str]:
    params = ["&self"] if function.self_ref else []
    params.extend(f"{arg.name}: {arg.type}" for arg in function.args)

    signature = f"fn {function.name}({', '.join(params)})"
    if function.is_async:
        signature = f"async {signature}"
    signature = _prefixed(function.vis, signature)
    if function.ret:
        signature += f" -> {function.ret}"

    lines = [INDENT * depth + signature + " {"]
    lines.extend(_render_statements(function.body, depth + 1))
    lines.append(INDENT * depth + "}")
    return lines


def render_impl(impl: ImplBlock) -> list[str]:
    header = f"impl {impl.trait} for {impl.target}" if impl.trait else f"impl {impl.target}"
    lines = [header + " {"]
    for index, function in enumerate(impl.functions):
        if index:
            lines.append("")
        lines.extend(render_function(function, depth=1))
    lines.append("}")
    return lines


def render_declaration(declaration: Declaration) -> list[str]:
    if isinstance(declaration, StructDecl):
        return render_struct(declaration)
    if isinstance(declaration, ImplBlock):
        return render_impl(declaration)
    raise TypeError(f"Unsupported declaration: {type(declaration).__name__}")


def render_module(declarations: Iterable[Declaration], *, imports: bool = True) -> str:
    """Render declarations in the given order, separated by blank lines."""
    chunks: list[list[str]] = []
    if imports:
        chunks.append(list(MODULE_IMPORTS))
    chunks.extend(render_declaration(item) for item in declarations)
    return "\n\n".join("\n".join(chunk) for chunk in chunks) + "\n"
