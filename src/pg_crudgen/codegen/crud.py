"""sqlx functions wrapping the static statements."""

from __future__ import annotations

from pg_crudgen.codegen.decl import Argument, FunctionDecl, Statement
from pg_crudgen.sql.statements import SqlStatement, StatementSet

POOL_ARG = Argument("pool", "&PgPool")
EXECUTE_RESULT = "Result<PgQueryResult>"


def _query_body(
    opener: str, statement: SqlStatement, bind_prefix: str, terminal: str
) -> list[Statement]:
    body: list[Statement] = [opener, f'"{statement.text}",']
    body.extend(f"{bind_prefix}{item.name}," for item in statement.bound_fields)
    body.extend([")", terminal, ".await"])
    return body


def _execute_fn(name: str, statement: SqlStatement) -> FunctionDecl:
    return FunctionDecl(
        name=name,
        args=[POOL_ARG],
        ret=EXECUTE_RESULT,
        body=_query_body("sqlx::query!(", statement, "self.", ".execute(pool)"),
        is_async=True,
        self_ref=True,
    )


def build_get_fn(statement: SqlStatement, entity_name: str) -> FunctionDecl:
    """Fetch one row; key values are call parameters, not read from ``self``."""
    args = [POOL_ARG] + [
        Argument(item.name, f"&{item.type}") for item in statement.bound_fields
    ]
    return FunctionDecl(
        name="get",
        args=args,
        ret=f"Result<{entity_name}>",
        body=_query_body(
            f"sqlx::query_as!({entity_name},", statement, "", ".fetch_one(pool)"
        ),
        is_async=True,
    )


def build_crud_fns(statements: StatementSet, entity_name: str) -> list[FunctionDecl]:
    return [
        _execute_fn("save", statements.insert),
        _execute_fn("update", statements.update),
        _execute_fn("delete", statements.delete),
        build_get_fn(statements.get, entity_name),
    ]
