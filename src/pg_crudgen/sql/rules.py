"""Statement kinds, their expected SQLGlot roots and list query defaults."""

from __future__ import annotations

from enum import Enum

from sqlglot import exp


class StatementKind(str, Enum):
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    GET = "get"


STATEMENT_ROOT_TYPES: dict[StatementKind, type[exp.Expression]] = {
    StatementKind.INSERT: exp.Insert,
    StatementKind.UPDATE: exp.Update,
    StatementKind.DELETE: exp.Delete,
    StatementKind.GET: exp.Select,
}

# Kinds whose WHERE clause is built from the primary keys.
KEYED_STATEMENT_KINDS = frozenset(
    {StatementKind.UPDATE, StatementKind.DELETE, StatementKind.GET}
)

DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 100
DEFAULT_LIST_OFFSET = 0
