"""Static parameterized statements for insert, update, delete and get."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pg_crudgen.models.fields import Field, FieldCatalog
from pg_crudgen.sql.parser import placeholder_numbers
from pg_crudgen.sql.rules import KEYED_STATEMENT_KINDS, StatementKind

logger = logging.getLogger(__name__)


class StatementSynthesisError(RuntimeError):
    """Raised when a statement would be degenerate for the given catalog."""


@dataclass(frozen=True)
class SqlStatement:
    """Statement text plus the fields filling `$1..$N`, in placeholder order."""

    kind: StatementKind
    text: str
    bound_fields: tuple[Field, ...]

    @property
    def placeholders(self) -> list[int]:
        return placeholder_numbers(self.text)

    @property
    def bound_names(self) -> list[str]:
        return [item.name for item in self.bound_fields]


@dataclass(frozen=True)
class StatementSet:
    insert: SqlStatement
    update: SqlStatement
    delete: SqlStatement
    get: SqlStatement

    def __iter__(self):
        return iter((self.insert, self.update, self.delete, self.get))


def _assignments(fields: Sequence[Field], start: int) -> list[str]:
    return [
        f"{item.db_name} = ${position}"
        for position, item in enumerate(fields, start=start)
    ]


def _key_condition(keys: Sequence[Field], start: int = 1) -> str:
    return " AND ".join(_assignments(keys, start))


def _require_fields(catalog: FieldCatalog, kind: StatementKind) -> None:
    if not catalog.fields:
        raise StatementSynthesisError(
            f"Cannot build {kind.value} statement: no fields were collected."
        )
    if kind in KEYED_STATEMENT_KINDS and not catalog.primary_keys:
        raise StatementSynthesisError(
            f"Cannot build {kind.value} statement: no primary key was selected, "
            "the WHERE clause would be empty."
        )


def synthesize_insert(table: str, catalog: FieldCatalog) -> SqlStatement:
    _require_fields(catalog, StatementKind.INSERT)
    fields = catalog.fields
    text = "INSERT INTO {} ({}) VALUES ({})".format(
        table,
        ", ".join(item.db_name for item in fields),
        ", ".join(f"${position}" for position in range(1, len(fields) + 1)),
    )
    return SqlStatement(StatementKind.INSERT, text, tuple(fields))


def synthesize_update(table: str, catalog: FieldCatalog) -> SqlStatement:
    """SET every field with `$1..$n`, then match keys from `$n+1` onwards."""
    _require_fields(catalog, StatementKind.UPDATE)
    fields = catalog.fields
    keys = catalog.primary_keys
    text = "UPDATE {} SET {} WHERE {}".format(
        table,
        ", ".join(_assignments(fields, 1)),
        _key_condition(keys, len(fields) + 1),
    )
    return SqlStatement(StatementKind.UPDATE, text, tuple(fields) + tuple(keys))


def synthesize_delete(table: str, catalog: FieldCatalog) -> SqlStatement:
    _require_fields(catalog, StatementKind.DELETE)
    keys = catalog.primary_keys
    text = f"DELETE FROM {table} WHERE {_key_condition(keys)}"
    return SqlStatement(StatementKind.DELETE, text, tuple(keys))


def synthesize_get(table: str, catalog: FieldCatalog) -> SqlStatement:
    _require_fields(catalog, StatementKind.GET)
    keys = catalog.primary_keys
    text = "SELECT {} FROM {} WHERE {}".format(
        ", ".join(catalog.db_names),
        table,
        _key_condition(keys),
    )
    return SqlStatement(StatementKind.GET, text, tuple(keys))


def synthesize_statements(table: str, catalog: FieldCatalog) -> StatementSet:
    """Build all four static statements for ``table``."""
    statements = StatementSet(
        insert=synthesize_insert(table, catalog),
        update=synthesize_update(table, catalog),
        delete=synthesize_delete(table, catalog),
        get=synthesize_get(table, catalog),
    )
    for statement in statements:
        logger.debug("%s statement: %s", statement.kind.value, statement.text)
    return statements
