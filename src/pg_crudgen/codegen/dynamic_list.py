"""Filtered, paginated list query whose WHERE clause is assembled at call time.

The generated ``list`` function walks the search fields in catalog order. Each
field whose filter value is present contributes one predicate, prefixed
``WHERE`` when it is the first one and ``OR`` afterwards, and one bind. The
predicate text and the bind sequence are both derived from the same list of
active filters, so the Nth predicate placeholder always receives the Nth bind.

Pagination placeholders follow the predicates. With
:attr:`PlaceholderNumbering.LEGACY` they are numbered ``counter + 1`` and
``counter + 2`` where ``counter`` is the next unused predicate slot; this leaves
slot ``counter`` unreferenced while limit and offset are still bound right after
the filters, so placeholder numbers and bind positions disagree from that slot
on. :attr:`PlaceholderNumbering.SEQUENTIAL` numbers them ``counter`` and
``counter + 1`` instead.

:meth:`DynamicListPlan.assemble` computes, in Python, the exact text and binds
the generated Rust produces for a given set of filters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from pg_crudgen.codegen.decl import Argument, Block, FunctionDecl, Statement
from pg_crudgen.codegen.types import comparison_operator
from pg_crudgen.config import PlaceholderNumbering
from pg_crudgen.models.fields import Field, FieldCatalog
from pg_crudgen.sql.rules import (
    DEFAULT_LIST_LIMIT,
    DEFAULT_LIST_OFFSET,
    MAX_LIST_LIMIT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchPredicate:
    field: Field
    operator: str

    def render(self, position: int) -> str:
        return f"{self.field.db_name} {self.operator} ${position}"


@dataclass(frozen=True)
class AssembledListQuery:
    """Run-time SQL text of the list query and its ordered bind values."""

    text: str
    where_clause: str
    binds: tuple[Any, ...]
    limit_placeholder: int
    offset_placeholder: int


@dataclass(frozen=True)
class DynamicListPlan:
    base_columns: tuple[str, ...]
    table: str
    search_fields: tuple[Field, ...]
    limit_default: int = DEFAULT_LIST_LIMIT
    limit_max: int = MAX_LIST_LIMIT
    offset_default: int = DEFAULT_LIST_OFFSET
    numbering: PlaceholderNumbering = PlaceholderNumbering.LEGACY

    @property
    def predicates(self) -> list[SearchPredicate]:
        return [
            SearchPredicate(item, comparison_operator(item.type))
            for item in self.search_fields
        ]

    @property
    def select_prefix(self) -> str:
        return f"SELECT {', '.join(self.base_columns)} FROM {self.table}"

    def effective_limit(self, requested: int | None) -> int:
        if requested is None:
            return self.limit_default
        return min(max(requested, 0), self.limit_max)

    def effective_offset(self, requested: int | None) -> int:
        if requested is None:
            return self.offset_default
        return max(requested, 0)

    def pagination_placeholders(self, counter: int) -> tuple[int, int]:
        """LIMIT/OFFSET slots given the next unused predicate slot ``counter``."""
        if self.numbering is PlaceholderNumbering.SEQUENTIAL:
            return counter, counter + 1
        return counter + 1, counter + 2

    def assemble(
        self,
        filters: Mapping[str, Any],
        limit: int | None = None,
        offset: int | None = None,
    ) -> AssembledListQuery:
        """Build the query the generated code sends for these filter values.

        ``filters`` is keyed by field name; a missing key or ``None`` value means
        the filter is absent.
        """
        active = [
            (predicate, filters[predicate.field.name])
            for predicate in self.predicates
            if filters.get(predicate.field.name) is not None
        ]

        clauses = []
        for position, (predicate, _value) in enumerate(active, start=1):
            keyword = "WHERE" if position == 1 else "OR"
            clauses.append(f"{keyword} {predicate.render(position)}")
        where_clause = " ".join(clauses)

        limit_slot, offset_slot = self.pagination_placeholders(len(active) + 1)
        text = self.select_prefix
        if where_clause:
            text += f" {where_clause}"
        text += f" LIMIT ${limit_slot} OFFSET ${offset_slot}"

        binds = tuple(value for _predicate, value in active) + (
            self.effective_limit(limit),
            self.effective_offset(offset),
        )
        return AssembledListQuery(
            text=text,
            where_clause=where_clause,
            binds=binds,
            limit_placeholder=limit_slot,
            offset_placeholder=offset_slot,
        )


def build_list_plan(
    catalog: FieldCatalog,
    table: str,
    *,
    numbering: PlaceholderNumbering = PlaceholderNumbering.LEGACY,
    limit_default: int = DEFAULT_LIST_LIMIT,
    limit_max: int = MAX_LIST_LIMIT,
) -> DynamicListPlan:
    if numbering is PlaceholderNumbering.LEGACY:
        logger.info(
            "list query uses legacy LIMIT/OFFSET numbering; one placeholder slot "
            "stays unreferenced"
        )
    return DynamicListPlan(
        base_columns=tuple(catalog.db_names),
        table=table,
        search_fields=tuple(catalog.search_fields),
        limit_default=limit_default,
        limit_max=limit_max,
        numbering=numbering,
    )


def _predicate_block(predicate: SearchPredicate) -> Block:
    return Block(
        f"if query.{predicate.field.name}.is_some()",
        [
            'where_clause.push_str(if current_idx == 1 { " WHERE " } else { " OR " });',
            "where_clause.push_str(&format!(\"{} {} ${{}}\", current_idx));".format(
                predicate.field.db_name, predicate.operator
            ),
            "current_idx += 1;",
        ],
    )


def build_list_fn(plan: DynamicListPlan, entity_name: str, query_name: str) -> FunctionDecl:
    """Rust ``list`` function mirroring :meth:`DynamicListPlan.assemble`."""
    if plan.numbering is PlaceholderNumbering.SEQUENTIAL:
        slots = "current_idx, current_idx + 1"
    else:
        slots = "current_idx + 1, current_idx + 2"

    body: list[Statement] = [
        "let limit = query.limit.map_or({}, |f| f.clamp(0, {}));".format(
            plan.limit_default, plan.limit_max
        ),
        f"let offset = query.offset.map_or({plan.offset_default}, |f| f.max(0));",
        "let mut current_idx = 1i32;",
        "let mut where_clause = String::new();",
    ]
    body.extend(_predicate_block(predicate) for predicate in plan.predicates)
    body.append(
        'let list_query = format!("{}{{}} LIMIT ${{}} OFFSET ${{}}", where_clause, {});'.format(
            plan.select_prefix, slots
        )
    )
    body.append("let mut sql_query = sqlx::query_as(&list_query);")
    body.extend(
        Block(
            f"if let Some(x) = &query.{predicate.field.name}",
            ["sql_query = sql_query.bind(x);"],
        )
        for predicate in plan.predicates
    )
    body.extend(
        [
            "sql_query = sql_query.bind(limit).bind(offset);",
            "sql_query.fetch_all(pool)",
            ".await",
        ]
    )

    return FunctionDecl(
        name="list",
        args=[Argument("pool", "&PgPool"), Argument("query", f"&{query_name}")],
        ret=f"Result<Vec<{entity_name}>>",
        body=body,
        is_async=True,
    )
