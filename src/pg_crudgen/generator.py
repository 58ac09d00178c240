"""Generation pipeline: table spec in, ordered Rust declarations out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pg_crudgen.codegen.crud import build_crud_fns
from pg_crudgen.codegen.decl import Declaration, ImplBlock, StructDecl
from pg_crudgen.codegen.dynamic_list import DynamicListPlan, build_list_fn, build_list_plan
from pg_crudgen.codegen.entity import EntityDefinition, build_entity
from pg_crudgen.codegen.payload import PayloadDefinition, build_payload
from pg_crudgen.codegen.query_params import build_query_params
from pg_crudgen.config import Settings
from pg_crudgen.models.fields import FieldCatalog, build_catalog
from pg_crudgen.models.table_spec import TableSpec
from pg_crudgen.sql.statements import StatementSet, synthesize_statements
from pg_crudgen.sql.validator import ensure_valid_statement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedModule:
    """Every artifact of one generation run, plus declarations in render order."""

    table: str
    catalog: FieldCatalog
    entity: EntityDefinition
    entity_impl: ImplBlock
    statements: StatementSet
    list_plan: DynamicListPlan
    query_params: StructDecl
    payload: PayloadDefinition | None = None
    declarations: list[Declaration] = field(default_factory=list)


def catalog_from_spec(spec: TableSpec) -> FieldCatalog:
    return build_catalog(
        spec.catalog_fields(),
        primary_key_indices=spec.primary_keys,
        excluded_indices=spec.exclude_from_search,
    )


def build_list_plan_for(
    spec: TableSpec, settings: Settings, catalog: FieldCatalog | None = None
) -> DynamicListPlan:
    return build_list_plan(
        catalog if catalog is not None else catalog_from_spec(spec),
        spec.table,
        numbering=settings.list_numbering,
        limit_default=settings.list_limit_default,
        limit_max=settings.list_limit_max,
    )


def generate_module(spec: TableSpec, settings: Settings | None = None) -> GeneratedModule:
    """Run every builder for ``spec`` and assemble the declarations.

    Order: entity struct, entity impl, payload struct and its conversion impl
    when requested, query-parameters struct.
    """
    settings = settings or Settings()
    catalog = catalog_from_spec(spec)
    entity_name = spec.entity_name
    logger.info(
        "generating %s for table %s (%d fields, %d primary keys, %d search fields)",
        entity_name,
        spec.table,
        len(catalog.fields),
        len(catalog.primary_keys),
        len(catalog.search_fields),
    )

    entity = build_entity(catalog, entity_name, spec.table, spec.required_flags)
    statements = synthesize_statements(spec.table, catalog)
    if settings.validate_sql:
        for statement in statements:
            ensure_valid_statement(statement)

    list_plan = build_list_plan_for(spec, settings, catalog)
    entity_impl = ImplBlock(
        target=entity_name,
        functions=[
            entity.constructor,
            *build_crud_fns(statements, entity_name),
            build_list_fn(list_plan, entity_name, spec.query_name),
        ],
    )
    query_params = build_query_params(catalog, spec.query_name)

    payload = None
    if spec.payload is not None:
        assert spec.payload.name is not None
        payload = build_payload(
            entity.partition,
            entity_name,
            spec.payload.name,
            conversion=spec.payload.conversion,
        )

    declarations: list[Declaration] = [entity.struct, entity_impl]
    if payload is not None:
        declarations.append(payload.struct)
        if payload.conversion is not None:
            declarations.append(payload.conversion)
    declarations.append(query_params)

    return GeneratedModule(
        table=spec.table,
        catalog=catalog,
        entity=entity,
        entity_impl=entity_impl,
        statements=statements,
        list_plan=list_plan,
        query_params=query_params,
        payload=payload,
        declarations=declarations,
    )
