"""Entity struct and constructor builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pg_crudgen.codegen.decl import Argument, Block, FieldDecl, FunctionDecl, StructDecl
from pg_crudgen.codegen.types import default_expression
from pg_crudgen.models.fields import (
    ConstructorPartition,
    FieldCatalog,
    partition_fields,
)

ENTITY_DERIVES = ["Debug", "serde::Deserialize", "serde::Serialize", "sqlx::FromRow"]


@dataclass(frozen=True)
class EntityDefinition:
    struct: StructDecl
    constructor: FunctionDecl
    partition: ConstructorPartition


def build_entity(
    catalog: FieldCatalog,
    entity_name: str,
    table: str,
    required_flags: Sequence[bool],
) -> EntityDefinition:
    """Build the row struct and a ``new`` taking only the required fields."""
    partition = partition_fields(catalog, required_flags)

    struct = StructDecl(
        name=entity_name,
        fields=[FieldDecl(item.name, item.type) for item in catalog.fields],
        derives=list(ENTITY_DERIVES),
        doc=f"Represents a row in the {table} table",
    )

    initializers: list[str] = []
    for item, is_required in zip(catalog.fields, required_flags):
        if is_required:
            initializers.append(f"{item.name},")
        else:
            initializers.append(f"{item.name}: {default_expression(item.type)},")

    constructor = FunctionDecl(
        name="new",
        args=[Argument(item.name, item.type) for item in partition.required],
        ret="Self",
        body=[Block("Self", initializers)],
    )
    return EntityDefinition(struct=struct, constructor=constructor, partition=partition)
