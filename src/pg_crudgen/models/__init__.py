"""Input models: table spec, field catalog and constructor partition."""

from pg_crudgen.models.fields import (
    ConstructorPartition,
    Field,
    FieldCatalog,
    SelectionError,
    build_catalog,
    partition_fields,
)
from pg_crudgen.models.loader import SpecError, load_table_spec, parse_table_spec
from pg_crudgen.models.table_spec import FieldSpec, PayloadSpec, TableSpec

__all__ = [
    "ConstructorPartition",
    "Field",
    "FieldCatalog",
    "FieldSpec",
    "PayloadSpec",
    "SelectionError",
    "SpecError",
    "TableSpec",
    "build_catalog",
    "load_table_spec",
    "parse_table_spec",
    "partition_fields",
]
