"""Builders producing abstract Rust declarations."""

from pg_crudgen.codegen.crud import build_crud_fns, build_get_fn
from pg_crudgen.codegen.decl import (
    Argument,
    Block,
    Declaration,
    FieldDecl,
    FunctionDecl,
    ImplBlock,
    StructDecl,
)
from pg_crudgen.codegen.dynamic_list import (
    AssembledListQuery,
    DynamicListPlan,
    build_list_fn,
    build_list_plan,
)
from pg_crudgen.codegen.entity import EntityDefinition, build_entity
from pg_crudgen.codegen.payload import PayloadDefinition, build_payload
from pg_crudgen.codegen.query_params import build_query_params
from pg_crudgen.codegen.types import TypeKind, classify_type, default_expression

__all__ = [
    "Argument",
    "AssembledListQuery",
    "Block",
    "Declaration",
    "DynamicListPlan",
    "EntityDefinition",
    "FieldDecl",
    "FunctionDecl",
    "ImplBlock",
    "PayloadDefinition",
    "StructDecl",
    "TypeKind",
    "build_crud_fns",
    "build_entity",
    "build_get_fn",
    "build_list_fn",
    "build_list_plan",
    "build_payload",
    "build_query_params",
    "classify_type",
    "default_expression",
]
