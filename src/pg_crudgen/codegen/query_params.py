"""Filter-parameters struct deserialized from the list request."""

from __future__ import annotations

from pg_crudgen.codegen.decl import FieldDecl, StructDecl
from pg_crudgen.codegen.types import optional_type
from pg_crudgen.models.fields import FieldCatalog

QUERY_DERIVES = ["Debug", "serde::Deserialize"]
PAGINATION_TYPE = "Option<i32>"


def build_query_params(catalog: FieldCatalog, query_name: str) -> StructDecl:
    fields = [
        FieldDecl(item.name, optional_type(item.type)) for item in catalog.search_fields
    ]
    fields.append(FieldDecl("limit", PAGINATION_TYPE))
    fields.append(FieldDecl("offset", PAGINATION_TYPE))
    return StructDecl(name=query_name, fields=fields, derives=list(QUERY_DERIVES))
