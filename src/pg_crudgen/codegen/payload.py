"""Payload struct holding the constructor parameters, and its conversion."""

from __future__ import annotations

from dataclasses import dataclass

from pg_crudgen.codegen.decl import Argument, FieldDecl, FunctionDecl, ImplBlock, StructDecl
from pg_crudgen.models.fields import ConstructorPartition

PAYLOAD_DERIVES = ["Debug", "serde::Deserialize"]


@dataclass(frozen=True)
class PayloadDefinition:
    struct: StructDecl
    conversion: ImplBlock | None = None


def build_payload(
    partition: ConstructorPartition,
    entity_name: str,
    payload_name: str,
    *,
    conversion: bool = True,
) -> PayloadDefinition:
    """Build the payload struct and, optionally, ``impl From<Payload> for Entity``.

    The conversion passes the payload members to ``Entity::new`` positionally in
    ``partition.required`` order, which is also the constructor's parameter
    order. Members are never matched by name.
    """
    struct = StructDecl(
        name=payload_name,
        fields=[FieldDecl(item.name, item.type) for item in partition.required],
        derives=list(PAYLOAD_DERIVES),
    )
    if not conversion:
        return PayloadDefinition(struct=struct)

    call_args = ", ".join(f"p.{item.name}" for item in partition.required)
    from_fn = FunctionDecl(
        name="from",
        args=[Argument("p", payload_name)],
        ret="Self",
        body=[f"{entity_name}::new({call_args})"],
        vis=None,
    )
    impl = ImplBlock(
        target=entity_name,
        functions=[from_fn],
        trait=f"From<{payload_name}>",
    )
    return PayloadDefinition(struct=struct, conversion=impl)
