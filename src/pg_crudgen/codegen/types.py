"""Closed mapping from declared Rust type spellings to generator behavior."""

from __future__ import annotations

from enum import Enum


class TypeKind(Enum):
    LOCAL_TIMESTAMP = "local_timestamp"
    UTC_TIMESTAMP = "utc_timestamp"
    UUID = "uuid"
    STRING = "string"
    GENERIC = "generic"


# Exact spellings only; "chrono::DateTime<Utc>" or "Option<String>" are GENERIC.
_KIND_BY_SPELLING: dict[str, TypeKind] = {
    "DateTime<Local>": TypeKind.LOCAL_TIMESTAMP,
    "DateTime<Utc>": TypeKind.UTC_TIMESTAMP,
    "Uuid": TypeKind.UUID,
    "uuid::Uuid": TypeKind.UUID,
    "String": TypeKind.STRING,
}

_DEFAULT_EXPRESSIONS: dict[TypeKind, str] = {
    TypeKind.LOCAL_TIMESTAMP: "chrono::Local::now()",
    TypeKind.UTC_TIMESTAMP: "chrono::Utc::now()",
    TypeKind.UUID: "uuid::Uuid::new_v4()",
    TypeKind.STRING: "String::new()",
}

_OPTIONAL_PREFIXES = ("Option<", "std::option::Option<", "core::option::Option<")


def classify_type(type_name: str) -> TypeKind:
    return _KIND_BY_SPELLING.get(type_name, TypeKind.GENERIC)


def default_expression(type_name: str) -> str:
    """Expression used to initialize a field left out of the constructor."""
    kind = classify_type(type_name)
    if kind is not TypeKind.GENERIC:
        return _DEFAULT_EXPRESSIONS[kind]
    # Generic paths need the qualified form: `<Vec<i32>>::default()`.
    if "<" in type_name:
        return f"<{type_name}>::default()"
    return f"{type_name}::default()"


def comparison_operator(type_name: str) -> str:
    """Operator used by list filters: pattern match for text, equality otherwise."""
    return "LIKE" if classify_type(type_name) is TypeKind.STRING else "="


def is_optional(type_name: str) -> bool:
    return type_name.startswith(_OPTIONAL_PREFIXES)


def optional_type(type_name: str) -> str:
    if is_optional(type_name):
        return type_name
    return f"Option<{type_name}>"
