"""Field catalog built from a table spec, shared by every builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from pg_crudgen.config import ConfigError


class SelectionError(ConfigError):
    """Raised when a field selection does not match the collected fields."""


@dataclass(frozen=True)
class Field:
    """Single table column as seen by the generated code."""

    name: str
    db_name: str
    type: str

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class FieldCatalog:
    """Ordered fields plus index-based primary-key and search selections."""

    fields: tuple[Field, ...]
    primary_key_indices: frozenset[int] = field(default_factory=frozenset)
    excluded_indices: frozenset[int] = field(default_factory=frozenset)

    @property
    def primary_keys(self) -> list[Field]:
        return [
            item
            for index, item in enumerate(self.fields)
            if index in self.primary_key_indices
        ]

    @property
    def search_fields(self) -> list[Field]:
        return [
            item
            for index, item in enumerate(self.fields)
            if index not in self.excluded_indices
        ]

    @property
    def db_names(self) -> list[str]:
        return [item.db_name for item in self.fields]


@dataclass(frozen=True)
class ConstructorPartition:
    """Split of the catalog into constructor parameters and defaulted fields."""

    required: tuple[Field, ...]
    defaulted: tuple[Field, ...]


def _checked_indices(
    indices: Sequence[int], field_count: int, *, label: str
) -> frozenset[int]:
    invalid = sorted({index for index in indices if not 0 <= index < field_count})
    if invalid:
        raise SelectionError(
            f"{label} index(es) {', '.join(str(index) for index in invalid)} "
            f"do not match any of the {field_count} collected field(s)."
        )
    return frozenset(indices)


def build_catalog(
    fields: Sequence[Field],
    primary_key_indices: Sequence[int] = (),
    excluded_indices: Sequence[int] = (),
) -> FieldCatalog:
    """Build a catalog, rejecting selections that point past the field list."""
    count = len(fields)
    return FieldCatalog(
        fields=tuple(fields),
        primary_key_indices=_checked_indices(
            primary_key_indices, count, label="Primary-key"
        ),
        excluded_indices=_checked_indices(
            excluded_indices, count, label="Excluded-search"
        ),
    )


def partition_fields(
    catalog: FieldCatalog, required_flags: Sequence[bool]
) -> ConstructorPartition:
    """Split catalog fields by a per-field "constructor parameter?" decision."""
    if len(required_flags) != len(catalog.fields):
        raise SelectionError(
            f"Expected {len(catalog.fields)} required flag(s), "
            f"got {len(required_flags)}."
        )

    required: list[Field] = []
    defaulted: list[Field] = []
    for item, is_required in zip(catalog.fields, required_flags):
        (required if is_required else defaulted).append(item)
    return ConstructorPartition(required=tuple(required), defaulted=tuple(defaulted))
