"""Pytest fixtures and configuration."""

import pytest

from pg_crudgen.models import Field, TableSpec, build_catalog


@pytest.fixture
def users_fields():
    """id/name/email fields of the `users` table."""
    return [
        Field("id", "id", "Uuid"),
        Field("name", "name", "String"),
        Field("email", "email", "String"),
    ]


@pytest.fixture
def users_catalog(users_fields):
    """`users` catalog keyed on id, every field searchable."""
    return build_catalog(users_fields, primary_key_indices=[0])


@pytest.fixture
def two_search_catalog():
    """Catalog whose only search fields are name (String) and age (i32)."""
    fields = [
        Field("id", "id", "Uuid"),
        Field("name", "full_name", "String"),
        Field("age", "age", "i32"),
    ]
    return build_catalog(fields, primary_key_indices=[0], excluded_indices=[0])


@pytest.fixture
def users_spec_payload():
    """Raw JSON-like payload for the `users` table spec."""
    return {
        "table": "users",
        "fields": [
            {"name": "id", "type": "Uuid"},
            {"name": "name"},
            {"name": "email"},
        ],
        "primary_keys": [0],
    }


@pytest.fixture
def users_spec(users_spec_payload):
    return TableSpec.model_validate(users_spec_payload)
