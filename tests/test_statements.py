"""Unit tests for static statement synthesis and validation."""

import pytest

from pg_crudgen.models import Field, build_catalog
from pg_crudgen.sql import (
    SqlStatement,
    StatementKind,
    StatementSynthesisError,
    StatementValidationError,
    check_placeholder_sequence,
    ensure_valid_statement,
    placeholder_numbers,
    synthesize_statements,
    validate_statement,
)
from pg_crudgen.sql.statements import (
    synthesize_delete,
    synthesize_get,
    synthesize_insert,
    synthesize_update,
)


@pytest.fixture
def composite_catalog():
    fields = [
        Field("tenant_id", "tenant", "i64"),
        Field("slug", "slug", "String"),
        Field("title", "title", "String"),
        Field("updated_at", "updated_at", "DateTime<Utc>"),
    ]
    return build_catalog(fields, primary_key_indices=[0, 1])


def test_insert_binds_every_field_in_order(users_catalog):
    statement = synthesize_insert("users", users_catalog)

    assert statement.text == "INSERT INTO users (id, name, email) VALUES ($1, $2, $3)"
    assert statement.bound_names == ["id", "name", "email"]
    assert len(set(statement.placeholders)) == len(statement.bound_fields)


def test_insert_uses_db_names(two_search_catalog):
    statement = synthesize_insert("people", two_search_catalog)

    assert statement.text == "INSERT INTO people (id, full_name, age) VALUES ($1, $2, $3)"
    assert statement.bound_names == ["id", "name", "age"]


def test_update_key_placeholders_follow_set_placeholders(composite_catalog):
    statement = synthesize_update("pages", composite_catalog)

    assert statement.text == (
        "UPDATE pages SET tenant = $1, slug = $2, title = $3, updated_at = $4 "
        "WHERE tenant = $5 AND slug = $6"
    )
    assert statement.bound_names == [
        "tenant_id",
        "slug",
        "title",
        "updated_at",
        "tenant_id",
        "slug",
    ]
    assert statement.placeholders == list(range(1, 7))


def test_delete_and_get_reference_only_keys(composite_catalog):
    delete = synthesize_delete("pages", composite_catalog)
    get = synthesize_get("pages", composite_catalog)

    assert delete.text == "DELETE FROM pages WHERE tenant = $1 AND slug = $2"
    assert get.text == (
        "SELECT tenant, slug, title, updated_at FROM pages "
        "WHERE tenant = $1 AND slug = $2"
    )
    for statement in (delete, get):
        assert statement.placeholders == [1, 2]
        assert statement.bound_names == ["tenant_id", "slug"]


def test_statement_set_iterates_in_fixed_order(users_catalog):
    statements = synthesize_statements("users", users_catalog)

    assert [item.kind for item in statements] == [
        StatementKind.INSERT,
        StatementKind.UPDATE,
        StatementKind.DELETE,
        StatementKind.GET,
    ]
    assert statements.get.bound_names == ["id"]
    assert statements.get.text == "SELECT id, name, email FROM users WHERE id = $1"


def test_every_static_statement_binds_each_placeholder_once(users_catalog, composite_catalog):
    for catalog in (users_catalog, composite_catalog):
        for statement in synthesize_statements("t", catalog):
            assert check_placeholder_sequence(statement.text, len(statement.bound_fields)) == []


def test_missing_primary_key_is_surfaced(users_fields):
    catalog = build_catalog(users_fields)

    assert synthesize_insert("users", catalog).bound_names == ["id", "name", "email"]
    for synthesize in (synthesize_update, synthesize_delete, synthesize_get):
        with pytest.raises(StatementSynthesisError, match="no primary key"):
            synthesize("users", catalog)


def test_empty_field_list_is_rejected():
    with pytest.raises(StatementSynthesisError, match="no fields"):
        synthesize_insert("users", build_catalog([]))


def test_validate_statement_accepts_generated_sql(users_catalog, composite_catalog):
    for catalog in (users_catalog, composite_catalog):
        for statement in synthesize_statements("records", catalog):
            result = validate_statement(statement)
            assert result.is_valid, result.violations


def test_validate_statement_reports_wrong_kind(users_fields):
    statement = SqlStatement(
        StatementKind.GET, "DELETE FROM users WHERE id = $1", (users_fields[0],)
    )

    result = validate_statement(statement)

    assert not result.is_valid
    assert any("expected SELECT" in item for item in result.violations)


def test_validate_statement_reports_unbound_placeholder(users_fields):
    statement = SqlStatement(
        StatementKind.DELETE,
        "DELETE FROM users WHERE id = $1 AND email = $3",
        tuple(users_fields[:2]),
    )

    result = validate_statement(statement)

    assert not result.is_valid
    assert result.violations == [
        "Placeholder(s) never referenced: $2",
        "Placeholder(s) without a bind (only 2 bound): $3",
    ]


def test_validate_statement_reports_parse_errors(users_fields):
    statement = SqlStatement(
        StatementKind.DELETE, "DELETE FROM users WHERE id = (", (users_fields[0],)
    )

    result = validate_statement(statement)

    assert not result.is_valid
    assert result.violations[0].startswith("Invalid SQL")


def test_ensure_valid_statement_raises(users_fields):
    statement = SqlStatement(StatementKind.INSERT, "INSERT INTO users (id) VALUES ($2)", (users_fields[0],))

    with pytest.raises(StatementValidationError, match="insert statement is invalid"):
        ensure_valid_statement(statement)


def test_placeholder_numbers_in_textual_order():
    assert placeholder_numbers("a = $10 AND b = $2 OR c = $10") == [10, 2, 10]
