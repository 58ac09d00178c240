"""Structural checks for generated statements."""

from __future__ import annotations

from dataclasses import dataclass, field

from pg_crudgen.sql.parser import SQLParseError, parse_postgres_sql, placeholder_numbers
from pg_crudgen.sql.rules import STATEMENT_ROOT_TYPES
from pg_crudgen.sql.statements import SqlStatement


class StatementValidationError(RuntimeError):
    """Raised when a generated statement fails validation."""


@dataclass(frozen=True)
class StatementValidationResult:
    """Structured statement validation result."""

    is_valid: bool
    sql: str
    normalized_sql: str
    placeholders: list[int] = field(default_factory=list)
    violations: list[str] = field(default_factory=list)


def check_placeholder_sequence(sql: str, bind_count: int) -> list[str]:
    """Report every way the `$N` markers in ``sql`` disagree with ``bind_count`` binds.

    The markers are expected to cover exactly ``$1..$bind_count`` so that the
    Nth bind fills the Nth placeholder.
    """
    referenced = set(placeholder_numbers(sql))
    expected = set(range(1, bind_count + 1))
    violations: list[str] = []

    missing = sorted(expected - referenced)
    if missing:
        violations.append(
            "Placeholder(s) never referenced: "
            + ", ".join(f"${number}" for number in missing)
        )
    extra = sorted(referenced - expected)
    if extra:
        violations.append(
            f"Placeholder(s) without a bind (only {bind_count} bound): "
            + ", ".join(f"${number}" for number in extra)
        )
    return violations


def validate_statement(statement: SqlStatement) -> StatementValidationResult:
    """Validate a statement parses as its kind and binds every placeholder."""
    try:
        expression = parse_postgres_sql(statement.text)
    except SQLParseError as exc:
        return StatementValidationResult(
            is_valid=False,
            sql=statement.text,
            normalized_sql=statement.text,
            placeholders=statement.placeholders,
            violations=[str(exc)],
        )

    violations: list[str] = []
    root_type = STATEMENT_ROOT_TYPES[statement.kind]
    if not isinstance(expression, root_type):
        violations.append(
            f"{statement.kind.value} statement parsed as {expression.key.upper()}, "
            f"expected {root_type.__name__.upper()}."
        )

    violations.extend(
        check_placeholder_sequence(statement.text, len(statement.bound_fields))
    )

    return StatementValidationResult(
        is_valid=not violations,
        sql=statement.text,
        normalized_sql=expression.sql(dialect="postgres"),
        placeholders=statement.placeholders,
        violations=violations,
    )


def ensure_valid_statement(statement: SqlStatement) -> StatementValidationResult:
    """Validate a statement and raise when violations are present."""
    result = validate_statement(statement)
    if not result.is_valid:
        raise StatementValidationError(
            f"{statement.kind.value} statement is invalid:\n"
            + "\n".join(f"- {item}" for item in result.violations)
        )
    return result
