"""Statement synthesis, parsing and validation utilities."""

from pg_crudgen.sql.parser import SQLParseError, parse_postgres_sql, placeholder_numbers
from pg_crudgen.sql.rules import StatementKind
from pg_crudgen.sql.statements import (
    SqlStatement,
    StatementSet,
    StatementSynthesisError,
    synthesize_statements,
)
from pg_crudgen.sql.validator import (
    StatementValidationError,
    StatementValidationResult,
    check_placeholder_sequence,
    ensure_valid_statement,
    validate_statement,
)

__all__ = [
    "SQLParseError",
    "parse_postgres_sql",
    "placeholder_numbers",
    "StatementKind",
    "SqlStatement",
    "StatementSet",
    "StatementSynthesisError",
    "synthesize_statements",
    "StatementValidationError",
    "StatementValidationResult",
    "check_placeholder_sequence",
    "ensure_valid_statement",
    "validate_statement",
]
