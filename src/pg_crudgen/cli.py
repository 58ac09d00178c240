"""Command-line entrypoint for pg-crudgen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pg_crudgen import __version__

_NUMBERING_CHOICES = ("legacy", "sequential")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pg-crudgen",
        description=(
            "Generate a Rust + sqlx data-access layer (entity, CRUD statements, "
            "filtered list query) from a PostgreSQL table description."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser(
        "config-check",
        help="Validate environment configuration for pg-crudgen.",
    )
    generate_parser = subparsers.add_parser(
        "generate",
        help="Render the Rust module for a table spec file.",
    )
    generate_parser.add_argument("spec", type=Path, help="Path to a table spec JSON file.")
    generate_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the module to this file instead of stdout.",
    )
    generate_parser.add_argument(
        "--numbering",
        choices=_NUMBERING_CHOICES,
        default=None,
        help="Override LIMIT/OFFSET placeholder numbering of the list query.",
    )
    generate_parser.add_argument(
        "--no-imports",
        action="store_true",
        help="Omit the `use sqlx::...` header.",
    )
    show_parser = subparsers.add_parser(
        "show-sql",
        help="Print the static insert/update/delete/get statements and their binds.",
    )
    show_parser.add_argument("spec", type=Path, help="Path to a table spec JSON file.")
    preview_parser = subparsers.add_parser(
        "preview-list",
        help="Assemble the list query for a set of filter values.",
    )
    preview_parser.add_argument("spec", type=Path, help="Path to a table spec JSON file.")
    preview_parser.add_argument(
        "--filter",
        action="append",
        default=None,
        metavar="FIELD=VALUE",
        help="Present filter value. Repeat the flag for multiple filters.",
    )
    preview_parser.add_argument("--limit", type=int, default=None)
    preview_parser.add_argument("--offset", type=int, default=None)
    preview_parser.add_argument(
        "--numbering",
        choices=_NUMBERING_CHOICES,
        default=None,
        help="Override LIMIT/OFFSET placeholder numbering of the list query.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _parse_filters(raw: list[str] | None) -> dict[str, str]:
    filters: dict[str, str] = {}
    for item in raw or []:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Filter must look like FIELD=VALUE, got {item!r}.")
        filters[name.strip()] = value
    return filters


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    from pg_crudgen.config import ConfigError, PlaceholderNumbering, load_settings

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Configuration error:\n{exc}", file=sys.stderr)
        return 2

    _configure_logging(settings.log_level)
    if getattr(args, "numbering", None):
        settings = settings.model_copy(
            update={"list_numbering": PlaceholderNumbering(args.numbering)}
        )

    if args.command == "config-check":
        print("Configuration loaded successfully:")
        print(f"- CRUDGEN_LIST_NUMBERING: {settings.list_numbering.value}")
        print(f"- CRUDGEN_LIST_LIMIT_DEFAULT: {settings.list_limit_default}")
        print(f"- CRUDGEN_LIST_LIMIT_MAX: {settings.list_limit_max}")
        print(f"- CRUDGEN_VALIDATE_SQL: {settings.validate_sql}")
        print(f"- CRUDGEN_LOG_LEVEL: {settings.log_level}")
        return 0

    from pg_crudgen.models import SpecError, load_table_spec

    try:
        spec = load_table_spec(args.spec)
    except SpecError as exc:
        print(f"Table spec error:\n{exc}", file=sys.stderr)
        return 2

    if args.command == "generate":
        from pg_crudgen.generator import generate_module
        from pg_crudgen.render import render_module
        from pg_crudgen.sql import StatementSynthesisError, StatementValidationError

        try:
            module = generate_module(spec, settings)
        except ConfigError as exc:
            print(f"Configuration error:\n{exc}", file=sys.stderr)
            return 2
        except StatementSynthesisError as exc:
            print(f"Statement synthesis failed:\n{exc}", file=sys.stderr)
            return 1
        except StatementValidationError as exc:
            print(f"Generated SQL failed validation:\n{exc}", file=sys.stderr)
            return 1

        source = render_module(module.declarations, imports=not args.no_imports)
        if args.output is None:
            print(source, end="")
            return 0

        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(source, encoding="utf-8")
        except OSError as exc:
            print(f"Failed to write output file:\n{exc}", file=sys.stderr)
            return 1

        print("Generation succeeded:")
        print(f"- entity: {spec.entity_name}")
        print(f"- table: {spec.table}")
        print(f"- declarations: {len(module.declarations)}")
        print(f"- output: {args.output}")
        return 0

    if args.command == "show-sql":
        from pg_crudgen.generator import catalog_from_spec
        from pg_crudgen.sql import StatementSynthesisError, synthesize_statements

        try:
            statements = synthesize_statements(spec.table, catalog_from_spec(spec))
        except ConfigError as exc:
            print(f"Configuration error:\n{exc}", file=sys.stderr)
            return 2
        except StatementSynthesisError as exc:
            print(f"Statement synthesis failed:\n{exc}", file=sys.stderr)
            return 1

        for statement in statements:
            print(f"{statement.kind.value}:")
            print(f"  {statement.text}")
            print(f"  binds: {', '.join(statement.bound_names) or '(none)'}")
        return 0

    if args.command == "preview-list":
        from pg_crudgen.generator import build_list_plan_for

        try:
            filters = _parse_filters(args.filter)
            plan = build_list_plan_for(spec, settings)
        except ValueError as exc:
            # ConfigError is a ValueError as well.
            print(f"Invalid input:\n{exc}", file=sys.stderr)
            return 2

        known = {item.name for item in plan.search_fields}
        unknown = sorted(set(filters) - known)
        if unknown:
            print(
                f"Invalid input:\nUnknown search field(s): {', '.join(unknown)}",
                file=sys.stderr,
            )
            return 2

        query = plan.assemble(filters, limit=args.limit, offset=args.offset)
        print(f"numbering: {plan.numbering.value}")
        print(f"sql: {query.text}")
        print("binds:")
        for position, value in enumerate(query.binds, start=1):
            print(f"  {position}: {value!r}")
        return 0

    print(f"Command '{args.command}' is not implemented yet.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
