"""Table spec file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pg_crudgen.models.table_spec import TableSpec


class SpecError(ValueError):
    """Raised when a table spec file cannot be read or validated."""


def parse_table_spec(payload: Any) -> TableSpec:
    """Validate a decoded JSON payload into a :class:`TableSpec`."""
    if not isinstance(payload, dict):
        raise SpecError("Table spec root must be a JSON object.")

    try:
        return TableSpec.model_validate(payload)
    except ValidationError as exc:
        messages = []
        for err in exc.errors():
            location = ".".join(str(item) for item in err["loc"]) or "spec"
            messages.append(f"- {location}: {err['msg']}")
        raise SpecError("Invalid table spec:\n" + "\n".join(messages)) from exc


def load_table_spec(spec_path: Path) -> TableSpec:
    """Load and validate a table spec JSON file."""
    if not spec_path.exists():
        raise SpecError(f"Table spec file does not exist: {spec_path}")

    try:
        payload = json.loads(spec_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SpecError(f"Table spec file is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise SpecError(f"Failed to read table spec file: {exc}") from exc

    return parse_table_spec(payload)
