"""Tests for the pg-crudgen command-line entrypoint."""

import json

import pytest

from pg_crudgen.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CRUDGEN_LIST_NUMBERING",
        "CRUDGEN_LIST_LIMIT_DEFAULT",
        "CRUDGEN_LIST_LIMIT_MAX",
        "CRUDGEN_VALIDATE_SQL",
        "CRUDGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def spec_file(tmp_path, users_spec_payload):
    path = tmp_path / "users.json"
    path.write_text(json.dumps(users_spec_payload), encoding="utf-8")
    return path


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "pg-crudgen" in capsys.readouterr().out


def test_config_check(capsys):
    assert main(["config-check"]) == 0
    out = capsys.readouterr().out
    assert "CRUDGEN_LIST_NUMBERING: legacy" in out


def test_config_error_exit_code(monkeypatch, capsys):
    monkeypatch.setenv("CRUDGEN_LIST_LIMIT_MAX", "-1")

    assert main(["config-check"]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_generate_to_stdout(spec_file, capsys):
    assert main(["generate", str(spec_file)]) == 0
    out = capsys.readouterr().out
    assert "pub struct Users {" in out
    assert "pub struct UsersQuery {" in out


def test_generate_to_file(spec_file, tmp_path, capsys):
    output = tmp_path / "out" / "users.rs"

    assert main(["generate", str(spec_file), "-o", str(output), "--no-imports"]) == 0
    assert output.read_text(encoding="utf-8").startswith("/// Represents a row")
    assert "- declarations: 3" in capsys.readouterr().out


def test_generate_keyless_spec_fails(tmp_path, users_spec_payload, capsys):
    users_spec_payload["primary_keys"] = []
    path = tmp_path / "keyless.json"
    path.write_text(json.dumps(users_spec_payload), encoding="utf-8")

    assert main(["generate", str(path)]) == 1
    assert "Statement synthesis failed" in capsys.readouterr().err


def test_generate_bad_selection_is_config_error(tmp_path, users_spec_payload, capsys):
    users_spec_payload["exclude_from_search"] = [3]
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(users_spec_payload), encoding="utf-8")

    assert main(["generate", str(path)]) == 2
    assert "Excluded-search" in capsys.readouterr().err


def test_missing_spec_file(tmp_path, capsys):
    assert main(["show-sql", str(tmp_path / "nope.json")]) == 2
    assert "Table spec error" in capsys.readouterr().err


def test_show_sql(spec_file, capsys):
    assert main(["show-sql", str(spec_file)]) == 0
    out = capsys.readouterr().out
    assert "  INSERT INTO users (id, name, email) VALUES ($1, $2, $3)" in out
    assert "  binds: id, name, email, id" in out


def test_preview_list(spec_file, capsys):
    assert (
        main(["preview-list", str(spec_file), "--filter", "email=a@b.c", "--limit", "500"])
        == 0
    )
    out = capsys.readouterr().out
    assert "sql: SELECT id, name, email FROM users WHERE email LIKE $1 LIMIT $3 OFFSET $4" in out
    assert "  1: 'a@b.c'" in out
    assert "  2: 100" in out
    assert "  3: 0" in out


def test_preview_list_sequential(spec_file, capsys):
    assert main(["preview-list", str(spec_file), "--numbering", "sequential"]) == 0
    assert "LIMIT $1 OFFSET $2" in capsys.readouterr().out


def test_preview_list_unknown_filter(spec_file, capsys):
    assert main(["preview-list", str(spec_file), "--filter", "colour=red"]) == 2
    assert "Unknown search field(s): colour" in capsys.readouterr().err


def test_preview_list_malformed_filter(spec_file, capsys):
    assert main(["preview-list", str(spec_file), "--filter", "email"]) == 2
    assert "FIELD=VALUE" in capsys.readouterr().err
