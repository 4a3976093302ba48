from __future__ import annotations

import json
from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker
from typer.testing import CliRunner

from split_it import cli
from split_it.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_database(
    sqlite_session_factory: sessionmaker[Session],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(cli, "SessionFactory", sqlite_session_factory)


def _invoke(*args: str) -> str:
    result = runner.invoke(app, list(args))
    assert result.exit_code == 0, result.output
    return result.output


def test_healthcheck() -> None:
    assert "split-it is ready" in _invoke("healthcheck")


def test_full_flow_settles_expenses() -> None:
    _invoke("add-participant", "Ana")
    _invoke("add-participant", "Juan")
    added = _invoke("add-expense", "--payer", "Ana", "--amount", "100")

    settled = _invoke("settle")

    assert "Varios paid by Ana -> $100.00" in added
    assert "Total: $100.00" in settled
    assert "Average: $50.00" in settled
    assert "Ana: +50.00" in settled
    assert "Juan: -50.00" in settled
    assert "Juan -> Ana: $50.00" in settled


def test_domain_errors_exit_with_code_one() -> None:
    _invoke("add-participant", "Ana")
    _invoke("add-expense", "-p", "Ana", "-a", "10", "-d", "Cafe")

    duplicate = runner.invoke(app, ["add-participant", "Ana"])
    removal = runner.invoke(app, ["remove-participant", "Ana"])
    invalid_amount = runner.invoke(app, ["add-expense", "-p", "Ana", "-a", "0"])

    assert duplicate.exit_code == 1
    assert "already exists" in duplicate.output
    assert removal.exit_code == 1
    assert "recorded expenses" in removal.output
    assert invalid_amount.exit_code == 1
    assert "Participants: Ana" in _invoke("show")


def test_settle_without_data() -> None:
    _invoke("add-participant", "Ana")

    assert "Add at least two participants" in _invoke("settle")


def test_export_import_round_trip(tmp_path: Path) -> None:
    _invoke("add-participant", "Ana")
    _invoke("add-participant", "Juan")
    _invoke("add-expense", "-p", "Juan", "-a", "30", "-d", "Nafta")
    snapshot_file = tmp_path / "snapshot.json"

    _invoke("export", "--output", str(snapshot_file))
    _invoke("reset", "--yes")
    assert "Participants: -" in _invoke("show")
    imported = _invoke("import", "--input", str(snapshot_file))

    payload = json.loads(snapshot_file.read_text(encoding="utf-8"))
    assert payload["participants"] == ["Ana", "Juan"]
    assert payload["expenses"][0]["amount"] == "30.00"
    assert "Imported 2 participants and 1 expenses" in imported
    assert "Nafta (Juan) $30.00" in _invoke("show")


def test_import_rejects_invalid_snapshot(tmp_path: Path) -> None:
    snapshot_file = tmp_path / "broken.json"
    snapshot_file.write_text(
        json.dumps({"participants": ["Ana", "Ana"], "expenses": []}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["import", "--input", str(snapshot_file)])

    assert result.exit_code == 1
    assert "Invalid snapshot file" in result.output


def test_report_writes_text_file(tmp_path: Path) -> None:
    _invoke("add-participant", "A")
    _invoke("add-participant", "B")
    _invoke("add-participant", "C")
    _invoke("add-expense", "-p", "A", "-a", "90")
    report_file = tmp_path / "report.txt"

    _invoke("report", "--output", str(report_file))

    content = report_file.read_text(encoding="utf-8")
    assert "Average per person: $30.00" in content
    assert "Payment plan (who owes whom)" in content


def test_delete_expense_then_remove_participant() -> None:
    _invoke("add-participant", "Ana")
    _invoke("add-expense", "-p", "Ana", "-a", "10")
    shown = _invoke("show")
    expense_id = shown.split("[", 1)[1].split("]", 1)[0]

    _invoke("delete-expense", expense_id)
    removed = _invoke("remove-participant", "Ana")

    assert "Participants: -" in removed


def test_init_db_creates_snapshot_table(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    engine = create_engine(f"sqlite+pysqlite:///{tmp_path / 'split_it.db'}")
    monkeypatch.setattr(cli, "engine", engine)

    output = _invoke("init-db")

    assert "Database initialized" in output
    assert "state_snapshots" in inspect(engine).get_table_names()
    engine.dispose()
