"""CLI bootstrap for split-it."""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

import typer
from pydantic import ValidationError

from split_it.application.schemas.snapshot import LedgerSnapshot
from split_it.core.settings import get_settings
from split_it.db.base import Base, import_orm_models
from split_it.db.session import SessionFactory, engine
from split_it.domain.errors import DomainError
from split_it.domain.money import format_currency, format_signed
from split_it.reporting.settlement_report import render_settlement_report
from split_it.repositories.snapshot_repository import SnapshotRepository
from split_it.services.ledger_service import CreateExpenseInput, LedgerService
from split_it.services.settlement_service import SettlementService, SettlementStatus

app = typer.Typer(help="CLI for splitting shared expenses evenly.")
INPUT_FILE_OPTION = typer.Option(..., exists=True, dir_okay=False)
OUTPUT_FILE_OPTION = typer.Option(None, dir_okay=False)


@contextmanager
def _ledger_service() -> Iterator[LedgerService]:
    settings = get_settings()
    with SessionFactory() as session:
        yield LedgerService(
            snapshot_repository=SnapshotRepository(session),
            session=session,
            snapshot_key=settings.snapshot_key,
            default_description=settings.default_expense_description,
        )


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


def _write_or_echo(content: str, output: Path | None) -> None:
    if output is None:
        typer.echo(content, nl=False)
        return
    output.write_text(content, encoding="utf-8")
    typer.echo(f"Written to {output}")


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("split-it is ready")


@app.command("init-db")
def init_db() -> None:
    """Create the snapshot table when it does not exist yet."""
    import_orm_models()
    Base.metadata.create_all(engine)
    typer.echo("Database initialized")


@app.command("add-participant")
def add_participant(name: str) -> None:
    """Register a participant by display name."""
    try:
        with _ledger_service() as service:
            state = service.add_participant(name)
    except DomainError as exc:
        raise _fail(str(exc)) from exc
    typer.echo(f"Participants: {', '.join(state.participants)}")


@app.command("remove-participant")
def remove_participant(name: str) -> None:
    """Remove a participant who has not paid for any expense."""
    try:
        with _ledger_service() as service:
            state = service.remove_participant(name)
    except DomainError as exc:
        raise _fail(str(exc)) from exc
    typer.echo(f"Participants: {', '.join(state.participants) or '-'}")


@app.command("add-expense")
def add_expense(
    payer: str = typer.Option(..., "--payer", "-p"),
    amount: str = typer.Option(..., "--amount", "-a"),
    description: str = typer.Option("", "--description", "-d"),
) -> None:
    """Record an expense paid by one participant."""
    try:
        with _ledger_service() as service:
            expense = service.add_expense(
                CreateExpenseInput(
                    payer=payer,
                    amount=amount,
                    description=description,
                )
            )
    except DomainError as exc:
        raise _fail(str(exc)) from exc
    typer.echo(
        f"Expense {expense.id}: {expense.description} "
        f"paid by {expense.payer} -> {format_currency(expense.amount)}"
    )


@app.command("delete-expense")
def delete_expense(expense_id: int) -> None:
    """Delete one expense by id."""
    try:
        with _ledger_service() as service:
            service.delete_expense(expense_id)
    except DomainError as exc:
        raise _fail(str(exc)) from exc
    typer.echo(f"Expense {expense_id} deleted")


@app.command("show")
def show() -> None:
    """List participants and expenses."""
    with _ledger_service() as service:
        state = service.get_state()

    typer.echo(f"Participants: {', '.join(state.participants) or '-'}")
    typer.echo(f"Expenses: {len(state.expenses)} items")
    for expense in state.expenses:
        typer.echo(
            f"- [{expense.id}] {expense.description} "
            f"({expense.payer}) {format_currency(expense.amount)}"
        )


@app.command("settle")
def settle() -> None:
    """Print balances and the payment plan."""
    with _ledger_service() as service:
        state = service.get_state()
    projection = SettlementService().compute(state)

    typer.echo(f"Total: {format_currency(projection.total_spent)}")
    typer.echo(f"Average: {format_currency(projection.average_share)}")
    if projection.status is SettlementStatus.NO_DATA:
        typer.echo("Add at least two participants and one expense to settle.")
        return

    for line in projection.balances:
        typer.echo(f"{line.participant}: {format_signed(line.net_balance)}")
    if projection.status is SettlementStatus.BALANCED:
        typer.echo("Everything is balanced!")
        return
    for transaction in projection.transactions:
        typer.echo(
            f"{transaction.from_participant} -> {transaction.to_participant}: "
            f"{format_currency(transaction.amount)}"
        )


@app.command("report")
def report(output: Path | None = OUTPUT_FILE_OPTION) -> None:
    """Render the expense report as text."""
    with _ledger_service() as service:
        state = service.get_state()
    projection = SettlementService().compute(state)
    content = render_settlement_report(
        state, projection, generated_at=datetime.now(tz=UTC)
    )
    _write_or_echo(content, output)


@app.command("export")
def export(output: Path | None = OUTPUT_FILE_OPTION) -> None:
    """Dump the stored snapshot as JSON."""
    with _ledger_service() as service:
        state = service.get_state()
    payload = LedgerSnapshot.from_state(state).to_payload()
    _write_or_echo(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", output)


@app.command("import")
def import_snapshot(input: Path = INPUT_FILE_OPTION) -> None:
    """Replace the stored ledger with a JSON snapshot file."""
    try:
        payload = json.loads(input.read_text(encoding="utf-8"))
        snapshot = LedgerSnapshot.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise _fail(f"Invalid snapshot file: {exc}") from exc

    with _ledger_service() as service:
        state = service.replace_state(snapshot)
    typer.echo(
        f"Imported {len(state.participants)} participants "
        f"and {len(state.expenses)} expenses"
    )


@app.command("reset")
def reset(
    yes: bool = typer.Option(False, "--yes", help="Skip the confirmation prompt."),
) -> None:
    """Delete every participant and expense."""
    if not yes and not typer.confirm("Delete all data?"):
        raise typer.Exit(code=1)
    with _ledger_service() as service:
        service.reset()
    typer.echo("All data deleted")


def main() -> None:
    """Run the split-it CLI application."""
    app()


if __name__ == "__main__":
    main()
