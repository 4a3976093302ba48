"""Plain-text expense report assembly."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from split_it.domain.money import format_currency, format_signed
from split_it.domain.value_objects import LedgerState
from split_it.services.settlement_service import (
    SettlementProjection,
    SettlementStatus,
)

REPORT_TITLE = "Expense report - SplitIt"
EXPENSE_HEADERS = ("Date", "Paid by", "Description", "Amount")
PLAN_HEADERS = ("Debtor (pays)", "Creditor (receives)", "Amount")
BALANCE_HEADERS = ("Participant", "Paid", "Balance")


def _render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[str]:
    widths = [len(header) for header in headers]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def _line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths))

    separator = "-+-".join("-" * width for width in widths)
    return [_line(headers), separator, *(_line(row) for row in rows)]


def render_settlement_report(
    state: LedgerState,
    projection: SettlementProjection,
    *,
    generated_at: datetime,
) -> str:
    """Render totals, expenses and the payment plan as a text document."""

    lines = [
        REPORT_TITLE,
        f"Generated on {generated_at:%Y-%m-%d} at {generated_at:%H:%M:%S}",
        "",
        f"Total spent: {format_currency(projection.total_spent)}",
        f"Average per person: {format_currency(projection.average_share)}",
        f"Participants: {projection.participant_count}",
        "",
        "Expenses",
    ]

    if state.expenses:
        lines.extend(
            _render_table(
                EXPENSE_HEADERS,
                [
                    (
                        f"{expense.created_at:%Y-%m-%d}",
                        expense.payer,
                        expense.description,
                        format_currency(expense.amount),
                    )
                    for expense in state.expenses
                ],
            )
        )
    else:
        lines.append("No expenses recorded yet.")

    if projection.balances:
        lines.extend(["", "Balances"])
        lines.extend(
            _render_table(
                BALANCE_HEADERS,
                [
                    (
                        line.participant,
                        format_currency(line.paid_total),
                        format_signed(line.net_balance),
                    )
                    for line in projection.balances
                ],
            )
        )

    lines.extend(["", "Payment plan (who owes whom)"])
    if projection.status is SettlementStatus.NO_DATA:
        lines.append("Add at least two participants and one expense to settle.")
    elif projection.status is SettlementStatus.BALANCED:
        lines.append("Everything is balanced!")
    else:
        lines.extend(
            _render_table(
                PLAN_HEADERS,
                [
                    (
                        transaction.from_participant,
                        transaction.to_participant,
                        format_currency(transaction.amount),
                    )
                    for transaction in projection.transactions
                ],
            )
        )

    return "\n".join(lines) + "\n"
