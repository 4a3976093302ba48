"""Business service composing balances and the settlement plan."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from split_it.domain.balances import calculate_balances
from split_it.domain.settlement import plan_settlement
from split_it.domain.value_objects import LedgerState, Transaction

logger = logging.getLogger(__name__)

MIN_PARTICIPANTS_FOR_RESULTS = 2


class SettlementStatus(StrEnum):
    """Observable outcome of a settlement computation."""

    NO_DATA = "no_data"
    BALANCED = "balanced"
    PENDING = "pending"


@dataclass(frozen=True, slots=True)
class ParticipantBalance:
    """Computed balance line for one participant."""

    participant: str
    paid_total: Decimal
    net_balance: Decimal


@dataclass(frozen=True, slots=True)
class SettlementProjection:
    """Consolidated values consumed by API, CLI and report rendering."""

    status: SettlementStatus
    participant_count: int
    expense_count: int
    total_spent: Decimal
    average_share: Decimal
    balances: list[ParticipantBalance]
    transactions: list[Transaction]


def results_available(state: LedgerState) -> bool:
    """Return True when there is enough data to show a settlement."""

    return (
        len(state.participants) >= MIN_PARTICIPANTS_FOR_RESULTS
        and len(state.expenses) > 0
    )


class SettlementService:
    """Computes even-split balances and the greedy payment plan."""

    def compute(self, state: LedgerState) -> SettlementProjection:
        total_spent = state.total_spent()
        participant_count = len(state.participants)
        average_share = (
            total_spent / Decimal(participant_count)
            if participant_count
            else Decimal("0")
        )

        if not results_available(state):
            return SettlementProjection(
                status=SettlementStatus.NO_DATA,
                participant_count=participant_count,
                expense_count=len(state.expenses),
                total_spent=total_spent,
                average_share=average_share,
                balances=[],
                transactions=[],
            )

        balances = calculate_balances(state.participants, state.expenses)
        transactions = plan_settlement(balances)
        paid_totals = {name: Decimal("0") for name in state.participants}
        for expense in state.expenses:
            paid_totals[expense.payer] += expense.amount

        # creditors first, then debtors; ties keep participant order
        ordered_names = sorted(
            balances, key=lambda name: balances[name], reverse=True
        )
        balance_lines = [
            ParticipantBalance(
                participant=name,
                paid_total=paid_totals[name],
                net_balance=balances[name],
            )
            for name in ordered_names
        ]

        status = (
            SettlementStatus.PENDING if transactions else SettlementStatus.BALANCED
        )
        logger.info(
            "settlement_computed",
            extra={
                "status": status.value,
                "participant_count": participant_count,
                "transaction_count": len(transactions),
            },
        )
        return SettlementProjection(
            status=status,
            participant_count=participant_count,
            expense_count=len(state.expenses),
            total_spent=total_spent,
            average_share=average_share,
            balances=balance_lines,
            transactions=transactions,
        )
