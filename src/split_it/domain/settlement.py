"""Greedy settlement planning over participant balances."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from split_it.domain.value_objects import Transaction

SETTLEMENT_TOLERANCE = Decimal("0.01")


@dataclass(slots=True)
class _OpenPosition:
    """Running balance of one debtor or creditor during planning."""

    name: str
    remaining: Decimal


def is_settled(balance: Decimal) -> bool:
    """Return True when a balance is within one cent of zero."""

    return abs(balance) < SETTLEMENT_TOLERANCE


def plan_settlement(balances: Mapping[str, Decimal]) -> list[Transaction]:
    """Build the payment plan that zeroes out ``balances``.

    Largest debt is paired with largest credit first. Both sides are walked
    with index cursors; matched entries keep their position and only their
    remaining amount changes. Ties keep the mapping's iteration order.
    """

    debtors = sorted(
        (
            _OpenPosition(name=name, remaining=balance)
            for name, balance in balances.items()
            if balance < -SETTLEMENT_TOLERANCE
        ),
        key=lambda position: position.remaining,
    )
    creditors = sorted(
        (
            _OpenPosition(name=name, remaining=balance)
            for name, balance in balances.items()
            if balance > SETTLEMENT_TOLERANCE
        ),
        key=lambda position: position.remaining,
        reverse=True,
    )

    transactions: list[Transaction] = []
    debtor_index = 0
    creditor_index = 0
    while debtor_index < len(debtors) and creditor_index < len(creditors):
        debtor = debtors[debtor_index]
        creditor = creditors[creditor_index]

        amount = min(abs(debtor.remaining), creditor.remaining)
        transactions.append(
            Transaction(
                from_participant=debtor.name,
                to_participant=creditor.name,
                amount=amount,
            )
        )
        debtor.remaining += amount
        creditor.remaining -= amount

        if is_settled(debtor.remaining):
            debtor_index += 1
        if is_settled(creditor.remaining):
            creditor_index += 1

    return transactions
