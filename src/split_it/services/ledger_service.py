"""Business service for participant and expense registration."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from typing import Protocol

from split_it.application.schemas.snapshot import LedgerSnapshot
from split_it.domain import ledger
from split_it.domain.errors import HasDependentExpensesError
from split_it.domain.value_objects import Expense, LedgerState

logger = logging.getLogger(__name__)


class SessionProtocol(Protocol):
    """Subset of SQLAlchemy session APIs used by this service."""

    def commit(self) -> None: ...
    def rollback(self) -> None: ...


class SnapshotRepositoryProtocol(Protocol):
    """Snapshot repository contract consumed by service."""

    def load(self, key: str) -> LedgerSnapshot | None: ...

    def save(self, key: str, snapshot: LedgerSnapshot) -> None: ...


@dataclass(slots=True, frozen=True)
class CreateExpenseInput:
    """Input model for expense creation."""

    payer: str | None
    amount: Decimal | str | int | float
    description: str | None = None


class LedgerService:
    """Applies one mutation per call and persists the full snapshot."""

    def __init__(
        self,
        *,
        snapshot_repository: SnapshotRepositoryProtocol,
        session: SessionProtocol,
        snapshot_key: str,
        default_description: str = ledger.DEFAULT_EXPENSE_DESCRIPTION,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._snapshot_repository = snapshot_repository
        self._session = session
        self._snapshot_key = snapshot_key
        self._default_description = default_description
        self._clock = clock or (lambda: datetime.now(tz=UTC))

    def get_state(self) -> LedgerState:
        snapshot = self._snapshot_repository.load(self._snapshot_key)
        if snapshot is None:
            return LedgerState.empty()
        return snapshot.to_state()

    def add_participant(self, name: str) -> LedgerState:
        state = ledger.add_participant(self.get_state(), name)
        self._persist(state)
        logger.info(
            "participant_added",
            extra={"participant": state.participants[-1]},
        )
        return state

    def remove_participant(self, name: str) -> LedgerState:
        current = self.get_state()
        try:
            state = ledger.remove_participant(current, name)
        except HasDependentExpensesError as exc:
            logger.warning(
                "participant_removal_rejected",
                extra={
                    "participant": name,
                    "expense_count": exc.details.get("expense_count", 0),
                },
            )
            raise
        if state == current:
            return current
        self._persist(state)
        logger.info("participant_removed", extra={"participant": name})
        return state

    def add_expense(self, payload: CreateExpenseInput) -> Expense:
        state, expense = ledger.add_expense(
            self.get_state(),
            payer=payload.payer,
            amount=payload.amount,
            description=payload.description,
            now=self._clock(),
            default_description=self._default_description,
        )
        self._persist(state)
        logger.info(
            "expense_added",
            extra={
                "expense_id": expense.id,
                "payer": expense.payer,
                "amount": str(expense.amount),
            },
        )
        return expense

    def delete_expense(self, expense_id: int) -> LedgerState:
        state = ledger.delete_expense(self.get_state(), expense_id)
        self._persist(state)
        logger.info("expense_deleted", extra={"expense_id": expense_id})
        return state

    def replace_state(self, snapshot: LedgerSnapshot) -> LedgerState:
        """Substitute the whole stored ledger with ``snapshot``."""

        state = snapshot.to_state()
        self._persist(state)
        logger.info(
            "snapshot_replaced",
            extra={
                "participant_count": len(state.participants),
                "expense_count": len(state.expenses),
            },
        )
        return state

    def reset(self) -> LedgerState:
        state = LedgerState.empty()
        self._persist(state)
        logger.info("ledger_reset", extra={"snapshot_key": self._snapshot_key})
        return state

    def _persist(self, state: LedgerState) -> None:
        try:
            self._snapshot_repository.save(
                self._snapshot_key, LedgerSnapshot.from_state(state)
            )
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
