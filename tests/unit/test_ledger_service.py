from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from split_it.application.schemas.snapshot import LedgerSnapshot
from split_it.domain.errors import DuplicateNameError, HasDependentExpensesError
from split_it.services.ledger_service import CreateExpenseInput, LedgerService

SNAPSHOT_KEY = "splitItData"


class FakeSession:
    def __init__(self) -> None:
        self.commits = 0
        self.rolled_back = False

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rolled_back = True


@dataclass
class FakeSnapshotRepository:
    snapshots: dict[str, LedgerSnapshot] = field(default_factory=dict)
    fail_on_save: bool = False

    def load(self, key: str) -> LedgerSnapshot | None:
        return self.snapshots.get(key)

    def save(self, key: str, snapshot: LedgerSnapshot) -> None:
        if self.fail_on_save:
            raise RuntimeError("storage offline")
        self.snapshots[key] = snapshot


def build_service(
    repository: FakeSnapshotRepository, session: FakeSession
) -> LedgerService:
    return LedgerService(
        snapshot_repository=repository,
        session=session,
        snapshot_key=SNAPSHOT_KEY,
        clock=lambda: datetime(2024, 5, 1, 18, 30, tzinfo=UTC),
    )


def test_get_state_is_empty_on_first_run() -> None:
    service = build_service(FakeSnapshotRepository(), FakeSession())

    state = service.get_state()

    assert state.participants == ()
    assert state.expenses == ()


def test_mutations_persist_full_snapshot_and_commit() -> None:
    repository = FakeSnapshotRepository()
    session = FakeSession()
    service = build_service(repository, session)

    service.add_participant("Ana")
    service.add_participant("Juan")
    expense = service.add_expense(
        CreateExpenseInput(payer="Ana", amount="100", description="Asado")
    )

    stored = repository.snapshots[SNAPSHOT_KEY]
    assert stored.participants == ["Ana", "Juan"]
    assert [record.id for record in stored.expenses] == [expense.id]
    assert stored.expenses[0].amount == Decimal("100.00")
    assert session.commits == 3


def test_rejected_mutation_leaves_snapshot_untouched() -> None:
    repository = FakeSnapshotRepository()
    session = FakeSession()
    service = build_service(repository, session)
    service.add_participant("Ana")
    before = repository.snapshots[SNAPSHOT_KEY]

    with pytest.raises(DuplicateNameError):
        service.add_participant("Ana")

    assert repository.snapshots[SNAPSHOT_KEY] is before
    assert session.commits == 1


def test_removing_payer_is_rejected_and_logged(
    caplog: pytest.LogCaptureFixture,
) -> None:
    repository = FakeSnapshotRepository()
    service = build_service(repository, FakeSession())
    service.add_participant("Ana")
    service.add_participant("Juan")
    service.add_expense(CreateExpenseInput(payer="Ana", amount="100"))

    with caplog.at_level(logging.WARNING), pytest.raises(HasDependentExpensesError):
        service.remove_participant("Ana")

    assert service.get_state().participants == ("Ana", "Juan")
    assert any(
        record.getMessage() == "participant_removal_rejected"
        for record in caplog.records
    )


def test_remove_unknown_participant_does_not_write() -> None:
    repository = FakeSnapshotRepository()
    session = FakeSession()
    service = build_service(repository, session)
    service.add_participant("Ana")

    state = service.remove_participant("Zoe")

    assert state.participants == ("Ana",)
    assert session.commits == 1


def test_storage_failure_rolls_back_and_propagates() -> None:
    repository = FakeSnapshotRepository(fail_on_save=True)
    session = FakeSession()
    service = build_service(repository, session)

    with pytest.raises(RuntimeError):
        service.add_participant("Ana")

    assert session.rolled_back is True
    assert session.commits == 0


def test_replace_state_and_reset() -> None:
    repository = FakeSnapshotRepository()
    service = build_service(repository, FakeSession())
    snapshot = LedgerSnapshot.model_validate(
        {
            "participants": ["A", "B"],
            "expenses": [
                {
                    "id": 1,
                    "payer": "A",
                    "description": "Taxi",
                    "amount": 20,
                    "date": "2024-04-01T10:00:00Z",
                }
            ],
        }
    )

    replaced = service.replace_state(snapshot)
    cleared = service.reset()

    assert replaced.participants == ("A", "B")
    assert replaced.expenses[0].amount == Decimal("20.00")
    assert cleared.participants == ()
    assert repository.snapshots[SNAPSHOT_KEY].participants == []
