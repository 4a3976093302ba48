from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from split_it.application.schemas.snapshot import LedgerSnapshot
from split_it.db.models.state_snapshot import StateSnapshot
from split_it.repositories.snapshot_repository import SnapshotRepository


def _snapshot(*participants: str) -> LedgerSnapshot:
    return LedgerSnapshot(participants=list(participants))


def test_load_returns_none_for_missing_key(
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    with sqlite_session_factory() as session:
        assert SnapshotRepository(session).load("splitItData") is None


def test_save_then_load_substitutes_whole_snapshot(
    sqlite_session_factory: sessionmaker[Session],
) -> None:
    with sqlite_session_factory() as session:
        repository = SnapshotRepository(session)
        repository.save("splitItData", _snapshot("Ana", "Juan"))
        session.commit()
        repository.save("splitItData", _snapshot("Mia"))
        session.commit()

    with sqlite_session_factory() as session:
        loaded = SnapshotRepository(session).load("splitItData")
        rows = session.query(StateSnapshot).count()

    assert loaded is not None
    assert loaded.participants == ["Mia"]
    assert rows == 1


def test_keys_are_independent(sqlite_session_factory: sessionmaker[Session]) -> None:
    with sqlite_session_factory() as session:
        repository = SnapshotRepository(session)
        repository.save("trip", _snapshot("Ana"))
        repository.save("flat", _snapshot("Bia"))
        session.commit()

        assert repository.load("trip") == _snapshot("Ana")
        assert repository.load("flat") == _snapshot("Bia")
        assert repository.load("home") is None
