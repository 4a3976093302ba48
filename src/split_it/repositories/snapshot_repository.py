"""Key-value persistence for ledger snapshots."""

from __future__ import annotations

from sqlalchemy.orm import Session

from split_it.application.schemas.snapshot import LedgerSnapshot
from split_it.db.models.state_snapshot import StateSnapshot


class SnapshotRepository:
    """Repository storing one full ledger snapshot per key."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def load(self, key: str) -> LedgerSnapshot | None:
        row = self._session.get(StateSnapshot, key)
        if row is None:
            return None
        return LedgerSnapshot.model_validate(row.payload)

    def save(self, key: str, snapshot: LedgerSnapshot) -> None:
        payload = snapshot.to_payload()
        row = self._session.get(StateSnapshot, key)
        if row is None:
            self._session.add(StateSnapshot(key=key, payload=payload))
        else:
            row.payload = payload
        self._session.flush()
