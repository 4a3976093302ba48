"""API dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from split_it.core.settings import Settings, get_settings
from split_it.db.session import get_db_session
from split_it.repositories.snapshot_repository import SnapshotRepository
from split_it.services.ledger_service import LedgerService
from split_it.services.settlement_service import SettlementService


def get_ledger_service(
    session: Annotated[Session, Depends(get_db_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LedgerService:
    """Build ledger service with per-request session."""

    return LedgerService(
        snapshot_repository=SnapshotRepository(session),
        session=session,
        snapshot_key=settings.snapshot_key,
        default_description=settings.default_expense_description,
    )


def get_settlement_service() -> SettlementService:
    """Build the stateless settlement service."""

    return SettlementService()
