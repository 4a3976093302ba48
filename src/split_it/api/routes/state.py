"""Whole-ledger snapshot routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from split_it.api.dependencies import get_ledger_service
from split_it.application.schemas.snapshot import LedgerSnapshot
from split_it.services.ledger_service import LedgerService

router = APIRouter(prefix="/state", tags=["State"])


@router.get("", response_model=LedgerSnapshot)
def get_state(
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> LedgerSnapshot:
    """Return the stored snapshot, empty on first run."""

    return LedgerSnapshot.from_state(service.get_state())


@router.put(
    "",
    response_model=LedgerSnapshot,
    responses={400: {"description": "Inconsistent snapshot"}},
)
def replace_state(
    payload: LedgerSnapshot,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> LedgerSnapshot:
    """Substitute participants and expenses with the given snapshot."""

    return LedgerSnapshot.from_state(service.replace_state(payload))


@router.delete("", response_model=LedgerSnapshot)
def reset_state(
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> LedgerSnapshot:
    """Clear every participant and expense."""

    return LedgerSnapshot.from_state(service.reset())
