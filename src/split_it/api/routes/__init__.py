"""API v1 router registration."""

from fastapi import APIRouter

from split_it.api.routes import expenses, participants, settlement, state

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(state.router)
v1_router.include_router(participants.router)
v1_router.include_router(expenses.router)
v1_router.include_router(settlement.router)
