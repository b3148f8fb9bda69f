"""
No-show guarantee endpoints.

Reservations are split into the buckets the guarantee page shows:
sessions still waiting for a card, sessions with a validated card, and
the validated ones expected today.
"""

from collections.abc import Callable
from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from app.models.domain.guarantee_domain import GuaranteeSession
from app.repositories.dashboard_repository import GuaranteeRepository
from app.utils.query_params import round_half_up


def summarize_reservations(sessions: list[GuaranteeSession], now: datetime | None = None) -> dict:
    today = (now or datetime.now(UTC)).date()

    pending = [session for session in sessions if session.status == "pending"]
    validated = [session for session in sessions if session.status == "validated"]
    expected_today = [session for session in validated if session.reservation_date.date() == today]

    awaiting_or_done = len(pending) + len(validated)
    validation_rate = round_half_up(len(validated) / awaiting_or_done * 100) if awaiting_or_done else 0

    return {
        "pending": pending,
        "validated": validated,
        "today": expected_today,
        "stats": {
            "pendingCount": len(pending),
            "validatedCount": len(validated),
            "todayCount": len(expected_today),
            "validationRate": validation_rate,
        },
    }


def build_router(repository: GuaranteeRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/guarantee", tags=["guarantee"])

    @router.get("/reservations")
    async def list_reservations(period: str | None = None, user_id: str = Depends(current_user_id)):
        sessions = await repository.list_sessions(user_id, period)
        return summarize_reservations(sessions)

    @router.get("/stats")
    async def get_guarantee_stats(period: str | None = None, user_id: str = Depends(current_user_id)):
        return await repository.get_stats(user_id, period)

    @router.get("/history")
    async def get_noshow_history(period: str | None = None, user_id: str = Depends(current_user_id)):
        charges = await repository.list_charges(user_id, period)
        recovered_cents = sum(charge.amount for charge in charges if charge.status == "succeeded")
        return {
            "noShows": charges,
            "total": len(charges),
            "totalRecovered": recovered_cents / 100,
            "totalFailed": sum(1 for charge in charges if charge.status == "failed"),
        }

    @router.get("/config")
    async def get_guarantee_config(user_id: str = Depends(current_user_id)):
        return await repository.get_config(user_id)

    @router.get("/stripe-status")
    async def get_stripe_status(user_id: str = Depends(current_user_id)):
        return await repository.get_stripe_status(user_id)

    return router
