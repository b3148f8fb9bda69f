from datetime import datetime
from typing import Literal

from app.models.domain.common_domain import DashboardRecord

SessionStatus = Literal[
    "pending", "validated", "completed", "cancelled", "noshow_charged", "noshow_failed"
]


class GuaranteeSession(DashboardRecord):
    """Card-imprint guarantee attached to a reservation."""

    id: str
    reservation_id: str
    customer_name: str
    customer_email: str | None = None
    customer_phone: str | None = None
    nb_persons: int = 1
    reservation_date: datetime
    reservation_time: str | None = None
    status: SessionStatus
    penalty_amount: int  # euros per person
    reminder_count: int = 0
    validated_at: datetime | None = None
    created_at: datetime


class SessionSummary(DashboardRecord):
    customer_name: str
    nb_persons: int
    reservation_date: datetime


class NoShowCharge(DashboardRecord):
    id: str
    guarantee_session_id: str
    payment_intent_id: str | None = None
    amount: int  # cents
    currency: str = "eur"
    status: Literal["succeeded", "failed", "requires_action"]
    failure_reason: str | None = None
    disputed: bool = False
    dispute_reason: str | None = None
    created_at: datetime
    session: SessionSummary | None = None


class GuaranteeStats(DashboardRecord):
    noshow_count: int
    total_recovered: int
    failed_charges: int
    total_avoided: int
