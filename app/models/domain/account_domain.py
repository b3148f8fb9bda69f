from datetime import datetime

from app.models.domain.common_domain import DashboardRecord


class UserAccount(DashboardRecord):
    """Account summary returned by /auth/me and /user."""

    id: str
    email: str
    role: str = "user"
    company_name: str | None = None
    phone: str | None = None
    account_status: str  # trial, active, expired, suspended
    subscription_status: str | None = None
    plan: str | None = None
    trial_ends_at: datetime | None = None
    is_verified: bool = False
    onboarding_completed: bool = False
    created_at: datetime
