from datetime import datetime
from typing import Literal, get_args

from app.models.domain.common_domain import DashboardRecord

NotificationType = Literal[
    "daily_summary",
    "failed_calls",
    "active_call",
    "password_changed",
    "payment_updated",
    "subscription_renewed",
    "subscription_created",
    "subscription_expired",
    "subscription_expiring_soon",
    "monthly_report_ready",
    "review_received",
    "review_negative",
    "campaign_sent",
    "automation_triggered",
    "guarantee_noshow_charged",
    "guarantee_card_validated",
    "integration_sync_complete",
    "integration_error",
]

NOTIFICATION_TYPES: frozenset[str] = frozenset(get_args(NotificationType))


class NotificationRecord(DashboardRecord):
    id: str
    type: NotificationType
    title: str
    message: str
    is_read: bool = False
    created_at: datetime
