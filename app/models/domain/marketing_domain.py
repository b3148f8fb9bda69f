from datetime import datetime
from typing import Literal

from app.models.domain.common_domain import DashboardRecord


class CampaignRecord(DashboardRecord):
    id: str
    name: str
    channel: Literal["email", "sms", "both"]
    status: Literal["draft", "scheduled", "sending", "sent"]
    sent_count: int = 0
    open_count: int = 0
    click_count: int = 0
    sent_at: datetime | None = None


class MarketingSnapshot(DashboardRecord):
    """Aggregate marketing counters for the overview page."""

    total_contacts: int
    new_contacts_period: int
    total_campaigns: int
    campaigns_sent_period: int
    total_emails_sent: int
    avg_open_rate: float
    avg_click_rate: float
    sms_delivery_rate: float
    total_revenue: float | None = None
    cost_per_conversion: float | None = None


class MarketingContact(DashboardRecord):
    id: str
    first_name: str
    last_name: str
    email: str | None = None
    phone: str | None = None
    source: str
    opt_in_email: bool
    opt_in_sms: bool
    tags: list[str] = []
    created_at: datetime
