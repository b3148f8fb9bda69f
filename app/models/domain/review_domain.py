from datetime import datetime
from typing import Literal

from app.models.domain.common_domain import DashboardRecord


class ReviewRecord(DashboardRecord):
    """A review collected from one of the supported platforms."""

    id: str
    platform: str  # google, tripadvisor, facebook, yelp
    rating: int
    content: str | None = None
    reviewer_name: str | None = None
    review_date: datetime | None = None
    response_text: str | None = None
    response_status: Literal["none", "draft", "published"] = "none"
    sentiment: str | None = None
    is_read: bool = False
    created_at: datetime


class ReviewRequest(DashboardRecord):
    """A solicitation sent to a customer after a visit."""

    id: str
    customer_name: str | None = None
    customer_email: str | None = None
    customer_phone: str | None = None
    status: str  # pending, scheduled, sent, clicked, completed, expired
    platform: str | None = None
    sent_at: datetime | None = None
    scheduled_for: datetime | None = None
    clicked_at: datetime | None = None
    completed_at: datetime | None = None


class ReviewIncentive(DashboardRecord):
    id: str
    name: str
    type: str  # percentage, fixed_amount, free_item, ...
    value: int | None = None
    min_purchase: int | None = None
    description: str | None = None
    is_default: bool = False
    usage_count: int = 0
    created_at: datetime
