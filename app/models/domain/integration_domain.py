from datetime import datetime

from app.models.domain.common_domain import DashboardRecord


class IntegrationOrder(DashboardRecord):
    """Order imported from a connected third-party platform."""

    id: str
    external_id: str
    external_source: str
    order_number: str | None = None
    status: str | None = None  # pending, confirmed, completed, cancelled, refunded
    total_amount: str
    currency: str = "EUR"
    payment_status: str | None = None
    channel: str | None = None
    customer_name: str | None = None
    items_count: int | None = None
    order_date: datetime
