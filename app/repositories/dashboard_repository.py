"""
Read-side repository interfaces for the dashboard.

Each business area exposes one abstract repository. The routers in
``app.routes`` only talk to these interfaces, so the same handlers serve
live data (PostgreSQL implementations) and the demo tenant (fixture
implementations). Which implementation backs a router is decided once,
at route registration.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from app.models.domain.account_domain import UserAccount
from app.models.domain.call_domain import AIInsight, CallChartPoint, CallRecord, CallStats
from app.models.domain.guarantee_domain import GuaranteeSession, GuaranteeStats, NoShowCharge
from app.models.domain.integration_domain import IntegrationOrder
from app.models.domain.marketing_domain import CampaignRecord, MarketingContact, MarketingSnapshot
from app.models.domain.notification_domain import NotificationRecord
from app.models.domain.report_domain import MonthlyReport
from app.models.domain.review_domain import ReviewIncentive, ReviewRecord, ReviewRequest


@dataclass(frozen=True)
class ReviewFilters:
    platform: str | None = None
    rating_min: int | None = None
    search: str | None = None


@dataclass(frozen=True)
class NotificationFilters:
    time_filter: str | None = None
    type: str | None = None
    is_read: bool | None = None


@dataclass(frozen=True)
class CallPage:
    calls: list[CallRecord]
    total: int


class CallRepository(ABC):
    @abstractmethod
    async def list_calls(self, user_id: str, *, offset: int, limit: int) -> CallPage: ...

    @abstractmethod
    async def get_call(self, user_id: str, call_id: str) -> CallRecord | None: ...

    @abstractmethod
    async def get_stats(self, user_id: str, time_filter: str | None) -> CallStats: ...

    @abstractmethod
    async def get_chart_data(self, user_id: str, time_filter: str | None) -> list[CallChartPoint]: ...

    @abstractmethod
    async def get_ai_insights(self, user_id: str, time_filter: str | None) -> list[AIInsight]: ...


class ReviewRepository(ABC):
    @abstractmethod
    async def list_reviews(self, user_id: str, filters: ReviewFilters) -> list[ReviewRecord]: ...

    @abstractmethod
    async def get_review(self, user_id: str, review_id: str) -> ReviewRecord | None: ...

    @abstractmethod
    async def get_stats(self, user_id: str) -> dict[str, Any]: ...

    @abstractmethod
    async def list_requests(self, user_id: str) -> list[ReviewRequest]: ...

    @abstractmethod
    async def get_request_stats(self, user_id: str) -> dict[str, Any]: ...

    @abstractmethod
    async def list_incentives(self, user_id: str) -> list[ReviewIncentive]: ...


class MarketingRepository(ABC):
    @abstractmethod
    async def get_overview(self, user_id: str) -> MarketingSnapshot: ...

    @abstractmethod
    async def get_performance(self, user_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def list_contacts(self, user_id: str) -> list[MarketingContact]: ...

    @abstractmethod
    async def get_contact_stats(self, user_id: str) -> dict[str, Any]: ...

    @abstractmethod
    async def list_campaigns(self, user_id: str) -> list[CampaignRecord]: ...

    @abstractmethod
    async def list_automations(self, user_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def list_segments(self, user_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def list_templates(self, user_id: str) -> list[dict[str, Any]]: ...


class GuaranteeRepository(ABC):
    @abstractmethod
    async def list_sessions(self, user_id: str, period: str | None) -> list[GuaranteeSession]: ...

    @abstractmethod
    async def get_stats(self, user_id: str, period: str | None) -> GuaranteeStats: ...

    @abstractmethod
    async def list_charges(self, user_id: str, period: str | None) -> list[NoShowCharge]: ...

    @abstractmethod
    async def get_config(self, user_id: str) -> dict[str, Any]: ...

    @abstractmethod
    async def get_stripe_status(self, user_id: str) -> dict[str, Any]: ...


class IntegrationRepository(ABC):
    @abstractmethod
    async def list_connections(self, user_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def list_customers(self, user_id: str) -> tuple[list[dict[str, Any]], int]: ...

    @abstractmethod
    async def list_orders(
        self, user_id: str, *, source: str | None, status: str | None
    ) -> list[IntegrationOrder]: ...

    @abstractmethod
    async def get_order_stats(self, user_id: str, period: str | None) -> dict[str, Any]: ...


class ReportRepository(ABC):
    @abstractmethod
    async def list_reports(self, user_id: str) -> list[MonthlyReport]: ...


class WaitlistRepository(ABC):
    @abstractmethod
    async def list_entries(self, user_id: str) -> list[dict[str, Any]]: ...


class RecommendationRepository(ABC):
    @abstractmethod
    async def list_recommendations(self, user_id: str) -> list[dict[str, Any]]: ...


class NotificationRepository(ABC):
    @abstractmethod
    async def list_notifications(
        self, user_id: str, filters: NotificationFilters
    ) -> list[NotificationRecord]: ...

    @abstractmethod
    async def count_unread(self, user_id: str) -> int: ...


class AccountRepository(ABC):
    @abstractmethod
    async def get_account(self, user_id: str) -> UserAccount | None: ...

    @abstractmethod
    async def get_settings(self, user_id: str) -> dict[str, Any]: ...


@dataclass(frozen=True)
class DashboardRepositories:
    """
    The repositories backing one route table.

    Areas left as ``None`` are not mounted for that table.
    """

    calls: CallRepository | None = None
    reviews: ReviewRepository | None = None
    marketing: MarketingRepository | None = None
    guarantee: GuaranteeRepository | None = None
    integrations: IntegrationRepository | None = None
    reports: ReportRepository | None = None
    waitlist: WaitlistRepository | None = None
    recommendations: RecommendationRepository | None = None
    notifications: NotificationRepository | None = None
    account: AccountRepository | None = None
