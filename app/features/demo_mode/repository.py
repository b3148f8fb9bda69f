"""
Fixture-backed repositories.

Every method is a pure function of the fixture store and its arguments:
filtering and pagination happen in memory and always build new lists,
so the store itself is never mutated. ``user_id`` is accepted for
interface parity and ignored, there is a single demo tenant.
"""

import copy
from collections import Counter
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from app.features.demo_mode.fixtures import FixtureStore, fixture_store
from app.models.domain.account_domain import UserAccount
from app.models.domain.call_domain import AIInsight, CallChartPoint, CallRecord, CallStats
from app.models.domain.guarantee_domain import GuaranteeSession, GuaranteeStats, NoShowCharge
from app.models.domain.integration_domain import IntegrationOrder
from app.models.domain.marketing_domain import CampaignRecord, MarketingContact, MarketingSnapshot
from app.models.domain.notification_domain import NOTIFICATION_TYPES, NotificationRecord
from app.models.domain.report_domain import MonthlyReport
from app.models.domain.review_domain import ReviewIncentive, ReviewRecord, ReviewRequest
from app.repositories.dashboard_repository import (
    AccountRepository,
    CallPage,
    CallRepository,
    DashboardRepositories,
    GuaranteeRepository,
    IntegrationRepository,
    MarketingRepository,
    NotificationFilters,
    NotificationRepository,
    RecommendationRepository,
    ReportRepository,
    ReviewFilters,
    ReviewRepository,
    WaitlistRepository,
)
from app.utils.query_params import (
    NOTIFICATION_WINDOWS,
    period_start,
    reservation_period_start,
    round_half_up,
    time_filter_multiplier,
)

# Counters that scale with the selected time window; rates and
# variations are period-independent.
SCALED_STAT_FIELDS = ("total_calls", "converted_clients", "appointments_taken")


def _now() -> datetime:
    return datetime.now(UTC)


class FixtureCallRepository(CallRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_calls(self, user_id: str, *, offset: int, limit: int) -> CallPage:
        calls = self._store.calls
        return CallPage(calls=list(calls[offset : offset + limit]), total=len(calls))

    async def get_call(self, user_id: str, call_id: str) -> CallRecord | None:
        return next((call for call in self._store.calls if call.id == call_id), None)

    async def get_stats(self, user_id: str, time_filter: str | None) -> CallStats:
        multiplier = time_filter_multiplier(time_filter)
        values = dict(self._store.call_stats)
        for field in SCALED_STAT_FIELDS:
            values[field] = round_half_up(values[field] * multiplier)
        return CallStats(**values)

    async def get_chart_data(self, user_id: str, time_filter: str | None) -> list[CallChartPoint]:
        return list(self._store.call_chart)

    async def get_ai_insights(self, user_id: str, time_filter: str | None) -> list[AIInsight]:
        return list(self._store.ai_insights)


class FixtureReviewRepository(ReviewRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_reviews(self, user_id: str, filters: ReviewFilters) -> list[ReviewRecord]:
        reviews = list(self._store.reviews)

        if filters.platform and filters.platform != "all":
            reviews = [review for review in reviews if review.platform == filters.platform]

        if filters.rating_min is not None:
            reviews = [review for review in reviews if review.rating >= filters.rating_min]

        if filters.search:
            needle = filters.search.lower()
            reviews = [
                review
                for review in reviews
                if needle in (review.content or "").lower()
                or needle in (review.reviewer_name or "").lower()
            ]

        return reviews

    async def get_review(self, user_id: str, review_id: str) -> ReviewRecord | None:
        return next((review for review in self._store.reviews if review.id == review_id), None)

    async def get_stats(self, user_id: str) -> dict[str, Any]:
        return copy.deepcopy(self._store.review_stats)

    async def list_requests(self, user_id: str) -> list[ReviewRequest]:
        return list(self._store.review_requests)

    async def get_request_stats(self, user_id: str) -> dict[str, Any]:
        return dict(self._store.review_request_stats)

    async def list_incentives(self, user_id: str) -> list[ReviewIncentive]:
        return list(self._store.incentives)


class FixtureMarketingRepository(MarketingRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def get_overview(self, user_id: str) -> MarketingSnapshot:
        return self._store.marketing_overview

    async def get_performance(self, user_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._store.marketing_performance))

    async def list_contacts(self, user_id: str) -> list[MarketingContact]:
        return list(self._store.contacts)

    async def get_contact_stats(self, user_id: str) -> dict[str, Any]:
        return copy.deepcopy(self._store.contact_stats)

    async def list_campaigns(self, user_id: str) -> list[CampaignRecord]:
        return list(self._store.campaigns)

    async def list_automations(self, user_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._store.automations))

    async def list_segments(self, user_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._store.segments))

    async def list_templates(self, user_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._store.templates))


class FixtureGuaranteeRepository(GuaranteeRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_sessions(self, user_id: str, period: str | None) -> list[GuaranteeSession]:
        since = reservation_period_start(period, _now())
        return [session for session in self._store.guarantee_sessions if session.created_at >= since]

    async def list_charges(self, user_id: str, period: str | None) -> list[NoShowCharge]:
        since = period_start(period, _now())
        charges = self._store.noshow_charges
        if since is None:
            return list(charges)
        return [charge for charge in charges if charge.created_at >= since]

    async def get_stats(self, user_id: str, period: str | None) -> GuaranteeStats:
        charges = await self.list_charges(user_id, period)
        succeeded = [charge for charge in charges if charge.status == "succeeded"]

        since = period_start(period, _now())
        honoured = [
            session
            for session in self._store.guarantee_sessions
            if session.status in ("validated", "completed")
            and (since is None or session.created_at >= since)
        ]

        return GuaranteeStats(
            noshow_count=len(charges),
            total_recovered=sum(charge.amount for charge in succeeded) // 100,
            failed_charges=len(charges) - len(succeeded),
            total_avoided=sum(session.penalty_amount * session.nb_persons for session in honoured),
        )

    async def get_config(self, user_id: str) -> dict[str, Any]:
        return copy.deepcopy(self._store.guarantee_config)

    async def get_stripe_status(self, user_id: str) -> dict[str, Any]:
        return dict(self._store.stripe_status)


class FixtureIntegrationRepository(IntegrationRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_connections(self, user_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._store.integrations))

    async def list_customers(self, user_id: str) -> tuple[list[dict[str, Any]], int]:
        return copy.deepcopy(list(self._store.integration_customers)), self._store.integration_customer_total

    async def list_orders(
        self, user_id: str, *, source: str | None, status: str | None
    ) -> list[IntegrationOrder]:
        orders = list(self._store.integration_orders)
        if source and source != "all":
            orders = [order for order in orders if order.external_source == source]
        if status and status != "all":
            orders = [order for order in orders if order.status == status]
        return orders

    async def get_order_stats(self, user_id: str, period: str | None) -> dict[str, Any]:
        since = period_start(period, _now())
        orders = [
            order
            for order in self._store.integration_orders
            if since is None or order.order_date >= since
        ]

        revenue = sum((Decimal(order.total_amount) for order in orders), Decimal("0"))
        revenue_by_source: Counter[str] = Counter()
        for order in orders:
            revenue_by_source[order.external_source] += float(order.total_amount)

        return {
            "totalOrders": len(orders),
            "totalRevenue": float(revenue),
            "avgOrderValue": round(float(revenue) / len(orders), 2) if orders else 0,
            "ordersByStatus": dict(Counter(order.status or "unknown" for order in orders)),
            "ordersByChannel": dict(Counter(order.channel or "unknown" for order in orders)),
            "revenueBySource": {source: round(total, 2) for source, total in revenue_by_source.items()},
        }


class FixtureReportRepository(ReportRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_reports(self, user_id: str) -> list[MonthlyReport]:
        return list(self._store.reports)


class FixtureWaitlistRepository(WaitlistRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_entries(self, user_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._store.waitlist))


class FixtureRecommendationRepository(RecommendationRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_recommendations(self, user_id: str) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._store.recommendations))


class FixtureNotificationRepository(NotificationRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def list_notifications(
        self, user_id: str, filters: NotificationFilters
    ) -> list[NotificationRecord]:
        notifications = list(self._store.notifications)

        window = NOTIFICATION_WINDOWS.get(filters.time_filter or "")
        if window is not None:
            since = _now() - window
            notifications = [item for item in notifications if item.created_at >= since]

        if filters.type in NOTIFICATION_TYPES:
            notifications = [item for item in notifications if item.type == filters.type]

        if filters.is_read is not None:
            notifications = [item for item in notifications if item.is_read == filters.is_read]

        return notifications

    async def count_unread(self, user_id: str) -> int:
        return sum(1 for item in self._store.notifications if not item.is_read)


class FixtureAccountRepository(AccountRepository):
    def __init__(self, store: FixtureStore):
        self._store = store

    async def get_account(self, user_id: str) -> UserAccount | None:
        return self._store.user

    async def get_settings(self, user_id: str) -> dict[str, Any]:
        return copy.deepcopy(self._store.settings)


def build_fixture_repositories(store: FixtureStore = fixture_store) -> DashboardRepositories:
    """Every dashboard area, answered from the fixture store."""
    return DashboardRepositories(
        calls=FixtureCallRepository(store),
        reviews=FixtureReviewRepository(store),
        marketing=FixtureMarketingRepository(store),
        guarantee=FixtureGuaranteeRepository(store),
        integrations=FixtureIntegrationRepository(store),
        reports=FixtureReportRepository(store),
        waitlist=FixtureWaitlistRepository(store),
        recommendations=FixtureRecommendationRepository(store),
        notifications=FixtureNotificationRepository(store),
        account=FixtureAccountRepository(store),
    )

