"""
Fixture store for demo mode.

A single, fully populated tenant built once when the process starts.
Timestamps are relative to that instant so the dashboards always look
recent. Nothing here is ever written back.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from app.models.domain.account_domain import UserAccount
from app.models.domain.call_domain import AIInsight, CallChartPoint, CallRecord
from app.models.domain.guarantee_domain import GuaranteeSession, NoShowCharge
from app.models.domain.integration_domain import IntegrationOrder
from app.models.domain.marketing_domain import CampaignRecord, MarketingContact, MarketingSnapshot
from app.models.domain.notification_domain import NotificationRecord
from app.models.domain.report_domain import MonthlyReport
from app.models.domain.review_domain import ReviewIncentive, ReviewRecord, ReviewRequest

from . import account, calls, guarantee, integrations, marketing, reviews


@dataclass(frozen=True)
class FixtureStore:
    generated_at: datetime

    calls: tuple[CallRecord, ...]
    call_stats: dict[str, Any]
    call_chart: tuple[CallChartPoint, ...]
    ai_insights: tuple[AIInsight, ...]

    reviews: tuple[ReviewRecord, ...]
    review_stats: dict[str, Any]
    review_requests: tuple[ReviewRequest, ...]
    review_request_stats: dict[str, Any]
    incentives: tuple[ReviewIncentive, ...]

    marketing_overview: MarketingSnapshot
    marketing_performance: tuple[dict, ...]
    contacts: tuple[MarketingContact, ...]
    contact_stats: dict[str, Any]
    campaigns: tuple[CampaignRecord, ...]
    automations: tuple[dict, ...]
    segments: tuple[dict, ...]
    templates: tuple[dict, ...]

    guarantee_sessions: tuple[GuaranteeSession, ...]
    noshow_charges: tuple[NoShowCharge, ...]
    guarantee_config: dict[str, Any]
    stripe_status: dict[str, Any]

    integrations: tuple[dict, ...]
    integration_customers: tuple[dict, ...]
    integration_customer_total: int
    integration_orders: tuple[IntegrationOrder, ...]

    reports: tuple[MonthlyReport, ...]
    waitlist: tuple[dict, ...]
    recommendations: tuple[dict, ...]
    notifications: tuple[NotificationRecord, ...]
    user: UserAccount
    settings: dict[str, Any]


def build_fixture_store(now: datetime | None = None) -> FixtureStore:
    now = now or datetime.now(UTC)
    sessions = guarantee.build_sessions(now)

    return FixtureStore(
        generated_at=now,
        calls=calls.build_calls(now),
        call_stats=dict(calls.BASE_CALL_STATS),
        call_chart=calls.build_chart_data(now),
        ai_insights=calls.build_insights(),
        reviews=reviews.build_reviews(now),
        review_stats=dict(reviews.REVIEW_STATS),
        review_requests=reviews.build_review_requests(now),
        review_request_stats=dict(reviews.REVIEW_REQUEST_STATS),
        incentives=reviews.build_incentives(now),
        marketing_overview=marketing.MARKETING_OVERVIEW,
        marketing_performance=marketing.build_performance(now),
        contacts=marketing.build_contacts(now),
        contact_stats=dict(marketing.CONTACT_STATS),
        campaigns=marketing.build_campaigns(now),
        automations=marketing.AUTOMATIONS,
        segments=marketing.SEGMENTS,
        templates=marketing.TEMPLATES,
        guarantee_sessions=sessions,
        noshow_charges=guarantee.build_charges(sessions),
        guarantee_config=guarantee.GUARANTEE_CONFIG,
        stripe_status=dict(guarantee.STRIPE_STATUS),
        integrations=integrations.build_connections(now),
        integration_customers=integrations.build_customers(now),
        integration_customer_total=integrations.SYNCED_CUSTOMER_TOTAL,
        integration_orders=integrations.build_orders(now),
        reports=account.build_reports(now),
        waitlist=account.build_waitlist(now),
        recommendations=account.RECOMMENDATIONS,
        notifications=account.build_notifications(now),
        user=account.build_user(now),
        settings=account.DEMO_SETTINGS,
    )


fixture_store = build_fixture_store()

__all__ = ["FixtureStore", "build_fixture_store", "fixture_store"]
