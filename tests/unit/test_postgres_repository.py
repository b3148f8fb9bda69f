"""
Tests for the PostgreSQL repositories with the db helpers patched out.
"""

from datetime import UTC, date, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from app.db.helpers import DatabaseError
from app.repositories.dashboard_repository import NotificationFilters, ReviewFilters
from app.repositories.postgres_repository import (
    PostgresCallRepository,
    PostgresNotificationRepository,
    PostgresReportRepository,
    PostgresReviewRepository,
    build_postgres_repositories,
)

MODULE = "app.repositories.postgres_repository"
NOW = datetime(2026, 3, 14, 12, 0, tzinfo=UTC)


def _call_row(**overrides):
    row = {
        "id": "c1",
        "phone_number": "+33600000000",
        "status": "completed",
        "duration": 120,
        "start_time": NOW,
        "end_time": None,
        "event_type": "reservation",
        "conversion_result": "",
        "client_name": "Alice",
        "client_mood": None,
        "appointment_date": None,
        "nb_personnes": 2,
        "summary": None,
        "tags": None,
    }
    row.update(overrides)
    return row


@pytest.mark.asyncio
async def test_list_calls_pages_with_limit_and_offset(monkeypatch):
    fetch_all = AsyncMock(return_value=[_call_row(), _call_row(id="c2")])
    fetch_val = AsyncMock(return_value=42)
    monkeypatch.setattr(f"{MODULE}.fetch_all", fetch_all)
    monkeypatch.setattr(f"{MODULE}.fetch_val", fetch_val)

    page = await PostgresCallRepository().list_calls("user-123", offset=20, limit=10)

    assert page.total == 42
    assert [call.id for call in page.calls] == ["c1", "c2"]
    assert page.calls[0].conversion_result is None
    assert page.calls[0].tags == []
    assert fetch_all.await_args.args[1] == ("user-123", 10, 20)


@pytest.mark.asyncio
async def test_get_call_missing_row_returns_none(monkeypatch):
    monkeypatch.setattr(f"{MODULE}.fetch_one", AsyncMock(return_value=None))
    assert await PostgresCallRepository().get_call("user-123", "nope") is None


@pytest.mark.asyncio
async def test_call_stats_compare_with_previous_window(monkeypatch):
    windows = [
        {"total_calls": 20, "converted_calls": 10, "appointments": 8, "avg_duration": 150.4},
        {"total_calls": 10, "converted_calls": 4, "appointments": 8, "avg_duration": 100},
    ]
    monkeypatch.setattr(f"{MODULE}.fetch_one", AsyncMock(side_effect=windows))
    monkeypatch.setattr(f"{MODULE}.fetch_val", AsyncMock(side_effect=[6, 3]))

    stats = await PostgresCallRepository().get_stats("user-123", "week")

    assert stats.total_calls == 20
    assert stats.calls_variation == 100.0
    assert stats.conversion_rate == 50.0
    assert stats.conversion_variation == 10.0
    assert stats.avg_duration == 150
    assert stats.reminders_sent == 6
    assert stats.reminder_variation == 100.0
    assert stats.appointments_variation == 0.0


@pytest.mark.asyncio
async def test_chart_data_rows_become_points(monkeypatch):
    rows = [{"day": date(2026, 3, 13), "total_calls": 5, "completed_calls": 3, "average_duration": 99.6}]
    monkeypatch.setattr(f"{MODULE}.fetch_all", AsyncMock(return_value=rows))

    points = await PostgresCallRepository().get_chart_data("user-123", None)

    assert points[0].date == "2026-03-13"
    assert points[0].average_duration == 100


@pytest.mark.asyncio
async def test_ai_insights_analyse_the_selected_window(monkeypatch):
    fetch_all = AsyncMock(return_value=[_call_row()])
    monkeypatch.setattr(f"{MODULE}.fetch_all", fetch_all)

    insights = await PostgresCallRepository().get_ai_insights("user-123", "hour")

    user_id, start, end = fetch_all.await_args.args[1]
    assert user_id == "user-123"
    assert end - start == timedelta(hours=1)
    assert len(insights) == 3


@pytest.mark.asyncio
async def test_ai_insights_default_to_the_trailing_week(monkeypatch):
    fetch_all = AsyncMock(return_value=[])
    monkeypatch.setattr(f"{MODULE}.fetch_all", fetch_all)

    await PostgresCallRepository().get_ai_insights("user-123", None)

    _, start, end = fetch_all.await_args.args[1]
    assert end - start == timedelta(days=7)


@pytest.mark.asyncio
async def test_review_filters_build_where_clause(monkeypatch):
    fetch_all = AsyncMock(return_value=[])
    monkeypatch.setattr(f"{MODULE}.fetch_all", fetch_all)

    await PostgresReviewRepository().list_reviews(
        "user-123", ReviewFilters(platform="google", rating_min=4, search="tartare")
    )

    query, params = fetch_all.await_args.args
    assert "platform = %s" in query
    assert "rating >= %s" in query
    assert "ILIKE" in query
    assert params == ("user-123", "google", 4, "%tartare%", "%tartare%")


@pytest.mark.asyncio
async def test_review_filters_skip_all_platform(monkeypatch):
    fetch_all = AsyncMock(return_value=[])
    monkeypatch.setattr(f"{MODULE}.fetch_all", fetch_all)

    await PostgresReviewRepository().list_reviews("user-123", ReviewFilters(platform="all"))

    query, params = fetch_all.await_args.args
    assert "platform = %s" not in query
    assert params == ("user-123",)


@pytest.mark.asyncio
async def test_notification_filters_ignore_unknown_type(monkeypatch):
    fetch_all = AsyncMock(return_value=[])
    monkeypatch.setattr(f"{MODULE}.fetch_all", fetch_all)

    await PostgresNotificationRepository().list_notifications(
        "user-123", NotificationFilters(time_filter="forever", type="nope", is_read=False)
    )

    query, params = fetch_all.await_args.args
    assert "type = %s" not in query
    assert "created_at >= %s" not in query
    assert params == ("user-123", False)


@pytest.mark.asyncio
async def test_report_status_follows_email_timestamp(monkeypatch):
    rows = [
        {"id": "r2", "user_id": "user-123", "period_start": datetime(2026, 2, 1, tzinfo=UTC),
         "pdf_path": "reports/r2.pdf", "generated_at": NOW, "emailed_at": NOW},
        {"id": "r1", "user_id": "user-123", "period_start": datetime(2026, 1, 1, tzinfo=UTC),
         "pdf_path": "reports/r1.pdf", "generated_at": NOW, "emailed_at": None},
    ]
    monkeypatch.setattr(f"{MODULE}.fetch_all", AsyncMock(return_value=rows))

    reports = await PostgresReportRepository().list_reports("user-123")

    assert [(report.report_month, report.status) for report in reports] == [
        ("2026-02", "sent"),
        ("2026-01", "pdf_generated"),
    ]


@pytest.mark.asyncio
async def test_database_errors_propagate(monkeypatch):
    monkeypatch.setattr(
        f"{MODULE}.fetch_val", AsyncMock(side_effect=DatabaseError("down", operation="fetch_val"))
    )

    with pytest.raises(DatabaseError):
        await PostgresNotificationRepository().count_unread("user-123")


def test_live_repositories_cover_owned_areas_only():
    repositories = build_postgres_repositories()

    assert repositories.calls is not None
    assert repositories.reviews is not None
    assert repositories.notifications is not None
    assert repositories.reports is not None
    assert repositories.marketing is None
    assert repositories.guarantee is None
