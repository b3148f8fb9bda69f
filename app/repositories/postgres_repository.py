"""
PostgreSQL-backed dashboard repositories.

Only the areas whose tables this service owns are implemented here:
calls, reviews (with requests and incentives), notifications and
monthly reports. Every query is scoped to the requesting user.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from app.db.helpers import fetch_all, fetch_one, fetch_val
from app.models.domain.call_domain import AIInsight, CallChartPoint, CallRecord, CallStats
from app.models.domain.notification_domain import NOTIFICATION_TYPES, NotificationRecord
from app.models.domain.report_domain import MonthlyReport
from app.models.domain.review_domain import ReviewIncentive, ReviewRecord, ReviewRequest
from app.repositories.dashboard_repository import (
    CallPage,
    CallRepository,
    DashboardRepositories,
    NotificationFilters,
    NotificationRepository,
    ReportRepository,
    ReviewFilters,
    ReviewRepository,
)
from app.services.call_insights import generate_call_insights
from app.utils.query_params import NOTIFICATION_WINDOWS, percent_change, time_filter_window


# Calls without an explicit conversion result predate the conversion
# tracking; a completed one counts as converted.
CONVERTED_CALL_CONDITION = (
    "(conversion_result = 'converted' "
    "OR (status = 'completed' AND COALESCE(conversion_result, '') = ''))"
)

REVIEW_STATS_WINDOW = timedelta(days=30)


class PostgresCallRepository(CallRepository):
    CALL_SELECT_COLUMNS = """
        id, phone_number, status, duration, start_time, end_time, event_type,
        conversion_result, client_name, client_mood, appointment_date,
        nb_personnes, summary, tags
    """

    @classmethod
    def _row_to_call(cls, row: dict | None) -> CallRecord | None:
        if not row:
            return None

        return CallRecord(
            id=str(row["id"]),
            phone_number=row["phone_number"],
            status=row["status"],
            duration=row.get("duration"),
            start_time=row["start_time"],
            end_time=row.get("end_time"),
            event_type=row.get("event_type"),
            conversion_result=row.get("conversion_result") or None,
            client_name=row.get("client_name"),
            client_mood=row.get("client_mood"),
            appointment_date=row.get("appointment_date"),
            nb_personnes=row.get("nb_personnes"),
            summary=row.get("summary"),
            tags=list(row.get("tags") or []),
        )

    async def list_calls(self, user_id: str, *, offset: int, limit: int) -> CallPage:
        query = f"""
            SELECT {self.CALL_SELECT_COLUMNS}
            FROM calls
            WHERE user_id = %s
            ORDER BY start_time DESC
            LIMIT %s OFFSET %s
        """
        rows = await fetch_all(query, (user_id, limit, offset))
        total = await fetch_val("SELECT COUNT(*) FROM calls WHERE user_id = %s", (user_id,))
        return CallPage(calls=[self._row_to_call(row) for row in rows], total=int(total or 0))

    async def get_call(self, user_id: str, call_id: str) -> CallRecord | None:
        query = f"SELECT {self.CALL_SELECT_COLUMNS} FROM calls WHERE id = %s AND user_id = %s"
        row = await fetch_one(query, (call_id, user_id))
        return self._row_to_call(row)

    async def _window_totals(self, user_id: str, start: datetime, end: datetime) -> dict[str, Any]:
        query = f"""
            SELECT
                COUNT(*) AS total_calls,
                COUNT(*) FILTER (WHERE {CONVERTED_CALL_CONDITION}) AS converted_calls,
                COUNT(*) FILTER (WHERE appointment_date IS NOT NULL) AS appointments,
                COALESCE(AVG(duration) FILTER (WHERE status = 'completed'), 0) AS avg_duration
            FROM calls
            WHERE user_id = %s AND start_time >= %s AND start_time < %s
        """
        row = await fetch_one(query, (user_id, start, end)) or {}
        reminders = await fetch_val(
            """
            SELECT COALESCE(SUM(reminder_count), 0)
            FROM guarantee_sessions
            WHERE user_id = %s AND created_at >= %s AND created_at < %s
            """,
            (user_id, start, end),
        )

        total = int(row.get("total_calls") or 0)
        converted = int(row.get("converted_calls") or 0)
        return {
            "total": total,
            "converted": converted,
            "appointments": int(row.get("appointments") or 0),
            "avg_duration": float(row.get("avg_duration") or 0),
            "conversion_rate": converted / total * 100 if total else 0.0,
            "reminders": int(reminders or 0),
        }

    async def get_stats(self, user_id: str, time_filter: str | None) -> CallStats:
        """
        Headline counters for the selected window, each with its variation
        against the window of the same length immediately before it.
        """
        start, end = time_filter_window(time_filter)
        previous_start = start - (end - start)

        current = await self._window_totals(user_id, start, end)
        previous = await self._window_totals(user_id, previous_start, start)

        return CallStats(
            total_calls=current["total"],
            calls_variation=percent_change(current["total"], previous["total"]),
            conversion_rate=round(current["conversion_rate"], 1),
            conversion_variation=round(current["conversion_rate"] - previous["conversion_rate"], 1),
            avg_duration=round(current["avg_duration"]),
            duration_variation=percent_change(current["avg_duration"], previous["avg_duration"]),
            reminders_sent=current["reminders"],
            reminder_variation=percent_change(current["reminders"], previous["reminders"]),
            converted_clients=current["converted"],
            converted_clients_variation=percent_change(current["converted"], previous["converted"]),
            appointments_taken=current["appointments"],
            appointments_variation=percent_change(current["appointments"], previous["appointments"]),
        )

    async def get_chart_data(self, user_id: str, time_filter: str | None) -> list[CallChartPoint]:
        start, end = time_filter_window(time_filter)
        query = """
            SELECT
                DATE(start_time) AS day,
                COUNT(*) AS total_calls,
                COUNT(*) FILTER (WHERE status = 'completed') AS completed_calls,
                COALESCE(AVG(duration) FILTER (WHERE status = 'completed'), 0) AS average_duration
            FROM calls
            WHERE user_id = %s AND start_time >= %s AND start_time < %s
            GROUP BY DATE(start_time)
            ORDER BY DATE(start_time)
        """
        rows = await fetch_all(query, (user_id, start, end))
        return [
            CallChartPoint(
                date=row["day"].isoformat(),
                total_calls=int(row["total_calls"]),
                completed_calls=int(row["completed_calls"]),
                average_duration=round(float(row["average_duration"])),
            )
            for row in rows
        ]

    async def get_ai_insights(self, user_id: str, time_filter: str | None) -> list[AIInsight]:
        start, end = time_filter_window(time_filter)
        query = f"""
            SELECT {self.CALL_SELECT_COLUMNS}
            FROM calls
            WHERE user_id = %s AND start_time >= %s AND start_time < %s
            ORDER BY start_time DESC
        """
        rows = await fetch_all(query, (user_id, start, end))
        return generate_call_insights([self._row_to_call(row) for row in rows])


class PostgresReviewRepository(ReviewRepository):
    REVIEW_SELECT_COLUMNS = """
        id, platform, rating, content, reviewer_name, review_date,
        response_text, response_status, sentiment, is_read, created_at
    """

    @classmethod
    def _row_to_review(cls, row: dict | None) -> ReviewRecord | None:
        if not row:
            return None

        return ReviewRecord(
            id=str(row["id"]),
            platform=row["platform"],
            rating=row["rating"],
            content=row.get("content"),
            reviewer_name=row.get("reviewer_name"),
            review_date=row.get("review_date"),
            response_text=row.get("response_text"),
            response_status=row.get("response_status") or "none",
            sentiment=row.get("sentiment"),
            is_read=bool(row.get("is_read")),
            created_at=row["created_at"],
        )

    @classmethod
    def _row_to_request(cls, row: dict) -> ReviewRequest:
        return ReviewRequest(
            id=str(row["id"]),
            customer_name=row.get("customer_name"),
            customer_email=row.get("customer_email"),
            customer_phone=row.get("customer_phone"),
            status=row["status"],
            platform=row.get("review_confirmed_platform") or row.get("platform_clicked"),
            sent_at=row.get("sent_at"),
            scheduled_for=row.get("scheduled_at"),
            clicked_at=row.get("link_clicked_at"),
            completed_at=row.get("review_confirmed_at"),
        )

    @classmethod
    def _row_to_incentive(cls, row: dict) -> ReviewIncentive:
        incentive_type = row["type"]
        if incentive_type == "percentage":
            value = row.get("percentage_value")
        elif incentive_type == "fixed_amount" and row.get("fixed_amount_value") is not None:
            value = row["fixed_amount_value"] // 100
        else:
            value = None

        minimum_purchase = row.get("minimum_purchase")
        return ReviewIncentive(
            id=str(row["id"]),
            name=row.get("display_message") or row.get("free_item_name") or incentive_type,
            type=incentive_type,
            value=value,
            min_purchase=minimum_purchase // 100 if minimum_purchase else None,
            description=row.get("custom_description") or row.get("free_item_name"),
            is_default=bool(row.get("is_default")),
            usage_count=int(row.get("usage_count") or 0),
            created_at=row["created_at"],
        )

    async def list_reviews(self, user_id: str, filters: ReviewFilters) -> list[ReviewRecord]:
        conditions = ["user_id = %s"]
        params: list[Any] = [user_id]

        if filters.platform and filters.platform != "all":
            conditions.append("platform = %s")
            params.append(filters.platform)

        if filters.rating_min is not None:
            conditions.append("rating >= %s")
            params.append(filters.rating_min)

        if filters.search:
            conditions.append("(content ILIKE %s OR reviewer_name ILIKE %s)")
            pattern = f"%{filters.search}%"
            params.extend([pattern, pattern])

        query = f"""
            SELECT {self.REVIEW_SELECT_COLUMNS}
            FROM reviews
            WHERE {" AND ".join(conditions)}
            ORDER BY review_date DESC NULLS LAST, created_at DESC
        """
        rows = await fetch_all(query, tuple(params))
        return [self._row_to_review(row) for row in rows]

    async def get_review(self, user_id: str, review_id: str) -> ReviewRecord | None:
        query = f"SELECT {self.REVIEW_SELECT_COLUMNS} FROM reviews WHERE id = %s AND user_id = %s"
        row = await fetch_one(query, (review_id, user_id))
        return self._row_to_review(row)

    async def get_stats(self, user_id: str) -> dict[str, Any]:
        since = datetime.now(UTC) - REVIEW_STATS_WINDOW
        totals = await fetch_one(
            """
            SELECT
                COUNT(*) AS total_reviews,
                COALESCE(AVG(rating), 0) AS average_rating,
                COUNT(*) FILTER (WHERE created_at >= %s) AS new_reviews,
                COUNT(*) FILTER (WHERE response_status = 'published') AS responded
            FROM reviews
            WHERE user_id = %s
            """,
            (since, user_id),
        ) or {}
        ratings = await fetch_all(
            "SELECT rating::text AS key, COUNT(*) AS count FROM reviews WHERE user_id = %s GROUP BY rating",
            (user_id,),
        )
        platforms = await fetch_all(
            "SELECT platform AS key, COUNT(*) AS count FROM reviews WHERE user_id = %s GROUP BY platform",
            (user_id,),
        )
        sentiments = await fetch_all(
            """
            SELECT sentiment AS key, COUNT(*) AS count
            FROM reviews
            WHERE user_id = %s AND sentiment IS NOT NULL
            GROUP BY sentiment
            """,
            (user_id,),
        )

        total = int(totals.get("total_reviews") or 0)
        average = float(totals.get("average_rating") or 0)
        response_rate = round(int(totals.get("responded") or 0) / total * 100, 1) if total else 0.0

        distribution = {str(star): 0 for star in range(5, 0, -1)}
        distribution.update({row["key"]: int(row["count"]) for row in ratings})

        return {
            "totalReviews": total,
            "averageRating": round(average, 1),
            "newReviewsPeriod": int(totals.get("new_reviews") or 0),
            "responseRate": response_rate,
            "ratingDistribution": distribution,
            "platformBreakdown": {row["key"]: int(row["count"]) for row in platforms},
            "sentimentBreakdown": {row["key"]: int(row["count"]) for row in sentiments},
            # Average rating on a 0-100 scale, weighted with the response rate.
            "reputationScore": round(average / 5 * 80 + response_rate / 100 * 20) if total else 0,
        }

    async def list_requests(self, user_id: str) -> list[ReviewRequest]:
        query = """
            SELECT id, customer_name, customer_email, customer_phone, status,
                   platform_clicked, review_confirmed_platform, sent_at,
                   scheduled_at, link_clicked_at, review_confirmed_at
            FROM review_requests
            WHERE user_id = %s
            ORDER BY created_at DESC
        """
        rows = await fetch_all(query, (user_id,))
        return [self._row_to_request(row) for row in rows]

    async def get_request_stats(self, user_id: str) -> dict[str, Any]:
        since = datetime.now(UTC) - REVIEW_STATS_WINDOW
        row = await fetch_one(
            """
            SELECT
                COUNT(*) AS total_requests,
                COUNT(*) FILTER (WHERE sent_at >= %s) AS sent_period,
                COUNT(*) FILTER (WHERE sent_at IS NOT NULL) AS sent_total,
                COUNT(*) FILTER (WHERE review_confirmed_at IS NOT NULL) AS confirmed,
                COUNT(*) FILTER (WHERE promo_code IS NOT NULL) AS promos_generated,
                COUNT(*) FILTER (WHERE promo_code_used_at IS NOT NULL) AS promos_used
            FROM review_requests
            WHERE user_id = %s
            """,
            (since, user_id),
        ) or {}

        sent_total = int(row.get("sent_total") or 0)
        confirmed = int(row.get("confirmed") or 0)
        return {
            "totalRequests": int(row.get("total_requests") or 0),
            "sentThisPeriod": int(row.get("sent_period") or 0),
            "reviewsCollected": confirmed,
            "conversionRate": round(confirmed / sent_total * 100, 1) if sent_total else 0.0,
            "promosGenerated": int(row.get("promos_generated") or 0),
            "promosUsed": int(row.get("promos_used") or 0),
        }

    async def list_incentives(self, user_id: str) -> list[ReviewIncentive]:
        query = """
            SELECT i.id, i.type, i.percentage_value, i.fixed_amount_value, i.free_item_name,
                   i.custom_description, i.display_message, i.minimum_purchase,
                   i.is_default, i.created_at,
                   COUNT(r.id) FILTER (WHERE r.promo_code_used_at IS NOT NULL) AS usage_count
            FROM review_incentives i
            LEFT JOIN review_requests r ON r.incentive_id = i.id
            WHERE i.user_id = %s AND i.is_active = true
            GROUP BY i.id
            ORDER BY i.is_default DESC, i.created_at DESC
        """
        rows = await fetch_all(query, (user_id,))
        return [self._row_to_incentive(row) for row in rows]


class PostgresNotificationRepository(NotificationRepository):
    @classmethod
    def _row_to_notification(cls, row: dict) -> NotificationRecord:
        return NotificationRecord(
            id=str(row["id"]),
            type=row["type"],
            title=row["title"],
            message=row["message"],
            is_read=bool(row.get("is_read")),
            created_at=row["created_at"],
        )

    async def list_notifications(
        self, user_id: str, filters: NotificationFilters
    ) -> list[NotificationRecord]:
        conditions = ["user_id = %s"]
        params: list[Any] = [user_id]

        window = NOTIFICATION_WINDOWS.get(filters.time_filter or "")
        if window is not None:
            conditions.append("created_at >= %s")
            params.append(datetime.now(UTC) - window)

        if filters.type in NOTIFICATION_TYPES:
            conditions.append("type = %s")
            params.append(filters.type)

        if filters.is_read is not None:
            conditions.append("is_read = %s")
            params.append(filters.is_read)

        query = f"""
            SELECT id, type, title, message, is_read, created_at
            FROM notifications
            WHERE {" AND ".join(conditions)}
            ORDER BY created_at DESC
        """
        rows = await fetch_all(query, tuple(params))
        return [self._row_to_notification(row) for row in rows]

    async def count_unread(self, user_id: str) -> int:
        count = await fetch_val(
            "SELECT COUNT(*) FROM notifications WHERE user_id = %s AND is_read = false",
            (user_id,),
        )
        return int(count or 0)


class PostgresReportRepository(ReportRepository):
    @classmethod
    def _row_to_report(cls, row: dict) -> MonthlyReport:
        # A stored report always has its PDF; emailing is the last step.
        emailed_at = row.get("emailed_at")
        return MonthlyReport(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            report_month=row["period_start"].strftime("%Y-%m"),
            status="sent" if emailed_at else "pdf_generated",
            pdf_path=row.get("pdf_path"),
            sent_at=emailed_at,
            created_at=row["generated_at"],
        )

    async def list_reports(self, user_id: str) -> list[MonthlyReport]:
        query = """
            SELECT id, user_id, period_start, pdf_path, generated_at, emailed_at
            FROM monthly_reports
            WHERE user_id = %s
            ORDER BY period_start DESC
        """
        rows = await fetch_all(query, (user_id,))
        return [self._row_to_report(row) for row in rows]


def build_postgres_repositories() -> DashboardRepositories:
    """The areas backed by this service's own tables."""
    return DashboardRepositories(
        calls=PostgresCallRepository(),
        reviews=PostgresReviewRepository(),
        notifications=PostgresNotificationRepository(),
        reports=PostgresReportRepository(),
    )
