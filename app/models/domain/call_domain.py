from datetime import datetime
from typing import Literal

from app.models.domain.common_domain import DashboardRecord

CallStatus = Literal["active", "completed", "failed", "canceled", "no_answer"]
ConversionResult = Literal["converted", "not_converted", "pending"]


class CallRecord(DashboardRecord):
    """A single call handled by the AI receptionist."""

    id: str
    phone_number: str
    status: CallStatus
    duration: int | None = None  # seconds
    start_time: datetime
    end_time: datetime | None = None
    event_type: str | None = None
    conversion_result: ConversionResult | None = None
    client_name: str | None = None
    client_mood: str | None = None
    appointment_date: datetime | None = None
    nb_personnes: int | None = None
    summary: str | None = None
    tags: list[str] = []


class CallStats(DashboardRecord):
    """Aggregate counters shown on the dashboard header."""

    total_calls: int
    calls_variation: float
    conversion_rate: float
    conversion_variation: float
    avg_duration: int
    duration_variation: float
    reminders_sent: int
    reminder_variation: float
    converted_clients: int
    converted_clients_variation: float
    appointments_taken: int
    appointments_variation: float


class CallChartPoint(DashboardRecord):
    date: str
    total_calls: int
    completed_calls: int
    average_duration: int


class AIInsight(DashboardRecord):
    id: str
    type: Literal["opportunity", "warning", "trend", "tip"]
    title: str
    description: str
    priority: Literal["high", "medium", "low"]
