from datetime import UTC, datetime, timedelta

from app.models.domain.call_domain import CallRecord
from app.services.call_insights import INSIGHT_COUNT, generate_call_insights

BASE = datetime(2026, 3, 14, 19, 0, tzinfo=UTC)


def _call(index: int, status: str = "completed", hour: int = 19, duration: int = 180) -> CallRecord:
    return CallRecord(
        id=f"c{index}",
        phone_number="+33600000000",
        status=status,
        duration=duration,
        start_time=BASE.replace(hour=hour) - timedelta(days=index % 5),
    )


def test_no_calls_yields_onboarding_hints():
    insights = generate_call_insights([])

    assert len(insights) == INSIGHT_COUNT
    assert all(insight.type == "tip" for insight in insights)


def test_busy_tenant_gets_data_driven_insights():
    calls = [_call(i) for i in range(6)] + [_call(10 + i, status="failed", hour=10) for i in range(3)]

    insights = generate_call_insights(calls)

    assert [insight.id for insight in insights] == [
        "insight-best-hour",
        "insight-conversion",
        "insight-duration",
    ]
    assert "19h" in insights[0].title


def test_high_failure_rate_raises_a_warning():
    calls = [_call(i, status="failed") for i in range(4)] + [_call(9, status="no_answer")]

    insights = generate_call_insights(calls)

    assert insights[0].id == "insight-failures"
    assert insights[0].priority == "high"
    assert len(insights) == INSIGHT_COUNT
