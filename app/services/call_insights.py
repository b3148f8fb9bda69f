"""
Rule-based insights over a tenant's recent calls.

Each analysis returns one insight or ``None`` when there is not enough
data for it; the caller always gets exactly ``INSIGHT_COUNT`` entries,
padded with onboarding hints for young accounts.
"""

from collections import Counter
from collections.abc import Sequence

from app.models.domain.call_domain import AIInsight, CallRecord

INSIGHT_COUNT = 3
MIN_CALLS_PER_HOUR = 3
MIN_COMPLETED_FOR_DURATION = 3


def _best_hour(calls: Sequence[CallRecord]) -> AIInsight | None:
    totals: Counter[int] = Counter()
    completed: Counter[int] = Counter()
    for call in calls:
        hour = call.start_time.hour
        totals[hour] += 1
        if call.status == "completed":
            completed[hour] += 1

    candidates = [hour for hour, total in totals.items() if total >= MIN_CALLS_PER_HOUR]
    if not candidates:
        return None

    best = max(candidates, key=lambda hour: completed[hour] / totals[hour])
    if completed[best] == 0:
        return None

    total_completed = sum(completed.values())
    share = round(completed[best] / total_completed * 100)
    end_hour = min(best + 2, 23)
    return AIInsight(
        id="insight-best-hour",
        type="opportunity",
        title=f"Créneau le plus performant : {best}h-{end_hour}h",
        description=(
            f"{share}% des RDV confirmés ont lieu entre {best}h et {end_hour}h. "
            "Concentrez vos efforts marketing sur ce créneau."
        ),
        priority="high" if share >= 40 else "medium",
    )


def _conversion(calls: Sequence[CallRecord]) -> AIInsight | None:
    total = len(calls)
    completed = sum(1 for call in calls if call.status == "completed")
    failed = sum(1 for call in calls if call.status == "failed")

    rate = completed / total * 100
    if rate > 40:
        return AIInsight(
            id="insight-conversion",
            type="trend",
            title="Taux de conversion excellent",
            description=f"Taux de RDV confirmés : {round(rate)}% ({completed}/{total} appels).",
            priority="low",
        )
    if rate > 25:
        return AIInsight(
            id="insight-conversion",
            type="trend",
            title="Taux de conversion dans la moyenne",
            description=f"{completed} RDV sur {total} appels ({round(rate)}%). Dans la moyenne du secteur.",
            priority="medium",
        )
    if failed / total * 100 > 30:
        return AIInsight(
            id="insight-failures",
            type="warning",
            title="Trop d'appels échoués",
            description=(
                f"{round(failed / total * 100)}% d'appels échoués ({failed}/{total}). "
                "Revoyez le script ou les créneaux horaires."
            ),
            priority="high",
        )
    return None


def _duration(calls: Sequence[CallRecord]) -> AIInsight | None:
    durations = [call.duration for call in calls if call.status == "completed" and call.duration]
    if len(durations) < MIN_COMPLETED_FOR_DURATION:
        return None

    average = sum(durations) // len(durations)
    minutes, seconds = divmod(average, 60)
    return AIInsight(
        id="insight-duration",
        type="tip",
        title="Durée moyenne des appels convertis",
        description=f"Les appels qui aboutissent à un RDV durent en moyenne {minutes} min {seconds:02d} s.",
        priority="low",
    )


def _onboarding_hints(total_calls: int) -> list[AIInsight]:
    return [
        AIInsight(
            id="insight-hint-hours",
            type="tip",
            title="Analyse des créneaux horaires",
            description=(
                f"{total_calls} appel(s) analysé(s). Encore {max(0, 10 - total_calls)} appels "
                "pour débloquer l'analyse des créneaux horaires."
            ),
            priority="low",
        ),
        AIInsight(
            id="insight-hint-days",
            type="tip",
            title="Jours les plus performants",
            description="Les tendances hebdomadaires seront calculées à partir de 7 jours d'activité.",
            priority="low",
        ),
        AIInsight(
            id="insight-hint-duration",
            type="tip",
            title="Durée optimale",
            description="L'analyse de durée optimale nécessite au moins 3 RDV confirmés.",
            priority="low",
        ),
    ]


def generate_call_insights(calls: Sequence[CallRecord]) -> list[AIInsight]:
    if not calls:
        return _onboarding_hints(0)

    insights = [
        insight
        for insight in (_best_hour(calls), _conversion(calls), _duration(calls))
        if insight is not None
    ]
    if len(insights) < INSIGHT_COUNT:
        insights.extend(_onboarding_hints(len(calls)))
    return insights[:INSIGHT_COUNT]
