"""Call log fixtures for the demo tenant (a Paris bistro)."""

from datetime import datetime, timedelta

from app.models.domain.call_domain import AIInsight, CallChartPoint, CallRecord

# Weekly counters; the stats endpoint scales the volume fields by timeFilter.
BASE_CALL_STATS = {
    "total_calls": 1247,
    "calls_variation": 12.5,
    "conversion_rate": 68.4,
    "conversion_variation": 5.2,
    "avg_duration": 185,
    "duration_variation": -3.1,
    "reminders_sent": 342,
    "reminder_variation": 8.7,
    "converted_clients": 853,
    "converted_clients_variation": 11.2,
    "appointments_taken": 612,
    "appointments_variation": 9.8,
}

# (phone, status, duration_s, hours_ago, event_type, conversion, client, mood, persons, summary)
_CALL_ROWS = [
    ("+33612345678", "completed", 142, 1, "reservation", "converted", "Marie Laurent", "positif", 4,
     "Réservation pour 4 personnes ce soir à 20h, table en terrasse demandée."),
    ("+33698765432", "completed", 95, 2, "inquiry", "not_converted", "Thomas Petit", "neutre", None,
     "Demande des horaires d'ouverture du dimanche."),
    ("+33678901234", "completed", 210, 3, "reservation", "converted", "Claire Dubois", "positif", 6,
     "Anniversaire pour 6 personnes samedi midi, gâteau prévu par le client."),
    ("+33645678901", "no_answer", 0, 4, None, None, None, None, None, None),
    ("+33623456789", "completed", 178, 5, "modification", "converted", "Luc Moreau", "neutre", 2,
     "Déplacement de la réservation de jeudi à vendredi 19h30."),
    ("+33687654321", "completed", 65, 7, "cancellation", "not_converted", "Julie Bernard", "négatif", 3,
     "Annulation de la réservation de demain, imprévu professionnel."),
    ("+33611223344", "completed", 232, 9, "reservation", "converted", "Nicolas Garnier", "positif", 8,
     "Repas d'équipe pour 8 personnes mardi soir, menu groupe envoyé par e-mail."),
    ("+33655667788", "failed", 12, 11, None, None, None, None, None, "Appel interrompu après quelques secondes."),
    ("+33699887766", "completed", 154, 14, "reservation", "converted", "Emma Roux", "positif", 2,
     "Dîner en amoureux vendredi 21h, demande de table calme."),
    ("+33633445566", "completed", 88, 18, "inquiry", "pending", "Hugo Fontaine", "neutre", None,
     "Question sur les options végétariennes et sans gluten."),
    ("+33644556677", "completed", 201, 22, "reservation", "converted", "Camille Girard", "positif", 5,
     "Déjeuner de famille dimanche 12h30, chaise haute nécessaire."),
    ("+33677889900", "completed", 123, 26, "reservation", "not_converted", "Antoine Mercier", "neutre", 10,
     "Groupe de 10 pour jeudi, complet ce soir-là, proposition de liste d'attente."),
    ("+33612131415", "completed", 167, 30, "reservation", "converted", "Léa Lambert", "positif", 2,
     "Réservation pour 2 demain midi."),
    ("+33616171819", "canceled", 20, 34, None, None, None, None, None, None),
    ("+33620212223", "completed", 190, 40, "reservation", "converted", "Sophie Blanc", "positif", 4,
     "Réservation pour 4 samedi soir, garantie CB envoyée par SMS."),
    ("+33624252627", "completed", 74, 46, "inquiry", "not_converted", "Paul Chevalier", "neutre", None,
     "Demande si le restaurant accepte les chiens."),
    ("+33628293031", "completed", 245, 52, "reservation", "converted", "Manon Faure", "positif", 12,
     "Privatisation partielle pour un pot de départ, 12 personnes."),
    ("+33632333435", "completed", 133, 58, "modification", "converted", "Louis André", "neutre", 3,
     "Ajout d'une personne à la réservation de ce soir."),
    ("+33636373839", "no_answer", 0, 64, None, None, None, None, None, None),
    ("+33640414243", "completed", 158, 70, "reservation", "converted", "Chloé Masson", "positif", 2,
     "Brunch dimanche 11h pour 2."),
    ("+33644454647", "completed", 102, 80, "inquiry", "pending", "Gabriel Denis", "neutre", None,
     "Renseignement sur la carte cadeau."),
    ("+33648495051", "completed", 186, 92, "reservation", "converted", "Inès Lefèvre", "positif", 4,
     "Réservation pour 4 mercredi soir."),
    ("+33652535455", "completed", 59, 104, "cancellation", "not_converted", "Arthur Simon", "négatif", 2,
     "Annulation, client malade."),
    ("+33656575859", "completed", 221, 120, "reservation", "converted", "Zoé Michel", "positif", 7,
     "Dîner d'anniversaire pour 7, décoration de table demandée."),
    ("+33660616263", "completed", 140, 150, "reservation", "converted", "Jules Leroy", "positif", 2,
     "Réservation pour 2 jeudi 20h."),
]

_INSIGHTS = [
    AIInsight(
        id="insight-001",
        type="opportunity",
        title="Pic d'appels le vendredi entre 17h et 19h",
        description="32% des réservations de la semaine arrivent sur ce créneau. "
        "Prévoir un rappel SMS automatique pour les tables du soir.",
        priority="high",
    ),
    AIInsight(
        id="insight-002",
        type="trend",
        title="Hausse des groupes de 6 personnes et plus",
        description="Les réservations de groupe ont progressé de 18% sur le mois. "
        "Un menu groupe mis en avant pourrait augmenter la conversion.",
        priority="medium",
    ),
    AIInsight(
        id="insight-003",
        type="warning",
        title="Annulations de dernière minute",
        description="7 annulations à moins de 24h cette semaine. "
        "Activer la garantie CB pour les tables de 4 personnes et plus.",
        priority="high",
    ),
    AIInsight(
        id="insight-004",
        type="tip",
        title="Questions fréquentes sur les options végétariennes",
        description="Ajouter ces informations au script de l'assistant réduirait la durée des appels.",
        priority="low",
    ),
]


def build_calls(now: datetime) -> tuple[CallRecord, ...]:
    calls = []
    for index, row in enumerate(_CALL_ROWS, start=1):
        phone, status, duration, hours_ago, event_type, conversion, client, mood, persons, summary = row
        start = now - timedelta(hours=hours_ago)
        appointment = start + timedelta(days=1) if event_type == "reservation" else None
        calls.append(
            CallRecord(
                id=f"call-{index:03d}",
                phone_number=phone,
                status=status,
                duration=duration,
                start_time=start,
                end_time=start + timedelta(seconds=duration),
                event_type=event_type,
                conversion_result=conversion,
                client_name=client,
                client_mood=mood,
                appointment_date=appointment,
                nb_personnes=persons,
                summary=summary,
                tags=[event_type] if event_type else [],
            )
        )
    return tuple(calls)


def build_chart_data(now: datetime) -> tuple[CallChartPoint, ...]:
    volumes = [(168, 142, 176), (182, 155, 181), (175, 149, 190), (190, 166, 188),
               (214, 188, 179), (172, 150, 184), (146, 124, 193)]
    points = []
    for offset, (total, completed, avg_duration) in enumerate(volumes):
        day = (now - timedelta(days=len(volumes) - 1 - offset)).date()
        points.append(
            CallChartPoint(
                date=day.isoformat(),
                total_calls=total,
                completed_calls=completed,
                average_duration=avg_duration,
            )
        )
    return tuple(points)


def build_insights() -> tuple[AIInsight, ...]:
    return tuple(_INSIGHTS)
