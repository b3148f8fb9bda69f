"""Account-level fixtures: user, settings, reports, waitlist, recommendations, notifications."""

from datetime import datetime, timedelta

from app.models.domain.account_domain import UserAccount
from app.models.domain.notification_domain import NotificationRecord
from app.models.domain.report_domain import MonthlyReport

DEMO_USER_ID = "demo-user-001"

DEMO_SETTINGS = {
    "notifications": {"email": True, "sms": True, "push": True},
    "language": "fr",
    "timezone": "Europe/Paris",
}


def build_user(now: datetime) -> UserAccount:
    return UserAccount(
        id=DEMO_USER_ID,
        email="demo@lepetitbistrot.fr",
        role="user",
        company_name="Le Petit Bistrot",
        phone="+33 1 42 36 58 74",
        account_status="active",
        subscription_status="active",
        plan="premium",
        trial_ends_at=None,
        is_verified=True,
        onboarding_completed=True,
        created_at=now - timedelta(days=90),
    )


def _month_label(now: datetime, months_back: int) -> str:
    year, month = now.year, now.month - months_back
    while month <= 0:
        month += 12
        year -= 1
    return f"{year:04d}-{month:02d}"


def build_reports(now: datetime) -> tuple[MonthlyReport, ...]:
    statuses = ["generating", "sent", "sent", "pdf_generated", "failed", "sent"]
    reports = []
    for months_back, status in enumerate(statuses):
        label = _month_label(now, months_back)
        has_pdf = status in ("pdf_generated", "sent")
        created = now - timedelta(days=30 * months_back)
        reports.append(
            MonthlyReport(
                id=len(statuses) - months_back,
                user_id=DEMO_USER_ID,
                report_month=label,
                status=status,
                pdf_path=f"reports/{DEMO_USER_ID}/rapport-{label}.pdf" if has_pdf else None,
                sent_at=created + timedelta(hours=1) if status == "sent" else None,
                created_at=created,
            )
        )
    return tuple(reports)


def build_waitlist(now: datetime) -> tuple[dict, ...]:
    return (
        {"id": "wl-001", "customerName": "Antoine Mercier", "customerPhone": "+33677889900",
         "nbPersons": 10, "requestedDate": (now + timedelta(days=2)).isoformat(), "status": "waiting",
         "createdAt": (now - timedelta(hours=26)).isoformat()},
        {"id": "wl-002", "customerName": "Élodie Perrin", "customerPhone": "+33681828384",
         "nbPersons": 2, "requestedDate": now.isoformat(), "status": "notified",
         "createdAt": (now - timedelta(hours=5)).isoformat()},
        {"id": "wl-003", "customerName": "Romain Colin", "customerPhone": "+33685868788",
         "nbPersons": 4, "requestedDate": (now + timedelta(days=1)).isoformat(), "status": "waiting",
         "createdAt": (now - timedelta(hours=3)).isoformat()},
    )


RECOMMENDATIONS = (
    {"id": "reco-001", "category": "reviews", "priority": "high",
     "title": "Répondre aux 3 avis négatifs en attente",
     "description": "Une réponse sous 48h améliore la note perçue sur Google.",
     "impact": "Réputation +5 points"},
    {"id": "reco-002", "category": "guarantee", "priority": "medium",
     "title": "Étendre la garantie CB aux tables de 2 le samedi soir",
     "description": "4 no-shows sur des tables de 2 ce mois-ci.",
     "impact": "≈ 200 € récupérés / mois"},
    {"id": "reco-003", "category": "marketing", "priority": "medium",
     "title": "Relancer le segment Inactifs +90j",
     "description": "324 contacts n'ont pas réservé depuis 3 mois.",
     "impact": "≈ 25 réservations"},
    {"id": "reco-004", "category": "calls", "priority": "low",
     "title": "Ajouter les options végétariennes au script",
     "description": "12% des questions portent sur ce sujet.",
     "impact": "-15 s par appel"},
)


def build_notifications(now: datetime) -> tuple[NotificationRecord, ...]:
    return (
        NotificationRecord(id="notif-001", type="review_received", title="Nouvel avis 5 étoiles",
                           message="Marie L. a laissé un avis excellent sur Google",
                           is_read=False, created_at=now - timedelta(hours=2)),
        NotificationRecord(id="notif-002", type="active_call", title="Nouvelle réservation",
                           message="Pierre Martin - 6 personnes ce soir 19h30",
                           is_read=False, created_at=now - timedelta(hours=4)),
        NotificationRecord(id="notif-003", type="campaign_sent", title="Campagne envoyée",
                           message="Newsletter de Noël envoyée à 1245 contacts",
                           is_read=True, created_at=now - timedelta(hours=24)),
        NotificationRecord(id="notif-004", type="guarantee_card_validated", title="Carte validée",
                           message="Sophie Blanc a validé sa garantie CB",
                           is_read=True, created_at=now - timedelta(hours=48)),
        NotificationRecord(id="notif-005", type="monthly_report_ready", title="Rapport mensuel disponible",
                           message="Votre rapport du mois dernier est prêt à être téléchargé",
                           is_read=True, created_at=now - timedelta(days=6)),
        NotificationRecord(id="notif-006", type="integration_error", title="Erreur d'intégration",
                           message="La synchronisation Zenchef a échoué : jeton expiré",
                           is_read=True, created_at=now - timedelta(days=12)),
    )
