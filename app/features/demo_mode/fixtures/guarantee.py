"""No-show guarantee fixtures."""

from datetime import datetime, timedelta

from app.models.domain.guarantee_domain import (
    GuaranteeSession,
    NoShowCharge,
    SessionSummary,
)

GUARANTEE_CONFIG = {
    "config": {
        "enabled": True,
        "penaltyAmount": 25,
        "cancellationDelay": 24,
        "applyTo": "min_persons",
        "minPersons": 4,
        "logoUrl": None,
        "brandColor": "#C8B88A",
        "senderEmail": "demo@lepetitbistrot.fr",
        "gmailSenderEmail": "contact@lepetitbistrot.fr",
        "gmailSenderName": "Le Petit Bistrot",
        "gmailAppPassword": "****",
        "termsUrl": None,
        "companyName": "Le Petit Bistrot",
        "companyAddress": "15 Rue de la Gastronomie, 75001 Paris",
        "companyPhone": "+33 1 42 36 58 74",
        "stripeAccountId": "acct_demo_xxxxx",
        "smsEnabled": True,
        "autoSendEmailOnCreate": True,
        "autoSendSmsOnCreate": True,
        "autoSendEmailOnValidation": True,
        "autoSendSmsOnValidation": True,
    },
    "stripeConnected": True,
    "user": {"email": "demo@lepetitbistrot.fr"},
}

STRIPE_STATUS = {
    "connected": True,
    "detailsSubmitted": True,
    "chargesEnabled": True,
    "payoutsEnabled": True,
}

# (customer, email, phone, persons, days_from_now, time, status, reminders, created_days_ago)
_SESSION_ROWS = [
    ("Sophie Blanc", "sophie.blanc@email.fr", "+33620212223", 4, 0, "20:00", "validated", 0, 2),
    ("Pierre Martin", "p.martin@email.fr", "+33611112222", 6, 0, "19:30", "validated", 1, 1),
    ("Nicolas Garnier", "n.garnier@email.fr", "+33611223344", 8, 1, "20:30", "pending", 2, 1),
    ("Camille Girard", None, "+33644556677", 5, 2, "12:30", "pending", 0, 0),
    ("Manon Faure", "manon.faure@email.fr", "+33628293031", 12, 3, "19:00", "validated", 0, 5),
    ("Zoé Michel", "zoe.michel@email.fr", "+33656575859", 7, -2, "20:00", "completed", 0, 6),
    ("Arthur Simon", "arthur.simon@email.fr", "+33652535455", 4, -4, "21:00", "noshow_charged", 1, 12),
    ("Julie Bernard", "julie.b@email.fr", "+33687654321", 4, -9, "19:45", "noshow_failed", 2, 16),
    ("Antoine Mercier", None, "+33677889900", 10, -20, "20:00", "noshow_charged", 0, 25),
]


def build_sessions(now: datetime) -> tuple[GuaranteeSession, ...]:
    sessions = []
    for index, row in enumerate(_SESSION_ROWS, start=1):
        customer, email, phone, persons, days_from_now, time, status, reminders, created_days_ago = row
        hour, minute = (int(part) for part in time.split(":"))
        reservation_date = (now + timedelta(days=days_from_now)).replace(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        created_at = now - timedelta(days=created_days_ago, hours=1)
        sessions.append(
            GuaranteeSession(
                id=f"gs-{index:03d}",
                reservation_id=f"resa-{2400 + index}",
                customer_name=customer,
                customer_email=email,
                customer_phone=phone,
                nb_persons=persons,
                reservation_date=reservation_date,
                reservation_time=time,
                status=status,
                penalty_amount=25,
                reminder_count=reminders,
                validated_at=created_at + timedelta(hours=2) if status != "pending" else None,
                created_at=created_at,
            )
        )
    return tuple(sessions)


def build_charges(sessions: tuple[GuaranteeSession, ...]) -> tuple[NoShowCharge, ...]:
    charges = []
    for session in sessions:
        if session.status not in ("noshow_charged", "noshow_failed"):
            continue
        succeeded = session.status == "noshow_charged"
        charges.append(
            NoShowCharge(
                id=f"charge-{session.id}",
                guarantee_session_id=session.id,
                payment_intent_id=f"pi_demo_{session.reservation_id}" if succeeded else None,
                amount=session.penalty_amount * session.nb_persons * 100,
                status="succeeded" if succeeded else "failed",
                failure_reason=None if succeeded else "card_declined",
                created_at=session.reservation_date + timedelta(hours=3),
                session=SessionSummary(
                    customer_name=session.customer_name,
                    nb_persons=session.nb_persons,
                    reservation_date=session.reservation_date,
                ),
            )
        )
    return tuple(charges)
