"""Marketing fixtures: overview counters, contacts, campaigns and tooling lists."""

from datetime import datetime, timedelta

from app.models.domain.marketing_domain import CampaignRecord, MarketingContact, MarketingSnapshot

MARKETING_OVERVIEW = MarketingSnapshot(
    total_contacts=1847,
    new_contacts_period=124,
    total_campaigns=18,
    campaigns_sent_period=4,
    total_emails_sent=12450,
    avg_open_rate=42.3,
    avg_click_rate=8.7,
    sms_delivery_rate=97.2,
    total_revenue=8420.0,
    cost_per_conversion=2.35,
)

CONTACT_STATS = {
    "total": 1847,
    "optInEmail": 1623,
    "optInSms": 1245,
    "newThisMonth": 124,
    "sources": {
        "reservation": 945,
        "website": 523,
        "review": 245,
        "import": 134,
    },
}

AUTOMATIONS = (
    {"id": "auto-001", "name": "Bienvenue nouveau contact", "trigger": "new_contact",
     "action": "send_email", "status": "active", "executionCount": 124},
    {"id": "auto-002", "name": "Anniversaire client", "trigger": "birthday",
     "action": "send_both", "status": "active", "executionCount": 45},
    {"id": "auto-003", "name": "Relance inactifs 60j", "trigger": "inactive",
     "action": "send_email", "status": "active", "executionCount": 87},
)

SEGMENTS = (
    {"id": "seg-001", "name": "Clients VIP", "contactCount": 156, "autoUpdate": True},
    {"id": "seg-002", "name": "Nouveaux clients", "contactCount": 234, "autoUpdate": True},
    {"id": "seg-003", "name": "Inactifs +90j", "contactCount": 324, "autoUpdate": True},
    {"id": "seg-004", "name": "Fêtes & anniversaires", "contactCount": 89, "autoUpdate": False},
)

TEMPLATES = (
    {"id": "tpl-001", "name": "Newsletter mensuelle", "type": "email", "usageCount": 8},
    {"id": "tpl-002", "name": "Promo Flash", "type": "email", "usageCount": 5},
    {"id": "tpl-003", "name": "Rappel réservation", "type": "sms", "usageCount": 156},
    {"id": "tpl-004", "name": "Anniversaire", "type": "email", "usageCount": 45},
)


def build_performance(now: datetime) -> tuple[dict, ...]:
    weekly = [(820, 351, 68, 12), (910, 392, 80, 15), (1240, 540, 112, 21), (760, 318, 61, 9),
              (1020, 437, 94, 17), (980, 421, 86, 14)]
    points = []
    for offset, (sent, opened, clicked, conversions) in enumerate(weekly):
        week_start = (now - timedelta(weeks=len(weekly) - 1 - offset)).date()
        points.append(
            {
                "date": week_start.isoformat(),
                "emailsSent": sent,
                "opened": opened,
                "clicked": clicked,
                "conversions": conversions,
            }
        )
    return tuple(points)


def build_contacts(now: datetime) -> tuple[MarketingContact, ...]:
    rows = [
        ("Marie", "Laurent", "marie.laurent@email.fr", "+33612345678", "reservation", True, True, ["vip"], 2),
        ("Thomas", "Petit", "thomas.petit@email.fr", None, "website", True, False, [], 5),
        ("Claire", "Dubois", "claire.dubois@email.fr", "+33678901234", "reservation", True, True,
         ["anniversaire"], 9),
        ("Nicolas", "Garnier", None, "+33611223344", "review", False, True, [], 14),
        ("Emma", "Roux", "emma.roux@email.fr", "+33699887766", "import", True, True, ["vip"], 40),
        ("Hugo", "Fontaine", "hugo.f@email.fr", None, "website", True, False, ["végétarien"], 61),
    ]
    return tuple(
        MarketingContact(
            id=f"contact-{index:03d}",
            first_name=first,
            last_name=last,
            email=email,
            phone=phone,
            source=source,
            opt_in_email=opt_email,
            opt_in_sms=opt_sms,
            tags=tags,
            created_at=now - timedelta(days=days_ago),
        )
        for index, (first, last, email, phone, source, opt_email, opt_sms, tags, days_ago) in enumerate(
            rows, start=1
        )
    )


def build_campaigns(now: datetime) -> tuple[CampaignRecord, ...]:
    return (
        CampaignRecord(id="camp-001", name="Newsletter de Noël", channel="email", status="sent",
                       sent_count=1245, open_count=562, click_count=118, sent_at=now - timedelta(days=1)),
        CampaignRecord(id="camp-002", name="Menu Saint-Valentin", channel="both", status="scheduled",
                       sent_at=None),
        CampaignRecord(id="camp-003", name="Happy hour jeudi", channel="sms", status="sent",
                       sent_count=842, open_count=0, click_count=97, sent_at=now - timedelta(days=8)),
        CampaignRecord(id="camp-004", name="Relance clients inactifs", channel="email", status="sent",
                       sent_count=324, open_count=118, click_count=22, sent_at=now - timedelta(days=15)),
        CampaignRecord(id="camp-005", name="Nouvelle carte d'automne", channel="email", status="draft"),
    )
