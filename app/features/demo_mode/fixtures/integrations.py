"""Third-party integration fixtures: connections, synced customers and orders."""

from datetime import datetime, timedelta

from app.models.domain.integration_domain import IntegrationOrder

# Number of customers synced across all connections; only a sample is listed.
SYNCED_CUSTOMER_TOTAL = 523


def build_connections(now: datetime) -> tuple[dict, ...]:
    return (
        {"id": "int-001", "provider": "hubspot", "name": "HubSpot CRM", "category": "crm",
         "status": "active", "lastSyncAt": (now - timedelta(hours=2)).isoformat(),
         "syncedRecords": 412},
        {"id": "int-002", "provider": "stripe", "name": "Stripe", "category": "payment",
         "status": "active", "lastSyncAt": (now - timedelta(minutes=35)).isoformat(),
         "syncedRecords": 1288},
        {"id": "int-003", "provider": "zenchef", "name": "Zenchef", "category": "reservation",
         "status": "error", "lastSyncAt": (now - timedelta(days=1)).isoformat(),
         "syncedRecords": 0, "errorMessage": "Jeton d'accès expiré"},
    )


def build_customers(now: datetime) -> tuple[dict, ...]:
    return (
        {"id": "cust-001", "name": "Marie Dupont", "email": "marie.dupont@email.com", "source": "hubspot",
         "totalOrders": 12, "lastActivity": (now - timedelta(days=2)).isoformat()},
        {"id": "cust-002", "name": "Pierre Martin", "email": "p.martin@business.fr", "source": "stripe",
         "totalOrders": 5, "lastActivity": (now - timedelta(days=5)).isoformat()},
        {"id": "cust-003", "name": "Sophie Bernard", "email": "sophie.b@gmail.com", "source": "hubspot",
         "totalOrders": 8, "lastActivity": (now - timedelta(days=1)).isoformat()},
    )


# (source, status, total, payment_status, channel, customer, items, days_ago)
_ORDER_ROWS = [
    ("stripe", "completed", "86.50", "paid", "online", "Marie Dupont", 3, 1),
    ("stripe", "completed", "42.00", "paid", "in_store", "Pierre Martin", 2, 2),
    ("hubspot", "confirmed", "154.00", "pending", "phone", "Sophie Bernard", 6, 3),
    ("stripe", "refunded", "38.90", "refunded", "online", "Luc Moreau", 1, 6),
    ("stripe", "completed", "212.40", "paid", "in_store", "Nicolas Garnier", 9, 12),
    ("hubspot", "cancelled", "64.00", "failed", "online", "Emma Roux", 2, 20),
    ("stripe", "completed", "98.00", "paid", "phone", "Claire Dubois", 4, 45),
    ("stripe", "pending", "27.50", "pending", "online", "Hugo Fontaine", 1, 200),
]


def build_orders(now: datetime) -> tuple[IntegrationOrder, ...]:
    return tuple(
        IntegrationOrder(
            id=f"order-{index:03d}",
            external_id=f"{source}_{9100 + index}",
            external_source=source,
            order_number=f"CMD-{2024100 + index}",
            status=status,
            total_amount=total,
            payment_status=payment_status,
            channel=channel,
            customer_name=customer,
            items_count=items,
            order_date=now - timedelta(days=days_ago),
        )
        for index, (source, status, total, payment_status, channel, customer, items, days_ago) in enumerate(
            _ORDER_ROWS, start=1
        )
    )
