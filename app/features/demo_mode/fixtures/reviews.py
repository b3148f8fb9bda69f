"""Review fixtures: reviews, solicitation requests and incentives."""

from datetime import datetime, timedelta

from app.models.domain.review_domain import ReviewIncentive, ReviewRecord, ReviewRequest

# (platform, rating, reviewer, content, days_ago, sentiment, response_status)
_REVIEW_ROWS = [
    ("google", 5, "Marie L.", "Accueil chaleureux et cuisine excellente, le tartare est une merveille.",
     1, "very_positive", "published"),
    ("tripadvisor", 4, "Jean-Pierre M.", "Très bon repas, service un peu lent en fin de soirée.",
     2, "positive", "none"),
    ("google", 3, "Sophie R.", "Correct sans plus, les desserts manquaient de fraîcheur.",
     3, "neutral", "draft"),
    ("facebook", 5, "Karim B.", "Réservation par téléphone ultra simple, on reviendra !",
     4, "very_positive", "published"),
    ("google", 2, "Olivier T.", "Attente trop longue malgré la réservation.",
     5, "negative", "draft"),
    ("tripadvisor", 5, "Anna K.", "Best bistro in the neighbourhood, lovely staff.",
     7, "very_positive", "published"),
    ("google", 4, "Lucie D.", "Belle terrasse, plats généreux. Le vin du mois est une bonne surprise.",
     9, "positive", "published"),
    ("yelp", 1, "Mark S.", "Table not ready when we arrived, very disappointing.",
     12, "very_negative", "none"),
    ("google", 5, "Pauline G.", "Parfait pour un dîner d'anniversaire, l'équipe a été aux petits soins.",
     15, "very_positive", "published"),
    ("facebook", 4, "Thierry V.", "Bon rapport qualité prix, le menu du midi est top.",
     20, "positive", "none"),
    ("google", 4, "Nadia H.", None, 24, "positive", "none"),
    ("tripadvisor", 3, "Bruno C.", "Cuisine honnête mais salle bruyante.", 30, "neutral", "none"),
]

REVIEW_STATS = {
    "totalReviews": 248,
    "averageRating": 4.4,
    "newReviewsPeriod": 18,
    "responseRate": 86.5,
    "ratingDistribution": {"5": 142, "4": 61, "3": 24, "2": 12, "1": 9},
    "platformBreakdown": {"google": 156, "tripadvisor": 58, "facebook": 27, "yelp": 7},
    "sentimentBreakdown": {"positive": 203, "neutral": 24, "negative": 21},
    "reputationScore": 87,
}

REVIEW_REQUEST_STATS = {
    "totalRequests": 45,
    "sentThisPeriod": 12,
    "reviewsCollected": 28,
    "conversionRate": 62.2,
    "promosGenerated": 18,
    "promosUsed": 12,
    "revenueGenerated": 1840,
}


def build_reviews(now: datetime) -> tuple[ReviewRecord, ...]:
    reviews = []
    for index, row in enumerate(_REVIEW_ROWS, start=1):
        platform, rating, reviewer, content, days_ago, sentiment, response_status = row
        reviewed_at = now - timedelta(days=days_ago)
        reviews.append(
            ReviewRecord(
                id=f"rev-{index:03d}",
                platform=platform,
                rating=rating,
                content=content,
                reviewer_name=reviewer,
                review_date=reviewed_at,
                response_text="Merci pour votre retour !" if response_status == "published" else None,
                response_status=response_status,
                sentiment=sentiment,
                is_read=days_ago > 3,
                created_at=reviewed_at,
            )
        )
    return tuple(reviews)


def build_review_requests(now: datetime) -> tuple[ReviewRequest, ...]:
    return (
        ReviewRequest(id="rr-001", customer_name="Jean Dupont", customer_email="jean@example.com",
                      customer_phone="+33612345678", status="sent", platform="google",
                      sent_at=now - timedelta(days=1, hours=3)),
        ReviewRequest(id="rr-002", customer_name="Marie Martin", customer_email="marie@example.com",
                      customer_phone="+33698765432", status="completed", platform="tripadvisor",
                      sent_at=now - timedelta(days=2), completed_at=now - timedelta(days=2) + timedelta(hours=2)),
        ReviewRequest(id="rr-003", customer_name="Pierre Lefebvre", customer_email="pierre@example.com",
                      customer_phone="+33678901234", status="pending", platform="google",
                      scheduled_for=now + timedelta(days=1)),
        ReviewRequest(id="rr-004", customer_name="Sophie Bernard", customer_email="sophie@example.com",
                      customer_phone="+33645678901", status="sent", platform="facebook",
                      sent_at=now - timedelta(hours=20)),
        ReviewRequest(id="rr-005", customer_name="Luc Moreau", customer_email="luc@example.com",
                      customer_phone="+33623456789", status="clicked", platform="google",
                      sent_at=now - timedelta(days=3), clicked_at=now - timedelta(days=3) + timedelta(minutes=30)),
    )


def build_incentives(now: datetime) -> tuple[ReviewIncentive, ...]:
    return (
        ReviewIncentive(id="inc-001", name="10% de réduction", type="percentage", value=10, min_purchase=30,
                        is_default=True, usage_count=45, created_at=now - timedelta(days=80)),
        ReviewIncentive(id="inc-002", name="5€ offerts", type="fixed_amount", value=5, min_purchase=25,
                        usage_count=23, created_at=now - timedelta(days=50)),
        ReviewIncentive(id="inc-003", name="Dessert offert", type="free_item",
                        description="Un dessert au choix offert", usage_count=18,
                        created_at=now - timedelta(days=35)),
    )
