"""
End-to-end checks of the /api/demo route table through the FastAPI app.
"""

import pytest


def test_call_stats_today_scales_fixture_counters(demo_client):
    response = demo_client.get("/api/demo/calls/stats", params={"timeFilter": "today"})

    assert response.status_code == 200
    stats = response.json()
    assert stats["totalCalls"] == 374
    assert stats["convertedClients"] == 256
    assert stats["conversionRate"] == 68.4


def test_call_stats_unknown_filter_uses_week(demo_client):
    stats = demo_client.get("/api/demo/calls/stats", params={"timeFilter": "century"}).json()
    assert stats["totalCalls"] == 1247


def test_calls_second_page(demo_client):
    response = demo_client.get("/api/demo/calls", params={"page": 2, "limit": 10})

    assert response.status_code == 200
    body = response.json()
    assert [call["id"] for call in body["calls"]] == [f"call-{n:03d}" for n in range(11, 21)]
    assert body["total"] == 25
    assert body["page"] == 2
    assert body["limit"] == 10
    assert body["totalPages"] == 3


@pytest.mark.parametrize("query", ["page=abc&limit=-5", "page=0&limit=0", ""])
def test_calls_malformed_pagination_falls_back_to_defaults(demo_client, query):
    body = demo_client.get(f"/api/demo/calls?{query}").json()

    assert body["page"] == 1
    assert body["limit"] == 10
    assert body["calls"][0]["id"] == "call-001"


def test_call_records_use_camel_case(demo_client):
    call = demo_client.get("/api/demo/calls/call-001").json()

    assert call["phoneNumber"] == "+33612345678"
    assert call["nbPersonnes"] == 4
    assert "phone_number" not in call


def test_unknown_call_is_404_with_french_message(demo_client):
    response = demo_client.get("/api/demo/calls/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"message": "Appel non trouvé"}


def test_unknown_review_is_404_with_french_message(demo_client):
    response = demo_client.get("/api/demo/reviews/rev-999")

    assert response.status_code == 404
    assert response.json() == {"message": "Avis non trouvé"}


def test_static_call_paths_win_over_id_lookup(demo_client):
    assert demo_client.get("/api/demo/calls/chart-data").status_code == 200
    insights = demo_client.get("/api/demo/calls/ai-insights").json()
    assert len(insights["insights"]) == 4
    assert insights["generated"] is True


def test_reviews_filtered_by_platform_and_rating(demo_client):
    reviews = demo_client.get("/api/demo/reviews?platform=google&ratingMin=4").json()

    assert reviews
    assert all(review["platform"] == "google" and review["rating"] >= 4 for review in reviews)
    assert [review["id"] for review in reviews] == ["rev-001", "rev-007", "rev-009", "rev-011"]


def test_reviews_malformed_rating_is_ignored(demo_client):
    reviews = demo_client.get("/api/demo/reviews?ratingMin=lots").json()
    assert len(reviews) == 12


def test_review_side_endpoints(demo_client):
    requests = demo_client.get("/api/demo/reviews/requests").json()
    assert requests["total"] == len(requests["requests"]) == 5

    assert demo_client.get("/api/demo/reviews/stats").json()["totalReviews"] == 248
    assert demo_client.get("/api/demo/reviews/requests/stats").json()["totalRequests"] == 45
    assert len(demo_client.get("/api/demo/reviews/incentives").json()) == 3


@pytest.mark.parametrize("area", ["contacts", "campaigns", "automations", "segments", "templates"])
def test_marketing_listings_share_an_envelope(demo_client, area):
    body = demo_client.get(f"/api/demo/marketing/{area}").json()

    assert body["total"] == len(body[area])


def test_marketing_analytics(demo_client):
    overview = demo_client.get("/api/demo/marketing/analytics/overview").json()
    performance = demo_client.get("/api/demo/marketing/analytics/performance").json()

    assert "totalContacts" in overview
    assert isinstance(performance, list)
    assert demo_client.get("/api/demo/marketing/contacts/stats").json()["total"] == 1847


def test_guarantee_reservations_buckets(demo_client):
    body = demo_client.get("/api/demo/guarantee/reservations").json()

    assert [session["id"] for session in body["pending"]] == ["gs-003", "gs-004"]
    assert [session["id"] for session in body["validated"]] == ["gs-001", "gs-002", "gs-005"]
    assert [session["id"] for session in body["today"]] == ["gs-001", "gs-002"]
    assert body["stats"] == {
        "pendingCount": 2,
        "validatedCount": 3,
        "todayCount": 2,
        "validationRate": 60,
    }


def test_guarantee_history_and_stats(demo_client):
    history = demo_client.get("/api/demo/guarantee/history?period=month").json()
    stats = demo_client.get("/api/demo/guarantee/stats?period=month").json()

    assert history["total"] == 3
    assert history["totalRecovered"] == 350
    assert history["totalFailed"] == 1
    assert history["noShows"][0]["session"]["customerName"] == "Arthur Simon"
    assert stats == {"noshowCount": 3, "totalRecovered": 350, "failedCharges": 1, "totalAvoided": 725}


def test_guarantee_config_and_stripe_status(demo_client):
    assert demo_client.get("/api/demo/guarantee/config").json()["stripeConnected"] is True
    assert demo_client.get("/api/demo/guarantee/stripe-status").json()["chargesEnabled"] is True


def test_integrations(demo_client):
    integrations = demo_client.get("/api/demo/integrations").json()
    customers = demo_client.get("/api/demo/integrations/customers").json()
    orders = demo_client.get("/api/demo/integrations/orders?source=hubspot").json()
    stats = demo_client.get("/api/demo/integrations/orders/stats?period=all").json()

    assert integrations["total"] == 3
    assert customers["total"] == 523
    assert len(customers["customers"]) == 3
    assert {order["externalSource"] for order in orders} == {"hubspot"}
    assert stats["totalOrders"] == 8


def test_reports_keep_snake_case(demo_client):
    body = demo_client.get("/api/demo/reports").json()

    assert body["total"] == 6
    assert "report_month" in body["reports"][0]
    assert "pdf_path" in body["reports"][0]


def test_waitlist_stats(demo_client):
    body = demo_client.get("/api/demo/waitlist").json()

    assert body["total"] == 3
    assert body["stats"] == {"waiting": 2, "notified": 1, "confirmed": 0, "expired": 0, "total": 3}


def test_recommendations(demo_client):
    body = demo_client.get("/api/demo/recommendations").json()
    assert body["total"] == len(body["recommendations"]) == 4


@pytest.mark.parametrize("path", ["/api/demo/auth/me", "/api/demo/user", "/api/demo/user/profile"])
def test_demo_user_endpoints(demo_client, path):
    user = demo_client.get(path).json()

    assert user["id"] == "demo-user-001"
    assert user["companyName"] == "Le Petit Bistrot"


def test_settings(demo_client):
    assert demo_client.get("/api/demo/settings").json()["language"] == "fr"


def test_notifications_and_unread_count(demo_client):
    body = demo_client.get("/api/demo/notifications").json()
    unread_only = demo_client.get("/api/demo/notifications?isRead=false").json()

    assert len(body["notifications"]) == 6
    assert body["unreadCount"] == 2
    assert len(unread_only["notifications"]) == 2
    assert demo_client.get("/api/demo/notifications/unread-count").json() == {"count": 2}


@pytest.mark.parametrize("method", ["post", "put", "patch", "delete"])
def test_demo_writes_are_rejected(demo_client, method):
    response = demo_client.request(method.upper(), "/api/demo/calls/call-001")

    assert response.status_code == 405
    assert response.json() == {"message": "Action indisponible en mode démonstration"}


def test_unknown_demo_path_is_404(demo_client):
    response = demo_client.get("/api/demo/admin/users")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_trailing_slash_redirects_to_the_demo_twin(demo_client):
    response = demo_client.get("/api/demo/calls/?page=2", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"].endswith("/api/demo/calls?page=2")

    followed = demo_client.get("/api/demo/calls/?page=2")
    assert followed.status_code == 200
    assert followed.json()["page"] == 2


def test_trailing_slash_on_unknown_demo_path_is_404(demo_client):
    response = demo_client.get("/api/demo/admin/users/", follow_redirects=False)

    assert response.status_code == 404


def test_demo_disabled_routes_are_not_mounted(demo_disabled_client):
    response = demo_disabled_client.get("/api/demo/calls")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_request_id_header_is_echoed(demo_client):
    generated = demo_client.get("/api/demo/settings")
    forwarded = demo_client.get("/api/demo/settings", headers={"X-Request-ID": "req-42"})

    assert generated.headers["X-Request-ID"]
    assert forwarded.headers["X-Request-ID"] == "req-42"


def test_live_routes_are_not_mounted_without_database(demo_client):
    assert demo_client.get("/api/calls").status_code == 404
