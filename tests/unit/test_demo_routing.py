"""
Tests for the demo URL rewrite rule and the client query-key rewriter.
"""

import pytest

from app.features.demo_mode.routing import DEMO_AREAS, get_demo_url, is_demo_path, rewrite_query_key


@pytest.mark.parametrize(
    "url, expected",
    [
        ("/api/calls/stats", "/api/demo/calls/stats"),
        ("/api/calls", "/api/demo/calls"),
        ("/api/reviews?platform=google", "/api/demo/reviews?platform=google"),
        ("/api/auth/me", "/api/demo/auth/me"),
        ("/api/settings#top", "/api/demo/settings#top"),
        ("/api/guarantee/history?period=week", "/api/demo/guarantee/history?period=week"),
    ],
)
def test_allow_listed_paths_are_rewritten(url, expected):
    assert get_demo_url(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "/api/admin/users",
        "/api/stripe/webhook",
        "/api/callsx",
        "/calls",
        "/api",
        "",
        "api/calls",
        "/healthz",
    ],
)
def test_other_paths_pass_through(url):
    assert get_demo_url(url) == url


def test_rewrite_is_idempotent():
    for area in DEMO_AREAS:
        once = get_demo_url(f"/api/{area}/x?y=1")
        assert get_demo_url(once) == once
        assert once.count("/demo/") == 1


def test_disabled_rewrite_returns_input():
    assert get_demo_url("/api/calls", enabled=False) == "/api/calls"


def test_non_string_url_never_raises():
    assert get_demo_url(None) is None
    assert is_demo_path(42) is False


def test_is_demo_path_uses_first_segment_only():
    assert is_demo_path("/api/calls/reviews")
    assert not is_demo_path("/api/demo/calls")
    assert not is_demo_path("/api/admin/calls")


def test_string_key_is_rewritten():
    assert rewrite_query_key("/api/calls/stats") == "/api/demo/calls/stats"


def test_sequence_key_rewrites_only_first_element():
    key = ["/api/reviews", "/api/calls", {"platform": "google"}]

    rewritten = rewrite_query_key(key)

    assert rewritten == ["/api/demo/reviews", "/api/calls", {"platform": "google"}]
    assert key[0] == "/api/reviews"


def test_tuple_key_keeps_its_type():
    rewritten = rewrite_query_key(("/api/notifications", "day"))

    assert isinstance(rewritten, tuple)
    assert rewritten == ("/api/demo/notifications", "day")


def test_non_string_head_and_other_keys_pass_through():
    assert rewrite_query_key([1, "/api/calls"]) == [1, "/api/calls"]
    assert rewrite_query_key([]) == []
    assert rewrite_query_key(42) == 42
    assert rewrite_query_key(b"/api/calls") == b"/api/calls"


def test_disabled_key_rewrite_returns_same_object():
    key = ["/api/calls"]
    assert rewrite_query_key(key, enabled=False) is key
