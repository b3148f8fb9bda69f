"""
Demo URL rewriting.

Maps a canonical dashboard path (``/api/calls/stats``) to its demo twin
(``/api/demo/calls/stats``). Clients apply it before issuing a request so
pages never need to know which mode they are talking to; the server
mirrors the same allow-list when mounting the demo routers.
"""

from collections.abc import Sequence
from typing import Any

API_PREFIX = "/api/"
DEMO_PREFIX = "/api/demo/"

DEMO_AREAS: tuple[str, ...] = (
    "calls",
    "reviews",
    "marketing",
    "guarantee",
    "integrations",
    "reports",
    "waitlist",
    "recommendations",
    "notifications",
    "auth",
    "user",
    "settings",
)

_SEGMENT_DELIMITERS = ("/", "?", "#")


def _first_segment(remainder: str) -> str:
    end = len(remainder)
    for delimiter in _SEGMENT_DELIMITERS:
        index = remainder.find(delimiter)
        if index != -1:
            end = min(end, index)
    return remainder[:end]


def is_demo_path(url: str) -> bool:
    """True when the path belongs to an area served by the demo twins."""
    if not isinstance(url, str) or not url.startswith(API_PREFIX):
        return False
    return _first_segment(url[len(API_PREFIX) :]) in DEMO_AREAS


def get_demo_url(url: str, enabled: bool = True) -> str:
    """
    Return the demo twin of ``url`` or ``url`` itself.

    Only the leading ``/api/`` is substituted, so the rest of the path and
    any query string are preserved verbatim. Already rewritten paths start
    with ``/api/demo/`` whose first segment is not an area, which keeps the
    function idempotent.
    """
    if not enabled or not is_demo_path(url):
        return url
    return DEMO_PREFIX + url[len(API_PREFIX) :]


def rewrite_query_key(key: Any, enabled: bool = True) -> Any:
    """
    Rewrite a cache key the way the dashboard client builds them.

    A key is either a path string or a sequence whose first element is the
    path and whose remaining elements are opaque filter parameters. Only
    element 0 is touched, and only when it is a string.
    """
    if not enabled:
        return key

    if isinstance(key, str):
        return get_demo_url(key)

    if isinstance(key, Sequence) and not isinstance(key, (bytes, bytearray)):
        items = [
            get_demo_url(item) if index == 0 and isinstance(item, str) else item
            for index, item in enumerate(key)
        ]
        return tuple(items) if isinstance(key, tuple) else items

    return key
