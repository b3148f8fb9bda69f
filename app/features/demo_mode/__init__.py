"""
Demo mode feature package.

Everything that lets the dashboard run against a fully populated
fictional tenant lives here: the fixture store, the fixture-backed
repositories, the ``/api/demo`` route table and the client-side URL
rewrite rule.
"""

# Re-export the primary building blocks for easy access.
from .registration import DEMO_ROUTE_PREFIX, demo_user_id, register_demo_routes  # noqa: F401
from .repository import build_fixture_repositories  # noqa: F401
from .routing import DEMO_AREAS, get_demo_url, is_demo_path, rewrite_query_key  # noqa: F401
