"""
Shared base for dashboard records.

Records are immutable and serialise with camelCase keys, which is the
contract the dashboard client reads in both live and demo mode.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DashboardRecord(BaseModel):
    """Frozen record with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
