from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

ReportStatus = Literal["pending", "generating", "pdf_generated", "sent", "failed"]


class MonthlyReport(BaseModel):
    """
    Monthly PDF report row.

    Unlike the other dashboard records this one keeps snake_case keys,
    which is what the reports page reads.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str
    user_id: str
    report_month: str
    status: ReportStatus
    pdf_path: str | None = None
    sent_at: datetime | None = None
    created_at: datetime
