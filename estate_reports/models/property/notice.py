"""Notice model."""

from dataclasses import dataclass
from datetime import date

from estate_reports.models.property.enums import ACTIVE_NOTICE_STATUSES, NoticeStatus, NoticeType


@dataclass(frozen=True)
class Notice:
    """Notice issued to a tenant or about a unit."""

    notice_id: str
    account_id: str
    notice_type: NoticeType
    status: NoticeStatus
    date_issued: date
    tenant_id: str | None = None
    unit_id: str | None = None
    description: str = ""

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_NOTICE_STATUSES
