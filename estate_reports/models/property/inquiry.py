"""Inquiry model."""

from dataclasses import dataclass
from datetime import datetime

from estate_reports.models.property.enums import (
    PENDING_INQUIRY_STATUSES,
    InquiryStatus,
    InquiryType,
)


@dataclass(frozen=True)
class Inquiry:
    """Prospect or tenant inquiry about a unit."""

    inquiry_id: str
    account_id: str
    inquiry_type: InquiryType
    status: InquiryStatus
    created_at: datetime
    unit_id: str | None = None
    name: str = ""
    subject: str = ""

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_INQUIRY_STATUSES
