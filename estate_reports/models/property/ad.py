"""Listing advertisement model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from estate_reports.models.property.enums import AdStatus


@dataclass(frozen=True)
class Ad:
    """Paid promotion of a unit listing."""

    ad_id: str
    account_id: str
    unit_id: str
    title: str
    budget: Decimal
    status: AdStatus
    clicks: int = 0
    impressions: int = 0
    conversions: int = 0
    created_at: datetime | None = None
    expires_at: datetime | None = None
