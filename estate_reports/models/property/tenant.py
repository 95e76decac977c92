"""Tenant (renter) model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from estate_reports.models.property.enums import RentStatus, TenantStatus


@dataclass(frozen=True)
class Tenant:
    """Person renting a unit."""

    tenant_id: str
    account_id: str
    name: str
    status: TenantStatus
    rent_status: RentStatus
    monthly_rent: Decimal
    unit_id: str | None = None
    move_in_date: date | None = None
    lease_end_date: date | None = None
    created_at: datetime | None = None
