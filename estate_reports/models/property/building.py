"""Building model."""

from dataclasses import dataclass
from datetime import datetime

from estate_reports.models.base import Address
from estate_reports.models.property.enums import BuildingStatus


@dataclass(frozen=True)
class Building:
    """Managed building owned by one account."""

    building_id: str
    account_id: str
    name: str
    address: Address
    building_type: str
    total_units: int
    year_built: int | None = None
    status: BuildingStatus = BuildingStatus.ACTIVE
    created_at: datetime | None = None
