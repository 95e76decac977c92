"""Unit (vacant listing) and listing view models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from estate_reports.models.property.enums import UnitCategory, UnitStatus


@dataclass(frozen=True)
class Unit:
    """Rentable or saleable unit, listed on the vacant units page."""

    unit_id: str
    account_id: str
    title: str
    category: UnitCategory
    status: UnitStatus
    building_id: str | None = None
    rent_amount: Decimal = Decimal("0")
    selling_price: Decimal = Decimal("0")
    bedrooms: int = 0
    bathrooms: int = 0
    city: str = ""
    created_at: datetime | None = None

    @property
    def is_occupied(self) -> bool:
        return self.status == UnitStatus.OCCUPIED


@dataclass(frozen=True)
class ListingView:
    """One view of a unit's public listing."""

    view_id: str
    account_id: str
    unit_id: str
    viewed_at: datetime
