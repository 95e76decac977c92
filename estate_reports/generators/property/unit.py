"""Unit and listing view generators."""

from datetime import datetime, timedelta
from decimal import Decimal

from estate_reports.generators.base import BaseGenerator
from estate_reports.models.property import Building, ListingView, Unit, UnitCategory, UnitStatus


class UnitGenerator(BaseGenerator):
    """Generate rentable and for-sale units inside a building.

    Occupancy is weighted towards occupied (~70%) to resemble an
    established portfolio.
    """

    STATUSES = list(UnitStatus)
    STATUS_WEIGHTS = [0.20, 0.05, 0.70, 0.05]

    def generate(self, building: Building, as_of: datetime) -> Unit:
        category = UnitCategory.SALE if self.rng.random() < 0.15 else UnitCategory.RENT
        bedrooms = self.rng.randint(0, 4)
        status = self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]
        if category == UnitCategory.SALE and status == UnitStatus.OCCUPIED:
            status = UnitStatus.AVAILABLE

        rent = Decimal(15000 + bedrooms * 12000 + self.rng.randrange(0, 10000, 500))
        created_after = building.created_at or as_of - timedelta(days=365)
        return Unit(
            unit_id=self.new_id(),
            account_id=building.account_id,
            title=f"{bedrooms or 'Studio'}{' BR' if bedrooms else ''} {building.name} #{self.rng.randint(1, 40)}",
            category=category,
            status=status,
            building_id=building.building_id,
            rent_amount=rent if category == UnitCategory.RENT else Decimal("0"),
            selling_price=rent * 150 if category == UnitCategory.SALE else Decimal("0"),
            bedrooms=bedrooms,
            bathrooms=max(1, bedrooms - self.rng.randint(0, 1)),
            city=building.address.city,
            created_at=self.moment_between(created_after, as_of),
        )


class ListingViewGenerator(BaseGenerator):
    """Generate page views of a listing."""

    def generate_for_unit(self, unit: Unit, start: datetime, end: datetime, mean_views: int = 20) -> list[ListingView]:
        """Generate views of ``unit`` spread over ``[start, end)``."""
        count = max(0, int(self.rng.gauss(mean_views, mean_views / 3)))
        return [
            ListingView(
                view_id=self.new_id(),
                account_id=unit.account_id,
                unit_id=unit.unit_id,
                viewed_at=self.moment_between(start, end),
            )
            for _ in range(count)
        ]
