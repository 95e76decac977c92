"""Building generator."""

from datetime import datetime, timedelta

from estate_reports.generators.base import BaseGenerator
from estate_reports.models.base import Address
from estate_reports.models.property import Building, BuildingStatus

# City -> county
CITIES: dict[str, str] = {
    "Nairobi": "Nairobi",
    "Mombasa": "Mombasa",
    "Kisumu": "Kisumu",
    "Nakuru": "Nakuru",
    "Eldoret": "Uasin Gishu",
    "Thika": "Kiambu",
}


class BuildingGenerator(BaseGenerator):
    """Generate apartment blocks, townhouse compounds and commercial buildings."""

    BUILDING_TYPES = ["apartment", "townhouse", "commercial", "mixed-use"]
    BUILDING_TYPE_WEIGHTS = [0.55, 0.20, 0.10, 0.15]

    def generate(self, account_id: str, as_of: datetime) -> Building:
        """Generate a single building owned by ``account_id``.

        Parameters
        ----------
        account_id : str
            Owning account.
        as_of : datetime
            Latest possible creation time.

        Returns
        -------
        Building
            Generated building.
        """
        city = self.rng.choice(list(CITIES))
        building_type = self.rng.choices(self.BUILDING_TYPES, weights=self.BUILDING_TYPE_WEIGHTS, k=1)[0]
        return Building(
            building_id=self.new_id(),
            account_id=account_id,
            name=f"{self.fake.last_name()} {self.rng.choice(['Court', 'Heights', 'Gardens', 'Plaza'])}",
            address=Address(
                street=self.fake.street_address(),
                city=city,
                county=CITIES[city],
                postal_code=f"{self.rng.randint(100, 900):03d}00",
            ),
            building_type=building_type,
            total_units=self.rng.randint(4, 12),
            year_built=self.rng.randint(1985, as_of.year),
            status=BuildingStatus.ACTIVE,
            created_at=as_of - timedelta(days=self.rng.randint(200, 900)),
        )
