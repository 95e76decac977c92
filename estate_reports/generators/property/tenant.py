"""Tenant generator."""

from dataclasses import replace
from datetime import date, datetime, timedelta

from estate_reports.generators.base import BaseGenerator
from estate_reports.models.property import RentStatus, Tenant, TenantStatus, Unit


class TenantGenerator(BaseGenerator):
    """Generate the tenant occupying a unit."""

    RENT_STATUSES = list(RentStatus)
    RENT_STATUS_WEIGHTS = [0.80, 0.15, 0.05]

    def generate(self, unit: Unit, as_of: datetime, history_days: int = 365) -> Tenant:
        """Generate a tenant for an occupied ``unit``.

        Parameters
        ----------
        unit : Unit
            Unit the tenant lives in.
        as_of : datetime
            Reference time; move-in dates fall before it.
        history_days : int
            How far back move-in dates may go.

        Returns
        -------
        Tenant
            Generated tenant.
        """
        move_in = (as_of - timedelta(days=self.rng.randint(1, history_days))).date()
        lease_end = date(move_in.year + 1, move_in.month, min(move_in.day, 28))
        status = TenantStatus.MOVING_OUT if self.rng.random() < 0.08 else TenantStatus.ACTIVE
        return Tenant(
            tenant_id=self.new_id(),
            account_id=unit.account_id,
            name=self.fake.name(),
            status=status,
            rent_status=self.rng.choices(self.RENT_STATUSES, weights=self.RENT_STATUS_WEIGHTS, k=1)[0],
            monthly_rent=unit.rent_amount,
            unit_id=unit.unit_id,
            move_in_date=move_in,
            lease_end_date=lease_end,
            created_at=datetime.combine(move_in, datetime.min.time()),
        )

    def generate_former(self, unit: Unit, as_of: datetime) -> Tenant:
        """Generate a tenant who has already moved out of ``unit``."""
        tenant = self.generate(unit, as_of - timedelta(days=365), history_days=365)
        return replace(tenant, status=TenantStatus.MOVED_OUT, rent_status=RentStatus.CURRENT)
