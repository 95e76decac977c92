"""Preview portfolio scenario: one account with a realistic history."""

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Any

from estate_reports.generators.property import (
    AdGenerator,
    BuildingGenerator,
    InquiryGenerator,
    ListingViewGenerator,
    NoticeGenerator,
    TenantGenerator,
    TransactionGenerator,
    UnitGenerator,
    WalletGenerator,
)
from estate_reports.models.base import AccountScope, to_naive_utc
from estate_reports.models.property import Unit, UnitCategory, UnitStatus
from estate_reports.store.memory import PortfolioStore

logger = logging.getLogger(__name__)


class PreviewPortfolioScenario:
    """Generate a complete portfolio for a single account.

    The portfolio contains:
    - Buildings with units, about 70% of rentable units occupied
    - Current tenants on occupied units, plus a few former tenants
    - Monthly rent receipts, move-in deposits and operating expenses
    - Listing views and inquiries spread over the history window
    - Notices issued to tenants
    - Ads for vacant listings, funded from an ad wallet
    """

    def __init__(
        self,
        scope: AccountScope,
        num_buildings: int = 3,
        seed: int | None = None,
        as_of: datetime | None = None,
        history_days: int = 180,
    ) -> None:
        """Initialize the preview portfolio scenario.

        Parameters
        ----------
        scope : AccountScope
            Account the portfolio belongs to.
        num_buildings : int
            Number of buildings to generate.
        seed : int | None
            Random seed for reproducibility.
        as_of : datetime | None
            Reference time; all history ends here. Defaults to now
            rounded down to the hour.
        history_days : int
            Length of generated activity history.
        """
        self.scope = scope
        self.num_buildings = num_buildings
        self.seed = seed
        self.as_of = as_of or to_naive_utc(datetime.now(timezone.utc)).replace(minute=0, second=0, microsecond=0)
        self.history_days = history_days

        self._rng = random.Random(seed)
        self.store = PortfolioStore()
        # Each generator gets its own stream so ids never collide across kinds
        self._building_gen = BuildingGenerator(seed=self._sub_seed(1))
        self._unit_gen = UnitGenerator(seed=self._sub_seed(2))
        self._view_gen = ListingViewGenerator(seed=self._sub_seed(3))
        self._tenant_gen = TenantGenerator(seed=self._sub_seed(4))
        self._inquiry_gen = InquiryGenerator(seed=self._sub_seed(5))
        self._notice_gen = NoticeGenerator(seed=self._sub_seed(6))
        self._transaction_gen = TransactionGenerator(seed=self._sub_seed(7))
        self._ad_gen = AdGenerator(seed=self._sub_seed(8))
        self._wallet_gen = WalletGenerator(seed=self._sub_seed(9))

    def generate(self) -> PortfolioStore:
        """Generate all data for the preview portfolio.

        Returns
        -------
        PortfolioStore
            Store containing the account and all its records.
        """
        logger.info(
            "Starting preview portfolio scenario for %s: %d buildings",
            self.scope,
            self.num_buildings,
        )
        self.store.add_account(self.scope)
        account_id = self.scope.scope_id
        start = self.as_of - timedelta(days=self.history_days)

        vacant = []
        for _ in range(self.num_buildings):
            building = self._building_gen.generate(account_id, self.as_of)
            self.store.add_building(building)
            for _ in range(building.total_units):
                unit = self._unit_gen.generate(building, self.as_of)
                self.store.add_unit(unit)
                self._generate_listing_activity(unit, start)
                if unit.status == UnitStatus.OCCUPIED:
                    self._generate_tenancy(unit)
                elif unit.category == UnitCategory.RENT:
                    vacant.append(unit)

        for _ in range(self._rng.randint(4, 10) * self.num_buildings):
            expense = self._transaction_gen.expense(
                account_id, self._transaction_gen.moment_between(start, self.as_of)
            )
            self.store.add_transaction(expense)

        self._generate_advertising(vacant)

        logger.info("Generated preview portfolio for %s: %s", self.scope, self.store.summary())
        return self.store

    def export(self, sinks: list[Any]) -> None:
        """Export generated data to sinks.

        Parameters
        ----------
        sinks : list[Any]
            Sink instances (ConsoleSink, JsonFileSink).
        """
        for sink in sinks:
            sink.write_batch("buildings", list(self.store.buildings.values()))
            sink.write_batch("units", list(self.store.units.values()))
            sink.write_batch("tenants", list(self.store.tenants.values()))
            sink.write_batch("inquiries", self.store.inquiries)
            sink.write_batch("notices", self.store.notices)
            sink.write_batch("transactions", self.store.transactions)
            sink.write_batch("listing_views", self.store.listing_views)
            sink.write_batch("ads", list(self.store.ads.values()))
            sink.write_batch("wallets", list(self.store.wallets.values()))
            sink.write_batch("wallet_transactions", self.store.wallet_transactions)

        logger.info("Exported preview portfolio to %d sinks", len(sinks))

    def _sub_seed(self, offset: int) -> int | None:
        return None if self.seed is None else self.seed * 31 + offset

    def _generate_listing_activity(self, unit: Unit, start: datetime) -> None:
        for view in self._view_gen.generate_for_unit(unit, start, self.as_of):
            self.store.add_listing_view(view)
        for _ in range(self._rng.randint(0, 4)):
            self.store.add_inquiry(self._inquiry_gen.generate(unit, start, self.as_of))

    def _generate_tenancy(self, unit: Unit) -> None:
        if self._rng.random() < 0.2:
            self.store.add_tenant(self._tenant_gen.generate_former(unit, self.as_of))

        tenant = self._tenant_gen.generate(unit, self.as_of, history_days=self.history_days * 2)
        self.store.add_tenant(tenant)

        move_in = datetime.combine(tenant.move_in_date, datetime.min.time())
        self.store.add_transaction(self._transaction_gen.deposit(tenant, move_in))

        # One rent receipt per month of tenancy, paid in the first week
        due = move_in.replace(day=1)
        while due < self.as_of:
            paid_at = max(due, move_in) + timedelta(days=self._rng.randint(0, 6), hours=self._rng.randint(8, 18))
            if paid_at < self.as_of:
                self.store.add_transaction(self._transaction_gen.rent_payment(tenant, paid_at))
            due = due.replace(year=due.year + 1, month=1) if due.month == 12 else due.replace(month=due.month + 1)

        for _ in range(self._rng.randint(0, 2)):
            self.store.add_notice(self._notice_gen.generate(tenant, self.as_of, self.history_days))

    def _generate_advertising(self, vacant: list[Unit]) -> None:
        ads = [self._ad_gen.generate(unit, self.as_of) for unit in vacant[: max(1, len(vacant) // 2)]]
        for ad in ads:
            self.store.add_ad(ad)
        if not ads:
            return
        wallet, movements = self._wallet_gen.generate(self.scope.scope_id, ads, self.as_of)
        self.store.add_wallet(wallet)
        for movement in movements:
            self.store.add_wallet_transaction(movement)
