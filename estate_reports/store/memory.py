"""In-memory portfolio store with referential integrity."""

from dataclasses import dataclass, field
from typing import Any

from estate_reports.exceptions import AccountNotFoundError, ReferentialIntegrityError
from estate_reports.models.base import AccountScope
from estate_reports.models.property import (
    Ad,
    Building,
    Inquiry,
    ListingView,
    Notice,
    Tenant,
    Transaction,
    Unit,
    Wallet,
    WalletTransaction,
)
from estate_reports.store.kinds import EntityKind, FetchFilters, apply_filters


@dataclass
class PortfolioStore:
    """In-memory store for property entities, indexed by account.

    Serves as a ``DataSource`` for tests and preview mode. Records are
    frozen dataclasses, so fetched collections are safe to share between
    threads once loading is finished.
    """

    accounts: dict[str, AccountScope] = field(default_factory=dict)

    # Primary entities
    buildings: dict[str, Building] = field(default_factory=dict)
    units: dict[str, Unit] = field(default_factory=dict)
    tenants: dict[str, Tenant] = field(default_factory=dict)
    ads: dict[str, Ad] = field(default_factory=dict)
    wallets: dict[str, Wallet] = field(default_factory=dict)

    # Activity
    inquiries: list[Inquiry] = field(default_factory=list)
    notices: list[Notice] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    listing_views: list[ListingView] = field(default_factory=list)
    wallet_transactions: list[WalletTransaction] = field(default_factory=list)

    # Relationship indexes
    _account_records: dict[str, dict[EntityKind, list[Any]]] = field(default_factory=dict)

    def add_account(self, scope: AccountScope) -> None:
        """Register an account scope."""
        self.accounts[scope.scope_id] = scope
        self._account_records.setdefault(scope.scope_id, {kind: [] for kind in EntityKind})

    def add_building(self, building: Building) -> None:
        """Add a building to the store."""
        self._require_account(building.account_id)
        self.buildings[building.building_id] = building
        self._index(EntityKind.BUILDING, building)

    def add_unit(self, unit: Unit) -> None:
        """Add a unit to the store."""
        self._require_account(unit.account_id)
        if unit.building_id:
            self._require_owned(self.buildings, "Building", unit.building_id, unit.account_id)
        self.units[unit.unit_id] = unit
        self._index(EntityKind.UNIT, unit)

    def add_tenant(self, tenant: Tenant) -> None:
        """Add a tenant to the store."""
        self._require_account(tenant.account_id)
        if tenant.unit_id:
            self._require_owned(self.units, "Unit", tenant.unit_id, tenant.account_id)
        self.tenants[tenant.tenant_id] = tenant
        self._index(EntityKind.TENANT, tenant)

    def add_inquiry(self, inquiry: Inquiry) -> None:
        """Add an inquiry to the store."""
        self._require_account(inquiry.account_id)
        if inquiry.unit_id:
            self._require_owned(self.units, "Unit", inquiry.unit_id, inquiry.account_id)
        self.inquiries.append(inquiry)
        self._index(EntityKind.INQUIRY, inquiry)

    def add_notice(self, notice: Notice) -> None:
        """Add a notice to the store."""
        self._require_account(notice.account_id)
        if notice.tenant_id:
            self._require_owned(self.tenants, "Tenant", notice.tenant_id, notice.account_id)
        self.notices.append(notice)
        self._index(EntityKind.NOTICE, notice)

    def add_transaction(self, transaction: Transaction) -> None:
        """Add a financial transaction to the store."""
        self._require_account(transaction.account_id)
        self.transactions.append(transaction)
        self._index(EntityKind.TRANSACTION, transaction)

    def add_listing_view(self, view: ListingView) -> None:
        """Add a listing view to the store."""
        self._require_account(view.account_id)
        self._require_owned(self.units, "Unit", view.unit_id, view.account_id)
        self.listing_views.append(view)
        self._index(EntityKind.LISTING_VIEW, view)

    def add_ad(self, ad: Ad) -> None:
        """Add an ad to the store."""
        self._require_account(ad.account_id)
        self._require_owned(self.units, "Unit", ad.unit_id, ad.account_id)
        self.ads[ad.ad_id] = ad
        self._index(EntityKind.AD, ad)

    def add_wallet(self, wallet: Wallet) -> None:
        """Add a wallet to the store."""
        self._require_account(wallet.account_id)
        self.wallets[wallet.wallet_id] = wallet
        self._index(EntityKind.WALLET, wallet)

    def add_wallet_transaction(self, transaction: WalletTransaction) -> None:
        """Add a wallet transaction to the store."""
        self._require_account(transaction.account_id)
        self._require_owned(self.wallets, "Wallet", transaction.wallet_id, transaction.account_id)
        self.wallet_transactions.append(transaction)
        self._index(EntityKind.WALLET_TRANSACTION, transaction)

    # DataSource interface
    def ensure_account(self, scope: AccountScope) -> None:
        """Raise if the scope has no registered account."""
        registered = self.accounts.get(scope.scope_id)
        if registered is None or registered.kind != scope.kind:
            raise AccountNotFoundError(f"No account for {scope}")

    def fetch(
        self,
        kind: EntityKind,
        scope: AccountScope,
        filters: FetchFilters | None = None,
    ) -> list[Any]:
        """Get all ``kind`` records of an account, filtered."""
        self.ensure_account(scope)
        records = self._account_records[scope.scope_id][kind]
        return apply_filters(kind, records, filters)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "accounts": len(self.accounts),
            "buildings": len(self.buildings),
            "units": len(self.units),
            "tenants": len(self.tenants),
            "inquiries": len(self.inquiries),
            "notices": len(self.notices),
            "transactions": len(self.transactions),
            "listing_views": len(self.listing_views),
            "ads": len(self.ads),
            "wallets": len(self.wallets),
            "wallet_transactions": len(self.wallet_transactions),
        }

    def _require_account(self, account_id: str) -> None:
        if account_id not in self.accounts:
            raise ReferentialIntegrityError(f"Account {account_id} not found")

    @staticmethod
    def _require_owned(entities: dict[str, Any], label: str, entity_id: str, account_id: str) -> None:
        entity = entities.get(entity_id)
        if entity is None or entity.account_id != account_id:
            raise ReferentialIntegrityError(f"{label} {entity_id} not found")

    def _index(self, kind: EntityKind, record: Any) -> None:
        self._account_records[record.account_id][kind].append(record)
