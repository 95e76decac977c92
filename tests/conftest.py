"""Pytest configuration and fixtures."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from estate_reports.models.base import AccountScope, Address
from estate_reports.models.property import (
    Ad,
    AdStatus,
    Building,
    Inquiry,
    InquiryStatus,
    InquiryType,
    ListingView,
    Notice,
    NoticeStatus,
    NoticeType,
    RentStatus,
    Tenant,
    TenantStatus,
    Transaction,
    TransactionStatus,
    TransactionType,
    Unit,
    UnitCategory,
    UnitStatus,
    Wallet,
    WalletTransaction,
    WalletTransactionType,
)
from estate_reports.store.memory import PortfolioStore

COMPANY_ID = "3f2b8c1e-4a5d-4e6f-8a7b-9c0d1e2f3a4b"
OTHER_COMPANY_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
USER_ID = "a1b2c3d4-e5f6-4789-a012-3456789abcde"

AS_OF = datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def as_of() -> datetime:
    """Reference time used by the sample portfolio."""
    return AS_OF


@pytest.fixture
def company_scope() -> AccountScope:
    return AccountScope.company(COMPANY_ID)


@pytest.fixture
def other_scope() -> AccountScope:
    return AccountScope.company(OTHER_COMPANY_ID)


@pytest.fixture
def user_scope() -> AccountScope:
    return AccountScope.user(USER_ID)


def make_unit(
    unit_id: str,
    status: UnitStatus = UnitStatus.AVAILABLE,
    city: str = "Nairobi",
    account_id: str = COMPANY_ID,
    created_at: datetime | None = None,
    building_id: str | None = None,
) -> Unit:
    """Build a rentable unit with sensible defaults."""
    return Unit(
        unit_id=unit_id,
        account_id=account_id,
        title=f"Unit {unit_id}",
        category=UnitCategory.RENT,
        status=status,
        building_id=building_id,
        rent_amount=Decimal("25000"),
        bedrooms=2,
        bathrooms=1,
        city=city,
        created_at=created_at,
    )


def make_transaction(
    transaction_id: str,
    transaction_type: TransactionType,
    amount: str,
    when: datetime,
    status: TransactionStatus = TransactionStatus.COMPLETED,
    category: str | None = None,
    account_id: str = COMPANY_ID,
) -> Transaction:
    """Build a transaction; expenses keep the sign they are given."""
    if category is None:
        category = "rent" if transaction_type == TransactionType.REVENUE else "maintenance"
    return Transaction(
        transaction_id=transaction_id,
        account_id=account_id,
        transaction_type=transaction_type,
        category=category,
        amount=Decimal(amount),
        status=status,
        transaction_date=when,
        description=f"{category} {transaction_id}",
    )


@pytest.fixture
def portfolio(company_scope: AccountScope, other_scope: AccountScope) -> PortfolioStore:
    """Small company portfolio with a second, unrelated account.

    - 2 buildings, 10 units (7 occupied; 5 in Nairobi, 5 in Mombasa)
    - 3 tenants, 4 transactions (one pending), 3 inquiries, 2 notices
    - 6 listing views, 2 ads and a wallet with 3 movements
    """
    store = PortfolioStore()
    store.add_account(company_scope)
    store.add_account(other_scope)

    for building_id, name in (("b-1", "Acacia Court"), ("b-2", "Baobab Heights")):
        store.add_building(
            Building(
                building_id=building_id,
                account_id=COMPANY_ID,
                name=name,
                address=Address(street="Ngong Road", city="Nairobi"),
                building_type="apartment",
                total_units=5,
                created_at=datetime(2023, 1, 1),
            )
        )

    statuses = [UnitStatus.OCCUPIED] * 7 + [
        UnitStatus.AVAILABLE,
        UnitStatus.MAINTENANCE,
        UnitStatus.PENDING,
    ]
    for i, status in enumerate(statuses, start=1):
        store.add_unit(
            make_unit(
                f"u-{i:02d}",
                status=status,
                city="Nairobi" if i <= 5 else "Mombasa",
                created_at=datetime(2024, 1, i),
                building_id="b-1" if i <= 5 else "b-2",
            )
        )

    tenants = [
        ("t-1", TenantStatus.ACTIVE, RentStatus.CURRENT, date(2024, 6, 1), "u-01"),
        ("t-2", TenantStatus.ACTIVE, RentStatus.LATE, date(2024, 1, 10), "u-02"),
        ("t-3", TenantStatus.MOVED_OUT, RentStatus.OVERDUE, date(2023, 3, 1), "u-03"),
    ]
    for tenant_id, status, rent_status, move_in, unit_id in tenants:
        store.add_tenant(
            Tenant(
                tenant_id=tenant_id,
                account_id=COMPANY_ID,
                name=f"Tenant {tenant_id}",
                status=status,
                rent_status=rent_status,
                monthly_rent=Decimal("25000"),
                unit_id=unit_id,
                move_in_date=move_in,
            )
        )

    store.add_transaction(
        make_transaction("tx-1", TransactionType.REVENUE, "100000", datetime(2024, 6, 10))
    )
    store.add_transaction(
        make_transaction("tx-2", TransactionType.EXPENSE, "-40000", datetime(2024, 6, 5))
    )
    store.add_transaction(
        make_transaction(
            "tx-3",
            TransactionType.EXPENSE,
            "-99999",
            datetime(2024, 6, 6),
            status=TransactionStatus.PENDING,
        )
    )
    store.add_transaction(
        make_transaction("tx-4", TransactionType.REVENUE, "50000", datetime(2024, 5, 10))
    )

    inquiries = [
        ("i-1", InquiryType.VIEWING, InquiryStatus.NEW, datetime(2024, 6, 12), "u-01"),
        ("i-2", InquiryType.RENTAL, InquiryStatus.RESOLVED, datetime(2024, 6, 1), "u-01"),
        ("i-3", InquiryType.GENERAL, InquiryStatus.PENDING, datetime(2024, 5, 1), "u-08"),
    ]
    for inquiry_id, inquiry_type, status, created_at, unit_id in inquiries:
        store.add_inquiry(
            Inquiry(
                inquiry_id=inquiry_id,
                account_id=COMPANY_ID,
                inquiry_type=inquiry_type,
                status=status,
                created_at=created_at,
                unit_id=unit_id,
                name="Prospect",
                subject=f"About {unit_id}",
            )
        )

    store.add_notice(
        Notice(
            notice_id="n-1",
            account_id=COMPANY_ID,
            notice_type=NoticeType.MOVE_IN,
            status=NoticeStatus.PENDING,
            date_issued=date(2024, 6, 2),
            tenant_id="t-1",
            unit_id="u-01",
            description="Welcome",
        )
    )
    store.add_notice(
        Notice(
            notice_id="n-2",
            account_id=COMPANY_ID,
            notice_type=NoticeType.RENT_REMINDER,
            status=NoticeStatus.COMPLETED,
            date_issued=date(2024, 5, 20),
            tenant_id="t-2",
        )
    )

    for i, (unit_id, day) in enumerate(
        [("u-01", 3), ("u-01", 4), ("u-01", 10), ("u-01", 12), ("u-08", 5), ("u-08", 6)]
    ):
        store.add_listing_view(
            ListingView(
                view_id=f"v-{i}",
                account_id=COMPANY_ID,
                unit_id=unit_id,
                viewed_at=datetime(2024, 6, day, 9),
            )
        )

    store.add_ad(
        Ad(
            ad_id="ad-1",
            account_id=COMPANY_ID,
            unit_id="u-08",
            title="Featured u-08",
            budget=Decimal("3000"),
            status=AdStatus.ACTIVE,
            clicks=50,
            impressions=0,
            created_at=datetime(2024, 6, 1),
            expires_at=datetime(2024, 7, 1),
        )
    )
    store.add_ad(
        Ad(
            ad_id="ad-2",
            account_id=COMPANY_ID,
            unit_id="u-09",
            title="Featured u-09",
            budget=Decimal("1500"),
            status=AdStatus.PAUSED,
            clicks=10,
            impressions=400,
            created_at=datetime(2024, 5, 1),
            expires_at=datetime(2024, 8, 1),
        )
    )

    store.add_wallet(
        Wallet(
            wallet_id="w-1",
            account_id=COMPANY_ID,
            balance=Decimal("7000"),
            pending_balance=Decimal("5000"),
            total_deposits=Decimal("10000"),
            total_spent_on_ads=Decimal("3000"),
            created_at=datetime(2024, 5, 1),
        )
    )
    movements = [
        ("wt-1", "10000", WalletTransactionType.DEPOSIT, TransactionStatus.COMPLETED, 2),
        ("wt-2", "3000", WalletTransactionType.AD_SPEND, TransactionStatus.COMPLETED, 3),
        ("wt-3", "5000", WalletTransactionType.DEPOSIT, TransactionStatus.PENDING, 4),
    ]
    for txn_id, amount, txn_type, status, day in movements:
        store.add_wallet_transaction(
            WalletTransaction(
                wallet_transaction_id=txn_id,
                account_id=COMPANY_ID,
                wallet_id="w-1",
                amount=Decimal(amount),
                transaction_type=txn_type,
                status=status,
                created_at=datetime(2024, 6, day),
            )
        )

    # Unrelated account: must never leak into company reports
    store.add_unit(make_unit("x-01", status=UnitStatus.OCCUPIED, account_id=OTHER_COMPANY_ID))
    store.add_transaction(
        make_transaction(
            "x-tx", TransactionType.REVENUE, "999999", datetime(2024, 6, 1), account_id=OTHER_COMPANY_ID
        )
    )
    return store
