"""Tests for row validation at the data access boundary."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from conftest import COMPANY_ID, USER_ID
from estate_reports.exceptions import RecordValidationError
from estate_reports.models.base import AccountScope
from estate_reports.models.property import (
    InquiryStatus,
    InquiryType,
    NoticeStatus,
    RentStatus,
    TransactionStatus,
    TransactionType,
    UnitCategory,
    UnitStatus,
    WalletTransactionType,
)
from estate_reports.store.kinds import EntityKind
from estate_reports.store.parsing import normalize_category, parse_record


class TestParseUnit:
    """Tests for unit rows."""

    def test_basic_row(self) -> None:
        """Test a complete unit row."""
        unit = parse_record(
            EntityKind.UNIT,
            {
                "id": "u-1",
                "company_account_id": COMPANY_ID,
                "title": "2BR Kilimani",
                "category": "rent",
                "status": "occupied",
                "rent_amount": 45000,
                "bedrooms": 2,
                "bathrooms": 1,
                "location": "Nairobi",
                "created_at": "2024-06-01T08:00:00Z",
            },
        )

        assert unit.unit_id == "u-1"
        assert unit.account_id == COMPANY_ID
        assert unit.category == UnitCategory.RENT
        assert unit.status == UnitStatus.OCCUPIED
        assert unit.rent_amount == Decimal("45000")
        assert unit.city == "Nairobi"
        assert unit.created_at == datetime(2024, 6, 1, 8, 0)

    def test_legacy_values(self) -> None:
        """Test 'For Sale' categories and legacy status aliases."""
        unit = parse_record(
            EntityKind.UNIT,
            {"id": "u-2", "user_id": USER_ID, "category": "For Sale", "status": "Rented"},
        )

        assert unit.account_id == USER_ID
        assert unit.category == UnitCategory.SALE
        assert unit.status == UnitStatus.OCCUPIED

    def test_vacant_alias(self) -> None:
        """Test 'vacant' maps to available."""
        unit = parse_record(
            EntityKind.UNIT, {"id": "u-3", "company_account_id": COMPANY_ID, "status": "vacant"}
        )

        assert unit.status == UnitStatus.AVAILABLE

    def test_negative_rent_rejected(self) -> None:
        """Test negative money is rejected."""
        with pytest.raises(RecordValidationError, match="rent_amount"):
            parse_record(
                EntityKind.UNIT,
                {"id": "u", "company_account_id": COMPANY_ID, "status": "available", "rent_amount": -1},
            )

    def test_unknown_status_rejected(self) -> None:
        """Test unknown enum values are rejected."""
        with pytest.raises(RecordValidationError, match="status"):
            parse_record(EntityKind.UNIT, {"id": "u", "company_account_id": COMPANY_ID, "status": "haunted"})

    def test_missing_account_rejected(self) -> None:
        """Test rows without an owning account are rejected."""
        with pytest.raises(RecordValidationError, match="company_account_id"):
            parse_record(EntityKind.UNIT, {"id": "u", "status": "available"})

    def test_owner_taken_from_scope(self) -> None:
        """Test a row without an owner column belongs to the scope it was fetched for."""
        unit = parse_record(EntityKind.UNIT, {"id": "u", "status": "available"}, AccountScope.user(USER_ID))

        assert unit.account_id == USER_ID

    def test_row_owner_wins_over_scope(self) -> None:
        """Test an explicit owner column is kept."""
        unit = parse_record(
            EntityKind.UNIT,
            {"id": "u", "company_account_id": COMPANY_ID, "status": "available"},
            AccountScope.user(USER_ID),
        )

        assert unit.account_id == COMPANY_ID


class TestParseTransaction:
    """Tests for transaction rows."""

    def test_typed_row(self) -> None:
        """Test an explicitly typed expense keeps its sign."""
        txn = parse_record(
            EntityKind.TRANSACTION,
            {
                "id": "t-1",
                "company_account_id": COMPANY_ID,
                "type": "expense",
                "category": "Property Tax",
                "amount": "-12000.50",
                "status": "completed",
                "transaction_date": datetime(2024, 6, 1, 12, tzinfo=timezone(timedelta(hours=3))),
            },
        )

        assert txn.transaction_type == TransactionType.EXPENSE
        assert txn.category == "property_tax"
        assert txn.amount == Decimal("-12000.50")
        assert txn.magnitude == Decimal("12000.50")
        assert txn.status == TransactionStatus.COMPLETED
        assert txn.transaction_date == datetime(2024, 6, 1, 9)

    @pytest.mark.parametrize(
        "raw_type,expected_type,expected_category",
        [
            ("rent", TransactionType.REVENUE, "rent"),
            ("deposit", TransactionType.REVENUE, "deposit"),
            ("commission", TransactionType.REVENUE, "commission"),
            ("maintenance", TransactionType.EXPENSE, "maintenance"),
        ],
    )
    def test_legacy_types(
        self, raw_type: str, expected_type: TransactionType, expected_category: str
    ) -> None:
        """Test legacy payment types map onto type and category."""
        txn = parse_record(
            EntityKind.TRANSACTION,
            {"id": "t", "company_account_id": COMPANY_ID, "type": raw_type, "amount": 100, "payment_date": "2024-06-01"},
        )

        assert txn.transaction_type == expected_type
        assert txn.category == expected_category
        assert txn.transaction_date == datetime(2024, 6, 1)

    @pytest.mark.parametrize(
        "amount,expected",
        [("500", TransactionType.REVENUE), ("-500", TransactionType.EXPENSE)],
    )
    def test_untyped_classified_by_sign(self, amount: str, expected: TransactionType) -> None:
        """Test rows without a type are classified by the amount's sign."""
        txn = parse_record(
            EntityKind.TRANSACTION,
            {"id": "t", "company_account_id": COMPANY_ID, "amount": amount, "date": "2024-06-01"},
        )

        assert txn.transaction_type == expected
        assert txn.category == "other"
        assert txn.status == TransactionStatus.PENDING

    def test_unknown_type_rejected(self) -> None:
        """Test unknown transaction types are rejected."""
        with pytest.raises(RecordValidationError, match="type"):
            parse_record(
                EntityKind.TRANSACTION,
                {"id": "t", "company_account_id": COMPANY_ID, "type": "gift", "date": "2024-06-01"},
            )

    @pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity"])
    def test_bad_amount_rejected(self, amount: str) -> None:
        """Test non-numeric and non-finite amounts are rejected."""
        with pytest.raises(RecordValidationError, match="amount"):
            parse_record(
                EntityKind.TRANSACTION,
                {"id": "t", "company_account_id": COMPANY_ID, "amount": amount, "date": "2024-06-01"},
            )

    def test_missing_date_rejected(self) -> None:
        """Test transactions must be dated."""
        with pytest.raises(RecordValidationError, match="transaction_date"):
            parse_record(EntityKind.TRANSACTION, {"id": "t", "company_account_id": COMPANY_ID, "amount": 1})

    def test_bad_timestamp_rejected(self) -> None:
        """Test unparseable timestamps are rejected."""
        with pytest.raises(RecordValidationError):
            parse_record(
                EntityKind.TRANSACTION,
                {"id": "t", "company_account_id": COMPANY_ID, "amount": 1, "date": "yesterday"},
            )


class TestParseOtherKinds:
    """Tests for the remaining entity kinds."""

    def test_tenant(self) -> None:
        """Test tenant rows default rent status to current."""
        tenant = parse_record(
            EntityKind.TENANT,
            {
                "id": "t-1",
                "company_account_id": COMPANY_ID,
                "name": "Wanjiku",
                "status": "moving_out",
                "monthly_rent": "25000",
                "move_in_date": "2024-01-10",
            },
        )

        assert tenant.status.value == "moving-out"
        assert tenant.rent_status == RentStatus.CURRENT
        assert tenant.move_in_date == date(2024, 1, 10)

    def test_inquiry_defaults(self) -> None:
        """Test inquiry type and status defaults."""
        inquiry = parse_record(
            EntityKind.INQUIRY,
            {"id": "i", "company_account_id": COMPANY_ID, "created_at": "2024-06-01T10:00:00", "property_id": "u-1"},
        )

        assert inquiry.inquiry_type == InquiryType.GENERAL
        assert inquiry.status == InquiryStatus.NEW
        assert inquiry.unit_id == "u-1"

    def test_notice_date_fallback(self) -> None:
        """Test notice date falls back to notice_date then created_at."""
        notice = parse_record(
            EntityKind.NOTICE,
            {"id": "n", "company_account_id": COMPANY_ID, "notice_date": "2024-06-02", "status": "delivered"},
        )
        dated_by_creation = parse_record(
            EntityKind.NOTICE,
            {"id": "n", "company_account_id": COMPANY_ID, "created_at": datetime(2024, 6, 3, 15)},
        )

        assert notice.date_issued == date(2024, 6, 2)
        assert notice.status == NoticeStatus.DELIVERED
        assert dated_by_creation.date_issued == date(2024, 6, 3)

    def test_building(self) -> None:
        """Test building rows build an address."""
        building = parse_record(
            EntityKind.BUILDING,
            {"id": "b", "company_account_id": COMPANY_ID, "name": "Acacia", "city": "Nairobi", "total_units": "12"},
        )

        assert building.address.city == "Nairobi"
        assert building.total_units == 12

    def test_negative_count_rejected(self) -> None:
        """Test negative counters are rejected."""
        with pytest.raises(RecordValidationError, match="clicks"):
            parse_record(
                EntityKind.AD,
                {"id": "a", "company_account_id": COMPANY_ID, "unit_id": "u", "status": "active", "clicks": -3},
            )

    def test_wallet_transaction(self) -> None:
        """Test wallet transaction rows."""
        txn = parse_record(
            EntityKind.WALLET_TRANSACTION,
            {
                "id": "wt",
                "user_id": USER_ID,
                "wallet_id": "w",
                "amount": "1500",
                "transaction_type": "ad-spend",
                "status": "completed",
                "created_at": "2024-06-01T00:00:00+00:00",
            },
        )

        assert txn.transaction_type == WalletTransactionType.AD_SPEND
        assert not txn.is_credit

    def test_wallet_currency_default(self) -> None:
        """Test wallets default to KES."""
        wallet = parse_record(EntityKind.WALLET, {"id": "w", "user_id": USER_ID, "balance": "10"})

        assert wallet.currency == "KES"
        assert wallet.balance == Decimal("10")

    def test_listing_view_requires_unit(self) -> None:
        """Test listing views must reference a unit."""
        with pytest.raises(RecordValidationError, match="unit_id"):
            parse_record(
                EntityKind.LISTING_VIEW,
                {"id": "v", "company_account_id": COMPANY_ID, "viewed_at": "2024-06-01T00:00:00"},
            )


class TestNormalizeCategory:
    """Tests for normalize_category."""

    @pytest.mark.parametrize(
        "transaction_type,raw,expected",
        [
            (TransactionType.REVENUE, "Rent", "rent"),
            (TransactionType.REVENUE, "late fee", "other"),
            (TransactionType.REVENUE, None, "other"),
            (TransactionType.EXPENSE, "property-tax", "property_tax"),
            (TransactionType.EXPENSE, "rent", "other"),
        ],
    )
    def test_mapping(self, transaction_type: TransactionType, raw: str | None, expected: str) -> None:
        """Test free-form categories map to the type's categories."""
        assert normalize_category(transaction_type, raw) == expected
