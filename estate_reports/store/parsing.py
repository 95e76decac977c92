"""Validation of raw store rows into typed records.

Rows come from the hosted database as loosely typed mappings. Everything
the aggregation engine relies on (non-negative money, known enum values,
comparable timestamps) is checked here, so the engine can stay total.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

from estate_reports.exceptions import RecordValidationError
from estate_reports.models.base import AccountScope, Address, to_naive_utc
from estate_reports.models.property import (
    Ad,
    AdStatus,
    Building,
    BuildingStatus,
    ExpenseCategory,
    Inquiry,
    InquiryStatus,
    InquiryType,
    ListingView,
    Notice,
    NoticeStatus,
    NoticeType,
    RentStatus,
    RevenueCategory,
    Tenant,
    TenantStatus,
    Transaction,
    TransactionStatus,
    TransactionType,
    Unit,
    UnitCategory,
    UnitStatus,
    Wallet,
    WalletStatus,
    WalletTransaction,
    WalletTransactionType,
)
from estate_reports.models.property.enums import UNIT_STATUS_ALIASES
from estate_reports.store.kinds import SCOPE_COLUMNS, EntityKind

E = TypeVar("E", bound=Enum)

# Transaction types used by older pages, mapped to (type, category)
LEGACY_TRANSACTION_TYPES: dict[str, tuple[TransactionType, str]] = {
    "rent": (TransactionType.REVENUE, RevenueCategory.RENT.value),
    "deposit": (TransactionType.REVENUE, RevenueCategory.DEPOSIT.value),
    "commission": (TransactionType.REVENUE, RevenueCategory.COMMISSION.value),
    "maintenance": (TransactionType.EXPENSE, ExpenseCategory.MAINTENANCE.value),
}


def parse_record(kind: EntityKind, row: Mapping[str, Any], scope: AccountScope | None = None) -> Any:
    """Validate a raw row into the record type of ``kind``.

    Parameters
    ----------
    kind : EntityKind
        Entity kind the row was fetched as.
    row : Mapping[str, Any]
        Column name to value mapping.
    scope : AccountScope | None
        Scope the row was fetched for. Tables without an owner column
        (wallet transactions of individual users) take their account from
        it; rows that do name an owner keep it.

    Returns
    -------
    Any
        The typed, frozen record.

    Raises
    ------
    RecordValidationError
        If a required column is missing or a value is malformed.
    """
    try:
        parser = _PARSERS[kind]
    except KeyError:
        raise RecordValidationError(f"No parser for entity kind {kind!r}") from None
    if scope is not None and not (row.get("company_account_id") or row.get("user_id")):
        row = {**row, SCOPE_COLUMNS[scope.kind]: scope.scope_id}
    return parser(row)


def normalize_category(transaction_type: TransactionType, raw: str | None) -> str:
    """Map a free-form category onto the enumerated categories of its type."""
    enum_cls = RevenueCategory if transaction_type == TransactionType.REVENUE else ExpenseCategory
    if not raw:
        return enum_cls.OTHER.value
    key = str(raw).strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return enum_cls(key).value
    except ValueError:
        return enum_cls.OTHER.value


def _parse_building(row: Mapping[str, Any]) -> Building:
    return Building(
        building_id=_required_str(row, "id"),
        account_id=_account_id(row),
        name=_str(row, "name"),
        address=Address(
            street=_str(row, "address"),
            city=_str(row, "city"),
            county=_str(row, "county"),
            postal_code=_str(row, "postal_code"),
        ),
        building_type=_str(row, "building_type"),
        total_units=_count(row, "total_units"),
        year_built=_optional_int(row, "year_built"),
        status=_enum(BuildingStatus, row.get("status"), "status", default=BuildingStatus.ACTIVE),
        created_at=_optional_timestamp(row, "created_at"),
    )


def _parse_unit(row: Mapping[str, Any]) -> Unit:
    category = str(row.get("category") or "rent").strip().lower()
    if category.startswith("for "):
        category = category[4:]
    return Unit(
        unit_id=_required_str(row, "id"),
        account_id=_account_id(row),
        title=_str(row, "title") or _str(row, "property_name"),
        category=_enum(UnitCategory, category, "category"),
        status=_enum(UnitStatus, row.get("status"), "status", aliases=UNIT_STATUS_ALIASES),
        building_id=row.get("building_id") or None,
        rent_amount=_money(row, "rent_amount"),
        selling_price=_money(row, "selling_price"),
        bedrooms=_count(row, "bedrooms"),
        bathrooms=_count(row, "bathrooms"),
        city=_str(row, "city") or _str(row, "location"),
        created_at=_optional_timestamp(row, "created_at"),
    )


def _parse_tenant(row: Mapping[str, Any]) -> Tenant:
    return Tenant(
        tenant_id=_required_str(row, "id"),
        account_id=_account_id(row),
        name=_str(row, "name"),
        status=_enum(TenantStatus, row.get("status"), "status"),
        rent_status=_enum(RentStatus, row.get("rent_status"), "rent_status", default=RentStatus.CURRENT),
        monthly_rent=_money(row, "monthly_rent"),
        unit_id=row.get("unit_id") or None,
        move_in_date=_optional_date(row, "move_in_date"),
        lease_end_date=_optional_date(row, "lease_end_date"),
        created_at=_optional_timestamp(row, "created_at"),
    )


def _parse_inquiry(row: Mapping[str, Any]) -> Inquiry:
    return Inquiry(
        inquiry_id=_required_str(row, "id"),
        account_id=_account_id(row),
        inquiry_type=_enum(
            InquiryType, row.get("inquiry_type"), "inquiry_type", default=InquiryType.GENERAL
        ),
        status=_enum(InquiryStatus, row.get("status"), "status", default=InquiryStatus.NEW),
        created_at=_timestamp(row, "created_at"),
        unit_id=row.get("unit_id") or row.get("property_id") or None,
        name=_str(row, "name"),
        subject=_str(row, "subject"),
    )


def _parse_notice(row: Mapping[str, Any]) -> Notice:
    issued = row.get("date_issued") or row.get("notice_date") or row.get("created_at")
    return Notice(
        notice_id=_required_str(row, "id"),
        account_id=_account_id(row),
        notice_type=_enum(NoticeType, row.get("type"), "type", default=NoticeType.GENERAL),
        status=_enum(NoticeStatus, row.get("status"), "status", default=NoticeStatus.PENDING),
        date_issued=_as_date(issued, "date_issued"),
        tenant_id=row.get("tenant_id") or None,
        unit_id=row.get("unit_id") or None,
        description=_str(row, "description"),
    )


def _parse_transaction(row: Mapping[str, Any]) -> Transaction:
    amount = _signed_money(row, "amount")
    raw_type = str(row.get("type") or "").strip().lower()
    category = row.get("category")

    if raw_type in ("revenue", "expense"):
        transaction_type = TransactionType(raw_type)
    elif raw_type in LEGACY_TRANSACTION_TYPES:
        transaction_type, legacy_category = LEGACY_TRANSACTION_TYPES[raw_type]
        category = category or legacy_category
    elif raw_type:
        raise RecordValidationError(f"Invalid type: {row.get('type')!r}")
    else:
        # Untagged rows are classified by sign
        transaction_type = TransactionType.REVENUE if amount >= 0 else TransactionType.EXPENSE

    moment = row.get("transaction_date") or row.get("payment_date") or row.get("date")
    return Transaction(
        transaction_id=_required_str(row, "id"),
        account_id=_account_id(row),
        transaction_type=transaction_type,
        category=normalize_category(transaction_type, category),
        amount=amount,
        status=_enum(TransactionStatus, row.get("status"), "status", default=TransactionStatus.PENDING),
        transaction_date=_as_timestamp(moment, "transaction_date"),
        description=_str(row, "description"),
        unit_id=row.get("unit_id") or None,
    )


def _parse_listing_view(row: Mapping[str, Any]) -> ListingView:
    return ListingView(
        view_id=_required_str(row, "id"),
        account_id=_account_id(row),
        unit_id=_required_str(row, "unit_id"),
        viewed_at=_timestamp(row, "viewed_at"),
    )


def _parse_ad(row: Mapping[str, Any]) -> Ad:
    return Ad(
        ad_id=_required_str(row, "id"),
        account_id=_account_id(row),
        unit_id=_str(row, "property_id") or _required_str(row, "unit_id"),
        title=_str(row, "title"),
        budget=_money(row, "budget"),
        status=_enum(AdStatus, row.get("status"), "status"),
        clicks=_count(row, "clicks"),
        impressions=_count(row, "impressions"),
        conversions=_count(row, "conversions"),
        created_at=_optional_timestamp(row, "created_at"),
        expires_at=_optional_timestamp(row, "expires_at"),
    )


def _parse_wallet(row: Mapping[str, Any]) -> Wallet:
    return Wallet(
        wallet_id=_required_str(row, "id"),
        account_id=_account_id(row),
        balance=_money(row, "balance"),
        pending_balance=_money(row, "pending_balance"),
        total_deposits=_money(row, "total_deposits"),
        total_withdrawals=_money(row, "total_withdrawals"),
        total_spent_on_ads=_money(row, "total_spent_on_ads"),
        currency=_str(row, "currency") or "KES",
        status=_enum(WalletStatus, row.get("status"), "status", default=WalletStatus.ACTIVE),
        created_at=_optional_timestamp(row, "created_at"),
    )


def _parse_wallet_transaction(row: Mapping[str, Any]) -> WalletTransaction:
    return WalletTransaction(
        wallet_transaction_id=_required_str(row, "id"),
        account_id=_account_id(row),
        wallet_id=_required_str(row, "wallet_id"),
        amount=_money(row, "amount"),
        transaction_type=_enum(WalletTransactionType, row.get("transaction_type"), "transaction_type"),
        status=_enum(TransactionStatus, row.get("status"), "status", default=TransactionStatus.PENDING),
        created_at=_timestamp(row, "created_at"),
        description=_str(row, "description"),
        ad_id=row.get("ad_id") or None,
    )


_PARSERS: dict[EntityKind, Callable[[Mapping[str, Any]], Any]] = {
    EntityKind.BUILDING: _parse_building,
    EntityKind.UNIT: _parse_unit,
    EntityKind.TENANT: _parse_tenant,
    EntityKind.INQUIRY: _parse_inquiry,
    EntityKind.NOTICE: _parse_notice,
    EntityKind.TRANSACTION: _parse_transaction,
    EntityKind.LISTING_VIEW: _parse_listing_view,
    EntityKind.AD: _parse_ad,
    EntityKind.WALLET: _parse_wallet,
    EntityKind.WALLET_TRANSACTION: _parse_wallet_transaction,
}


# Field helpers

def _account_id(row: Mapping[str, Any]) -> str:
    account_id = row.get("company_account_id") or row.get("user_id")
    if not account_id:
        raise RecordValidationError(f"Row {row.get('id')!r} has no company_account_id or user_id")
    return str(account_id)


def _required_str(row: Mapping[str, Any], name: str) -> str:
    value = row.get(name)
    if value is None or value == "":
        raise RecordValidationError(f"Missing required column {name!r}")
    return str(value)


def _str(row: Mapping[str, Any], name: str) -> str:
    value = row.get(name)
    return "" if value is None else str(value)


def _signed_money(row: Mapping[str, Any], name: str) -> Decimal:
    value = row.get(name)
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise RecordValidationError(f"Invalid {name}: {value!r}") from e
    if not amount.is_finite():
        raise RecordValidationError(f"Invalid {name}: {value!r}")
    return amount


def _money(row: Mapping[str, Any], name: str) -> Decimal:
    amount = _signed_money(row, name)
    if amount < 0:
        raise RecordValidationError(f"{name} must not be negative, got {amount}")
    return amount


def _count(row: Mapping[str, Any], name: str) -> int:
    value = _optional_int(row, name)
    if value is None:
        return 0
    if value < 0:
        raise RecordValidationError(f"{name} must not be negative, got {value}")
    return value


def _optional_int(row: Mapping[str, Any], name: str) -> int | None:
    value = row.get(name)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise RecordValidationError(f"Invalid {name}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise RecordValidationError(f"Invalid {name}: {value!r}") from e


def _enum(
    enum_cls: type[E],
    value: Any,
    name: str,
    aliases: Mapping[str, E] | None = None,
    default: E | None = None,
) -> E:
    if value is None or value == "":
        if default is not None:
            return default
        raise RecordValidationError(f"Missing required column {name!r}")
    if isinstance(value, enum_cls):
        return value

    key = str(value).strip().lower()
    if aliases and key in aliases:
        return aliases[key]
    for candidate in (key, key.replace("_", "-"), key.replace("-", "_")):
        try:
            return enum_cls(candidate)
        except ValueError:
            continue
    raise RecordValidationError(f"Invalid {name}: {value!r}")


def _timestamp(row: Mapping[str, Any], name: str) -> datetime:
    return _as_timestamp(row.get(name), name)


def _optional_timestamp(row: Mapping[str, Any], name: str) -> datetime | None:
    value = row.get(name)
    if value is None or value == "":
        return None
    return _as_timestamp(value, name)


def _as_timestamp(value: Any, name: str) -> datetime:
    if value is None or value == "":
        raise RecordValidationError(f"Missing required column {name!r}")
    if isinstance(value, datetime):
        return to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return to_naive_utc(datetime.fromisoformat(str(value).replace("Z", "+00:00")))
    except ValueError as e:
        raise RecordValidationError(f"Invalid {name}: {value!r}") from e


def _optional_date(row: Mapping[str, Any], name: str) -> date | None:
    value = row.get(name)
    if value is None or value == "":
        return None
    return _as_date(value, name)


def _as_date(value: Any, name: str) -> date:
    if value is None or value == "":
        raise RecordValidationError(f"Missing required column {name!r}")
    if isinstance(value, datetime):
        return to_naive_utc(value).date()
    if isinstance(value, date):
        return value
    return _as_timestamp(value, name).date()
