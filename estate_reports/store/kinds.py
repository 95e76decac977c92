"""Entity kinds served by the data access layer and their schemas."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Iterable

from estate_reports.models.base import DateRange, ScopeKind, as_datetime
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


class EntityKind(str, Enum):
    BUILDING = "building"
    UNIT = "unit"
    TENANT = "tenant"
    INQUIRY = "inquiry"
    NOTICE = "notice"
    TRANSACTION = "transaction"
    LISTING_VIEW = "listing_view"
    AD = "ad"
    WALLET = "wallet"
    WALLET_TRANSACTION = "wallet_transaction"


# Column each table is scoped by, per scope kind
SCOPE_COLUMNS: dict[ScopeKind, str] = {
    ScopeKind.COMPANY: "company_account_id",
    ScopeKind.USER: "user_id",
}


@dataclass(frozen=True)
class EntitySchema:
    """How one entity kind is stored, identified, dated and filtered."""

    record_type: type
    table: str
    id_field: str
    date_field: str | None
    status_field: str | None


SCHEMAS: dict[EntityKind, EntitySchema] = {
    EntityKind.BUILDING: EntitySchema(Building, "buildings", "building_id", "created_at", "status"),
    EntityKind.UNIT: EntitySchema(Unit, "vacant_units", "unit_id", "created_at", "status"),
    EntityKind.TENANT: EntitySchema(Tenant, "tenants", "tenant_id", "move_in_date", "status"),
    EntityKind.INQUIRY: EntitySchema(Inquiry, "inquiries", "inquiry_id", "created_at", "status"),
    EntityKind.NOTICE: EntitySchema(Notice, "notices", "notice_id", "date_issued", "status"),
    EntityKind.TRANSACTION: EntitySchema(
        Transaction, "transactions", "transaction_id", "transaction_date", "status"
    ),
    EntityKind.LISTING_VIEW: EntitySchema(ListingView, "listing_views", "view_id", "viewed_at", None),
    EntityKind.AD: EntitySchema(Ad, "ads", "ad_id", "created_at", "status"),
    EntityKind.WALLET: EntitySchema(Wallet, "wallet", "wallet_id", "created_at", "status"),
    EntityKind.WALLET_TRANSACTION: EntitySchema(
        WalletTransaction, "wallet_transactions", "wallet_transaction_id", "created_at", "status"
    ),
}


@dataclass(frozen=True)
class FetchFilters:
    """Optional predicates for a scoped fetch.

    Parameters
    ----------
    statuses : frozenset[str] | None
        Keep only records whose status value is in this set.
    date_range : DateRange | None
        Keep only records whose date field falls in the range.
    newest_first : bool
        Order by the kind's date field, most recent first.
    limit : int | None
        Maximum number of records after ordering.
    """

    statuses: frozenset[str] | None = None
    date_range: DateRange | None = None
    newest_first: bool = False
    limit: int | None = None


def status_value(record: Any, field_name: str) -> str:
    value = getattr(record, field_name)
    return value.value if isinstance(value, Enum) else str(value)


def record_moment(record: Any, kind: EntityKind) -> datetime:
    """Date field of a record as a datetime; undated records sort oldest."""
    date_field = SCHEMAS[kind].date_field
    value = getattr(record, date_field) if date_field else None
    return as_datetime(value) if value is not None else datetime.min


def apply_filters(kind: EntityKind, records: Iterable[Any], filters: FetchFilters | None) -> list[Any]:
    """Apply ``filters`` to an in-memory collection of ``kind`` records."""
    result = list(records)
    if filters is None:
        return result

    schema = SCHEMAS[kind]
    if filters.statuses is not None and schema.status_field:
        result = [r for r in result if status_value(r, schema.status_field) in filters.statuses]

    if filters.date_range is not None and schema.date_field:
        result = [r for r in result if filters.date_range.contains(getattr(r, schema.date_field))]

    if filters.newest_first:
        result.sort(
            key=lambda r: (record_moment(r, kind), getattr(r, schema.id_field)),
            reverse=True,
        )

    if filters.limit is not None:
        result = result[: filters.limit]

    return result
