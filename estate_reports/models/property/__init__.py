"""Property-management domain models."""

from estate_reports.models.property.ad import Ad
from estate_reports.models.property.building import Building
from estate_reports.models.property.enums import (
    AdStatus,
    BuildingStatus,
    ExpenseCategory,
    InquiryStatus,
    InquiryType,
    NoticeStatus,
    NoticeType,
    RentStatus,
    RevenueCategory,
    TenantStatus,
    TransactionStatus,
    TransactionType,
    UnitCategory,
    UnitStatus,
    WalletStatus,
    WalletTransactionType,
)
from estate_reports.models.property.inquiry import Inquiry
from estate_reports.models.property.notice import Notice
from estate_reports.models.property.tenant import Tenant
from estate_reports.models.property.transaction import Transaction
from estate_reports.models.property.unit import ListingView, Unit
from estate_reports.models.property.wallet import Wallet, WalletTransaction

__all__ = [
    "Ad",
    "AdStatus",
    "Building",
    "BuildingStatus",
    "ExpenseCategory",
    "Inquiry",
    "InquiryStatus",
    "InquiryType",
    "ListingView",
    "Notice",
    "NoticeStatus",
    "NoticeType",
    "RentStatus",
    "RevenueCategory",
    "Tenant",
    "TenantStatus",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "Unit",
    "UnitCategory",
    "UnitStatus",
    "Wallet",
    "WalletStatus",
    "WalletTransaction",
    "WalletTransactionType",
]
