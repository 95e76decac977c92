"""Enumeration types for property-management entities."""

from enum import Enum


class BuildingStatus(str, Enum):
    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    ARCHIVED = "archived"


class UnitCategory(str, Enum):
    RENT = "rent"
    SALE = "sale"


class UnitStatus(str, Enum):
    AVAILABLE = "available"
    PENDING = "pending"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class TenantStatus(str, Enum):
    ACTIVE = "active"
    MOVING_OUT = "moving-out"
    MOVED_OUT = "moved-out"


class RentStatus(str, Enum):
    CURRENT = "current"
    LATE = "late"
    OVERDUE = "overdue"


class InquiryType(str, Enum):
    VIEWING = "viewing"
    RENTAL = "rental"
    PURCHASE = "purchase"
    MAINTENANCE = "maintenance"
    GENERAL = "general"


class InquiryStatus(str, Enum):
    NEW = "new"
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class NoticeType(str, Enum):
    MOVE_IN = "move-in"
    MOVE_OUT = "move-out"
    MAINTENANCE = "maintenance"
    RENT_REMINDER = "rent-reminder"
    GENERAL = "general"


class NoticeStatus(str, Enum):
    PENDING = "pending"
    DELIVERED = "delivered"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class TransactionType(str, Enum):
    REVENUE = "revenue"
    EXPENSE = "expense"


class TransactionStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    FAILED = "failed"


class RevenueCategory(str, Enum):
    RENT = "rent"
    DEPOSIT = "deposit"
    FEES = "fees"
    COMMISSION = "commission"
    OTHER = "other"


class ExpenseCategory(str, Enum):
    MAINTENANCE = "maintenance"
    UTILITIES = "utilities"
    INSURANCE = "insurance"
    PROPERTY_TAX = "property_tax"
    MANAGEMENT = "management"
    MARKETING = "marketing"
    OTHER = "other"


class AdStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    EXPIRED = "expired"


class WalletStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    CLOSED = "closed"


class WalletTransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    AD_SPEND = "ad_spend"
    REFUND = "refund"
    BONUS = "bonus"


# Unit statuses written by older page versions
UNIT_STATUS_ALIASES: dict[str, UnitStatus] = {
    "rented": UnitStatus.OCCUPIED,
    "vacant": UnitStatus.AVAILABLE,
}

# Inquiry statuses still waiting on the company
PENDING_INQUIRY_STATUSES = frozenset(
    {InquiryStatus.NEW, InquiryStatus.PENDING, InquiryStatus.IN_PROGRESS}
)

ACTIVE_NOTICE_STATUSES = frozenset(
    {NoticeStatus.PENDING, NoticeStatus.DELIVERED, NoticeStatus.APPROVED}
)

CREDIT_WALLET_TYPES = frozenset(
    {WalletTransactionType.DEPOSIT, WalletTransactionType.REFUND, WalletTransactionType.BONUS}
)

DEBIT_WALLET_TYPES = frozenset(
    {WalletTransactionType.WITHDRAWAL, WalletTransactionType.AD_SPEND}
)
