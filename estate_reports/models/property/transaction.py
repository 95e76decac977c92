"""Financial transaction model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from estate_reports.models.property.enums import TransactionStatus, TransactionType


@dataclass(frozen=True)
class Transaction:
    """Revenue or expense booked against an account."""

    transaction_id: str
    account_id: str
    transaction_type: TransactionType
    category: str  # RevenueCategory or ExpenseCategory value
    amount: Decimal  # sign as stored; aggregates use the absolute value
    status: TransactionStatus
    transaction_date: datetime
    description: str = ""
    unit_id: str | None = None

    @property
    def magnitude(self) -> Decimal:
        return abs(self.amount)

    @property
    def is_completed(self) -> bool:
        return self.status == TransactionStatus.COMPLETED
