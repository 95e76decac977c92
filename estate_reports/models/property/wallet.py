"""Wallet models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from estate_reports.models.property.enums import (
    CREDIT_WALLET_TYPES,
    TransactionStatus,
    WalletStatus,
    WalletTransactionType,
)


@dataclass(frozen=True)
class Wallet:
    """Prepaid balance used to pay for ads.

    The totals are running figures maintained by the data store.
    """

    wallet_id: str
    account_id: str
    balance: Decimal = Decimal("0")
    pending_balance: Decimal = Decimal("0")
    total_deposits: Decimal = Decimal("0")
    total_withdrawals: Decimal = Decimal("0")
    total_spent_on_ads: Decimal = Decimal("0")
    currency: str = "KES"
    status: WalletStatus = WalletStatus.ACTIVE
    created_at: datetime | None = None


@dataclass(frozen=True)
class WalletTransaction:
    """Movement of money in or out of a wallet."""

    wallet_transaction_id: str
    account_id: str
    wallet_id: str
    amount: Decimal
    transaction_type: WalletTransactionType
    status: TransactionStatus
    created_at: datetime
    description: str = ""
    ad_id: str | None = None

    @property
    def is_credit(self) -> bool:
        return self.transaction_type in CREDIT_WALLET_TYPES
