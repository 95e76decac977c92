"""Financial transaction generator."""

from datetime import datetime

from estate_reports.generators.base import BaseGenerator
from estate_reports.models.property import (
    ExpenseCategory,
    Tenant,
    Transaction,
    TransactionStatus,
    TransactionType,
)


class TransactionGenerator(BaseGenerator):
    """Generate rent receipts and operating expenses.

    Expenses are stored with a negative amount, as the ledger does;
    aggregates use the magnitude.
    """

    STATUSES = list(TransactionStatus)
    STATUS_WEIGHTS = [0.88, 0.06, 0.03, 0.01, 0.02]

    EXPENSE_CATEGORIES = list(ExpenseCategory)
    EXPENSE_WEIGHTS = [0.35, 0.20, 0.10, 0.10, 0.15, 0.05, 0.05]

    def rent_payment(self, tenant: Tenant, paid_at: datetime) -> Transaction:
        """Rent receipt from ``tenant``."""
        return Transaction(
            transaction_id=self.new_id(),
            account_id=tenant.account_id,
            transaction_type=TransactionType.REVENUE,
            category="rent",
            amount=tenant.monthly_rent,
            status=self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            transaction_date=paid_at,
            description=f"Rent payment - {tenant.name}",
            unit_id=tenant.unit_id,
        )

    def deposit(self, tenant: Tenant, paid_at: datetime) -> Transaction:
        """Security deposit taken at move-in."""
        return Transaction(
            transaction_id=self.new_id(),
            account_id=tenant.account_id,
            transaction_type=TransactionType.REVENUE,
            category="deposit",
            amount=tenant.monthly_rent,
            status=TransactionStatus.COMPLETED,
            transaction_date=paid_at,
            description=f"Security deposit - {tenant.name}",
            unit_id=tenant.unit_id,
        )

    def expense(self, account_id: str, spent_at: datetime, unit_id: str | None = None) -> Transaction:
        """Operating expense, optionally against a unit."""
        category = self.rng.choices(self.EXPENSE_CATEGORIES, weights=self.EXPENSE_WEIGHTS, k=1)[0]
        amount = self.amount(1000, 40000, 500)
        return Transaction(
            transaction_id=self.new_id(),
            account_id=account_id,
            transaction_type=TransactionType.EXPENSE,
            category=category.value,
            amount=-amount,
            status=self.rng.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            transaction_date=spent_at,
            description=f"{category.value.replace('_', ' ').capitalize()} - {self.fake.company()}",
            unit_id=unit_id,
        )
