"""Ad and wallet generators."""

from datetime import datetime, timedelta
from decimal import Decimal

from estate_reports.generators.base import BaseGenerator
from estate_reports.models.property import (
    Ad,
    AdStatus,
    TransactionStatus,
    Unit,
    Wallet,
    WalletTransaction,
    WalletTransactionType,
)


class AdGenerator(BaseGenerator):
    """Generate promoted listings with click-through figures."""

    def generate(self, unit: Unit, as_of: datetime) -> Ad:
        created = as_of - timedelta(days=self.rng.randint(1, 60))
        expires = created + timedelta(days=self.rng.choice([7, 14, 30]))
        impressions = self.rng.randint(0, 5000)
        clicks = int(impressions * self.rng.uniform(0.005, 0.06))
        status = AdStatus.ACTIVE if expires > as_of else AdStatus.EXPIRED
        if status == AdStatus.ACTIVE and self.rng.random() < 0.15:
            status = AdStatus.PAUSED
        return Ad(
            ad_id=self.new_id(),
            account_id=unit.account_id,
            unit_id=unit.unit_id,
            title=f"Featured: {unit.title}",
            budget=self.amount(500, 10000, 250),
            status=status,
            clicks=clicks,
            impressions=impressions,
            conversions=int(clicks * self.rng.uniform(0.0, 0.2)),
            created_at=created,
            expires_at=expires,
        )


class WalletGenerator(BaseGenerator):
    """Generate an ad wallet and its movements.

    The wallet's running totals are derived from the completed movements so
    that balances and history agree.
    """

    def generate(
        self,
        account_id: str,
        ads: list[Ad],
        as_of: datetime,
    ) -> tuple[Wallet, list[WalletTransaction]]:
        """Generate a wallet for ``account_id`` funding ``ads``.

        Parameters
        ----------
        account_id : str
            Owning account.
        ads : list[Ad]
            Ads whose budgets were paid from the wallet.
        as_of : datetime
            Reference time.

        Returns
        -------
        tuple[Wallet, list[WalletTransaction]]
            The wallet and its movements, oldest first.
        """
        wallet_id = self.new_id()
        opened = as_of - timedelta(days=90)
        movements = []

        spend = sum((ad.budget for ad in ads), Decimal("0"))
        deposited = Decimal("0")
        while deposited < spend + 2000:
            amount = self.amount(2000, 20000, 1000)
            deposited += amount
            movements.append(
                self._movement(account_id, wallet_id, WalletTransactionType.DEPOSIT, amount, opened, as_of)
            )
        for ad in ads:
            movements.append(
                WalletTransaction(
                    wallet_transaction_id=self.new_id(),
                    account_id=account_id,
                    wallet_id=wallet_id,
                    amount=ad.budget,
                    transaction_type=WalletTransactionType.AD_SPEND,
                    status=TransactionStatus.COMPLETED,
                    created_at=ad.created_at or as_of,
                    description=f"Ad spend - {ad.title}",
                    ad_id=ad.ad_id,
                )
            )
        if self.rng.random() < 0.3:
            movements.append(
                self._movement(
                    account_id, wallet_id, WalletTransactionType.BONUS, Decimal("500"), opened, as_of
                )
            )

        movements.sort(key=lambda txn: txn.created_at)
        completed = [txn for txn in movements if txn.status == TransactionStatus.COMPLETED]
        credits = sum((txn.amount for txn in completed if txn.is_credit), Decimal("0"))
        debits = sum((txn.amount for txn in completed if not txn.is_credit), Decimal("0"))
        wallet = Wallet(
            wallet_id=wallet_id,
            account_id=account_id,
            balance=credits - debits,
            pending_balance=sum(
                (txn.amount for txn in movements if txn.status == TransactionStatus.PENDING), Decimal("0")
            ),
            total_deposits=sum(
                (txn.amount for txn in completed if txn.transaction_type == WalletTransactionType.DEPOSIT),
                Decimal("0"),
            ),
            total_withdrawals=Decimal("0"),
            total_spent_on_ads=sum(
                (txn.amount for txn in completed if txn.transaction_type == WalletTransactionType.AD_SPEND),
                Decimal("0"),
            ),
            created_at=opened,
        )
        return wallet, movements

    def _movement(
        self,
        account_id: str,
        wallet_id: str,
        transaction_type: WalletTransactionType,
        amount: Decimal,
        start: datetime,
        end: datetime,
    ) -> WalletTransaction:
        status = TransactionStatus.PENDING if self.rng.random() < 0.05 else TransactionStatus.COMPLETED
        return WalletTransaction(
            wallet_transaction_id=self.new_id(),
            account_id=account_id,
            wallet_id=wallet_id,
            amount=amount,
            transaction_type=transaction_type,
            status=status,
            created_at=self.moment_between(start, end),
            description=f"{transaction_type.value.replace('_', ' ').capitalize()} via M-Pesa",
        )
