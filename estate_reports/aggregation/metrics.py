"""Scalar metrics over entity collections.

Every function here is pure and total: it reads only its arguments,
never the clock, and degrades to zeros on empty input. All ratios go
through ``percentage`` so a zero denominator always yields 0.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Sequence

from estate_reports.models.base import DateRange, as_datetime
from estate_reports.models.metrics import (
    AdClickThrough,
    AdPerformance,
    CategoryAmount,
    OccupancyStats,
    RevenueTotals,
    StatusCount,
    WalletActivity,
)
from estate_reports.models.property import (
    Ad,
    AdStatus,
    Transaction,
    TransactionStatus,
    TransactionType,
    Unit,
    WalletTransaction,
    WalletTransactionType,
)

ZERO = Decimal("0")


def percentage(
    numerator: int | float | Decimal,
    denominator: int | float | Decimal,
    clamp: bool = True,
) -> float:
    """``numerator / denominator * 100``, or 0.0 when the denominator is 0.

    Parameters
    ----------
    numerator : int | float | Decimal
        Part.
    denominator : int | float | Decimal
        Whole.
    clamp : bool
        Clamp to [0, 100]. Rates (occupancy, conversion, CTR) are clamped;
        margins and changes are not.
    """
    if not denominator:
        return 0.0
    value = float(Decimal(numerator) * 100 / Decimal(denominator))
    if clamp:
        return min(max(value, 0.0), 100.0)
    return value


def change_pct(current: int | Decimal, previous: int | Decimal) -> float:
    """Relative change from ``previous`` to ``current`` in percent; may be negative."""
    return percentage(Decimal(current) - Decimal(previous), previous, clamp=False)


def conversion_rate(views: int, inquiries: int) -> float:
    """Share of views that turned into an inquiry."""
    return percentage(inquiries, views)


def occupancy_stats(units: Iterable[Unit]) -> OccupancyStats:
    """Count occupied and vacant units.

    ``vacant`` is clamped at 0 so ``occupied + vacant == total`` holds for
    any input.
    """
    units = list(units)
    total = len(units)
    occupied = sum(1 for unit in units if unit.is_occupied)
    return OccupancyStats(
        total=total,
        occupied=occupied,
        vacant=max(total - occupied, 0),
        rate=percentage(occupied, total),
    )


def revenue_totals(
    transactions: Iterable[Transaction],
    date_range: DateRange | None = None,
) -> RevenueTotals:
    """Completed revenue and expenses inside ``date_range`` (all time if None)."""
    revenue = ZERO
    expenses = ZERO
    for txn in _completed_in_range(transactions, date_range):
        if txn.transaction_type == TransactionType.REVENUE:
            revenue += txn.magnitude
        else:
            expenses += txn.magnitude

    net_profit = revenue - expenses
    return RevenueTotals(
        total_revenue=revenue,
        total_expenses=expenses,
        net_profit=net_profit,
        margin_pct=percentage(net_profit, revenue, clamp=False),
    )


def sum_completed(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
    date_range: DateRange | None = None,
) -> Decimal:
    """Total completed amount of one transaction type inside a range."""
    return sum(
        (
            txn.magnitude
            for txn in _completed_in_range(transactions, date_range)
            if txn.transaction_type == transaction_type
        ),
        ZERO,
    )


def status_distribution(
    entities: Iterable[Any],
    status_field: str,
    buckets: Sequence[Enum | str],
) -> list[StatusCount]:
    """Count entities per status, one entry per bucket in bucket order.

    Buckets are explicit, never inferred from the data, so charts keep a
    stable order and show zero-count statuses. Entities whose status is
    not a bucket are not counted.
    """
    labels = [_label(bucket) for bucket in buckets]
    counts = dict.fromkeys(labels, 0)
    for entity in entities:
        label = _label(getattr(entity, status_field))
        if label in counts:
            counts[label] += 1
    return [StatusCount(label=label, count=counts[label]) for label in labels]


def category_breakdown(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType,
    categories: Sequence[Enum | str],
    date_range: DateRange | None = None,
) -> list[CategoryAmount]:
    """Completed amount and share per category, in category order."""
    labels = [_label(category) for category in categories]
    amounts = dict.fromkeys(labels, ZERO)
    for txn in _completed_in_range(transactions, date_range):
        if txn.transaction_type == transaction_type and txn.category in amounts:
            amounts[txn.category] += txn.magnitude

    total = sum(amounts.values(), ZERO)
    return [
        CategoryAmount(category=label, amount=amounts[label], share_pct=percentage(amounts[label], total))
        for label in labels
    ]


def ad_performance(ads: Iterable[Ad], as_of: datetime | None = None) -> AdPerformance:
    """Totals and click-through rate per ad.

    An ad only counts as active while its status is active and, when
    ``as_of`` is given, it has not expired by then. Spend is the sum of
    committed budgets.
    """
    ads = sorted(ads, key=lambda ad: ad.ad_id)
    cutoff = as_datetime(as_of) if as_of is not None else None

    def is_active(ad: Ad) -> bool:
        if ad.status != AdStatus.ACTIVE:
            return False
        return cutoff is None or ad.expires_at is None or ad.expires_at > cutoff

    return AdPerformance(
        total_ads=len(ads),
        active_ads=sum(1 for ad in ads if is_active(ad)),
        total_clicks=sum(ad.clicks for ad in ads),
        total_impressions=sum(ad.impressions for ad in ads),
        total_spend=sum((ad.budget for ad in ads), ZERO),
        ctr_by_ad=tuple(
            AdClickThrough(
                ad_id=ad.ad_id,
                title=ad.title,
                clicks=ad.clicks,
                impressions=ad.impressions,
                ctr=percentage(ad.clicks, ad.impressions),
            )
            for ad in ads
        ),
    )


def wallet_activity(
    transactions: Iterable[WalletTransaction],
    date_range: DateRange | None = None,
) -> WalletActivity:
    """Completed wallet credits (deposit, refund, bonus) against debits."""
    by_type = {txn_type.value: ZERO for txn_type in WalletTransactionType}
    credits = ZERO
    debits = ZERO
    for txn in transactions:
        if txn.status != TransactionStatus.COMPLETED:
            continue
        if date_range is not None and not date_range.contains(txn.created_at):
            continue
        by_type[txn.transaction_type.value] += txn.amount
        if txn.is_credit:
            credits += txn.amount
        else:
            debits += txn.amount

    return WalletActivity(
        total_credits=credits,
        total_debits=debits,
        net=credits - debits,
        by_type=by_type,
    )


def _completed_in_range(
    transactions: Iterable[Transaction],
    date_range: DateRange | None,
) -> Iterable[Transaction]:
    for txn in transactions:
        if txn.status != TransactionStatus.COMPLETED:
            continue
        if date_range is not None and not date_range.contains(txn.transaction_date):
            continue
        yield txn


def _label(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)
