"""View-model builders, one per report type.

Each builder receives a complete snapshot (entity kind to records) and a
``ReportContext`` holding the resolved windows. Builders never fetch and
never read the clock.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable

from estate_reports.aggregation import (
    ad_performance,
    category_breakdown,
    change_pct,
    conversion_rate,
    listing_performance,
    location_performance,
    occupancy_stats,
    revenue_totals,
    status_distribution,
    sum_completed,
    time_series_bucket,
    wallet_activity,
)
from estate_reports.models.base import DateRange, Granularity
from estate_reports.models.metrics import AdPerformance, CategoryAmount
from estate_reports.models.property import (
    ExpenseCategory,
    InquiryType,
    RentStatus,
    RevenueCategory,
    TenantStatus,
    Transaction,
    TransactionType,
    Wallet,
)
from estate_reports.models.reports import (
    ActivityFeed,
    ActivityItem,
    AdminOverview,
    AnalyticsReport,
    CashFlowPoint,
    DashboardSummary,
    FinancialReport,
    ReportWindow,
    TransactionLine,
    TrendPoint,
    ViewsPoint,
    WalletLine,
    WalletSummary,
)
from estate_reports.reports.requests import ReportType
from estate_reports.store.kinds import EntityKind, FetchFilters

Snapshot = dict[EntityKind, list[Any]]

CENT = Decimal("0.01")

REQUIRED_KINDS: dict[ReportType, tuple[EntityKind, ...]] = {
    ReportType.DASHBOARD_SUMMARY: (
        EntityKind.BUILDING,
        EntityKind.UNIT,
        EntityKind.TENANT,
        EntityKind.INQUIRY,
        EntityKind.NOTICE,
        EntityKind.TRANSACTION,
    ),
    ReportType.ANALYTICS: (EntityKind.UNIT, EntityKind.LISTING_VIEW, EntityKind.INQUIRY),
    ReportType.FINANCIAL: (EntityKind.TRANSACTION,),
    ReportType.ADMIN_OVERVIEW: (
        EntityKind.TENANT,
        EntityKind.BUILDING,
        EntityKind.UNIT,
        EntityKind.TRANSACTION,
    ),
    ReportType.WALLET_SUMMARY: (EntityKind.WALLET, EntityKind.WALLET_TRANSACTION, EntityKind.AD),
    ReportType.ACTIVITY_FEED: (EntityKind.UNIT, EntityKind.INQUIRY, EntityKind.NOTICE),
}

DEFAULT_GRANULARITY: dict[ReportType, Granularity] = {
    ReportType.ADMIN_OVERVIEW: Granularity.MONTH,
}


@dataclass(frozen=True)
class ReportContext:
    """Resolved windows and limits for one report computation."""

    as_of: datetime
    cumulative_range: DateRange | None
    trend_range: DateRange
    granularity: Granularity
    cumulative_window: ReportWindow
    trend_window: ReportWindow
    top_listings: int = 5
    recent_items: int = 5


def fetch_filters(report_type: ReportType, recent_items: int) -> dict[EntityKind, FetchFilters]:
    """Per-kind filters pushed down to the data source."""
    if report_type == ReportType.ACTIVITY_FEED:
        latest = FetchFilters(newest_first=True, limit=recent_items)
        return {kind: latest for kind in REQUIRED_KINDS[report_type]}
    return {}


def money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def pct(value: float) -> float:
    return round(value, 2)


def build_dashboard_summary(snapshot: Snapshot, ctx: ReportContext) -> DashboardSummary:
    """Headline numbers for the dashboard home page.

    Building, unit and tenant counts describe the current snapshot;
    revenue, inquiries and notices respect the labelled windows.
    """
    units = snapshot[EntityKind.UNIT]
    transactions = snapshot[EntityKind.TRANSACTION]
    inquiries = snapshot[EntityKind.INQUIRY]
    notices = snapshot[EntityKind.NOTICE]

    occupancy = occupancy_stats(units)
    trend = ctx.trend_range
    previous = trend.previous()

    monthly_revenue = sum_completed(transactions, TransactionType.REVENUE, trend)
    previous_revenue = sum_completed(transactions, TransactionType.REVENUE, previous)
    recent_inquiries = sum(1 for inquiry in inquiries if trend.contains(inquiry.created_at))
    earlier_inquiries = sum(1 for inquiry in inquiries if previous.contains(inquiry.created_at))

    return DashboardSummary(
        total_buildings=len(snapshot[EntityKind.BUILDING]),
        total_units=occupancy.total,
        occupied_units=occupancy.occupied,
        vacant_units=occupancy.vacant,
        occupancy_rate=pct(occupancy.rate),
        monthly_revenue=money(monthly_revenue),
        total_revenue=money(sum_completed(transactions, TransactionType.REVENUE, ctx.cumulative_range)),
        pending_inquiries=sum(
            1
            for inquiry in _in_window(inquiries, "created_at", ctx.cumulative_range)
            if inquiry.is_pending
        ),
        active_notices=sum(
            1 for notice in _in_window(notices, "date_issued", ctx.cumulative_range) if notice.is_active
        ),
        total_tenants=len(snapshot[EntityKind.TENANT]),
        revenue_change_pct=pct(change_pct(monthly_revenue, previous_revenue)),
        inquiries_change_pct=pct(change_pct(recent_inquiries, earlier_inquiries)),
        cumulative_window=ctx.cumulative_window,
        trend_window=ctx.trend_window,
    )


def build_analytics(snapshot: Snapshot, ctx: ReportContext) -> AnalyticsReport:
    units = snapshot[EntityKind.UNIT]
    views = _in_window(snapshot[EntityKind.LISTING_VIEW], "viewed_at", ctx.cumulative_range)
    inquiries = _in_window(snapshot[EntityKind.INQUIRY], "created_at", ctx.cumulative_range)

    view_series = time_series_bucket(
        snapshot[EntityKind.LISTING_VIEW], "viewed_at", ctx.trend_range, ctx.granularity
    )
    inquiry_series = time_series_bucket(
        snapshot[EntityKind.INQUIRY], "created_at", ctx.trend_range, ctx.granularity
    )

    return AnalyticsReport(
        total_views=len(views),
        total_inquiries=len(inquiries),
        total_listings=len(units),
        conversion_rate=pct(conversion_rate(len(views), len(inquiries))),
        top_performing_listings=tuple(
            replace(item, conversion_rate=pct(item.conversion_rate))
            for item in listing_performance(units, views, inquiries, limit=ctx.top_listings)
        ),
        views_over_time=tuple(
            ViewsPoint(period=v.period_key, views=v.count, inquiries=i.count)
            for v, i in zip(view_series, inquiry_series)
        ),
        inquiries_by_type=tuple(status_distribution(inquiries, "inquiry_type", list(InquiryType))),
        location_performance=tuple(
            replace(item, conversion_rate=pct(item.conversion_rate))
            for item in location_performance(units, views, inquiries)
        ),
        cumulative_window=ctx.cumulative_window,
        trend_window=ctx.trend_window,
    )


def build_financial(snapshot: Snapshot, ctx: ReportContext) -> FinancialReport:
    transactions = snapshot[EntityKind.TRANSACTION]
    totals = revenue_totals(transactions, ctx.cumulative_range)
    inflow, outflow = _flow_series(transactions, ctx)

    in_window = sorted(
        _in_window(transactions, "transaction_date", ctx.cumulative_range),
        key=lambda txn: (txn.transaction_date, txn.transaction_id),
        reverse=True,
    )

    return FinancialReport(
        total_revenue=money(totals.total_revenue),
        total_expenses=money(totals.total_expenses),
        net_profit=money(totals.net_profit),
        profit_margin_pct=pct(totals.margin_pct),
        revenue_breakdown=_rounded_breakdown(
            category_breakdown(
                transactions, TransactionType.REVENUE, list(RevenueCategory), ctx.cumulative_range
            )
        ),
        expense_breakdown=_rounded_breakdown(
            category_breakdown(
                transactions, TransactionType.EXPENSE, list(ExpenseCategory), ctx.cumulative_range
            )
        ),
        cash_flow=tuple(
            CashFlowPoint(
                period=i.period_key,
                inflow=money(i.total),
                outflow=money(o.total),
                net_flow=money(i.total - o.total),
            )
            for i, o in zip(inflow, outflow)
        ),
        transactions=tuple(
            TransactionLine(
                transaction_id=txn.transaction_id,
                date=txn.transaction_date,
                description=txn.description,
                amount=money(txn.amount),
                type=txn.transaction_type.value,
                category=txn.category,
                status=txn.status.value,
            )
            for txn in in_window
        ),
        cumulative_window=ctx.cumulative_window,
        trend_window=ctx.trend_window,
    )


def build_admin_overview(snapshot: Snapshot, ctx: ReportContext) -> AdminOverview:
    tenants = snapshot[EntityKind.TENANT]
    new_tenants = time_series_bucket(tenants, "move_in_date", ctx.trend_range, ctx.granularity)
    inflow, outflow = _flow_series(snapshot[EntityKind.TRANSACTION], ctx)

    return AdminOverview(
        total_tenants=len(tenants),
        total_buildings=len(snapshot[EntityKind.BUILDING]),
        occupancy_rate=pct(occupancy_stats(snapshot[EntityKind.UNIT]).rate),
        tenant_status_distribution=tuple(
            status_distribution(tenants, "status", list(TenantStatus))
        ),
        rent_status_distribution=tuple(
            status_distribution(tenants, "rent_status", list(RentStatus))
        ),
        monthly_trends=tuple(
            TrendPoint(
                period=n.period_key,
                new_tenants=n.count,
                revenue=money(i.total),
                expenses=money(o.total),
                profit=money(i.total - o.total),
            )
            for n, i, o in zip(new_tenants, inflow, outflow)
        ),
        cumulative_window=ctx.cumulative_window,
        trend_window=ctx.trend_window,
    )


def build_wallet_summary(snapshot: Snapshot, ctx: ReportContext) -> WalletSummary:
    """Wallet balances, completed movements and ad performance.

    An account that has never topped up has no wallet row yet; it reports
    a zero balance.
    """
    wallets = sorted(
        snapshot[EntityKind.WALLET],
        key=lambda w: (w.created_at or datetime.min, w.wallet_id),
        reverse=True,
    )
    wallet = wallets[0] if wallets else None
    movements = [
        txn
        for txn in snapshot[EntityKind.WALLET_TRANSACTION]
        if wallet is not None and txn.wallet_id == wallet.wallet_id
    ]
    activity = wallet_activity(movements, ctx.cumulative_range)
    ads = ad_performance(snapshot[EntityKind.AD], as_of=ctx.as_of)
    recent = sorted(movements, key=lambda t: (t.created_at, t.wallet_transaction_id), reverse=True)

    wallet = wallet or Wallet(wallet_id="", account_id="")
    return WalletSummary(
        currency=wallet.currency,
        balance=money(wallet.balance),
        pending_balance=money(wallet.pending_balance),
        total_deposits=money(wallet.total_deposits),
        total_withdrawals=money(wallet.total_withdrawals),
        total_spent_on_ads=money(wallet.total_spent_on_ads),
        total_credits=money(activity.total_credits),
        total_debits=money(activity.total_debits),
        ad_performance=_rounded_ads(ads),
        recent_transactions=tuple(
            WalletLine(
                wallet_transaction_id=txn.wallet_transaction_id,
                created_at=txn.created_at,
                transaction_type=txn.transaction_type.value,
                amount=money(txn.amount),
                status=txn.status.value,
                is_credit=txn.is_credit,
                description=txn.description,
            )
            for txn in recent[: ctx.recent_items]
        ),
        cumulative_window=ctx.cumulative_window,
    )


def build_activity_feed(snapshot: Snapshot, ctx: ReportContext) -> ActivityFeed:
    return ActivityFeed(
        recent_units=tuple(
            ActivityItem(unit.unit_id, "unit", unit.title, unit.status.value, unit.created_at)
            for unit in snapshot[EntityKind.UNIT][: ctx.recent_items]
        ),
        recent_inquiries=tuple(
            ActivityItem(
                inquiry.inquiry_id,
                "inquiry",
                inquiry.subject or inquiry.name,
                inquiry.status.value,
                inquiry.created_at,
            )
            for inquiry in snapshot[EntityKind.INQUIRY][: ctx.recent_items]
        ),
        recent_notices=tuple(
            ActivityItem(
                notice.notice_id,
                "notice",
                notice.description or notice.notice_type.value,
                notice.status.value,
                notice.date_issued,
            )
            for notice in snapshot[EntityKind.NOTICE][: ctx.recent_items]
        ),
    )


BUILDERS: dict[ReportType, Callable[[Snapshot, ReportContext], Any]] = {
    ReportType.DASHBOARD_SUMMARY: build_dashboard_summary,
    ReportType.ANALYTICS: build_analytics,
    ReportType.FINANCIAL: build_financial,
    ReportType.ADMIN_OVERVIEW: build_admin_overview,
    ReportType.WALLET_SUMMARY: build_wallet_summary,
    ReportType.ACTIVITY_FEED: build_activity_feed,
}


def _in_window(records: list[Any], date_field: str, window: DateRange | None) -> list[Any]:
    if window is None:
        return list(records)
    return [record for record in records if window.contains(getattr(record, date_field))]


def _flow_series(transactions: list[Transaction], ctx: ReportContext) -> tuple[list, list]:
    completed = [txn for txn in transactions if txn.is_completed]
    inflow = time_series_bucket(
        [txn for txn in completed if txn.transaction_type == TransactionType.REVENUE],
        "transaction_date",
        ctx.trend_range,
        ctx.granularity,
        value_field=lambda txn: txn.magnitude,
    )
    outflow = time_series_bucket(
        [txn for txn in completed if txn.transaction_type == TransactionType.EXPENSE],
        "transaction_date",
        ctx.trend_range,
        ctx.granularity,
        value_field=lambda txn: txn.magnitude,
    )
    return inflow, outflow


def _rounded_breakdown(items: list[CategoryAmount]) -> tuple[CategoryAmount, ...]:
    return tuple(
        replace(item, amount=money(item.amount), share_pct=pct(item.share_pct)) for item in items
    )


def _rounded_ads(performance: AdPerformance) -> AdPerformance:
    return replace(
        performance,
        total_spend=money(performance.total_spend),
        ctr_by_ad=tuple(replace(item, ctr=pct(item.ctr)) for item in performance.ctr_by_ad),
    )


__all__ = [
    "BUILDERS",
    "DEFAULT_GRANULARITY",
    "REQUIRED_KINDS",
    "ReportContext",
    "Snapshot",
    "fetch_filters",
]
