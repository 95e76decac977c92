"""View models handed to the presentation layer, one per report type.

Field names are snake_case; ``sinks.serialization.to_dict(report,
camel_case=True)`` produces the camelCase shape the dashboard pages read.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from estate_reports.models.metrics import (
    AdPerformance,
    CategoryAmount,
    ListingPerformance,
    LocationPerformance,
    StatusCount,
)


@dataclass(frozen=True)
class ReportWindow:
    """Labelled time window a group of report fields was computed over."""

    label: str  # "all-time", "last-30-days" or "custom"
    start: datetime | None = None
    end: datetime | None = None


@dataclass(frozen=True)
class DashboardSummary:
    total_buildings: int
    total_units: int
    occupied_units: int
    vacant_units: int
    occupancy_rate: float
    monthly_revenue: Decimal  # trend window
    total_revenue: Decimal  # cumulative window
    pending_inquiries: int
    active_notices: int
    total_tenants: int
    revenue_change_pct: float
    inquiries_change_pct: float
    cumulative_window: ReportWindow
    trend_window: ReportWindow


@dataclass(frozen=True)
class ViewsPoint:
    period: str
    views: int
    inquiries: int


@dataclass(frozen=True)
class AnalyticsReport:
    total_views: int
    total_inquiries: int
    total_listings: int
    conversion_rate: float
    top_performing_listings: tuple[ListingPerformance, ...]
    views_over_time: tuple[ViewsPoint, ...]
    inquiries_by_type: tuple[StatusCount, ...]
    location_performance: tuple[LocationPerformance, ...]
    cumulative_window: ReportWindow
    trend_window: ReportWindow


@dataclass(frozen=True)
class CashFlowPoint:
    period: str
    inflow: Decimal
    outflow: Decimal
    net_flow: Decimal


@dataclass(frozen=True)
class TransactionLine:
    transaction_id: str
    date: datetime
    description: str
    amount: Decimal
    type: str
    category: str
    status: str


@dataclass(frozen=True)
class FinancialReport:
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    profit_margin_pct: float
    revenue_breakdown: tuple[CategoryAmount, ...]
    expense_breakdown: tuple[CategoryAmount, ...]
    cash_flow: tuple[CashFlowPoint, ...]
    transactions: tuple[TransactionLine, ...]
    cumulative_window: ReportWindow
    trend_window: ReportWindow


@dataclass(frozen=True)
class TrendPoint:
    period: str
    new_tenants: int
    revenue: Decimal
    expenses: Decimal
    profit: Decimal


@dataclass(frozen=True)
class AdminOverview:
    total_tenants: int
    total_buildings: int
    occupancy_rate: float
    tenant_status_distribution: tuple[StatusCount, ...]
    rent_status_distribution: tuple[StatusCount, ...]
    monthly_trends: tuple[TrendPoint, ...]
    cumulative_window: ReportWindow
    trend_window: ReportWindow


@dataclass(frozen=True)
class WalletLine:
    wallet_transaction_id: str
    created_at: datetime
    transaction_type: str
    amount: Decimal
    status: str
    is_credit: bool
    description: str = ""


@dataclass(frozen=True)
class WalletSummary:
    currency: str
    balance: Decimal
    pending_balance: Decimal
    total_deposits: Decimal
    total_withdrawals: Decimal
    total_spent_on_ads: Decimal
    total_credits: Decimal
    total_debits: Decimal
    ad_performance: AdPerformance
    recent_transactions: tuple[WalletLine, ...]
    cumulative_window: ReportWindow


@dataclass(frozen=True)
class ActivityItem:
    item_id: str
    kind: str  # "unit", "inquiry" or "notice"
    title: str
    status: str
    occurred_at: date | datetime | None


@dataclass(frozen=True)
class ActivityFeed:
    recent_units: tuple[ActivityItem, ...] = ()
    recent_inquiries: tuple[ActivityItem, ...] = ()
    recent_notices: tuple[ActivityItem, ...] = ()
