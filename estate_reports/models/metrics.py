"""Result types produced by the aggregation engine."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class OccupancyStats:
    total: int
    occupied: int
    vacant: int
    rate: float


@dataclass(frozen=True)
class RevenueTotals:
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal  # may be negative
    margin_pct: float  # may be negative


@dataclass(frozen=True)
class StatusCount:
    label: str
    count: int


@dataclass(frozen=True)
class PeriodBucket:
    """Aggregates for one period of a time series."""

    period_key: str
    start: datetime
    end: datetime
    count: int = 0
    total: Decimal = Decimal("0")


@dataclass(frozen=True)
class AdClickThrough:
    ad_id: str
    title: str
    clicks: int
    impressions: int
    ctr: float


@dataclass(frozen=True)
class AdPerformance:
    total_ads: int
    active_ads: int
    total_clicks: int
    total_impressions: int
    total_spend: Decimal
    ctr_by_ad: tuple[AdClickThrough, ...] = ()


@dataclass(frozen=True)
class CategoryAmount:
    category: str
    amount: Decimal
    share_pct: float


@dataclass(frozen=True)
class WalletActivity:
    """Completed wallet movements split into credits and debits."""

    total_credits: Decimal
    total_debits: Decimal
    net: Decimal
    by_type: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class ListingPerformance:
    unit_id: str
    title: str
    city: str
    views: int
    inquiries: int
    conversion_rate: float


@dataclass(frozen=True)
class LocationPerformance:
    location: str
    listings: int
    views: int
    inquiries: int
    conversion_rate: float
