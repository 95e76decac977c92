"""Pure aggregation functions over account-scoped entity snapshots."""

from estate_reports.aggregation.listings import (
    UNKNOWN_LOCATION,
    listing_performance,
    location_performance,
)
from estate_reports.aggregation.metrics import (
    ad_performance,
    category_breakdown,
    change_pct,
    conversion_rate,
    occupancy_stats,
    percentage,
    revenue_totals,
    status_distribution,
    sum_completed,
    wallet_activity,
)
from estate_reports.aggregation.timeseries import (
    period_floor,
    period_key,
    period_starts,
    time_series_bucket,
)

__all__ = [
    "UNKNOWN_LOCATION",
    "ad_performance",
    "category_breakdown",
    "change_pct",
    "conversion_rate",
    "listing_performance",
    "location_performance",
    "occupancy_stats",
    "percentage",
    "period_floor",
    "period_key",
    "period_starts",
    "revenue_totals",
    "status_distribution",
    "sum_completed",
    "time_series_bucket",
    "wallet_activity",
]
