"""Zero-filled time series over a date range."""

from bisect import bisect_right
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Callable, Iterable

from estate_reports.models.base import DateRange, Granularity, as_datetime
from estate_reports.models.metrics import PeriodBucket


def period_floor(moment: datetime, granularity: Granularity) -> datetime:
    """Start of the period containing ``moment``. Weeks start on Monday."""
    day = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    if granularity == Granularity.DAY:
        return day
    if granularity == Granularity.WEEK:
        return day - timedelta(days=day.weekday())
    return day.replace(day=1)


def next_period(start: datetime, granularity: Granularity) -> datetime:
    if granularity == Granularity.DAY:
        return start + timedelta(days=1)
    if granularity == Granularity.WEEK:
        return start + timedelta(weeks=1)
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


def period_key(start: datetime, granularity: Granularity) -> str:
    if granularity == Granularity.DAY:
        return start.date().isoformat()
    if granularity == Granularity.WEEK:
        year, week, _ = start.isocalendar()
        return f"{year}-W{week:02d}"
    return f"{start.year}-{start.month:02d}"


def period_starts(date_range: DateRange, granularity: Granularity) -> list[datetime]:
    """Start of every period that intersects ``date_range``, in order."""
    starts = []
    current = period_floor(date_range.start, granularity)
    while current < date_range.end:
        starts.append(current)
        current = next_period(current, granularity)
    return starts


def time_series_bucket(
    entities: Iterable[Any],
    date_field: str,
    date_range: DateRange,
    granularity: Granularity,
    value_field: str | Callable[[Any], Decimal] | None = None,
) -> list[PeriodBucket]:
    """Count (and optionally sum) entities per period of ``date_range``.

    Parameters
    ----------
    entities : Iterable[Any]
        Records to bucket.
    date_field : str
        Attribute holding each record's date or datetime.
    date_range : DateRange
        Window to partition. Records outside it are ignored.
    granularity : Granularity
        Period length.
    value_field : str | Callable[[Any], Decimal] | None
        Attribute name or function giving the amount to sum per record.

    Returns
    -------
    list[PeriodBucket]
        One bucket per period, including periods with no records.
    """
    starts = period_starts(date_range, granularity)
    counts = [0] * len(starts)
    totals = [Decimal("0")] * len(starts)

    if isinstance(value_field, str):
        attribute = value_field
        value_of: Callable[[Any], Decimal] | None = lambda entity: getattr(entity, attribute)
    else:
        value_of = value_field

    for entity in entities:
        moment = getattr(entity, date_field)
        if not date_range.contains(moment):
            continue
        index = bisect_right(starts, as_datetime(moment)) - 1
        counts[index] += 1
        if value_of is not None:
            totals[index] += Decimal(value_of(entity))

    return [
        PeriodBucket(
            period_key=period_key(start, granularity),
            start=start,
            end=next_period(start, granularity),
            count=counts[i],
            total=totals[i],
        )
        for i, start in enumerate(starts)
    ]
