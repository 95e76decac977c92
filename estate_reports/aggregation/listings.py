"""Per-listing and per-location funnel metrics."""

from collections import Counter
from typing import Iterable

from estate_reports.aggregation.metrics import conversion_rate
from estate_reports.models.metrics import ListingPerformance, LocationPerformance
from estate_reports.models.property import Inquiry, ListingView, Unit

UNKNOWN_LOCATION = "Unknown"


def listing_performance(
    units: Iterable[Unit],
    views: Iterable[ListingView],
    inquiries: Iterable[Inquiry],
    limit: int | None = None,
) -> list[ListingPerformance]:
    """Views, inquiries and conversion per unit, best performers first.

    Ordered by inquiries, then views (both descending), then unit id.
    """
    view_counts = Counter(view.unit_id for view in views)
    inquiry_counts = Counter(inquiry.unit_id for inquiry in inquiries if inquiry.unit_id)

    ranked = sorted(
        (
            ListingPerformance(
                unit_id=unit.unit_id,
                title=unit.title,
                city=unit.city or UNKNOWN_LOCATION,
                views=view_counts[unit.unit_id],
                inquiries=inquiry_counts[unit.unit_id],
                conversion_rate=conversion_rate(view_counts[unit.unit_id], inquiry_counts[unit.unit_id]),
            )
            for unit in units
        ),
        key=lambda item: (-item.inquiries, -item.views, item.unit_id),
    )
    return ranked[:limit] if limit is not None else ranked


def location_performance(
    units: Iterable[Unit],
    views: Iterable[ListingView],
    inquiries: Iterable[Inquiry],
) -> list[LocationPerformance]:
    """Listings, views, inquiries and conversion per city.

    Inquiries without a known unit cannot be placed and are left out.
    """
    city_of = {unit.unit_id: unit.city or UNKNOWN_LOCATION for unit in units}
    listings = Counter(city_of.values())
    view_counts = Counter(city_of[view.unit_id] for view in views if view.unit_id in city_of)
    inquiry_counts = Counter(
        city_of[inquiry.unit_id] for inquiry in inquiries if inquiry.unit_id in city_of
    )

    return sorted(
        (
            LocationPerformance(
                location=city,
                listings=listings[city],
                views=view_counts[city],
                inquiries=inquiry_counts[city],
                conversion_rate=conversion_rate(view_counts[city], inquiry_counts[city]),
            )
            for city in listings
        ),
        key=lambda item: (-item.inquiries, -item.views, item.location),
    )
