"""Report assembly: fan out fetches, aggregate, cache."""

import logging
import threading
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from datetime import datetime, timezone
from typing import Any, Callable

from estate_reports.config import ReportingConfig
from estate_reports.exceptions import (
    AccountNotFoundError,
    DataSourceError,
    InvalidScopeError,
    ReportCancelledError,
    ReportUnavailableError,
)
from estate_reports.models.base import AccountScope, DateRange, Granularity, as_datetime
from estate_reports.models.reports import ReportWindow
from estate_reports.reports.builders import (
    BUILDERS,
    DEFAULT_GRANULARITY,
    REQUIRED_KINDS,
    ReportContext,
    Snapshot,
    fetch_filters,
)
from estate_reports.reports.cache import ReportCache
from estate_reports.reports.requests import ReportRequest, check_access
from estate_reports.store.base import DataSource
from estate_reports.store.kinds import EntityKind

logger = logging.getLogger(__name__)

# How often a running fan-out checks the cancel event
_CANCEL_POLL_SECONDS = 0.05


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ReportAssembler:
    """Compute report view models for one account at a time.

    Every collection a report needs is fetched concurrently from the data
    source. If any required fetch fails the whole report fails with
    ``ReportUnavailableError``; no partial report is ever returned and no
    placeholder data is substituted.

    Parameters
    ----------
    data_source : DataSource
        Account-scoped entity access.
    config : ReportingConfig | None
        Windows, limits and worker count.
    cache : ReportCache | None
        Result cache. Built from ``config.cache`` when omitted and enabled.
    clock : Callable[[], datetime]
        Naive-UTC "now", replaceable in tests.
    """

    def __init__(
        self,
        data_source: DataSource,
        config: ReportingConfig | None = None,
        cache: ReportCache | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.data_source = data_source
        self.config = config or ReportingConfig()
        if cache is None and self.config.cache.enabled:
            cache = ReportCache(
                ttl_seconds=self.config.cache.ttl_seconds,
                max_entries=self.config.cache.max_entries,
            )
        self.cache = cache
        self._clock = clock

    def assemble(
        self,
        request: ReportRequest,
        cancel_event: threading.Event | None = None,
    ) -> Any:
        """Build the view model for ``request``.

        Parameters
        ----------
        request : ReportRequest
            Scope, report type, role and optional windows.
        cancel_event : threading.Event | None
            Set by the caller to abandon the request; pending fetches are
            cancelled and ``ReportCancelledError`` is raised.

        Returns
        -------
        Any
            The report's view model (``DashboardSummary``, ``AnalyticsReport``...).

        Raises
        ------
        ReportAccessDeniedError
            If the role may not request this report type.
        AccountNotFoundError
            If the scope has no account record.
        ReportUnavailableError
            If a required collection could not be fetched.
        ReportCancelledError
            If ``cancel_event`` was set before the report completed.
        """
        check_access(request.role, request.report_type)

        key = request.cache_key()
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Cache hit for %s report of %s", request.report_type.value, request.scope)
                return cached

        started = time.perf_counter()
        logger.debug("Assembling %s report for %s", request.report_type.value, request.scope)
        self._ensure_account(request.scope)
        ctx = self._context(request)
        snapshot = self._fetch_all(request, cancel_event)
        report = BUILDERS[request.report_type](snapshot, ctx)

        if self.cache is not None:
            self.cache.set(key, report)
        logger.info(
            "Assembled %s report for %s in %.3fs",
            request.report_type.value,
            request.scope,
            time.perf_counter() - started,
        )
        return report

    def _ensure_account(self, scope: AccountScope) -> None:
        try:
            self.data_source.ensure_account(scope)
        except (InvalidScopeError, AccountNotFoundError):
            raise
        except DataSourceError as e:
            logger.error("Account lookup for %s failed: %s", scope, e)
            raise ReportUnavailableError(f"Could not verify account {scope}: {e}") from e

    def _context(self, request: ReportRequest) -> ReportContext:
        as_of = as_datetime(request.as_of) if request.as_of is not None else self._clock()

        if request.date_range is None:
            cumulative_window = ReportWindow("all-time")
        else:
            cumulative_window = ReportWindow("custom", request.date_range.start, request.date_range.end)

        trend_range = request.trend_range
        if trend_range is None:
            trend_range = DateRange.last_days(self.config.trend_window_days, as_of)
            label = f"last-{self.config.trend_window_days}-days"
        else:
            label = "custom"

        granularity = request.granularity or DEFAULT_GRANULARITY.get(
            request.report_type, Granularity.DAY
        )
        return ReportContext(
            as_of=as_of,
            cumulative_range=request.date_range,
            trend_range=trend_range,
            granularity=granularity,
            cumulative_window=cumulative_window,
            trend_window=ReportWindow(label, trend_range.start, trend_range.end),
            top_listings=self.config.top_listings,
            recent_items=self.config.recent_items,
        )

    def _fetch_all(
        self,
        request: ReportRequest,
        cancel_event: threading.Event | None,
    ) -> Snapshot:
        kinds = REQUIRED_KINDS[request.report_type]
        filters = fetch_filters(request.report_type, self.config.recent_items)
        snapshot: Snapshot = {}

        executor = ThreadPoolExecutor(
            max_workers=min(self.config.max_workers, len(kinds)),
            thread_name_prefix="report-fetch",
        )
        try:
            futures: dict[Future, EntityKind] = {
                executor.submit(self.data_source.fetch, kind, request.scope, filters.get(kind)): kind
                for kind in kinds
            }
            pending = set(futures)
            while pending:
                if cancel_event is not None and cancel_event.is_set():
                    logger.info(
                        "%s report for %s cancelled", request.report_type.value, request.scope
                    )
                    raise ReportCancelledError(
                        f"{request.report_type.value} report for {request.scope} was cancelled"
                    )
                done, pending = wait(
                    pending,
                    timeout=_CANCEL_POLL_SECONDS if cancel_event is not None else None,
                    return_when=FIRST_COMPLETED,
                )
                for future in done:
                    kind = futures[future]
                    try:
                        snapshot[kind] = future.result()
                    except (InvalidScopeError, AccountNotFoundError):
                        raise
                    except DataSourceError as e:
                        logger.error(
                            "Fetching %s for %s failed: %s", kind.value, request.scope, e
                        )
                        raise ReportUnavailableError(
                            f"{request.report_type.value} report unavailable: "
                            f"{kind.value} could not be fetched",
                            entity_kind=kind.value,
                        ) from e
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return snapshot
