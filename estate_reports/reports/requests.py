"""Report types, requests and role gating."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Hashable

from estate_reports.exceptions import ReportAccessDeniedError
from estate_reports.models.base import AccountScope, DateRange, Granularity


class ReportType(str, Enum):
    DASHBOARD_SUMMARY = "dashboard-summary"
    ANALYTICS = "analytics"
    FINANCIAL = "financial"
    ADMIN_OVERVIEW = "admin-overview"
    WALLET_SUMMARY = "wallet-summary"
    ACTIVITY_FEED = "activity-feed"


class Role(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    AGENT = "agent"


ROLE_PERMISSIONS: dict[Role, frozenset[ReportType]] = {
    Role.ADMIN: frozenset(ReportType),
    Role.MANAGER: frozenset(ReportType) - {ReportType.ADMIN_OVERVIEW},
    Role.AGENT: frozenset(
        {ReportType.DASHBOARD_SUMMARY, ReportType.ANALYTICS, ReportType.ACTIVITY_FEED}
    ),
}


def check_access(role: str, report_type: ReportType) -> None:
    """Raise ``ReportAccessDeniedError`` unless ``role`` may request ``report_type``.

    The session provider enforces authorization; this only keeps each role
    to the reports its pages show.
    """
    try:
        allowed = ROLE_PERMISSIONS[Role(role)]
    except ValueError:
        raise ReportAccessDeniedError(f"Unknown role {role!r}") from None
    if report_type not in allowed:
        raise ReportAccessDeniedError(f"Role {role!r} may not request {report_type.value} reports")


@dataclass(frozen=True)
class ReportRequest:
    """One report computation for one account.

    Parameters
    ----------
    scope : AccountScope
        Account the report is computed for.
    report_type : ReportType
        Which view model to assemble.
    role : str
        Session role (admin, manager or agent).
    date_range : DateRange | None
        Window for cumulative fields; None means all time.
    trend_range : DateRange | None
        Window for trend fields; None means the configured trailing window.
    granularity : Granularity | None
        Period length for trend series; None picks the report's default.
    as_of : datetime | None
        Reference time for default windows and ad expiry; None means now.
    """

    scope: AccountScope
    report_type: ReportType
    role: str
    date_range: DateRange | None = None
    trend_range: DateRange | None = None
    granularity: Granularity | None = None
    as_of: datetime | None = None

    def cache_key(self) -> Hashable:
        """Exact request tuple a cached report is stored under (role excluded)."""
        return (
            self.scope,
            self.report_type,
            self.date_range,
            self.trend_range,
            self.granularity,
            self.as_of,
        )
