"""Report assembly: requests, role gating, builders and caching."""

from estate_reports.reports.assembler import ReportAssembler
from estate_reports.reports.cache import ReportCache
from estate_reports.reports.factory import build_assembler, build_data_source
from estate_reports.reports.requests import (
    ROLE_PERMISSIONS,
    ReportRequest,
    ReportType,
    Role,
    check_access,
)

__all__ = [
    "ROLE_PERMISSIONS",
    "ReportAssembler",
    "ReportCache",
    "ReportRequest",
    "ReportType",
    "Role",
    "build_assembler",
    "build_data_source",
    "check_access",
]
