"""Domain and view models for the reporting layer."""

from estate_reports.models.base import AccountScope, Address, DateRange, Granularity, ScopeKind

__all__ = ["AccountScope", "Address", "DateRange", "Granularity", "ScopeKind"]
