"""Data access layer: account-scoped entity collections."""

from estate_reports.store.base import DataSource
from estate_reports.store.kinds import SCHEMAS, EntityKind, FetchFilters
from estate_reports.store.memory import PortfolioStore
from estate_reports.store.postgres import PostgresDataSource
from estate_reports.store.retry import RetryingDataSource

__all__ = [
    "DataSource",
    "EntityKind",
    "FetchFilters",
    "PortfolioStore",
    "PostgresDataSource",
    "RetryingDataSource",
    "SCHEMAS",
]
