"""Wiring of data sources and assemblers from configuration."""

import logging

from estate_reports.config import ReportingConfig
from estate_reports.reports.assembler import ReportAssembler
from estate_reports.scenarios.preview import PreviewDataSource
from estate_reports.store.base import DataSource
from estate_reports.store.postgres import PostgresDataSource
from estate_reports.store.retry import RetryingDataSource

logger = logging.getLogger(__name__)


def build_data_source(config: ReportingConfig) -> DataSource:
    """Return the configured data source.

    Generated preview data is served only when ``preview_mode`` is set;
    otherwise every fetch goes to Postgres with bounded retries.
    """
    if config.preview_mode:
        logger.warning("Preview mode enabled: reports are computed from generated data")
        return PreviewDataSource(seed=config.preview_seed)
    return RetryingDataSource(PostgresDataSource(config.postgres), config.retry)


def build_assembler(config: ReportingConfig | None = None) -> ReportAssembler:
    config = config or ReportingConfig.from_env()
    return ReportAssembler(build_data_source(config), config)
