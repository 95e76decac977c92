"""Scenarios that assemble generated portfolios."""

from estate_reports.scenarios.preview import PreviewDataSource
from estate_reports.scenarios.preview_portfolio import PreviewPortfolioScenario

__all__ = [
    "PreviewDataSource",
    "PreviewPortfolioScenario",
]
