"""Faker-based generators for preview portfolios."""

from estate_reports.generators.base import BaseGenerator

__all__ = ["BaseGenerator"]
