"""Reporting repositories."""

from backoffice.repositories.reporting.report_aggregate_repository import ReportAggregateRepository

__all__ = ["ReportAggregateRepository"]
