"""Reporting services."""

from backoffice.services.reporting.csv_export import export_filename, render_csv
from backoffice.services.reporting.report_service import ReportService, commission_due, profit_margin

__all__ = ["ReportService", "commission_due", "export_filename", "profit_margin", "render_csv"]
