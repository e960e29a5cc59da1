"""Service layer orchestrations for journalmetrics."""

from .report import ReportService

__all__ = ["ReportService"]
