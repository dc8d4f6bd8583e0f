"""
Schemas - Pydantic models for machine-readable output.
"""

from .report import (
    CategoryEntry,
    IssueEntry,
    ReportSummary,
    ScanReportDocument,
    SeverityEnum,
    build_report,
    utc_timestamp,
)

__all__ = [
    "CategoryEntry",
    "IssueEntry",
    "ReportSummary",
    "ScanReportDocument",
    "SeverityEnum",
    "build_report",
    "utc_timestamp",
]
