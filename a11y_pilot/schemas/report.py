"""
Pydantic schemas for the JSON scan report (`a11y-pilot scan -f json`).

Keys are camelCase on the wire; Python code uses the snake_case field names.

Example:
{
    "version": "1.0.0",
    "timestamp": "2026-01-05T12:00:00.000Z",
    "summary": {
        "filesScanned": 12,
        "filesWithIssues": 2,
        "totalErrors": 3,
        "totalWarnings": 1,
        "totalIssues": 4,
        "skippedFiles": ["src/util.tsx"]
    },
    "categories": [
        {"category": "Accessibility", "errors": 3, "warnings": 0, "total": 3, "ruleIds": ["img-alt"]},
        {"category": "Keyboard", "errors": 0, "warnings": 1, "total": 1, "ruleIds": ["no-autofocus"]}
    ],
    "files": {
        "src/Hero.jsx": [
            {
                "ruleId": "img-alt",
                "severity": "error",
                "message": "<img> is missing the `alt` attribute",
                "line": 4,
                "fix": "Add alt=...",
                "copilotCommand": "copilot \\"In file ...\\""
            }
        ]
    }
}
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .. import __version__
from ..orchestrator.prompt_builder import RepairPromptBuilder
from ..rules.categories import categorize
from ..scanner import ScanReport


# ============== ENUMS ==============

class SeverityEnum(str, Enum):
    """Issue severity."""
    error = "error"
    warning = "warning"


# ============== ENTRIES ==============

class IssueEntry(BaseModel):
    """One issue in a file."""
    model_config = ConfigDict(populate_by_name=True)

    rule_id: str = Field(..., alias="ruleId")
    severity: SeverityEnum
    message: str
    line: int = Field(..., ge=0)
    fix: str
    copilot_command: str = Field(..., alias="copilotCommand", description="Copy-pasteable agent command")


class ReportSummary(BaseModel):
    """Totals across all scanned files."""
    model_config = ConfigDict(populate_by_name=True)

    files_scanned: int = Field(..., ge=0, alias="filesScanned")
    files_with_issues: int = Field(..., ge=0, alias="filesWithIssues")
    total_errors: int = Field(..., ge=0, alias="totalErrors")
    total_warnings: int = Field(..., ge=0, alias="totalWarnings")
    total_issues: int = Field(..., ge=0, alias="totalIssues")
    skipped_files: List[str] = Field(
        default_factory=list,
        alias="skippedFiles",
        description="Files that yielded no elements (unreadable, unparseable, or no markup)",
    )


class CategoryEntry(BaseModel):
    """Issue counts for one rule category."""
    model_config = ConfigDict(populate_by_name=True)

    category: str
    errors: int = Field(..., ge=0)
    warnings: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    rule_ids: List[str] = Field(default_factory=list, alias="ruleIds")


class ScanReportDocument(BaseModel):
    """Top-level JSON report."""
    version: str
    timestamp: str
    summary: ReportSummary
    categories: List[CategoryEntry] = Field(default_factory=list)
    files: Dict[str, List[IssueEntry]] = Field(default_factory=dict)

    def to_json(self) -> str:
        """Serialize with camelCase keys, indented."""
        return self.model_dump_json(by_alias=True, indent=2)


# ============== BUILDERS ==============

def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO 8601 UTC timestamp with milliseconds and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_report(
    report: ScanReport,
    prompt_builder: Optional[RepairPromptBuilder] = None,
    timestamp: Optional[str] = None,
) -> ScanReportDocument:
    """
    Convert a ScanReport into the JSON report document.

    Only files with at least one issue appear under `files`, keyed by
    their path relative to the working directory.

    Args:
        report: Scan results
        prompt_builder: Builds the copilotCommand of each entry
        timestamp: Override for the report timestamp

    Returns:
        ScanReportDocument
    """
    prompts = prompt_builder or RepairPromptBuilder()

    files: Dict[str, List[IssueEntry]] = {}
    for path, issues in report.issues_by_file().items():
        files[prompts.display_path(path)] = [
            IssueEntry(
                rule_id=issue.rule_id,
                severity=SeverityEnum(issue.severity.value),
                message=issue.message,
                line=issue.line,
                fix=issue.fix,
                copilot_command=prompts.build_command(path, issue),
            )
            for issue in issues
        ]

    return ScanReportDocument(
        version=__version__,
        timestamp=timestamp or utc_timestamp(),
        summary=ReportSummary(
            files_scanned=report.files_scanned,
            files_with_issues=report.files_with_issues,
            total_errors=report.total_errors,
            total_warnings=report.total_warnings,
            total_issues=report.total_issues,
            skipped_files=[prompts.display_path(path) for path in report.skipped_files],
        ),
        categories=[
            CategoryEntry(
                category=entry.category,
                errors=entry.errors,
                warnings=entry.warnings,
                total=entry.total,
                rule_ids=entry.rule_ids,
            )
            for entry in categorize(report.all_issues())
        ],
        files=files,
    )
