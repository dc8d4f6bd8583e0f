"""
Scanner - File discovery and per-file analysis.

Ties the pieces together for one or many files:
    read -> produce elements -> collect headings -> RuleEngine.check

Usage:
    from a11y_pilot.scanner import Scanner, walk_dir

    scanner = Scanner()
    report = scanner.scan_paths(walk_dir("src"))
    print(report.total_errors, report.total_warnings)
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .analyzers import produce_elements_for
from .contracts.element import collect_headings
from .contracts.issue import Issue, Severity
from .contracts.paths import PathLike, relative_path
from .core.config import settings
from .rules.registry import RuleRegistry
from .rules.rule_engine import RuleEngine


logger = logging.getLogger(__name__)


# =============================================================================
# FILE DISCOVERY
# =============================================================================

def _normalize_extensions(extensions: Optional[Iterable[str]]) -> set:
    if extensions is None:
        extensions = settings.SUPPORTED_EXTENSIONS
    return {
        (ext if ext.startswith(".") else f".{ext}").lower()
        for ext in extensions
    }


def walk_dir(path: PathLike, extensions: Optional[Iterable[str]] = None) -> List[str]:
    """
    Collect scannable files under a directory, or check a single file.

    Ignored directories (node_modules, build output, caches) and every
    dot-directory are never descended into. Unreadable directories are
    skipped silently.

    Args:
        path: Directory to walk, or a single file
        extensions: Extensions to include, with or without the dot
            (defaults to SUPPORTED_EXTENSIONS)

    Returns:
        Sorted absolute paths; [] if path does not exist
    """
    allowed = _normalize_extensions(extensions)
    ignored = set(settings.IGNORE_DIRS)
    root = Path(path).resolve()

    if root.is_file():
        return [str(root)] if root.suffix.lower() in allowed else []

    if not root.is_dir():
        logger.warning(f"Path does not exist: {path}")
        return []

    results = []

    def on_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory: {error}")

    for current, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames[:] = [
            name for name in dirnames
            if name not in ignored and not name.startswith(".")
        ]
        for name in filenames:
            if os.path.splitext(name)[1].lower() in allowed:
                results.append(os.path.join(current, name))

    return sorted(results)


def read_file_safe(path: PathLike) -> Optional[str]:
    """
    Read a file as UTF-8 text.

    Args:
        path: File to read

    Returns:
        File content, or None if the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None


# =============================================================================
# RESULTS
# =============================================================================

@dataclass
class FileScanResult:
    """Outcome of scanning one file."""

    path: str
    """Absolute path of the scanned file."""

    issues: List[Issue] = field(default_factory=list)
    """Issues sorted by line."""

    element_count: int = 0
    """Number of elements the backend produced."""

    skipped: bool = False
    """True when the file yielded no elements (unreadable, unparseable, or no markup)."""

    skip_reason: Optional[str] = None
    """Why the file was skipped."""

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == Severity.WARNING)

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    def describe(self) -> str:
        """Generate human-readable description."""
        if self.skipped:
            return f"{self.path}: skipped ({self.skip_reason})"
        return (
            f"{self.path}: {self.element_count} elements, "
            f"{self.error_count} errors, {self.warning_count} warnings"
        )


@dataclass
class ScanReport:
    """Aggregate of every file scanned in one run."""

    results: List[FileScanResult] = field(default_factory=list)
    """Per-file results in scan order."""

    @property
    def files_scanned(self) -> int:
        return len(self.results)

    @property
    def files_with_issues(self) -> int:
        return sum(1 for result in self.results if result.has_issues)

    @property
    def total_errors(self) -> int:
        return sum(result.error_count for result in self.results)

    @property
    def total_warnings(self) -> int:
        return sum(result.warning_count for result in self.results)

    @property
    def total_issues(self) -> int:
        return self.total_errors + self.total_warnings

    @property
    def skipped_results(self) -> List[FileScanResult]:
        """Results of files that yielded no elements, in scan order."""
        return [result for result in self.results if result.skipped]

    @property
    def skipped_files(self) -> List[str]:
        return [result.path for result in self.skipped_results]

    def all_issues(self) -> List[Issue]:
        """Every issue of every file, in scan order."""
        return [issue for result in self.results for issue in result.issues]

    def issues_by_file(self) -> Dict[str, List[Issue]]:
        """Files with at least one issue, mapped to their issues, in scan order."""
        return {
            result.path: list(result.issues)
            for result in self.results
            if result.has_issues
        }

    def describe(self) -> str:
        """Generate human-readable summary."""
        return (
            f"{self.files_scanned} files scanned, {self.files_with_issues} with issues: "
            f"{self.total_errors} errors, {self.total_warnings} warnings"
            + (f", {len(self.skipped_files)} skipped" if self.skipped_files else "")
        )


# =============================================================================
# SCANNER
# =============================================================================

class Scanner:
    """
    Scans files with a RuleEngine.

    Each file is independent: nothing is shared between scan_file calls
    except the immutable rule registry.
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        engine: Optional[RuleEngine] = None,
    ):
        """
        Initialize the scanner.

        Args:
            registry: Rules to run (ignored if engine is given)
            engine: Pre-built RuleEngine
        """
        self._engine = engine or RuleEngine(registry)

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    def scan_source(self, path: PathLike, source_text: str) -> FileScanResult:
        """
        Scan already-read content; the path only selects the backend.

        Args:
            path: File path (extension decides the backend)
            source_text: File content

        Returns:
            FileScanResult
        """
        path = str(path)
        elements = produce_elements_for(path, source_text)

        if not elements:
            logger.debug(f"No elements in {path}, skipping")
            return FileScanResult(path=path, skipped=True, skip_reason="no elements")

        headings = collect_headings(elements)
        issues = self._engine.check(elements, headings, source_text)

        return FileScanResult(
            path=path,
            issues=issues,
            element_count=len(elements),
        )

    def scan_file(self, path: PathLike) -> FileScanResult:
        """
        Read and scan one file.

        Args:
            path: File to scan

        Returns:
            FileScanResult (skipped if unreadable or empty of markup)
        """
        source_text = read_file_safe(path)
        if source_text is None:
            return FileScanResult(path=str(path), skipped=True, skip_reason="unreadable")
        return self.scan_source(path, source_text)

    def scan_paths(self, paths: Iterable[PathLike]) -> ScanReport:
        """
        Scan files in the given order.

        Args:
            paths: Files to scan

        Returns:
            ScanReport with one result per path
        """
        report = ScanReport()
        for path in paths:
            result = self.scan_file(path)
            report.results.append(result)
            logger.debug(result.describe())

        logger.info(report.describe())
        return report

    def scan(self, target: PathLike, extensions: Optional[Iterable[str]] = None) -> ScanReport:
        """Discover files under target and scan them."""
        return self.scan_paths(walk_dir(target, extensions))
