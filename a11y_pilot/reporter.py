"""
Reporter - Human-readable terminal output.

Everything the CLI shows the user goes through here: the banner, per-file
issue listings, summaries, the rule list, fix commands, and auto-fix
progress. Diagnostics that are not part of the report go to the logger.

ANSI colour is used only when the output stream is a TTY and the NO_COLOR
environment variable is unset.

Usage:
    reporter = Reporter()
    reporter.banner()
    reporter.scan_start(len(files))
    for path, issues in report.issues_by_file().items():
        reporter.file_issues(path, issues)
    reporter.summary(report)
"""

import os
import sys
from typing import Iterable, List, Optional, TextIO

from . import __version__
from .contracts.issue import Issue, Severity
from .contracts.paths import relative_path
from .orchestrator.contracts import FixEvent, FixRunResult, FixStatus
from .orchestrator.prompt_builder import RepairPromptBuilder
from .rules.base_rule import Rule
from .rules.categories import categorize
from .scanner import ScanReport


# =============================================================================
# ANSI STYLES
# =============================================================================

RESET = "\033[0m"

STYLES = {
    "error": "\033[31m",
    "warning": "\033[33m",
    "success": "\033[32m",
    "info": "\033[36m",
    "dim": "\033[2m",
    "bold": "\033[1m",
    "file": "\033[1;36m",
    "rule": "\033[35m",
    "count": "\033[1;37m",
    "badge_error": "\033[1;37;41m",
    "badge_warning": "\033[1;30;43m",
}

BANNER = r"""
   __ _ __ __  __            _ __      __
  / _` /_ /_ \/ /  ___  ___(_) /___  / /_
 / /_| || || / _ \/ _ \/ / | / / _ \/ __/
 \__,_|\_,_/ / .__/\___/_/  |_/_/\___/\__/
             /_/
"""

RULE_WIDTH = 65
BREAKDOWN_WIDTH = 50
BAR_WIDTH = 20


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def use_color(stream: TextIO) -> bool:
    """True if ANSI colour should be written to stream."""
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Reporter:
    """
    Terminal output for scans and fix runs.

    Args:
        stream: Destination for report output (default: stdout)
        err_stream: Destination for error messages (default: stderr)
        color: Force colour on or off (default: auto-detect)
        cwd: Directory file paths are shown relative to
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        color: Optional[bool] = None,
        cwd: Optional[str] = None,
    ):
        self._out = stream or sys.stdout
        self._err = err_stream or sys.stderr
        self._color = use_color(self._out) if color is None else color
        self._cwd = cwd
        self._prompts = RepairPromptBuilder(cwd=cwd)

    def _style(self, name: str, text: str) -> str:
        if not self._color:
            return text
        return f"{STYLES[name]}{text}{RESET}"

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _path(self, file_path: str) -> str:
        return relative_path(file_path, self._cwd)

    def _separator(self, width: int = RULE_WIDTH) -> None:
        self._print(self._style("dim", "  " + "─" * width))

    def _severity_icon(self, severity: Severity) -> str:
        if severity == Severity.ERROR:
            return self._style("error", "✖")
        return self._style("warning", "⚠")

    # =========================================================================
    # SCAN OUTPUT
    # =========================================================================

    def banner(self) -> None:
        """Print the startup banner."""
        self._print(self._style("info", BANNER))
        self._print(self._style("dim", f"  v{__version__} - AI-powered accessibility scanner"))
        self._print(self._style("dim", "  Powered by GitHub Copilot CLI ✦\n"))

    def scan_start(self, file_count: int) -> None:
        """Print the scanning progress line."""
        self._print(
            f"  {self._style('info', '⟳')} Scanning "
            f"{self._style('count', str(file_count))} file{'' if file_count == 1 else 's'}...\n"
        )

    def file_issues(self, file_path: str, issues: List[Issue]) -> None:
        """
        Print the issues of one file.

        Args:
            file_path: File the issues belong to
            issues: Issues sorted by line (nothing is printed if empty)
        """
        if not issues:
            return

        self._print(f"  {self._style('file', self._path(file_path))}")

        for issue in issues:
            icon = self._severity_icon(issue.severity)
            line = self._style("dim", f"L{str(issue.line).ljust(4)}")
            rule_id = self._style("rule", issue.rule_id.ljust(16))
            style = "error" if issue.severity == Severity.ERROR else "warning"
            self._print(f"    {icon}  {line} {rule_id} {self._style(style, issue.message)}")

        self._print()

    def summary(self, report: ScanReport) -> None:
        """
        Print the summary line and category breakdown, or an all-clear when
        nothing was found. Skipped files are always listed.

        Args:
            report: Aggregated scan results
        """
        self._separator()
        self._print()

        if report.total_issues == 0:
            skipped = len(report.skipped_files)
            if skipped:
                self._print(f"  {self._style('success', '✔')} No accessibility issues found")
                self._print(self._style(
                    "dim",
                    f"  Scanned {_plural(report.files_scanned, 'file')}, {skipped} skipped",
                ))
                self._print()
                self.skipped(report)
                return

            self._print(f"  {self._style('success', '✨ No accessibility issues found! ✨')}")
            self._print(self._style(
                "dim",
                f"  Scanned {_plural(report.files_scanned, 'file')}, all clear!",
            ))
            self._print()
            return

        parts = []
        if report.total_errors > 0:
            parts.append(self._style("error", _plural(report.total_errors, "error")))
        if report.total_warnings > 0:
            parts.append(self._style("warning", _plural(report.total_warnings, "warning")))

        total = report.total_issues
        files = report.files_with_issues
        self._print(
            f"  {self._style('error', '✖')} Found {self._style('count', str(total))} "
            f"issue{'' if total == 1 else 's'} ({', '.join(parts)}) "
            f"in {self._style('count', str(files))} file{'' if files == 1 else 's'} "
            + self._style("dim", f"({report.files_scanned} scanned)")
        )

        self.breakdown(report.all_issues())
        self._print()
        self.skipped(report)

    def breakdown(self, issues: List[Issue]) -> None:
        """
        Print issue counts per rule category, largest first.

        Args:
            issues: Issues across all files (nothing is printed if empty)
        """
        if not issues:
            return

        total = len(issues)
        self._print()
        self._print(self._style("bold", "  Issue Breakdown"))
        self._separator(BREAKDOWN_WIDTH)

        for entry in categorize(issues):
            filled = int(entry.total * BAR_WIDTH / total + 0.5)
            bar = (
                self._style("info", "█" * filled)
                + self._style("dim", "░" * (BAR_WIDTH - filled))
            )
            stats = []
            if entry.errors:
                stats.append(self._style("error", f"{entry.errors}E"))
            if entry.warnings:
                stats.append(self._style("warning", f"{entry.warnings}W"))

            self._print(
                f"  {self._style('info', entry.category.ljust(15))} {bar}  "
                f"{self._style('bold', str(entry.total).rjust(3))} "
                f"{self._style('dim', f'({entry.percent_of(total)}%)')}  {' '.join(stats)}"
            )

        self._separator(BREAKDOWN_WIDTH)

        rule_ids = list(dict.fromkeys(issue.rule_id for issue in issues))
        self._print(
            self._style("dim", f"  {_plural(len(rule_ids), 'rule')} triggered: ")
            + self._style("dim", ", ").join(self._style("rule", rule_id) for rule_id in rule_ids)
        )

    def skipped(self, report: ScanReport) -> None:
        """Print files that yielded no elements and why (nothing if none)."""
        results = report.skipped_results
        if not results:
            return

        self._print(
            f"  {self._style('warning', '⚠')} "
            f"{_plural(len(results), 'file')} skipped (no markup could be read):"
        )
        for result in results:
            self._print(
                f"    {self._style('file', self._path(result.path))}  "
                + self._style("dim", f"({result.skip_reason})")
            )
        self._print()

    def rules_list(self, rules: Iterable[Rule]) -> None:
        """Print every rule with severity badge, WCAG reference, and docs URL."""
        self.banner()
        self._print(self._style("bold", "  Available Rules:\n"))

        for rule in rules:
            meta = rule.metadata
            badge_style = "badge_error" if meta.severity == Severity.ERROR else "badge_warning"
            badge = self._style(badge_style, f" {meta.severity.value.upper()} ")

            self._print(f"  {self._style('rule', meta.id.ljust(18))} {badge}")
            self._print(f"  {meta.description}")
            self._print(f"  {self._style('dim', f'WCAG {meta.wcag}: {meta.impact}')}")
            self._print(f"  {self._style('dim', meta.url)}")
            self._print()

    def fix_command(self, file_path: str, issue: Issue) -> None:
        """Print the copy-pasteable agent command for one issue."""
        self._print(
            f"  {self._style('file', self._path(file_path))}:{issue.line}  "
            f"{self._style('rule', issue.rule_id)}"
        )
        self._print(f"  {self._severity_icon(issue.severity)} {issue.message}")
        self._print()
        self._print(f"  {self._style('dim', 'Copilot CLI Fix:')}")
        self._print(f"    {self._style('info', self._prompts.build_command(file_path, issue))}")
        self._print()

    def print_json(self, payload: str) -> None:
        """Write an already-serialized JSON document."""
        self._print(payload)

    # =========================================================================
    # FIX OUTPUT
    # =========================================================================

    def fix_header(self) -> None:
        self._print()
        self._print(self._style("bold", "  Copilot CLI Auto-Fix Mode"))
        self._print(self._style("dim", "  Invoking GitHub Copilot CLI to fix accessibility issues..."))
        self._print()

    def fix_event(self, event: FixEvent) -> None:
        """
        Print one auto-fix progress line. Used as the orchestrator listener.

        Args:
            event: Progress event
        """
        location = f"{self._style('file', self._path(event.file_path))}:{event.issue.line}"
        rule_id = self._style("rule", event.issue.rule_id)

        if event.status == FixStatus.START:
            self._print(f"  {self._style('info', '⟳')} Fixing {rule_id} in {location}...")
        elif event.status == FixStatus.SUCCESS:
            self._print(f"  {self._style('success', '✔')} Fixed {rule_id} in {location}")
        elif event.status == FixStatus.ERROR:
            self._print(f"  {self._style('error', '✘')} Failed to fix {rule_id} in {location}")
            if event.message:
                self._print(f"    {self._style('dim', event.message)}")
        elif event.status == FixStatus.DRY_RUN:
            self._print(self._style("dim", "    [dry-run] Would send to Copilot CLI"))

    def fix_summary(self, result: FixRunResult) -> None:
        """Print the auto-fix totals."""
        self._print()
        self._separator()
        self._print()

        if result.failed == 0:
            verb = "would be sent to" if result.dry_run else "fixed with"
            self._print(self._style(
                "success",
                f"  ✨ All {_plural(result.fixed, 'issue')} {verb} Copilot CLI! ✨",
            ))
            if not result.dry_run:
                self._print(self._style("dim", "  Review the changes and commit when satisfied."))
        else:
            self._print(
                f"  {self._style('success', '✔')} {self._style('count', str(result.fixed))} fixed  "
                f"{self._style('error', '✘')} {self._style('count', str(result.failed))} failed  "
                + self._style("dim", f"({result.total} total)")
            )
        self._print()

    # =========================================================================
    # MESSAGES
    # =========================================================================

    def error(self, message: str) -> None:
        """Print an error message to the error stream."""
        text = f"✖ {message}"
        if self._color and use_color(self._err):
            text = f"{STYLES['error']}{text}{RESET}"
        print(f"\n  {text}\n", file=self._err)

    def info(self, message: str) -> None:
        self._print(f"  {self._style('info', 'i')} {self._style('info', message)}")
