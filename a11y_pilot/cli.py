"""
Command-line interface.

Subcommands:
    scan [path]   Scan files for accessibility issues
    rules         List all available accessibility rules
    fix [path]    Scan and auto-fix issues using GitHub Copilot CLI

Exit codes:
    0  no errors found (or every fix succeeded)
    1  errors found, no scannable files, agent unavailable, or a fix failed
    2  usage error (e.g., --rules matched nothing)
"""

import argparse
import asyncio
import logging
import sys
from typing import Dict, List, Optional

from . import __version__
from .contracts.issue import Issue
from .core.config import settings
from .core.exceptions import EmptyRuleSelectionError
from .monitoring.logger import configure_logging
from .orchestrator import FixOrchestrator
from .reporter import Reporter
from .rules.registry import RuleRegistry, create_default_registry
from .scanner import Scanner, walk_dir
from .schemas.report import build_report


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _parse_rule_ids(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def _select_rules(value: Optional[str]) -> RuleRegistry:
    """Full registry, or the subset named by a comma-separated --rules value."""
    registry = create_default_registry()
    rule_ids = _parse_rule_ids(value)
    if rule_ids is None:
        return registry
    return registry.select(rule_ids)


def _run_fix(
    reporter: Reporter,
    issues_by_file: Dict[str, List[Issue]],
    dry_run: bool,
    one_by_one: bool,
) -> int:
    """Drive the repair agent over every file with issues and print progress."""
    reporter.fix_header()

    orchestrator = FixOrchestrator(
        batch=not one_by_one,
        dry_run=dry_run,
        listener=reporter.fix_event,
    )
    result = asyncio.run(orchestrator.fix_all(issues_by_file))

    if not result.agent_available:
        reporter.error(result.error_message or "Repair agent unavailable")
        return EXIT_FAILURE

    reporter.fix_summary(result)
    return EXIT_OK if result.success else EXIT_FAILURE


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_scan(args: argparse.Namespace, reporter: Reporter) -> int:
    """Scan, then optionally print fix commands or run the repair agent."""
    registry = _select_rules(args.rules)
    as_json = args.format == "json"

    if not as_json:
        reporter.banner()

    files = walk_dir(args.path)
    if not files:
        if not as_json:
            reporter.error(f"No scannable files found in {args.path}")
            reporter.info(f"Supported extensions: {', '.join(settings.SUPPORTED_EXTENSIONS)}")
        return EXIT_FAILURE

    if not as_json:
        reporter.scan_start(len(files))

    report = Scanner(registry).scan_paths(files)
    issues_by_file = report.issues_by_file()
    exit_code = EXIT_FAILURE if report.total_errors > 0 else EXIT_OK

    if as_json:
        reporter.print_json(build_report(report).to_json())
        return exit_code

    for file_path, issues in issues_by_file.items():
        reporter.file_issues(file_path, issues)
    reporter.summary(report)

    if args.auto_fix:
        if not issues_by_file:
            return EXIT_OK
        return _run_fix(reporter, issues_by_file, args.dry_run, args.one_by_one)

    if args.fix and issues_by_file:
        reporter.info("Copilot CLI fix commands:\n")
        for file_path, issues in issues_by_file.items():
            for issue in issues:
                reporter.fix_command(file_path, issue)

    return exit_code


def cmd_rules(args: argparse.Namespace, reporter: Reporter) -> int:
    reporter.rules_list(create_default_registry())
    return EXIT_OK


def cmd_fix(args: argparse.Namespace, reporter: Reporter) -> int:
    """Shorthand for `scan --auto-fix`."""
    registry = _select_rules(args.rules)
    reporter.banner()

    files = walk_dir(args.path)
    if not files:
        reporter.error(f"No scannable files found in {args.path}")
        return EXIT_FAILURE

    reporter.scan_start(len(files))
    report = Scanner(registry).scan_paths(files)
    issues_by_file = report.issues_by_file()

    for file_path, issues in issues_by_file.items():
        reporter.file_issues(file_path, issues)
    reporter.summary(report)

    if not issues_by_file:
        return EXIT_OK
    return _run_fix(reporter, issues_by_file, args.dry_run, args.one_by_one)


# =============================================================================
# PARSER
# =============================================================================

def _add_rule_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("path", nargs="?", default=".", help="Path to scan (file or directory)")
    p.add_argument("-r", "--rules", help="Comma-separated list of rule IDs to check")
    p.add_argument("--dry-run", action="store_true", help="Show what auto-fix would do without executing")
    p.add_argument("--one-by-one", action="store_true",
                   help="Fix issues one at a time (instead of batching per file)")


def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="a11y-pilot",
        description="AI-powered accessibility scanner that uses GitHub Copilot CLI to auto-fix a11y issues",
    )
    parser.add_argument("--version", action="version", version=f"a11y-pilot {__version__}")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colour output")
    sub = parser.add_subparsers(dest="command", required=True)

    p_scan = sub.add_parser("scan", help="Scan files for accessibility issues")
    _add_rule_flags(p_scan)
    p_scan.add_argument("-f", "--format", choices=["text", "json"], default="text",
                        help="Output format: text or json")
    p_scan.add_argument("--fix", action="store_true", help="Show Copilot CLI fix commands for each issue")
    p_scan.add_argument("--auto-fix", action="store_true",
                        help="Automatically invoke Copilot CLI to fix issues")
    p_scan.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    p_scan.set_defaults(func=cmd_scan)

    p_rules = sub.add_parser("rules", help="List all available accessibility rules")
    p_rules.set_defaults(func=cmd_rules)

    p_fix = sub.add_parser("fix", help="Scan and auto-fix issues using GitHub Copilot CLI")
    _add_rule_flags(p_fix)
    p_fix.set_defaults(func=cmd_fix)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, dispatch the subcommand, and map failures to exit codes."""
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    configure_logging("DEBUG" if getattr(args, "verbose", False) else settings.LOG_LEVEL)
    reporter = Reporter(color=False if args.no_color else None)

    try:
        return args.func(args, reporter)
    except EmptyRuleSelectionError as e:
        reporter.error(f"{e}. Run `a11y-pilot rules` to see available rules.")
        return EXIT_USAGE
    except KeyboardInterrupt:
        reporter.error("Interrupted")
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
