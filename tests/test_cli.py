"""
Tests for the command-line interface.

Tests for:
- Exit codes for clean, failing, empty and misconfigured scans
- JSON report output
- rules listing
- --fix commands and dry-run auto-fix
"""

import json
import logging
import shutil

import pytest

from a11y_pilot import __version__
from a11y_pilot.cli import main


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers configure_logging attached to captured streams."""
    yield
    package_logger = logging.getLogger("a11y_pilot")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)


@pytest.fixture
def project(in_tmp_cwd, fixtures_dir):
    """Working directory holding a copy of the fixture files."""
    for path in fixtures_dir.iterdir():
        shutil.copy(path, in_tmp_cwd / path.name)
    return in_tmp_cwd


# ===========================================================================
# SCAN TESTS
# ===========================================================================

class TestScan:
    """Tests for `a11y-pilot scan`."""

    def test_clean_file_exits_zero(self, project, capsys):
        """Test a clean scan exits 0 with an all-clear."""
        code = main(["scan", "good-component.jsx"])

        out = capsys.readouterr().out
        assert code == 0
        assert "No accessibility issues found!" in out
        assert "Scanned 1 file, all clear!" in out

    def test_errors_exit_one(self, project, capsys):
        """Test a scan with errors exits 1 and lists the issues."""
        code = main(["scan", "bad-hero.jsx"])

        out = capsys.readouterr().out
        assert code == 1
        assert "bad-hero.jsx" in out
        assert "L6    img-alt" in out
        assert "Found 6 issues (5 errors, 1 warning) in 1 file (1 scanned)" in out

    def test_breakdown_after_summary(self, project, capsys):
        """Test the category breakdown follows the totals line."""
        main(["scan", "bad-hero.jsx"])

        out = capsys.readouterr().out
        assert out.index("Found 6 issues") < out.index("Issue Breakdown")
        assert "Accessibility   ██████████░░░░░░░░░░    3 (50%)  3E" in out
        assert "Semantic HTML   " in out
        assert "6 rules triggered: img-alt, heading-order, button-content" in out

    def test_skipped_file_reported(self, in_tmp_cwd, fixtures_dir, capsys):
        """Test a file without markup is listed as skipped, not all clear."""
        shutil.copy(fixtures_dir / "good-page.html", in_tmp_cwd / "ok.html")
        (in_tmp_cwd / "util.tsx").write_text("export const x = 1;\n", encoding="utf-8")

        code = main(["scan", "."])

        out = capsys.readouterr().out
        assert code == 0
        assert "all clear" not in out
        assert "Scanned 2 files, 1 skipped" in out
        assert "util.tsx  (no elements)" in out

    def test_skipped_file_in_json(self, in_tmp_cwd, fixtures_dir, capsys):
        """Test the JSON summary lists skipped files."""
        shutil.copy(fixtures_dir / "good-page.html", in_tmp_cwd / "ok.html")
        (in_tmp_cwd / "util.tsx").write_text("export const x = 1;\n", encoding="utf-8")

        main(["scan", ".", "-f", "json"])

        report = json.loads(capsys.readouterr().out)
        assert report["summary"]["skippedFiles"] == ["util.tsx"]

    def test_warnings_only_exit_zero(self, project, capsys):
        """Test warnings alone do not fail the scan."""
        code = main(["scan", "bad-nav.tsx", "--rules", "semantic-nav,tabindex-positive"])

        assert code == 0
        assert "2 warnings" in capsys.readouterr().out

    def test_no_files_exit_one(self, in_tmp_cwd, capsys):
        """Test an empty directory exits 1."""
        code = main(["scan", "."])

        captured = capsys.readouterr()
        assert code == 1
        assert "No scannable files found in ." in captured.err
        assert "Supported extensions" in captured.out

    def test_unknown_rules_exit_two(self, project, capsys):
        """Test a rule filter matching nothing is a usage error."""
        code = main(["scan", ".", "-r", "bogus"])

        assert code == 2
        assert "No matching rules found for: bogus" in capsys.readouterr().err

    def test_json_report(self, project, capsys):
        """Test JSON output carries summary and per-file issues."""
        code = main(["scan", ".", "-f", "json"])

        report = json.loads(capsys.readouterr().out)
        assert code == 1
        assert report["version"] == __version__
        assert report["timestamp"].endswith("Z")
        assert report["summary"] == {
            "filesScanned": 5,
            "filesWithIssues": 3,
            "totalErrors": 11,
            "totalWarnings": 7,
            "totalIssues": 18,
            "skippedFiles": [],
        }
        assert sorted(report["files"]) == ["bad-hero.jsx", "bad-nav.tsx", "bad-page.html"]

        entry = report["files"]["bad-hero.jsx"][0]
        assert entry["ruleId"] == "img-alt"
        assert entry["severity"] == "error"
        assert entry["line"] == 6
        assert entry["copilotCommand"].startswith('copilot "In file \\"bad-hero.jsx\\" at line 6,')

    def test_json_clean_exit_zero(self, project, capsys):
        """Test a clean JSON scan exits 0 with no files."""
        code = main(["scan", "good-page.html", "--format", "json"])

        report = json.loads(capsys.readouterr().out)
        assert code == 0
        assert report["files"] == {}

    def test_fix_commands(self, project, capsys):
        """Test --fix prints a copilot command per issue."""
        code = main(["scan", "bad-nav.tsx", "--fix"])

        out = capsys.readouterr().out
        assert code == 1
        assert "Copilot CLI fix commands:" in out
        assert out.count('copilot "In file') == 3
        assert "bad-nav.tsx:12  aria-valid" in out


# ===========================================================================
# AUTO-FIX TESTS
# ===========================================================================

class TestAutoFix:
    """Tests for --auto-fix and the fix subcommand in dry-run mode."""

    def test_scan_auto_fix_dry_run(self, project, capsys):
        """Test dry-run auto-fix reports every issue and exits 0."""
        code = main(["scan", "bad-hero.jsx", "--auto-fix", "--dry-run"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("[dry-run] Would send to Copilot CLI") == 6
        assert "Fixing img-alt in bad-hero.jsx:6..." in out
        assert "All 6 issues would be sent to Copilot CLI!" in out

    def test_fix_dry_run(self, project, capsys):
        """Test the fix subcommand behaves like scan --auto-fix."""
        code = main(["fix", "bad-nav.tsx", "--dry-run", "--one-by-one"])

        out = capsys.readouterr().out
        assert code == 0
        assert out.count("[dry-run]") == 3

    def test_fix_clean_exit_zero(self, project, capsys):
        """Test fix with nothing to fix exits 0 without the fix header."""
        code = main(["fix", "good-page.html"])

        assert code == 0
        assert "Auto-Fix Mode" not in capsys.readouterr().out

    def test_agent_unavailable_exit_one(self, project, capsys, monkeypatch):
        """Test a missing agent fails the fix run."""
        monkeypatch.setattr("a11y_pilot.orchestrator.agent.shutil.which", lambda name: None)
        monkeypatch.setattr("a11y_pilot.orchestrator.agent.Path.home", lambda: project / "home")

        code = main(["fix", "bad-nav.tsx"])

        assert code == 1
        assert "GitHub Copilot CLI is not installed" in capsys.readouterr().err


# ===========================================================================
# RULES TESTS
# ===========================================================================

class TestRules:
    """Tests for `a11y-pilot rules`."""

    def test_lists_all_rules(self, capsys):
        """Test every rule id is printed with its severity."""
        code = main(["rules"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Available Rules:" in out
        for rule_id in ("img-alt", "semantic-nav", "tabindex-positive", "landmark-regions"):
            assert rule_id in out
        assert " ERROR " in out
        assert " WARNING " in out
        assert "WCAG 1.1.1" in out

    def test_version(self, capsys):
        """Test --version prints the version and exits 0."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_missing_command(self, capsys):
        """Test argparse rejects a missing subcommand."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
