"""
Tests for RepairPromptBuilder and shell quoting.
"""

import os

import pytest

from a11y_pilot.contracts.issue import Issue, Severity
from a11y_pilot.orchestrator import RepairPromptBuilder, quote_for_shell


def _issue(line=4, message="<img> is missing the `alt` attribute", instruction="Add alt text."):
    return Issue(
        rule_id="img-alt",
        severity=Severity.ERROR,
        message=message,
        line=line,
        source_line_text="<img />",
        fix="Add alt",
        repair_instruction=instruction,
    )


@pytest.fixture
def builder(tmp_path) -> RepairPromptBuilder:
    return RepairPromptBuilder(cwd=str(tmp_path))


# ===========================================================================
# QUOTING TESTS
# ===========================================================================

class TestQuoteForShell:
    """Tests for quote_for_shell."""

    def test_plain_text(self):
        """Test text is wrapped in double quotes."""
        assert quote_for_shell("fix it") == '"fix it"'

    @pytest.mark.parametrize("raw,quoted", [
        ('say "hi"', '"say \\"hi\\""'),
        ("cost $5", '"cost \\$5"'),
        ("use `alt`", '"use \\`alt\\`"'),
        ("a\\b", '"a\\\\b"'),
        ("it's", '"it\'s"'),
    ])
    def test_special_characters(self, raw, quoted):
        """Test characters special inside double quotes are escaped."""
        assert quote_for_shell(raw) == quoted


# ===========================================================================
# PROMPT TESTS
# ===========================================================================

class TestRepairPromptBuilder:
    """Tests for single, batch and command prompts."""

    def test_display_path_is_relative(self, builder, tmp_path):
        """Test paths are shown relative to the working directory."""
        path = os.path.join(str(tmp_path), "src", "Hero.jsx")

        assert builder.display_path(path) == os.path.join("src", "Hero.jsx")

    def test_single_prompt(self, builder, tmp_path):
        """Test the single-issue instruction layout."""
        path = os.path.join(str(tmp_path), "Hero.jsx")

        prompt = builder.build_single(path, _issue())

        assert prompt == (
            'In file "Hero.jsx" at line 4, fix this accessibility issue: '
            "<img> is missing the `alt` attribute. Add alt text. "
            "Only modify the minimum code necessary. Do not change functionality or styling. "
            "Do not add comments explaining the change."
        )

    def test_batch_prompt(self, builder, tmp_path):
        """Test the batch instruction numbers every issue."""
        path = os.path.join(str(tmp_path), "Hero.jsx")
        issues = [
            _issue(line=4, message="first", instruction="Do one."),
            _issue(line=9, message="second", instruction="Do two."),
        ]

        prompt = builder.build_batch(path, issues)
        lines = prompt.split("\n")

        assert lines[0] == 'In file "Hero.jsx", fix the following 2 accessibility issues:'
        assert lines[1] == "1. Line 4: first. Do one."
        assert lines[2] == "2. Line 9: second. Do two."
        assert lines[3] == "Fix all issues. Only modify the minimum code necessary."
        assert lines[-1] == "Do not add comments explaining the changes."

    def test_command(self, builder, tmp_path):
        """Test the copy-pasteable command quotes the single prompt."""
        path = os.path.join(str(tmp_path), "Hero.jsx")

        command = builder.build_command(path, _issue())

        assert command.startswith('copilot "In file \\"Hero.jsx\\" at line 4,')
        assert "\\`alt\\`" in command
        assert command.endswith('"')

    def test_custom_command_name(self, tmp_path):
        """Test the program name is configurable."""
        builder = RepairPromptBuilder(cwd=str(tmp_path), command_name="gh copilot")

        assert builder.build_command(os.path.join(str(tmp_path), "a.html"), _issue()).startswith('gh copilot "')


# ===========================================================================
# LAYERING TESTS
# ===========================================================================

class TestSharedPaths:
    """Tests for the display-path helper shared through contracts."""

    def test_prompt_builder_uses_contracts_helper(self):
        """Test prompts get their paths from contracts, not the scanner."""
        from a11y_pilot.contracts import paths
        from a11y_pilot.orchestrator import prompt_builder

        assert prompt_builder.relative_path is paths.relative_path

    def test_orchestrator_does_not_import_scanner(self):
        """Test no orchestrator module depends on the scanner module."""
        import inspect

        from a11y_pilot.orchestrator import agent, contracts, orchestrator, prompt_builder

        for module in (agent, contracts, orchestrator, prompt_builder):
            assert "scanner import" not in inspect.getsource(module)

    def test_relative_path(self, tmp_path):
        """Test paths are shown relative to the given directory."""
        from a11y_pilot.contracts import relative_path

        assert relative_path(tmp_path / "src" / "a.html", tmp_path) == os.path.join("src", "a.html")
