"""
RepairPromptBuilder - Instructions for the repair agent.

Builds:
- single-issue instructions (one issue, one agent call)
- batch instructions (every issue of a file in one call)
- copy-pasteable `copilot "<prompt>"` commands for --fix previews

Prompts reference files by their path relative to the working directory,
which is also the agent's working directory.
"""

from pathlib import Path
from typing import List, Optional, Union

from ..contracts.issue import Issue
from ..contracts.paths import relative_path


# Characters that keep their meaning inside POSIX double quotes
_DOUBLE_QUOTE_SPECIALS = ("\\", '"', "$", "`")


def quote_for_shell(text: str) -> str:
    """
    Wrap text in double quotes for a POSIX shell.

    Args:
        text: Raw argument

    Returns:
        Double-quoted argument with \\, ", $ and ` escaped
    """
    for char in _DOUBLE_QUOTE_SPECIALS:
        text = text.replace(char, "\\" + char)
    return f'"{text}"'


class RepairPromptBuilder:
    """
    Generates agent instructions from issues.

    Usage:
        builder = RepairPromptBuilder()
        prompt = builder.build_single("/abs/src/Hero.jsx", issue)
        batch = builder.build_batch("/abs/src/Hero.jsx", issues)
        command = builder.build_command("/abs/src/Hero.jsx", issue)
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None, command_name: str = "copilot"):
        """
        Initialize the builder.

        Args:
            cwd: Directory paths are made relative to (defaults to current)
            command_name: Program name used in copy-pasteable commands
        """
        self._cwd = cwd
        self._command_name = command_name

    def display_path(self, file_path: Union[str, Path]) -> str:
        return relative_path(file_path, self._cwd)

    def build_single(self, file_path: Union[str, Path], issue: Issue) -> str:
        """
        Instruction for one issue.

        Args:
            file_path: File containing the issue
            issue: Issue to fix

        Returns:
            Single-line instruction
        """
        return " ".join([
            f'In file "{self.display_path(file_path)}" at line {issue.line},',
            f"fix this accessibility issue: {issue.message}.",
            issue.repair_instruction,
            "Only modify the minimum code necessary. Do not change functionality or styling.",
            "Do not add comments explaining the change.",
        ])

    def build_batch(self, file_path: Union[str, Path], issues: List[Issue]) -> str:
        """
        Instruction covering every issue in a file.

        Args:
            file_path: File containing the issues
            issues: Issues to fix, in report order

        Returns:
            Multi-line instruction with one numbered entry per issue
        """
        descriptions = "\n".join(
            f"{i}. Line {issue.line}: {issue.message}. {issue.repair_instruction}"
            for i, issue in enumerate(issues, start=1)
        )

        return "\n".join([
            f'In file "{self.display_path(file_path)}", fix the following '
            f"{len(issues)} accessibility issues:",
            descriptions,
            "Fix all issues. Only modify the minimum code necessary.",
            "Do not change functionality or visual styling.",
            "Do not add comments explaining the changes.",
        ])

    def build_command(self, file_path: Union[str, Path], issue: Issue) -> str:
        """
        Shell command that opens the agent with the single-issue instruction.

        Args:
            file_path: File containing the issue
            issue: Issue to fix

        Returns:
            Command such as: copilot "In file ... at line 4, ..."
        """
        return f"{self._command_name} {quote_for_shell(self.build_single(file_path, issue))}"
