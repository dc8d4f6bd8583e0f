"""
Issue - The common result type every rule produces.

Issues are immutable value objects. They carry no reference back to the
element that produced them, only what is needed to report and repair.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Severity(Enum):
    """Issue severity."""

    ERROR = "error"
    """Violation that blocks access for some users."""

    WARNING = "warning"
    """Likely problem or anti-pattern."""

    @classmethod
    def from_string(cls, value: str) -> "Severity":
        """Convert string to Severity, defaulting to WARNING."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.WARNING

    @property
    def is_error(self) -> bool:
        return self is Severity.ERROR


@dataclass(frozen=True)
class Issue:
    """A single accessibility defect found in a file."""

    rule_id: str
    """Identifier of the rule that produced this issue (e.g., 'img-alt')."""

    severity: Severity
    """ERROR or WARNING."""

    message: str
    """What is wrong, in one sentence."""

    line: int
    """1-based source line the issue is anchored at."""

    source_line_text: str
    """Stripped text of that line."""

    fix: str
    """Human fix suggestion."""

    repair_instruction: str
    """Natural-language instruction for the repair agent."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict."""
        return {
            "ruleId": self.rule_id,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.line,
            "sourceLine": self.source_line_text,
            "fix": self.fix,
            "repairInstruction": self.repair_instruction,
        }

    def describe(self) -> str:
        """Generate human-readable description."""
        return f"[{self.severity.value}] L{self.line} {self.rule_id}: {self.message}"
