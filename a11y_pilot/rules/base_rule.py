"""
Rule - Base classes for accessibility detectors.

Rules come in two kinds:
- ElementRule: judges one element at a time
- FileRule: judges a whole file (heading outline, link clustering, landmarks)

The engine dispatches on Rule.kind, so a rule never needs stub methods for
the kind it is not.

Usage:
    class MyRule(ElementRule):
        @property
        def metadata(self) -> RuleMetadata:
            return MY_METADATA

        def check(self, element: UnifiedElement) -> Optional[Issue]:
            if element.tag_name != "marquee":
                return None
            return self.issue_for(element, message=..., fix=..., repair_instruction=...)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..contracts.element import HeadingRecord, UnifiedElement
from ..contracts.issue import Issue, Severity


class RuleKind(Enum):
    """Scope a rule operates on."""

    ELEMENT = "element"
    """Called once per element."""

    FILE = "file"
    """Called once per file with every element and heading."""


@dataclass(frozen=True)
class RuleMetadata:
    """Static description of a rule, shown by `a11y-pilot rules`."""

    id: str
    """Stable identifier used in reports and --rules filters."""

    description: str
    """One-line summary of what the rule checks."""

    severity: Severity
    """Default severity of issues the rule emits."""

    wcag: str
    """WCAG success criteria, comma-separated (e.g., '4.1.2, 2.1.1')."""

    impact: str
    """Who is affected and how."""

    url: str
    """WCAG Understanding document."""


class Rule(ABC):
    """
    Abstract base class for all rules.

    Subclasses must implement:
    - metadata: RuleMetadata for this rule
    - kind: RuleKind (provided by ElementRule / FileRule)
    """

    @property
    @abstractmethod
    def metadata(self) -> RuleMetadata:
        """Static rule description."""
        pass

    @property
    @abstractmethod
    def kind(self) -> RuleKind:
        """Scope the rule operates on."""
        pass

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def severity(self) -> Severity:
        return self.metadata.severity

    @property
    def name(self) -> str:
        """Class name, for logging."""
        return self.__class__.__name__

    # =========================================================================
    # ISSUE CONSTRUCTION
    # =========================================================================

    def issue(
        self,
        line: int,
        source_line_text: str,
        message: str,
        fix: str,
        repair_instruction: str,
        severity: Optional[Severity] = None,
    ) -> Issue:
        """
        Build an Issue tagged with this rule's id.

        Args:
            line: 1-based line the issue is anchored at
            source_line_text: Stripped text of that line
            message: What is wrong
            fix: Human fix suggestion
            repair_instruction: Instruction for the repair agent
            severity: Override for the rule's default severity

        Returns:
            Immutable Issue
        """
        return Issue(
            rule_id=self.id,
            severity=severity or self.severity,
            message=message,
            line=line,
            source_line_text=source_line_text,
            fix=fix,
            repair_instruction=repair_instruction,
        )

    def issue_for(
        self,
        element: UnifiedElement,
        message: str,
        fix: str,
        repair_instruction: str,
        severity: Optional[Severity] = None,
    ) -> Issue:
        """Build an Issue anchored at an element's position."""
        return self.issue(
            line=element.line,
            source_line_text=element.source_line_text,
            message=message,
            fix=fix,
            repair_instruction=repair_instruction,
            severity=severity,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.name}(id={self.id}, kind={self.kind.value})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on rule id."""
        if not isinstance(other, Rule):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on rule id."""
        return hash(self.id)


class ElementRule(Rule):
    """
    Rule evaluated against each element independently.

    check() must be a pure function of the element.
    """

    @property
    def kind(self) -> RuleKind:
        return RuleKind.ELEMENT

    @abstractmethod
    def check(self, element: UnifiedElement) -> Optional[Issue]:
        """
        Evaluate one element.

        Args:
            element: Element to check

        Returns:
            Issue if the element violates the rule, else None
        """
        pass


class FileRule(Rule):
    """
    Rule evaluated once per file over all of its elements.

    Used for properties no single element can show: outline order,
    link clustering, landmark presence.
    """

    @property
    def kind(self) -> RuleKind:
        return RuleKind.FILE

    @abstractmethod
    def check_file(
        self,
        elements: List[UnifiedElement],
        headings: List[HeadingRecord],
        source_text: str,
    ) -> List[Issue]:
        """
        Evaluate a whole file.

        Args:
            elements: Every element the backend produced
            headings: Headings derived from elements, in element order
            source_text: Raw file content

        Returns:
            Zero or more issues
        """
        pass
