"""
RuleEngine - Runs a RuleRegistry over one file's elements.

Usage:
    from a11y_pilot.rules import RuleEngine, create_default_registry

    engine = RuleEngine(create_default_registry())
    issues = engine.check(elements, headings, source_text)
"""

import logging
from typing import List, Optional

from ..contracts.element import HeadingRecord, UnifiedElement, collect_headings
from ..contracts.issue import Issue

from .base_rule import RuleKind
from .registry import RuleRegistry, create_default_registry


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Applies every rule in a registry to a file.

    Order of work:
    1. Every element rule on every element
    2. Every file rule once
    3. Stable sort by line, so same-line issues keep detection order

    The engine is synchronous and side-effect free. A rule that raises is
    logged and skipped for that element or file; the other rules still run.
    """

    def __init__(self, registry: Optional[RuleRegistry] = None):
        """
        Initialize the rule engine.

        Args:
            registry: Rules to run (defaults to all fifteen rules)
        """
        self._registry = registry if registry is not None else create_default_registry()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def check(
        self,
        elements: List[UnifiedElement],
        headings: Optional[List[HeadingRecord]] = None,
        source_text: str = "",
    ) -> List[Issue]:
        """
        Run all rules against one file.

        Args:
            elements: Elements from a markup backend
            headings: Headings in element order (derived from elements if None)
            source_text: Raw file content, needed by file rules

        Returns:
            Issues sorted by ascending line
        """
        if headings is None:
            headings = collect_headings(elements)

        element_issues: List[Issue] = []
        file_issues: List[Issue] = []

        element_rules = [rule for rule in self._registry if rule.kind == RuleKind.ELEMENT]
        file_rules = [rule for rule in self._registry if rule.kind == RuleKind.FILE]

        for element in elements:
            for rule in element_rules:
                try:
                    issue = rule.check(element)
                except Exception as e:
                    logger.error(f"Rule {rule.id} failed on {element.describe()}: {e}")
                    continue
                if issue is not None:
                    element_issues.append(issue)

        for rule in file_rules:
            try:
                file_issues.extend(rule.check_file(elements, headings, source_text))
            except Exception as e:
                logger.error(f"File rule {rule.id} failed: {e}")

        issues = element_issues + file_issues
        issues.sort(key=lambda issue: issue.line)

        logger.debug(
            f"Checked {len(elements)} elements with {len(self._registry)} rules: "
            f"{len(issues)} issues"
        )
        return issues

    def __repr__(self) -> str:
        return f"RuleEngine({len(self._registry)} rules)"
