"""
Rule categories - Groups rule ids for the issue breakdown.

Every rule belongs to exactly one category. Issues from a rule id that is
not listed here fall into OTHER_CATEGORY.

Usage:
    from a11y_pilot.rules.categories import categorize

    for entry in categorize(issues):
        print(entry.category, entry.total, entry.percent_of(len(issues)))
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..contracts.issue import Issue, Severity


OTHER_CATEGORY = "Other"

RULE_CATEGORIES: Dict[str, str] = {
    "img-alt": "Accessibility",
    "button-content": "Accessibility",
    "anchor-content": "Accessibility",
    "form-label": "Accessibility",
    "aria-valid": "ARIA",
    "aria-hidden-focus": "ARIA",
    "heading-order": "Semantic HTML",
    "semantic-nav": "Semantic HTML",
    "landmark-regions": "Semantic HTML",
    "no-div-button": "Semantic HTML",
    "keyboard-handlers": "Keyboard",
    "no-autofocus": "Keyboard",
    "tabindex-positive": "Keyboard",
    "hover-only": "Interaction",
    "disabled-state": "Interaction",
}


def category_for(rule_id: str) -> str:
    return RULE_CATEGORIES.get(rule_id, OTHER_CATEGORY)


@dataclass
class CategoryBreakdown:
    """Issue counts for one category."""

    category: str
    """Category name (e.g., 'Keyboard')."""

    errors: int = 0
    """Issues with ERROR severity."""

    warnings: int = 0
    """Issues with WARNING severity."""

    rule_ids: List[str] = field(default_factory=list)
    """Rules that reported in this category, in first-seen order."""

    @property
    def total(self) -> int:
        return self.errors + self.warnings

    def percent_of(self, grand_total: int) -> int:
        """Share of grand_total, rounded half up to a whole percent."""
        if grand_total <= 0:
            return 0
        return int(self.total * 100 / grand_total + 0.5)


def categorize(issues: Iterable[Issue]) -> List[CategoryBreakdown]:
    """
    Group issues by category.

    Args:
        issues: Issues from any number of files

    Returns:
        One entry per category that has issues, largest first; categories
        with equal totals keep the order they were first seen in
    """
    by_category: Dict[str, CategoryBreakdown] = {}

    for issue in issues:
        name = category_for(issue.rule_id)
        entry = by_category.get(name)
        if entry is None:
            entry = CategoryBreakdown(category=name)
            by_category[name] = entry

        if issue.rule_id not in entry.rule_ids:
            entry.rule_ids.append(issue.rule_id)
        if issue.severity == Severity.ERROR:
            entry.errors += 1
        else:
            entry.warnings += 1

    return sorted(by_category.values(), key=lambda entry: -entry.total)
