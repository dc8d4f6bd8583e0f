"""
TabindexPositiveRule - tabindex should be 0 or -1, never positive.

WCAG 2.4.3 Focus Order (Level A).
"""

import re
from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


TABINDEX_POSITIVE = RuleMetadata(
    id="tabindex-positive",
    description="Avoid positive tabindex values; they disrupt natural focus order",
    severity=Severity.WARNING,
    wcag="2.4.3",
    impact=(
        "Positive tabindex values override the natural document tab order, "
        "creating a confusing and unpredictable focus sequence for keyboard users"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/focus-order.html",
)

# Leading integer, trailing garbage ignored ("3px" -> 3)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_tabindex(value: str) -> Optional[int]:
    """
    Parse the leading integer of a tabindex literal.

    Args:
        value: Literal attribute value

    Returns:
        Integer value, or None if the literal does not start with one
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


class TabindexPositiveRule(ElementRule):
    """
    Flag literal tabindex values greater than zero.

    Dynamic, boolean, and non-numeric values cannot be evaluated and are
    never reported.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return TABINDEX_POSITIVE

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.has_spread_attributes:
            return None

        raw_value = element.get_literal("tabindex")
        if not raw_value:
            return None

        tabindex = parse_tabindex(raw_value)
        if tabindex is None or tabindex <= 0:
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=(
                f'<{name}> has tabindex="{tabindex}"; positive tabindex disrupts natural '
                "tab order"
            ),
            fix=(
                f'Change tabindex="{tabindex}" to tabindex="0" (or remove it if the '
                "element is natively focusable)"
            ),
            repair_instruction=(
                f'Look at line {element.line}. The <{name}> element has tabindex="{tabindex}". '
                "Positive tabindex values are an anti-pattern because they override the "
                "natural DOM-based tab order, causing confusion for keyboard users. "
                "Elements with positive tabindex are focused before all elements with "
                'tabindex="0" or no tabindex. Fix: If the element needs to be focusable, '
                'use tabindex="0" to add it to the natural tab order. If it\'s natively '
                "focusable (button, a, input), remove the tabindex entirely. Reorder "
                "elements in the DOM instead of using tabindex to control focus order."
            ),
        )
