"""
AriaHiddenFocusRule - Focusable elements must not be aria-hidden.

WCAG 4.1.2 Name, Role, Value and 1.3.1 Info and Relationships (Level A).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


ARIA_HIDDEN_FOCUS = RuleMetadata(
    id="aria-hidden-focus",
    description='Focusable elements must not have aria-hidden="true"',
    severity=Severity.ERROR,
    wcag="4.1.2, 1.3.1",
    impact=(
        "Screen readers will skip the element but keyboard users can still "
        "focus it, creating a confusing mismatch"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/name-role-value.html",
)

FOCUSABLE_TAGS = frozenset({"a", "button", "input", "select", "textarea", "summary"})


class AriaHiddenFocusRule(ElementRule):
    """
    Flag elements with aria-hidden="true" that can still receive focus.

    Not focusable (skipped):
    - <a> without href
    - <input type="hidden">
    - tabindex="-1"
    A dynamic tabindex cannot be evaluated and is skipped as well.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return ARIA_HIDDEN_FOCUS

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.has_spread_attributes:
            return None

        if element.get_literal("aria-hidden") != "true":
            return None

        if element.tag_name == "a" and not element.has_attribute("href"):
            return None

        input_type = element.get_literal("type")
        if element.tag_name == "input" and input_type == "hidden":
            return None

        if element.is_dynamic("tabindex"):
            return None

        tabindex = element.get_literal("tabindex")
        if tabindex is not None and tabindex.strip() == "-1":
            return None

        is_focusable = (
            element.tag_name in FOCUSABLE_TAGS
            or element.has_attribute("tabindex", "contenteditable")
        )
        if not is_focusable:
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=(
                f'<{name}> is focusable but has aria-hidden="true"; keyboard users can '
                "reach it but screen readers cannot"
            ),
            fix='Either remove aria-hidden="true" or add tabIndex={-1} to remove it from the tab order',
            repair_instruction=(
                f'Look at line {element.line}. The <{name}> element has aria-hidden="true" '
                "but is still focusable by keyboard. This creates a confusing experience: "
                "keyboard users can tab to it, but screen readers skip it entirely. Either "
                'remove aria-hidden="true" so the element is properly announced, or add '
                "tabIndex={-1} to also remove it from the keyboard tab order. Choose based "
                "on whether the element should be accessible or truly hidden."
            ),
        )
