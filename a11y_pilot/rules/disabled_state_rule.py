"""
DisabledStateRule - Disabled controls should explain why.

WCAG 4.1.2 Name, Role, Value (Level A).

The native disabled attribute drops a control from the tab order, so a
screen reader user may never learn why an action is unavailable.
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


DISABLED_STATE = RuleMetadata(
    id="disabled-state",
    description="Disabled elements should be accessible with aria-disabled and provide context",
    severity=Severity.WARNING,
    wcag="4.1.2",
    impact=(
        "Native disabled attribute removes elements from tab order, making them "
        "invisible to keyboard and screen-reader users who may need to understand "
        "*why* an action is unavailable"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/name-role-value.html",
)

DISABLEABLE_TAGS = frozenset({"button", "input", "select", "textarea", "fieldset"})

EXPLANATION_ATTRIBUTES = ("title", "aria-label", "aria-describedby")


class DisabledStateRule(ElementRule):
    """Flag disabled form controls with no title, aria-label, or aria-describedby."""

    @property
    def metadata(self) -> RuleMetadata:
        return DISABLED_STATE

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.has_spread_attributes:
            return None

        if element.tag_name not in DISABLEABLE_TAGS:
            return None

        if not element.has_attribute("disabled"):
            return None

        if element.has_attribute(*EXPLANATION_ATTRIBUTES):
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=(
                f"<{name}> is disabled without accessible explanation (add title or "
                "aria-describedby)"
            ),
            fix="Add a title attribute or aria-describedby explaining why the control is disabled",
            repair_instruction=(
                f"Look at line {element.line}. The <{name}> element uses the disabled "
                "attribute but provides no explanation for *why* it's disabled. Screen "
                "reader users encounter a disabled control with no context about what "
                'they need to do to enable it. Best practice: use aria-disabled="true" '
                "instead of native disabled (keeps element in tab order), and add a title "
                "or aria-describedby attribute explaining why it's disabled (e.g., "
                'title="Please fill in all required fields first"). Example: <button '
                'aria-disabled="true" title="Complete the form first">Submit</button>'
            ),
        )
