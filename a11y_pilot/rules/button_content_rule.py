"""
ButtonContentRule - <button> elements must have an accessible name.

WCAG 4.1.2 Name, Role, Value (Level A).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


BUTTON_CONTENT = RuleMetadata(
    id="button-content",
    description="<button> elements must have text content or aria-label",
    severity=Severity.ERROR,
    wcag="4.1.2",
    impact=(
        "Screen readers announce the button without a name, making it "
        "impossible to understand its purpose"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/name-role-value.html",
)


class ButtonContentRule(ElementRule):
    """
    Flag buttons with no text, aria-label, aria-labelledby, or title.

    Text content is observed directly, so a spread does not exempt the
    element. Only naming attributes that are visibly present count.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return BUTTON_CONTENT

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.tag_name != "button":
            return None

        if element.has_accessible_name:
            return None

        return self.issue_for(
            element,
            message="<button> has no accessible name (no text content, aria-label, or title)",
            fix="Add text content inside the button, or add an aria-label attribute",
            repair_instruction=(
                f"Look at line {element.line}. There is a <button> element with no "
                "accessible name: it has no text content, no aria-label, and no title "
                "attribute. Add an appropriate aria-label based on the button's purpose "
                "(look at its onClick handler, icon, or surrounding context for clues). "
                "If the button contains an icon, add aria-label describing the action."
            ),
        )
