"""
NoDivButtonRule - Clickable non-interactive containers should be buttons.

WCAG 4.1.2 Name, Role, Value and 2.1.1 Keyboard (Level A).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


NO_DIV_BUTTON = RuleMetadata(
    id="no-div-button",
    description=(
        "Non-interactive elements (<div>, <span>) with click handlers should "
        "use <button> or <a>"
    ),
    severity=Severity.ERROR,
    wcag="4.1.2, 2.1.1",
    impact=(
        "Keyboard users cannot interact with div/span elements. Screen readers "
        "do not announce them as interactive."
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/keyboard.html",
)

NON_INTERACTIVE_TAGS = frozenset({"div", "span", "section", "article", "li", "td"})

POINTER_OR_KEY_HANDLERS = ("onclick", "onkeydown", "onkeyup", "onkeypress")


class NoDivButtonRule(ElementRule):
    """
    Flag generic containers with activation handlers that lack role or tabindex.

    Having both role and tabindex is accepted; missing either one is not.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return NO_DIV_BUTTON

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.tag_name not in NON_INTERACTIVE_TAGS:
            return None

        if element.has_spread_attributes:
            return None

        if not element.has_attribute(*POINTER_OR_KEY_HANDLERS):
            return None

        missing = []
        if not element.has_attribute("role"):
            missing.append("role")
        if not element.has_attribute("tabindex"):
            missing.append("tabIndex")

        if not missing:
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=(
                f"<{name}> has a click handler but is missing "
                f"{' and '.join(missing)}. Use a <button> instead."
            ),
            fix=(
                f"Replace this <{name}> with a <button> element, or add "
                'role="button" and tabIndex={0}'
            ),
            repair_instruction=(
                f"Look at line {element.line}. There is a <{name}> element with a "
                "click handler (onClick) but it is not keyboard-accessible. This is a "
                f"serious accessibility violation. Replace the <{name}> with a <button> "
                "element. Move the onClick to the button. Remove any role or tabIndex "
                "attributes; native buttons handle this automatically. Make sure to "
                "preserve the styling by adding className or style if needed. If the "
                "element is meant to navigate, use <a> instead."
            ),
        )
