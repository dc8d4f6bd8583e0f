"""
NoAutofocusRule - Avoid autofocus.

WCAG 3.2.1 On Focus (Level A).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


NO_AUTOFOCUS = RuleMetadata(
    id="no-autofocus",
    description=(
        "Avoid using autoFocus attribute; it disrupts screen readers and "
        "keyboard navigation"
    ),
    severity=Severity.WARNING,
    wcag="3.2.1",
    impact=(
        "autoFocus moves focus unexpectedly, disorienting screen reader users "
        "and disrupting keyboard navigation flow"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/on-focus.html",
)


class NoAutofocusRule(ElementRule):
    """
    Flag any element that carries autofocus / autoFocus.

    This rule reports a present attribute rather than a missing one, so a
    spread does not exempt it.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return NO_AUTOFOCUS

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if not element.has_attribute("autofocus"):
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=f"<{name}> uses autoFocus which disrupts screen reader and keyboard navigation",
            fix=(
                "Remove the autoFocus attribute. If focus management is needed, use a "
                "ref with useEffect for controlled focus."
            ),
            repair_instruction=(
                f"Look at line {element.line}. The <{name}> element uses autoFocus, which "
                "is an accessibility anti-pattern: it disrupts screen reader announcements "
                "and confuses keyboard-only users who expect focus to start at the top of "
                "the page. Remove the autoFocus attribute. If you need to manage focus "
                "(e.g., in a modal or after navigation), replace it with a React ref and "
                "useEffect to focus the element after mount, with a comment explaining "
                "why focus management is needed."
            ),
        )
