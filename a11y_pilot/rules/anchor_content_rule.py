"""
AnchorContentRule - Links must have an accessible name.

WCAG 2.4.4 Link Purpose (In Context) and 4.1.2 Name, Role, Value (Level A).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


ANCHOR_CONTENT = RuleMetadata(
    id="anchor-content",
    description="<a> elements must have text content or aria-label",
    severity=Severity.ERROR,
    wcag="2.4.4, 4.1.2",
    impact='Screen readers announce "link" without a name, making navigation impossible',
    url="https://www.w3.org/WAI/WCAG21/Understanding/link-purpose-in-context.html",
)


class AnchorContentRule(ElementRule):
    """
    Flag <a href> elements with no text, aria-label, aria-labelledby, or title.

    An <a> without href is a fragment target, not a link. Anchors hidden
    with aria-hidden="true" are skipped. Like button-content, a spread
    does not exempt an anchor that visibly has no text.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return ANCHOR_CONTENT

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.tag_name != "a":
            return None

        if not element.has_attribute("href"):
            return None

        if element.get_literal("aria-hidden") == "true":
            return None

        if element.has_accessible_name:
            return None

        return self.issue_for(
            element,
            message="<a> element has no accessible name (no text content, aria-label, or title)",
            fix=(
                "Add text content inside the link, or add an aria-label attribute "
                "describing the link destination"
            ),
            repair_instruction=(
                f"Look at line {element.line}. There is an <a> (anchor/link) element "
                "without any accessible text. Screen readers will announce it as just "
                '"link" with no context. Add an aria-label attribute that describes where '
                "the link goes or what it does. If it wraps an image, make sure the image "
                "has appropriate alt text. If it's an icon link, add aria-label like "
                '"Open in new tab" or "Go to homepage".'
            ),
        )
