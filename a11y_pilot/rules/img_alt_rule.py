"""
ImgAltRule - <img> elements must carry an alt attribute.

WCAG 1.1.1 Non-text Content (Level A).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


IMG_ALT = RuleMetadata(
    id="img-alt",
    description="<img> elements must have an alt attribute",
    severity=Severity.ERROR,
    wcag="1.1.1",
    impact="Screen readers cannot describe the image to visually impaired users",
    url="https://www.w3.org/WAI/WCAG21/Understanding/non-text-content.html",
)


class ImgAltRule(ElementRule):
    """
    Flag images with no alt attribute at all.

    An empty alt ("") is valid: it marks the image as decorative.
    """

    @property
    def metadata(self) -> RuleMetadata:
        return IMG_ALT

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.tag_name != "img":
            return None

        # alt may arrive through the spread
        if element.has_spread_attributes:
            return None

        if element.has_attribute("alt"):
            return None

        return self.issue_for(
            element,
            message="<img> is missing the `alt` attribute",
            fix='Add alt="descriptive text" or alt="" if the image is decorative',
            repair_instruction=(
                f"Look at line {element.line}. There is an <img> tag without an alt "
                "attribute. Add a descriptive alt attribute based on the surrounding "
                "context. If the image appears to be decorative (like an icon next to "
                'text), use alt="". Make sure the alt text is meaningful and concise.'
            ),
        )
