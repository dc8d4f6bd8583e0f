"""
HoverOnlyRule - Hover interactions need focus equivalents.

WCAG 2.1.1 Keyboard (Level A) and 1.4.13 Content on Hover or Focus (Level AA).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


HOVER_ONLY = RuleMetadata(
    id="hover-only",
    description="Elements with hover interactions must also respond to keyboard focus",
    severity=Severity.ERROR,
    wcag="2.1.1, 1.4.13",
    impact=(
        "Keyboard and touch users cannot access UI that only appears or "
        "activates on mouse hover"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/content-on-hover-or-focus.html",
)

# (stored name, name shown in messages), first present one is reported
HOVER_HANDLERS = (
    ("onmouseenter", "onMouseEnter"),
    ("onmouseover", "onMouseOver"),
    ("onmouseleave", "onMouseLeave"),
)

FOCUS_HANDLERS = ("onfocus", "onblur")


class HoverOnlyRule(ElementRule):
    """Flag elements with mouse hover handlers and no onFocus/onBlur."""

    @property
    def metadata(self) -> RuleMetadata:
        return HOVER_ONLY

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.has_spread_attributes:
            return None

        hover_type = None
        for attr, display_name in HOVER_HANDLERS:
            if element.has_attribute(attr):
                hover_type = display_name
                break

        if hover_type is None:
            return None

        if element.has_attribute(*FOCUS_HANDLERS):
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=f"<{name}> has {hover_type} but no onFocus/onBlur equivalent for keyboard users",
            fix="Add onFocus and onBlur handlers that mirror the hover behavior",
            repair_instruction=(
                f"Look at line {element.line}. The <{name}> element has mouse hover "
                f"handlers ({hover_type}) but no keyboard focus equivalents. Keyboard and "
                "touch users cannot trigger hover interactions. Add onFocus and onBlur "
                "handlers that provide the same behavior as onMouseEnter/onMouseLeave. For "
                "example, if hovering shows a tooltip or dropdown, the same should happen "
                "on focus. Also ensure the element is focusable with tabIndex={0} if it "
                "isn't natively focusable."
            ),
        )
