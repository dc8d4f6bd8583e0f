"""
KeyboardHandlersRule - Click handlers need a keyboard counterpart.

WCAG 2.1.1 Keyboard (Level A).
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


KEYBOARD_HANDLERS = RuleMetadata(
    id="keyboard-handlers",
    description="Elements with click handlers must also have keyboard event handlers",
    severity=Severity.ERROR,
    wcag="2.1.1",
    impact="Keyboard-only users cannot activate elements that only respond to mouse clicks",
    url="https://www.w3.org/WAI/WCAG21/Understanding/keyboard.html",
)

# Native elements that already activate on Enter/Space
NATIVE_INTERACTIVE_TAGS = frozenset({
    "button", "a", "input", "select", "textarea", "summary", "details",
})

KEY_HANDLERS = ("onkeydown", "onkeyup", "onkeypress")


class KeyboardHandlersRule(ElementRule):
    """Flag non-native elements with onClick and no onKeyDown/onKeyUp/onKeyPress."""

    @property
    def metadata(self) -> RuleMetadata:
        return KEYBOARD_HANDLERS

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.has_spread_attributes:
            return None

        if element.tag_name in NATIVE_INTERACTIVE_TAGS:
            return None

        if not element.has_attribute("onclick"):
            return None

        if element.has_attribute(*KEY_HANDLERS):
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=f"<{name}> has onClick but no onKeyDown/onKeyUp handler for keyboard users",
            fix="Add an onKeyDown handler that triggers on Enter and Space keys",
            repair_instruction=(
                f"Look at line {element.line}. The <{name}> element has an onClick handler "
                "but no keyboard event handler. Keyboard users cannot activate this "
                "element. Add an onKeyDown handler that calls the same action when Enter "
                "or Space is pressed. Example: onKeyDown={(e) => { if (e.key === 'Enter' "
                "|| e.key === ' ') { e.preventDefault(); /* same action as onClick */ } }}. "
                "Also ensure the element has tabIndex={0} and an appropriate role if not "
                "already present."
            ),
        )
