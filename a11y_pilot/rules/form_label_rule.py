"""
FormLabelRule - Form controls must carry an inline label.

WCAG 1.3.1 Info and Relationships and 4.1.2 Name, Role, Value (Level A).

A <label for="..."> association lives on another element and cannot be
verified per element, so only inline mechanisms are accepted:
aria-label, aria-labelledby, or title. A placeholder is not a label.
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


FORM_LABEL = RuleMetadata(
    id="form-label",
    description="Form inputs must have an associated <label>, aria-label, or aria-labelledby",
    severity=Severity.ERROR,
    wcag="1.3.1, 4.1.2",
    impact="Screen reader users cannot determine the purpose of the input field",
    url="https://www.w3.org/WAI/WCAG21/Understanding/info-and-relationships.html",
)

FORM_CONTROL_TAGS = frozenset({"input", "select", "textarea"})

# Input types that are either invisible or labelled by their own value
UNLABELLED_INPUT_TYPES = frozenset({"hidden", "submit", "button", "reset"})


class FormLabelRule(ElementRule):
    """Flag input/select/textarea without aria-label, aria-labelledby, or title."""

    @property
    def metadata(self) -> RuleMetadata:
        return FORM_LABEL

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.tag_name not in FORM_CONTROL_TAGS:
            return None

        if element.has_spread_attributes:
            return None

        input_type = element.get_literal("type")
        if input_type is not None and input_type.strip().lower() in UNLABELLED_INPUT_TYPES:
            return None

        if element.has_attribute("aria-label", "aria-labelledby", "title"):
            return None

        name = element.raw_tag_name
        placeholder_note = ""
        if element.has_attribute("placeholder"):
            placeholder_note = ". Note: placeholder is NOT a substitute for a label"

        return self.issue_for(
            element,
            message=(
                f"<{name}> has no accessible label (missing aria-label, "
                f"aria-labelledby, or title){placeholder_note}"
            ),
            fix='Add aria-label="Description" to the input, or wrap it with a <label> element',
            repair_instruction=(
                f"Look at line {element.line}. There is a <{name}> element without an "
                "accessible label. Add an appropriate aria-label attribute based on the "
                "context (look at nearby text, placeholder, or variable names for clues "
                "about the field's purpose). If there is a placeholder, the aria-label "
                "should match or expand on it. Alternatively, add a visible <label> "
                "element associated via htmlFor/id."
            ),
        )
