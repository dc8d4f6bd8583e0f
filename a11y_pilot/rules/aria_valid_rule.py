"""
AriaValidRule - ARIA roles and attributes must be valid and consistent.

WCAG 4.1.2 Name, Role, Value (Level A).

Checks run in order and the first failing one is reported:
    1. role is not a WAI-ARIA role (error)
    2. role="presentation"/"none" on a natively interactive element (error)
    3. aria-* attribute that is not a WAI-ARIA state or property (error)
    4. aria-hidden="true" together with aria-label/aria-labelledby (warning)
"""

from typing import Optional

from ..contracts.element import UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import ElementRule, RuleMetadata


ARIA_VALID = RuleMetadata(
    id="aria-valid",
    description="Validates ARIA roles, states, and properties for correct usage",
    severity=Severity.ERROR,
    wcag="4.1.2",
    impact=(
        "Invalid ARIA attributes confuse screen readers and can make content "
        "completely inaccessible"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/name-role-value.html",
)

VALID_ROLES = frozenset({
    "alert", "alertdialog", "application", "article", "banner", "button",
    "cell", "checkbox", "columnheader", "combobox", "complementary",
    "contentinfo", "definition", "dialog", "directory", "document",
    "feed", "figure", "form", "grid", "gridcell", "group", "heading",
    "img", "link", "list", "listbox", "listitem", "log", "main",
    "marquee", "math", "menu", "menubar", "menuitem", "menuitemcheckbox",
    "menuitemradio", "meter", "navigation", "none", "note", "option",
    "presentation", "progressbar", "radio", "radiogroup", "region",
    "row", "rowgroup", "rowheader", "scrollbar", "search", "searchbox",
    "separator", "slider", "spinbutton", "status", "switch", "tab",
    "table", "tablist", "tabpanel", "term", "textbox", "timer",
    "toolbar", "tooltip", "tree", "treegrid", "treeitem",
})

VALID_ARIA_ATTRIBUTES = frozenset({
    "aria-activedescendant", "aria-atomic", "aria-autocomplete",
    "aria-braillelabel", "aria-brailleroledescription", "aria-busy",
    "aria-checked", "aria-colcount", "aria-colindex", "aria-colindextext",
    "aria-colspan", "aria-controls", "aria-current", "aria-describedby",
    "aria-description", "aria-details", "aria-disabled", "aria-dropeffect",
    "aria-errormessage", "aria-expanded", "aria-flowto", "aria-grabbed",
    "aria-haspopup", "aria-hidden", "aria-invalid", "aria-keyshortcuts",
    "aria-label", "aria-labelledby", "aria-level", "aria-live",
    "aria-modal", "aria-multiline", "aria-multiselectable", "aria-orientation",
    "aria-owns", "aria-placeholder", "aria-posinset", "aria-pressed",
    "aria-readonly", "aria-relevant", "aria-required", "aria-roledescription",
    "aria-rowcount", "aria-rowindex", "aria-rowindextext", "aria-rowspan",
    "aria-selected", "aria-setsize", "aria-sort", "aria-valuemax",
    "aria-valuemin", "aria-valuenow", "aria-valuetext",
})

INTERACTIVE_TAGS = frozenset({"a", "button", "input", "select", "textarea"})

PRESENTATIONAL_ROLES = frozenset({"presentation", "none"})


class AriaValidRule(ElementRule):
    """Validate role values and aria-* attribute names on one element."""

    @property
    def metadata(self) -> RuleMetadata:
        return ARIA_VALID

    def check(self, element: UnifiedElement) -> Optional[Issue]:
        if element.has_spread_attributes:
            return None

        return (
            self._check_role(element)
            or self._check_presentational_role(element)
            or self._check_attribute_names(element)
            or self._check_hidden_label_conflict(element)
        )

    # =========================================================================
    # CHECKS
    # =========================================================================

    def _check_role(self, element: UnifiedElement) -> Optional[Issue]:
        role = element.get_literal("role")
        if not role or role.lower() in VALID_ROLES:
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=f'Invalid ARIA role="{role}" on <{name}>',
            fix="Use a valid ARIA role. Common roles: button, link, navigation, dialog, alert, status",
            repair_instruction=(
                f"Look at line {element.line}. The <{name}> element has an invalid ARIA "
                f'role="{role}". Replace it with a valid ARIA role that matches the '
                "element's purpose, or remove the role attribute entirely and use a "
                "semantic HTML element instead."
            ),
        )

    def _check_presentational_role(self, element: UnifiedElement) -> Optional[Issue]:
        role = element.get_literal("role")
        if not role or role.lower() not in PRESENTATIONAL_ROLES:
            return None
        if element.tag_name not in INTERACTIVE_TAGS:
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=(
                f'role="{role}" on interactive <{name}> removes its semantics from '
                "the accessibility tree"
            ),
            fix=(
                f'Remove role="{role}" from interactive elements; it strips their '
                "accessibility semantics"
            ),
            repair_instruction=(
                f'Look at line {element.line}. The <{name}> element has role="{role}" '
                "which removes it from the accessibility tree. Interactive elements like "
                f'<{name}> must not have role="presentation" or role="none". Remove the '
                "role attribute so screen readers can properly interact with this element."
            ),
        )

    def _check_attribute_names(self, element: UnifiedElement) -> Optional[Issue]:
        for attr in element.attributes:
            if not attr.startswith("aria-") or attr in VALID_ARIA_ATTRIBUTES:
                continue

            name = element.raw_tag_name
            return self.issue_for(
                element,
                message=f'Invalid ARIA attribute "{attr}" on <{name}>',
                fix=f'Remove or replace "{attr}" with a valid ARIA attribute',
                repair_instruction=(
                    f"Look at line {element.line}. The <{name}> element has an invalid "
                    f'ARIA attribute "{attr}". This attribute is not recognized by '
                    "assistive technologies. Remove it or replace it with the correct "
                    "ARIA attribute for the intended behavior."
                ),
            )
        return None

    def _check_hidden_label_conflict(self, element: UnifiedElement) -> Optional[Issue]:
        if element.get_literal("aria-hidden") != "true":
            return None
        if not element.has_attribute("aria-label", "aria-labelledby"):
            return None

        name = element.raw_tag_name
        return self.issue_for(
            element,
            message=f'<{name}> has aria-hidden="true" with aria-label; the label will be ignored',
            fix="Remove either aria-hidden or the aria-label; they conflict",
            repair_instruction=(
                f'Look at line {element.line}. The <{name}> has both aria-hidden="true" '
                "and an aria-label. This is contradictory: aria-hidden hides the element "
                "from screen readers, so the label serves no purpose. Remove one: if the "
                "element should be hidden, remove aria-label; if it should be labelled, "
                "remove aria-hidden."
            ),
            severity=Severity.WARNING,
        )
