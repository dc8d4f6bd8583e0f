"""
LandmarkRegionsRule - Pages should expose main, banner, and contentinfo landmarks.

WCAG 1.3.1 Info and Relationships and 2.4.1 Bypass Blocks (Level A).

Only page-like files are checked: those with a <body> or <html> element, or
a <!doctype> declaration. Components and partials are never flagged.

    main         <main> or role="main"             always checked
    banner       <header> or role="banner"         only if <nav> or <body> exists
    contentinfo  <footer> or role="contentinfo"    only if <body> exists

Issues are anchored at line 1 since they describe the file as a whole.
"""

from typing import List, Set

from ..contracts.element import HeadingRecord, UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import FileRule, RuleMetadata


LANDMARK_REGIONS = RuleMetadata(
    id="landmark-regions",
    description="Pages should include landmark regions (<main>, <header>, <footer>)",
    severity=Severity.WARNING,
    wcag="1.3.1, 2.4.1",
    impact=(
        "Screen reader users rely on landmark regions to navigate and "
        "understand page structure"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/bypass-blocks.html",
)


class LandmarkRegionsRule(FileRule):
    """Flag page-level files that are missing a landmark region."""

    @property
    def metadata(self) -> RuleMetadata:
        return LANDMARK_REGIONS

    def check_file(
        self,
        elements: List[UnifiedElement],
        headings: List[HeadingRecord],
        source_text: str,
    ) -> List[Issue]:
        tags: Set[str] = set()
        roles: Set[str] = set()
        for el in elements:
            tags.add(el.tag_name)
            role = el.get_literal("role")
            if role:
                roles.add(role.lower())

        is_page_like = "body" in tags or "html" in tags or "<!doctype" in source_text.lower()
        if not is_page_like:
            return []

        first_line = source_text.split("\n", 1)[0].strip()
        issues = []

        if "main" not in tags and "main" not in roles:
            issues.append(
                self.issue(
                    line=1,
                    source_line_text=first_line,
                    message=(
                        "Page is missing a <main> landmark; screen readers cannot "
                        "identify the primary content"
                    ),
                    fix="Wrap the primary content in a <main> element",
                    repair_instruction=(
                        "This file appears to be a page or layout component but is missing "
                        "a <main> landmark element. Identify the primary content area and "
                        "wrap it in a <main> element. The <main> element should contain the "
                        "dominant content, not headers, footers, or sidebars. There should "
                        "be only one <main> per page."
                    ),
                )
            )

        has_banner = "header" in tags or "banner" in roles
        if not has_banner and ("nav" in tags or "body" in tags):
            issues.append(
                self.issue(
                    line=1,
                    source_line_text=first_line,
                    message="Page is missing a <header> landmark for site-wide navigation and branding",
                    fix="Add a <header> element wrapping the site navigation and branding",
                    repair_instruction=(
                        "This file is missing a <header> landmark. Add a <header> element "
                        "around the top section that contains navigation, logo, or site "
                        "branding. This helps screen reader users identify the page header "
                        "region."
                    ),
                )
            )

        has_contentinfo = "footer" in tags or "contentinfo" in roles
        if not has_contentinfo and "body" in tags:
            issues.append(
                self.issue(
                    line=1,
                    source_line_text=first_line,
                    message="Page is missing a <footer> landmark for page/site footer content",
                    fix="Add a <footer> element wrapping the page footer content",
                    repair_instruction=(
                        "This file is missing a <footer> landmark. If there is footer "
                        "content (copyright, links, contact info), wrap it in a <footer> "
                        "element. This helps screen reader users quickly navigate to footer "
                        "information."
                    ),
                )
            )

        return issues
