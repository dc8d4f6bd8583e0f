"""
HeadingOrderRule - Heading levels must not skip.

WCAG 1.3.1 Info and Relationships (Level A).

Only upward jumps are checked: h1 -> h3 is a skip, h4 -> h2 is fine.
The first heading sets the baseline and never triggers, whatever its level.
"""

from typing import List

from ..contracts.element import HeadingRecord, UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import FileRule, RuleMetadata


HEADING_ORDER = RuleMetadata(
    id="heading-order",
    description="Heading levels should increase sequentially without skipping",
    severity=Severity.WARNING,
    wcag="1.3.1",
    impact=(
        "Screen reader users rely on heading hierarchy to navigate and "
        "understand page structure"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/info-and-relationships.html",
)


class HeadingOrderRule(FileRule):
    """Flag each heading that is more than one level deeper than the one before it."""

    @property
    def metadata(self) -> RuleMetadata:
        return HEADING_ORDER

    def check_file(
        self,
        elements: List[UnifiedElement],
        headings: List[HeadingRecord],
        source_text: str,
    ) -> List[Issue]:
        issues = []
        previous = 0

        for heading in headings:
            if previous > 0 and heading.level > previous + 1:
                expected = previous + 1
                issues.append(
                    self.issue(
                        line=heading.line,
                        source_line_text=heading.source_line_text,
                        message=(
                            f"Heading level skipped: <h{previous}> → <h{heading.level}> "
                            f"(missing <h{expected}>)"
                        ),
                        fix=f"Change this to <h{expected}> or add the missing heading levels",
                        repair_instruction=(
                            f"Look at line {heading.line}. The heading level jumps from "
                            f"h{previous} to h{heading.level}, skipping h{expected}. This "
                            "breaks the document outline for screen reader users. Adjust "
                            f"the heading level to h{expected} to maintain a proper heading "
                            "hierarchy. Check the surrounding headings in the file to ensure "
                            "the entire heading structure is sequential."
                        ),
                    )
                )
            previous = heading.level

        return issues
