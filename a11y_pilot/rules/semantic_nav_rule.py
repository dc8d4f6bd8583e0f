"""
SemanticNavRule - Clusters of links should sit inside a <nav> landmark.

WCAG 1.3.1 Info and Relationships and 2.4.1 Bypass Blocks (Level A).

File-wide heuristic:
    1. Any <nav> anywhere in the file disables the check.
    2. Otherwise collect every <a> with an href, in source order.
    3. Slide a window of 3 consecutive anchors; the first window whose
       first and last anchor are at most 15 lines apart produces the only
       issue for the file, anchored at the window's first anchor.
"""

from typing import List

from ..contracts.element import HeadingRecord, UnifiedElement
from ..contracts.issue import Issue, Severity

from .base_rule import FileRule, RuleMetadata


SEMANTIC_NAV = RuleMetadata(
    id="semantic-nav",
    description="Groups of navigation links should be wrapped in a <nav> element",
    severity=Severity.WARNING,
    wcag="1.3.1, 2.4.1",
    impact=(
        "Screen reader users cannot identify and skip navigation blocks "
        "without <nav> landmarks"
    ),
    url="https://www.w3.org/WAI/WCAG21/Understanding/bypass-blocks.html",
)

# Anchors per window
CLUSTER_SIZE = 3

# Maximum line distance between the first and last anchor of a window
CLUSTER_LINE_SPAN = 15


class SemanticNavRule(FileRule):
    """Flag the first tight cluster of links in a file that has no <nav>."""

    @property
    def metadata(self) -> RuleMetadata:
        return SEMANTIC_NAV

    def check_file(
        self,
        elements: List[UnifiedElement],
        headings: List[HeadingRecord],
        source_text: str,
    ) -> List[Issue]:
        if any(el.tag_name == "nav" for el in elements):
            return []

        anchors = sorted(
            (el for el in elements if el.tag_name == "a" and el.has_attribute("href")),
            key=lambda el: (el.line, el.column),
        )
        if len(anchors) < CLUSTER_SIZE:
            return []

        for i in range(len(anchors) - CLUSTER_SIZE + 1):
            first = anchors[i]
            last = anchors[i + CLUSTER_SIZE - 1]
            if last.line - first.line <= CLUSTER_LINE_SPAN:
                return [
                    self.issue_for(
                        first,
                        message=(
                            f"Found {len(anchors)} navigation links without a <nav> "
                            "landmark wrapper"
                        ),
                        fix="Wrap these navigation links in a <nav> element with an aria-label",
                        repair_instruction=(
                            f"Look around line {first.line}. There are multiple navigation "
                            "links (<a> tags) grouped together but not wrapped in a <nav> "
                            'element. Wrap the group of navigation links in a <nav aria-label="Main '
                            'navigation"> element (or another appropriate label). This helps '
                            "screen reader users identify and skip past navigation blocks. "
                            "Keep the existing structure inside, just add the <nav> wrapper."
                        ),
                    )
                ]

        return []
