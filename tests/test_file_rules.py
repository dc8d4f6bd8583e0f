"""
Tests for the file rules: heading-order, semantic-nav, landmark-regions.
"""

import pytest

from a11y_pilot.contracts.element import HeadingRecord, collect_headings
from a11y_pilot.contracts.issue import Severity
from a11y_pilot.rules import HeadingOrderRule, LandmarkRegionsRule, RuleKind, SemanticNavRule


def _headings(*levels):
    return [HeadingRecord(level=level, line=i + 1) for i, level in enumerate(levels)]


# ===========================================================================
# HEADING-ORDER
# ===========================================================================

class TestHeadingOrderRule:
    """Tests for heading-order."""

    rule = HeadingOrderRule()

    def test_is_file_rule(self):
        """Test heading-order runs once per file."""
        assert self.rule.kind == RuleKind.FILE
        assert self.rule.severity == Severity.WARNING

    def test_skipped_level(self):
        """Test [h1, h2, h4] yields one issue at the h4 line."""
        issues = self.rule.check_file([], _headings(1, 2, 4), "")

        assert len(issues) == 1
        assert issues[0].line == 3
        assert issues[0].message == "Heading level skipped: <h2> → <h4> (missing <h3>)"
        assert issues[0].fix == "Change this to <h3> or add the missing heading levels"

    def test_first_heading_may_be_any_level(self):
        """Test [h2, h3, h4] is valid."""
        assert self.rule.check_file([], _headings(2, 3, 4), "") == []

    @pytest.mark.parametrize("levels", [(1, 1, 1), (1, 2, 3, 2, 3), (3, 1, 2), (1, 2, 1, 2)])
    def test_valid_sequences(self, levels):
        """Test going up or staying level never triggers."""
        assert self.rule.check_file([], _headings(*levels), "") == []

    def test_multiple_skips(self):
        """Test every skip is reported against its own predecessor."""
        issues = self.rule.check_file([], _headings(1, 3, 1, 4), "")

        assert [issue.line for issue in issues] == [2, 4]
        assert "<h1> → <h4>" in issues[1].message

    def test_headings_from_elements(self, make_element):
        """Test collect_headings keeps element order and levels."""
        elements = [
            make_element("h1", line=2),
            make_element("div", line=3),
            make_element("H3", line=5),
        ]

        headings = collect_headings(elements)

        assert [(h.level, h.line) for h in headings] == [(1, 2), (3, 5)]
        assert len(self.rule.check_file(elements, headings, "")) == 1


# ===========================================================================
# SEMANTIC-NAV
# ===========================================================================

class TestSemanticNavRule:
    """Tests for semantic-nav."""

    rule = SemanticNavRule()

    def _links(self, make_element, lines):
        return [make_element("a", {"href": "/"}, text=True, line=line) for line in lines]

    def test_cluster_flagged_once(self, make_element):
        """Test a tight cluster yields one issue at the first anchor."""
        elements = self._links(make_element, [4, 5, 6, 7])

        issues = self.rule.check_file(elements, [], "")

        assert len(issues) == 1
        assert issues[0].line == 4
        assert issues[0].message == "Found 4 navigation links without a <nav> landmark wrapper"

    def test_nav_anywhere_suppresses(self, make_element):
        """Test a <nav> anywhere in the file disables the check."""
        elements = self._links(make_element, [4, 5, 6]) + [make_element("nav", line=90)]

        assert self.rule.check_file(elements, [], "") == []

    def test_spread_out_links(self, make_element):
        """Test links further apart than the window are not a cluster."""
        elements = self._links(make_element, [1, 10, 30, 50])

        assert self.rule.check_file(elements, [], "") == []

    def test_window_boundary(self, make_element):
        """Test a span of exactly 15 lines still counts."""
        assert len(self.rule.check_file(self._links(make_element, [1, 8, 16]), [], "")) == 1
        assert self.rule.check_file(self._links(make_element, [1, 8, 17]), [], "") == []

    def test_first_window_wins(self, make_element):
        """Test the issue anchors at the first qualifying window."""
        elements = self._links(make_element, [1, 40, 41, 42, 80, 81, 82])

        issues = self.rule.check_file(elements, [], "")

        assert len(issues) == 1
        assert issues[0].line == 40

    def test_anchors_without_href_ignored(self, make_element):
        """Test only links with href are counted."""
        elements = [make_element("a", {"id": f"a{i}"}, line=i) for i in range(1, 5)]

        assert self.rule.check_file(elements, [], "") == []

    def test_close_order_input(self, make_element):
        """Test anchors are considered in source order even if given out of order."""
        elements = self._links(make_element, [30, 3, 2, 1])

        issues = self.rule.check_file(elements, [], "")

        assert issues[0].line == 1


# ===========================================================================
# LANDMARK-REGIONS
# ===========================================================================

class TestLandmarkRegionsRule:
    """Tests for landmark-regions."""

    rule = LandmarkRegionsRule()

    def test_component_not_checked(self, make_element):
        """Test files without body/html/doctype are never flagged."""
        elements = [make_element("section"), make_element("nav")]

        assert self.rule.check_file(elements, [], "<section><nav></nav></section>") == []

    def test_bare_page_missing_everything(self, make_element):
        """Test a body with no landmarks yields three issues at line 1."""
        source = "<body>\n<div>content</div>\n</body>"
        elements = [make_element("body"), make_element("div", line=2)]

        issues = self.rule.check_file(elements, [], source)

        assert len(issues) == 3
        assert {issue.line for issue in issues} == {1}
        assert issues[0].message.startswith("Page is missing a <main> landmark")
        assert "<header>" in issues[1].message
        assert "<footer>" in issues[2].message
        assert issues[0].source_line_text == "<body>"

    def test_doctype_only_checks_main(self, make_element):
        """Test without body or nav only main is required."""
        source = "<!DOCTYPE html>\n<div></div>"

        issues = self.rule.check_file([make_element("div", line=2)], [], source)

        assert len(issues) == 1
        assert "<main>" in issues[0].message

    def test_nav_requires_header(self, make_element):
        """Test a page with a nav but no header is missing a banner."""
        source = "<html><main></main><nav></nav></html>"
        elements = [make_element("html"), make_element("main"), make_element("nav")]

        issues = self.rule.check_file(elements, [], source)

        assert len(issues) == 1
        assert "<header>" in issues[0].message

    def test_roles_satisfy_landmarks(self, make_element):
        """Test role=main/banner/contentinfo count as landmarks."""
        elements = [
            make_element("body"),
            make_element("div", {"role": "main"}),
            make_element("div", {"role": "Banner"}),
            make_element("div", {"role": "contentinfo"}),
        ]

        assert self.rule.check_file(elements, [], "<body></body>") == []

    def test_complete_page(self, make_element):
        """Test main, header and footer satisfy the rule."""
        elements = [make_element(tag) for tag in ("html", "body", "header", "main", "footer")]

        assert self.rule.check_file(elements, [], "<html></html>") == []
