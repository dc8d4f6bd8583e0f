"""
Tests that the HTML and JSX backends agree on the same markup.

Each snippet is valid both as HTML text and as a TSX statement, so the
two backends see identical tags at identical positions.
"""

import pytest

from a11y_pilot.rules import AnchorContentRule, ButtonContentRule


def _first(elements, tag):
    return [el for el in elements if el.tag_name == tag][0]


# ===========================================================================
# TEXT PRESENCE
# ===========================================================================

class TestTextParity:
    """Tests for has_text_descendant across backends."""

    @pytest.mark.parametrize("markup,expected", [
        ('const link = <a href="/x">&nbsp;</a>;', False),
        ('const link = <a href="/x"> &nbsp; </a>;', False),
        ('const link = <a href="/x">&amp;</a>;', True),
        ('const link = <a href="/x">Home&nbsp;page</a>;', True),
    ])
    def test_character_references(self, html_producer, jsx_producer, markup, expected):
        """Test entities are decoded before the whitespace check in both backends."""
        html_anchor = _first(html_producer.produce_elements(markup), "a")
        jsx_anchor = _first(jsx_producer.produce_elements(markup), "a")

        assert html_anchor.has_text_descendant is expected
        assert jsx_anchor.has_text_descendant is expected

    def test_nbsp_only_anchor_flagged_by_both(self, html_producer, jsx_producer):
        """Test an anchor holding only &nbsp; is reported from either backend."""
        markup = 'const link = <a href="/x">&nbsp;</a>;'
        rule = AnchorContentRule()

        html_issue = rule.check(_first(html_producer.produce_elements(markup), "a"))
        jsx_issue = rule.check(_first(jsx_producer.produce_elements(markup), "a"))

        assert html_issue is not None
        assert jsx_issue is not None
        assert html_issue.rule_id == jsx_issue.rule_id == "anchor-content"

    def test_nbsp_only_button_flagged_by_both(self, html_producer, jsx_producer):
        """Test a button holding only &nbsp; is reported from either backend."""
        markup = "const save = <button>&nbsp;</button>;"
        rule = ButtonContentRule()

        assert rule.check(_first(html_producer.produce_elements(markup), "button")) is not None
        assert rule.check(_first(jsx_producer.produce_elements(markup), "button")) is not None


# ===========================================================================
# POSITIONS
# ===========================================================================

class TestPositionParity:
    """Tests for line and column agreement across backends."""

    def test_column_after_non_ascii_text(self, html_producer, jsx_producer):
        """Test columns count characters, not UTF-8 bytes."""
        markup = 'const y = "é"; const z = <b>x</b>;'

        html_b = _first(html_producer.produce_elements(markup), "b")
        jsx_b = _first(jsx_producer.produce_elements(markup), "b")

        assert html_b.column == 25
        assert jsx_b.column == 25

    def test_column_on_later_line(self, html_producer, jsx_producer):
        """Test multi-byte characters on earlier lines do not shift columns."""
        markup = 'const a = "ünï";\nconst b = "日本"; const c = <i>x</i>;'

        html_i = _first(html_producer.produce_elements(markup), "i")
        jsx_i = _first(jsx_producer.produce_elements(markup), "i")

        assert (html_i.line, html_i.column) == (2, 26)
        assert (jsx_i.line, jsx_i.column) == (2, 26)
