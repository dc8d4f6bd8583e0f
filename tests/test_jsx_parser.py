"""
Tests for the JSX/TSX backend.

Tests for:
- Attribute resolution (literal, expression, boolean, spread)
- Text presence from children
- Element order, names and positions
- TypeScript syntax and malformed input
"""

import pytest

from a11y_pilot.analyzers import FileKind
from a11y_pilot.contracts.element import DYNAMIC_EXPRESSION


def _wrap(jsx: str) -> str:
    return f"export default function C() {{\n  return (\n    {jsx}\n  );\n}}\n"


def _by_tag(elements, tag):
    return [el for el in elements if el.tag_name == tag]


# ===========================================================================
# ATTRIBUTE TESTS
# ===========================================================================

class TestAttributes:
    """Tests for attribute value resolution."""

    def test_kind(self, jsx_producer):
        """Test the backend reports the JSX kind."""
        assert jsx_producer.kind == FileKind.JSX

    def test_string_literal(self, jsx_producer):
        """Test quoted values are stored without quotes."""
        elements = jsx_producer.produce_elements(_wrap('<img src="/hero.png" alt="Hero" />'))

        img = elements[0]
        assert img.get_attribute("src") == "/hero.png"
        assert img.get_literal("alt") == "Hero"

    def test_single_quoted_literal(self, jsx_producer):
        """Test single quotes are stripped too."""
        elements = jsx_producer.produce_elements(_wrap("<img alt='Logo' />"))

        assert elements[0].get_literal("alt") == "Logo"

    def test_expression_value_is_dynamic(self, jsx_producer):
        """Test {expression} values become DYNAMIC_EXPRESSION."""
        elements = jsx_producer.produce_elements(_wrap("<img alt={caption} tabIndex={-1} />"))

        img = elements[0]
        assert img.get_attribute("alt") is DYNAMIC_EXPRESSION
        assert img.is_dynamic("tabindex")
        assert img.get_literal("alt") is None

    def test_valueless_attribute_is_true(self, jsx_producer):
        """Test boolean shorthand attributes are stored as True."""
        elements = jsx_producer.produce_elements(_wrap('<input type="text" autoFocus disabled />'))

        element = elements[0]
        assert element.get_attribute("autofocus") is True
        assert element.get_attribute("disabled") is True

    def test_camel_case_names_are_lowercased(self, jsx_producer):
        """Test onClick and tabIndex are reachable by their lowercase names."""
        elements = jsx_producer.produce_elements(_wrap('<div onClick={go} tabIndex="0">x</div>'))

        div = elements[0]
        assert div.has_attribute("onclick")
        assert div.has_attribute("onClick")
        assert div.get_literal("tabindex") == "0"

    def test_hyphenated_aria_attribute(self, jsx_producer):
        """Test aria-* attributes keep their hyphen."""
        elements = jsx_producer.produce_elements(_wrap('<button aria-label="Close" />'))

        assert elements[0].get_literal("aria-label") == "Close"
        assert "aria-label" in elements[0].attributes

    def test_spread_attributes(self, jsx_producer):
        """Test {...props} sets has_spread_attributes."""
        elements = jsx_producer.produce_elements(_wrap('<img {...props} src="a.png" />'))

        img = elements[0]
        assert img.has_spread_attributes is True
        assert img.has_attribute("src")
        assert not img.has_attribute("alt")

    def test_no_spread(self, jsx_producer):
        """Test plain elements have no spread."""
        elements = jsx_producer.produce_elements(_wrap('<img src="a.png" />'))

        assert elements[0].has_spread_attributes is False

    def test_duplicate_attribute_keeps_last(self, jsx_producer):
        """Test a repeated attribute resolves to its last occurrence."""
        elements = jsx_producer.produce_elements(_wrap('<img alt="first" alt="second" />'))

        assert elements[0].get_literal("alt") == "second"


# ===========================================================================
# TEXT PRESENCE TESTS
# ===========================================================================

class TestTextPresence:
    """Tests for has_text_descendant."""

    @pytest.mark.parametrize("jsx,expected", [
        ("<button>Save</button>", True),
        ("<button>{label}</button>", True),
        ("<button><Icon /></button>", True),
        ("<button><span>Go</span></button>", True),
        ("<button></button>", False),
        ("<button>\n      </button>", False),
        ("<button />", False),
    ])
    def test_text_detection(self, jsx_producer, jsx, expected):
        """Test text, expressions, and child elements all count as content."""
        elements = jsx_producer.produce_elements(_wrap(jsx))

        button = _by_tag(elements, "button")[0]
        assert button.has_text_descendant is expected

    def test_self_closing_flag(self, jsx_producer):
        """Test self-closing syntax is recorded."""
        elements = jsx_producer.produce_elements(_wrap("<div><br /><p>x</p></div>"))

        assert _by_tag(elements, "br")[0].self_closing is True
        assert _by_tag(elements, "p")[0].self_closing is False


# ===========================================================================
# STRUCTURE TESTS
# ===========================================================================

class TestStructure:
    """Tests for element order, names, and positions."""

    def test_elements_in_source_order(self, jsx_producer):
        """Test parents come before their children."""
        elements = jsx_producer.produce_elements(_wrap("<nav><a href='/'>Home</a><img alt='' /></nav>"))

        assert [el.tag_name for el in elements] == ["nav", "a", "img"]

    def test_fragments_are_skipped(self, jsx_producer):
        """Test <>...</> produces no element."""
        elements = jsx_producer.produce_elements(_wrap("<><h1>Title</h1><p>Body</p></>"))

        assert [el.tag_name for el in elements] == ["h1", "p"]

    def test_component_names(self, jsx_producer):
        """Test components are lowercased with the raw name kept."""
        elements = jsx_producer.produce_elements(_wrap("<Card><motion.div>x</motion.div></Card>"))

        assert elements[0].tag_name == "card"
        assert elements[0].raw_tag_name == "Card"
        assert elements[1].tag_name == "motion.div"
        assert elements[1].raw_tag_name == "motion.div"

    def test_line_and_column(self, jsx_producer):
        """Test lines are 1-based and columns point at '<'."""
        source = "const a = 1;\n\nconst el = (\n  <div>\n      <img src='a.png' />\n  </div>\n);\n"

        elements = jsx_producer.produce_elements(source)

        img = _by_tag(elements, "img")[0]
        assert img.line == 5
        assert img.column == 6
        assert img.source_line_text == "<img src='a.png' />"
        assert _by_tag(elements, "div")[0].line == 4

    def test_nested_maps(self, jsx_producer):
        """Test elements inside expressions are collected."""
        source = _wrap("<ul>{items.map(item => <li key={item.id}>{item.name}</li>)}</ul>")

        elements = jsx_producer.produce_elements(source)

        assert [el.tag_name for el in elements] == ["ul", "li"]
        assert elements[1].has_text_descendant is True


# ===========================================================================
# ROBUSTNESS TESTS
# ===========================================================================

class TestRobustness:
    """Tests for TypeScript syntax and malformed input."""

    def test_typescript_annotations(self, jsx_producer):
        """Test TSX type syntax does not stop element collection."""
        source = (
            "type Props = { title: string; items?: string[] };\n"
            "export function Menu({ title }: Props): JSX.Element {\n"
            "  const count = (items as string[]).length;\n"
            "  return <h2>{title}</h2>;\n"
            "}\n"
        )

        elements = jsx_producer.produce_elements(source)

        assert [el.tag_name for el in elements] == ["h2"]
        assert elements[0].line == 4

    def test_no_jsx(self, jsx_producer):
        """Test plain modules yield no elements."""
        assert jsx_producer.produce_elements("export const x = 1;\n") == []

    def test_empty_source(self, jsx_producer):
        """Test empty input yields no elements."""
        assert jsx_producer.produce_elements("") == []

    def test_syntax_error_does_not_raise(self, jsx_producer):
        """Test broken syntax is tolerated."""
        elements = jsx_producer.produce_elements("export default () => <div><span></div>;\n")

        assert isinstance(elements, list)
