"""
JSX Parser - Template syntax tree backend for .jsx/.tsx.

Uses tree-sitter with the TSX grammar, which accepts modules, JSX and
TypeScript annotations in one pass and recovers from syntax errors by
inserting ERROR nodes instead of failing.

Every jsx_opening_element and jsx_self_closing_element becomes one
UnifiedElement, in source order. Fragments (<>...</>) have no name and are
skipped.
"""

import html
import logging
from typing import Dict, List, Optional, Tuple

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from ..contracts.element import DYNAMIC_EXPRESSION, AttributeValue, UnifiedElement
from .base import ElementProducer, FileKind


logger = logging.getLogger(__name__)

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())

# Node types that open an element
ELEMENT_NODE_TYPES = ("jsx_opening_element", "jsx_self_closing_element")

# Children of a jsx_element that can give it an accessible name
NAME_BEARING_CHILDREN = (
    "jsx_expression",
    "jsx_element",
    "jsx_self_closing_element",
)


def _text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace")


class TemplateElementProducer(ElementProducer):
    """
    JSX/TSX backend built on tree-sitter.

    Attribute resolution:
    - string value          -> the literal, without quotes
    - {expression} value    -> DYNAMIC_EXPRESSION
    - <Element/> value      -> DYNAMIC_EXPRESSION
    - no value              -> True
    - {...props}            -> has_spread_attributes
    """

    def __init__(self):
        self._parser = Parser(TSX_LANGUAGE)

    @property
    def kind(self) -> FileKind:
        return FileKind.JSX

    def produce_elements(self, source_text: str) -> List[UnifiedElement]:
        """
        Parse JSX/TSX into elements, in source order.

        Args:
            source_text: Raw component source

        Returns:
            Elements, or [] if parsing fails
        """
        try:
            tree = self._parser.parse(source_text.encode("utf-8"))
            lines = source_text.split("\n")
            return self._collect(tree.root_node, lines)
        except Exception as e:
            logger.debug(f"JSX parse failed, skipping file: {e}")
            return []

    # =========================================================================
    # TREE WALK
    # =========================================================================

    def _collect(self, root: Node, lines: List[str]) -> List[UnifiedElement]:
        elements: List[UnifiedElement] = []
        stack = [root]

        # Pre-order walk keeps elements in source order
        while stack:
            node = stack.pop()
            if node.type in ELEMENT_NODE_TYPES:
                element = self._build_element(node, lines)
                if element is not None:
                    elements.append(element)
            stack.extend(reversed(node.children))

        return elements

    def _build_element(self, node: Node, lines: List[str]) -> Optional[UnifiedElement]:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        raw_name = _text(name_node)
        attributes: Dict[str, AttributeValue] = {}
        has_spread = False

        for child in node.named_children:
            if child.type == "jsx_attribute":
                name, value = self._read_attribute(child)
                if name:
                    attributes[name] = value
            elif child.type == "jsx_expression" and self._is_spread(child):
                has_spread = True

        self_closing = node.type == "jsx_self_closing_element"
        line = node.start_point[0] + 1
        source_line = lines[line - 1].strip() if line <= len(lines) else ""

        return UnifiedElement(
            tag_name=raw_name.lower(),
            raw_tag_name=raw_name,
            attributes=attributes,
            attribute_presence=frozenset(attributes),
            has_spread_attributes=has_spread,
            has_text_descendant=False if self_closing else self._has_text_children(node),
            line=line,
            column=self._char_column(lines, line, node.start_point[1]),
            source_line_text=source_line,
            self_closing=self_closing,
        )

    # =========================================================================
    # ATTRIBUTES AND CHILDREN
    # =========================================================================

    def _read_attribute(self, node: Node) -> Tuple[str, AttributeValue]:
        """
        Read one jsx_attribute.

        Returns:
            (lowercased name, value) tuple; name is '' if unreadable
        """
        parts = node.named_children
        if not parts:
            return "", True

        name = _text(parts[0]).lower()
        if len(parts) < 2:
            return name, True

        value_node = parts[1]
        if value_node.type == "string":
            return name, _text(value_node)[1:-1]
        return name, DYNAMIC_EXPRESSION

    def _char_column(self, lines: List[str], line: int, byte_column: int) -> int:
        """Convert a tree-sitter byte column to a character column."""
        if line > len(lines):
            return byte_column
        prefix = lines[line - 1].encode("utf-8")[:byte_column]
        return len(prefix.decode("utf-8", errors="replace"))

    def _is_spread(self, node: Node) -> bool:
        return any(child.type == "spread_element" for child in node.named_children)

    def _has_text_children(self, opening: Node) -> bool:
        """
        Check the enclosing jsx_element for name-bearing children.

        Non-empty text, embedded expressions, and nested elements all count.
        Character references are decoded first, so a lone &nbsp; is empty.
        """
        parent = opening.parent
        if parent is None or parent.type != "jsx_element":
            return False

        for child in parent.named_children:
            if child.type in ("jsx_opening_element", "jsx_closing_element"):
                continue
            if child.type in ("jsx_text", "html_character_reference"):
                if html.unescape(_text(child)).strip():
                    return True
            elif child.type in NAME_BEARING_CHILDREN:
                return True
        return False
