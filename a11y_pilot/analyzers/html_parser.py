"""
HTML Parser - Streaming hypertext backend.

Built on the standard library's event-based html.parser. Elements are
completed on their close event, so the output is in close order.

Position recovery:
    Line numbers are recovered by scanning the raw source for the next
    "<tagName" followed by whitespace, ">" or "/", starting at a cursor that
    only ever moves forward. Advancing the cursor past each match makes
    repeated tags (ten <li> in a row) resolve to distinct, increasing lines.
    The parser's own getpos() is the fallback when the scan finds nothing.

An unclosed <li>, <p> or <option> is completed when a sibling of the same
tag opens, so list items never nest inside each other.

Usage:
    from a11y_pilot.analyzers import HTMLElementProducer

    elements = HTMLElementProducer().produce_elements(html)
    for el in elements:
        print(el.tag_name, el.line)
"""

import logging
import re
from html.parser import HTMLParser
from typing import Dict, List, Optional, Pattern, Tuple

from ..contracts.element import AttributeValue, UnifiedElement
from .base import ElementProducer, FileKind, LineIndex


logger = logging.getLogger(__name__)

# Elements that never have a close tag
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

# Elements whose end tag is implied when a sibling of the same tag opens
IMPLIED_END_TAGS = frozenset({"li", "p", "option"})


class _OpenElement:
    """Mutable element state while its tag is still open."""

    __slots__ = (
        "tag_name", "raw_tag_name", "attributes", "has_text",
        "line", "column", "source_line_text",
    )

    def __init__(
        self,
        tag_name: str,
        raw_tag_name: str,
        attributes: Dict[str, AttributeValue],
        line: int,
        column: int,
        source_line_text: str,
    ):
        self.tag_name = tag_name
        self.raw_tag_name = raw_tag_name
        self.attributes = attributes
        self.has_text = False
        self.line = line
        self.column = column
        self.source_line_text = source_line_text

    def freeze(self, self_closing: bool = False) -> UnifiedElement:
        return UnifiedElement(
            tag_name=self.tag_name,
            raw_tag_name=self.raw_tag_name,
            attributes=dict(self.attributes),
            attribute_presence=frozenset(self.attributes),
            has_spread_attributes=False,
            has_text_descendant=self.has_text,
            line=self.line,
            column=self.column,
            source_line_text=self.source_line_text,
            self_closing=self_closing,
        )


class _ElementCollector(HTMLParser):
    """
    HTMLParser subclass that turns tag events into UnifiedElements.

    One instance per source text.
    """

    def __init__(self, source_text: str):
        super().__init__(convert_charrefs=True)
        self._source = source_text
        self._index = LineIndex(source_text)
        self._cursor = 0
        self._patterns: Dict[str, Pattern] = {}
        self._stack: List[_OpenElement] = []
        self.elements: List[UnifiedElement] = []

    # =========================================================================
    # PARSER EVENTS
    # =========================================================================

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self._close_implied(tag)
        element = self._open(tag, attrs)
        if element.tag_name in VOID_ELEMENTS:
            self.elements.append(element.freeze(self_closing=True))
        else:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self._close_implied(tag)
        element = self._open(tag, attrs)
        self.elements.append(element.freeze(self_closing=True))

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].tag_name == tag:
                # Close everything opened inside the matching element first
                while len(self._stack) > depth:
                    self.elements.append(self._stack.pop().freeze())
                return
        # Stray close tag with no matching open element

    def handle_data(self, data: str) -> None:
        if self._stack and data.strip():
            self._stack[-1].has_text = True

    def close(self) -> None:
        super().close()
        while self._stack:
            self.elements.append(self._stack.pop().freeze())

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _close_implied(self, tag: str) -> None:
        """Complete an unclosed <li>, <p> or <option> when a sibling of the same tag starts."""
        tag = tag.lower()
        if tag in IMPLIED_END_TAGS and self._stack and self._stack[-1].tag_name == tag:
            self.elements.append(self._stack.pop().freeze())

    def _open(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> _OpenElement:
        """Build open-element state and mark the enclosing element as non-empty."""
        if self._stack:
            self._stack[-1].has_text = True

        attributes: Dict[str, AttributeValue] = {}
        for name, value in attrs:
            attributes.setdefault(name.lower(), True if value is None else value)

        tag_name = tag.lower()
        offset = self._locate(tag_name)
        if offset is not None:
            line = self._index.line_of(offset)
            column = self._index.column_of(offset)
            raw_tag_name = self._source[offset + 1:offset + 1 + len(tag_name)]
        else:
            line, column = self.getpos()
            raw_tag_name = tag

        return _OpenElement(
            tag_name=tag_name,
            raw_tag_name=raw_tag_name,
            attributes=attributes,
            line=line,
            column=column,
            source_line_text=self._index.text_of(line),
        )

    def _locate(self, tag_name: str) -> Optional[int]:
        """
        Find the next occurrence of "<tag_name" at or after the cursor.

        Args:
            tag_name: Lowercased tag name

        Returns:
            Offset of the '<', or None if no further occurrence exists
        """
        pattern = self._patterns.get(tag_name)
        if pattern is None:
            pattern = re.compile(r"<" + re.escape(tag_name) + r"(?=[\s>/])", re.IGNORECASE)
            self._patterns[tag_name] = pattern

        match = pattern.search(self._source, self._cursor)
        if match is None:
            return None

        self._cursor = match.end()
        return match.start()


class HTMLElementProducer(ElementProducer):
    """
    Streaming hypertext backend.

    Used for .html/.htm and for template-based components (.vue, .svelte,
    .astro), whose markup parses acceptably as HTML.
    """

    @property
    def kind(self) -> FileKind:
        return FileKind.HTML

    def produce_elements(self, source_text: str) -> List[UnifiedElement]:
        """
        Parse HTML into elements, in close order.

        Args:
            source_text: Raw HTML

        Returns:
            Elements, or [] if the parser fails outright
        """
        collector = _ElementCollector(source_text)
        try:
            collector.feed(source_text)
            collector.close()
        except Exception as e:
            logger.debug(f"HTML parse failed, skipping file: {e}")
            return []
        return collector.elements
