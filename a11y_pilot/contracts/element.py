"""
Element - Backend-agnostic representation of a markup tag.

Both markup backends (streaming HTML parser and the JSX/TSX syntax tree
walker) produce UnifiedElement instances, so rules never see a
backend-specific node.

Attribute names are stored lowercased. JSX spells most ARIA and event
attributes in camelCase (ariaLabel, onClick, tabIndex) while HTML uses the
hyphenated or all-lowercase form, so every lookup goes through
has_attribute()/get_attribute(), which try both spellings.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Union, FrozenSet


class DynamicExpression:
    """
    Placeholder for an attribute value that is not a static literal.

    Produced for JSX values like alt={caption} or tabIndex={-1}. There is
    exactly one instance, DYNAMIC_EXPRESSION.
    """

    _instance: Optional["DynamicExpression"] = None

    def __new__(cls) -> "DynamicExpression":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "{expression}"

    def __str__(self) -> str:
        return "{expression}"

    def __reduce__(self):
        return (DynamicExpression, ())


DYNAMIC_EXPRESSION = DynamicExpression()

AttributeValue = Union[str, bool, DynamicExpression]

_HEADING_TAG = re.compile(r"^h([1-6])$")


def attribute_spellings(name: str) -> List[str]:
    """
    Spellings under which a semantic attribute may be stored.

    "aria-label" is stored as-is by the HTML backend and as "arialabel" when
    written ariaLabel in JSX; both are returned.

    Args:
        name: Attribute name in either spelling

    Returns:
        Distinct lowercased spellings, hyphenated form first
    """
    lowered = name.lower()
    collapsed = lowered.replace("-", "")
    if collapsed == lowered:
        return [lowered]
    return [lowered, collapsed]


@dataclass(frozen=True)
class UnifiedElement:
    """
    One markup tag with its attributes, text presence, and source position.

    Instances are created once per scan and never mutated.
    """

    tag_name: str
    """Lowercased tag name (e.g., 'button', 'motion.div')."""

    raw_tag_name: str
    """Tag name as written in the source."""

    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)
    """Lowercased attribute name -> literal string, True, or DYNAMIC_EXPRESSION."""

    attribute_presence: FrozenSet[str] = frozenset()
    """Names of every attribute present, independent of value."""

    has_spread_attributes: bool = False
    """An attribute bag was spread in, so unknown attributes may exist."""

    has_text_descendant: bool = False
    """Element contains text, an embedded expression, or a child element."""

    line: int = 0
    """1-based source line (0 when the position could not be recovered)."""

    column: int = 0
    """0-based column of the opening '<'."""

    source_line_text: str = ""
    """Stripped text of the source line, for reporting."""

    self_closing: bool = False
    """Element was written self-closing or is a void element."""

    def __post_init__(self):
        if self.tag_name != self.tag_name.lower():
            object.__setattr__(self, "tag_name", self.tag_name.lower())

    # =========================================================================
    # ATTRIBUTE LOOKUP
    # =========================================================================

    def has_attribute(self, *names: str) -> bool:
        """
        Check whether any of the given attributes is present.

        Each name is tried in both its hyphenated and collapsed spelling.

        Args:
            *names: Attribute names (e.g., "aria-label", "title")

        Returns:
            True if at least one is present
        """
        for name in names:
            for spelling in attribute_spellings(name):
                if spelling in self.attribute_presence:
                    return True
        return False

    def get_attribute(self, *names: str) -> Optional[AttributeValue]:
        """
        Get the value of the first present attribute among names.

        Args:
            *names: Attribute names in priority order

        Returns:
            The stored value, or None if none are present
        """
        for name in names:
            for spelling in attribute_spellings(name):
                if spelling in self.attributes:
                    return self.attributes[spelling]
        return None

    def get_literal(self, *names: str) -> Optional[str]:
        """
        Get an attribute value only if it is a static string literal.

        Boolean markers and dynamic expressions return None.
        """
        value = self.get_attribute(*names)
        if isinstance(value, str):
            return value
        return None

    def is_dynamic(self, *names: str) -> bool:
        """Check if the first present attribute among names is a dynamic expression."""
        return self.get_attribute(*names) is DYNAMIC_EXPRESSION

    @property
    def has_accessible_name(self) -> bool:
        """At least one naming mechanism is present (label, labelledby, title, or text)."""
        return (
            self.has_attribute("aria-label", "aria-labelledby", "title")
            or self.has_text_descendant
        )

    @property
    def heading_level(self) -> Optional[int]:
        """Heading level 1-6 for h1..h6, None for any other tag."""
        match = _HEADING_TAG.match(self.tag_name)
        return int(match.group(1)) if match else None

    def describe(self) -> str:
        """Generate human-readable description."""
        return f"<{self.raw_tag_name}> at line {self.line}"


@dataclass(frozen=True)
class HeadingRecord:
    """A heading in document (source) order."""

    level: int
    """Heading level, 1-6."""

    line: int
    """1-based source line."""

    source_line_text: str = ""
    """Stripped text of the source line."""


def collect_headings(elements: Iterable[UnifiedElement]) -> List[HeadingRecord]:
    """
    Derive heading records from elements, keeping element order.

    Args:
        elements: Elements produced by a markup backend

    Returns:
        HeadingRecord for every h1..h6 element
    """
    headings = []
    for element in elements:
        level = element.heading_level
        if level is not None:
            headings.append(
                HeadingRecord(
                    level=level,
                    line=element.line,
                    source_line_text=element.source_line_text,
                )
            )
    return headings
