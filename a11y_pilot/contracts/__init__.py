"""
Contracts - Data structures shared by the normalizer, rules, and fixer.

Provides:
- UnifiedElement: Backend-agnostic markup tag
- HeadingRecord: Heading level and position in source order
- Issue / Severity: Rule findings
- DYNAMIC_EXPRESSION: Placeholder for non-literal attribute values
- relative_path: Working-directory-relative display paths
"""

from .element import (
    DYNAMIC_EXPRESSION,
    AttributeValue,
    DynamicExpression,
    HeadingRecord,
    UnifiedElement,
    attribute_spellings,
    collect_headings,
)
from .issue import Issue, Severity
from .paths import PathLike, relative_path

__all__ = [
    "DYNAMIC_EXPRESSION",
    "AttributeValue",
    "DynamicExpression",
    "HeadingRecord",
    "UnifiedElement",
    "attribute_spellings",
    "collect_headings",
    "Issue",
    "Severity",
    "PathLike",
    "relative_path",
]
