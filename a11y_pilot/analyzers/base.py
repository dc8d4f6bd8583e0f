"""
ElementProducer - Capability interface for markup backends.

Each backend turns raw source text into an ordered list of UnifiedElements.
Backend-specific node shapes never leave the backend module.
"""

import bisect
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import List, Union

from ..contracts.element import UnifiedElement


class FileKind(Enum):
    """Source file kinds, decided by extension."""

    HTML = "html"
    """Hypertext documents and template-based components (.vue, .svelte, .astro)."""

    JSX = "jsx"
    """JSX/TSX component files."""

    UNKNOWN = "unknown"
    """No backend; yields no elements."""

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FileKind":
        """
        Determine file kind from a path's extension.

        Args:
            path: File path

        Returns:
            FileKind for the extension (case-insensitive)
        """
        suffix = Path(path).suffix.lower()
        if suffix in (".jsx", ".tsx"):
            return cls.JSX
        if suffix in (".html", ".htm", ".vue", ".svelte", ".astro"):
            return cls.HTML
        return cls.UNKNOWN


class ElementProducer(ABC):
    """
    Abstract base class for markup backends.

    Subclasses must implement:
    - kind: FileKind this backend handles
    - produce_elements(): Parse source into UnifiedElements

    Implementations must never raise on malformed input: a source that
    cannot be parsed at all yields an empty list.
    """

    @property
    @abstractmethod
    def kind(self) -> FileKind:
        """File kind this backend handles."""
        pass

    @abstractmethod
    def produce_elements(self, source_text: str) -> List[UnifiedElement]:
        """
        Parse source text into elements.

        Args:
            source_text: Raw file content

        Returns:
            Elements with 1-based line numbers
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value})"


class LineIndex:
    """
    Maps character offsets to 1-based line numbers and line text.

    Built once per source; lookups are a binary search over line starts.
    """

    def __init__(self, source_text: str):
        self._lines = source_text.split("\n")
        self._starts: List[int] = []
        offset = 0
        for line in self._lines:
            self._starts.append(offset)
            offset += len(line) + 1

    def line_of(self, offset: int) -> int:
        """1-based line containing the character offset."""
        return max(bisect.bisect_right(self._starts, offset), 1)

    def column_of(self, offset: int) -> int:
        """0-based column of the character offset."""
        return offset - self._starts[self.line_of(offset) - 1]

    def text_of(self, line: int) -> str:
        """Stripped text of a 1-based line, '' when out of range."""
        if 1 <= line <= len(self._lines):
            return self._lines[line - 1].strip()
        return ""

    def __len__(self) -> int:
        return len(self._lines)
