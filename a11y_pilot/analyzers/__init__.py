"""
Analyzers - Markup normalizer backends.

Two backends turn source text into UnifiedElements:
- HTMLElementProducer: streaming html.parser backend (.html, .htm, .vue, .svelte, .astro)
- TemplateElementProducer: tree-sitter TSX backend (.jsx, .tsx)

Usage:
    from a11y_pilot.analyzers import FileKind, get_producer

    producer = get_producer(FileKind.from_path("Hero.jsx"))
    elements = producer.produce_elements(source)
"""

from pathlib import Path
from typing import Dict, List, Union

from ..contracts.element import UnifiedElement
from ..core.exceptions import UnknownFileKindError
from .base import ElementProducer, FileKind, LineIndex
from .html_parser import HTMLElementProducer, VOID_ELEMENTS
from .jsx_parser import TemplateElementProducer


_producers: Dict[FileKind, ElementProducer] = {}


def get_producer(kind: FileKind) -> ElementProducer:
    """
    Get the backend for a file kind.

    Backends are created once and reused.

    Args:
        kind: FileKind to parse

    Returns:
        ElementProducer for the kind

    Raises:
        UnknownFileKindError: If no backend handles the kind
    """
    producer = _producers.get(kind)
    if producer is not None:
        return producer

    if kind == FileKind.HTML:
        producer = HTMLElementProducer()
    elif kind == FileKind.JSX:
        producer = TemplateElementProducer()
    else:
        raise UnknownFileKindError(f"No markup backend for file kind: {kind.value}")

    _producers[kind] = producer
    return producer


def produce_elements_for(path: Union[str, Path], source_text: str) -> List[UnifiedElement]:
    """
    Parse a file's content with the backend chosen by its extension.

    Unsupported extensions yield no elements.
    """
    kind = FileKind.from_path(path)
    if kind == FileKind.UNKNOWN:
        return []
    return get_producer(kind).produce_elements(source_text)


__all__ = [
    "ElementProducer",
    "FileKind",
    "LineIndex",
    "HTMLElementProducer",
    "TemplateElementProducer",
    "VOID_ELEMENTS",
    "get_producer",
    "produce_elements_for",
]
