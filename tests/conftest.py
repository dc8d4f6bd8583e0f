"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Element factory (UnifiedElement with sensible defaults)
- Backends (HTML and JSX/TSX producers)
- Fixture file paths
- Scanner with the default registry
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

from a11y_pilot.analyzers import HTMLElementProducer, TemplateElementProducer
from a11y_pilot.contracts.element import UnifiedElement
from a11y_pilot.rules import create_default_registry
from a11y_pilot.scanner import Scanner


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# ELEMENT FACTORY
# ---------------------------------------------------------------------------

def build_element(
    tag: str,
    attributes: Optional[Dict[str, Any]] = None,
    text: bool = False,
    spread: bool = False,
    line: int = 1,
    column: int = 0,
    self_closing: bool = False,
) -> UnifiedElement:
    """
    Build a UnifiedElement the way a backend would.

    Attribute names are lowercased; presence is derived from the names.
    """
    attrs = {name.lower(): value for name, value in (attributes or {}).items()}
    return UnifiedElement(
        tag_name=tag.lower(),
        raw_tag_name=tag,
        attributes=attrs,
        attribute_presence=frozenset(attrs),
        has_spread_attributes=spread,
        has_text_descendant=text,
        line=line,
        column=column,
        source_line_text=f"<{tag}>",
        self_closing=self_closing,
    )


@pytest.fixture
def make_element() -> Callable[..., UnifiedElement]:
    """Factory fixture for UnifiedElement."""
    return build_element


# ---------------------------------------------------------------------------
# BACKENDS
# ---------------------------------------------------------------------------

@pytest.fixture
def html_producer() -> HTMLElementProducer:
    return HTMLElementProducer()


@pytest.fixture
def jsx_producer() -> TemplateElementProducer:
    return TemplateElementProducer()


# ---------------------------------------------------------------------------
# SCANNING
# ---------------------------------------------------------------------------

@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample component and page files."""
    return FIXTURES_DIR


@pytest.fixture
def scanner() -> Scanner:
    """Scanner with all fifteen rules."""
    return Scanner(create_default_registry())


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch) -> Path:
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Keep reporter output free of ANSI codes."""
    monkeypatch.setenv("NO_COLOR", "1")
