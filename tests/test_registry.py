"""
Tests for RuleRegistry.

Tests for:
- Default registry contents and order
- Lookup and membership
- Filtered selection
- Duplicate registration
"""

import pytest

from a11y_pilot.core.exceptions import A11yPilotError, EmptyRuleSelectionError
from a11y_pilot.rules import (
    ImgAltRule,
    RuleKind,
    RuleRegistry,
    create_default_registry,
)


DEFAULT_ORDER = [
    "img-alt",
    "button-content",
    "no-div-button",
    "form-label",
    "heading-order",
    "anchor-content",
    "no-autofocus",
    "semantic-nav",
    "aria-valid",
    "keyboard-handlers",
    "landmark-regions",
    "aria-hidden-focus",
    "hover-only",
    "disabled-state",
    "tabindex-positive",
]


@pytest.fixture
def registry() -> RuleRegistry:
    return create_default_registry()


# ===========================================================================
# DEFAULT REGISTRY TESTS
# ===========================================================================

class TestDefaultRegistry:
    """Tests for create_default_registry."""

    def test_all_rules_in_stable_order(self, registry):
        """Test the fifteen rules are registered in order."""
        assert registry.ids == DEFAULT_ORDER
        assert len(registry) == 15

    def test_kinds(self, registry):
        """Test three file rules and twelve element rules."""
        assert [rule.id for rule in registry.file_rules] == [
            "heading-order",
            "semantic-nav",
            "landmark-regions",
        ]
        assert len(registry.element_rules) == 12
        assert all(rule.kind == RuleKind.ELEMENT for rule in registry.element_rules)

    def test_metadata_complete(self, registry):
        """Test every rule documents WCAG, impact and a URL."""
        for rule in registry:
            meta = rule.metadata
            assert meta.id == rule.id
            assert meta.description
            assert meta.wcag
            assert meta.impact
            assert meta.url.startswith("https://")

    def test_independent_instances(self):
        """Test each call builds a fresh registry."""
        assert create_default_registry() is not create_default_registry()


# ===========================================================================
# LOOKUP TESTS
# ===========================================================================

class TestLookup:
    """Tests for get and membership."""

    def test_get(self, registry):
        """Test lookup by id."""
        rule = registry.get("img-alt")

        assert isinstance(rule, ImgAltRule)
        assert registry.get("nope") is None

    def test_contains(self, registry):
        """Test membership by id."""
        assert "form-label" in registry
        assert "nope" not in registry
        assert 42 not in registry

    def test_rules_returns_copy(self, registry):
        """Test mutating the returned list leaves the registry intact."""
        rules = registry.rules
        rules.clear()

        assert len(registry) == 15

    def test_duplicate_registration(self):
        """Test a rule id can only be registered once."""
        registry = RuleRegistry([ImgAltRule()])

        with pytest.raises(ValueError, match="img-alt"):
            registry.register(ImgAltRule())


# ===========================================================================
# SELECTION TESTS
# ===========================================================================

class TestSelect:
    """Tests for select."""

    def test_keeps_registry_order(self, registry):
        """Test selection order follows the registry, not the request."""
        subset = registry.select(["tabindex-positive", "img-alt", "heading-order"])

        assert subset.ids == ["img-alt", "heading-order", "tabindex-positive"]

    def test_strips_whitespace(self, registry):
        """Test ids are trimmed."""
        assert registry.select([" img-alt ", ""]).ids == ["img-alt"]

    def test_unknown_ids_ignored(self, registry):
        """Test unknown ids are dropped when at least one matches."""
        assert registry.select(["img-alt", "bogus"]).ids == ["img-alt"]

    def test_empty_selection_raises(self, registry):
        """Test a selection matching nothing raises."""
        with pytest.raises(EmptyRuleSelectionError) as exc_info:
            registry.select(["bogus", "nope"])

        error = exc_info.value
        assert error.requested == ["bogus", "nope"]
        assert error.available == DEFAULT_ORDER
        assert isinstance(error, A11yPilotError)
        assert isinstance(error, ValueError)

    def test_select_does_not_mutate(self, registry):
        """Test the original registry is unchanged."""
        registry.select(["img-alt"])

        assert len(registry) == 15
