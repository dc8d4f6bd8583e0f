"""
Rules - Accessibility detectors and the engine that runs them.

Components:
- ElementRule / FileRule: Base classes for the two rule kinds
- RuleRegistry: Ordered, filterable rule collection
- RuleEngine: Runs a registry over one file
- categorize: Issue breakdown by rule category
- Concrete Rules: ImgAltRule, ButtonContentRule, ...

Usage:
    from a11y_pilot.rules import RuleEngine, create_default_registry

    engine = RuleEngine(create_default_registry().select(["img-alt"]))
    issues = engine.check(elements, headings, source_text)
"""

from .base_rule import ElementRule, FileRule, Rule, RuleKind, RuleMetadata
from .registry import RuleRegistry, create_default_registry
from .categories import RULE_CATEGORIES, CategoryBreakdown, categorize, category_for
from .rule_engine import RuleEngine
from .img_alt_rule import ImgAltRule
from .button_content_rule import ButtonContentRule
from .no_div_button_rule import NoDivButtonRule
from .form_label_rule import FormLabelRule
from .heading_order_rule import HeadingOrderRule
from .anchor_content_rule import AnchorContentRule
from .no_autofocus_rule import NoAutofocusRule
from .semantic_nav_rule import SemanticNavRule
from .aria_valid_rule import AriaValidRule
from .keyboard_handlers_rule import KeyboardHandlersRule
from .landmark_regions_rule import LandmarkRegionsRule
from .aria_hidden_focus_rule import AriaHiddenFocusRule
from .hover_only_rule import HoverOnlyRule
from .disabled_state_rule import DisabledStateRule
from .tabindex_positive_rule import TabindexPositiveRule


__all__ = [
    # Base
    "Rule",
    "RuleKind",
    "RuleMetadata",
    "ElementRule",
    "FileRule",
    "RuleRegistry",
    "RuleEngine",
    "create_default_registry",
    "RULE_CATEGORIES",
    "CategoryBreakdown",
    "categorize",
    "category_for",
    # Rules
    "ImgAltRule",
    "ButtonContentRule",
    "NoDivButtonRule",
    "FormLabelRule",
    "HeadingOrderRule",
    "AnchorContentRule",
    "NoAutofocusRule",
    "SemanticNavRule",
    "AriaValidRule",
    "KeyboardHandlersRule",
    "LandmarkRegionsRule",
    "AriaHiddenFocusRule",
    "HoverOnlyRule",
    "DisabledStateRule",
    "TabindexPositiveRule",
]
