"""
RuleRegistry - Ordered, explicit collection of rules.

The registry is passed to the RuleEngine rather than discovered globally,
so a filtered registry (--rules img-alt,form-label) is just another
RuleRegistry instance.

Usage:
    from a11y_pilot.rules import create_default_registry

    registry = create_default_registry()
    subset = registry.select(["img-alt", "form-label"])
    rule = registry.get("heading-order")
"""

import logging
from typing import Iterable, Iterator, List, Optional

from ..core.exceptions import EmptyRuleSelectionError

from .base_rule import ElementRule, FileRule, Rule, RuleKind


logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Rules in registration order.

    Registration order is also detection order: issues on the same line
    are reported in the order their rules were registered.
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules: List[Rule] = []
        for rule in rules or []:
            self.register(rule)

    def register(self, rule: Rule) -> None:
        """
        Add a rule at the end of the registry.

        Args:
            rule: Rule instance

        Raises:
            ValueError: If a rule with the same id is already registered
        """
        if self.get(rule.id) is not None:
            raise ValueError(f"Rule already registered: {rule.id}")
        self._rules.append(rule)
        logger.debug(f"Registered rule: {rule.id} ({rule.kind.value})")

    def get(self, rule_id: str) -> Optional[Rule]:
        """
        Look up a rule by id.

        Args:
            rule_id: Rule identifier (e.g., 'img-alt')

        Returns:
            The rule, or None if not registered
        """
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        return None

    def select(self, rule_ids: Iterable[str]) -> "RuleRegistry":
        """
        Build a registry holding only the requested rules.

        Registry order is kept regardless of the order ids are given in.
        Unknown ids are ignored as long as at least one id matches.

        Args:
            rule_ids: Rule identifiers to keep

        Returns:
            New RuleRegistry

        Raises:
            EmptyRuleSelectionError: If no id matches a registered rule
        """
        requested = [rule_id.strip() for rule_id in rule_ids if rule_id.strip()]
        wanted = set(requested)
        selected = [rule for rule in self._rules if rule.id in wanted]

        if not selected:
            raise EmptyRuleSelectionError(requested, self.ids)

        unknown = wanted - {rule.id for rule in selected}
        if unknown:
            logger.warning(f"Ignoring unknown rule ids: {', '.join(sorted(unknown))}")

        return RuleRegistry(selected)

    @property
    def rules(self) -> List[Rule]:
        """All rules in registration order."""
        return self._rules.copy()

    @property
    def ids(self) -> List[str]:
        return [rule.id for rule in self._rules]

    @property
    def element_rules(self) -> List[ElementRule]:
        return [rule for rule in self._rules if rule.kind == RuleKind.ELEMENT]

    @property
    def file_rules(self) -> List[FileRule]:
        return [rule for rule in self._rules if rule.kind == RuleKind.FILE]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return isinstance(rule_id, str) and self.get(rule_id) is not None

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({len(self._rules)} rules)"


def create_default_registry() -> RuleRegistry:
    """
    Create a RuleRegistry with all fifteen rules in their stable order.

    Returns:
        Configured RuleRegistry ready to use
    """
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

    registry = RuleRegistry([
        ImgAltRule(),
        ButtonContentRule(),
        NoDivButtonRule(),
        FormLabelRule(),
        HeadingOrderRule(),        # file
        AnchorContentRule(),
        NoAutofocusRule(),
        SemanticNavRule(),         # file
        AriaValidRule(),
        KeyboardHandlersRule(),
        LandmarkRegionsRule(),     # file
        AriaHiddenFocusRule(),
        HoverOnlyRule(),
        DisabledStateRule(),
        TabindexPositiveRule(),
    ])

    logger.debug(f"Created default registry with {len(registry)} rules")
    return registry
