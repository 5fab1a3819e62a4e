"""Rule registry — stores and orders design constraints."""

from __future__ import annotations

from configurator.models import ContainerConfig
from configurator.rules.base import ConstraintRule


class RuleRegistry:
    """
    Central registry for all constraint rules.

    Rules are registered at startup. During validation, the registry
    returns the rules relevant to a configuration in priority order.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ConstraintRule] = {}

    def register(self, rule: ConstraintRule) -> None:
        """Register a constraint rule, replacing any with the same id."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> ConstraintRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[ConstraintRule]:
        """Return all registered rules in check order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def get_applicable_rules(self, config: ContainerConfig) -> list[ConstraintRule]:
        """Return rules that apply to the given configuration, sorted by priority."""
        return [r for r in self.list_rules() if r.applies(config)]


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard container constraints."""
    from configurator.rules.shell import (
        PositiveDimensionsRule, WallThicknessRule, HopperLengthRule,
    )
    from configurator.rules.frame import FrameHeightRule, PocketWidthRule
    from configurator.rules.lid import LidHoleRadiusRule

    registry = RuleRegistry()
    registry.register(PositiveDimensionsRule())
    registry.register(WallThicknessRule())
    registry.register(HopperLengthRule())
    registry.register(FrameHeightRule())
    registry.register(PocketWidthRule())
    registry.register(LidHoleRadiusRule())
    return registry
