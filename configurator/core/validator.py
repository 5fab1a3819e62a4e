"""Constraint validator — first-failure check of a candidate configuration."""

from __future__ import annotations
import logging

from configurator.models import ContainerConfig, Valid, ValidationResult
from configurator.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class ConstraintValidator:
    """
    Stateless validator.

    Runs the registry's rules in priority order and stops at the first
    violation, so at most one diagnostic is reported per call.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def validate(self, candidate: ContainerConfig) -> ValidationResult:
        for rule in self.registry.get_applicable_rules(candidate):
            failure = rule.evaluate(candidate)
            if failure is not None:
                logger.debug("Rule %s failed", failure.rule_id)
                return failure
        return Valid()
