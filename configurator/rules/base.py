"""Abstract base class for all design constraints.

Every feasibility check in the system implements this interface. Rules are:
- Self-contained: each guards exactly one geometric invariant
- Ordered: the validator runs them by priority and stops at the first failure
- Conditional: each rule decides if it applies to the current configuration
- Repairable: each carries a deterministic nearest-fix for its invariant
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from configurator.models import ContainerConfig, Invalid


# Clearance kept on each side of the forklift pockets (mm)
POCKET_MARGIN = 20.0


class ConstraintRule(ABC):
    """
    Base class for all constraint rules.

    Subclasses implement `applies()`, `violated()` and `remedy()`.
    The validator queries the registry, sorts by `priority`, and returns
    the first rule whose `violated()` is true.
    """

    # Lower priority = checked first.
    priority: int = 100

    # Config fields to flag for the user when this rule fails.
    fields: tuple[str, ...] = ()

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'shell.wall_thickness')."""
        ...

    @abstractmethod
    def get_message(self) -> str:
        """Human-readable diagnostic shown when the rule fails."""
        ...

    def applies(self, config: ContainerConfig) -> bool:
        """Return True if this rule is relevant for the configuration."""
        return True

    @abstractmethod
    def violated(self, config: ContainerConfig) -> bool:
        ...

    @abstractmethod
    def remedy(self, config: ContainerConfig) -> ContainerConfig:
        """
        Return a copy of `config` moved to the nearest value that satisfies
        this rule. Other invariants are left alone.
        """
        ...

    def evaluate(self, config: ContainerConfig) -> Invalid | None:
        if not self.applies(config) or not self.violated(config):
            return None
        return Invalid(
            rule_id=self.get_id(),
            message=self.get_message(),
            remedy=self.remedy,
            offending_fields=frozenset(self.fields),
        )
