"""Constraint check results."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Union

from .parameters import ContainerConfig


Remedy = Callable[[ContainerConfig], ContainerConfig]


@dataclass(frozen=True)
class Valid:
    """No constraint is violated."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """
    The first violated constraint.

    `remedy` maps a candidate to a corrected copy that satisfies this
    constraint only. It does not re-run the other checks.
    """
    rule_id: str
    message: str
    remedy: Remedy
    offending_fields: frozenset[str] = field(default_factory=frozenset)

    @property
    def ok(self) -> bool:
        return False

    def apply_remedy(self, candidate: ContainerConfig) -> ContainerConfig:
        return self.remedy(candidate)


ValidationResult = Union[Valid, Invalid]
