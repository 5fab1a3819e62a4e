"""Vented lid constraint."""

from __future__ import annotations

from configurator.rules.base import ConstraintRule
from configurator.models import ContainerConfig


MIN_HOLE_RADIUS = 20.0


def max_hole_radius(config: ContainerConfig) -> float:
    """Largest vent radius that keeps the ring edge inside the lid."""
    by_width = config.W / 2 - config.lid_edge_length
    by_length = config.L_rect / 2 - config.lid_edge_length
    return max(MIN_HOLE_RADIUS, min(by_width, by_length))


class LidHoleRadiusRule(ConstraintRule):
    """Hole plus ring edge must fit inside the lid."""

    priority = 60
    fields = ("r_hole", "lid_edge_length")

    def get_id(self) -> str:
        return "lid.hole_radius"

    def get_message(self) -> str:
        return "Lid hole radius too large; ring edge would become negative."

    def applies(self, config: ContainerConfig) -> bool:
        return config.include_lid

    def violated(self, config: ContainerConfig) -> bool:
        return config.r_hole > max_hole_radius(config)

    def remedy(self, config: ContainerConfig) -> ContainerConfig:
        return config.model_copy(update={"r_hole": max_hole_radius(config)})
