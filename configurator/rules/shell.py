"""Shell constraints — body dimensions, wall thickness and hopper length."""

from __future__ import annotations
import math

from configurator.rules.base import ConstraintRule
from configurator.models import ContainerConfig


MIN_DIMENSION = 100.0
MIN_WALL = 2.0


class PositiveDimensionsRule(ConstraintRule):
    """Length, height, width and wall thickness must all be positive."""

    priority = 10
    fields = ("L_rect", "H", "W", "t_wall")

    def get_id(self) -> str:
        return "shell.positive_dimensions"

    def get_message(self) -> str:
        return "All main dimensions (L_rect, H, W, t_wall) must be > 0."

    def violated(self, config: ContainerConfig) -> bool:
        return (
            config.L_rect <= 0
            or config.H <= 0
            or config.W <= 0
            or config.t_wall <= 0
        )

    def remedy(self, config: ContainerConfig) -> ContainerConfig:
        return config.model_copy(update={
            "L_rect": max(config.L_rect, MIN_DIMENSION),
            "H": max(config.H, MIN_DIMENSION),
            "W": max(config.W, MIN_DIMENSION),
            "t_wall": max(config.t_wall, MIN_WALL),
        })


class WallThicknessRule(ConstraintRule):
    """Two walls must leave a positive cavity in both plan directions."""

    priority = 20
    fields = ("t_wall",)

    def get_id(self) -> str:
        return "shell.wall_thickness"

    def get_message(self) -> str:
        return (
            "Wall thickness too large relative to width/length - "
            "inner cavity would collapse."
        )

    def violated(self, config: ContainerConfig) -> bool:
        return 2 * config.t_wall >= min(config.W, config.L_rect)

    def remedy(self, config: ContainerConfig) -> ContainerConfig:
        shortest = min(config.W, config.L_rect)
        t = max(MIN_WALL, float(math.floor(shortest / 4)))
        if 2 * t >= shortest:
            # Tiny bodies: the 2 mm floor would still close the cavity
            t = shortest / 4
        return config.model_copy(update={"t_wall": t})


class HopperLengthRule(ConstraintRule):
    """The wedge cannot be longer than the rectangular body."""

    priority = 30
    fields = ("x_hopper", "L_rect")

    def get_id(self) -> str:
        return "shell.hopper_length"

    def get_message(self) -> str:
        return (
            "x_hopper must be between 0 and L_rect "
            "(wedge cannot be longer than the rectangular part)."
        )

    def violated(self, config: ContainerConfig) -> bool:
        return config.x_hopper < 0 or config.x_hopper > config.L_rect

    def remedy(self, config: ContainerConfig) -> ContainerConfig:
        x = max(0.0, min(config.x_hopper, config.L_rect))
        return config.model_copy(update={"x_hopper": x})
