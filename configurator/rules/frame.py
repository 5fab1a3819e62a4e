"""Lifting frame constraints.

Both rules only apply when the frame is included. The pocket budget uses
the same fit test as the mass calculator's pocket deduction, but the two
are kept independent.
"""

from __future__ import annotations
import math

from configurator.rules.base import ConstraintRule, POCKET_MARGIN
from configurator.models import ContainerConfig


MIN_FRAME_HEIGHT = 30.0
MIN_POCKET_WIDTH = 50.0


class FrameHeightRule(ConstraintRule):
    """Frame must be lower than the container."""

    priority = 40
    fields = ("H_frame", "H")

    def get_id(self) -> str:
        return "frame.height"

    def get_message(self) -> str:
        return "Frame height H_frame should be smaller than container height H."

    def applies(self, config: ContainerConfig) -> bool:
        return config.include_frame

    def violated(self, config: ContainerConfig) -> bool:
        return config.H_frame >= config.H

    def remedy(self, config: ContainerConfig) -> ContainerConfig:
        h = max(MIN_FRAME_HEIGHT, float(math.floor(config.H / 3)))
        if h >= config.H:
            h = config.H / 3
        return config.model_copy(update={"H_frame": h})


class PocketWidthRule(ConstraintRule):
    """Two pockets, their spacing and both margins must fit in the width."""

    priority = 50
    fields = ("W_pocket", "S_pocket", "W")

    def get_id(self) -> str:
        return "frame.pocket_width"

    def get_message(self) -> str:
        return (
            "Forklift pockets + spacing need more width than available. "
            "Reduce pocket width/spacing or increase container width."
        )

    def applies(self, config: ContainerConfig) -> bool:
        return config.include_frame

    def violated(self, config: ContainerConfig) -> bool:
        needed = 2 * config.W_pocket + config.S_pocket + 2 * POCKET_MARGIN
        return needed > config.W

    def remedy(self, config: ContainerConfig) -> ContainerConfig:
        available = config.W - 2 * POCKET_MARGIN
        if available < 0:
            # Not even the margins fit: widen to the bare margins, no pockets.
            return config.model_copy(update={
                "W": 2 * POCKET_MARGIN, "W_pocket": 0.0, "S_pocket": 0.0,
            })

        spacing = config.S_pocket
        pocket = max(MIN_POCKET_WIDTH, float(math.floor((available - spacing) / 2)))

        if 2 * pocket + spacing > available:
            # Narrow containers: give up the minimum pocket width first,
            # then the spacing.
            pocket = max(0.0, (available - spacing) / 2)
            if spacing > available:
                spacing = max(0.0, available)
        return config.model_copy(update={"W_pocket": pocket, "S_pocket": spacing})
